"""Background colour state driven by flash and fade effects."""

from __future__ import annotations

from dataclasses import dataclass, field

from autohmjeum.effects import BackgroundColorFade, BackgroundFlash, Rgb


@dataclass
class BackgroundManager:
    """Holds the current background colour and the effects that change it."""

    current_color: Rgb = field(default_factory=Rgb)
    flasher: BackgroundFlash = field(default_factory=BackgroundFlash)
    color_fader: BackgroundColorFade = field(default_factory=BackgroundColorFade)

    def flash(self, flash_color: Rgb, duration: float, current_time: float) -> None:
        """Flash ``flash_color``; a flash already running keeps its original target."""
        target = self.flasher.target_color if self.flasher.is_active else self.current_color
        self.flasher.start(flash_color, target, duration, current_time)

    def color_fade(self, target_color: Rgb, duration: float, current_time: float) -> None:
        """Fade from the current colour to ``target_color``."""
        self.color_fader.start(self.current_color, target_color, duration, current_time)

    def update(self, current_time: float) -> Rgb:
        """Advance the effects to ``current_time`` and return the background colour."""
        if self.color_fader.is_active:
            color = self.color_fader.update(current_time)
            if color is not None:
                self.current_color = color
        if self.flasher.is_active:
            color = self.flasher.update(current_time)
            if color is not None:
                self.current_color = color
        return self.current_color