"""Timed background colour effects: a fading flash and an HSL colour fade."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rgb:
    """A colour with red, green and blue components in 0..1."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return a * (1.0 - t) + b * t


def _to_hsl(color: Rgb) -> tuple[float, float, float]:
    hue, lightness, saturation = colorsys.rgb_to_hls(color.red, color.green, color.blue)
    return hue * 360.0, saturation, lightness


def _from_hsl(hue: float, saturation: float, lightness: float) -> Rgb:
    return Rgb(*colorsys.hls_to_rgb(hue / 360.0, lightness, saturation))


@dataclass
class BackgroundFlash:
    """Shows a colour and fades it linearly to black, then settles on the target colour."""

    start_color: Rgb = field(default_factory=Rgb)
    target_color: Rgb = field(default_factory=Rgb)
    start_time: float = 0.0
    duration: float = 0.0
    is_active: bool = False

    def start(self, start_color: Rgb, target_color: Rgb, duration: float, current_time: float) -> None:
        """Begin the flash at ``current_time``."""
        self.start_color = start_color
        self.target_color = target_color
        self.duration = duration
        self.start_time = current_time
        self.is_active = True

    def update(self, current_time: float) -> Rgb | None:
        """The colour at ``current_time``, or None when the flash is not running."""
        if not self.is_active:
            return None
        elapsed = current_time - self.start_time
        if elapsed > self.duration:
            self.is_active = False
            return self.target_color
        progress = elapsed / self.duration if self.duration else 1.0
        alpha = 1.0 - progress
        return Rgb(
            self.start_color.red * alpha,
            self.start_color.green * alpha,
            self.start_color.blue * alpha,
        )


@dataclass
class BackgroundColorFade:
    """Fades from one colour to another through HSL space, taking the short way round the hue."""

    start_color: Rgb = field(default_factory=Rgb)
    target_color: Rgb = field(default_factory=Rgb)
    start_time: float = 0.0
    duration: float = 0.0
    is_active: bool = False

    def start(self, start_color: Rgb, target_color: Rgb, duration: float, current_time: float) -> None:
        """Begin the fade at ``current_time``."""
        self.start_color = start_color
        self.target_color = target_color
        self.duration = duration
        self.start_time = current_time
        self.is_active = True

    def update(self, current_time: float) -> Rgb | None:
        """The colour at ``current_time``, or None when the fade is not running."""
        if not self.is_active:
            return None
        if abs(self.duration) < 0.001:
            return self.target_color

        elapsed = current_time - self.start_time
        if elapsed > self.duration:
            self.is_active = False
            return self.target_color

        progress = elapsed / self.duration
        start_h, start_s, start_l = _to_hsl(self.start_color)
        target_h, target_s, target_l = _to_hsl(self.target_color)

        h1 = start_h % 360.0
        h2 = target_h % 360.0
        if abs(h2 - h1) > 180.0:
            if h1 > h2:
                hue = lerp(h1, h2 + 360.0, progress) % 360.0
            else:
                hue = lerp(h1 + 360.0, h2, progress) % 360.0
        else:
            hue = lerp(h1, h2, progress)

        return _from_hsl(hue, lerp(start_s, target_s, progress), lerp(start_l, target_l, progress))