"""Terminal front end: types Hangeul jamo from standard input into composed lines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from autohmjeum.composer import InputComposer
from autohmjeum.config import Config, ConfigError

_BACKSPACE = frozenset("\b\x7f")


@dataclass
class FpsCounter:
    """Averages frame times and refreshes the reading at a fixed interval."""

    fps: float = 0.0
    update_interval: float = 0.3
    frame_count: int = 0
    frame_time_accumulator: float = 0.0
    last_display_update: float = 0.0

    def reset(self, now: float) -> None:
        """Clear the reading and start a new measuring window at ``now``."""
        self.fps = 0.0
        self.frame_count = 0
        self.frame_time_accumulator = 0.0
        self.last_display_update = now

    def tick(self, dt: float, now: float) -> float:
        """Record one frame of length ``dt`` at time ``now``; returns the current reading."""
        self.frame_count += 1
        self.frame_time_accumulator += dt
        if now - self.last_display_update >= self.update_interval:
            if self.frame_count > 0:
                average = self.frame_time_accumulator / self.frame_count
                self.fps = 1.0 / average if average > 0.0 else 0.0
            self.frame_count = 0
            self.frame_time_accumulator = 0.0
            self.last_display_update = now
        return self.fps


def _submit(composer: InputComposer, out: TextIO) -> None:
    line = composer.enter()
    print(f"Input submitted: {line}", file=out)


def _run(lines: Iterable[str], composer: InputComposer, out: TextIO) -> None:
    for text in lines:
        for ch in text:
            if ch == "\n":
                _submit(composer, out)
            elif ch == "\r":
                continue
            elif ch in _BACKSPACE:
                composer.backspace()
            else:
                composer.feed(ch)
    if composer.display():
        _submit(composer, out)


def _load_config(path: str | None) -> Config:
    if path is None:
        return Config.load()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    return Config.from_toml(text)


def main(argv: list[str] | None = None) -> int:
    """Compose Hangeul lines from standard input and print each submitted line."""
    parser = argparse.ArgumentParser(
        prog="autohmjeum",
        description="Compose Hangeul syllables from typed jamo, one line per Enter.",
    )
    parser.add_argument("--config", help="path of the configuration file")
    args = parser.parse_args(argv)

    try:
        _load_config(args.config)
    except ConfigError as exc:
        print(f"Auto훈민정음: FAILED TO LOAD CONFIG.TOML ({exc})", file=sys.stderr)
        return 1

    _run(sys.stdin, InputComposer(), sys.stdout)
    return 0