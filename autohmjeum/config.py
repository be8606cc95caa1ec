"""Application configuration read from ``config.toml``."""

import sys
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

CONFIG_FILE_NAME = "config.toml"

_U32_MAX = 2**32 - 1
_U16_MAX = 2**16 - 1


class ConfigError(Exception):
    """Raised when the configuration cannot be read or is invalid."""


def _u16() -> Any:
    return field(metadata={"max": _U16_MAX})


@dataclass(frozen=True)
class MainWindowConfig:
    width: int
    height: int


@dataclass(frozen=True)
class InputWindowConfig:
    width: int
    height: int


@dataclass(frozen=True)
class RenderMainConfig:
    texture_width: int
    texture_height: int
    texture_samples: int
    arc_resolution: int


@dataclass(frozen=True)
class FrameRecorderConfig:
    frame_limit: int
    fps: int


@dataclass(frozen=True)
class SpeedConfig:
    bpm: int


@dataclass(frozen=True)
class PathConfig:
    output_directory: str


@dataclass(frozen=True)
class OscConfig:
    rx_port: int = _u16()


def _executable_dir() -> Path | None:
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return None
    return Path(program).resolve().parent


def _parse_section(cls: type, data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise ConfigError(f"missing section [{name}]")
    table = data[name]
    if not isinstance(table, Mapping):
        raise ConfigError(f"[{name}] must be a table")
    values: dict[str, Any] = {}
    for spec in fields(cls):
        key = f"{name}.{spec.name}"
        if spec.name not in table:
            raise ConfigError(f"missing field {key}")
        value = table[spec.name]
        if spec.type is str:
            if not isinstance(value, str):
                raise ConfigError(f"{key} must be a string")
        else:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{key} must be an integer")
            limit = spec.metadata.get("max", _U32_MAX)
            if not 0 <= value <= limit:
                raise ConfigError(f"{key} must be between 0 and {limit}")
        values[spec.name] = value
    return cls(**values)


@dataclass(frozen=True)
class Config:
    """All configuration sections of the application."""

    frame_recorder: FrameRecorderConfig
    osc: OscConfig
    paths: PathConfig
    speed: SpeedConfig
    rendering_main: RenderMainConfig
    main_window: MainWindowConfig
    input_window: InputWindowConfig

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Build a configuration from parsed TOML tables."""
        if not isinstance(data, Mapping):
            raise ConfigError("configuration must be a table")
        sections = {spec.name: _parse_section(spec.type, data, spec.name) for spec in fields(cls)}
        return cls(**sections)

    @classmethod
    def from_toml(cls, text: str) -> "Config":
        """Parse a configuration from TOML text."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def load(cls) -> "Config":
        """Load from the program's directory, falling back to the working directory."""
        exe_dir = _executable_dir()
        if exe_dir is not None:
            candidate = exe_dir / CONFIG_FILE_NAME
            if candidate.exists():
                try:
                    return cls.from_toml(candidate.read_text(encoding="utf-8"))
                except (OSError, UnicodeDecodeError, ConfigError):
                    pass
        try:
            text = Path(CONFIG_FILE_NAME).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"cannot read {CONFIG_FILE_NAME}: {exc}") from exc
        return cls.from_toml(text)

    def resolve_output_dir(self) -> Path:
        """The output directory; relative paths are taken from the program's directory."""
        path = Path(self.paths.output_directory)
        if path.is_absolute():
            return path
        exe_dir = _executable_dir()
        return exe_dir / path if exe_dir is not None else path

    def resolve_output_dir_as_str(self) -> str:
        """The resolved output directory as a string."""
        return str(self.resolve_output_dir())