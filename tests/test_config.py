import sys

import pytest

from autohmjeum.config import Config, ConfigError

SAMPLE = """
[frame_recorder]
frame_limit = 1000
fps = 30

[osc]
rx_port = 9000

[paths]
output_directory = "frames"

[speed]
bpm = 120

[rendering_main]
texture_width = 1920
texture_height = 1080
texture_samples = 4
arc_resolution = 64

[main_window]
width = 1280
height = 720

[input_window]
width = 400
height = 300
"""


def _sample_dict():
    import tomllib

    return tomllib.loads(SAMPLE)


def test_from_toml_reads_every_section():
    config = Config.from_toml(SAMPLE)
    assert config.frame_recorder.frame_limit == 1000
    assert config.frame_recorder.fps == 30
    assert config.osc.rx_port == 9000
    assert config.paths.output_directory == "frames"
    assert config.speed.bpm == 120
    assert config.rendering_main.texture_width == 1920
    assert config.rendering_main.texture_height == 1080
    assert config.rendering_main.texture_samples == 4
    assert config.rendering_main.arc_resolution == 64
    assert (config.main_window.width, config.main_window.height) == (1280, 720)
    assert (config.input_window.width, config.input_window.height) == (400, 300)


def test_from_dict_matches_from_toml():
    assert Config.from_dict(_sample_dict()) == Config.from_toml(SAMPLE)


def test_missing_section_is_an_error():
    data = _sample_dict()
    del data["speed"]
    with pytest.raises(ConfigError, match="speed"):
        Config.from_dict(data)


def test_missing_field_is_an_error():
    data = _sample_dict()
    del data["main_window"]["height"]
    with pytest.raises(ConfigError, match="main_window.height"):
        Config.from_dict(data)


def test_negative_dimension_is_rejected():
    data = _sample_dict()
    data["main_window"]["width"] = -1
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_port_above_u16_is_rejected():
    data = _sample_dict()
    data["osc"]["rx_port"] = 70000
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_bool_is_not_an_integer():
    data = _sample_dict()
    data["speed"]["bpm"] = True
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_output_directory_must_be_string():
    data = _sample_dict()
    data["paths"]["output_directory"] = 5
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_invalid_toml_raises_config_error():
    with pytest.raises(ConfigError):
        Config.from_toml("[main_window\nwidth = ")


def test_load_from_working_directory(tmp_path, monkeypatch):
    exe_dir = tmp_path / "bin"
    exe_dir.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    (work / "config.toml").write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [str(exe_dir / "prog")])
    monkeypatch.chdir(work)
    assert Config.load() == Config.from_toml(SAMPLE)


def test_load_prefers_executable_directory(tmp_path, monkeypatch):
    exe_dir = tmp_path / "bin"
    exe_dir.mkdir()
    (exe_dir / "config.toml").write_text(SAMPLE.replace("bpm = 120", "bpm = 90"), encoding="utf-8")
    work = tmp_path / "work"
    work.mkdir()
    (work / "config.toml").write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [str(exe_dir / "prog")])
    monkeypatch.chdir(work)
    assert Config.load().speed.bpm == 90


def test_load_falls_back_when_executable_copy_is_broken(tmp_path, monkeypatch):
    exe_dir = tmp_path / "bin"
    exe_dir.mkdir()
    (exe_dir / "config.toml").write_text("not = [valid", encoding="utf-8")
    work = tmp_path / "work"
    work.mkdir()
    (work / "config.toml").write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [str(exe_dir / "prog")])
    monkeypatch.chdir(work)
    assert Config.load().speed.bpm == 120


def test_load_without_any_file_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "prog")])
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ConfigError):
        Config.load()


def test_absolute_output_dir_is_kept(tmp_path):
    data = _sample_dict()
    data["paths"]["output_directory"] = str(tmp_path)
    config = Config.from_dict(data)
    assert config.resolve_output_dir() == tmp_path


def test_relative_output_dir_resolves_next_to_program(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "prog")])
    config = Config.from_toml(SAMPLE)
    assert config.resolve_output_dir() == tmp_path.resolve() / "frames"


def test_output_dir_as_str_matches_path(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "prog")])
    config = Config.from_toml(SAMPLE)
    assert config.resolve_output_dir_as_str() == str(config.resolve_output_dir())