from __future__ import annotations

from pathlib import Path

import pytest

from telegraph.config import AppConfig, ConfigError, load_config, save_config


def _write_yaml(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def test_missing_config_returns_defaults_without_writing(tmp_path: Path):
    cfg_path = tmp_path / "config.yaml"
    cfg = load_config(cfg_path)
    assert cfg == AppConfig()
    assert not cfg_path.exists()


def test_load_config_sanitizes_values(tmp_path: Path):
    cfg_path = tmp_path / "config.yaml"
    _write_yaml(
        cfg_path,
        """
console:
  clear_screen: false
  play_output: true
  output_device: "3"
  unknown_key: 1
sounder:
  wpm: 0
  volume: 4.0
  tone_hz: 720.0
""".strip(),
    )

    cfg = load_config(cfg_path)

    assert cfg.console.clear_screen is False
    assert cfg.console.play_output is True
    assert cfg.console.output_device == 3
    assert cfg.sounder.wpm == 1.0
    assert cfg.sounder.volume == 1.0
    assert cfg.sounder.tone_hz == 720.0


def test_save_then_load_keeps_values(tmp_path: Path):
    cfg_path = tmp_path / "config.yaml"
    cfg = AppConfig()
    cfg.console.play_output = True
    cfg.sounder.wpm = 15.0
    save_config(cfg_path, cfg)
    assert load_config(cfg_path) == cfg


def test_invalid_yaml_raises_config_error(tmp_path: Path):
    cfg_path = tmp_path / "config.yaml"
    _write_yaml(cfg_path, "console: [unclosed")
    with pytest.raises(ConfigError):
        load_config(cfg_path)

    _write_yaml(cfg_path, "sounder:\n  wpm: fast\n")
    with pytest.raises(ConfigError):
        load_config(cfg_path)


def test_non_numeric_sounder_values_raise_config_error(tmp_path: Path):
    cfg_path = tmp_path / "config.yaml"
    for body in ("tone_hz: high", "farnsworth_wpm: slow", "attack_ms: soft", "release_ms: [1]"):
        _write_yaml(cfg_path, f"console:\n  play_output: true\nsounder:\n  {body}\n")
        with pytest.raises(ConfigError):
            load_config(cfg_path)


def test_sounder_values_are_converted_to_floats(tmp_path: Path):
    cfg_path = tmp_path / "config.yaml"
    _write_yaml(cfg_path, "sounder:\n  tone_hz: '700'\n  farnsworth_wpm: 12\n  attack_ms: -3\n")

    cfg = load_config(cfg_path)

    assert cfg.sounder.tone_hz == 700.0
    assert cfg.sounder.farnsworth_wpm == 12.0
    assert cfg.sounder.attack_ms == 0.0
    assert load_config(tmp_path / "missing.yaml").sounder.farnsworth_wpm is None


def test_boolean_strings_are_read_by_meaning(tmp_path: Path):
    cfg_path = tmp_path / "config.yaml"
    _write_yaml(cfg_path, 'console:\n  clear_screen: "false"\n  play_output: "yes"\n')

    cfg = load_config(cfg_path)

    assert cfg.console.clear_screen is False
    assert cfg.console.play_output is True

    _write_yaml(cfg_path, 'console:\n  clear_screen: "maybe"\n')
    with pytest.raises(ConfigError):
        load_config(cfg_path)
