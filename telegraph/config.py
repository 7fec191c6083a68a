from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .sounder import SounderConfig


class ConfigError(ValueError):
    pass


@dataclass
class ConsoleConfig:
    clear_screen: bool = True
    play_output: bool = False
    output_device: Optional[int] = None


@dataclass
class AppConfig:
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    sounder: SounderConfig = field(default_factory=SounderConfig)


def load_config(path: str | Path) -> AppConfig:
    p = Path(path)
    cfg = AppConfig()
    if not p.exists():
        return cfg

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file could not be parsed: {p} ({exc})") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {p}")

    _apply_dataclass_updates(cfg.console, raw.get("console") or {})
    _apply_dataclass_updates(cfg.sounder, raw.get("sounder") or {})

    try:
        _sanitize(cfg)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Config file has an invalid value: {p} ({exc})") from exc
    return cfg


_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"{name} must be true or false, got {value!r}")


def _sanitize(cfg: AppConfig) -> None:
    cfg.console.clear_screen = _as_bool("clear_screen", cfg.console.clear_screen)
    cfg.console.play_output = _as_bool("play_output", cfg.console.play_output)
    if cfg.console.output_device is not None:
        cfg.console.output_device = int(cfg.console.output_device)

    cfg.sounder.sample_rate = int(cfg.sounder.sample_rate)
    if cfg.sounder.sample_rate <= 0:
        cfg.sounder.sample_rate = SounderConfig.sample_rate
    cfg.sounder.wpm = max(1.0, float(cfg.sounder.wpm))
    cfg.sounder.volume = max(0.0, min(1.0, float(cfg.sounder.volume)))
    cfg.sounder.tone_hz = float(cfg.sounder.tone_hz)
    cfg.sounder.attack_ms = max(0.0, float(cfg.sounder.attack_ms))
    cfg.sounder.release_ms = max(0.0, float(cfg.sounder.release_ms))
    if cfg.sounder.farnsworth_wpm is not None:
        cfg.sounder.farnsworth_wpm = float(cfg.sounder.farnsworth_wpm)


def save_config(path: str | Path, config: AppConfig) -> None:
    payload = {
        "console": asdict(config.console),
        "sounder": asdict(config.sounder),
    }
    p = Path(path)
    p.write_text(yaml.safe_dump(payload, sort_keys=False, allow_unicode=False), encoding="utf-8")


def _apply_dataclass_updates(target: Any, updates: Dict[str, Any]) -> None:
    if not isinstance(updates, dict):
        return
    for key, value in updates.items():
        if hasattr(target, key):
            setattr(target, key, value)
