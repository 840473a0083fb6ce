from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from bucketlist.defaults import ACTIVE_THRESHOLD, CONFIG_FILENAME, DECAY, SEC_OF_DECAY
from bucketlist.errors import ConfigError, StoreIOError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    decay: float = DECAY
    sec_of_decay: int = SEC_OF_DECAY
    active_threshold: float = ACTIVE_THRESHOLD


def _number(cfg_path: Path, key: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(cfg_path, f"'{key}' must be a number, got {value!r}")
    return value


def load_settings(store_dir: str | Path) -> Settings:
    """Read optional <store_dir>/config.yaml; defaults when absent."""
    cfg_path = Path(store_dir) / CONFIG_FILENAME
    if not cfg_path.exists():
        return Settings()

    try:
        text = cfg_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(cfg_path, str(exc)) from exc
    except OSError as exc:
        raise StoreIOError(cfg_path, exc) from exc
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(cfg_path, str(exc)) from exc
    if not isinstance(raw, dict):
        raise ConfigError(cfg_path, "top-level config must be a YAML mapping")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(str(k) for k in raw if k not in known)
    if unknown:
        raise ConfigError(cfg_path, f"unknown key(s): {', '.join(unknown)}")

    decay = _number(cfg_path, "decay", raw.get("decay", DECAY))
    if not 0 < decay < 1:
        raise ConfigError(cfg_path, f"'decay' must be in (0, 1), got {decay}")

    sec_of_decay = raw.get("sec_of_decay", SEC_OF_DECAY)
    if isinstance(sec_of_decay, bool) or not isinstance(sec_of_decay, int) or sec_of_decay <= 0:
        raise ConfigError(cfg_path, f"'sec_of_decay' must be a positive integer, got {sec_of_decay!r}")

    threshold = _number(cfg_path, "active_threshold", raw.get("active_threshold", ACTIVE_THRESHOLD))
    if threshold < 0:
        raise ConfigError(cfg_path, f"'active_threshold' must be >= 0, got {threshold}")

    settings = Settings(decay=float(decay), sec_of_decay=sec_of_decay, active_threshold=float(threshold))
    log.debug("loaded %s: %s", cfg_path, settings)
    return settings
