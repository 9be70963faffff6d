"""Load defaults and output strings from config.yml."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

# config.yml ships next to this module; DOMAIN_GUARD_CONFIG_PATH points elsewhere
_DEFAULT_PATH = Path(__file__).parent / "config.yml"

_cache: dict | None = None


def _config_path() -> Path:
    return Path(os.environ.get("DOMAIN_GUARD_CONFIG_PATH", _DEFAULT_PATH))


def _load() -> dict:
    global _cache
    if _cache is None:
        with open(_config_path()) as f:
            _cache = yaml.safe_load(f) or {}
    return _cache


def reset_cache() -> None:
    global _cache
    _cache = None


def get_defaults() -> dict:
    """Return the defaults section, or empty dict if config is unavailable."""
    try:
        return _load().get("defaults") or {}
    except (FileNotFoundError, OSError):
        return {}


def get_output_strings() -> dict[str, str]:
    """Return the verdict labels, falling back to Bad/Good."""
    strings = {"forbidden_label": "Bad", "allowed_label": "Good"}
    try:
        strings.update(_load().get("output") or {})
    except (FileNotFoundError, OSError):
        pass
    return strings
