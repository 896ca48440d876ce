"""Schema and helpers for user-configurable vector formatting settings."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"Expected a boolean, got {value!r}.")


@dataclass
class VectorSettings:
    precision: int = config.DEFAULT_PRECISION
    log_angles: bool = config.DEFAULT_LOG_ANGLES

    def to_json(self) -> dict[str, Any]:
        return {
            "precision": self.precision,
            "log_angles": self.log_angles,
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "VectorSettings":
        precision = int(payload.get("precision", config.DEFAULT_PRECISION))
        if precision < 0:
            raise ValueError(f"Precision must be non-negative, got {precision}.")
        return cls(
            precision=precision,
            log_angles=_parse_bool(payload.get("log_angles", config.DEFAULT_LOG_ANGLES)),
        )


def load_last_used(path: Path | None = None) -> VectorSettings:
    """Read saved settings, falling back to defaults for anything unusable.

    Missing, unreadable or undecodable files, non-object JSON and values that
    fail validation all yield ``VectorSettings()``.
    """
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return VectorSettings()
    if not isinstance(data, dict):
        return VectorSettings()
    try:
        return VectorSettings.from_json(data)
    except (TypeError, ValueError):
        return VectorSettings()


def save_last_used(settings: VectorSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return settings_path
