"""Default configuration values for victor formatting and tracing."""

from __future__ import annotations

from pathlib import Path

DEFAULT_PRECISION = 8
DEFAULT_LOG_ANGLES = True

DEFAULT_SETTINGS_PATH = Path.home() / ".victor_settings.json"
