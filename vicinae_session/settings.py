"""Diagnostics settings loaded from ``session.json``."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

CONFIG_ENV_VAR = "VICINAE_SESSION_CONFIG"
LOG_RETENTION_MIN = 1
LOG_RETENTION_MAX = 20
DEFAULT_LOG_RETENTION = 5


@dataclass(frozen=True)
class DiagnosticsSettings:
    debug: bool = False
    log_to_file: bool = False
    logs_to_keep: int = DEFAULT_LOG_RETENTION
    log_dir: Optional[Path] = None


def default_settings_path(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    override = env.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    config_home = env.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "vicinae" / "session.json"


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in {"1", "true", "yes", "on"}:
            return True
        if token in {"0", "false", "no", "off"}:
            return False
    return default


def _coerce_log_retention(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return DEFAULT_LOG_RETENTION
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        return DEFAULT_LOG_RETENTION
    if numeric < LOG_RETENTION_MIN:
        return LOG_RETENTION_MIN
    if numeric > LOG_RETENTION_MAX:
        return LOG_RETENTION_MAX
    return numeric


def _coerce_log_dir(value: Any) -> Optional[Path]:
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def load_settings(path: Optional[Path] = None) -> DiagnosticsSettings:
    """Read settings from ``path``, falling back to defaults for anything missing or invalid."""
    target = path if path is not None else default_settings_path()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError):
        data = {}
    if not isinstance(data, dict):
        data = {}
    return DiagnosticsSettings(
        debug=_coerce_bool(data.get("debug"), False),
        log_to_file=_coerce_bool(data.get("log_to_file"), False),
        logs_to_keep=_coerce_log_retention(data.get("logs_to_keep")),
        log_dir=_coerce_log_dir(data.get("log_dir")),
    )
