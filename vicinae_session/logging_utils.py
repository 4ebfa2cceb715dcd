from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from vicinae_session.settings import DiagnosticsSettings

LOGGER_NAME = "Vicinae.Session"
LOG_DIR_ENV_VAR = "VICINAE_SESSION_LOG_DIR"
LOG_FILENAME = "session.log"
LOG_MAX_BYTES = 512 * 1024


def resolve_logs_dir(override: Optional[Path] = None, log_dir_name: str = "vicinae") -> Path:
    """
    Resolve the directory to store diagnostics logs.

    Strategy:
    - Use an explicit override (settings ``log_dir``) when given.
    - Then VICINAE_SESSION_LOG_DIR if set.
    - Fall back to XDG state/cache locations, then `cwd/logs/<log_dir_name>`.
    - Final fallback: tempdir/<log_dir_name>.
    """
    candidates = []
    if override is not None:
        candidates.append(Path(override).expanduser())

    env_override = os.environ.get(LOG_DIR_ENV_VAR)
    if env_override:
        candidates.append(Path(env_override).expanduser())

    state_home = Path(os.environ.get("XDG_STATE_HOME") or Path.home() / ".local" / "state")
    cache_home = Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")
    candidates.append(state_home / log_dir_name / "logs")
    candidates.append(cache_home / log_dir_name / "logs")
    candidates.append(Path.cwd() / "logs" / log_dir_name)

    for target in candidates:
        try:
            target.mkdir(parents=True, exist_ok=True)
            return target
        except OSError:
            continue

    temp_fallback = Path(tempfile.gettempdir()) / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


def build_file_handler(settings: DiagnosticsSettings, formatter: logging.Formatter) -> RotatingFileHandler:
    """Rotating ``session.log`` that keeps ``settings.logs_to_keep`` files in total."""
    log_dir = resolve_logs_dir(settings.log_dir)
    handler = RotatingFileHandler(
        log_dir / LOG_FILENAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=max(0, settings.logs_to_keep - 1),
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def configure_logger(settings: DiagnosticsSettings) -> logging.Logger:
    """Attach the console (and optional file) handler once and apply the log level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    formatter = logging.Formatter("[%(asctime)s] [%(name)s] %(levelname)s %(message)s", "%H:%M:%S")
    if not any(getattr(handler, "_vicinae_console", False) for handler in logger.handlers):
        console = logging.StreamHandler()
        console._vicinae_console = True  # type: ignore[attr-defined]
        console.setFormatter(formatter)
        logger.addHandler(console)
    if settings.log_to_file and not any(getattr(handler, "_vicinae_file", False) for handler in logger.handlers):
        file_handler = build_file_handler(settings, formatter)
        file_handler._vicinae_file = True  # type: ignore[attr-defined]
        logger.addHandler(file_handler)
    logger.propagate = False
    return logger
