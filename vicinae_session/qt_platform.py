"""Qt-backed platform name lookup used for display protocol detection."""
from __future__ import annotations

import logging
from typing import Any, Optional

_LOGGER = logging.getLogger("Vicinae.Session.Qt")

# Application created here when the caller has none; Qt allows one per process.
_OWNED_APP: Optional[Any] = None


def _ensure_application() -> Any:
    global _OWNED_APP
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        if _OWNED_APP is None:
            _LOGGER.debug("Creating QGuiApplication to query the Qt platform plugin")
            _OWNED_APP = QGuiApplication(["vicinae-session"])
        app = _OWNED_APP
    return app


def qt_platform_name() -> str:
    """Return the active Qt platform plugin name (``wayland``, ``xcb``, ...).

    Qt only selects a platform plugin once a ``QGuiApplication`` exists, so one
    is created (and kept for later calls) when the process has none yet.
    """
    app = _ensure_application()
    name = app.platformName() or ""
    if not name:
        _LOGGER.debug("Qt reported an empty platform name")
    return name
