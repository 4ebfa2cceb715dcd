"""Sanitized environments for launching external GUI applications.

Vicinae is often started through Nix or Qt wrapper scripts that export loader
and plugin search paths. Children that inherit them (Electron apps on NixOS in
particular) can load incompatible libraries and crash, so launches get a copy
of the environment with those variables stripped and a minimal ``PATH`` that
works on both NixOS and conventional distributions. Session variables such as
``DISPLAY``, ``WAYLAND_DISPLAY``, ``XDG_RUNTIME_DIR`` and the D-Bus address are
kept.
"""
from __future__ import annotations

import getpass
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from vicinae_session.snapshot import resolve_env

_LOGGER = logging.getLogger("Vicinae.Session.Launch")

DENIED_KEYS: Tuple[str, ...] = (
    "LD_LIBRARY_PATH",
    "LD_PRELOAD",
    "QT_PLUGIN_PATH",
    "QT_QPA_PLATFORM_PLUGIN_PATH",
    "QML2_IMPORT_PATH",
    "QML_IMPORT_PATH",
    "NIXPKGS_QT6_QML_IMPORT_PATH",
    "XDG_DATA_DIRS",
    "GSETTINGS_SCHEMA_DIR",
    "GST_PLUGIN_SYSTEM_PATH",
    "GST_PLUGIN_SYSTEM_PATH_1_0",
    "GST_PLUGIN_PATH",
)

PATH_SEPARATOR = ":"


def fallback_path_entries(home: Optional[Path] = None, user: Optional[str] = None) -> List[str]:
    """Ordered ``PATH`` entries covering user-local, Flatpak and Nix installs."""
    home_dir = Path(home) if home is not None else Path.home()
    user_name = user if user is not None else getpass.getuser()
    return [
        str(home_dir / ".local" / "bin"),
        "/run/wrappers/bin",
        str(home_dir / ".local" / "share" / "flatpak" / "exports" / "bin"),
        "/var/lib/flatpak/exports/bin",
        str(home_dir / ".nix-profile" / "bin"),
        "/nix/profile/bin",
        str(home_dir / ".local" / "state" / "nix" / "profile" / "bin"),
        f"/etc/profiles/per-user/{user_name}/bin",
        "/nix/var/nix/profiles/default/bin",
        "/run/current-system/sw/bin",
    ]


def fallback_path(home: Optional[Path] = None, user: Optional[str] = None) -> str:
    return PATH_SEPARATOR.join(fallback_path_entries(home, user))


def stripped_keys(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Denied keys that are actually present in ``env``, in deny-list order."""
    env = resolve_env(env)
    return [key for key in DENIED_KEYS if key in env]


def sanitize(
    env: Optional[Mapping[str, str]] = None,
    *,
    home: Optional[Path] = None,
    user: Optional[str] = None,
) -> Dict[str, str]:
    """Return a copy of ``env`` that is safe to hand to a spawned GUI process.

    Every key in ``DENIED_KEYS`` is removed (exact, case-sensitive match) and
    ``PATH`` is replaced outright with ``fallback_path(home, user)``; the
    inherited ``PATH`` is never merged in. ``env`` and ``os.environ`` are left
    untouched.
    """
    result = dict(resolve_env(env))
    removed = []
    for key in DENIED_KEYS:
        if result.pop(key, None) is not None:
            removed.append(key)
    result["PATH"] = fallback_path(home, user)
    _LOGGER.debug("Sanitized launch environment; stripped=%s", ", ".join(removed) or "none")
    return result
