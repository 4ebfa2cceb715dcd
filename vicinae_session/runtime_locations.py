"""Optional filesystem overrides for bundled runtimes."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from vicinae_session.snapshot import resolve_env

APPDIR_ENV_VAR = "APPDIR"
NODE_BIN_ENV_VAR = "NODE_BIN"


@dataclass(frozen=True)
class PathOverride:
    """Raw value of a path variable; ``str()`` gives it back verbatim, even when empty."""

    raw: str

    @property
    def path(self) -> Path:
        return Path(self.raw)

    def __str__(self) -> str:
        return self.raw


def lookup(name: str, env: Optional[Mapping[str, str]] = None) -> Optional[PathOverride]:
    raw = resolve_env(env).get(name)
    if raw is None:
        return None
    return PathOverride(raw)


def resolve(name: str, env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Wrap the raw value of ``name`` in a Path, or return None when it is unset.

    A variable set to an empty string still counts as present; use ``lookup``
    when the exact text matters, since pathlib renders an empty path as ``.``.
    """
    override = lookup(name, env)
    return override.path if override is not None else None


def app_image_dir(env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """AppImage mount directory when running from an AppImage.

    Used to find the bundled ``node`` binary instead of the system one.
    """
    return resolve(APPDIR_ENV_VAR, env)


def node_binary_override(env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Explicit ``node`` executable used to spawn the extension manager."""
    return resolve(NODE_BIN_ENV_VAR, env)


def is_app_image(env: Optional[Mapping[str, str]] = None) -> bool:
    return lookup(APPDIR_ENV_VAR, env) is not None
