"""Fallback icon lookup directories derived from the XDG data directories."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from vicinae_session.snapshot import resolve_env

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_XDG_DATA_DIRS = ("/usr/local/share", "/usr/share")
ICON_SUBDIRS = ("pixmaps", "icons")


def _home_from_env(env: Mapping[str, str]) -> Path:
    value = env.get("HOME")
    return Path(value) if value else Path.home()


def xdg_data_dirs(env: Optional[Mapping[str, str]] = None) -> List[Path]:
    """Return ``XDG_DATA_HOME`` followed by ``XDG_DATA_DIRS`` in precedence order.

    Unset or empty variables fall back to the XDG defaults
    (``~/.local/share`` and ``/usr/local/share:/usr/share``). Empty entries
    inside ``XDG_DATA_DIRS`` are skipped.
    """
    env = resolve_env(env)
    data_home = env.get("XDG_DATA_HOME")
    dirs = [Path(data_home) if data_home else _home_from_env(env) / ".local" / "share"]
    raw_dirs = env.get("XDG_DATA_DIRS")
    entries: Iterable[str] = raw_dirs.split(os.pathsep) if raw_dirs else DEFAULT_XDG_DATA_DIRS
    dirs.extend(Path(entry) for entry in entries if entry)
    return dirs


def build_icon_search_paths(data_dirs: Sequence[PathLike]) -> List[Path]:
    """Return every ``dir/pixmaps`` followed by every ``dir/icons``.

    Input order and duplicates are preserved and nothing is checked on disk.
    """
    bases = [Path(entry) for entry in data_dirs]
    return [base / subdir for subdir in ICON_SUBDIRS for base in bases]


def fallback_icon_search_paths(
    env: Optional[Mapping[str, str]] = None,
    data_dirs: Optional[Sequence[PathLike]] = None,
) -> List[Path]:
    if data_dirs is None:
        data_dirs = xdg_data_dirs(env)
    return build_icon_search_paths(data_dirs)
