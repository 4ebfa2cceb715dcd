"""Session facts and sanitized launch environments for Vicinae."""
from __future__ import annotations

from vicinae_session.feature_flags import (
    HUD_DISABLED,
    LAYER_SHELL,
    FeatureFlag,
    is_enabled,
    is_hud_disabled,
    is_layer_shell_enabled,
)
from vicinae_session.launch_env import DENIED_KEYS, fallback_path, sanitize
from vicinae_session.report import SessionReport, collect_report
from vicinae_session.runtime_locations import (
    PathOverride,
    app_image_dir,
    is_app_image,
    lookup,
    node_binary_override,
    resolve,
)
from vicinae_session.search_paths import build_icon_search_paths, fallback_icon_search_paths, xdg_data_dirs
from vicinae_session.session import (
    DesktopClassification,
    DesktopFamily,
    DisplayProtocol,
    classify_family,
    classify_protocol,
    describe_environment,
    is_gnome_environment,
    is_wayland_session,
    is_wlroots_compositor,
)
from vicinae_session.snapshot import EnvironmentSnapshot
from vicinae_session.version import __version__, version

__all__ = [
    "DENIED_KEYS",
    "HUD_DISABLED",
    "LAYER_SHELL",
    "PathOverride",
    "DesktopClassification",
    "DesktopFamily",
    "DisplayProtocol",
    "EnvironmentSnapshot",
    "FeatureFlag",
    "SessionReport",
    "__version__",
    "app_image_dir",
    "build_icon_search_paths",
    "classify_family",
    "classify_protocol",
    "collect_report",
    "describe_environment",
    "fallback_icon_search_paths",
    "fallback_path",
    "is_app_image",
    "is_enabled",
    "is_gnome_environment",
    "is_hud_disabled",
    "is_layer_shell_enabled",
    "is_wayland_session",
    "is_wlroots_compositor",
    "lookup",
    "node_binary_override",
    "resolve",
    "sanitize",
    "version",
    "xdg_data_dirs",
]
