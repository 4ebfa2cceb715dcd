"""Aggregate view of the session facts resolved from one environment snapshot."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from vicinae_session.feature_flags import is_hud_disabled, is_layer_shell_enabled
from vicinae_session.launch_env import stripped_keys
from vicinae_session.runtime_locations import APPDIR_ENV_VAR, NODE_BIN_ENV_VAR, PathOverride, lookup
from vicinae_session.search_paths import PathLike, fallback_icon_search_paths
from vicinae_session.session import (
    DesktopFamily,
    DisplayProtocol,
    PlatformNameOracle,
    classify_family,
    classify_protocol,
    is_gnome_environment,
    is_wlroots_compositor,
)
from vicinae_session.snapshot import EnvironmentSnapshot
from vicinae_session.version import version


@dataclass(frozen=True)
class SessionReport:
    version: str
    description: str
    family: DesktopFamily
    desktop: str
    protocol: DisplayProtocol
    gnome: bool
    wlroots: bool
    hud_disabled: bool
    layer_shell_enabled: bool
    app_image_dir: Optional[PathOverride]
    node_binary: Optional[PathOverride]
    icon_search_paths: Tuple[Path, ...]
    stripped_keys: Tuple[str, ...]

    @property
    def is_app_image(self) -> bool:
        return self.app_image_dir is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "description": self.description,
            "family": self.family.value,
            "desktop": self.desktop,
            "protocol": self.protocol.value,
            "gnome": self.gnome,
            "wlroots": self.wlroots,
            "hud_disabled": self.hud_disabled,
            "layer_shell_enabled": self.layer_shell_enabled,
            "app_image_dir": self.app_image_dir.raw if self.app_image_dir is not None else None,
            "node_binary": self.node_binary.raw if self.node_binary is not None else None,
            "icon_search_paths": [str(path) for path in self.icon_search_paths],
            "stripped_keys": list(self.stripped_keys),
        }


def collect_report(
    env: Optional[Mapping[str, str]] = None,
    *,
    platform_name: Optional[PlatformNameOracle] = None,
    data_dirs: Optional[Sequence[PathLike]] = None,
) -> SessionReport:
    """Resolve every session fact against a single snapshot.

    The live environment is read once so the report stays consistent even if
    another thread changes it meanwhile.
    """
    snapshot = EnvironmentSnapshot.capture(env)
    classification = classify_family(snapshot)
    protocol = classify_protocol(platform_name)
    return SessionReport(
        version=version(),
        description=f"{classification.label}/{protocol.label}",
        family=classification.family,
        desktop=classification.raw_name,
        protocol=protocol,
        gnome=is_gnome_environment(snapshot),
        wlroots=is_wlroots_compositor(snapshot),
        hud_disabled=is_hud_disabled(snapshot),
        layer_shell_enabled=is_layer_shell_enabled(snapshot),
        app_image_dir=lookup(APPDIR_ENV_VAR, snapshot),
        node_binary=lookup(NODE_BIN_ENV_VAR, snapshot),
        icon_search_paths=tuple(fallback_icon_search_paths(snapshot, data_dirs)),
        stripped_keys=tuple(stripped_keys(snapshot)),
    )
