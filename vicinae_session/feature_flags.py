"""Boolean feature toggles driven by environment variables."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from vicinae_session.snapshot import resolve_env

ENABLED_VALUE = "1"


def is_enabled(name: str, default: str, env: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when ``name`` (or ``default`` if unset) is exactly ``"1"``.

    No trimming or case folding is applied: ``"true"``, ``"yes"`` and ``" 1"``
    all resolve to False.
    """
    raw = resolve_env(env).get(name)
    if raw is None:
        raw = default
    return raw == ENABLED_VALUE


@dataclass(frozen=True)
class FeatureFlag:
    name: str
    default: str

    def enabled(self, env: Optional[Mapping[str, str]] = None) -> bool:
        return is_enabled(self.name, self.default, env)


HUD_DISABLED = FeatureFlag("VICINAE_DISABLE_HUD", "0")
LAYER_SHELL = FeatureFlag("USE_LAYER_SHELL", "1")


def is_hud_disabled(env: Optional[Mapping[str, str]] = None) -> bool:
    return HUD_DISABLED.enabled(env)


def is_layer_shell_enabled(env: Optional[Mapping[str, str]] = None) -> bool:
    return LAYER_SHELL.enabled(env)
