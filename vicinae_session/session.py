"""Desktop family and display protocol classification."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional, Tuple

from vicinae_session.snapshot import contains_keyword, resolve_env

_LOGGER = logging.getLogger("Vicinae.Session.Desktop")

PlatformNameOracle = Callable[[], str]

UNKNOWN_DESKTOP = "Unknown"


class DesktopFamily(Enum):
    GNOME = "GNOME"
    WLROOTS = "wlroots"
    OTHER = "other"


class DisplayProtocol(Enum):
    WAYLAND = "Wayland"
    X11 = "X11"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class DesktopClassification:
    """Family of the running desktop plus the raw ``XDG_CURRENT_DESKTOP`` it came from."""

    family: DesktopFamily
    raw_name: str

    @property
    def label(self) -> str:
        if self.family is DesktopFamily.OTHER:
            return self.raw_name
        return self.family.value


@dataclass(frozen=True)
class _FamilyRule:
    family: DesktopFamily
    desktop_keywords: Tuple[str, ...]
    session_keywords: Tuple[str, ...] = ()

    def matches(self, env: Mapping[str, str]) -> bool:
        desktop = env.get("XDG_CURRENT_DESKTOP")
        if any(contains_keyword(desktop, keyword) for keyword in self.desktop_keywords):
            return True
        session = env.get("GDMSESSION")
        return any(contains_keyword(session, keyword) for keyword in self.session_keywords)


# Checked top to bottom; the first matching rule wins.
_GNOME_RULE = _FamilyRule(DesktopFamily.GNOME, ("gnome",), session_keywords=("gnome",))
_WLROOTS_RULE = _FamilyRule(DesktopFamily.WLROOTS, ("hyprland", "sway", "river"))
_FAMILY_RULES: Tuple[_FamilyRule, ...] = (_GNOME_RULE, _WLROOTS_RULE)


def is_gnome_environment(env: Optional[Mapping[str, str]] = None) -> bool:
    return _GNOME_RULE.matches(resolve_env(env))


def is_wlroots_compositor(env: Optional[Mapping[str, str]] = None) -> bool:
    """True when running under a wlroots-based compositor (Hyprland, Sway, river)."""
    return _WLROOTS_RULE.matches(resolve_env(env))


def classify_family(env: Optional[Mapping[str, str]] = None) -> DesktopClassification:
    """Map the session variables onto exactly one desktop family.

    GNOME is checked before wlroots. Anything else is reported as ``OTHER``
    with the raw ``XDG_CURRENT_DESKTOP`` value, or ``"Unknown"`` when that is
    unset or empty.
    """
    env = resolve_env(env)
    raw = env.get("XDG_CURRENT_DESKTOP") or ""
    for rule in _FAMILY_RULES:
        if rule.matches(env):
            return DesktopClassification(family=rule.family, raw_name=raw)
    return DesktopClassification(family=DesktopFamily.OTHER, raw_name=raw or UNKNOWN_DESKTOP)


def _default_oracle() -> PlatformNameOracle:
    from vicinae_session.qt_platform import qt_platform_name

    return qt_platform_name


def classify_protocol(platform_name: Optional[PlatformNameOracle] = None) -> DisplayProtocol:
    """Wayland when the toolkit reports the ``wayland`` platform, X11 otherwise."""
    oracle = platform_name or _default_oracle()
    name = oracle()
    if name == "wayland":
        return DisplayProtocol.WAYLAND
    return DisplayProtocol.X11


def is_wayland_session(platform_name: Optional[PlatformNameOracle] = None) -> bool:
    return classify_protocol(platform_name) is DisplayProtocol.WAYLAND


def describe_environment(
    env: Optional[Mapping[str, str]] = None,
    platform_name: Optional[PlatformNameOracle] = None,
) -> str:
    """Human-readable session description such as ``GNOME/Wayland`` or ``KDE/X11``."""
    classification = classify_family(env)
    protocol = classify_protocol(platform_name)
    description = f"{classification.label}/{protocol.label}"
    _LOGGER.debug(
        "Session classified: family=%s raw=%r protocol=%s",
        classification.family.name,
        classification.raw_name,
        protocol.name,
    )
    return description
