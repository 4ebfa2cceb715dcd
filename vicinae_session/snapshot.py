"""Read-only views over the process environment."""
from __future__ import annotations

import os
from typing import Iterator, Mapping, Optional


class EnvironmentSnapshot(Mapping[str, str]):
    """Point-in-time copy of an environment table.

    Keys keep the operating system's case sensitivity. A variable that is set
    to an empty string is still present; ``get`` only returns ``None`` for
    variables that are entirely unset.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values = dict(values or {})

    @classmethod
    def capture(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvironmentSnapshot":
        """Copy ``environ`` (the live ``os.environ`` by default) as it is right now."""
        return cls(os.environ if environ is None else environ)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EnvironmentSnapshot({len(self._values)} variables)"

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)


def resolve_env(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    """Return ``env`` unchanged, or a fresh snapshot of the live environment when ``None``."""
    if env is None:
        return EnvironmentSnapshot.capture()
    return env


def contains_keyword(value: Optional[str], keyword: str) -> bool:
    if not value:
        return False
    return keyword.casefold() in value.casefold()
