"""Release version of the Vicinae session helpers."""
from __future__ import annotations

__version__ = "0.1.0"


def version() -> str:
    return __version__
