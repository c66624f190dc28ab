"""Host path translation for the engine command line.

A translator takes a host-style path and returns the form the engine CLI
accepts on the target host.  Windows hosts need drive-letter colons removed
(``C:/data`` -> ``/C/data``); everywhere else paths pass through untouched.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Literal

PathTranslator = Callable[[str], str]

Platform = Literal["auto", "windows", "posix"]


def windows_path(path: str) -> str:
    """Strip colons and root multi-segment paths.

    Idempotent: translating an already translated path is a no-op.
    """
    path = path.replace(":", "")
    if not path.startswith("/") and "/" in path:
        path = "/" + path
    return path


def identity_path(path: str) -> str:
    return path


def translator_for(platform: Platform = "auto") -> PathTranslator:
    """Pick the translator for a host platform (``auto`` inspects ``sys.platform``)."""
    if platform == "auto":
        platform = "windows" if sys.platform == "win32" else "posix"
    match platform:
        case "windows":
            return windows_path
        case "posix":
            return identity_path
        case _:
            raise ValueError(f"Unknown host platform: {platform}")
