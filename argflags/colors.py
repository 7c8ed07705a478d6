"""
ANSI colouring for diagnostics written by the CLI and the validator.

Respects NO_COLOR to disable. Enables only when the target stream is a TTY
unless FORCE_COLOR is set. Help text itself is never coloured.
"""

from __future__ import annotations

import os
import sys
from typing import IO, Optional

__all__ = ["color", "colors_enabled"]


class _Codes:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"


def colors_enabled(stream: Optional[IO[str]] = None) -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("FORCE_COLOR") is not None:
        return True
    target = stream if stream is not None else sys.stdout
    try:
        return bool(target.isatty())
    except Exception:
        return False


def color(
    text: str,
    *,
    fg: str | None = None,
    bold: bool = False,
    stream: Optional[IO[str]] = None,
) -> str:
    if (fg is None and not bold) or not colors_enabled(stream):
        return text
    parts: list[str] = []
    if bold:
        parts.append(_Codes.BOLD)
    if fg:
        parts.append(getattr(_Codes, fg.upper(), ""))
    return "".join(parts) + text + _Codes.RESET
