# -*- coding: utf-8 -*-
"""
Tincture: A device-independent color model
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_terminal.py — ANSI escape sequences for color previews.

Sequences are 24-bit ``ESC[38;2;R;G;Bm`` / ``ESC[48;2;R;G;Bm`` by default.
Terminals without truecolor support degrade the rendering on their own.
Callers targeting a 256-color terminal can opt into the nearest entry of
the xterm 6x6x6 color cube (``ESC[38;5;Nm``) with ``truecolor=False``;
``supports_truecolor`` reports what ``COLORTERM`` advertises.
"""

import os
from typing import Final, Tuple

__all__ = [
    "RESET",
    "supports_truecolor",
    "fg_escape",
    "bg_escape",
    "colorize",
    "color_block",
]

RESET: Final[str] = "\033[0m"
_TRUECOLOR_VALUES: Final[Tuple[str, ...]] = ("truecolor", "24bit")

RGB8 = Tuple[int, int, int]


def supports_truecolor() -> bool:
    """True when ``COLORTERM`` announces 24-bit color."""
    return os.environ.get("COLORTERM", "").lower() in _TRUECOLOR_VALUES


def _cube_index(rgb: RGB8) -> int:
    """Nearest xterm-256 color cube entry (16..231)."""
    r, g, b = (int(round(c / 255.0 * 5.0)) for c in rgb)
    return 16 + 36 * r + 6 * g + b


def _escape(layer: int, rgb: RGB8, truecolor: bool) -> str:
    if truecolor:
        r, g, b = rgb
        return f"\033[{layer};2;{r};{g};{b}m"
    return f"\033[{layer};5;{_cube_index(rgb)}m"


def fg_escape(rgb: RGB8, truecolor: bool = True) -> str:
    """Foreground escape for an 8-bit RGB triple."""
    return _escape(38, rgb, truecolor)


def bg_escape(rgb: RGB8, truecolor: bool = True) -> str:
    """Background escape for an 8-bit RGB triple."""
    return _escape(48, rgb, truecolor)


def colorize(text: str, rgb: RGB8, truecolor: bool = True) -> str:
    """``text`` drawn in the given foreground color, followed by a reset."""
    return f"{fg_escape(rgb, truecolor)}{text}{RESET}"


def color_block(rgb: RGB8, width: int = 2, truecolor: bool = True) -> str:
    """A run of ``width`` spaces on the given background color."""
    return f"{bg_escape(rgb, truecolor)}{' ' * width}{RESET}"
