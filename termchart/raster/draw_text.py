from __future__ import annotations

from typing import TYPE_CHECKING
import unicodedata

from termchart.style import ColorLike

if TYPE_CHECKING:
    from termchart.raster.canvas import Buffer


_ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me", "Cf"})
_WIDE_EAST_ASIAN = frozenset({"W", "F"})


def char_width(ch: str) -> int:
    """Terminal columns taken by a single code point (0, 1 or 2)."""
    if unicodedata.category(ch) in _ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(ch) in _WIDE_EAST_ASIAN:
        return 2
    return 1


def text_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def max_text_width(texts: tuple[str, ...] | list[str]) -> int:
    return max((text_width(t) for t in texts), default=0)


def draw_text(dst: "Buffer", x: int, y: int, text: str, fg: ColorLike, bg: ColorLike) -> None:
    if not text:
        return
    dst.set_string(x, y, text, fg, bg)
