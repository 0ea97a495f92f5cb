from __future__ import annotations

from dataclasses import dataclass
import unicodedata

import numpy as np

from termchart.geometry import Rect
from termchart.raster.draw_text import char_width
from termchart.style import Color, ColorLike
from termchart.symbols import BLANK


@dataclass(frozen=True)
class Cell:
    symbol: str = BLANK
    fg: ColorLike = Color.RESET
    bg: ColorLike = Color.RESET


class Buffer:
    """Grid of styled cells covering `area`.

    Writes use coordinates local to the area's top-left cell. Writes that fall
    outside the grid are dropped; overlapping writes replace earlier ones.
    """

    def __init__(self, area: Rect) -> None:
        self._area = area
        shape = (area.height, area.width)
        self._symbols = np.full(shape, BLANK, dtype=object)
        self._fg = np.full(shape, Color.RESET, dtype=object)
        self._bg = np.full(shape, Color.RESET, dtype=object)

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        return cls(area)

    @property
    def area(self) -> Rect:
        return self._area

    @property
    def width(self) -> int:
        return self._area.width

    @property
    def height(self) -> int:
        return self._area.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._area.width and 0 <= y < self._area.height

    def get(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self._area.width}x{self._area.height} buffer")
        return Cell(symbol=self._symbols[y, x], fg=self._fg[y, x], bg=self._bg[y, x])

    def update_cell(self, x: int, y: int, symbol: str, fg: ColorLike, bg: ColorLike) -> None:
        if not self.in_bounds(x, y):
            return
        self._split_wide_glyph(x, y)
        self._symbols[y, x] = symbol
        self._fg[y, x] = fg
        self._bg[y, x] = bg

    def _split_wide_glyph(self, x: int, y: int) -> None:
        # A wide glyph owns two cells; overwriting either half blanks the other.
        old = self._symbols[y, x]
        if old == "" and x > 0:
            self._symbols[y, x - 1] = BLANK
        elif old and char_width(old[0]) == 2 and x + 1 < self._area.width and self._symbols[y, x + 1] == "":
            self._symbols[y, x + 1] = BLANK

    def set_string(self, x: int, y: int, text: str, fg: ColorLike, bg: ColorLike) -> None:
        if y < 0 or y >= self._area.height:
            return
        col = x
        last_col: int | None = None
        for ch in text:
            if col >= self._area.width:
                break
            if unicodedata.category(ch) == "Cc":
                ch = BLANK
            w = char_width(ch)
            if w == 0:
                # Combining marks ride on the previous glyph.
                if last_col is not None:
                    self._symbols[y, last_col] = self._symbols[y, last_col] + ch
                continue
            if col + w > self._area.width:
                break
            if col >= 0:
                if w == 2:
                    # Tail first so clearing a stale pair cannot erase the new head.
                    self.update_cell(col + 1, y, "", fg, bg)
                self.update_cell(col, y, ch, fg, bg)
                last_col = col
            else:
                last_col = None
            col += w

    def to_lines(self) -> list[str]:
        return ["".join(row) for row in self._symbols.tolist()]

    def symbols(self) -> np.ndarray:
        return self._symbols.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return (
            self._area == other._area
            and np.array_equal(self._symbols, other._symbols)
            and np.array_equal(self._fg, other._fg)
            and np.array_equal(self._bg, other._bg)
        )

    def __repr__(self) -> str:
        return f"Buffer(area={self._area!r})"


def draw_hline(dst: Buffer, x0: int, x1: int, y: int, symbol: str, fg: ColorLike, bg: ColorLike) -> None:
    for x in range(min(x0, x1), max(x0, x1) + 1):
        dst.update_cell(x, y, symbol, fg, bg)


def draw_vline(dst: Buffer, x: int, y0: int, y1: int, symbol: str, fg: ColorLike, bg: ColorLike) -> None:
    for y in range(min(y0, y1), max(y0, y1) + 1):
        dst.update_cell(x, y, symbol, fg, bg)
