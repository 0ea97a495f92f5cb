from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Flag

from termchart import symbols
from termchart.geometry import Rect
from termchart.raster import Buffer, char_width, draw_hline, draw_text, draw_vline
from termchart.style import Color, ColorLike, parse_color


class Borders(Flag):
    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8
    ALL = TOP | RIGHT | BOTTOM | LEFT


@dataclass(frozen=True)
class Block:
    """Optional frame drawn around a widget, with an inline title on the top row."""

    borders: Borders = Borders.NONE
    border_color: ColorLike = Color.RESET
    title: str | None = None
    title_color: ColorLike = Color.RESET
    bg: ColorLike = Color.RESET

    def __post_init__(self) -> None:
        object.__setattr__(self, "border_color", parse_color(self.border_color))
        object.__setattr__(self, "title_color", parse_color(self.title_color))
        object.__setattr__(self, "bg", parse_color(self.bg))

    def with_borders(self, borders: Borders) -> "Block":
        return replace(self, borders=borders)

    def with_title(self, title: str | None, color: ColorLike | str | None = None) -> "Block":
        if color is None:
            return replace(self, title=title)
        return replace(self, title=title, title_color=color)  # type: ignore[arg-type]

    def inner(self, area: Rect) -> Rect:
        """Drawable area left once borders (and a title row) are taken out."""
        framed = self.borders != Borders.NONE or self.title is not None
        if framed and (area.width < 2 or area.height < 2):
            return Rect(x=area.x, y=area.y, width=0, height=0)
        x, y, width, height = area.x, area.y, area.width, area.height
        if Borders.LEFT in self.borders:
            x += 1
            width -= 1
        if Borders.TOP in self.borders or self.title is not None:
            y += 1
            height -= 1
        if Borders.RIGHT in self.borders:
            width -= 1
        if Borders.BOTTOM in self.borders:
            height -= 1
        return Rect(x=x, y=y, width=width, height=height)

    def render(self, area: Rect) -> Buffer:
        buf = Buffer.empty(area)
        if area.width < 2 or area.height < 2:
            return buf

        right = area.width - 1
        bottom = area.height - 1
        if Borders.LEFT in self.borders:
            draw_vline(buf, 0, 0, bottom, symbols.VERTICAL, self.border_color, self.bg)
        if Borders.RIGHT in self.borders:
            draw_vline(buf, right, 0, bottom, symbols.VERTICAL, self.border_color, self.bg)
        if Borders.TOP in self.borders:
            draw_hline(buf, 0, right, 0, symbols.HORIZONTAL, self.border_color, self.bg)
        if Borders.BOTTOM in self.borders:
            draw_hline(buf, 0, right, bottom, symbols.HORIZONTAL, self.border_color, self.bg)

        if (Borders.LEFT | Borders.TOP) in self.borders:
            buf.update_cell(0, 0, symbols.TOP_LEFT, self.border_color, self.bg)
        if (Borders.RIGHT | Borders.TOP) in self.borders:
            buf.update_cell(right, 0, symbols.TOP_RIGHT, self.border_color, self.bg)
        if (Borders.LEFT | Borders.BOTTOM) in self.borders:
            buf.update_cell(0, bottom, symbols.BOTTOM_LEFT, self.border_color, self.bg)
        if (Borders.RIGHT | Borders.BOTTOM) in self.borders:
            buf.update_cell(right, bottom, symbols.BOTTOM_RIGHT, self.border_color, self.bg)

        if self.title:
            margin_x = 1 if Borders.LEFT in self.borders else 0
            room = area.width - margin_x - (1 if Borders.RIGHT in self.borders else 0)
            draw_text(buf, margin_x, 0, _truncate_to_width(self.title, room), self.title_color, self.bg)
        return buf


def _truncate_to_width(text: str, max_width: int) -> str:
    used = 0
    out: list[str] = []
    for ch in text:
        w = char_width(ch)
        if used + w > max_width:
            break
        out.append(ch)
        used += w
    return "".join(out)
