from __future__ import annotations

import sys
from typing import TextIO

from termchart.raster import Buffer
from termchart.style import Color, ColorLike, Rgb

from .base import RenderTarget

ESC = "\x1b["
SGR_RESET = f"{ESC}0m"


def sgr_fg(color: ColorLike) -> str:
    if isinstance(color, Rgb):
        return f"38;2;{color.r};{color.g};{color.b}"
    return str(color.value)


def sgr_bg(color: ColorLike) -> str:
    if isinstance(color, Rgb):
        return f"48;2;{color.r};{color.g};{color.b}"
    return str(color.value + 10)


def buffer_to_ansi(buffer: Buffer) -> str:
    """Encode a buffer as newline-separated rows with SGR color escapes."""
    rows: list[str] = []
    for y in range(buffer.height):
        parts: list[str] = []
        current: tuple[ColorLike, ColorLike] | None = None
        for x in range(buffer.width):
            cell = buffer.get(x, y)
            if cell.symbol == "":
                # Trailing half of a wide glyph.
                continue
            style = (cell.fg, cell.bg)
            if style != current:
                parts.append(f"{ESC}{sgr_fg(cell.fg)};{sgr_bg(cell.bg)}m")
                current = style
            parts.append(cell.symbol)
        if current is not None and current != (Color.RESET, Color.RESET):
            parts.append(SGR_RESET)
        rows.append("".join(parts))
    return "\n".join(rows)


class AnsiTarget(RenderTarget):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._started = False

    def start(self) -> None:
        self._started = True

    def present(self, buffer: Buffer) -> None:
        if not self._started:
            raise RuntimeError("ansi target not started")
        self._stream.write(buffer_to_ansi(buffer) + SGR_RESET + "\n")
        self._stream.flush()

    def stop(self) -> None:
        self._started = False


class PlainTextTarget(RenderTarget):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._started = False

    def start(self) -> None:
        self._started = True

    def present(self, buffer: Buffer) -> None:
        if not self._started:
            raise RuntimeError("plain text target not started")
        self._stream.write("\n".join(buffer.to_lines()) + "\n")
        self._stream.flush()

    def stop(self) -> None:
        self._started = False
