from __future__ import annotations

from termchart.chart import Chart, ChartBuilder
from termchart.display import resolve_default_area
from termchart.geometry import Rect
from termchart.targets import buffer_to_ansi


def chart() -> ChartBuilder:
    return ChartBuilder()


def to_text(
    value: Chart,
    width: int | None = None,
    height: int | None = None,
    *,
    color: bool = True,
) -> str:
    """Render `value` and encode it for a terminal.

    Missing dimensions are taken from the current terminal size.
    """

    if width is None or height is None:
        detected = resolve_default_area()
        width = detected.width if width is None else width
        height = detected.height if height is None else height
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    buf = value.render(Rect(x=0, y=0, width=width, height=height))
    if color:
        return buffer_to_ansi(buf)
    return "\n".join(buf.to_lines())
