from .canvas import Buffer, Cell, draw_hline, draw_vline
from .draw_markers import draw_markers
from .draw_text import char_width, draw_text, max_text_width, text_width

__all__ = [
    "Buffer",
    "Cell",
    "char_width",
    "draw_hline",
    "draw_markers",
    "draw_text",
    "draw_vline",
    "max_text_width",
    "text_width",
]
