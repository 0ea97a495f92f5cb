from __future__ import annotations

import shutil

from termchart.geometry import Rect


DEFAULT_FALLBACK_SIZE = (80, 24)
DEFAULT_RESERVED_ROWS = 1


def resolve_default_area(*, reserved_rows: int = DEFAULT_RESERVED_ROWS) -> Rect:
    """Area matching the current terminal, leaving `reserved_rows` for the prompt."""
    if reserved_rows < 0:
        raise ValueError("reserved_rows must be >= 0")
    columns, lines = _detect_terminal_size()
    return Rect(x=0, y=0, width=max(1, columns), height=max(1, lines - reserved_rows))


def _detect_terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size(fallback=DEFAULT_FALLBACK_SIZE)
    if size.columns <= 0 or size.lines <= 0:
        return DEFAULT_FALLBACK_SIZE
    return (size.columns, size.lines)
