from __future__ import annotations

import numpy as np

from termchart.raster.canvas import Buffer
from termchart.style import ColorLike
from termchart.symbols import DOT


def draw_markers(
    dst: Buffer,
    xs: np.ndarray,
    ys: np.ndarray,
    fg: ColorLike,
    bg: ColorLike,
    symbol: str = DOT,
) -> None:
    # Sequential writes keep "last sample wins" for cells hit more than once.
    for x, y in zip(xs.tolist(), ys.tolist(), strict=False):
        dst.update_cell(int(x), int(y), symbol, fg, bg)
