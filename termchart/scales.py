from __future__ import annotations

import numpy as np


def is_degenerate(bounds: tuple[float, float]) -> bool:
    return bounds[1] == bounds[0]


def bounds_mask(
    x: np.ndarray,
    y: np.ndarray,
    x_bounds: tuple[float, float],
    y_bounds: tuple[float, float],
) -> np.ndarray:
    """Samples that are finite and inside both inclusive ranges.

    A zero-width range keeps nothing on that axis.
    """

    if is_degenerate(x_bounds) or is_degenerate(y_bounds):
        return np.zeros(x.shape, dtype=bool)
    return (
        np.isfinite(x)
        & np.isfinite(y)
        & (x >= x_bounds[0])
        & (x <= x_bounds[1])
        & (y >= y_bounds[0])
        & (y <= y_bounds[1])
    )


def map_to_cells(
    x: np.ndarray,
    y: np.ndarray,
    x_bounds: tuple[float, float],
    y_bounds: tuple[float, float],
    width: int,
    height: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Cell offsets inside the plot for in-bounds samples.

    Offsets are measured from each axis maximum and truncated toward zero, so
    the maximum lands on offset 0 and the minimum on `width`/`height`.
    """

    x_min, x_max = x_bounds
    y_min, y_max = y_bounds
    cx = np.trunc((x_max - x) * width / (x_max - x_min)).astype(np.int64)
    cy = np.trunc((y_max - y) * height / (y_max - y_min)).astype(np.int64)
    return cx, cy


def generate_labels(bounds: tuple[float, float], count: int) -> tuple[str, ...]:
    """Evenly spaced tick labels from `bounds[0]` to `bounds[1]`.

    Every label gets as many decimals as the spacing between ticks needs.
    """
    if count <= 0:
        raise ValueError("count must be > 0")
    lower, upper = bounds
    if count == 1 or lower == upper:
        return (format_tick(float(lower), _decimals_needed(lower)),)
    ticks = np.linspace(lower, upper, count, dtype=np.float64)
    decimals = _decimals_needed((upper - lower) / (count - 1))
    return tuple(format_tick(float(v), decimals) for v in ticks)


def format_tick(value: float, decimals: int = 0) -> str:
    out = f"{value:.{decimals}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return "0" if out == "-0" else out


def _decimals_needed(value: float) -> int:
    # Capped at 6 places; float noise past that is never shown.
    text = f"{abs(value):.6f}".rstrip("0")
    return len(text.partition(".")[2])
