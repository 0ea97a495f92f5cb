from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from termchart.errors import ChartConfigError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def normalize_points(data: Any = None, *, x: Any = None, y: Any = None) -> np.ndarray:
    """Coerce sample input into a read-only float64 array of shape (n, 2).

    `data` may be a sequence of (x, y) pairs, an (n, 2) array or a two-column
    DataFrame. Alternatively pass `y` (and optionally `x`; defaults to the
    sample index) as 1-D sequences.
    """

    if data is not None and (x is not None or y is not None):
        raise ChartConfigError("pass either `data` or `x`/`y`, not both")

    if data is not None:
        points = _coerce_pairs(data)
    elif y is not None:
        y_arr = _coerce_1d_numeric(y, label="y")
        if x is None:
            x_arr = np.arange(y_arr.size, dtype=np.float64)
        else:
            x_arr = _coerce_1d_numeric(x, label="x")
        if x_arr.shape != y_arr.shape:
            raise ChartConfigError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        points = np.column_stack((x_arr, y_arr)) if y_arr.size else np.empty((0, 2), dtype=np.float64)
    elif x is not None:
        raise ChartConfigError("y input is required when x is given")
    else:
        points = np.empty((0, 2), dtype=np.float64)

    out = np.array(points, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out


def _coerce_pairs(values: Any) -> np.ndarray:
    if pd is not None and isinstance(values, pd.DataFrame):
        numeric_cols = [c for c in values.columns if _is_numeric_dtype(values[c])]
        if len(numeric_cols) != 2:
            raise ChartConfigError("DataFrame input must contain exactly two numeric columns (x, y)")
        values = values[numeric_cols].to_numpy()

    if isinstance(values, np.ndarray):
        arr = values
    elif isinstance(values, Sequence) and not isinstance(values, (str, bytes)):
        if len(values) == 0:
            return np.empty((0, 2), dtype=np.float64)
        try:
            arr = np.asarray(values, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ChartConfigError("samples must be numeric (x, y) pairs") from exc
    else:
        raise ChartConfigError(f"unsupported sample input type: {type(values)!r}")

    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ChartConfigError(f"samples must have shape (n, 2), got {arr.shape}")
    if not np.issubdtype(arr.dtype, np.number):
        raise ChartConfigError("samples must be numeric (x, y) pairs")
    return arr.astype(np.float64, copy=False)


def _coerce_1d_numeric(values: Any, *, label: str) -> np.ndarray:
    if pd is not None and isinstance(values, pd.Series):
        values = values.to_numpy()
    if isinstance(values, np.ndarray):
        arr = values
    elif isinstance(values, Sequence) and not isinstance(values, (str, bytes)):
        try:
            arr = np.asarray(values, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ChartConfigError(f"{label} must be numeric") from exc
    else:
        raise ChartConfigError(f"unsupported {label} input type: {type(values)!r}")
    if arr.ndim != 1:
        raise ChartConfigError(f"{label} must be 1-D, got shape {arr.shape}")
    if arr.size and not np.issubdtype(arr.dtype, np.number):
        raise ChartConfigError(f"{label} must be numeric")
    return arr.astype(np.float64, copy=False)


def _is_numeric_dtype(series: Any) -> bool:
    return bool(np.issubdtype(series.dtype, np.number))
