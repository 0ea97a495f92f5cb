from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np

from termchart.adapters import normalize_points
from termchart.style import Color, ColorLike, parse_color


@dataclass(frozen=True, eq=False)
class Dataset:
    """Ordered (x, y) samples painted with one marker color.

    The dataset keeps its own read-only float64 copy of the samples. Points
    outside the axis bounds are skipped when rendering, not here.
    """

    data: np.ndarray = field(default_factory=lambda: normalize_points())
    color: ColorLike = Color.RESET

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", normalize_points(self.data))
        object.__setattr__(self, "color", parse_color(self.color))

    @classmethod
    def from_xy(cls, y: Any, *, x: Any = None, color: ColorLike | str = Color.RESET) -> "Dataset":
        return cls(data=normalize_points(x=x, y=y), color=color)  # type: ignore[arg-type]

    def with_data(self, data: Any) -> "Dataset":
        return replace(self, data=data)

    def with_color(self, color: ColorLike | str) -> "Dataset":
        return replace(self, color=color)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self.color == other.color and np.array_equal(self.data, other.data)

    __hash__ = None  # type: ignore[assignment]
