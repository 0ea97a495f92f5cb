from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from typing import Any, Sequence

from termchart.block import Block
from termchart.errors import ChartConfigError
from termchart.geometry import Rect
from termchart.layout import ChartLayout, compute_layout
from termchart.raster import Buffer
from termchart.render import render
from termchart.series import Dataset
from termchart.style import Color, ColorLike, parse_color


@dataclass(frozen=True)
class Axis:
    title: str | None = None
    title_color: ColorLike = Color.RESET
    bounds: tuple[float, float] = (0.0, 0.0)
    labels: tuple[str, ...] | None = None
    labels_color: ColorLike = Color.RESET
    color: ColorLike = Color.RESET

    def __post_init__(self) -> None:
        object.__setattr__(self, "bounds", _coerce_bounds(self.bounds))
        if self.labels is not None:
            if isinstance(self.labels, (str, bytes)):
                raise ChartConfigError("axis labels must be a sequence of strings, not a single string")
            object.__setattr__(self, "labels", tuple(str(label) for label in self.labels))
        if self.title is not None:
            object.__setattr__(self, "title", str(self.title))
        object.__setattr__(self, "title_color", parse_color(self.title_color))
        object.__setattr__(self, "labels_color", parse_color(self.labels_color))
        object.__setattr__(self, "color", parse_color(self.color))

    @property
    def lower(self) -> float:
        return self.bounds[0]

    @property
    def upper(self) -> float:
        return self.bounds[1]

    @property
    def span(self) -> float:
        return self.bounds[1] - self.bounds[0]

    def has_labels(self) -> bool:
        return self.labels is not None

    def with_title(self, title: str | None, color: ColorLike | str | None = None) -> "Axis":
        if color is None:
            return replace(self, title=title)
        return replace(self, title=title, title_color=color)  # type: ignore[arg-type]

    def with_title_color(self, color: ColorLike | str) -> "Axis":
        return replace(self, title_color=color)  # type: ignore[arg-type]

    def with_bounds(self, lower: float, upper: float) -> "Axis":
        return replace(self, bounds=(lower, upper))

    def with_labels(self, labels: Sequence[str] | None) -> "Axis":
        return replace(self, labels=None if labels is None else tuple(labels))

    def with_labels_color(self, color: ColorLike | str) -> "Axis":
        return replace(self, labels_color=color)  # type: ignore[arg-type]

    def with_color(self, color: ColorLike | str) -> "Axis":
        return replace(self, color=color)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Chart:
    """Immutable chart description: axes, datasets, optional frame and background."""

    block: Block | None = None
    x_axis: Axis = field(default_factory=Axis)
    y_axis: Axis = field(default_factory=Axis)
    datasets: tuple[Dataset, ...] = ()
    bg: ColorLike = Color.RESET

    def __post_init__(self) -> None:
        if self.block is not None and not isinstance(self.block, Block):
            raise ChartConfigError("block must be a Block")
        for name in ("x_axis", "y_axis"):
            if not isinstance(getattr(self, name), Axis):
                raise ChartConfigError(f"{name} must be an Axis")
        datasets = tuple(self.datasets)
        for dataset in datasets:
            if not isinstance(dataset, Dataset):
                raise ChartConfigError("datasets must contain Dataset values")
        object.__setattr__(self, "datasets", datasets)
        object.__setattr__(self, "bg", parse_color(self.bg))

    def with_block(self, block: Block | None) -> "Chart":
        return replace(self, block=block)

    def with_x_axis(self, axis: Axis) -> "Chart":
        return replace(self, x_axis=axis)

    def with_y_axis(self, axis: Axis) -> "Chart":
        return replace(self, y_axis=axis)

    def with_datasets(self, datasets: Sequence[Dataset]) -> "Chart":
        return replace(self, datasets=tuple(datasets))

    def with_bg(self, bg: ColorLike | str) -> "Chart":
        return replace(self, bg=bg)  # type: ignore[arg-type]

    def layout(self, inner: Rect, outer: Rect) -> ChartLayout:
        return compute_layout(inner, outer, self.x_axis, self.y_axis)

    def render(self, area: Rect) -> Buffer:
        return render(self, area)


class ChartBuilder:
    """Fluent, mutable staging area; `build()` hands out an immutable `Chart`."""

    def __init__(self) -> None:
        self._block: Block | None = None
        self._x_axis = Axis()
        self._y_axis = Axis()
        self._datasets: list[Dataset] = []
        self._bg: ColorLike | str = Color.RESET

    def block(self, block: Block | None) -> "ChartBuilder":
        self._block = block
        return self

    def bg(self, color: ColorLike | str) -> "ChartBuilder":
        self._bg = color
        return self

    def x_axis(self, axis: Axis | None = None, **fields: Any) -> "ChartBuilder":
        self._x_axis = _resolve_axis(axis, fields)
        return self

    def y_axis(self, axis: Axis | None = None, **fields: Any) -> "ChartBuilder":
        self._y_axis = _resolve_axis(axis, fields)
        return self

    def dataset(
        self,
        data: Any = None,
        *,
        x: Any = None,
        y: Any = None,
        color: ColorLike | str = Color.RESET,
    ) -> "ChartBuilder":
        if isinstance(data, Dataset):
            self._datasets.append(data)
            return self
        if y is not None or x is not None:
            self._datasets.append(Dataset.from_xy(y, x=x, color=color))
        else:
            self._datasets.append(Dataset(data=data, color=color))  # type: ignore[arg-type]
        return self

    def datasets(self, datasets: Sequence[Dataset]) -> "ChartBuilder":
        self._datasets = list(datasets)
        return self

    def build(self) -> Chart:
        return Chart(
            block=self._block,
            x_axis=self._x_axis,
            y_axis=self._y_axis,
            datasets=tuple(self._datasets),
            bg=self._bg,  # type: ignore[arg-type]
        )


def _resolve_axis(axis: Axis | None, fields: dict[str, Any]) -> Axis:
    if axis is None:
        return Axis(**fields)
    if fields:
        return replace(axis, **fields)
    return axis


def _coerce_bounds(bounds: Any) -> tuple[float, float]:
    if isinstance(bounds, (str, bytes)):
        raise ChartConfigError("axis bounds must be two numbers")
    try:
        values = tuple(bounds)
    except TypeError:
        raise ChartConfigError("axis bounds must be two numbers") from None
    if len(values) != 2:
        raise ChartConfigError(f"axis bounds must have exactly 2 values, got {len(values)}")
    try:
        lower, upper = float(values[0]), float(values[1])
    except (TypeError, ValueError):
        raise ChartConfigError("axis bounds must be two numbers") from None
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ChartConfigError("axis bounds must be finite")
    if lower > upper:
        raise ChartConfigError(f"axis bounds must satisfy min <= max, got ({lower}, {upper})")
    return (lower, upper)
