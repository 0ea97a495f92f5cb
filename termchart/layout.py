from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Callable

from termchart.geometry import ZERO_RECT, Rect
from termchart.raster.draw_text import max_text_width, text_width

if TYPE_CHECKING:
    from termchart.chart import Axis


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartLayout:
    """Where each chart region landed.

    Label/axis/legend coordinates are local to the outer area; `graph_area`
    is absolute. A `None` field means the region was not reserved.
    """

    legend_x: tuple[int, int] | None = None
    legend_y: tuple[int, int] | None = None
    label_x: int | None = None
    label_y: int | None = None
    axis_x: int | None = None
    axis_y: int | None = None
    graph_area: Rect = ZERO_RECT


@dataclass
class LayoutState:
    """Cursor shared by the reservation steps plus the regions claimed so far."""

    inner: Rect
    outer: Rect
    x_axis: "Axis"
    y_axis: "Axis"
    x: int
    y: int
    legend_x: tuple[int, int] | None = None
    legend_y: tuple[int, int] | None = None
    label_x: int | None = None
    label_y: int | None = None
    axis_x: int | None = None
    axis_y: int | None = None
    graph_area: Rect = ZERO_RECT

    @classmethod
    def start(cls, inner: Rect, outer: Rect, x_axis: "Axis", y_axis: "Axis") -> "LayoutState":
        return cls(
            inner=inner,
            outer=outer,
            x_axis=x_axis,
            y_axis=y_axis,
            x=inner.x - outer.x,
            y=(inner.y - outer.y) + inner.height - 1,
        )

    @property
    def top(self) -> int:
        return self.inner.y - self.outer.y

    def has_spare_row(self) -> bool:
        # Rows above the inner area belong to the frame.
        return self.y > 1 and self.y >= self.top

    def freeze(self) -> ChartLayout:
        return ChartLayout(
            legend_x=self.legend_x,
            legend_y=self.legend_y,
            label_x=self.label_x,
            label_y=self.label_y,
            axis_x=self.axis_x,
            axis_y=self.axis_y,
            graph_area=self.graph_area,
        )


LayoutStep = Callable[[LayoutState], None]


def reserve_x_labels(state: LayoutState) -> None:
    if not state.x_axis.has_labels():
        return
    if not state.has_spare_row():
        LOGGER.debug("no room for x labels (y=%d)", state.y)
        return
    state.label_x = state.y
    state.y -= 1


def reserve_y_labels(state: LayoutState) -> None:
    labels = state.y_axis.labels
    if labels is None:
        return
    max_width = max_text_width(labels)
    if state.x + max_width < state.inner.width:
        state.label_y = state.x
        state.x += max_width
    else:
        LOGGER.debug("no room for y labels (x=%d, width=%d)", state.x, max_width)


def reserve_x_axis_line(state: LayoutState) -> None:
    if not state.x_axis.has_labels():
        return
    if not state.has_spare_row():
        LOGGER.debug("no room for x axis line (y=%d)", state.y)
        return
    state.axis_x = state.y
    state.y -= 1


def reserve_y_axis_line(state: LayoutState) -> None:
    if not state.y_axis.has_labels():
        return
    if state.x + 1 < state.inner.width:
        state.axis_y = state.x
        state.x += 1
    else:
        LOGGER.debug("no room for y axis line (x=%d)", state.x)


def reserve_graph_area(state: LayoutState) -> None:
    if state.x < state.inner.width and state.has_spare_row():
        # The cursor row is the last plot row.
        state.graph_area = Rect(
            x=state.outer.x + state.x,
            y=state.inner.y,
            width=state.inner.width - state.x,
            height=state.y - state.top + 1,
        )
    else:
        LOGGER.debug("plot area collapsed (x=%d, y=%d, inner=%r)", state.x, state.y, state.inner)


def place_x_legend(state: LayoutState) -> None:
    title = state.x_axis.title
    if title is None:
        return
    w = text_width(title)
    graph = state.graph_area
    if w < graph.width and graph.height > 2:
        state.legend_x = (state.x + graph.width - w, state.y)


def place_y_legend(state: LayoutState) -> None:
    title = state.y_axis.title
    if title is None:
        return
    w = text_width(title)
    graph = state.graph_area
    if w + 1 < graph.width and graph.height > 2:
        state.legend_y = (state.x + 1, state.top)


LAYOUT_STEPS: tuple[LayoutStep, ...] = (
    reserve_x_labels,
    reserve_y_labels,
    reserve_x_axis_line,
    reserve_y_axis_line,
    reserve_graph_area,
    place_x_legend,
    place_y_legend,
)


def compute_layout(inner: Rect, outer: Rect, x_axis: "Axis", y_axis: "Axis") -> ChartLayout:
    """Split `inner` into label, axis, legend and plot regions in one greedy pass."""
    state = LayoutState.start(inner, outer, x_axis, y_axis)
    for step in LAYOUT_STEPS:
        step(state)
    return state.freeze()
