from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termchart import symbols
from termchart.geometry import Rect
from termchart.layout import ChartLayout, compute_layout
from termchart.raster import Buffer, draw_hline, draw_markers, draw_text, draw_vline, text_width
from termchart.scales import bounds_mask, is_degenerate, map_to_cells

if TYPE_CHECKING:
    from termchart.chart import Chart


LOGGER = logging.getLogger(__name__)


def render(chart: "Chart", area: Rect) -> Buffer:
    """Paint `chart` into a new buffer covering `area`.

    Never raises for well-formed configuration: regions without room, label
    sets that cannot be spread, and samples outside (or on degenerate) bounds
    are left out.
    """

    if chart.block is not None:
        buf = chart.block.render(area)
        inner = chart.block.inner(area)
    else:
        buf = Buffer.empty(area)
        inner = area

    layout = compute_layout(inner, area, chart.x_axis, chart.y_axis)
    draw_legends(buf, chart, layout)
    if layout.graph_area.is_empty():
        LOGGER.debug("empty plot area for %r; skipping labels, axes and data", area)
        return buf
    draw_labels(buf, chart, layout, area)
    draw_axes(buf, chart, layout, area)
    draw_datasets(buf, chart, layout, area)
    return buf


def draw_legends(buf: Buffer, chart: "Chart", layout: ChartLayout) -> None:
    if layout.legend_x is not None and chart.x_axis.title is not None:
        x, y = layout.legend_x
        draw_text(buf, x, y, chart.x_axis.title, chart.x_axis.title_color, chart.bg)
    if layout.legend_y is not None and chart.y_axis.title is not None:
        x, y = layout.legend_y
        draw_text(buf, x, y, chart.y_axis.title, chart.y_axis.title_color, chart.bg)


def draw_labels(buf: Buffer, chart: "Chart", layout: ChartLayout, area: Rect) -> None:
    graph = layout.graph_area
    margin_x = graph.x - area.x
    margin_y = graph.y - area.y

    labels = chart.x_axis.labels
    if layout.label_x is not None and labels is not None:
        n = len(labels)
        total_width = sum(text_width(label) for label in labels)
        if total_width < graph.width and n > 1:
            for i, label in enumerate(labels):
                x = margin_x + i * (graph.width - 1) // (n - 1) - text_width(label)
                draw_text(buf, x, layout.label_x, label, chart.x_axis.labels_color, chart.bg)
        else:
            LOGGER.debug("dropping %d x labels (total width %d, plot width %d)", n, total_width, graph.width)

    labels = chart.y_axis.labels
    if layout.label_y is not None and labels is not None:
        n = len(labels)
        if n > 1:
            # Last label sits on the top row.
            for i, label in enumerate(reversed(labels)):
                y = margin_y + i * (graph.height - 1) // (n - 1)
                draw_text(buf, layout.label_y, y, label, chart.y_axis.labels_color, chart.bg)
        else:
            LOGGER.debug("dropping %d y labels; at least 2 are needed", n)


def draw_axes(buf: Buffer, chart: "Chart", layout: ChartLayout, area: Rect) -> None:
    graph = layout.graph_area
    margin_x = graph.x - area.x
    margin_y = graph.y - area.y

    if layout.axis_x is not None:
        draw_hline(
            buf,
            margin_x,
            margin_x + graph.width - 1,
            layout.axis_x,
            symbols.HORIZONTAL,
            chart.x_axis.color,
            chart.bg,
        )
    if layout.axis_y is not None:
        draw_vline(
            buf,
            layout.axis_y,
            margin_y,
            margin_y + graph.height - 1,
            symbols.VERTICAL,
            chart.y_axis.color,
            chart.bg,
        )
    if layout.axis_x is not None and layout.axis_y is not None:
        buf.update_cell(layout.axis_y, layout.axis_x, symbols.BOTTOM_LEFT, chart.x_axis.color, chart.bg)


def draw_datasets(buf: Buffer, chart: "Chart", layout: ChartLayout, area: Rect) -> None:
    graph = layout.graph_area
    margin_x = graph.x - area.x
    margin_y = graph.y - area.y
    x_bounds = chart.x_axis.bounds
    y_bounds = chart.y_axis.bounds

    if chart.datasets and (is_degenerate(x_bounds) or is_degenerate(y_bounds)):
        LOGGER.debug("degenerate axis bounds x=%r y=%r; no samples drawn", x_bounds, y_bounds)
        return

    for dataset in chart.datasets:
        if len(dataset) == 0:
            continue
        xs = dataset.data[:, 0]
        ys = dataset.data[:, 1]
        mask = bounds_mask(xs, ys, x_bounds, y_bounds)
        cx, cy = map_to_cells(xs[mask], ys[mask], x_bounds, y_bounds, graph.width, graph.height)
        draw_markers(buf, cx + margin_x, cy + margin_y, dataset.color, chart.bg)
