from __future__ import annotations

import unittest

from termchart import Axis, Chart, Rect, compute_layout
from termchart.layout import (
    LAYOUT_STEPS,
    ChartLayout,
    LayoutState,
    place_x_legend,
    reserve_graph_area,
    reserve_x_labels,
    reserve_y_labels,
)


def _labelled_axes() -> tuple[Axis, Axis]:
    x_axis = Axis(bounds=(0.0, 10.0), labels=("0", "10"))
    y_axis = Axis(bounds=(0.0, 10.0), labels=("0", "5"))
    return x_axis, y_axis


class ComputeLayoutTests(unittest.TestCase):
    def test_labelled_axes_reserve_rows_and_columns(self) -> None:
        area = Rect(x=0, y=0, width=20, height=10)
        x_axis, y_axis = _labelled_axes()

        layout = compute_layout(area, area, x_axis, y_axis)

        self.assertEqual(layout.label_x, 9)
        self.assertEqual(layout.label_y, 0)
        self.assertEqual(layout.axis_x, 8)
        self.assertEqual(layout.axis_y, 1)
        self.assertEqual(layout.graph_area, Rect(x=2, y=0, width=18, height=8))

    def test_axes_without_labels_reserve_nothing(self) -> None:
        area = Rect(x=0, y=0, width=20, height=10)

        layout = compute_layout(area, area, Axis(), Axis())

        self.assertIsNone(layout.label_x)
        self.assertIsNone(layout.label_y)
        self.assertIsNone(layout.axis_x)
        self.assertIsNone(layout.axis_y)
        self.assertEqual(layout.graph_area, area)

    def test_only_x_labels_leave_columns_untouched(self) -> None:
        area = Rect(x=0, y=0, width=20, height=10)

        layout = compute_layout(area, area, Axis(labels=("a", "b")), Axis())

        self.assertIsNone(layout.label_y)
        self.assertIsNone(layout.axis_y)
        self.assertEqual(layout.graph_area.x, 0)
        self.assertEqual(layout.graph_area.width, 20)

    def test_framed_inner_area_offsets_cursor(self) -> None:
        outer = Rect(x=0, y=0, width=20, height=10)
        inner = Rect(x=1, y=1, width=18, height=8)
        x_axis = Axis(labels=("0", "10"))
        y_axis = Axis(labels=("0", "10"))

        layout = compute_layout(inner, outer, x_axis, y_axis)

        self.assertEqual(layout.label_x, 8)
        self.assertEqual(layout.label_y, 1)
        self.assertEqual(layout.axis_x, 7)
        self.assertEqual(layout.axis_y, 3)
        self.assertEqual(layout.graph_area, Rect(x=4, y=1, width=14, height=6))
        self.assertTrue(inner.contains(layout.graph_area))

    def test_offset_outer_area_keeps_local_coordinates(self) -> None:
        outer = Rect(x=5, y=3, width=20, height=10)
        x_axis, y_axis = _labelled_axes()

        layout = compute_layout(outer, outer, x_axis, y_axis)

        self.assertEqual(layout.label_x, 9)
        self.assertEqual(layout.axis_y, 1)
        self.assertEqual(layout.graph_area, Rect(x=7, y=3, width=18, height=8))

    def test_zero_sized_area_collapses_everything(self) -> None:
        area = Rect(x=0, y=0, width=0, height=0)
        x_axis, y_axis = _labelled_axes()

        layout = compute_layout(area, area, x_axis.with_title("x"), y_axis.with_title("y"))

        self.assertEqual(layout, ChartLayout())
        self.assertTrue(layout.graph_area.is_empty())

    def test_short_area_skips_axis_line_and_plot(self) -> None:
        area = Rect(x=0, y=0, width=10, height=3)

        layout = compute_layout(area, area, Axis(labels=("a", "b")), Axis())

        self.assertEqual(layout.label_x, 2)
        self.assertIsNone(layout.axis_x)
        self.assertTrue(layout.graph_area.is_empty())

    def test_wide_y_labels_are_measured_in_columns(self) -> None:
        area = Rect(x=0, y=0, width=20, height=10)

        layout = compute_layout(area, area, Axis(), Axis(labels=("0", "値段")))

        self.assertEqual(layout.label_y, 0)
        self.assertEqual(layout.axis_y, 4)
        self.assertEqual(layout.graph_area.x, 5)
        self.assertEqual(layout.graph_area.width, 15)

    def test_too_wide_y_labels_still_allow_axis_line(self) -> None:
        area = Rect(x=0, y=0, width=5, height=6)

        layout = compute_layout(area, area, Axis(), Axis(labels=("123456", "1")))

        self.assertIsNone(layout.label_y)
        self.assertEqual(layout.axis_y, 0)
        self.assertEqual(layout.graph_area.x, 1)

    def test_legends_are_placed_beside_plot_edges(self) -> None:
        area = Rect(x=0, y=0, width=20, height=10)
        x_axis, y_axis = _labelled_axes()

        layout = compute_layout(area, area, x_axis.with_title("time"), y_axis.with_title("val"))

        self.assertEqual(layout.legend_x, (16, 7))
        self.assertEqual(layout.legend_y, (3, 0))

    def test_legends_need_room_inside_plot(self) -> None:
        area = Rect(x=0, y=0, width=20, height=10)
        x_axis, y_axis = _labelled_axes()

        layout = compute_layout(area, area, x_axis.with_title("x" * 18), y_axis.with_title("y" * 17))

        self.assertIsNone(layout.legend_x)
        self.assertIsNone(layout.legend_y)

    def test_legends_need_plot_taller_than_two_rows(self) -> None:
        outer = Rect(x=0, y=0, width=20, height=5)
        inner = Rect(x=0, y=2, width=20, height=2)

        layout = compute_layout(inner, outer, Axis(title="x"), Axis(title="y"))

        self.assertEqual(layout.graph_area.height, 2)
        self.assertIsNone(layout.legend_x)
        self.assertIsNone(layout.legend_y)

    def test_plot_area_always_inside_inner(self) -> None:
        outer = Rect(x=2, y=1, width=30, height=12)
        inners = [
            outer,
            Rect(x=3, y=2, width=28, height=10),
            Rect(x=2, y=2, width=30, height=11),
            Rect(x=3, y=1, width=27, height=3),
            Rect(x=3, y=2, width=1, height=1),
        ]
        axis_sets = [
            (Axis(), Axis()),
            _labelled_axes(),
            (Axis(labels=("0", "1", "2")), Axis(labels=("-100", "0", "100"))),
            (Axis(title="a long x title"), Axis(title="y")),
        ]
        for inner in inners:
            for x_axis, y_axis in axis_sets:
                layout = compute_layout(inner, outer, x_axis, y_axis)
                if not layout.graph_area.is_empty():
                    self.assertTrue(inner.contains(layout.graph_area), (inner, layout))

    def test_layout_is_pure(self) -> None:
        area = Rect(x=0, y=0, width=40, height=15)
        x_axis, y_axis = _labelled_axes()

        first = compute_layout(area, area, x_axis, y_axis)
        second = compute_layout(area, area, x_axis, y_axis)

        self.assertEqual(first, second)

    def test_chart_layout_uses_its_axes(self) -> None:
        area = Rect(x=0, y=0, width=20, height=10)
        x_axis, y_axis = _labelled_axes()
        value = Chart(x_axis=x_axis, y_axis=y_axis)

        self.assertEqual(value.layout(area, area), compute_layout(area, area, x_axis, y_axis))


class LayoutStepTests(unittest.TestCase):
    def test_step_order_is_labels_then_lines_then_plot_then_legends(self) -> None:
        names = [step.__name__ for step in LAYOUT_STEPS]
        self.assertEqual(
            names,
            [
                "reserve_x_labels",
                "reserve_y_labels",
                "reserve_x_axis_line",
                "reserve_y_axis_line",
                "reserve_graph_area",
                "place_x_legend",
                "place_y_legend",
            ],
        )

    def test_cursor_starts_at_bottom_left_of_inner(self) -> None:
        state = LayoutState.start(Rect(1, 2, 10, 5), Rect(0, 0, 12, 8), Axis(), Axis())
        self.assertEqual((state.x, state.y), (1, 6))

    def test_x_label_step_needs_spare_row(self) -> None:
        area = Rect(x=0, y=0, width=10, height=2)
        state = LayoutState.start(area, area, Axis(labels=("a", "b")), Axis())

        reserve_x_labels(state)

        self.assertIsNone(state.label_x)
        self.assertEqual(state.y, 1)

    def test_y_label_step_advances_by_widest_label(self) -> None:
        area = Rect(x=0, y=0, width=10, height=5)
        state = LayoutState.start(area, area, Axis(), Axis(labels=("1", "100", "10")))

        reserve_y_labels(state)

        self.assertEqual(state.label_y, 0)
        self.assertEqual(state.x, 3)

    def test_x_legend_reuses_cursor_row_without_axis_line(self) -> None:
        area = Rect(x=0, y=0, width=10, height=6)
        state = LayoutState.start(area, area, Axis(title="t"), Axis())

        reserve_graph_area(state)
        place_x_legend(state)

        self.assertEqual(state.graph_area, area)
        self.assertEqual(state.legend_x, (9, 5))


if __name__ == "__main__":
    unittest.main()
