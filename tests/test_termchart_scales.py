from __future__ import annotations

import unittest

import numpy as np

from termchart.scales import bounds_mask, format_tick, generate_labels, map_to_cells


class BoundsMaskTests(unittest.TestCase):
    def test_bounds_are_inclusive(self) -> None:
        x = np.asarray([0.0, 10.0, 10.5, -0.1], dtype=np.float64)
        y = np.asarray([5.0, 5.0, 5.0, 5.0], dtype=np.float64)

        mask = bounds_mask(x, y, (0.0, 10.0), (0.0, 10.0))

        self.assertEqual(mask.tolist(), [True, True, False, False])

    def test_non_finite_values_are_excluded(self) -> None:
        x = np.asarray([np.nan, 1.0, np.inf], dtype=np.float64)
        y = np.asarray([1.0, np.nan, 1.0], dtype=np.float64)

        mask = bounds_mask(x, y, (0.0, 10.0), (0.0, 10.0))

        self.assertFalse(np.any(mask))

    def test_degenerate_bounds_exclude_everything(self) -> None:
        x = np.asarray([3.0, 3.0], dtype=np.float64)
        y = np.asarray([1.0, 2.0], dtype=np.float64)

        self.assertFalse(np.any(bounds_mask(x, y, (3.0, 3.0), (0.0, 10.0))))
        self.assertFalse(np.any(bounds_mask(x, y, (0.0, 10.0), (2.0, 2.0))))


class MapToCellsTests(unittest.TestCase):
    def test_offsets_measured_from_axis_maximum(self) -> None:
        x = np.asarray([10.0, 5.0, 0.0], dtype=np.float64)
        y = np.asarray([10.0, 5.0, 0.0], dtype=np.float64)

        cx, cy = map_to_cells(x, y, (0.0, 10.0), (0.0, 10.0), 18, 8)

        self.assertEqual(cx.tolist(), [0, 9, 18])
        self.assertEqual(cy.tolist(), [0, 4, 8])

    def test_offsets_truncate_toward_zero(self) -> None:
        cx, cy = map_to_cells(
            np.asarray([4.99], dtype=np.float64),
            np.asarray([4.99], dtype=np.float64),
            (0.0, 10.0),
            (0.0, 10.0),
            18,
            8,
        )
        self.assertEqual((int(cx[0]), int(cy[0])), (9, 4))

    def test_mapping_is_monotonic(self) -> None:
        values = np.linspace(-3.0, 7.0, 101, dtype=np.float64)

        cx, cy = map_to_cells(values, values, (-3.0, 7.0), (-3.0, 7.0), 37, 11)

        self.assertTrue(np.all(np.diff(cx) <= 0))
        self.assertTrue(np.all(np.diff(cy) <= 0))
        self.assertTrue(np.all((cx >= 0) & (cx <= 37)))
        self.assertTrue(np.all((cy >= 0) & (cy <= 11)))


class LabelTests(unittest.TestCase):
    def test_generate_labels_spreads_bounds(self) -> None:
        self.assertEqual(generate_labels((0.0, 10.0), 3), ("0", "5", "10"))
        self.assertEqual(generate_labels((0.0, 1.0), 3), ("0", "0.5", "1"))

    def test_generate_labels_single_or_degenerate(self) -> None:
        self.assertEqual(generate_labels((2.0, 8.0), 1), ("2",))
        self.assertEqual(generate_labels((4.0, 4.0), 3), ("4",))

    def test_generate_labels_rejects_non_positive_count(self) -> None:
        with self.assertRaises(ValueError):
            generate_labels((0.0, 1.0), 0)

    def test_labels_use_decimals_the_spacing_needs(self) -> None:
        self.assertEqual(generate_labels((1.5, 3.0), 4), ("1.5", "2", "2.5", "3"))
        self.assertEqual(generate_labels((0.0, 1.0), 4), ("0", "0.333333", "0.666667", "1"))
        self.assertEqual(generate_labels((0.0, 0.3), 4), ("0", "0.1", "0.2", "0.3"))

    def test_single_label_keeps_fraction(self) -> None:
        self.assertEqual(generate_labels((2.25, 8.0), 1), ("2.25",))

    def test_tick_formatting_snaps_negative_zero(self) -> None:
        self.assertEqual(format_tick(-4.4409e-16), "0")
        self.assertEqual(format_tick(-0.04, 1), "0")


if __name__ == "__main__":
    unittest.main()
