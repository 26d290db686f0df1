import unittest

from gantt_core.engine.virtualizer import Axis, ViewportVirtualizer, compute_range, full_range, materialize
from gantt_core.utils.config import get_default_config


class TestComputeRange(unittest.TestCase):
    def test_top_of_list(self) -> None:
        r = compute_range(scroll_offset=0, viewport_size=400, item_size=40, item_count=1000, buffer=5)
        self.assertEqual(r.start_index, 0)
        self.assertEqual(r.end_index, 15)
        self.assertEqual(r.before_size, 0)
        self.assertEqual(r.after_size, (1000 - 15 - 1) * 40)

    def test_scrolled(self) -> None:
        r = compute_range(scroll_offset=4000, viewport_size=400, item_size=40, item_count=1000, buffer=5)
        self.assertEqual(r.start_index, 95)
        self.assertEqual(r.end_index, 115)
        self.assertEqual(r.before_size, 95 * 40)

    def test_end_clamped_to_last_item(self) -> None:
        r = compute_range(scroll_offset=0, viewport_size=400, item_size=40, item_count=8, buffer=5)
        self.assertEqual((r.start_index, r.end_index), (0, 7))
        self.assertEqual(r.after_size, 0)
        self.assertEqual(r.count, 8)

    def test_spacers_preserve_total_extent(self) -> None:
        for offset in (0, 123, 2000, 39000):
            r = compute_range(offset, 600, 50, 800, 3)
            total = r.before_size + r.count * 50 + r.after_size
            self.assertEqual(total, 800 * 50)

    def test_empty_list(self) -> None:
        r = compute_range(0, 400, 40, 0, 5)
        self.assertEqual((r.start_index, r.end_index), (0, -1))
        self.assertEqual(r.count, 0)
        self.assertEqual(materialize([], r), [])

    def test_negative_scroll_treated_as_top(self) -> None:
        self.assertEqual(compute_range(-200, 400, 40, 100, 0), compute_range(0, 400, 40, 100, 0))

    def test_scrolled_past_end(self) -> None:
        r = compute_range(10000, 400, 40, 10, 2)
        self.assertLessEqual(r.start_index, r.end_index)
        self.assertEqual(r.end_index, 9)

    def test_invalid_item_size(self) -> None:
        with self.assertRaises(ValueError):
            compute_range(0, 400, 0, 10, 5)

    def test_materialize_slice(self) -> None:
        items = list(range(100))
        r = compute_range(400, 200, 40, 100, 1)
        self.assertEqual(materialize(items, r), list(range(9, 17)))
        self.assertIn(9, r)
        self.assertNotIn(17, r)

    def test_full_range(self) -> None:
        r = full_range(30)
        self.assertEqual((r.start_index, r.end_index, r.before_size, r.after_size), (0, 29, 0, 0))

    def test_idempotent(self) -> None:
        self.assertEqual(compute_range(777, 333, 40, 500, 5), compute_range(777, 333, 40, 500, 5))


class TestViewportVirtualizer(unittest.TestCase):
    def test_vertical_uses_row_config(self) -> None:
        config = get_default_config()
        rows = ViewportVirtualizer(Axis.VERTICAL, config)
        self.assertEqual(rows.item_size, 50)
        self.assertEqual(rows.buffer, 5)
        self.assertEqual(rows.compute_range(0, 500, 100).end_index, 15)
        self.assertEqual(rows.total_size(100), 5000)

    def test_horizontal_uses_day_width(self) -> None:
        config = get_default_config()
        config['timeline']['day_width'] = 20
        columns = ViewportVirtualizer(Axis.HORIZONTAL, config)
        self.assertEqual(columns.item_size, 20)
        self.assertEqual(columns.buffer, 0)
        self.assertEqual(columns.compute_range(100, 200, 365).start_index, 5)
        self.assertEqual(columns.full_range(365).end_index, 364)

    def test_materialize_rows(self) -> None:
        rows = ViewportVirtualizer(Axis.VERTICAL, get_default_config(), item_size=40)
        items = [f"task_{i}" for i in range(1000)]
        visible = rows.materialize(items, 4000, 400)
        self.assertEqual(visible[0], 'task_95')
        self.assertEqual(visible[-1], 'task_115')


if __name__ == "__main__":
    unittest.main()
