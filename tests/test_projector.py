import unittest
from datetime import date, datetime

from gantt_core.engine.projector import TimelineProjector, project
from gantt_core.models.task import Task
from gantt_core.utils.config import get_default_config


class TestTimelineProjector(unittest.TestCase):
    def test_left_and_width_in_whole_days(self) -> None:
        pos = project(date(2024, 3, 27), date(2024, 3, 29), date(2024, 3, 25), 40)
        self.assertEqual(pos.left, 80)
        self.assertEqual(pos.width, 80)
        self.assertEqual(pos.right, 160)

    def test_task_on_view_start_has_zero_left(self) -> None:
        pos = project(date(2024, 3, 25), date(2024, 3, 28), date(2024, 3, 25), 40)
        self.assertEqual(pos.left, 0)

    def test_task_before_view_start_has_negative_left(self) -> None:
        pos = project(date(2024, 3, 20), date(2024, 3, 28), date(2024, 3, 25), 10)
        self.assertEqual(pos.left, -50)

    def test_same_day_task_clamped_to_one_day(self) -> None:
        pos = project(date(2024, 3, 27), date(2024, 3, 27), date(2024, 3, 25), 40)
        self.assertEqual(pos.width, 40)

    def test_inverted_range_clamped_not_raised(self) -> None:
        # end before start renders as the minimum span
        pos = project(date(2024, 3, 29), date(2024, 3, 20), date(2024, 3, 25), 40)
        self.assertEqual(pos.width, 40)
        self.assertEqual(pos.left, 160)

    def test_width_never_below_day_width(self) -> None:
        view = date(2024, 1, 1)
        for start_day in range(1, 10):
            for end_day in range(1, 10):
                pos = project(date(2024, 1, start_day), date(2024, 1, end_day), view, 25)
                self.assertGreaterEqual(pos.width, 25)
                if end_day > start_day:
                    self.assertEqual(pos.width, (end_day - start_day) * 25)

    def test_time_of_day_is_ignored(self) -> None:
        pos = project(datetime(2024, 3, 27, 23, 59), datetime(2024, 3, 29, 0, 1), datetime(2024, 3, 25, 12), 40)
        self.assertEqual(pos.left, 80)
        self.assertEqual(pos.width, 80)

    def test_inclusive_end_counts_end_day(self) -> None:
        pos = project(date(2024, 3, 27), date(2024, 3, 29), date(2024, 3, 25), 40, inclusive_end=True)
        self.assertEqual(pos.width, 120)

    def test_projector_uses_config(self) -> None:
        config = get_default_config()
        config['timeline']['day_width'] = 20
        projector = TimelineProjector(date(2024, 3, 1), config)
        task = Task('t1', 'Task', date(2024, 3, 3), date(2024, 3, 8))

        positions = projector.positions([task])

        self.assertEqual(positions['t1'].left, 40)
        self.assertEqual(positions['t1'].width, 100)
        self.assertEqual(projector.date_at(45), date(2024, 3, 3))

    def test_idempotent(self) -> None:
        args = (date(2024, 3, 27), date(2024, 4, 2), date(2024, 3, 1), 13.5)
        self.assertEqual(project(*args), project(*args))


if __name__ == "__main__":
    unittest.main()
