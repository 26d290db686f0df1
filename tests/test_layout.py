import unittest
from datetime import date

from gantt_core.engine.layout import GanttLayoutEngine
from gantt_core.models.task import Dependency, Task
from gantt_core.synthetic.generator import ProjectGenerator
from gantt_core.utils.config import get_default_config
from gantt_core.utils.tasks import flatten_visible


class TestGanttLayoutEngine(unittest.TestCase):
    def setUp(self) -> None:
        self.config = get_default_config()
        self.tasks = [
            Task('a', 'A', date(2024, 1, 1), date(2024, 1, 4)),
            Task('b', 'B', date(2024, 1, 5), date(2024, 1, 6), dependencies=[Dependency('a', 'b')]),
            Task('c', 'C', date(2024, 1, 2), date(2024, 1, 3), dependencies=[Dependency('a', 'c', 'start-to-start')]),
        ]

    def test_layout_pass(self) -> None:
        engine = GanttLayoutEngine(self.config)
        layout = engine.layout(self.tasks, None, date(2024, 1, 1), scroll_top=0, viewport_height=100)

        self.assertEqual(layout.positions['a'].width, 120)
        self.assertEqual(layout.positions['b'].left, 160)
        self.assertEqual([d.id for d in layout.dependencies], ['a-b-finish-to-start', 'a-c-start-to-start'])
        first = layout.dependencies[0]
        self.assertEqual((first.start_x, first.start_y, first.end_x, first.end_y), (120, 25, 160, 75))
        self.assertEqual((layout.rows.start_index, layout.rows.end_index), (0, 2))
        self.assertEqual(layout.summary_stats['dependencies_drawn'], 2)
        self.assertIn('a-b-finish-to-start', layout.to_human_readable())

    def test_filtered_rows_shift_arrows(self) -> None:
        engine = GanttLayoutEngine(self.config)
        layout = engine.layout(self.tasks, [self.tasks[0], self.tasks[2]], date(2024, 1, 1))

        self.assertEqual([d.id for d in layout.dependencies], ['a-c-start-to-start'])
        self.assertEqual(layout.dependencies[0].end_y, 75)
        self.assertNotIn('b', layout.positions)
        self.assertEqual(layout.summary_stats['dependencies_total'], 2)

    def test_large_generated_project_is_windowed(self) -> None:
        tasks, _ = ProjectGenerator(seed=7, config=self.config).generate_project(
            date(2024, 1, 1), phase_count=20, tasks_per_phase=50,
        )
        visible = flatten_visible(tasks)
        engine = GanttLayoutEngine(self.config)

        layout = engine.layout(tasks, visible, date(2024, 1, 1), scroll_top=5000, viewport_height=500)

        self.assertEqual(layout.rows.start_index, 95)
        self.assertEqual(layout.rows.end_index, 115)
        self.assertEqual(layout.summary_stats['content_height'], len(visible) * 50)

    def test_identical_inputs_identical_layouts(self) -> None:
        engine = GanttLayoutEngine(self.config)
        first = engine.layout(self.tasks, None, date(2024, 1, 1), 10, 300)
        second = engine.layout(self.tasks, None, date(2024, 1, 1), 10, 300)
        self.assertEqual(first.to_dict(), second.to_dict())


if __name__ == "__main__":
    unittest.main()
