import unittest
from datetime import date

from gantt_core.models.task import Task
from gantt_core.utils.tasks import (
    calculate_phase_progress,
    calculate_project_progress,
    filter_tasks_by_search_term,
    filter_tasks_by_view,
    flatten_visible,
    group_tasks_by_parent,
    update_phases_progress,
)

D = date(2024, 1, 1)


def _tasks():
    return [
        Task('p1', 'Design', D, D, is_phase=True),
        Task('t1', 'Sketch layout', D, D, progress=40, parent_id='p1', description='Rough wireframes'),
        Task('t2', 'Review', D, D, progress=80, parent_id='p1'),
        Task('p2', 'Build', D, D, is_phase=True, collapsed=True),
        Task('t3', 'Implement', D, D, progress=25, parent_id='p2'),
        Task('t4', 'Deploy', D, D),
    ]


class TestTaskTree(unittest.TestCase):
    def test_group_by_parent(self) -> None:
        groups = group_tasks_by_parent(_tasks())
        self.assertEqual([t.task_id for t in groups['root']], ['p1', 'p2', 't4'])
        self.assertEqual([t.task_id for t in groups['p1']], ['t1', 't2'])

    def test_flatten_uses_collapsed_flag(self) -> None:
        visible = flatten_visible(_tasks())
        self.assertEqual([t.task_id for t in visible], ['p1', 't1', 't2', 'p2', 't4'])

    def test_flatten_with_expanded_set(self) -> None:
        visible = flatten_visible(_tasks(), expanded_ids={'p2'})
        self.assertEqual([t.task_id for t in visible], ['p1', 'p2', 't3', 't4'])

    def test_orphans_are_top_level(self) -> None:
        tasks = [Task('x', 'Orphan', D, D, parent_id='gone')]
        self.assertEqual([t.task_id for t in flatten_visible(tasks)], ['x'])

    def test_search_filter(self) -> None:
        tasks = _tasks()
        self.assertEqual([t.task_id for t in filter_tasks_by_search_term(tasks, 'WIRE')], ['t1'])
        self.assertEqual(len(filter_tasks_by_search_term(tasks, '')), len(tasks))

    def test_view_filter(self) -> None:
        tasks = _tasks()
        self.assertEqual(filter_tasks_by_view(tasks, 'projects'), [])
        self.assertEqual([t.task_id for t in filter_tasks_by_view(tasks, 'project')], ['p1', 'p2'])
        self.assertEqual([t.task_id for t in filter_tasks_by_view(tasks, 'phase', 'p1')], ['t1', 't2'])
        self.assertEqual(filter_tasks_by_view(tasks, 'phase', None), [])

    def test_progress_rollup(self) -> None:
        tasks = _tasks()
        self.assertEqual(calculate_phase_progress(tasks, 'p1'), 60)
        self.assertEqual(calculate_phase_progress(tasks, 't4'), 0)

        update_phases_progress(tasks)

        self.assertEqual(tasks[0].progress, 60)
        self.assertEqual(tasks[3].progress, 25)
        # (60 + 25) / 2 rounds half up
        self.assertEqual(calculate_project_progress(tasks), 43)
        self.assertEqual(calculate_project_progress([]), 0)

    def test_progress_is_clamped(self) -> None:
        self.assertEqual(Task('x', 'X', D, D, progress=140).progress, 100)
        self.assertEqual(Task('x', 'X', D, D, progress=-5).progress, 0)


if __name__ == "__main__":
    unittest.main()
