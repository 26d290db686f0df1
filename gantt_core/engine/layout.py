"""Render-pass orchestration: projector, router and row virtualizer."""

from typing import Optional, Sequence

from ..models.report import GanttLayout
from ..models.task import Task
from ..utils.datetime_utils import DateLike, to_date
from .projector import TimelineProjector
from .router import DependencyRouter
from .virtualizer import Axis, ViewportVirtualizer


class GanttLayoutEngine:
    """Computes everything one render pass of the chart needs."""

    def __init__(self, config: dict):
        """Initialize layout engine with configuration."""
        self.config = config
        self.router = DependencyRouter(config)
        self.rows = ViewportVirtualizer(Axis.VERTICAL, config, item_size=self.router.row_height)

    def layout(
        self,
        tasks: Sequence[Task],
        visible_tasks: Optional[Sequence[Task]],
        view_start: DateLike,
        scroll_top: float = 0,
        viewport_height: float = 600,
        day_width: float = None,
    ) -> GanttLayout:
        """Lay out the visible tasks; ``None`` visible list means all tasks."""
        if visible_tasks is None:
            visible_tasks = tasks

        projector = TimelineProjector(view_start, self.config, day_width=day_width)
        positions = projector.positions(visible_tasks)

        coordinates = self.router.route(tasks, visible_tasks, projector.position)
        row_range = self.rows.compute_range(scroll_top, viewport_height, len(visible_tasks))

        summary = {
            'tasks_total': len(tasks),
            'tasks_visible': len(visible_tasks),
            'rows_rendered': row_range.count,
            'dependencies_total': sum(len(task.dependencies) for task in tasks),
            'dependencies_drawn': len(coordinates),
            'content_height': self.rows.total_size(len(visible_tasks)),
        }

        return GanttLayout(
            view_start=to_date(view_start),
            day_width=projector.day_width,
            row_height=self.router.row_height,
            positions=positions,
            dependencies=coordinates,
            rows=row_range,
            visible_task_ids=[task.task_id for task in visible_tasks],
            summary_stats=summary,
        )
