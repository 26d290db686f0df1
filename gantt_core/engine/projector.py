"""Timeline projection: task dates to pixel intervals."""

from datetime import date, timedelta
from typing import Dict, Iterable, Optional

from ..models.layout import TimelinePosition
from ..models.task import Task
from ..utils.datetime_utils import DateLike, days_between, to_date

DEFAULT_MINIMUM_SPAN_DAYS = 1


def project(
    task_start: DateLike,
    task_end: DateLike,
    view_start: DateLike,
    day_width: float,
    minimum_span_days: int = DEFAULT_MINIMUM_SPAN_DAYS,
    inclusive_end: bool = False,
) -> TimelinePosition:
    """Map a task's date range to a {left, width} pixel interval.

    Dates are compared at whole-day resolution. An end date before the start
    date never raises; the bar is clamped to ``minimum_span_days``.
    """
    left = days_between(view_start, task_start) * day_width

    span = days_between(task_start, task_end)
    if inclusive_end:
        span += 1
    width = max(span, minimum_span_days) * day_width

    return TimelinePosition(left=left, width=width)


class TimelineProjector:
    """Projects tasks against a fixed view start and day width."""

    def __init__(self, view_start: DateLike, config: dict, day_width: Optional[float] = None):
        """Initialize projector with view origin and configuration."""
        self.config = config
        self.timeline_config = config.get('timeline', {})
        self.view_start = view_start
        self.day_width = day_width if day_width is not None else self.timeline_config.get('day_width', 40)
        self.minimum_span_days = self.timeline_config.get('minimum_span_days', DEFAULT_MINIMUM_SPAN_DAYS)
        self.inclusive_end = self.timeline_config.get('inclusive_end', False)

    def position(self, task: Task) -> TimelinePosition:
        """Pixel interval for one task."""
        return project(
            task.start_date,
            task.end_date,
            self.view_start,
            self.day_width,
            minimum_span_days=self.minimum_span_days,
            inclusive_end=self.inclusive_end,
        )

    def positions(self, tasks: Iterable[Task]) -> Dict[str, TimelinePosition]:
        """Pixel intervals keyed by task id."""
        return {task.task_id: self.position(task) for task in tasks}

    def date_at(self, x: float) -> date:
        """Calendar date under a horizontal pixel offset."""
        return to_date(self.view_start) + timedelta(days=int(x // self.day_width))
