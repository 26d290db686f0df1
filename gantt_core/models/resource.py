"""Resource and assignment data models."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

DEFAULT_BASE_HOURS_PER_DAY = 8


@dataclass
class ResourceAssignment:
    """A resource's assignment to a task, joined with the task and project."""

    assignment_id: str
    task_id: str
    task_name: str = ''
    task_start: Optional[date] = None
    task_end: Optional[date] = None
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    units: Optional[float] = None
    hours_per_day: Optional[float] = None

    def effective_interval(self) -> Tuple[Optional[date], Optional[date]]:
        """Own dates when both are set, otherwise the linked task's dates."""
        if self.start_date is not None and self.end_date is not None:
            return self.start_date, self.end_date
        return self.task_start, self.task_end

    def is_active_on(self, day: date) -> bool:
        """Check if the effective interval covers the day (inclusive)."""
        start, end = self.effective_interval()
        if start is None or end is None:
            return False
        return start <= day <= end

    def overlaps(self, window_start: date, window_end: date) -> bool:
        """Check if the effective interval intersects the window."""
        start, end = self.effective_interval()
        if start is None or end is None:
            return False
        return start <= window_end and end >= window_start


@dataclass
class Resource:
    """A person, machine or material with a daily capacity."""

    resource_id: str
    name: str
    type: str = 'person'
    base_hours_per_day: float = DEFAULT_BASE_HOURS_PER_DAY
    cost_per_hour: Optional[float] = None
    assignments: List[ResourceAssignment] = field(default_factory=list)
