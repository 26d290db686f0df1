"""Derived layout values recomputed on every render pass."""

from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass(frozen=True)
class TimelinePosition:
    """Horizontal placement of a task bar in pixels."""

    left: float
    width: float

    @property
    def right(self) -> float:
        return self.left + self.width


@dataclass(frozen=True)
class DependencyCoordinate:
    """Drawable line endpoints of one dependency arrow."""

    id: str
    start_x: float
    start_y: float
    end_x: float
    end_y: float


@dataclass(frozen=True)
class AssignmentSummary:
    """An assignment's share of a resource-day."""

    id: str
    task_id: str
    task_name: str
    units: float
    hours_per_day: float
    project_id: str
    project_name: str
    contribution: float


@dataclass
class DailyUtilization:
    """Utilization of one resource on one calendar day."""

    date: str
    utilization: float
    raw_utilization: float
    is_overallocated: bool
    assignments: List[AssignmentSummary] = field(default_factory=list)


@dataclass(frozen=True)
class ViewportRange:
    """Materialized index range plus the spacer sizes around it."""

    start_index: int
    end_index: int
    before_size: float
    after_size: float

    @property
    def count(self) -> int:
        return max(0, self.end_index - self.start_index + 1)

    def __contains__(self, index: int) -> bool:
        return self.start_index <= index <= self.end_index


@dataclass(frozen=True)
class TimelineItem:
    """A header cell of the timeline."""

    date: date
    type: str  # 'primary' or 'secondary'
    label: str
    width: float
