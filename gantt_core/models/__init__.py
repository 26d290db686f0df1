"""Data models."""

from .layout import (
    AssignmentSummary,
    DailyUtilization,
    DependencyCoordinate,
    TimelineItem,
    TimelinePosition,
    ViewportRange,
)
from .report import GanttLayout, UtilizationReport
from .resource import Resource, ResourceAssignment
from .task import Dependency, DependencyType, Task

__all__ = [
    'AssignmentSummary',
    'DailyUtilization',
    'Dependency',
    'DependencyCoordinate',
    'DependencyType',
    'GanttLayout',
    'Resource',
    'ResourceAssignment',
    'Task',
    'TimelineItem',
    'TimelinePosition',
    'UtilizationReport',
    'ViewportRange',
]
