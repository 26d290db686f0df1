"""Gantt scheduling and rendering engine."""

from .critical_path import analyze, critical_tasks
from .layout import GanttLayoutEngine
from .projector import TimelineProjector, project
from .router import DependencyRouter, ROW_HEIGHT, route
from .timeline import TimeScale, timeline_items
from .utilization import UtilizationAggregator, aggregate
from .virtualizer import Axis, ViewportVirtualizer, compute_range

__all__ = [
    'Axis',
    'DependencyRouter',
    'GanttLayoutEngine',
    'ROW_HEIGHT',
    'TimeScale',
    'TimelineProjector',
    'UtilizationAggregator',
    'ViewportVirtualizer',
    'aggregate',
    'analyze',
    'compute_range',
    'critical_tasks',
    'project',
    'route',
    'timeline_items',
]
