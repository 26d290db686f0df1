"""Resource utilization: daily load per resource from overlapping assignments."""

import logging
from datetime import date
from typing import List, Optional, Sequence

from ..models.layout import AssignmentSummary, DailyUtilization
from ..models.report import UtilizationReport
from ..models.resource import DEFAULT_BASE_HOURS_PER_DAY, Resource, ResourceAssignment
from ..utils.datetime_utils import DateLike, format_date, iter_days, to_date

logger = logging.getLogger(__name__)

DEFAULT_UNITS = 100
OVERALLOCATION_THRESHOLD = 1.0


def resolve_base_hours(base_hours_per_day: Optional[float], fallback: float = DEFAULT_BASE_HOURS_PER_DAY) -> float:
    """Guard the divisor: non-positive or missing base hours use the fallback."""
    if base_hours_per_day is None or base_hours_per_day <= 0:
        logger.warning(
            "Invalid base hours per day %r, using %s", base_hours_per_day, fallback
        )
        return fallback
    return base_hours_per_day


def load_units(
    assignment: ResourceAssignment,
    base_hours_per_day: float,
    default_units: float = DEFAULT_UNITS,
) -> float:
    """Percent-hours an assignment books per day (units x hours)."""
    units = assignment.units if assignment.units is not None else default_units
    hours = assignment.hours_per_day if assignment.hours_per_day is not None else base_hours_per_day
    return units * hours


def contribution(
    assignment: ResourceAssignment,
    base_hours_per_day: float,
    default_units: float = DEFAULT_UNITS,
) -> float:
    """Fraction of one resource-day an assignment uses.

    A 100% assignment at base hours contributes exactly 1.0.
    """
    return load_units(assignment, base_hours_per_day, default_units) / (base_hours_per_day * 100)


def aggregate(
    assignments: Sequence[ResourceAssignment],
    window_start: DateLike,
    window_end: DateLike,
    base_hours_per_day: Optional[float] = DEFAULT_BASE_HOURS_PER_DAY,
    default_units: float = DEFAULT_UNITS,
    threshold: float = OVERALLOCATION_THRESHOLD,
    fallback_base_hours: float = DEFAULT_BASE_HOURS_PER_DAY,
) -> List[DailyUtilization]:
    """One DailyUtilization record per calendar day of the closed window."""
    base_hours = resolve_base_hours(base_hours_per_day, fallback_base_hours)
    series: List[DailyUtilization] = []

    for day in iter_days(window_start, window_end):
        active = [a for a in assignments if a.is_active_on(day)]

        # numerators are summed before the single division
        summaries = []
        booked = 0.0
        for a in active:
            load = load_units(a, base_hours, default_units)
            booked += load
            share = load / (base_hours * 100)
            summaries.append(AssignmentSummary(
                id=a.assignment_id,
                task_id=a.task_id,
                task_name=a.task_name,
                units=a.units if a.units is not None else default_units,
                hours_per_day=a.hours_per_day if a.hours_per_day is not None else base_hours,
                project_id=a.project_id,
                project_name=a.project_name,
                contribution=share,
            ))

        raw = booked / (base_hours * 100)
        series.append(DailyUtilization(
            date=format_date(day),
            utilization=min(raw, 1.0),
            raw_utilization=raw,
            is_overallocated=raw > threshold,
            assignments=summaries,
        ))

    return series


class UtilizationAggregator:
    """Builds utilization reports with configured defaults."""

    def __init__(self, config: dict):
        """Initialize aggregator with configuration."""
        self.config = config
        self.utilization_config = config.get('utilization', {})
        self.default_units = self.utilization_config.get('default_units', DEFAULT_UNITS)
        self.base_hours_per_day = self.utilization_config.get('base_hours_per_day', DEFAULT_BASE_HOURS_PER_DAY)
        self.threshold = self.utilization_config.get('overallocation_threshold', OVERALLOCATION_THRESHOLD)

    def aggregate(
        self,
        assignments: Sequence[ResourceAssignment],
        window_start: DateLike,
        window_end: DateLike,
        base_hours_per_day: Optional[float] = None,
    ) -> List[DailyUtilization]:
        """Daily utilization series for one set of assignments."""
        if base_hours_per_day is None:
            base_hours_per_day = self.base_hours_per_day
        return aggregate(
            assignments,
            window_start,
            window_end,
            base_hours_per_day,
            default_units=self.default_units,
            threshold=self.threshold,
            fallback_base_hours=self.base_hours_per_day,
        )

    def report(self, resource: Resource, window_start: DateLike, window_end: DateLike) -> UtilizationReport:
        """Utilization report for a single resource."""
        start = to_date(window_start)
        end = to_date(window_end)
        in_window = [a for a in resource.assignments if a.overlaps(start, end)]

        base_hours = resolve_base_hours(resource.base_hours_per_day, self.base_hours_per_day)
        daily = self.aggregate(in_window, start, end, base_hours)

        return UtilizationReport(
            resource_id=resource.resource_id,
            resource_name=resource.name,
            resource_type=resource.type,
            base_hours_per_day=base_hours,
            cost_per_hour=resource.cost_per_hour,
            window_start=start,
            window_end=end,
            daily=daily,
            summary_stats=self._compute_summary_stats(daily, in_window),
        )

    def aggregate_resources(
        self,
        resources: Sequence[Resource],
        window_start: DateLike,
        window_end: DateLike,
    ) -> List[UtilizationReport]:
        """Utilization reports for every resource, in input order."""
        return [self.report(resource, window_start, window_end) for resource in resources]

    def _compute_summary_stats(
        self,
        daily: List[DailyUtilization],
        assignments: List[ResourceAssignment],
    ) -> dict:
        """Compute summary statistics for the report."""
        if not daily:
            return {
                'days': 0,
                'assignments_in_window': len(assignments),
                'overallocated_days': 0,
                'first_overallocated_day': None,
                'peak_raw_utilization': 0.0,
                'average_utilization': 0.0,
            }

        return {
            'days': len(daily),
            'assignments_in_window': len(assignments),
            'overallocated_days': sum(1 for d in daily if d.is_overallocated),
            'first_overallocated_day': first_overallocated_day(daily),
            'peak_raw_utilization': max(d.raw_utilization for d in daily),
            'average_utilization': sum(d.utilization for d in daily) / len(daily),
        }


def first_overallocated_day(daily: Sequence[DailyUtilization]) -> Optional[date]:
    """Earliest overallocated date of a series, if any."""
    for day in daily:
        if day.is_overallocated:
            return to_date(day.date)
    return None
