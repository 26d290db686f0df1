"""Timeline header generation for the supported time scales."""

from datetime import date, timedelta
from enum import Enum
from typing import Dict, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from ..models.layout import TimelineItem
from ..utils.datetime_utils import DateLike, days_between, get_days, to_date


class TimeScale(Enum):
    """Zoom level of the chart."""

    DAY = 'day'
    WEEK = 'week'
    MONTH = 'month'
    QUARTER = 'quarter'
    YEAR = 'year'


DEFAULT_DAY_WIDTHS: Dict[TimeScale, int] = {
    TimeScale.DAY: 40,
    TimeScale.WEEK: 20,
    TimeScale.MONTH: 8,
    TimeScale.QUARTER: 4,
    TimeScale.YEAR: 2,
}


def get_default_day_width(scale) -> int:
    """Pixels per day for a time scale; unknown scales use the day width."""
    try:
        scale = TimeScale(scale) if not isinstance(scale, TimeScale) else scale
    except ValueError:
        return DEFAULT_DAY_WIDTHS[TimeScale.DAY]
    return DEFAULT_DAY_WIDTHS[scale]


def timeline_dates(view_start: DateLike, view_end: DateLike) -> List[date]:
    """Every date shown by the timeline, start and end included."""
    return get_days(view_start, view_end)


def _clipped_width(start: date, end: date, view_start: date, view_end: date, day_width: float) -> float:
    actual_start = max(start, view_start)
    actual_end = min(end, view_end)
    return (days_between(actual_start, actual_end) + 1) * day_width


def _month_starts(view_start: date, view_end: date) -> List[date]:
    months = []
    current = view_start.replace(day=1)
    while current <= view_end:
        months.append(current)
        current += relativedelta(months=1)
    return months


def timeline_items(scale, view_start: DateLike, view_end: DateLike, day_width: float) -> List[TimelineItem]:
    """Header cells for the view at the given scale.

    Week cells start on Monday; partial weeks and months at the edges of the
    view are clipped so primary widths add up to the full view width.
    """
    scale = TimeScale(scale) if not isinstance(scale, TimeScale) else scale
    start = to_date(view_start)
    end = to_date(view_end)
    items: List[TimelineItem] = []

    if end < start:
        return items

    if scale is TimeScale.DAY:
        for day in get_days(start, end):
            items.append(TimelineItem(day, 'primary', f"{day:%a} {day.day}", day_width))

    elif scale is TimeScale.WEEK:
        week_start = start - timedelta(days=start.weekday())
        while week_start <= end:
            week_end = week_start + timedelta(days=6)
            items.append(TimelineItem(
                week_start,
                'primary',
                f"w {week_start.isocalendar()[1]}",
                _clipped_width(week_start, week_end, start, end, day_width),
            ))
            for day in get_days(max(week_start, start), min(week_end, end)):
                items.append(TimelineItem(day, 'secondary', f"{day:%a} {day.day}", day_width))
            week_start += timedelta(days=7)

    elif scale is TimeScale.MONTH:
        for month_start in _month_starts(start, end):
            month_end = month_start + relativedelta(months=1, days=-1)
            items.append(TimelineItem(
                month_start,
                'primary',
                f"{month_start:%B %Y}",
                _clipped_width(month_start, month_end, start, end, day_width),
            ))

    else:
        # quarter and year: one short-labelled cell per month
        for month_start in _month_starts(start, end):
            month_end = month_start + relativedelta(months=1, days=-1)
            items.append(TimelineItem(
                month_start,
                'primary',
                f"{month_start:%b}",
                _clipped_width(month_start, month_end, start, end, day_width),
            ))

    return items


def ensure_minimum_view_duration(
    view_start: DateLike,
    view_end: DateLike,
    minimum_months: int = 12,
) -> Tuple[date, date]:
    """Extend the view end so the chart spans at least ``minimum_months``."""
    start = to_date(view_start)
    end = to_date(view_end)
    extended_end = start + relativedelta(months=minimum_months)

    if end < extended_end:
        return start, extended_end
    return start, end


def view_bounds(dates: List[date], padding_days: int = 0, minimum_months: Optional[int] = None) -> Tuple[date, date]:
    """View window covering the given dates, optionally padded and extended."""
    if not dates:
        raise ValueError("Cannot compute view bounds without dates")
    start = min(dates) - timedelta(days=padding_days)
    end = max(dates) + timedelta(days=padding_days)
    if minimum_months:
        return ensure_minimum_view_duration(start, end, minimum_months)
    return start, end
