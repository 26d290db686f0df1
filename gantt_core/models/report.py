"""Render-pass and utilization report models."""

from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Dict, List, Any, Optional

from .layout import DailyUtilization, DependencyCoordinate, TimelinePosition, ViewportRange


@dataclass
class GanttLayout:
    """Everything the chart needs to draw one render pass."""

    view_start: date
    day_width: float
    row_height: float
    positions: Dict[str, TimelinePosition]
    dependencies: List[DependencyCoordinate]
    rows: ViewportRange
    visible_task_ids: List[str]
    summary_stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert layout to dictionary for JSON export."""
        return asdict(self)

    def to_human_readable(self) -> str:
        """Generate human-readable log format."""
        lines = [
            f"=== Gantt Layout from {self.view_start} ===",
            f"Day width: {self.day_width}px",
            f"Row height: {self.row_height}px",
            f"Rows rendered: {self.rows.start_index}..{self.rows.end_index} "
            f"(spacers {self.rows.before_size:g}px / {self.rows.after_size:g}px)",
            "",
            "Task Bars:",
        ]

        for task_id in self.visible_task_ids:
            pos = self.positions.get(task_id)
            if pos is None:
                continue
            lines.append(f"  {task_id}: left={pos.left:g} width={pos.width:g}")

        lines.extend([
            "",
            "Dependencies:",
        ])

        for coord in self.dependencies:
            lines.append(
                f"  {coord.id}: ({coord.start_x:g}, {coord.start_y:g}) -> ({coord.end_x:g}, {coord.end_y:g})"
            )

        lines.extend([
            "",
            "Summary Statistics:",
        ])

        for key, value in self.summary_stats.items():
            lines.append(f"  {key}: {value}")

        lines.append("=" * 50)

        return "\n".join(lines)


@dataclass
class UtilizationReport:
    """Daily utilization series of one resource over a window."""

    resource_id: str
    resource_name: str
    resource_type: str
    base_hours_per_day: float
    window_start: date
    window_end: date
    daily: List[DailyUtilization]
    summary_stats: Dict[str, Any] = field(default_factory=dict)
    cost_per_hour: Optional[float] = None

    def overallocated_days(self) -> List[DailyUtilization]:
        return [day for day in self.daily if day.is_overallocated]

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for JSON export."""
        return asdict(self)

    def to_human_readable(self) -> str:
        """Generate human-readable log format."""
        lines = [
            f"=== Resource {self.resource_name} ({self.resource_id}) ===",
            f"Type: {self.resource_type}",
            f"Base hours per day: {self.base_hours_per_day:g}",
            f"Window: {self.window_start} .. {self.window_end}",
            "",
            "Daily Utilization:",
        ]

        if self.cost_per_hour is not None:
            lines.insert(3, f"Cost per hour: {self.cost_per_hour:g}")

        for day in self.daily:
            flag = "  OVERALLOCATED" if day.is_overallocated else ""
            lines.append(f"  {day.date}: {day.raw_utilization * 100:.0f}%{flag}")
            for a in day.assignments:
                lines.append(
                    f"    {a.task_name or a.task_id} [{a.project_name}]: "
                    f"{a.units:g}% x {a.hours_per_day:g}h"
                )

        lines.extend([
            "",
            "Summary Statistics:",
        ])

        for key, value in self.summary_stats.items():
            lines.append(f"  {key}: {value}")

        lines.append("=" * 50)

        return "\n".join(lines)
