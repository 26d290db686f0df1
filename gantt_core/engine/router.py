"""Dependency routing: logical dependency graph to drawable arrow coordinates."""

import logging
import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..models.layout import DependencyCoordinate, TimelinePosition
from ..models.task import Dependency, DependencyType, Task

logger = logging.getLogger(__name__)

ROW_HEIGHT = 50

Point = Tuple[float, float]
PositionFn = Callable[[Task], TimelinePosition]
VisibleIndexFn = Callable[[str], Optional[int]]


def build_visible_index(visible_tasks: Sequence[Task]) -> Dict[str, int]:
    """Row index of each task within the filtered/rendered list.

    A task id listed twice maps to its last row.
    """
    return {task.task_id: row for row, task in enumerate(visible_tasks)}


def row_center(row_index: int, row_height: float = ROW_HEIGHT) -> float:
    """Vertical center of a row."""
    return row_index * row_height + row_height / 2


def edge_x(kind: DependencyType, from_pos: TimelinePosition, to_pos: TimelinePosition) -> Tuple[float, float]:
    """Start and end X for a dependency type.

    Unrecognized types are resolved to finish-to-start by Dependency.kind
    before reaching this point, so the final branch is that fallback too.
    """
    if kind is DependencyType.START_TO_START:
        return from_pos.left, to_pos.left
    if kind is DependencyType.FINISH_TO_FINISH:
        return from_pos.right, to_pos.right
    if kind is DependencyType.START_TO_FINISH:
        return from_pos.left, to_pos.right
    return from_pos.right, to_pos.left


def route(
    tasks: Sequence[Task],
    visible_tasks: Sequence[Task],
    position_of: PositionFn,
    row_height: float = ROW_HEIGHT,
    visible_index_of: Optional[VisibleIndexFn] = None,
) -> List[DependencyCoordinate]:
    """Compute arrow endpoints for every dependency between visible tasks.

    Output follows the visible list order, then each task's dependency
    order. A dependency whose predecessor or successor is unknown or not
    rendered is skipped.
    """
    task_map: Dict[str, Task] = {task.task_id: task for task in tasks}
    if visible_index_of is None:
        visible_index_of = build_visible_index(visible_tasks).get

    coordinates: List[DependencyCoordinate] = []

    for task in visible_tasks:
        if not task.dependencies:
            continue

        for dep in task.dependencies:
            coord = _route_one(dep, task_map, position_of, row_height, visible_index_of)
            if coord is not None:
                coordinates.append(coord)

    return coordinates


def _route_one(
    dep: Dependency,
    task_map: Dict[str, Task],
    position_of: PositionFn,
    row_height: float,
    visible_index_of: VisibleIndexFn,
) -> Optional[DependencyCoordinate]:
    from_task = task_map.get(dep.from_task_id)
    to_task = task_map.get(dep.to_task_id)
    if from_task is None or to_task is None:
        logger.debug("Skipping dependency %s: endpoint not in task set", dep.key)
        return None

    from_index = visible_index_of(from_task.task_id)
    to_index = visible_index_of(to_task.task_id)
    if from_index is None or to_index is None:
        logger.debug("Skipping dependency %s: endpoint not visible", dep.key)
        return None

    start_x, end_x = edge_x(dep.kind, position_of(from_task), position_of(to_task))

    return DependencyCoordinate(
        id=dep.key,
        start_x=start_x,
        start_y=row_center(from_index, row_height),
        end_x=end_x,
        end_y=row_center(to_index, row_height),
    )


def arrow_head(coord: DependencyCoordinate, size: float = 5) -> Tuple[Point, Point, Point]:
    """Triangular cap at the end point, oriented along the line.

    Returns (left wing, tip, right wing). A zero-length line points right.
    """
    dx = coord.end_x - coord.start_x
    dy = coord.end_y - coord.start_y
    angle = math.atan2(dy, dx) if (dx or dy) else 0.0

    back_x = coord.end_x - size * math.cos(angle)
    back_y = coord.end_y - size * math.sin(angle)
    half = size / 2
    # perpendicular offset
    px = -math.sin(angle) * half
    py = math.cos(angle) * half

    return (
        (back_x - px, back_y - py),
        (coord.end_x, coord.end_y),
        (back_x + px, back_y + py),
    )


def dependency_path(coord: DependencyCoordinate, arrow_size: float = 5) -> str:
    """SVG path data for the line and its arrow head."""
    left, tip, right = arrow_head(coord, arrow_size)
    return (
        f"M {coord.start_x:g} {coord.start_y:g} L {coord.end_x:g} {coord.end_y:g} "
        f"M {left[0]:g} {left[1]:g} L {tip[0]:g} {tip[1]:g} L {right[0]:g} {right[1]:g}"
    )


class DependencyRouter:
    """Routes dependency arrows with configured row height."""

    def __init__(self, config: dict):
        """Initialize router with configuration."""
        self.config = config
        self.row_height = config.get('rows', {}).get('row_height', ROW_HEIGHT)
        self.arrow_size = config.get('dependencies', {}).get('arrow_size', 5)

    def route(
        self,
        tasks: Sequence[Task],
        visible_tasks: Sequence[Task],
        position_of: PositionFn,
        visible_index_of: Optional[VisibleIndexFn] = None,
    ) -> List[DependencyCoordinate]:
        """Route all dependencies between visible tasks."""
        return route(tasks, visible_tasks, position_of, self.row_height, visible_index_of)

    def paths(self, coordinates: Sequence[DependencyCoordinate]) -> Dict[str, str]:
        """SVG path data keyed by dependency id."""
        return {coord.id: dependency_path(coord, self.arrow_size) for coord in coordinates}
