"""Project document loading: JSON/YAML data into model objects."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..models.resource import DEFAULT_BASE_HOURS_PER_DAY, Resource, ResourceAssignment
from ..models.task import Dependency, Task
from .datetime_utils import to_date

logger = logging.getLogger(__name__)


def _pick(data: Dict[str, Any], *keys, default=None):
    """First present key, accepting camelCase and snake_case spellings."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _optional_date(value):
    return to_date(value) if value not in (None, '') else None


def _optional_number(value) -> Optional[float]:
    if value is None or value == '':
        return None
    return float(value)


def dependency_from_dict(data: Dict[str, Any], successor_id: Optional[str] = None) -> Dependency:
    """Parse a dependency; successor defaults to the owning task."""
    from_id = _pick(data, 'fromTaskId', 'from_task_id', 'predecessorId', 'predecessor_id')
    to_id = _pick(data, 'toTaskId', 'to_task_id', 'successorId', 'successor_id', default=successor_id)
    if from_id is None or to_id is None:
        raise ValueError(f"Dependency needs a predecessor and a successor: {data}")

    return Dependency(
        from_task_id=str(from_id),
        to_task_id=str(to_id),
        type=str(_pick(data, 'type', default='finish-to-start')),
        lag=int(_pick(data, 'lag', default=0)),
    )


def task_from_dict(data: Dict[str, Any]) -> Task:
    """Parse one task record."""
    task_id = _pick(data, 'id', 'task_id', 'taskId')
    if task_id is None:
        raise ValueError(f"Task without id: {data}")
    task_id = str(task_id)

    try:
        start = to_date(_pick(data, 'startDate', 'start_date'))
        end = to_date(_pick(data, 'endDate', 'end_date'))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Task {task_id} has invalid dates: {e}") from e

    parent_id = _pick(data, 'parentId', 'parent_id')
    phase_id = _pick(data, 'phaseId', 'phase_id')

    return Task(
        task_id=task_id,
        name=str(_pick(data, 'name', 'title', default=task_id)),
        start_date=start,
        end_date=end,
        progress=int(_pick(data, 'progress', default=0)),
        status=_pick(data, 'status', default='not-started'),
        priority=_pick(data, 'priority', default='medium'),
        parent_id=str(parent_id) if parent_id is not None else None,
        phase_id=str(phase_id) if phase_id is not None else None,
        is_phase=bool(_pick(data, 'isPhase', 'is_phase', default=False)),
        dependencies=[
            dependency_from_dict(d, task_id) for d in _pick(data, 'dependencies', default=[])
        ],
        description=_pick(data, 'description'),
        collapsed=bool(_pick(data, 'collapsed', default=False)),
    )


def assignment_from_dict(
    data: Dict[str, Any],
    tasks_by_id: Dict[str, Task],
    project: Dict[str, Any],
) -> ResourceAssignment:
    """Parse an assignment joined with its task and project."""
    task_id = str(_pick(data, 'taskId', 'task_id', default=''))
    task = tasks_by_id.get(task_id)
    if task is None:
        logger.warning("Assignment %s references unknown task %s", _pick(data, 'id'), task_id)

    return ResourceAssignment(
        assignment_id=str(_pick(data, 'id', 'assignment_id', default=f"{task_id}-assignment")),
        task_id=task_id,
        task_name=task.name if task else '',
        task_start=task.start_date if task else None,
        task_end=task.end_date if task else None,
        project_id=project.get('id'),
        project_name=project.get('name'),
        start_date=_optional_date(_pick(data, 'startDate', 'start_date')),
        end_date=_optional_date(_pick(data, 'endDate', 'end_date')),
        units=_optional_number(_pick(data, 'units')),
        hours_per_day=_optional_number(_pick(data, 'hoursPerDay', 'hours_per_day')),
    )


def resource_from_dict(
    data: Dict[str, Any],
    tasks_by_id: Dict[str, Task],
    project: Dict[str, Any],
) -> Resource:
    """Parse a resource and its assignments."""
    resource_id = _pick(data, 'id', 'resource_id')
    if resource_id is None:
        raise ValueError(f"Resource without id: {data}")

    cost = _pick(data, 'costPerHour', 'cost_per_hour')
    return Resource(
        resource_id=str(resource_id),
        name=str(_pick(data, 'name', default=resource_id)),
        type=str(_pick(data, 'type', 'role', default='person')),
        base_hours_per_day=float(_pick(data, 'baseHoursPerDay', 'base_hours_per_day', default=DEFAULT_BASE_HOURS_PER_DAY)),
        cost_per_hour=float(cost) if cost is not None else None,
        assignments=[
            assignment_from_dict(a, tasks_by_id, project)
            for a in _pick(data, 'assignments', 'resourceAssignments', default=[])
        ],
    )


def project_from_dict(data: Dict[str, Any]) -> Tuple[List[Task], List[Resource]]:
    """Build tasks and resources from a project document.

    Top-level ``dependencies`` entries are attached to their successor task.
    """
    if not isinstance(data, dict):
        raise ValueError("Project document must be a mapping")

    project = data.get('project') or {'id': data.get('id'), 'name': data.get('name')}
    tasks = [task_from_dict(t) for t in _pick(data, 'tasks', default=[])]
    tasks_by_id = {task.task_id: task for task in tasks}

    for raw in _pick(data, 'dependencies', default=[]):
        dep = dependency_from_dict(raw)
        successor = tasks_by_id.get(dep.to_task_id)
        if successor is None:
            logger.warning("Dependency %s references unknown successor", dep.key)
            continue
        successor.dependencies.append(dep)

    resources = [resource_from_dict(r, tasks_by_id, project) for r in _pick(data, 'resources', default=[])]

    logger.info("Loaded %d tasks and %d resources", len(tasks), len(resources))
    return tasks, resources


def load_project(project_path: str) -> Tuple[List[Task], List[Resource]]:
    """Load a project document from YAML or JSON file."""
    path = Path(project_path)

    if not path.exists():
        raise FileNotFoundError(f"Project file not found: {project_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported project file format: {path.suffix}")

    return project_from_dict(data)
