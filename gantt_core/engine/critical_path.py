"""Critical path analysis over the task dependency graph."""

import logging
from collections import deque
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from ..models.task import Dependency, Task

logger = logging.getLogger(__name__)


@dataclass
class CriticalPathNode:
    """Scheduling window of one task after the forward and backward pass."""

    task: Task
    duration_days: int
    earliest_start: date
    earliest_finish: date
    latest_start: date
    latest_finish: date
    slack: int = 0
    is_critical: bool = False


def collect_dependencies(tasks: Sequence[Task]) -> List[Dependency]:
    """All dependencies declared on the tasks, in task order."""
    return [dep for task in tasks for dep in task.dependencies]


def topological_order(tasks: Sequence[Task], dependencies: Sequence[Dependency]) -> List[Task]:
    """Tasks ordered so predecessors come first.

    Tasks caught in a cycle are appended in input order after the rest and a
    warning is logged.
    """
    by_id = {task.task_id: task for task in tasks}
    successors: Dict[str, List[str]] = {task_id: [] for task_id in by_id}
    in_degree: Dict[str, int] = {task_id: 0 for task_id in by_id}

    for dep in dependencies:
        if dep.from_task_id in by_id and dep.to_task_id in by_id:
            successors[dep.from_task_id].append(dep.to_task_id)
            in_degree[dep.to_task_id] += 1

    queue = deque(task.task_id for task in tasks if in_degree[task.task_id] == 0)
    ordered: List[Task] = []
    seen = set()

    while queue:
        task_id = queue.popleft()
        if task_id in seen:
            continue
        seen.add(task_id)
        ordered.append(by_id[task_id])
        for succ_id in successors[task_id]:
            in_degree[succ_id] -= 1
            if in_degree[succ_id] == 0:
                queue.append(succ_id)

    if len(ordered) < len(by_id):
        cyclic = [task for task in tasks if task.task_id not in seen]
        logger.warning(
            "Cyclic dependency detected among tasks: %s",
            ", ".join(task.task_id for task in cyclic),
        )
        ordered.extend(cyclic)

    return ordered


def analyze(
    tasks: Sequence[Task],
    dependencies: Optional[Sequence[Dependency]] = None,
) -> Dict[str, CriticalPathNode]:
    """Run the forward and backward pass; nodes keyed by task id.

    Every dependency is treated as finish-to-start with its lag in days.
    """
    if not tasks:
        return {}
    if dependencies is None:
        dependencies = collect_dependencies(tasks)

    nodes: Dict[str, CriticalPathNode] = {}
    for task in tasks:
        duration = max(0, (task.end_date - task.start_date).days)
        nodes[task.task_id] = CriticalPathNode(
            task=task,
            duration_days=duration,
            earliest_start=task.start_date,
            earliest_finish=task.start_date + timedelta(days=duration),
            latest_start=task.start_date,
            latest_finish=task.start_date + timedelta(days=duration),
        )

    incoming: Dict[str, List[Dependency]] = {task_id: [] for task_id in nodes}
    outgoing: Dict[str, List[Dependency]] = {task_id: [] for task_id in nodes}
    for dep in dependencies:
        if dep.from_task_id in nodes and dep.to_task_id in nodes:
            outgoing[dep.from_task_id].append(dep)
            incoming[dep.to_task_id].append(dep)

    ordered = topological_order(tasks, dependencies)

    # Forward pass
    for task in ordered:
        node = nodes[task.task_id]
        if not incoming[task.task_id]:
            continue
        node.earliest_start = max(
            nodes[dep.from_task_id].earliest_finish + timedelta(days=dep.lag or 0)
            for dep in incoming[task.task_id]
        )
        node.earliest_finish = node.earliest_start + timedelta(days=node.duration_days)

    project_end = max(node.earliest_finish for node in nodes.values())

    for node in nodes.values():
        node.latest_finish = project_end
        node.latest_start = project_end - timedelta(days=node.duration_days)

    # Backward pass
    for task in reversed(ordered):
        node = nodes[task.task_id]
        for dep in outgoing[task.task_id]:
            limit = nodes[dep.to_task_id].latest_start - timedelta(days=dep.lag or 0)
            if limit < node.latest_finish:
                node.latest_finish = limit
        node.latest_start = node.latest_finish - timedelta(days=node.duration_days)
        node.slack = (node.latest_finish - node.earliest_finish).days
        node.is_critical = node.slack == 0

    return nodes


def critical_tasks(
    tasks: Sequence[Task],
    dependencies: Optional[Sequence[Dependency]] = None,
) -> List[Task]:
    """Tasks with zero slack, in input order."""
    nodes = analyze(tasks, dependencies)
    return [task for task in tasks if nodes[task.task_id].is_critical]


def task_slack(
    task_id: str,
    tasks: Sequence[Task],
    dependencies: Optional[Sequence[Dependency]] = None,
) -> int:
    """Total slack in days of one task; unknown tasks have no slack."""
    node = analyze(tasks, dependencies).get(task_id)
    return node.slack if node else 0
