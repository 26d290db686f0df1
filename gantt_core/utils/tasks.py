"""Task tree helpers that build the visible task list."""

from typing import Dict, Iterable, List, Optional, Sequence

from ..models.task import Task

ROOT = 'root'


def group_tasks_by_parent(tasks: Sequence[Task]) -> Dict[str, List[Task]]:
    """Group tasks under their parent id; top-level tasks go under 'root'."""
    result: Dict[str, List[Task]] = {ROOT: []}

    for task in tasks:
        key = task.parent_id or ROOT
        result.setdefault(key, []).append(task)

    return result


def flatten_visible(tasks: Sequence[Task], expanded_ids: Optional[Iterable[str]] = None) -> List[Task]:
    """Depth-first task tree with children of collapsed groups hidden.

    A group is expanded when its id is in ``expanded_ids``; without that set,
    each task's own ``collapsed`` flag decides. Tasks whose parent is not in
    the list are treated as top-level.
    """
    known = {task.task_id for task in tasks}
    groups: Dict[str, List[Task]] = {ROOT: []}
    for task in tasks:
        key = task.parent_id if task.parent_id in known else ROOT
        groups.setdefault(key, []).append(task)

    expanded = set(expanded_ids) if expanded_ids is not None else None
    visible: List[Task] = []
    seen = set()

    def is_expanded(task: Task) -> bool:
        if expanded is not None:
            return task.task_id in expanded
        return not task.collapsed

    def visit(task: Task):
        if task.task_id in seen:
            return
        seen.add(task.task_id)
        visible.append(task)
        if is_expanded(task):
            for child in groups.get(task.task_id, []):
                visit(child)

    for task in groups[ROOT]:
        visit(task)

    return visible


def filter_tasks_by_search_term(tasks: Sequence[Task], search_term: Optional[str]) -> List[Task]:
    """Case-insensitive match on name or description."""
    if not search_term:
        return list(tasks)

    term = search_term.lower()
    return [
        task for task in tasks
        if term in task.name.lower() or (task.description and term in task.description.lower())
    ]


def filter_tasks_by_view(tasks: Sequence[Task], current_view: str, current_phase: Optional[str] = None) -> List[Task]:
    """Tasks shown by a navigation level: 'projects', 'project' or 'phase'."""
    if current_view == 'project':
        return [task for task in tasks if task.is_phase]

    if current_view == 'phase' and current_phase:
        return [task for task in tasks if task.parent_id == current_phase]

    # project overview and unknown views show no tasks
    return []


def calculate_phase_progress(tasks: Sequence[Task], phase_id: str) -> int:
    """Mean progress of a phase's sub-tasks, rounded half up; 0 without sub-tasks."""
    sub_tasks = [task for task in tasks if task.parent_id == phase_id]
    if not sub_tasks:
        return 0

    return int(sum(task.progress for task in sub_tasks) / len(sub_tasks) + 0.5)


def calculate_project_progress(tasks: Sequence[Task]) -> int:
    """Mean progress of the project's phases, rounded half up; 0 without phases."""
    phases = [task for task in tasks if task.is_phase]
    if not phases:
        return 0

    return int(sum(phase.progress for phase in phases) / len(phases) + 0.5)


def update_phases_progress(tasks: Sequence[Task]) -> None:
    """Roll sub-task progress up into each phase, in place."""
    for task in tasks:
        if task.is_phase:
            task.progress = calculate_phase_progress(tasks, task.task_id)
