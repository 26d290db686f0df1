"""Synthetic project generator for demos and large-list layouts."""

import random
from datetime import date, timedelta
from typing import List, Optional, Tuple

from ..models.resource import Resource, ResourceAssignment
from ..models.task import Dependency, DependencyType, Task


class ProjectGenerator:
    """Generates deterministic projects with phases, dependencies and resources."""

    def __init__(self, seed: int = 42, config: Optional[dict] = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.gen_config = self.config.get('generator', {})

    def generate_tasks(
        self,
        start_date: date,
        phase_count: int,
        tasks_per_phase: int,
        dependency_probability: float = 0.5,
    ) -> List[Task]:
        """Generate phases, each followed by its sub-tasks."""
        tasks = []
        statuses = ['not-started', 'in-progress', 'completed', 'delayed']
        priorities = ['low', 'medium', 'high', 'critical']
        dependency_types = [t.value for t in DependencyType]

        phase_start = start_date
        previous_task_id = None

        for p in range(phase_count):
            phase_id = f"phase_{p:02d}"
            phase = Task(
                task_id=phase_id,
                name=f"Phase {p + 1}",
                start_date=phase_start,
                end_date=phase_start,
                is_phase=True,
            )
            tasks.append(phase)

            task_start = phase_start
            sub_tasks = []
            for i in range(tasks_per_phase):
                task_id = f"task_{p:02d}_{i:03d}"

                # Mostly short tasks, a few long ones
                if self.random.random() < 0.7:
                    duration = self.random.randint(1, 5)
                else:
                    duration = self.random.randint(5, 15)

                dependencies = []
                if previous_task_id and self.random.random() < dependency_probability:
                    dependencies.append(Dependency(
                        from_task_id=previous_task_id,
                        to_task_id=task_id,
                        type=self.random.choice(dependency_types),
                    ))

                task = Task(
                    task_id=task_id,
                    name=f"Task {p + 1}.{i + 1}",
                    start_date=task_start,
                    end_date=task_start + timedelta(days=duration),
                    progress=self.random.choice([0, 25, 50, 75, 100]),
                    status=self.random.choice(statuses),
                    priority=self.random.choice(priorities),
                    parent_id=phase_id,
                    phase_id=phase_id,
                    dependencies=dependencies,
                )
                sub_tasks.append(task)
                previous_task_id = task_id

                # Overlap some tasks with their predecessor
                task_start = task.end_date - timedelta(days=self.random.randint(0, 1))

            if sub_tasks:
                phase.end_date = max(t.end_date for t in sub_tasks)
                phase.progress = int(sum(t.progress for t in sub_tasks) / len(sub_tasks) + 0.5)
            tasks.extend(sub_tasks)
            phase_start = phase.end_date + timedelta(days=1)

        return tasks

    def generate_resources(
        self,
        tasks: List[Task],
        count: int,
        project_id: str = 'project_synthetic',
        project_name: str = 'Synthetic Project',
    ) -> List[Resource]:
        """Generate resources assigned to the non-phase tasks."""
        types = ['person', 'equipment', 'material']
        resources = [
            Resource(
                resource_id=f"resource_{r:02d}",
                name=f"Resource {r + 1}",
                type=types[r % len(types)],
                base_hours_per_day=self.random.choice([6, 8, 8, 8]),
            )
            for r in range(count)
        ]
        if not resources:
            return resources

        work = [task for task in tasks if not task.is_phase]
        for n, task in enumerate(work):
            resource = self.random.choice(resources)

            # Some assignments only cover part of the task
            start_date = end_date = None
            if self.random.random() < 0.2 and task.end_date > task.start_date:
                start_date = task.start_date + timedelta(days=1)
                end_date = task.end_date

            resource.assignments.append(ResourceAssignment(
                assignment_id=f"assignment_{n:04d}",
                task_id=task.task_id,
                task_name=task.name,
                task_start=task.start_date,
                task_end=task.end_date,
                project_id=project_id,
                project_name=project_name,
                start_date=start_date,
                end_date=end_date,
                units=self.random.choice([None, 50, 100]),
                hours_per_day=self.random.choice([None, None, 4, 8]),
            ))

        return resources

    def generate_project(
        self,
        start_date: date,
        phase_count: Optional[int] = None,
        tasks_per_phase: Optional[int] = None,
        resource_count: Optional[int] = None,
    ) -> Tuple[List[Task], List[Resource]]:
        """Generate a complete project with resources."""
        if phase_count is None:
            phase_count = self.gen_config.get('phase_count', 4)
        if tasks_per_phase is None:
            tasks_per_phase = self.gen_config.get('tasks_per_phase', 6)
        if resource_count is None:
            resource_count = self.gen_config.get('resource_count', 3)
        dependency_probability = self.gen_config.get('dependency_probability', 0.5)

        tasks = self.generate_tasks(start_date, phase_count, tasks_per_phase, dependency_probability)
        resources = self.generate_resources(tasks, resource_count)

        return tasks, resources
