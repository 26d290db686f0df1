"""Task and dependency data models."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class DependencyType(Enum):
    """How a dependency links the predecessor's and successor's edges."""

    FINISH_TO_START = 'finish-to-start'
    START_TO_START = 'start-to-start'
    FINISH_TO_FINISH = 'finish-to-finish'
    START_TO_FINISH = 'start-to-finish'

    @classmethod
    def parse(cls, value) -> Optional['DependencyType']:
        """Return the matching member, or None for unrecognized values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass
class Dependency:
    """Ordered predecessor -> successor link between two tasks."""

    from_task_id: str
    to_task_id: str
    type: str = DependencyType.FINISH_TO_START.value
    lag: int = 0

    @property
    def kind(self) -> DependencyType:
        """Resolved dependency type; unrecognized types count as finish-to-start."""
        return DependencyType.parse(self.type) or DependencyType.FINISH_TO_START

    @property
    def key(self) -> str:
        """Stable composite id used to key rendered arrows."""
        return f"{self.from_task_id}-{self.to_task_id}-{self.type}"


@dataclass
class Task:
    """A schedulable task or phase of a project."""

    task_id: str
    name: str
    start_date: date
    end_date: date
    progress: int = 0
    status: str = 'not-started'
    priority: str = 'medium'
    parent_id: Optional[str] = None
    phase_id: Optional[str] = None
    is_phase: bool = False
    dependencies: List[Dependency] = field(default_factory=list)
    description: Optional[str] = None
    collapsed: bool = False

    def __post_init__(self):
        """Clamp progress into the 0-100 range."""
        self.progress = max(0, min(100, int(self.progress or 0)))

    def get_duration_days(self) -> int:
        """Calendar days from start to end."""
        return (self.end_date - self.start_date).days
