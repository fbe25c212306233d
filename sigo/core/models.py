"""Core domain model: TaskRecord, TaskState, and the Task tagged union."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any

from sigo.constants import (
    READY_TASKS_FILE,
    WAITING_TASKS_FILE,
    COMPLETED_TASKS_FILE,
)


class TaskState(Enum):
    """Lifecycle states. Each state owns exactly one store file."""

    READY = "ready"
    WAITING = "waiting"
    COMPLETED = "completed"

    @property
    def file_name(self) -> str:
        """Store file name for this state."""
        return {
            TaskState.READY: READY_TASKS_FILE,
            TaskState.WAITING: WAITING_TASKS_FILE,
            TaskState.COMPLETED: COMPLETED_TASKS_FILE,
        }[self]


@dataclass(frozen=True)
class TaskRecord:
    """Single source of truth for the persisted task record schema."""

    id: int
    description: str

    def validate(self) -> None:
        """Validate field types at write-time."""
        # bool is an int subclass; reject it explicitly
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValueError(f"Invalid task id {self.id!r}: must be a positive integer")
        if not isinstance(self.description, str):
            raise ValueError(
                f"Invalid description for task #{self.id}: must be a string"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TaskRecord":
        """Create TaskRecord from dictionary.

        Raises:
            ValueError: If keys are missing or unexpected, or values are invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")

        expected = {"id", "description"}
        missing = expected - set(data.keys())
        if missing:
            raise ValueError(f"Missing task record keys: {sorted(missing)}")
        extra = set(data.keys()) - expected
        if extra:
            raise ValueError(f"Unexpected task record keys: {sorted(extra)}")

        record = cls(id=data["id"], description=data["description"])
        record.validate()
        return record

    def to_dict(self) -> Dict[str, Any]:
        """Convert TaskRecord to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class Task:
    """A task record tagged with the lifecycle state it currently lives in.

    Exactly one state holds at a time. Transitions never mutate a Task; they
    return a new one tagged with the destination state.
    """

    state: TaskState
    record: TaskRecord

    @classmethod
    def ready(cls, record: TaskRecord) -> "Task":
        return cls(TaskState.READY, record)

    @classmethod
    def waiting(cls, record: TaskRecord) -> "Task":
        return cls(TaskState.WAITING, record)

    @classmethod
    def completed(cls, record: TaskRecord) -> "Task":
        return cls(TaskState.COMPLETED, record)

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def description(self) -> str:
        return self.record.description

    @property
    def is_ready(self) -> bool:
        return self.state is TaskState.READY

    @property
    def is_waiting(self) -> bool:
        return self.state is TaskState.WAITING

    @property
    def is_completed(self) -> bool:
        return self.state is TaskState.COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output (record fields plus state)."""
        data = self.record.to_dict()
        data["state"] = self.state.value
        return data
