"""Core package: domain model and exceptions."""

from sigo.core.models import TaskRecord, TaskState, Task
from sigo.core.exceptions import (
    SigoError,
    StorageError,
    StoreUnavailableError,
    CorruptStoreError,
    InvalidTransitionError,
    ConfigError,
)

__all__ = [
    "TaskRecord",
    "TaskState",
    "Task",
    "SigoError",
    "StorageError",
    "StoreUnavailableError",
    "CorruptStoreError",
    "InvalidTransitionError",
    "ConfigError",
]
