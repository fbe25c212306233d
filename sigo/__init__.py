"""sigo: personal task tracker with ready, waiting, and completed stores."""

from sigo.config import SigoConfig, load_config
from sigo.core.models import Task, TaskRecord, TaskState
from sigo import lifecycle

__version__ = "0.1.0"

__all__ = [
    "SigoConfig",
    "load_config",
    "Task",
    "TaskRecord",
    "TaskState",
    "lifecycle",
]
