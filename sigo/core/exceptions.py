"""Core exceptions: storage, transition, and configuration errors."""

from pathlib import Path
from typing import Union


class SigoError(Exception):
    """Base exception for sigo errors."""

    pass


class StorageError(SigoError):
    """Raised when a store file cannot be read or written."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class StoreUnavailableError(StorageError):
    """Raised when a store file cannot be opened, created, or replaced."""

    pass


class CorruptStoreError(StorageError):
    """Raised when a store file's content is not a valid list of task records."""

    pass


class InvalidTransitionError(SigoError):
    """Raised when a task is moved along a transition its state does not allow."""

    def __init__(self, task_id: int, from_state: str, to_state: str):
        self.task_id = task_id
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Task #{task_id} cannot move from {from_state} to {to_state}"
        )


class ConfigError(SigoError):
    """Raised when the configuration file is unreadable or malformed."""

    pass
