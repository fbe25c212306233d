"""
Per-state task stores over the atomic storage primitive.

One generic store parameterized by TaskState replaces a copy per state.
Read-modify-write operations are not atomic across their span; concurrent
writers to the same file can lose updates unless the caller holds the
data-directory lock.
"""

import logging
from pathlib import Path
from typing import List, Optional

from sigo.config import SigoConfig
from sigo.core.models import TaskRecord, TaskState
from sigo.store.atomic import read_records, write_records

logger = logging.getLogger(__name__)


class TaskStore:
    """Store for the records of one lifecycle state (append and lookup only)."""

    def __init__(self, state: TaskState):
        self.state = state

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state.name})"

    def path(self, cfg: SigoConfig) -> Path:
        """Store file path under the configured home."""
        return cfg.home / self.state.file_name

    def read_tasks(self, cfg: SigoConfig) -> List[TaskRecord]:
        """Read all records of this state."""
        return read_records(self.path(cfg))

    def write_tasks(self, cfg: SigoConfig, records: List[TaskRecord]) -> None:
        """Replace all records of this state."""
        write_records(self.path(cfg), list(records))

    def add_task(self, cfg: SigoConfig, record: TaskRecord) -> None:
        """Append a record to this state's store."""
        record.validate()
        records = self.read_tasks(cfg)
        records.append(record)
        self.write_tasks(cfg, records)
        logger.debug("Added task #%d to %s", record.id, self.state.value)

    def get_by_id(self, cfg: SigoConfig, task_id: int) -> Optional[TaskRecord]:
        """Find a record by id.

        Returns:
            The first record with a matching id, None if absent
        """
        for record in self.read_tasks(cfg):
            if record.id == task_id:
                return record
        return None


class MutableTaskStore(TaskStore):
    """Store whose records can leave it (Ready and Waiting)."""

    def delete_by_id(self, cfg: SigoConfig, task_id: int) -> bool:
        """Remove every record with a matching id.

        Returns:
            True if at least one record was removed
        """
        records = self.read_tasks(cfg)
        remaining = [r for r in records if r.id != task_id]
        if len(remaining) == len(records):
            logger.debug("Task #%d not in %s, nothing deleted", task_id, self.state.value)
            return False
        self.write_tasks(cfg, remaining)
        logger.debug("Deleted task #%d from %s", task_id, self.state.value)
        return True


READY_STORE = MutableTaskStore(TaskState.READY)
WAITING_STORE = MutableTaskStore(TaskState.WAITING)
# Completed records are permanent: no delete
COMPLETED_STORE = TaskStore(TaskState.COMPLETED)

_STORES = {
    TaskState.READY: READY_STORE,
    TaskState.WAITING: WAITING_STORE,
    TaskState.COMPLETED: COMPLETED_STORE,
}


def store_for(state: TaskState) -> TaskStore:
    """Return the store owning a state's records."""
    return _STORES[state]


def mutable_store_for(state: TaskState) -> MutableTaskStore:
    """Return the store for a state whose records can be deleted.

    Raises:
        ValueError: For COMPLETED, whose records are permanent
    """
    store = _STORES[state]
    if not isinstance(store, MutableTaskStore):
        raise ValueError(f"Records in {state.value} cannot be deleted")
    return store
