"""
Store layer for task persistence.

Canonical exports:
- read_records / write_records: Atomic whole-file JSON persistence
- TaskStore / MutableTaskStore: Per-state stores
- READY_STORE, WAITING_STORE, COMPLETED_STORE, store_for
- data_dir_lock: Optional single-writer lock for the home directory
"""

from sigo.store.atomic import read_records, write_records
from sigo.store.repository import (
    TaskStore,
    MutableTaskStore,
    READY_STORE,
    WAITING_STORE,
    COMPLETED_STORE,
    store_for,
    mutable_store_for,
)
from sigo.store.lock import DataDirLock, data_dir_lock

__all__ = [
    "read_records",
    "write_records",
    "TaskStore",
    "MutableTaskStore",
    "READY_STORE",
    "WAITING_STORE",
    "COMPLETED_STORE",
    "store_for",
    "mutable_store_for",
    "DataDirLock",
    "data_dir_lock",
]
