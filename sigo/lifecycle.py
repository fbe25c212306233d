"""
Task lifecycle coordinator: cross-store lookup, transitions, and id issuance.

Status machine:
- ready -> waiting (wait)
- waiting -> ready (back)
- ready|waiting|completed -> completed (complete)

A transition is two independent store writes (delete from origin, add to
destination). There is no cross-file atomicity: a crash between the two can
leave a task in neither or both stores.
"""

import logging
from typing import List, Optional

from sigo.config import SigoConfig
from sigo.core.exceptions import InvalidTransitionError
from sigo.core.models import Task, TaskRecord, TaskState
from sigo.store.lock import data_dir_lock
from sigo.store.repository import (
    COMPLETED_STORE,
    READY_STORE,
    WAITING_STORE,
    mutable_store_for,
    store_for,
)

logger = logging.getLogger(__name__)

# Lookup precedence when an id is present in more than one store
LOOKUP_ORDER = (TaskState.READY, TaskState.WAITING, TaskState.COMPLETED)


def get_task(cfg: SigoConfig, task_id: int) -> Optional[Task]:
    """Find a task by id across all stores.

    Probes Ready, then Waiting, then Completed and returns the first match.

    Args:
        cfg: Configuration
        task_id: Task id to look up

    Returns:
        Task tagged with the state it was found in, None if no store has it
    """
    for state in LOOKUP_ORDER:
        record = store_for(state).get_by_id(cfg, task_id)
        if record is not None:
            return Task(state, record)
    return None


def list_tasks(cfg: SigoConfig, state: Optional[TaskState] = None) -> List[Task]:
    """List tasks of one state, or of every state in lookup order."""
    states = LOOKUP_ORDER if state is None else (state,)
    tasks = []
    for s in states:
        tasks.extend(Task(s, record) for record in store_for(s).read_tasks(cfg))
    return tasks


def issue_task_id(cfg: SigoConfig) -> int:
    """Issue the smallest positive id unused by Ready and Waiting tasks.

    The search is bounded by len(used) + 1, which always contains a free id.
    Completed ids are not considered and may be reissued.

    Examples:
        {} -> 1, {1, 2, 3} -> 4, {2, 3} -> 1, {1, 3} -> 2
    """
    used_ids = {record.id for record in READY_STORE.read_tasks(cfg)}
    used_ids.update(record.id for record in WAITING_STORE.read_tasks(cfg))

    max_id = len(used_ids) + 1
    for candidate in range(1, max_id + 1):
        if candidate not in used_ids:
            return candidate

    # Unreachable: len(used_ids) + 1 candidates cannot all be used
    raise RuntimeError(f"No free task id in 1..{max_id}")


def new_ready_task(cfg: SigoConfig, description: str) -> Task:
    """Build a Ready task with a freshly issued id. Does not persist it."""
    record = TaskRecord(id=issue_task_id(cfg), description=description)
    return Task.ready(record)


def create_task(cfg: SigoConfig, description: str) -> Task:
    """Create a Ready task and persist it.

    Raises:
        ValueError: If description is empty
    """
    if not description or not description.strip():
        raise ValueError("Task description cannot be empty")

    with data_dir_lock(cfg):
        task = new_ready_task(cfg, description)
        READY_STORE.add_task(cfg, task.record)

    logger.info("Created task #%d", task.id)
    return task


def _raise_stale(cfg: SigoConfig, task: Task, destination: TaskState) -> None:
    """Report a task whose state tag no longer matches the stores."""
    current = get_task(cfg, task.id)
    from_state = current.state.value if current is not None else "missing"
    logger.warning(
        "Task #%d is no longer %s (now %s)", task.id, task.state.value, from_state
    )
    raise InvalidTransitionError(task.id, from_state, destination.value)


def _move(
    cfg: SigoConfig, task: Task, origin: TaskState, destination: TaskState
) -> Task:
    if task.state is not origin:
        raise InvalidTransitionError(task.id, task.state.value, destination.value)

    origin_store = mutable_store_for(origin)

    with data_dir_lock(cfg):
        if not origin_store.delete_by_id(cfg, task.id):
            _raise_stale(cfg, task, destination)
        store_for(destination).add_task(cfg, task.record)

    logger.info("Moved task #%d from %s to %s", task.id, origin.value, destination.value)
    return Task(destination, task.record)


def wait(cfg: SigoConfig, task: Task) -> Task:
    """Move a Ready task to Waiting.

    Returns:
        The task tagged Waiting

    Raises:
        InvalidTransitionError: If the task is not Ready, or no longer is
    """
    return _move(cfg, task, TaskState.READY, TaskState.WAITING)


def back(cfg: SigoConfig, task: Task) -> Task:
    """Move a Waiting task back to Ready.

    Returns:
        The task tagged Ready

    Raises:
        InvalidTransitionError: If the task is not Waiting, or no longer is
    """
    return _move(cfg, task, TaskState.WAITING, TaskState.READY)


def complete(cfg: SigoConfig, task: Task) -> Task:
    """Move a task to Completed.

    Ready and Waiting tasks are removed from their own store first. Completing
    an already Completed task appends a duplicate record; this is not
    idempotent.

    Returns:
        The task tagged Completed

    Raises:
        InvalidTransitionError: If a Ready or Waiting task is no longer in
            its store
    """
    with data_dir_lock(cfg):
        if task.is_completed:
            logger.warning(
                "Task #%d is already completed; recording it again", task.id
            )
        elif not mutable_store_for(task.state).delete_by_id(cfg, task.id):
            _raise_stale(cfg, task, TaskState.COMPLETED)

        COMPLETED_STORE.add_task(cfg, task.record)

    logger.info("Completed task #%d", task.id)
    return Task.completed(task.record)
