"""
Data-directory lock serializing multi-step operations across processes.

Uses an exclusive fcntl lock on <home>/.sigo.lock. The lock is reentrant
within a process so locked operations can call one another.
"""

import fcntl
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, TextIO

from sigo.constants import LOCK_FILE_NAME
from sigo.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class DataDirLock:
    """Reentrant exclusive lock scoped to one sigo home directory."""

    def __init__(self, home: Path):
        self.lock_file = Path(home) / LOCK_FILE_NAME
        self._lock = threading.RLock()
        self._file_lock_handle: Optional[TextIO] = None
        self._depth = 0

    def acquire(self) -> None:
        """Acquire the lock, blocking until it is available."""
        self._lock.acquire()
        if self._depth == 0:
            try:
                self.lock_file.parent.mkdir(parents=True, exist_ok=True)
                handle = open(self.lock_file, "a+")
            except OSError as e:
                self._lock.release()
                raise StoreUnavailableError(self.lock_file, f"cannot open lock file: {e}")
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            except OSError as e:
                handle.close()
                self._lock.release()
                raise StoreUnavailableError(self.lock_file, f"cannot lock: {e}")
            except BaseException:
                handle.close()
                self._lock.release()
                raise
            self._file_lock_handle = handle
            logger.debug("Acquired data directory lock %s", self.lock_file)
        self._depth += 1

    def release(self) -> None:
        """Release one level of the lock."""
        if self._depth == 0:
            raise RuntimeError("DataDirLock released without being held")
        self._depth -= 1
        if self._depth == 0 and self._file_lock_handle is not None:
            fcntl.flock(self._file_lock_handle.fileno(), fcntl.LOCK_UN)
            self._file_lock_handle.close()
            self._file_lock_handle = None
            logger.debug("Released data directory lock %s", self.lock_file)
        self._lock.release()

    @property
    def held(self) -> bool:
        return self._depth > 0

    def __enter__(self) -> "DataDirLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


_locks: Dict[Path, DataDirLock] = {}
_locks_guard = threading.Lock()


def get_lock(home: Path) -> DataDirLock:
    """Return the process-wide lock object for a home directory."""
    key = Path(home).expanduser().resolve()
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = DataDirLock(key)
            _locks[key] = lock
        return lock


@contextmanager
def data_dir_lock(cfg) -> Iterator[None]:
    """Hold the home directory lock when ``cfg.lock`` is enabled.

    Args:
        cfg: SigoConfig
    """
    if not cfg.lock:
        yield
        return

    with get_lock(cfg.home):
        yield
