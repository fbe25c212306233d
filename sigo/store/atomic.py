"""
Storage primitive: whole-file JSON persistence with atomic publication.

Every write rewrites the full list to a pid-tagged sibling temp file, fsyncs
it, and renames it over the target. Readers never observe a partial file.
"""

import json
import os
import logging
from pathlib import Path
from typing import List

from sigo.constants import TEMP_SUFFIX_PREFIX
from sigo.core.exceptions import CorruptStoreError, StoreUnavailableError
from sigo.core.models import TaskRecord

logger = logging.getLogger(__name__)


def temp_path_for(path: Path) -> Path:
    """Sibling temp file for this process: <name>.sigo-tmp-<pid>."""
    return path.with_name(f"{path.name}.{TEMP_SUFFIX_PREFIX}-{os.getpid()}")


def ensure_store_file(path: Path) -> None:
    """Create the store file holding an empty list if it does not exist.

    Raises:
        StoreUnavailableError: If the file or its directory cannot be created
    """
    if path.exists():
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreUnavailableError(path, f"cannot create store directory: {e}")
    logger.debug("Creating empty store file %s", path)
    write_records(path, [])


def read_records(path: Path) -> List[TaskRecord]:
    """Read all records from a store file, creating it if missing.

    Args:
        path: Store file path

    Returns:
        Records in file order. Whitespace-only content reads as an empty list.

    Raises:
        StoreUnavailableError: If the file cannot be created or opened
        CorruptStoreError: If the content is not a JSON list of task records
    """
    ensure_store_file(path)

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CorruptStoreError(path, f"not valid UTF-8: {e}")
    except OSError as e:
        raise StoreUnavailableError(path, f"cannot read store file: {e}")

    if not content.strip():
        return []

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise CorruptStoreError(path, f"invalid JSON: {e}")

    if not isinstance(data, list):
        raise CorruptStoreError(
            path, f"expected a list of task records, got {type(data).__name__}"
        )

    records = []
    for index, item in enumerate(data):
        try:
            records.append(TaskRecord.from_dict(item))
        except ValueError as e:
            raise CorruptStoreError(path, f"record {index}: {e}")

    return records


def write_records(path: Path, records: List[TaskRecord]) -> None:
    """Replace the store file's content with ``records`` atomically.

    Args:
        path: Store file path
        records: Full list to persist (not appended)

    Raises:
        ValueError: If a record fails validation (nothing is written)
        StoreUnavailableError: If the temp file cannot be written or renamed
    """
    # Validate all records before writing
    for record in records:
        record.validate()

    content = json.dumps([record.to_dict() for record in records], indent=2)

    temp_file = temp_path_for(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_file, "w", encoding="utf-8") as f:
            f.write(content)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        # Atomic rename; the single publication point
        os.replace(temp_file, path)
    except OSError as e:
        _discard_temp_file(temp_file)
        raise StoreUnavailableError(path, f"cannot write store file: {e}")
    except BaseException:
        _discard_temp_file(temp_file)
        raise

    logger.debug("Wrote %d records to %s", len(records), path)


def _discard_temp_file(temp_file: Path) -> None:
    try:
        temp_file.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Failed to remove temp file %s: %s", temp_file, e)
