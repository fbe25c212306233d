"""
Tests for the atomic storage primitive.
"""

import os
import json
from unittest.mock import patch

import pytest

from sigo.core.exceptions import CorruptStoreError, StoreUnavailableError
from sigo.core.models import TaskRecord
from sigo.store.atomic import read_records, temp_path_for, write_records


@pytest.fixture
def store_file(tmp_path):
    return tmp_path / "data" / "ready_tasks"


@pytest.fixture
def records():
    return [
        TaskRecord(id=1, description="buy milk"),
        TaskRecord(id=3, description="renew passport"),
        TaskRecord(id=2, description="unicode ✓ and \"quotes\""),
    ]


class TestReadRecords:
    """Test reading store files."""

    def test_creates_missing_file(self, store_file):
        """Test that reading a missing store creates it with an empty list."""
        assert read_records(store_file) == []
        assert store_file.exists()
        assert json.loads(store_file.read_text()) == []

    def test_whitespace_only_file_reads_empty(self, store_file):
        store_file.parent.mkdir(parents=True)
        store_file.write_text("  \n")
        assert read_records(store_file) == []

    def test_reads_records_in_order(self, store_file):
        store_file.parent.mkdir(parents=True)
        store_file.write_text(
            json.dumps([{"id": 2, "description": "b"}, {"id": 1, "description": "a"}])
        )
        assert [r.id for r in read_records(store_file)] == [2, 1]

    def test_invalid_json(self, store_file):
        """Test that unparseable content raises CorruptStoreError."""
        store_file.parent.mkdir(parents=True)
        store_file.write_text("[{not json")
        with pytest.raises(CorruptStoreError, match="invalid JSON") as exc_info:
            read_records(store_file)
        assert exc_info.value.path == store_file

    def test_not_a_list(self, store_file):
        store_file.parent.mkdir(parents=True)
        store_file.write_text('{"id": 1, "description": "x"}')
        with pytest.raises(CorruptStoreError, match="expected a list"):
            read_records(store_file)

    def test_wrong_record_shape(self, store_file):
        """Test that a record missing fields raises CorruptStoreError."""
        store_file.parent.mkdir(parents=True)
        store_file.write_text('[{"id": 1, "description": "x"}, {"id": 2}]')
        with pytest.raises(CorruptStoreError, match="record 1"):
            read_records(store_file)

    def test_wrong_id_type(self, store_file):
        store_file.parent.mkdir(parents=True)
        store_file.write_text('[{"id": "1", "description": "x"}]')
        with pytest.raises(CorruptStoreError):
            read_records(store_file)

    def test_invalid_utf8(self, store_file):
        store_file.parent.mkdir(parents=True)
        store_file.write_bytes(b"\xff\xfe[]")
        with pytest.raises(CorruptStoreError, match="UTF-8"):
            read_records(store_file)

    def test_unreadable_path(self, tmp_path):
        """Test that a directory in place of the store raises StoreUnavailableError."""
        store_dir = tmp_path / "ready_tasks"
        store_dir.mkdir()
        with pytest.raises(StoreUnavailableError):
            read_records(store_dir)

    def test_parent_is_a_file(self, tmp_path):
        """Test that an uncreatable directory raises StoreUnavailableError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(StoreUnavailableError):
            read_records(blocker / "ready_tasks")


class TestWriteRecords:
    """Test atomic full-replace writes."""

    def test_round_trip(self, store_file, records):
        """Test that read after write returns exactly the written list."""
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)
        assert read_records(store_file) == records

    def test_write_creates_missing_directory(self, store_file, records):
        """Test that writing into a home that does not exist yet creates it."""
        assert not store_file.parent.exists()
        write_records(store_file, records)
        assert read_records(store_file) == records

    def test_write_replaces_content(self, store_file, records):
        """Test that writes replace rather than append."""
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)
        write_records(store_file, records[:1])
        assert read_records(store_file) == records[:1]

    def test_write_empty_list(self, store_file, records):
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)
        write_records(store_file, [])
        assert read_records(store_file) == []

    def test_content_is_human_readable_json(self, store_file, records):
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records[:1])
        text = store_file.read_text()
        assert "\n" in text
        assert json.loads(text) == [{"id": 1, "description": "buy milk"}]

    def test_temp_file_tagged_with_pid(self, store_file):
        assert temp_path_for(store_file).name == f"ready_tasks.sigo-tmp-{os.getpid()}"
        assert temp_path_for(store_file).parent == store_file.parent

    def test_no_temp_file_left_behind(self, store_file, records):
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)
        assert sorted(p.name for p in store_file.parent.iterdir()) == ["ready_tasks"]

    def test_invalid_record_writes_nothing(self, store_file, records):
        """Test that validation failure leaves the file untouched."""
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)
        with pytest.raises(ValueError):
            write_records(store_file, records + [TaskRecord(id=0, description="bad")])
        assert read_records(store_file) == records

    def test_interrupted_before_rename_keeps_original(self, store_file, records):
        """Test that a failure before the rename leaves the original readable."""
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)

        with patch("sigo.store.atomic.os.replace", side_effect=OSError("disk gone")):
            with pytest.raises(StoreUnavailableError, match="disk gone"):
                write_records(store_file, [])

        assert read_records(store_file) == records
        assert not temp_path_for(store_file).exists()

    def test_interrupted_during_fsync_keeps_original(self, store_file, records):
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)

        with patch("sigo.store.atomic.os.fsync", side_effect=OSError("io error")):
            with pytest.raises(StoreUnavailableError):
                write_records(store_file, records[:1])

        assert read_records(store_file) == records
        assert not temp_path_for(store_file).exists()

    def test_keyboard_interrupt_cleans_up(self, store_file, records):
        """Test that non-OSError interruptions still discard the temp file."""
        store_file.parent.mkdir(parents=True)
        write_records(store_file, records)

        with patch("sigo.store.atomic.os.replace", side_effect=KeyboardInterrupt):
            with pytest.raises(KeyboardInterrupt):
                write_records(store_file, [])

        assert read_records(store_file) == records
        assert not temp_path_for(store_file).exists()
