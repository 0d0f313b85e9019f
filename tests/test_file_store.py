"""
Notes Service - File Store Unit Tests
=====================================

What:  Tests for FileNoteStore load/save against a real temporary directory.

Test Strategy:
    ✅ Absent and empty files load as an empty collection with no error
    ✅ Malformed content and repeated ids degrade to ([], read error)
    ✅ Save then load round-trips ids, text, timestamps and order
    ✅ Saves leave no temp files behind and use wire field names
    ✅ Write failures return the write error and keep the old document
"""

import json
from unittest.mock import patch

import pytest

from notes_service.services.file_store import FileNoteStore
from notes_service.services.store_base import READ_ERROR_MESSAGE, WRITE_ERROR_MESSAGE


class TestFileStoreLoad:
    """Tests for FileNoteStore.load()."""

    @pytest.mark.asyncio
    async def test_absent_file_is_empty(self, file_store):
        assert not file_store.path.exists()
        assert await file_store.load() == ([], None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   \n", "[]"])
    async def test_empty_file_is_empty(self, tmp_path, content):
        path = tmp_path / "notes.json"
        path.write_text(content, encoding="utf-8")

        assert await FileNoteStore(path).load() == ([], None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [
            "not json at all",
            '{"id": "x"}',
            '"a string"',
            '[{"id": "x", "text": "missing timestamp"}]',
            '[{"id": "x", "text": "", "createdAt": "2024-01-15T12:00:00Z"}]',
            (
                '[{"id": "a", "text": "one", "createdAt": "2024-01-15T12:00:00Z"},'
                ' {"id": "a", "text": "two", "createdAt": "2024-01-15T12:01:00Z"}]'
            ),
        ],
    )
    async def test_malformed_file_reports_read_error(self, tmp_path, content):
        path = tmp_path / "notes.json"
        path.write_text(content, encoding="utf-8")

        notes, error = await FileNoteStore(path).load()

        assert notes == []
        assert error == READ_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_undecodable_bytes_report_read_error(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        assert await FileNoteStore(path).load() == ([], READ_ERROR_MESSAGE)

    @pytest.mark.asyncio
    async def test_reads_document_written_with_millisecond_timestamps(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text(
            json.dumps([{"id": "1700000000000-abcde", "text": "hi", "createdAt": "2024-01-15T12:00:00.000Z"}]),
            encoding="utf-8",
        )

        notes, error = await FileNoteStore(path).load()

        assert error is None
        assert notes[0].id == "1700000000000-abcde"
        assert notes[0].created_at.year == 2024

    @pytest.mark.asyncio
    async def test_repeated_loads_are_identical(self, file_store, sample_notes):
        await file_store.save(sample_notes)
        assert await file_store.load() == await file_store.load()


class TestFileStoreSave:
    """Tests for FileNoteStore.save()."""

    @pytest.mark.asyncio
    async def test_round_trip(self, file_store, sample_notes):
        assert await file_store.save(sample_notes) is None

        notes, error = await file_store.load()

        assert error is None
        assert notes == sample_notes

    @pytest.mark.asyncio
    async def test_document_uses_wire_field_names(self, file_store, sample_notes):
        await file_store.save(sample_notes[:1])

        data = json.loads(file_store.path.read_text(encoding="utf-8"))
        assert list(data[0].keys()) == ["id", "text", "createdAt"]

    @pytest.mark.asyncio
    async def test_save_creates_parent_directory(self, file_store, sample_notes):
        assert not file_store.path.parent.exists()
        await file_store.save(sample_notes)
        assert file_store.path.exists()

    @pytest.mark.asyncio
    async def test_save_leaves_no_temp_files(self, file_store, sample_notes):
        await file_store.save(sample_notes)
        await file_store.save(sample_notes[:1])

        assert [p.name for p in file_store.path.parent.iterdir()] == ["notes.json"]

    @pytest.mark.asyncio
    async def test_save_empty_sequence(self, file_store, sample_notes):
        await file_store.save(sample_notes)
        await file_store.save([])

        assert await file_store.load() == ([], None)

    @pytest.mark.asyncio
    async def test_write_failure_returns_error_and_keeps_old_document(
        self, file_store, sample_notes
    ):
        await file_store.save(sample_notes)
        before = file_store.path.read_text(encoding="utf-8")

        with patch(
            "aiofiles.os.replace",
            side_effect=PermissionError("read-only filesystem"),
        ):
            error = await file_store.save(sample_notes[:1])

        assert error == WRITE_ERROR_MESSAGE
        assert file_store.path.read_text(encoding="utf-8") == before
        assert [p.name for p in file_store.path.parent.iterdir()] == ["notes.json"]
