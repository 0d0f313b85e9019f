"""
Notes Service - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the whole suite.
How:   The HTTP fixtures build a fresh app around a MemoryNoteStore, so no
       test touches the real backing file.

Function-scoped fixtures:
    ├── memory_store: Empty in-memory store
    ├── note_service: NoteService over memory_store
    ├── file_store: FileNoteStore in a temporary directory
    ├── sample_notes: Three notes in insertion order
    ├── app: FastAPI app bound to memory_store
    └── test_client: HTTPX AsyncClient talking to `app`
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone

# Point settings at a throwaway file BEFORE any package import builds the
# module-level app.
os.environ["DATA_FILE"] = os.path.join(
    tempfile.mkdtemp(prefix="notes_service_test_"), "notes.json"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notes_service.main import create_app
from notes_service.schemas.note import Note
from notes_service.services.file_store import FileNoteStore
from notes_service.services.memory_store import MemoryNoteStore
from notes_service.services.note_service import NoteService


@pytest.fixture
def memory_store():
    return MemoryNoteStore()


@pytest.fixture
def note_service(memory_store):
    return NoteService(memory_store)


@pytest.fixture
def file_store(tmp_path):
    """FileNoteStore whose backing file does not exist yet."""
    return FileNoteStore(tmp_path / "data" / "notes.json")


@pytest.fixture
def sample_notes():
    base = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    return [
        Note(id=f"note-{i}", text=f"Note number {i}", created_at=base + timedelta(minutes=i))
        for i in range(3)
    ]


@pytest.fixture
def app(memory_store):
    return create_app(store=memory_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
