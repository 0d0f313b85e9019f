"""
Notes Service - File-Backed Note Store
======================================

What:  Persists the note collection as one JSON document on local disk.
How:   Async file I/O through aiofiles. Saves write a sibling temp file and
       then atomically swap it in with os.replace, so a reader only ever sees
       the complete old document or the complete new one.
Who:   The production NoteStore, built by main.create_app() from
       settings.data_file.

On-disk layout:
    notes.json
    [
      {
        "id": "5f0c7a1e-...",
        "text": "buy milk",
        "createdAt": "2024-01-15T12:00:00.123456Z"
      }
    ]

A missing file is equivalent to an empty collection; it is created on the
first successful save.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional, Union

import aiofiles
import aiofiles.os

from notes_service.services.store_base import NoteStore

logger = logging.getLogger(__name__)


class FileNoteStore(NoteStore):
    """NoteStore backed by a single JSON file."""

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    async def _read_document(self) -> Optional[str]:
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError:
            return None

    async def _write_document(self, document: str) -> None:
        await aiofiles.os.makedirs(self.path.parent, exist_ok=True)

        # Temp file lives in the same directory so os.replace stays on one
        # filesystem and is atomic.
        temp_path = self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex}.tmp")
        try:
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(document)
                await f.flush()
            await aiofiles.os.replace(temp_path, self.path)
        except OSError:
            await self._discard(temp_path)
            raise

    async def _discard(self, temp_path: Path) -> None:
        """Best-effort removal of a temp file left by a failed save."""
        try:
            await aiofiles.os.remove(temp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Failed to clean up temp file %s: %s", temp_path, str(e))
