"""
Notes Service - Abstract Note Store
===================================

What:  Abstract base class for durable load/save of the whole note collection.
How:   Concrete stores only implement raw document access
       (`_read_document` / `_write_document`); the shared `load` / `save`
       template methods own serialization, validation and error signalling.
Who:   Used by NoteService (read-modify-write) and the index page (read only).

Contract:
    - load() -> (notes, error)
        Absent or blank document -> ([], None)
        Unreadable, not JSON, not an array, any element not a complete
        Note, or two notes sharing an id -> ([], READ_ERROR_MESSAGE),
        cause logged at ERROR
    - save(notes) -> error | None
        Replaces the whole document; on failure returns WRITE_ERROR_MESSAGE
    - Neither method raises for storage problems. Callers decide how an
      error signal is surfaced.

Implementations:
    - FileNoteStore:   JSON file on disk, atomic replace on save
    - MemoryNoteStore: in-memory string buffer, used by the test suite
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from notes_service.schemas.note import Note

logger = logging.getLogger(__name__)

READ_ERROR_MESSAGE = "Could not read notes from disk."
WRITE_ERROR_MESSAGE = "Could not save note to disk."

_NOTE_LIST = TypeAdapter(List[Note])


def decode_notes(document: str) -> List[Note]:
    """
    Parse a serialized document into an ordered list of notes.

    A blank document is an empty collection. Raises pydantic's
    ValidationError for anything that is not a JSON array of complete notes.
    """
    if not document.strip():
        return []
    return _NOTE_LIST.validate_json(document)


def duplicate_ids(notes: Sequence[Note]) -> List[str]:
    """Ids held by more than one note, in first-seen order."""
    seen = set()
    duplicates = []
    for note in notes:
        if note.id in seen and note.id not in duplicates:
            duplicates.append(note.id)
        seen.add(note.id)
    return duplicates


def encode_notes(notes: Sequence[Note]) -> str:
    """Serialize notes as an indented JSON array using wire field names."""
    return _NOTE_LIST.dump_json(list(notes), by_alias=True, indent=2).decode("utf-8")


class NoteStore(ABC):
    """
    Whole-document note persistence.

    Attributes:
        write_lock: Held by NoteService across each load-mutate-save sequence
                    so writers in this process never overwrite each other's
                    changes. Readers do not take it.
    """

    def __init__(self) -> None:
        self.write_lock = asyncio.Lock()

    async def load(self) -> Tuple[List[Note], Optional[str]]:
        """Read the full collection. See module docstring for the contract."""
        try:
            document = await self._read_document()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read notes from %s: %s", self.describe(), str(e))
            return [], READ_ERROR_MESSAGE

        if document is None:
            return [], None

        try:
            notes = decode_notes(document)
        except PydanticValidationError as e:
            logger.error(
                "Malformed note document in %s: %d problem(s), first: %s",
                self.describe(),
                e.error_count(),
                e.errors()[0]["msg"] if e.errors() else "unknown",
            )
            return [], READ_ERROR_MESSAGE

        duplicates = duplicate_ids(notes)
        if duplicates:
            logger.error(
                "Note document in %s repeats id(s): %s",
                self.describe(),
                ", ".join(duplicates),
            )
            return [], READ_ERROR_MESSAGE

        logger.debug("Loaded %d notes from %s", len(notes), self.describe())
        return notes, None

    async def save(self, notes: Sequence[Note]) -> Optional[str]:
        """Replace the stored collection with `notes`. Returns an error or None."""
        document = encode_notes(notes)
        try:
            await self._write_document(document)
        except OSError as e:
            logger.error("Failed to write notes to %s: %s", self.describe(), str(e))
            return WRITE_ERROR_MESSAGE

        logger.debug("Saved %d notes to %s", len(notes), self.describe())
        return None

    @abstractmethod
    async def _read_document(self) -> Optional[str]:
        """
        Return the raw serialized document, or None when none exists yet.

        Raises:
            OSError: the document exists but could not be read
        """
        ...

    @abstractmethod
    async def _write_document(self, document: str) -> None:
        """
        Replace the raw document. Readers must never observe a mix of the
        old and new contents.

        Raises:
            OSError: on any I/O failure
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable location, used in log lines."""
        ...
