"""
Notes Service - Note Service (Business Logic)
=============================================

What:  Validates note input and orchestrates whole-document read-modify-write
       cycles against a NoteStore.
How:   Store error signals are converted into StorageReadError /
       StorageWriteError; validation failures raise ValidationError before
       the store is touched. The route layer and the global exception
       handlers decide the response shape.
Who:   Called by the /notes route handlers.

Write flow (create / delete):
    ┌──────────┐    ┌──────────┐    ┌──────────┐    ┌──────────┐
    │ Validate │───▶│   Load   │───▶│  Mutate  │───▶│   Save   │
    └──────────┘    └──────────┘    │ in memory│    └──────────┘
                                    └──────────┘
    Load and save run under store.write_lock, so two writers in this
    process cannot lose each other's update. On a failed save the in-memory
    mutation is dropped and nothing is retried.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from notes_service.exceptions import (
    NotFoundError,
    StorageReadError,
    StorageWriteError,
    ValidationError,
)
from notes_service.schemas.note import MAX_TEXT_LENGTH, Note
from notes_service.services.store_base import NoteStore

logger = logging.getLogger(__name__)


def validate_note_text(raw_text: Any) -> str:
    """
    Check submitted note text and return it trimmed.

    Rules, in order:
        1. Must be present (None means absent). Non-string values are
           coerced to text, booleans spelled as in JSON ("true" / "false")
        2. Must not be blank after trimming surrounding whitespace
        3. Trimmed length must not exceed MAX_TEXT_LENGTH

    Raises:
        ValidationError with a message suitable for the client
    """
    if raw_text is None:
        raise ValidationError(message='"text" field is required.', field="text")

    if isinstance(raw_text, bool):
        raw_text = "true" if raw_text else "false"

    trimmed = str(raw_text).strip()
    if not trimmed:
        raise ValidationError(message="Note text must not be empty.", field="text")

    if len(trimmed) > MAX_TEXT_LENGTH:
        raise ValidationError(
            message=(
                f"Note text must be {MAX_TEXT_LENGTH} characters or fewer "
                f"(got {len(trimmed)})."
            ),
            field="text",
            context={"max_length": MAX_TEXT_LENGTH, "actual_length": len(trimmed)},
        )

    return trimmed


class NoteService:
    """
    Business logic for listing, creating and deleting notes.

    The service holds no state of its own beyond the store reference; one
    instance is built per request by the FastAPI dependency.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    async def list_notes(self) -> List[Note]:
        """
        Return every stored note in insertion order.

        Raises:
            StorageReadError: backing document unreadable or malformed
        """
        notes, error = await self.store.load()
        if error:
            raise StorageReadError(message=error)
        return notes

    async def create_note(self, raw_text: Any) -> Note:
        """
        Validate `raw_text`, append a new note and persist the collection.

        Returns:
            The newly stored Note

        Raises:
            ValidationError:   text absent, blank or too long (store untouched)
            StorageReadError:  existing notes could not be loaded
            StorageWriteError: the updated collection could not be saved
        """
        text = validate_note_text(raw_text)

        async with self.store.write_lock:
            notes = await self.list_notes()
            note = Note(
                id=str(uuid.uuid4()),
                text=text,
                created_at=datetime.now(timezone.utc),
            )
            notes.append(note)
            await self._persist(notes)

        logger.info("Note %s created (%d chars)", note.id, len(note.text))
        return note

    async def delete_note(self, note_id: str) -> str:
        """
        Remove the note with `note_id` and persist the collection.

        Returns:
            The id of the removed note

        Raises:
            StorageReadError:  existing notes could not be loaded
            NotFoundError:     no note has this id (store untouched)
            StorageWriteError: the updated collection could not be saved
        """
        async with self.store.write_lock:
            notes = await self.list_notes()
            index = next((i for i, n in enumerate(notes) if n.id == note_id), None)
            if index is None:
                raise NotFoundError(resource_id=note_id)

            del notes[index]
            await self._persist(notes)

        logger.info("Note %s deleted", note_id)
        return note_id

    async def _persist(self, notes: List[Note]) -> None:
        error = await self.store.save(notes)
        if error:
            raise StorageWriteError(message=error, context={"note_count": len(notes)})
