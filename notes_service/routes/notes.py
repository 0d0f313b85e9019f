"""
Notes Service - Notes Route Handlers
====================================

What:  GET /notes (list), POST /notes (create), DELETE /notes/{id} (delete).
How:   Extracts input from the request, delegates to NoteService, returns
       JSON or (for HTML form submissions) a flash redirect.
Who:   Called by the browser page (form POST) and by programmatic clients.

Create accepts two body encodings, told apart by Content-Type:
    application/x-www-form-urlencoded   text=buy+milk     → redirect
    application/json                    {"text": "..."}   → 201 + Note
Any other body is not read, so it has no `text` field.

Error responses are produced by the global exception handlers in main.py,
which honour the same form/JSON classification.
"""

import json
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request

from notes_service.dependencies import get_note_service
from notes_service.responses import (
    NOTE_SAVED_MESSAGE,
    flash_redirect,
    is_form_submission,
    is_json_body,
)
from notes_service.schemas.note import DeletedResponse, ErrorResponse, Note
from notes_service.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


async def _extract_text(request: Request, form_submission: bool) -> Any:
    """
    Pull the raw `text` field out of the request body.

    Returns None when the field is missing, the body is not declared as
    JSON, or the JSON body is malformed or not an object. Validation then
    reports it as absent.
    """
    if form_submission:
        form = await request.form()
        return form.get("text")

    if not is_json_body(request):
        return None

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("POST /notes body is not valid JSON")
        return None

    if not isinstance(body, dict):
        return None
    return body.get("text")


@router.get(
    "/notes",
    response_model=List[Note],
    responses={500: {"description": "Notes could not be read", "model": ErrorResponse}},
    summary="List all notes",
)
async def list_notes(service: NoteService = Depends(get_note_service)) -> List[Note]:
    """Return the full note collection in insertion order."""
    return await service.list_notes()


@router.post(
    "/notes",
    status_code=201,
    response_model=Note,
    responses={
        201: {"description": "Note created", "model": Note},
        303: {"description": "Form submission handled; redirect to the index page"},
        422: {"description": "Note text missing, blank or too long", "model": ErrorResponse},
        500: {"description": "Notes could not be read or saved", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    request: Request,
    service: NoteService = Depends(get_note_service),
):
    """
    Create a note from a form or JSON body.

    The form/JSON classification is stored on request.state before anything
    can fail, so the exception handlers answer in the matching format.
    """
    form_submission = is_form_submission(request)
    request.state.form_submission = form_submission

    raw_text = await _extract_text(request, form_submission)
    note = await service.create_note(raw_text)

    if form_submission:
        return flash_redirect(NOTE_SAVED_MESSAGE, "success")
    return note


@router.delete(
    "/notes/{note_id}",
    response_model=DeletedResponse,
    responses={
        404: {"description": "No note with this id", "model": ErrorResponse},
        500: {"description": "Notes could not be read or saved", "model": ErrorResponse},
    },
    summary="Delete a note by id",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> DeletedResponse:
    deleted = await service.delete_note(note_id)
    return DeletedResponse(deleted=deleted)
