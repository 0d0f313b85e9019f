"""
Notes Service - Browser Page Route
==================================

What:  GET / renders the note list for browsers.
How:   Loads the store directly. A read error does not fail the page; it is
       shown as a banner above an empty list. The optional flash message and
       its type come from the query string set by the create redirect.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from notes_service.dependencies import get_note_store
from notes_service.services.store_base import NoteStore
from notes_service.views import render_index

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, summary="Note list page")
async def index(
    flash: Optional[str] = Query(default=None, description="One-shot status message"),
    flash_type: str = Query(
        default="success",
        alias="flashType",
        description="Flash style: success or error",
    ),
    store: NoteStore = Depends(get_note_store),
) -> HTMLResponse:
    notes, storage_error = await store.load()
    return HTMLResponse(
        render_index(
            notes,
            storage_error=storage_error,
            flash=flash,
            flash_type=flash_type,
        )
    )
