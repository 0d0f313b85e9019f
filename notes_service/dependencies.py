"""
Notes Service - Request Dependencies
====================================

What:  FastAPI dependencies handing the configured store and a NoteService
       to route handlers.
How:   create_app() puts the NoteStore on `app.state.note_store`; these
       functions read it back per request, so tests can inject any store
       through create_app(store=...).

Example usage in a route:
    @router.get("/notes")
    async def list_notes(service: NoteService = Depends(get_note_service)):
        return await service.list_notes()
"""

from fastapi import Depends, Request

from notes_service.services.note_service import NoteService
from notes_service.services.store_base import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """The store configured on the running application."""
    return request.app.state.note_store


def get_note_service(store: NoteStore = Depends(get_note_store)) -> NoteService:
    """A NoteService bound to the application's store."""
    return NoteService(store)
