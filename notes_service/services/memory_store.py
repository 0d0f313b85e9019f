"""
Notes Service - In-Memory Note Store
====================================

What:  NoteStore that keeps the serialized document in a string buffer.
Why:   Deterministic, isolated tests without touching the filesystem. It goes
       through the same encode/decode path as FileNoteStore, so malformed
       documents and I/O failures can be simulated.
"""

from typing import Optional

from notes_service.services.store_base import NoteStore


class MemoryNoteStore(NoteStore):
    """
    Args:
        document:    Initial raw document ("" behaves like an absent file).
        fail_reads:  Make every read raise OSError.
        fail_writes: Make every write raise OSError.
    """

    def __init__(
        self,
        document: str = "",
        fail_reads: bool = False,
        fail_writes: bool = False,
    ):
        super().__init__()
        self.document = document
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def describe(self) -> str:
        return "<memory>"

    async def _read_document(self) -> Optional[str]:
        if self.fail_reads:
            raise OSError("simulated read failure")
        return self.document or None

    async def _write_document(self, document: str) -> None:
        if self.fail_writes:
            raise OSError("simulated write failure")
        self.document = document
