# Services package init
"""
Notes Service - Services Layer
==============================

What:  Business logic and persistence, independent of HTTP.

Service Inventory:
    - NoteStore (abstract): whole-document load/save contract
    - FileNoteStore: JSON file on disk (production)
    - MemoryNoteStore: in-memory buffer (tests)
    - NoteService: validation and read-modify-write orchestration
"""
