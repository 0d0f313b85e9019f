"""
Notes Service - Application Package
===================================

What: A small note-taking HTTP service backed by a single JSON file.
Who:  Imported by uvicorn (`notes_service.main:app`), pytest, and the
      `notes-service` console script.

Architecture Note:
    The package keeps the usual layered split:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, response shape
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, read-modify-write
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic Note model
    ├─────────────────────────────────────┤
    │          Storage (Persistence)      │  ← Whole-document JSON store
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
