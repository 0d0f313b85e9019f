# Routes package init
"""
Notes Service - Routes Package
==============================

Route Inventory:
    - pages.py:   GET    /              (HTML note list for browsers)
    - notes.py:   GET    /notes         (JSON list)
                  POST   /notes         (create, form or JSON body)
                  DELETE /notes/{id}    (delete by id)
    - health.py:  GET    /health        (liveness)

Routes stay thin: extract input, call NoteService, pick the response shape.
Failures are raised as application exceptions and rendered by the handlers
registered in main.py.
"""
