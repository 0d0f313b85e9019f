"""
Notes Service - HTML View
=========================

What:  Renders the browser page served at GET /.
How:   Plain string assembly; every piece of user-supplied content (note
       text, flash message) goes through html.escape.

Page contents:
    - flash banner (from ?flash=...&flashType=...)
    - storage error banner (when the store could not be read)
    - create form, URL-encoded POST to /notes
    - notes in insertion order
"""

from html import escape
from typing import Optional, Sequence

from notes_service.schemas.note import MAX_TEXT_LENGTH, Note

FLASH_TYPES = {"success", "error"}

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Notes</title>
  <style>
    body {{ font-family: sans-serif; max-width: 40rem; margin: 2rem auto; }}
    .flash {{ padding: .5rem 1rem; border-radius: 4px; }}
    .flash-success {{ background: #e6f4ea; }}
    .flash-error {{ background: #fce8e6; }}
    li {{ margin: .5rem 0; }}
    time {{ color: #666; font-size: .85em; margin-left: .5rem; }}
  </style>
</head>
<body>
  <h1>Notes</h1>
{banners}
  <form method="post" action="/notes">
    <textarea name="text" rows="3" cols="50" maxlength="{max_length}" required></textarea>
    <button type="submit">Save note</button>
  </form>
{listing}
</body>
</html>
"""


def _banner(css_class: str, message: str) -> str:
    return f'  <p class="flash {css_class}">{escape(message)}</p>'


def _listing(notes: Sequence[Note]) -> str:
    if not notes:
        return "  <p>No notes yet.</p>"
    items = "\n".join(
        f'    <li id="note-{escape(note.id)}">{escape(note.text)}'
        f'<time datetime="{note.created_at.isoformat()}">'
        f"{note.created_at:%Y-%m-%d %H:%M}</time></li>"
        for note in notes
    )
    return f"  <ul>\n{items}\n  </ul>"


def render_index(
    notes: Sequence[Note],
    storage_error: Optional[str] = None,
    flash: Optional[str] = None,
    flash_type: str = "success",
) -> str:
    """Build the full HTML document for the note list page."""
    banners = []
    if flash:
        kind = flash_type if flash_type in FLASH_TYPES else "success"
        banners.append(_banner(f"flash-{kind}", flash))
    if storage_error:
        banners.append(_banner("flash-error", storage_error))

    return _PAGE.format(
        banners="\n".join(banners),
        max_length=MAX_TEXT_LENGTH,
        listing=_listing(notes),
    )
