"""
Notes Service - Response Adapters
=================================

What:  The two response shapes a request outcome can take.
How:   Browser form submissions get a redirect back to the index page with a
       one-shot flash message in the query string; every other client gets a
       JSON body. The choice is made from a flag computed once when the
       request enters the create route (`request.state.form_submission`).

Flash redirect format:
    /?flash=Note+saved+successfully&flashType=success
    /?flash=Note+text+must+not+be+empty.&flashType=error
"""

from urllib.parse import urlencode

from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"
NOTE_SAVED_MESSAGE = "Note saved successfully"


def is_form_submission(request: Request) -> bool:
    """True when the declared content type is a URL-encoded HTML form."""
    return FORM_CONTENT_TYPE in request.headers.get("content-type", "").lower()


def is_json_body(request: Request) -> bool:
    """True when the declared content type is JSON."""
    return JSON_CONTENT_TYPE in request.headers.get("content-type", "").lower()


def wants_redirect(request: Request) -> bool:
    """Whether this request was classified as a form submission."""
    return getattr(request.state, "form_submission", False)


def flash_redirect(message: str, flash_type: str = "success") -> RedirectResponse:
    """
    Redirect to the index page carrying a flash message.

    303 makes the browser follow up with a GET, so a page reload does not
    resubmit the form.
    """
    query = urlencode({"flash": message, "flashType": flash_type})
    return RedirectResponse(url=f"/?{query}", status_code=303)


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error body in the shape `{"error": message}`."""
    return JSONResponse(status_code=status_code, content={"error": message})
