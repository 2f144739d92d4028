# bible_lib/utils/errors.py
"""
Standardized API error responses.

All errors follow the format: {"error": "error_code", "detail": "optional message"}

Error codes should be:
- snake_case
- descriptive but concise
- machine-parseable (no spaces or special chars)
"""

from typing import Optional

from flask import jsonify

from bible_lib.services.bible import (
    BibleLibError,
    BookNotFound,
    ChapterNotFound,
    VerseNotFound,
    InvalidVerseFormat,
    TranslationUnavailable,
)


# -----------------------------------------------------------------------------
# Standard HTTP Error Responses
# -----------------------------------------------------------------------------

def error_response(
    code: str,
    status: int = 400,
    detail: Optional[str] = None,
    **extra
):
    """
    Create a standardized error response.

    Args:
        code: Machine-readable error code (snake_case)
        status: HTTP status code
        detail: Human-readable explanation (optional)
        **extra: Additional fields to include in response

    Returns:
        Tuple of (jsonify response, status code)
    """
    payload = {"error": code}
    if detail:
        payload["detail"] = detail
    payload.update(extra)
    return jsonify(payload), status


# Not Found (404)
def not_found(resource: str = "resource", detail: str = None):
    """Requested resource does not exist."""
    return error_response(f"{resource}_not_found", 404, detail or f"{resource} not found")


# Validation (400)
def missing_field(field: str):
    """Required field is missing."""
    return error_response(f"{field}_required", 400, f"Missing required field: {field}")


def invalid_field(field: str, detail: str = None):
    """Field value is invalid."""
    return error_response(f"invalid_{field}", 400, detail)


# Unavailable (503)
def unavailable(code: str, detail: str = None):
    """A configured resource cannot be served right now."""
    return error_response(code, 503, detail)


# Server Error (500)
def server_error(code: str = "internal_error", detail: str = None):
    """Internal server error."""
    return error_response(code, 500, detail)


# -----------------------------------------------------------------------------
# Domain-Specific Errors
# -----------------------------------------------------------------------------

def bible_error(error: BibleLibError):
    """Map a Bible library exception to its API response."""
    if isinstance(error, BookNotFound):
        return not_found("book", str(error))
    if isinstance(error, ChapterNotFound):
        return not_found("chapter", str(error))
    if isinstance(error, VerseNotFound):
        return not_found("verse", str(error))
    if isinstance(error, InvalidVerseFormat):
        return invalid_field("verse_format", str(error))
    if isinstance(error, TranslationUnavailable):
        return unavailable("translation_unavailable", str(error))
    return server_error("bible_error", str(error))
