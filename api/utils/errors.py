# api/utils/errors.py
"""
Standardized API error responses.

All errors follow the format: {"error": "error_code", "detail": "optional message"}

Error codes should be:
- snake_case
- descriptive but concise
- machine-parseable (no spaces or special chars)
"""

from flask import jsonify
from typing import Optional

from services.bible import (
    ConfigurationError,
    CorpusMissingError,
    LanguageNotFoundError,
    VersionNotFoundError,
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
def not_found(resource: str = "resource", detail: str = None, **extra):
    """Requested resource does not exist."""
    return error_response("not_found", 404, detail or f"{resource} not found", **extra)


# Validation (400)
def missing_field(field: str):
    """Required field is missing."""
    return error_response(f"{field}_required", 400, f"Missing required field: {field}")


def invalid_field(field: str, detail: str = None):
    """Field value is invalid."""
    return error_response(f"invalid_{field}", 400, detail)


# -----------------------------------------------------------------------------
# Domain-Specific Errors
# -----------------------------------------------------------------------------

def configuration_error(error: ConfigurationError):
    """
    Unknown language or version, or a language without a book index.
    """
    if isinstance(error, LanguageNotFoundError):
        code = "language_not_found"
    elif isinstance(error, VersionNotFoundError):
        code = "version_not_found"
    elif isinstance(error, CorpusMissingError):
        code = "corpus_missing"
    else:
        code = "configuration_error"
    return error_response(code, 400, str(error))
