"""
samvidhan/errors.py
API failures and the envelope they are rendered in

Every failure the API returns has the same body:

    {
        "success": false,
        "error": "Text safe to show to a citizen",
        "code": "MACHINE_READABLE_CODE",
        "details": {...}            # only when there is something to add
    }

Status codes:
- 400: input missing or malformed (never a 500)
- 404: the requested record is not in the store
- 429: rate limit hit on the AI or speech routes
- 500: a provider rejected the call, or something broke internally

The AI assistant is the exception to provider failures: it answers 200
with a canned fallback instead of surfacing the error.
"""

import logging
import uuid
from typing import Optional, Dict, Any

from fastapi import status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode:
    """Values of the `code` field"""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"

    # 404
    NOT_FOUND = "NOT_FOUND"
    ARTICLE_NOT_FOUND = "ARTICLE_NOT_FOUND"

    # 429
    RATE_LIMITED = "RATE_LIMITED"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SEED_FAILED = "SEED_FAILED"
    TTS_SERVICE_ERROR = "TTS_SERVICE_ERROR"


def error_body(message: str, code: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    body = {"success": False, "error": message, "code": code}
    if details:
        body["details"] = details
    return body


class APIError(Exception):
    """
    Raised anywhere below a route; the app-level handler turns it into
    the failure envelope with `status_code`.
    """

    def __init__(self, status_code: int, message: str, code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.details = details

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=error_body(self.message, self.code, self.details),
        )


class BadRequestError(APIError):
    def __init__(self, message: str, code: str = ErrorCode.INVALID_INPUT, details: Optional[Dict] = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, code, details)


class NotFoundError(APIError):
    def __init__(self, resource: str, code: str = ErrorCode.NOT_FOUND):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found", code)


class ProviderError(APIError):
    """An upstream provider (speech synthesis) failed; carries its message."""
    def __init__(self, message: str, code: str = ErrorCode.INTERNAL_ERROR):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message, code)


class InternalError(APIError):
    """Our own failure. `log_id` ties the response to the server log line."""
    def __init__(self, message: str = "An internal error occurred", code: str = ErrorCode.INTERNAL_ERROR,
                 log_id: Optional[str] = None):
        details = {"log_id": log_id} if log_id else None
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message, code, details)


def validate_not_empty(value: Optional[str], message: str) -> str:
    """Return the stripped string, or raise 400 with `message` if blank."""
    if not isinstance(value, str) or not value.strip():
        raise BadRequestError(message, code=ErrorCode.MISSING_FIELD)
    return value.strip()


# largest value an INTEGER column can hold
INT64_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return -INT64_MAX - 1 <= value <= INT64_MAX


def parse_int_param(value: Optional[str], field_name: str) -> Optional[int]:
    """Parse an optional integer query parameter; None passes through."""
    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        parsed = None
    if parsed is None or not fits_int64(parsed):
        raise BadRequestError(
            f"{field_name} must be an integer",
            code=ErrorCode.INVALID_FORMAT,
            details={"field": field_name, "value": value}
        )
    return parsed


def new_log_id() -> str:
    return uuid.uuid4().hex[:8]


# status → code for errors raised by the framework itself (unknown route, bad method)
ERROR_MAPPING = {
    400: ErrorCode.INVALID_INPUT,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.INVALID_INPUT,
    429: ErrorCode.RATE_LIMITED,
    500: ErrorCode.INTERNAL_ERROR,
}


def get_error_summary() -> Dict[str, Any]:
    """Describe the failure contract, served at /api/errors/health."""
    return {
        "envelope": {
            "success": "always false",
            "error": "message for people",
            "code": "ErrorCode value for programs",
            "details": "optional object",
        },
        "status_codes": {
            "400": "missing or malformed input",
            "404": "record not found",
            "429": "too many requests",
            "500": "provider or internal failure",
        },
        "error_codes": sorted(
            value for name, value in vars(ErrorCode).items()
            if not name.startswith("_")
        ),
    }
