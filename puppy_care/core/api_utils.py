"""
Common API utilities for consistent response formatting across all controllers.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from flask import jsonify, request

from puppy_care.core.result import DomainError, ErrorCode, Failure, Success

HTTP_STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.INTERNAL_ERROR: 500,
}


def status_for(error: DomainError) -> int:
    """Map a DomainError code to an HTTP status (unknown codes -> 500)."""
    return HTTP_STATUS_BY_CODE.get(error.code, 500)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def api_response(data: Any = None, message: Optional[str] = None, status_code: int = 200):
    """
    Standardized success envelope.

    Returns:
        Tuple of (json_response, status_code)
    """
    body = {"success": True, "data": data, "timestamp": _timestamp(), "path": request.path}
    if message:
        body["message"] = message
    return jsonify(body), status_code


def api_error(error: DomainError, status_code: Optional[int] = None):
    """Standardized failure envelope for a DomainError."""
    body = {
        "success": False,
        "error": error.to_dict(),
        "timestamp": _timestamp(),
        "path": request.path,
    }
    return jsonify(body), status_code or status_for(error)


def respond(result, serializer=None, status_code: int = 200):
    """Render a Result: serialize the value on success, map the error otherwise."""
    if isinstance(result, Failure):
        return api_error(result.error)
    value = result.value
    if serializer is not None:
        value = serializer(value)
    return api_response(value, status_code=status_code)


def get_json_body():
    """Return the request JSON object, or a validation Failure."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return Failure(DomainError.validation("Request body must be a JSON object"))
    return Success(data)


def parse_datetime(value: Any, field_name: str):
    """Parse an ISO-8601 string (a trailing 'Z' is accepted) into a datetime."""
    if value is None or value == "":
        return Success(None)
    if isinstance(value, datetime):
        return Success(value)
    if not isinstance(value, str):
        return Failure(DomainError.validation(f"{field_name} must be an ISO-8601 string"))
    try:
        return Success(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except ValueError:
        return Failure(DomainError.validation(f"{field_name} is not a valid ISO-8601 date"))


def parse_int(value: Any, field_name: str, default: Optional[int] = None):
    if value is None or value == "":
        return Success(default)
    try:
        return Success(int(value))
    except (TypeError, ValueError):
        return Failure(DomainError.validation(f"{field_name} must be an integer"))
