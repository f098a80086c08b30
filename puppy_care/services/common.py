"""
Helpers shared by the use-case modules.
"""

import logging
import uuid

from puppy_care.core.result import DomainError, Failure, Success


def new_id() -> str:
    return str(uuid.uuid4())


def require_found(lookup, resource: str, id: str):
    """Turn ``Success(None)`` from a repository lookup into NOT_FOUND."""
    if isinstance(lookup, Failure):
        return lookup
    if lookup.value is None:
        return Failure(DomainError.not_found(resource, id))
    return lookup


def log_outcome(logger: logging.Logger, action: str, result, **context):
    """INFO for a successful write, WARNING with the error code otherwise."""
    if isinstance(result, Success):
        logger.info(f"{action} succeeded", extra={"context": context})
    else:
        logger.warning(
            f"{action} failed: {result.error.message}",
            extra={"context": {**context, "error_code": result.error.code.value}},
        )
    return result
