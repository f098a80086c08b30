"""
Custom exceptions for the application.

Expected failures travel as ``Failure(DomainError)`` values; the classes
below are reserved for programming and deployment errors.
"""


class ResultUnwrapError(Exception):
    """
    Raised by ``get_or_raise()`` when a Failure is unwrapped.

    Only process boundaries (scripts, the HTTP error handler) should let this
    escape; use-cases branch on the Result instead.
    """

    def __init__(self, error):
        self.error = error
        super().__init__(f"{error.code.value}: {error.message}")


class ConfigurationError(Exception):
    """Raised when an environment setting has an unsupported value."""

    def __init__(self, message: str, invalid_keys: list[str] | None = None):
        self.message = message
        self.invalid_keys = invalid_keys or []
        super().__init__(message)
