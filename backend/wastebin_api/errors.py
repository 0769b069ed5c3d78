"""
Errors
======

Every failure on the ingest route ends up as the same JSON body:

    {"status": "00", "message": "<what went wrong>"}

Each error class knows its HTTP status code, so the exception handler in
main.py only has to copy `status_code` and `message` into the response.
"""


class ConfigError(Exception):
    """Bad or missing configuration. Raised at startup, never per request."""


class IngestError(Exception):
    """Base class for errors that become a {"status": "00"} response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(IngestError):
    """The m/k security headers are missing or wrong."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized: Invalid security headers"):
        super().__init__(message)


class PayloadValidationError(IngestError):
    """The request body can't become a reading."""

    status_code = 400


class MissingFieldsError(PayloadValidationError):
    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)


class InvalidCommandError(PayloadValidationError):
    def __init__(self, message: str = 'Invalid command type. Expected "RP"'):
        super().__init__(message)


class InvalidTimestampError(PayloadValidationError):
    def __init__(self, message: str = "Invalid time value"):
        super().__init__(message)


class StorageError(IngestError):
    """
    The database refused the insert or could not be reached.

    `detail` keeps the backend's own text; `message` is what the device sees.
    """

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(f"Database error: {detail}")
        self.detail = detail
