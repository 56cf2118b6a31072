"""
Failure taxonomy for the blog admin workflow.

Every failure is one of: a local validation failure, a transport failure,
or a request the backend rejected. None of them is fatal.
"""


class BlogAdminError(Exception):
    """Base class for all blog admin failures."""


class DraftValidationError(BlogAdminError):
    """A required draft field is missing or the media type is not accepted."""


class TransportError(BlogAdminError):
    """The request could not be sent or its response could not be parsed."""


class RejectedRequest(BlogAdminError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"Backend rejected request with status {status_code}")
