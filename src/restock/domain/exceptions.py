"""Domain-level exceptions.

Every failure the draft workflow can hit is a subclass of DomainException
so the workflow boundary and the CLI can catch them uniformly and turn
them into a single user-facing message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A candidate line item broke a structural or business rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyBatchError(DomainException):
    """Submit was invoked with no line items in the draft."""


class SubmissionInProgressError(DomainException):
    """A batch submission is already in flight for this session."""


class SubmissionError(DomainException):
    """A remote call failed. The draft is always left untouched."""


class AuthenticationError(SubmissionError):
    """The server answered 401; the stored credential has been cleared."""

    def __init__(self, message: str = "authentication required") -> None:
        super().__init__(message)


class ServerRejectionError(SubmissionError):
    """The server answered with a non-success status or payload."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class NetworkError(SubmissionError):
    """The server could not be reached (connection refused, timeout, ...)."""
