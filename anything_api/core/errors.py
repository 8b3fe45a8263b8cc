"""
Domain errors raised by services and translated to HTTP responses by the
exception handlers registered in anything_api.api.main.
"""
from __future__ import annotations


class DomainError(Exception):
    """Base class for errors that map onto a fixed HTTP status."""

    status_code: int = 400
    error_type: str = "domain_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """The requested row does not exist or has been soft-deleted."""

    status_code = 404
    error_type = "not_found"


class InvalidReferenceError(DomainError):
    """A foreign key in the payload points at a missing or deleted row."""

    status_code = 400
    error_type = "invalid_reference"


class ConflictError(DomainError):
    """The operation would leave dependent rows orphaned."""

    status_code = 409
    error_type = "conflict"


class BadRequestError(DomainError):
    """The request is well-formed but cannot be honoured (e.g. a stale invite)."""

    status_code = 400
    error_type = "bad_request"


class AuthenticationError(DomainError):
    """Credentials or tokens are missing, invalid or expired."""

    status_code = 401
    error_type = "unauthorized"
