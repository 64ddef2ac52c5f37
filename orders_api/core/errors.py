"""Errors surfaced by the application core.

Every OrderService call either returns its value or raises exactly one of
BadRequestError, NotFoundError or InternalError.
"""


class AppError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """Caller input violates a domain rule or is malformed."""


class NotFoundError(AppError):
    """The referenced order does not exist."""


class InternalError(AppError):
    """The storage adapter failed."""
