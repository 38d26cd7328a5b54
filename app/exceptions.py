"""
Error taxonomy shared by the storage, service and HTTP layers.

Repositories and services raise these; ``main.create_app`` maps each class to
an HTTP status code and the response envelope.
"""


class AppError(Exception):
    """
    Base class for every error the API reports to its callers.

    ``description`` names the operation that failed; HTTP handlers fill it in
    before the error reaches the response envelope.
    """

    status_code = 500
    description = ""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed input, bad id format or a failed business check."""

    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class NotFound(AppError):
    status_code = 404


class ConstraintViolation(AppError):
    """A write rejected by a uniqueness or self-reference rule."""


class PersistenceError(AppError):
    """Any other failure reported by the database."""


class NoRowsAffected(PersistenceError):
    """The store reported zero affected rows for a write."""

    def __init__(self, message: str = "no rows affected"):
        super().__init__(message)


class RequestTimeout(AppError):
    def __init__(self, message: str = "request timed out"):
        super().__init__(message)
