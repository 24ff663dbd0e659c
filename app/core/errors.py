"""
Error taxonomy for the HTTP surface.

Each error carries a static client-facing message and the status code it maps
to. Causes (driver errors, hashing internals) are chained for server-side
logging only and are never rendered into a response.
"""

from fastapi import status


class AppError(Exception):
    """Base for errors that map to a `{"status": "error", "message": ...}` response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class RequestValidationFailed(AppError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation error"


class DuplicateEmailError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User with that email already exists"


class InvalidCredentialsError(AppError):
    """
    Login failed. Raised for both an unknown email and a wrong password so
    callers have nothing to branch on.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password"


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong"
