"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    NO_TOKEN = "NO_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # Not found errors (404)
    NOT_FOUND = "NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    DUPLICATE_ACTION = "DUPLICATE_ACTION"
    NO_SUCH_ACTION = "NO_SUCH_ACTION"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    SIGNING_ERROR = "SIGNING_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class MissingCredentialError(AppException):
    """No token was presented on a private route."""

    def __init__(self, message: str = "No token, authorization denied") -> None:
        super().__init__(
            error_code=ErrorCode.NO_TOKEN,
            message=message,
            status_code=401,
        )


class InvalidTokenError(AppException):
    """Token failed signature, shape or expiry checks.

    The message is the same for every cause; callers must not be told
    whether a token expired or was tampered with.
    """

    def __init__(self, message: str = "Token is not valid") -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_TOKEN,
            message=message,
            status_code=401,
        )


class UnauthorizedError(AppException):
    """Caller is authenticated but not entitled to act on the resource."""

    def __init__(self, message: str = "User not authorized") -> None:
        super().__init__(
            error_code=ErrorCode.NOT_AUTHORIZED,
            message=message,
            status_code=401,
        )


class ValidationError(AppException):
    """Input failed validation."""

    def __init__(self, message: str = "Invalid input", details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details=details,
        )


class InvalidCredentialsError(AppException):
    """Email unknown or password mismatch (indistinguishable on purpose)."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid credentials",
            status_code=400,
        )


class UserAlreadyExistsError(AppException):
    """A user with this email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_ALREADY_EXISTS,
            message="User already exists",
            status_code=400,
            details={"email": email},
        )


class DuplicateActionError(AppException):
    """A toggle action was repeated by the same identity."""

    def __init__(self, message: str = "Action already performed") -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_ACTION,
            message=message,
            status_code=400,
        )


class NoSuchActionError(AppException):
    """A toggle action was undone that the identity never performed."""

    def __init__(self, message: str = "Action has not been performed yet") -> None:
        super().__init__(
            error_code=ErrorCode.NO_SUCH_ACTION,
            message=message,
            status_code=400,
        )


class NotFoundError(AppException):
    """Resource not found."""

    def __init__(
        self,
        message: str = "Not found",
        error_code: ErrorCode = ErrorCode.NOT_FOUND,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class PostNotFoundError(NotFoundError):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            message="Post not found",
            error_code=ErrorCode.POST_NOT_FOUND,
            details={"post_id": post_id},
        )


class ProfileNotFoundError(NotFoundError):
    """Profile not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            message="Profile not found",
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            details={"user_id": user_id},
        )


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            message="User not found",
            error_code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class PersistenceError(AppException):
    """The persistence collaborator failed. Details stay in the logs."""

    def __init__(self, message: str = "Server error") -> None:
        super().__init__(
            error_code=ErrorCode.PERSISTENCE_ERROR,
            message=message,
            status_code=500,
        )


class SigningError(AppException):
    """A token could not be signed."""

    def __init__(self, message: str = "Server error") -> None:
        super().__init__(
            error_code=ErrorCode.SIGNING_ERROR,
            message=message,
            status_code=500,
        )
