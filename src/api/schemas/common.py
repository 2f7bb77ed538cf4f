"""Common Pydantic schemas shared across the API."""

from typing import Annotated, Any

from pydantic import BaseModel, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ErrorResponse(BaseModel):
    """Standardized error response."""

    msg: str
    error_code: str
    details: Any | None = None


class FieldError(BaseModel):
    """One failed field check in a rejected request body."""

    msg: str
    field: str
    type: str


class ValidationErrorResponse(BaseModel):
    """Body returned when request validation fails."""

    msg: str
    error_code: str
    errors: list[FieldError]


class MessageResponse(BaseModel):
    """Simple message response."""

    msg: str
