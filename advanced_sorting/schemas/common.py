"""Error schemas shared by all endpoints."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail


def error_body(code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build the standard error payload, e.g. error_body("INVALID_REQUEST", "...")."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message, detail=detail)).model_dump()
