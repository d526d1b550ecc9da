"""Common schemas used across multiple endpoints."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Response model for errors."""
    detail: str
    code: str


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Request violates a contract rule"},
    404: {"model": ErrorResponse, "description": "File not found"},
    409: {"model": ErrorResponse, "description": "Conflicting upload state"},
}
