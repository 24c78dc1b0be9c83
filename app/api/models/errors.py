"""API error response models."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "DOCUMENT_TOO_LARGE",
                    "message": "HTML document exceeds the size limit",
                    "details": {"size": 7340032, "max_size": 5242880},
                }
            }
        }
    }


class ErrorCodes:
    """Standardized error codes."""

    # 4xx Client Errors
    DOCUMENT_TOO_LARGE = "DOCUMENT_TOO_LARGE"
    BATCH_TOO_LARGE = "BATCH_TOO_LARGE"

    # 5xx Server Errors
    ANALYSIS_FAILED = "ANALYSIS_FAILED"
