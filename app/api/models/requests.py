"""API request models."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class AnalyzeRequest(BaseModel):
    """Request body for single-document analysis."""

    html: str = Field(
        ...,
        description="Raw HTML of the page to analyze",
        examples=["<html><head><title>Example</title></head><body><h1>Hello</h1></body></html>"],
    )
    page_identifier: str = Field(
        default="Provided HTML",
        max_length=2048,
        description="Opaque label echoed back in the result",
    )

    @field_validator("html")
    @classmethod
    def validate_html_not_blank(cls, v: str) -> str:
        """Reject empty documents."""
        if not v.strip():
            raise ValueError("HTML content must not be empty")
        return v


class BatchAnalyzeRequest(BaseModel):
    """Request body for batch analysis."""

    documents: list[AnalyzeRequest] = Field(
        ...,
        min_length=1,
        description="Documents to analyze; results keep this order",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        le=32,
        description="Parallel workers (defaults to server setting)",
    )
