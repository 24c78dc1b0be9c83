"""API Pydantic models."""
from app.api.models.errors import ErrorCodes, ErrorDetail, ErrorResponse
from app.api.models.requests import AnalyzeRequest, BatchAnalyzeRequest
from app.api.models.responses import BatchAnalysisResponse, HealthResponse, PageAnalysisResponse

__all__ = [
    "AnalyzeRequest",
    "BatchAnalyzeRequest",
    "PageAnalysisResponse",
    "BatchAnalysisResponse",
    "HealthResponse",
    "ErrorResponse",
    "ErrorDetail",
    "ErrorCodes",
]
