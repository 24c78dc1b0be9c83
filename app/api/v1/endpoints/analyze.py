"""Analysis endpoints."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from app.api.models.errors import ErrorCodes, ErrorResponse
from app.api.models.requests import AnalyzeRequest, BatchAnalyzeRequest
from app.api.models.responses import BatchAnalysisResponse, PageAnalysisResponse
from seo_inspector.config.settings import settings
from seo_inspector.report.aggregator import analyze_html, analyze_many

logger = logging.getLogger("seo_inspector.api")

router = APIRouter(tags=["Analysis"])


def _error(status_code: int, code: str, message: str, details: dict[str, Any] | None = None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": message,
                "details": details,
            }
        },
    )


def _check_document_size(document: AnalyzeRequest) -> None:
    size = len(document.html.encode("utf-8"))
    max_size = settings.api.max_html_bytes
    if size > max_size:
        raise _error(
            413,
            ErrorCodes.DOCUMENT_TOO_LARGE,
            "HTML document exceeds the size limit",
            {"page_identifier": document.page_identifier, "size": size, "max_size": max_size},
        )


@router.post(
    "/analyze",
    response_model=PageAnalysisResponse,
    responses={
        413: {"model": ErrorResponse, "description": "Document too large"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Analyze one HTML document",
    description="""
Analyze raw HTML for on-page SEO issues and target keywords.

**The result contains:**
- **Facts**: title, meta description, headings, images, JSON-LD, canonical, robots, social tags
- **Keywords**: top words and two-word phrases with placement flags
- **Issues / Recommendations**: sorted by impact, highest first
- **Confidence**: 100, or 40 when the page looks client-side rendered
""",
)
async def analyze(body: AnalyzeRequest) -> dict[str, Any]:
    """Analyze a single HTML document."""
    _check_document_size(body)

    try:
        result = await run_in_threadpool(analyze_html, body.html, body.page_identifier)
    except Exception as e:
        logger.exception("Analysis failed for %s", body.page_identifier)
        raise _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCodes.ANALYSIS_FAILED,
            "Analysis failed",
            {"page_identifier": body.page_identifier, "reason": str(e)},
        ) from e

    return result.to_dict()


@router.post(
    "/analyze/batch",
    response_model=BatchAnalysisResponse,
    responses={
        413: {"model": ErrorResponse, "description": "Document or batch too large"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Analyze several HTML documents",
    description="""
Analyze a list of HTML documents in parallel.

Results are returned in the same order as the submitted documents, together with
issue totals by severity across the batch.
""",
)
async def analyze_batch(body: BatchAnalyzeRequest) -> dict[str, Any]:
    """Analyze a batch of HTML documents."""
    max_documents = settings.api.max_batch_documents
    if len(body.documents) > max_documents:
        raise _error(
            413,
            ErrorCodes.BATCH_TOO_LARGE,
            "Too many documents in batch",
            {"count": len(body.documents), "max_documents": max_documents},
        )

    for document in body.documents:
        _check_document_size(document)

    pairs = [(document.page_identifier, document.html) for document in body.documents]

    try:
        batch = await run_in_threadpool(analyze_many, pairs, body.max_workers)
    except Exception as e:
        logger.exception("Batch analysis failed")
        raise _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCodes.ANALYSIS_FAILED,
            "Batch analysis failed",
            {"reason": str(e)},
        ) from e

    return batch.to_dict()
