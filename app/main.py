"""FastAPI entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.v1.router import router as api_router
from seo_inspector import __version__
from seo_inspector.config.log_config import configure_logging
from seo_inspector.config.settings import settings


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach security headers to every response."""

    DOCS_PATHS = ("/api/docs", "/api/redoc")

    # Swagger UI and ReDoc pull their assets from jsdelivr
    DOCS_CSP = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "img-src 'self' data: https://fastapi.tiangolo.com"
    )
    API_CSP = "default-src 'none'; frame-ancestors 'none'"

    HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "no-referrer",
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        csp = self.DOCS_CSP if request.url.path in self.DOCS_PATHS else self.API_CSP
        response.headers["Content-Security-Policy"] = csp
        response.headers.update(self.HEADERS)
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.logging.level)
    yield


app = FastAPI(
    title="SEO Inspector API",
    description="""
API for analyzing raw HTML for on-page SEO issues.

## Features

- **Fact extraction**: title, meta description, headings, image alt text, JSON-LD,
  canonical, viewport, robots directives, social tags
- **Keyword candidates**: top words and two-word phrases, scored by frequency and placement
- **Prioritized findings**: issues and recommendations ranked by impact
- **Client-render detection**: reduced confidence for single-page-app shells

## Usage

1. `POST /api/v1/analyze` - Analyze one document
2. `POST /api/v1/analyze/batch` - Analyze several documents, results in submission order
""",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)


@app.exception_handler(HTTPException)
async def error_envelope_handler(request: Request, exc: HTTPException):
    """Return ``{"error": {...}}`` bodies unwrapped from ``detail``."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)
    return await http_exception_handler(request, exc)


# CORS middleware (for API cross-origin requests)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.add_middleware(SecurityHeadersMiddleware)

# Mount API router
app.include_router(api_router, prefix="/api/v1")
