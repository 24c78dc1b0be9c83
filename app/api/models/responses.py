"""API response models."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

SeverityLiteral = Literal["critical", "high", "medium", "low", "info"]


# === Fact Models ===


class HeadingCounts(BaseModel):
    """Heading counts by level."""

    h1: int = Field(..., ge=0)
    h2: int = Field(..., ge=0)
    h3: int = Field(..., ge=0)


class RobotsDirectives(BaseModel):
    """Meta robots directives."""

    noindex: bool = False
    nofollow: bool = False


class SocialTags(BaseModel):
    """Open Graph / Twitter Card presence."""

    has_open_graph: bool = False
    has_twitter_cards: bool = False
    has_social_title: bool = False
    has_social_image: bool = False


class SchemaBlock(BaseModel):
    """One JSON-LD block, parsed or marked invalid."""

    status: Literal["parsed", "invalid"]
    data: Any = None
    error: str | None = None


class PageFacts(BaseModel):
    """SEO facts extracted from the document."""

    title: str | None = None
    meta_description: str | None = None
    heading_counts: HeadingCounts
    h1_texts: list[str] = Field(default_factory=list)
    h2_texts: list[str] = Field(default_factory=list)
    images_missing_alt: list[str] = Field(default_factory=list)
    schema_blocks: list[SchemaBlock] = Field(default_factory=list)
    canonical_url: str | None = None
    has_viewport: bool = False
    robots_directives: RobotsDirectives
    social_tags: SocialTags
    client_render_signal: bool = False


# === Keyword Models ===


class KeywordCandidate(BaseModel):
    """Scored keyword candidate."""

    surface_form: str
    normalized_form: str
    score: float = Field(..., ge=0)
    frequency: int = Field(..., ge=0)
    density_percent: float = Field(..., ge=0, le=100)
    in_title: bool
    in_meta_description: bool
    in_h1: bool
    in_h2: bool


class KeywordAnalysis(BaseModel):
    """Ranked keyword candidates."""

    top_words: list[KeywordCandidate] = Field(default_factory=list)
    top_phrases: list[KeywordCandidate] = Field(default_factory=list)
    primary_phrase: str | None = None
    placement_gaps: list[Literal["title", "meta description", "H1", "H2"]] = Field(default_factory=list)
    total_words: int = Field(0, ge=0)


# === Finding Models ===


class Issue(BaseModel):
    """Detected SEO deficiency."""

    severity: SeverityLiteral
    message: str
    impact_score: int = Field(..., ge=0, le=100)
    area: str
    rule_id: str


class Recommendation(BaseModel):
    """Suggested remediation."""

    text: str
    impact_score: int = Field(..., ge=0, le=100)
    reason: str
    implementation_hint: str
    rule_id: str


# === Analysis Models ===


class PageAnalysisResponse(BaseModel):
    """Complete analysis of one document."""

    page_identifier: str
    facts: PageFacts
    keyword_analysis: KeywordAnalysis
    issues: list[Issue]
    recommendations: list[Recommendation]
    is_client_rendered: bool
    confidence: int = Field(..., ge=0, le=100, description="Completeness of the static analysis")


class BatchTotals(BaseModel):
    """Issue counts across the batch."""

    by_severity: dict[SeverityLiteral, int]


class BatchAnalysisResponse(BaseModel):
    """Analyses of several documents in submission order."""

    count: int = Field(..., ge=0)
    per_document: list[PageAnalysisResponse]
    totals: BatchTotals


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"]
    version: str
    timestamp: datetime
    checks: dict[str, bool] = Field(default_factory=dict)
