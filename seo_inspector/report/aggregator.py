"""Composition of extraction, keyword scoring and rule evaluation."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from seo_inspector.audit.base import Issue, Recommendation, Severity
from seo_inspector.audit.engine import evaluate
from seo_inspector.config.settings import Settings, settings as default_settings
from seo_inspector.keywords.scorer import KeywordAnalysis, score_keywords
from seo_inspector.parser.document import ParsedDocument, SoupDocument
from seo_inspector.parser.fact_extractor import extract_body_text, extract_facts
from seo_inspector.parser.facts import PageFacts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageAnalysis:
    """Complete analysis of one document. Never mutated after creation."""
    page_identifier: str
    facts: PageFacts
    keyword_analysis: KeywordAnalysis
    issues: tuple[Issue, ...]
    recommendations: tuple[Recommendation, ...]
    is_client_rendered: bool
    confidence: int

    def count_by_severity(self) -> dict[str, int]:
        counts = {severity.value: 0 for severity in Severity}
        for issue in self.issues:
            counts[issue.severity.value] += 1
        return counts

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "page_identifier": self.page_identifier,
            "facts": self.facts.to_dict(),
            "keyword_analysis": self.keyword_analysis.to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "is_client_rendered": self.is_client_rendered,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PageAnalysis:
        return cls(
            page_identifier=data["page_identifier"],
            facts=PageFacts.from_dict(data["facts"]),
            keyword_analysis=KeywordAnalysis.from_dict(data["keyword_analysis"]),
            issues=tuple(Issue.from_dict(i) for i in data.get("issues", ())),
            recommendations=tuple(Recommendation.from_dict(r) for r in data.get("recommendations", ())),
            is_client_rendered=data["is_client_rendered"],
            confidence=data["confidence"],
        )


@dataclass(frozen=True)
class BatchAnalysis:
    """Per-document analyses in submission order plus severity totals."""
    count: int
    per_document: tuple[PageAnalysis, ...]
    totals: dict[str, dict[str, int]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "per_document": [analysis.to_dict() for analysis in self.per_document],
            "totals": self.totals,
        }

    @classmethod
    def from_dict(cls, data: dict) -> BatchAnalysis:
        return cls(
            count=data["count"],
            per_document=tuple(PageAnalysis.from_dict(d) for d in data.get("per_document", ())),
            totals=data.get("totals", {}),
        )


def analyze_document(
    document: ParsedDocument,
    page_identifier: str,
    body_text: str | None = None,
    config: Settings | None = None,
) -> PageAnalysis:
    """Run the full pipeline on one parsed document.

    Args:
        document: Parsed document capability
        page_identifier: Opaque label echoed in the result
        body_text: Text to mine for keywords; defaults to the document body
        config: Settings; defaults to the global settings

    Returns:
        PageAnalysis
    """
    config = config if config is not None else default_settings
    facts = extract_facts(document)
    if body_text is None:
        body_text = extract_body_text(document)

    keyword_analysis = score_keywords(
        body_text,
        title=facts.title,
        meta_description=facts.meta_description,
        h1_texts=facts.h1_texts,
        h2_texts=facts.h2_texts,
        config=config.keywords,
    )
    evaluation = evaluate(facts, keyword_analysis, config=config.seo)

    return PageAnalysis(
        page_identifier=page_identifier,
        facts=facts,
        keyword_analysis=keyword_analysis,
        issues=evaluation.issues,
        recommendations=evaluation.recommendations,
        is_client_rendered=facts.client_render_signal,
        confidence=evaluation.confidence,
    )


def analyze_html(
    html: str,
    page_identifier: str = "Provided HTML",
    config: Settings | None = None,
) -> PageAnalysis:
    """Parse raw HTML and analyze it."""
    return analyze_document(SoupDocument(html), page_identifier, config=config)


def summarize(analyses: Iterable[PageAnalysis]) -> dict[str, dict[str, int]]:
    """Count issues by severity over a set of analyses."""
    by_severity = {severity.value: 0 for severity in Severity}
    for analysis in analyses:
        for issue in analysis.issues:
            by_severity[issue.severity.value] += 1
    return {"by_severity": by_severity}


def analyze_many(
    documents: Iterable[tuple[str, str]],
    max_workers: int | None = None,
    config: Settings | None = None,
) -> BatchAnalysis:
    """Analyze several documents, possibly in parallel.

    Args:
        documents: ``(page_identifier, html)`` pairs
        max_workers: Thread pool size; defaults to ``settings.batch.max_workers``
        config: Settings; defaults to the global settings

    Returns:
        BatchAnalysis whose ``per_document`` follows submission order
    """
    config = config if config is not None else default_settings
    documents = list(documents)
    workers = max(1, max_workers or config.batch.max_workers)
    logger.debug("Analyzing %d documents with %d workers", len(documents), workers)

    def _analyze(item: tuple[str, str]) -> PageAnalysis:
        page_identifier, html = item
        return analyze_html(html, page_identifier, config=config)

    if workers == 1 or len(documents) <= 1:
        results = [_analyze(item) for item in documents]
    else:
        # map() yields in submission order regardless of completion order
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(_analyze, documents))

    return BatchAnalysis(
        count=len(results),
        per_document=tuple(results),
        totals=summarize(results),
    )
