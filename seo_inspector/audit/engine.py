"""Rule evaluation: run the audit table and rank its findings."""
from __future__ import annotations

from dataclasses import dataclass

from seo_inspector.audit.base import Issue, Recommendation
from seo_inspector.audit.registry import AuditRegistry
from seo_inspector.audit.seo_audits import seo_registry
from seo_inspector.config.settings import SeoSettings, settings
from seo_inspector.keywords.scorer import KeywordAnalysis
from seo_inspector.parser.facts import PageFacts


@dataclass(frozen=True)
class RuleEvaluation:
    """Ranked findings of one document plus the confidence of the analysis."""
    issues: tuple[Issue, ...]
    recommendations: tuple[Recommendation, ...]
    confidence: int


def rank_by_impact(items):
    """Sort by impact descending; ties keep detection order."""
    return tuple(sorted(items, key=lambda item: -item.impact_score))


def evaluate(
    facts: PageFacts,
    keyword_analysis: KeywordAnalysis | None = None,
    registry: AuditRegistry | None = None,
    config: SeoSettings | None = None,
) -> RuleEvaluation:
    """Run every registered audit against the facts of one document.

    Args:
        facts: Facts from the fact extractor
        keyword_analysis: Keyword results (keyword-based audits skip without it)
        registry: Audit table; defaults to the built-in SEO audits
        config: SEO thresholds; defaults to the global settings

    Returns:
        RuleEvaluation with issues and recommendations ranked by impact
    """
    registry = registry if registry is not None else seo_registry
    config = config if config is not None else settings.seo

    issues: list[Issue] = []
    recommendations: list[Recommendation] = []
    for result in registry.run_all(facts, keyword_analysis, config):
        issues.extend(result.issues)
        recommendations.extend(result.recommendations)

    confidence = (
        config.client_rendered_confidence if facts.client_render_signal
        else config.full_confidence
    )

    return RuleEvaluation(
        issues=rank_by_impact(issues),
        recommendations=rank_by_impact(recommendations),
        confidence=confidence,
    )
