"""Audit framework for on-page SEO checks."""
from seo_inspector.audit.base import AuditResult, BaseAudit, Issue, Recommendation, Severity
from seo_inspector.audit.engine import RuleEvaluation, evaluate
from seo_inspector.audit.registry import AuditRegistry
from seo_inspector.audit.seo_audits import build_default_registry, seo_registry

__all__ = [
    "BaseAudit",
    "AuditResult",
    "Issue",
    "Recommendation",
    "Severity",
    "AuditRegistry",
    "RuleEvaluation",
    "evaluate",
    "build_default_registry",
    "seo_registry",
]
