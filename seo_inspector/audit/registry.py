"""Audit registry holding the ordered table of checks."""
from __future__ import annotations

from seo_inspector.audit.base import AuditResult, BaseAudit
from seo_inspector.config.settings import SeoSettings
from seo_inspector.keywords.scorer import KeywordAnalysis
from seo_inspector.parser.facts import PageFacts


class AuditRegistry:
    """Ordered registry of audit checks.

    Registration order is detection order, which breaks impact ties when
    results are ranked.

    Usage:
        registry = AuditRegistry()
        registry.register(MyAudit())
        results = registry.run_all(facts, keywords, settings.seo)
    """

    def __init__(self):
        self._audits: dict[str, BaseAudit] = {}

    def register(self, audit: BaseAudit) -> None:
        """Register an audit instance.

        Args:
            audit: Audit instance to register

        Raises:
            ValueError: If an audit with the same id is already registered
        """
        if audit.audit_id in self._audits:
            raise ValueError(f"Audit already registered: {audit.audit_id}")
        self._audits[audit.audit_id] = audit

    def unregister(self, audit_id: str) -> None:
        """Unregister an audit by ID."""
        self._audits.pop(audit_id, None)

    def get(self, audit_id: str) -> BaseAudit | None:
        """Get an audit by ID.

        Returns:
            Audit instance or None if not found
        """
        return self._audits.get(audit_id)

    def list_all(self) -> list[BaseAudit]:
        """List all registered audits in detection order."""
        return list(self._audits.values())

    def __len__(self) -> int:
        return len(self._audits)

    def run(
        self,
        audit_id: str,
        facts: PageFacts,
        keywords: KeywordAnalysis | None,
        config: SeoSettings,
    ) -> AuditResult | None:
        """Run a specific audit.

        Returns:
            AuditResult or None if audit not found
        """
        audit = self._audits.get(audit_id)
        if audit is None:
            return None
        return audit.run(facts, keywords, config)

    def run_all(
        self,
        facts: PageFacts,
        keywords: KeywordAnalysis | None,
        config: SeoSettings,
    ) -> list[AuditResult]:
        """Run all registered audits in detection order."""
        return [
            audit.run(facts, keywords, config)
            for audit in self._audits.values()
        ]
