"""Base classes for the SEO audit framework."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from enum import Enum

from seo_inspector.config.settings import SeoSettings
from seo_inspector.keywords.scorer import KeywordAnalysis
from seo_inspector.parser.facts import PageFacts


class Severity(Enum):
    """Issue severity levels, most severe first."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


@dataclass(frozen=True)
class Issue:
    """An SEO deficiency found on the page.

    Attributes:
        severity: Severity level of the finding
        message: Human-readable description
        impact_score: Fixed 0-100 ranking constant of the rule that fired
        area: Topic the issue belongs to (e.g. "Meta Tags")
        rule_id: Identifier shared with the paired recommendation
    """
    severity: Severity
    message: str
    impact_score: int
    area: str
    rule_id: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = asdict(self)
        d["severity"] = self.severity.value
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Issue:
        return cls(**{**data, "severity": Severity(data["severity"])})


@dataclass(frozen=True)
class Recommendation:
    """A suggested remediation for one or more issues."""
    text: str
    impact_score: int
    reason: str
    implementation_hint: str
    rule_id: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Recommendation:
        return cls(**data)


@dataclass
class AuditResult:
    """Issues and recommendations produced by a single audit."""
    issues: list[Issue] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)

    def add(self, issue: Issue, recommendation: Recommendation | None = None) -> None:
        self.issues.append(issue)
        if recommendation is not None:
            self.recommendations.append(recommendation)


class BaseAudit(ABC):
    """Abstract base class for all audit checks.

    Subclasses must implement:
    - audit_id: Unique identifier
    - name: Human-readable name
    - area: Area reported on emitted issues
    - run(): Execute the audit and return AuditResult

    Audits are independent of each other: none may rely on another having run.
    """

    @property
    @abstractmethod
    def audit_id(self) -> str:
        """Unique identifier for this audit type."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this audit."""
        pass

    @property
    @abstractmethod
    def area(self) -> str:
        """Area reported on emitted issues."""
        pass

    @property
    def description(self) -> str:
        """Optional description of what this audit checks."""
        return ""

    def issue(self, severity: Severity, impact: int, message: str) -> Issue:
        return Issue(
            severity=severity,
            message=message,
            impact_score=impact,
            area=self.area,
            rule_id=self.audit_id,
        )

    def recommendation(self, impact: int, text: str, reason: str, hint: str) -> Recommendation:
        return Recommendation(
            text=text,
            impact_score=impact,
            reason=reason,
            implementation_hint=hint,
            rule_id=self.audit_id,
        )

    @abstractmethod
    def run(
        self,
        facts: PageFacts,
        keywords: KeywordAnalysis | None,
        config: SeoSettings,
    ) -> AuditResult:
        """Execute the audit check.

        Args:
            facts: Facts extracted from the document
            keywords: Keyword analysis, when available
            config: SEO thresholds

        Returns:
            AuditResult with findings (empty when the check passes)
        """
        pass
