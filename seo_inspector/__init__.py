"""On-page SEO analysis engine."""
from seo_inspector.report.aggregator import (
    BatchAnalysis,
    PageAnalysis,
    analyze_document,
    analyze_html,
    analyze_many,
)

__version__ = "1.0.0"

__all__ = [
    "PageAnalysis",
    "BatchAnalysis",
    "analyze_document",
    "analyze_html",
    "analyze_many",
    "__version__",
]
