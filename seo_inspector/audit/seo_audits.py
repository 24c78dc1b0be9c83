"""On-page SEO audit implementations.

Impact scores are fixed constants used for ranking; they are not measured.
"""
from __future__ import annotations

from seo_inspector.audit.base import AuditResult, BaseAudit, Severity
from seo_inspector.audit.registry import AuditRegistry
from seo_inspector.config.settings import SeoSettings
from seo_inspector.keywords.scorer import KeywordAnalysis
from seo_inspector.parser.facts import PageFacts


class ClientRenderAudit(BaseAudit):
    """Flags HTML shells that a client-side script fills in after load."""

    @property
    def audit_id(self) -> str:
        return "client_render"

    @property
    def name(self) -> str:
        return "Client-Side Rendering"

    @property
    def area(self) -> str:
        return "Rendering"

    @property
    def description(self) -> str:
        return "Static analysis of a client-rendered shell misses runtime content"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        if not facts.client_render_signal:
            return result

        result.add(
            self.issue(
                Severity.CRITICAL, 100,
                "Analysis incomplete: page appears to be rendered client-side, "
                "so content injected at runtime was not analyzed",
            ),
            self.recommendation(
                100,
                "Implement server-side rendering (SSR) or static site generation (SSG)",
                "Crawlers may index the empty HTML shell before scripts populate the page",
                "Use a framework with SSR/SSG support (e.g. Next.js, Nuxt) or pre-render routes at build time",
            ),
        )
        result.recommendations.append(self.recommendation(
            95,
            "Verify the rendered output manually",
            "Titles, meta tags and headings added at runtime are invisible to this static analysis",
            "Load the page in a browser, save the rendered DOM and analyze that HTML instead",
        ))
        return result


class TitleAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "title"

    @property
    def name(self) -> str:
        return "Page Title"

    @property
    def area(self) -> str:
        return "Meta Tags"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        title = facts.title

        if not title:
            result.add(
                self.issue(Severity.HIGH, 90, "Missing page title"),
                self.recommendation(
                    90,
                    "Add a descriptive page title",
                    "Title tags are a critical ranking factor and appear in search results",
                    "<title>Your Primary Keyword - Your Brand Name</title>",
                ),
            )
        elif len(title) > config.title_max_length:
            result.add(
                self.issue(
                    Severity.MEDIUM, 70,
                    f"Title length ({len(title)} chars) exceeds recommended maximum "
                    f"of {config.title_max_length} characters",
                ),
                self.recommendation(
                    70,
                    f"Shorten title to under {config.title_max_length} characters",
                    "Long titles get truncated in search results",
                    f"<title>{title[:config.title_truncate_at]}...</title>",
                ),
            )
        return result


class MetaDescriptionAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "meta_description"

    @property
    def name(self) -> str:
        return "Meta Description"

    @property
    def area(self) -> str:
        return "Meta Tags"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        description = facts.meta_description
        low, high = config.description_min_length, config.description_max_length

        if not description:
            result.add(
                self.issue(Severity.HIGH, 80, "Missing meta description"),
                self.recommendation(
                    80,
                    "Add a descriptive meta description",
                    "Meta descriptions appear in search results and affect click-through rates",
                    '<meta name="description" content="A compelling description of your page '
                    'that includes target keywords and encourages clicks.">',
                ),
            )
        elif not low <= len(description) <= high:
            result.add(
                self.issue(
                    Severity.MEDIUM, 60,
                    f"Meta description length ({len(description)} chars) outside "
                    f"recommended range ({low}-{high})",
                ),
                self.recommendation(
                    60,
                    f"Adjust meta description to be between {low}-{high} characters",
                    "Descriptions outside this range may be truncated or considered thin content",
                    "Expand your meta description to be more descriptive and include target keywords"
                    if len(description) < low
                    else "Shorten your meta description to ensure it displays properly in search results",
                ),
            )
        return result


class HeadingAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "headings"

    @property
    def name(self) -> str:
        return "Heading Structure"

    @property
    def area(self) -> str:
        return "Content Structure"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        h1_count = facts.heading_counts.h1
        h2_count = facts.heading_counts.h2

        if h1_count == 0:
            result.add(
                self.issue(Severity.HIGH, 85, "No H1 heading found"),
                self.recommendation(
                    85,
                    "Add an H1 heading to your page",
                    "H1 headings help search engines understand the main topic of your page",
                    "<h1>Your Primary Keyword/Topic</h1>",
                ),
            )
        elif h1_count > 1:
            result.add(
                self.issue(Severity.MEDIUM, 65, f"Multiple H1 headings found ({h1_count})"),
                self.recommendation(
                    65,
                    "Use only one H1 heading per page",
                    "Multiple H1s can confuse search engines about the main topic of your page",
                    "Keep the most important H1 and change others to H2",
                ),
            )

        if h2_count > 0 and h1_count == 0:
            result.add(
                self.issue(
                    Severity.MEDIUM, 70,
                    f"Heading hierarchy starts at H2 ({h2_count} H2 headings without an H1)",
                ),
                self.recommendation(
                    70,
                    "Place an H1 above the H2 sections",
                    "Skipping the top heading level weakens the outline search engines read",
                    "Promote the main section title to <h1> and keep subsections as <h2>",
                ),
            )
        return result


class RobotsAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "robots"

    @property
    def name(self) -> str:
        return "Robots Directives"

    @property
    def area(self) -> str:
        return "Indexability"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        directives = facts.robots_directives

        if directives.noindex:
            result.add(
                self.issue(Severity.CRITICAL, 100, "Page is set to noindex - it won't appear in search results"),
                self.recommendation(
                    100,
                    "Remove the noindex directive if the page should be indexed",
                    "noindex removes the page from search results entirely",
                    '<meta name="robots" content="index, follow">',
                ),
            )
        if directives.nofollow:
            result.add(
                self.issue(Severity.HIGH, 85, "Page is set to nofollow - links won't pass ranking signals"),
                self.recommendation(
                    85,
                    "Remove the nofollow directive if links should be followed",
                    "nofollow stops search engines from crawling and crediting linked pages",
                    '<meta name="robots" content="index, follow">',
                ),
            )
        return result


class ImageAltAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "image_alt"

    @property
    def name(self) -> str:
        return "Image Alt Text"

    @property
    def area(self) -> str:
        return "Accessibility"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        for src in facts.images_missing_alt:
            result.add(self.issue(Severity.MEDIUM, 60, f"Image missing alt text: {src}"))

        if facts.images_missing_alt:
            result.recommendations.append(self.recommendation(
                60,
                "Add alt text to all images",
                "Alt text improves accessibility and helps search engines understand image content",
                '<img src="image.jpg" alt="Descriptive text about the image">',
            ))
        return result


class StructuredDataAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "structured_data"

    @property
    def name(self) -> str:
        return "Structured Data"

    @property
    def area(self) -> str:
        return "Structured Data"

    @staticmethod
    def _has_required_keys(block) -> bool:
        items = block if isinstance(block, list) else [block]
        return all(
            isinstance(item, dict) and "@context" in item and "@type" in item
            for item in items
        )

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        parsed = facts.parsed_schema_blocks
        failures = facts.schema_failures

        if not parsed:
            result.add(
                self.issue(Severity.MEDIUM, 65, "No structured data (schema.org) found"),
                self.recommendation(
                    65,
                    "Add structured data using JSON-LD",
                    "Structured data helps search engines understand your content and can enable rich results",
                    '<script type="application/ld+json">\n'
                    '{"@context": "https://schema.org", "@type": "WebPage", '
                    f'"name": "{facts.title or "Page title"}"}}\n'
                    "</script>",
                ),
            )

        if failures:
            result.add(
                self.issue(
                    Severity.HIGH, 70,
                    f"Invalid JSON-LD schema ({len(failures)} of {len(facts.schema_blocks)} blocks failed to parse)",
                ),
                self.recommendation(
                    70,
                    "Fix malformed JSON-LD blocks",
                    "Search engines ignore structured data that is not valid JSON",
                    "Validate each <script type=\"application/ld+json\"> body with a JSON linter",
                ),
            )

        incomplete = [block for block in parsed if not self._has_required_keys(block)]
        if incomplete:
            result.add(
                self.issue(
                    Severity.MEDIUM, 55,
                    f"Invalid schema: {len(incomplete)} block(s) missing @context or @type",
                ),
                self.recommendation(
                    55,
                    "Declare @context and @type in every JSON-LD block",
                    "Blocks without a context and type cannot be mapped to a schema.org entity",
                    '{"@context": "https://schema.org", "@type": "Article", ...}',
                ),
            )
        return result


class CanonicalAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "canonical"

    @property
    def name(self) -> str:
        return "Canonical URL"

    @property
    def area(self) -> str:
        return "Meta Tags"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        if not facts.canonical_url:
            result.add(
                self.issue(Severity.MEDIUM, 60, "No canonical URL specified"),
                self.recommendation(
                    60,
                    "Add a canonical link to the page head",
                    "Canonical URLs prevent duplicate content issues and consolidate ranking signals",
                    '<link rel="canonical" href="https://example.com/preferred-url">',
                ),
            )
        return result


class ViewportAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "viewport"

    @property
    def name(self) -> str:
        return "Mobile Viewport"

    @property
    def area(self) -> str:
        return "Mobile"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        if not facts.has_viewport:
            result.add(
                self.issue(Severity.HIGH, 80, "Missing viewport meta tag"),
                self.recommendation(
                    80,
                    "Add a responsive viewport meta tag",
                    "Mobile-friendliness is a ranking factor and requires a viewport declaration",
                    '<meta name="viewport" content="width=device-width, initial-scale=1">',
                ),
            )
        return result


class SocialTagsAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "social_tags"

    @property
    def name(self) -> str:
        return "Open Graph / Twitter Cards"

    @property
    def area(self) -> str:
        return "Social Media"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        social = facts.social_tags

        if not social.has_social_title:
            result.add(
                self.issue(Severity.MEDIUM, 60, "No Open Graph or Twitter Card title found"),
                self.recommendation(
                    60,
                    "Add og:title and twitter:title tags",
                    "Social platforms use these tags as the headline of shared links",
                    '<meta property="og:title" content="Page title">\n'
                    '<meta name="twitter:title" content="Page title">',
                ),
            )
        if not social.has_social_image:
            result.add(
                self.issue(Severity.MEDIUM, 55, "No Open Graph or Twitter Card image found"),
                self.recommendation(
                    55,
                    "Add og:image and twitter:image tags",
                    "Shared links without an image get less engagement",
                    '<meta property="og:image" content="https://example.com/share.jpg">\n'
                    '<meta name="twitter:card" content="summary_large_image">',
                ),
            )
        return result


class KeywordPlacementAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "keyword_placement"

    @property
    def name(self) -> str:
        return "Keyword Placement"

    @property
    def area(self) -> str:
        return "Keywords"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        if keywords is None or not keywords.primary_phrase or not keywords.placement_gaps:
            return result

        gaps = ", ".join(keywords.placement_gaps)
        result.add(
            self.issue(
                Severity.LOW, 40,
                f'Primary keyword phrase "{keywords.primary_phrase}" does not appear in: {gaps}',
            ),
            self.recommendation(
                40,
                f'Use "{keywords.primary_phrase}" in the {gaps}',
                "Placing the target phrase in high-value elements reinforces relevance",
                f"Work the phrase into the {gaps} where it reads naturally",
            ),
        )
        return result


class ContentDepthAudit(BaseAudit):

    @property
    def audit_id(self) -> str:
        return "content_depth"

    @property
    def name(self) -> str:
        return "Content Depth"

    @property
    def area(self) -> str:
        return "Content"

    def run(self, facts: PageFacts, keywords: KeywordAnalysis | None, config: SeoSettings) -> AuditResult:
        result = AuditResult()
        if keywords is None or keywords.total_words == 0:
            return result

        if keywords.total_words < config.min_content_words:
            result.add(
                self.issue(Severity.INFO, 30, f"Page has thin content ({keywords.total_words} words)"),
                self.recommendation(
                    30,
                    f"Expand the page to at least {config.min_content_words} words",
                    "Thin pages give search engines little to rank",
                    "Add substantive sections that answer the questions your visitors search for",
                ),
            )
        return result


def build_default_registry() -> AuditRegistry:
    """Return a registry with every built-in audit in detection order.

    The client-render audit comes first so that its critical issue ranks
    above other impact-100 findings.
    """
    registry = AuditRegistry()
    for audit in (
        ClientRenderAudit(),
        TitleAudit(),
        MetaDescriptionAudit(),
        HeadingAudit(),
        RobotsAudit(),
        ImageAltAudit(),
        StructuredDataAudit(),
        CanonicalAudit(),
        ViewportAudit(),
        SocialTagsAudit(),
        KeywordPlacementAudit(),
        ContentDepthAudit(),
    ):
        registry.register(audit)
    return registry


# Global registry instance
seo_registry = build_default_registry()
