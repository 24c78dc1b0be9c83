"""Unit tests for the built-in SEO audits."""
from __future__ import annotations

from dataclasses import replace

import pytest

from seo_inspector.audit.base import Severity
from seo_inspector.audit.seo_audits import (
    CanonicalAudit,
    ClientRenderAudit,
    ContentDepthAudit,
    HeadingAudit,
    ImageAltAudit,
    KeywordPlacementAudit,
    MetaDescriptionAudit,
    RobotsAudit,
    SocialTagsAudit,
    StructuredDataAudit,
    TitleAudit,
    ViewportAudit,
    build_default_registry,
)
from seo_inspector.config.settings import SeoSettings
from seo_inspector.keywords.scorer import KeywordAnalysis
from seo_inspector.parser.facts import (
    HeadingCounts,
    PageFacts,
    RobotsDirectives,
    SchemaParseFailure,
    SocialTags,
)


@pytest.fixture
def seo_config() -> SeoSettings:
    return SeoSettings()


@pytest.fixture
def good_facts() -> PageFacts:
    """Facts of a page with nothing to report."""
    return PageFacts(
        title="Sourdough Bread Guide",
        meta_description="Learn how to bake sourdough bread at home with a simple starter and a hot oven.",
        heading_counts=HeadingCounts(h1=1, h2=2, h3=0),
        h1_texts=("Sourdough Bread",),
        h2_texts=("Starter", "Shaping"),
        schema_blocks=({"@context": "https://schema.org", "@type": "Recipe"},),
        canonical_url="https://example.com/sourdough",
        has_viewport=True,
        social_tags=SocialTags(
            has_open_graph=True, has_social_title=True, has_social_image=True
        ),
    )


def run(audit, facts, config, keywords=None):
    return audit.run(facts, keywords, config)


class TestCleanPage:
    """A page with every element in place."""

    def test_no_issues(self, good_facts, seo_config):
        """No audit reports anything for a complete page."""
        for audit in build_default_registry().list_all():
            result = run(audit, good_facts, seo_config)
            assert result.issues == [], audit.audit_id
            assert result.recommendations == [], audit.audit_id


class TestTitleAudit:
    """Tests for title checks."""

    def test_missing_title(self, good_facts, seo_config):
        """Missing title is one high issue with a recommendation."""
        result = run(TitleAudit(), replace(good_facts, title=None), seo_config)

        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.severity == Severity.HIGH
        assert issue.impact_score == 90
        assert issue.area == "Meta Tags"
        assert "title" in issue.message.lower()
        assert len(result.recommendations) == 1
        assert result.recommendations[0].impact_score == 90

    def test_title_too_long(self, good_facts, seo_config):
        """A 70-character title is a medium issue with a truncated hint."""
        title = "A" * 70
        result = run(TitleAudit(), replace(good_facts, title=title), seo_config)

        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.MEDIUM
        assert result.issues[0].impact_score == 70
        assert "70 chars" in result.issues[0].message
        assert result.recommendations[0].implementation_hint == f"<title>{'A' * 57}...</title>"

    def test_title_at_limit(self, good_facts, seo_config):
        """Exactly 60 characters is fine."""
        result = run(TitleAudit(), replace(good_facts, title="A" * 60), seo_config)
        assert result.issues == []


class TestMetaDescriptionAudit:
    """Tests for meta description checks."""

    def test_missing_description(self, good_facts, seo_config):
        """Missing description is high impact 80."""
        result = run(MetaDescriptionAudit(), replace(good_facts, meta_description=None), seo_config)
        assert result.issues[0].severity == Severity.HIGH
        assert result.issues[0].impact_score == 80
        assert result.issues[0].area == "Meta Tags"

    @pytest.mark.parametrize("length", [10, 49, 161, 200])
    def test_length_out_of_range(self, good_facts, seo_config, length):
        """Descriptions outside 50-160 characters are medium issues."""
        facts = replace(good_facts, meta_description="d" * length)
        result = run(MetaDescriptionAudit(), facts, seo_config)

        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.MEDIUM
        assert result.issues[0].impact_score == 60
        assert f"({length} chars)" in result.issues[0].message

    @pytest.mark.parametrize("length", [50, 160])
    def test_length_bounds_inclusive(self, good_facts, seo_config, length):
        """Both bounds are accepted."""
        facts = replace(good_facts, meta_description="d" * length)
        assert run(MetaDescriptionAudit(), facts, seo_config).issues == []


class TestHeadingAudit:
    """Tests for heading structure checks."""

    def test_no_h1(self, good_facts, seo_config):
        """No H1 with H2s present gives both the missing-H1 and hierarchy issues."""
        facts = replace(good_facts, heading_counts=HeadingCounts(h1=0, h2=2, h3=0))
        result = run(HeadingAudit(), facts, seo_config)

        impacts = sorted(issue.impact_score for issue in result.issues)
        assert impacts == [70, 85]
        assert all(issue.area == "Content Structure" for issue in result.issues)

    def test_no_headings_at_all(self, good_facts, seo_config):
        """No headings gives only the missing-H1 issue."""
        facts = replace(good_facts, heading_counts=HeadingCounts())
        result = run(HeadingAudit(), facts, seo_config)
        assert [issue.impact_score for issue in result.issues] == [85]

    def test_multiple_h1(self, good_facts, seo_config):
        """More than one H1 is a medium issue."""
        facts = replace(good_facts, heading_counts=HeadingCounts(h1=3, h2=0, h3=0))
        result = run(HeadingAudit(), facts, seo_config)

        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.MEDIUM
        assert result.issues[0].impact_score == 65
        assert "(3)" in result.issues[0].message


class TestRobotsAudit:
    """Tests for robots directive checks."""

    def test_noindex_and_nofollow(self, good_facts, seo_config):
        """noindex is critical 100 and nofollow high 85."""
        facts = replace(good_facts, robots_directives=RobotsDirectives(noindex=True, nofollow=True))
        result = run(RobotsAudit(), facts, seo_config)

        assert [(i.severity, i.impact_score) for i in result.issues] == [
            (Severity.CRITICAL, 100),
            (Severity.HIGH, 85),
        ]
        assert all(issue.area == "Indexability" for issue in result.issues)


class TestImageAltAudit:
    """Tests for image alt checks."""

    def test_one_issue_per_image(self, good_facts, seo_config):
        """Each image gets its own issue, sharing one recommendation."""
        facts = replace(good_facts, images_missing_alt=("a.jpg", "b.jpg"))
        result = run(ImageAltAudit(), facts, seo_config)

        assert len(result.issues) == 2
        assert result.issues[0].message.endswith("a.jpg")
        assert all(issue.severity == Severity.MEDIUM for issue in result.issues)
        assert len(result.recommendations) == 1


class TestStructuredDataAudit:
    """Tests for JSON-LD checks."""

    def test_no_schema(self, good_facts, seo_config):
        """No blocks at all is a medium issue."""
        result = run(StructuredDataAudit(), replace(good_facts, schema_blocks=()), seo_config)
        assert [(i.severity, i.impact_score) for i in result.issues] == [(Severity.MEDIUM, 65)]

    def test_one_issue_for_malformed_blocks(self, good_facts, seo_config):
        """Malformed blocks produce a single high issue, not one per block."""
        blocks = (
            {"@context": "https://schema.org", "@type": "Organization"},
            SchemaParseFailure(error="Expecting value"),
            SchemaParseFailure(error="Expecting value"),
        )
        result = run(StructuredDataAudit(), replace(good_facts, schema_blocks=blocks), seo_config)

        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.HIGH
        assert result.issues[0].impact_score == 70
        assert "2 of 3" in result.issues[0].message

    def test_only_malformed_blocks(self, good_facts, seo_config):
        """All blocks malformed reports both missing and invalid schema."""
        blocks = (SchemaParseFailure(error="Expecting value"),)
        result = run(StructuredDataAudit(), replace(good_facts, schema_blocks=blocks), seo_config)
        assert sorted(i.impact_score for i in result.issues) == [65, 70]

    def test_missing_context_or_type(self, good_facts, seo_config):
        """Blocks without @context or @type are flagged."""
        blocks = ({"@type": "Recipe"}, [{"@context": "https://schema.org", "@type": "Thing"}])
        result = run(StructuredDataAudit(), replace(good_facts, schema_blocks=blocks), seo_config)

        assert len(result.issues) == 1
        assert result.issues[0].impact_score == 55
        assert "1 block(s)" in result.issues[0].message


class TestSimpleAudits:
    """Tests for single-condition audits."""

    def test_canonical_missing(self, good_facts, seo_config):
        """Missing canonical is medium 60 under Meta Tags."""
        result = run(CanonicalAudit(), replace(good_facts, canonical_url=None), seo_config)
        assert [(i.severity, i.impact_score, i.area) for i in result.issues] == [
            (Severity.MEDIUM, 60, "Meta Tags")
        ]

    def test_viewport_missing(self, good_facts, seo_config):
        """Missing viewport is high 80 under Mobile."""
        result = run(ViewportAudit(), replace(good_facts, has_viewport=False), seo_config)
        assert [(i.severity, i.impact_score, i.area) for i in result.issues] == [
            (Severity.HIGH, 80, "Mobile")
        ]

    def test_social_tags_missing(self, good_facts, seo_config):
        """Missing social title and image are separate issues."""
        result = run(SocialTagsAudit(), replace(good_facts, social_tags=SocialTags()), seo_config)
        assert [i.impact_score for i in result.issues] == [60, 55]

    def test_client_render(self, good_facts, seo_config):
        """Client rendering is a critical 100 issue with two recommendations."""
        result = run(ClientRenderAudit(), replace(good_facts, client_render_signal=True), seo_config)

        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.CRITICAL
        assert result.issues[0].impact_score == 100
        assert result.issues[0].message.startswith("Analysis incomplete")
        assert [r.impact_score for r in result.recommendations] == [100, 95]


class TestKeywordAudits:
    """Tests for audits that read the keyword analysis."""

    def test_placement_gaps(self, good_facts, seo_config):
        """Gaps in the primary phrase placement are a low issue."""
        keywords = KeywordAnalysis(
            primary_phrase="sourdough bread",
            placement_gaps=("meta description", "H2"),
            total_words=500,
        )
        result = run(KeywordPlacementAudit(), good_facts, seo_config, keywords)

        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.LOW
        assert "meta description, H2" in result.issues[0].message

    def test_no_keywords(self, good_facts, seo_config):
        """Keyword audits skip when no analysis is given."""
        assert run(KeywordPlacementAudit(), good_facts, seo_config).issues == []
        assert run(ContentDepthAudit(), good_facts, seo_config).issues == []

    def test_thin_content(self, good_facts, seo_config):
        """Fewer than 300 words is an info issue."""
        result = run(ContentDepthAudit(), good_facts, seo_config, KeywordAnalysis(total_words=120))
        assert [(i.severity, i.impact_score) for i in result.issues] == [(Severity.INFO, 30)]

    def test_enough_content(self, good_facts, seo_config):
        """300 words or more is fine."""
        result = run(ContentDepthAudit(), good_facts, seo_config, KeywordAnalysis(total_words=300))
        assert result.issues == []


class TestDefaultRegistry:
    """Tests for the built-in audit table."""

    def test_client_render_first(self):
        """The client-render audit is registered first."""
        audits = build_default_registry().list_all()
        assert audits[0].audit_id == "client_render"
        assert len(audits) == 12

    def test_unique_ids(self):
        """Audit ids are unique."""
        ids = [audit.audit_id for audit in build_default_registry().list_all()]
        assert len(ids) == len(set(ids))
