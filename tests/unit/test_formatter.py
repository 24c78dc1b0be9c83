"""Unit tests for report formatting."""
from __future__ import annotations

import json

import pytest

from seo_inspector.report.aggregator import analyze_html, analyze_many
from seo_inspector.report.formatter import format_report


@pytest.fixture
def page(html_missing_meta, config):
    return analyze_html(html_missing_meta, "guide.html", config=config)


@pytest.fixture
def batch(valid_html, html_noindex, config):
    return analyze_many([("a.html", valid_html), ("b.html", html_noindex)], config=config)


class TestJsonFormat:
    """Tests for JSON output."""

    def test_page_json(self, page):
        """JSON output is the serialized analysis."""
        data = json.loads(format_report(page, "json"))
        assert data == page.to_dict()
        assert data["issues"][0]["severity"] == "high"

    def test_batch_json(self, batch):
        """Batch JSON carries per-document results and totals."""
        data = json.loads(format_report(batch, "json"))
        assert data["count"] == 2
        assert [d["page_identifier"] for d in data["per_document"]] == ["a.html", "b.html"]
        assert "by_severity" in data["totals"]


class TestMarkdownFormat:
    """Tests for Markdown output."""

    def test_page_sections(self, page):
        """Markdown has page info, keywords, issues and recommendations."""
        report = format_report(page, "markdown")

        assert report.startswith("# SEO Analysis: guide.html")
        assert "**Meta Description:** Missing" in report
        assert "## Potential Target Keywords" in report
        assert "| HIGH | 80 | Meta Tags | Missing meta description |" in report
        assert "## Recommendations" in report

    def test_issues_in_impact_order(self, page):
        """Issues are listed highest impact first."""
        report = format_report(page, "markdown")
        assert report.index("| HIGH | 80 |") < report.index("| MEDIUM | 70 |")

    def test_pipes_escaped_in_table_cells(self, config):
        """A pipe in an issue message does not split the table row."""
        html = '<html><head><title>Pipes</title></head><body><img src="/img/a|b.png"></body></html>'
        report = format_report(analyze_html(html, "pipes.html", config=config), "markdown")

        assert "| MEDIUM | 60 | Accessibility | Image missing alt text: /img/a\\|b.png |" in report

    def test_batch_summary_first(self, batch):
        """The batch summary precedes the page sections."""
        report = format_report(batch, "markdown")
        assert report.startswith("# SEO Batch Summary")
        assert "**Pages analyzed:** 2" in report
        assert report.index("# SEO Analysis: a.html") < report.index("# SEO Analysis: b.html")

    def test_client_render_note(self, client_rendered_html, config):
        """Client-rendered pages carry the static analysis note."""
        report = format_report(analyze_html(client_rendered_html, config=config), "markdown")
        assert "**Client-Side Rendering:** Yes" in report
        assert "> **Note:**" in report


class TestCliFormat:
    """Tests for Rich CLI output."""

    def test_page_cli(self, page):
        """CLI output contains markup and the primary phrase."""
        report = format_report(page, "cli")

        assert "[bold cyan]SEO Analysis:[/bold cyan] guide.html" in report
        assert "Missing meta description" in report
        assert "Primary phrase:" in report

    def test_severity_labels(self, page):
        """Each issue line carries its bracketed severity label."""
        report = format_report(page, "cli")
        assert "[HIGH]" in report
        assert "(impact 80, Meta Tags)" in report

    def test_batch_totals_last(self, batch):
        """Batch totals are appended after the pages."""
        report = format_report(batch, "cli")
        assert report.rstrip().splitlines()[-1].startswith("[bold]Analyzed 2 page(s)[/bold]")

    def test_default_is_cli(self, page):
        """The default format is the CLI format."""
        assert format_report(page) == format_report(page, "cli")
