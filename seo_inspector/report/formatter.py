"""Report formatting utilities."""
from __future__ import annotations

import json
from typing import Literal

from rich.markup import escape

from seo_inspector.report.aggregator import BatchAnalysis, PageAnalysis

OutputFormat = Literal["cli", "json", "markdown"]

_SEVERITY_COLORS = {
    "critical": "red bold",
    "high": "red",
    "medium": "yellow",
    "low": "blue",
    "info": "dim",
}

_CLIENT_RENDER_NOTE = (
    "This is a static HTML analysis. For JavaScript-heavy sites the rendered "
    "content may differ from the static HTML."
)


def format_report(result: PageAnalysis | BatchAnalysis, output: OutputFormat = "cli") -> str:
    """Format analysis results for output.

    Args:
        result: A single page analysis or a batch
        output: Output format - 'cli', 'json', or 'markdown'

    Returns:
        Formatted string representation of results
    """
    if output == "json":
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)

    if isinstance(result, BatchAnalysis):
        pages = list(result.per_document)
        totals = result.totals.get("by_severity", {})
    else:
        pages = [result]
        totals = None

    if output == "markdown":
        sections = [_format_markdown(page) for page in pages]
        if totals is not None:
            sections.insert(0, _format_markdown_totals(result.count, totals))
        return "\n\n---\n\n".join(sections)

    sections = [_format_cli(page) for page in pages]
    if totals is not None:
        sections.append(_format_cli_totals(result.count, totals))
    return "\n\n".join(sections)


def _length_note(text: str | None) -> str:
    return f"{text} ({len(text)} chars)" if text else "Missing"


def _table_cell(text: str) -> str:
    """Escape pipes so a value stays inside its Markdown table cell."""
    return text.replace("|", "\\|")


def _format_cli(analysis: PageAnalysis) -> str:
    """Format one page for terminal display with Rich-compatible markup."""
    lines = []
    facts = analysis.facts
    headings = facts.heading_counts

    lines.append(f"[bold cyan]SEO Analysis:[/bold cyan] {escape(analysis.page_identifier)}")
    lines.append(f"  [dim]Title:[/dim] {escape(_length_note(facts.title))}")
    lines.append(f"  [dim]Meta description:[/dim] {escape(_length_note(facts.meta_description))}")
    lines.append(f"  [dim]Headings:[/dim] H1: {headings.h1}, H2: {headings.h2}, H3: {headings.h3}")
    lines.append(f"  [dim]Schema blocks:[/dim] {len(facts.parsed_schema_blocks)}")
    if analysis.is_client_rendered:
        lines.append(f"  [yellow]Client-side rendering detected (confidence {analysis.confidence}%)[/yellow]")
    lines.append("")

    keywords = analysis.keyword_analysis
    lines.append("[bold]Potential Target Keywords:[/bold]")
    if keywords.primary_phrase:
        lines.append(f"  Primary phrase: [green]{escape(keywords.primary_phrase)}[/green]")
        others = [c.surface_form for c in keywords.top_phrases[1:]]
        if others:
            lines.append(f"  Other phrases: {escape(', '.join(others))}")
    else:
        lines.append("  [dim]No clear target keywords detected[/dim]")
    if keywords.top_words:
        words = ", ".join(f"{c.surface_form} ({c.density_percent}%)" for c in keywords.top_words)
        lines.append(f"  Top words: {escape(words)}")
    lines.append("")

    if analysis.issues:
        lines.append("[bold]Issues (sorted by impact):[/bold]")
        for issue in analysis.issues:
            color = _SEVERITY_COLORS.get(issue.severity.value, "white")
            label = escape(f"[{issue.severity.value.upper()}]")
            lines.append(
                f"  [{color}]{label}[/{color}] {escape(issue.message)} "
                f"[dim](impact {issue.impact_score}, {escape(issue.area)})[/dim]"
            )
        lines.append("")

    if analysis.recommendations:
        lines.append("[bold]Recommendations:[/bold]")
        for i, rec in enumerate(analysis.recommendations, 1):
            lines.append(f"  {i}. {escape(rec.text)} [dim](impact {rec.impact_score})[/dim]")
            lines.append(f"     [dim]Why:[/dim] {escape(rec.reason)}")
        lines.append("")

    if analysis.is_client_rendered:
        lines.append(f"[yellow]NOTE:[/yellow] {_CLIENT_RENDER_NOTE}")

    return "\n".join(lines).rstrip()


def _format_cli_totals(count: int, totals: dict[str, int]) -> str:
    parts = []
    for severity, total in totals.items():
        color = _SEVERITY_COLORS.get(severity, "white")
        parts.append(f"[{color}]{severity}: {total}[/{color}]")
    return f"[bold]Analyzed {count} page(s)[/bold] - " + ", ".join(parts)


def _format_markdown(analysis: PageAnalysis) -> str:
    """Format one page as Markdown."""
    lines = []
    facts = analysis.facts
    headings = facts.heading_counts

    lines.append(f"# SEO Analysis: {analysis.page_identifier}")
    lines.append("")
    lines.append("## Page Info")
    lines.append("")
    lines.append(f"- **Title:** {_length_note(facts.title)}")
    lines.append(f"- **Meta Description:** {_length_note(facts.meta_description)}")
    lines.append(f"- **Heading Structure:** H1: {headings.h1}, H2: {headings.h2}, H3: {headings.h3}")
    lines.append(f"- **Schema Count:** {len(facts.parsed_schema_blocks)}")
    lines.append(f"- **Confidence:** {analysis.confidence}%")
    if analysis.is_client_rendered:
        lines.append("- **Client-Side Rendering:** Yes")
    lines.append("")

    keywords = analysis.keyword_analysis
    lines.append("## Potential Target Keywords")
    lines.append("")
    if keywords.top_phrases:
        lines.append("| Phrase | Score | Density | Title | Meta | H1 | H2 |")
        lines.append("|--------|-------|---------|-------|------|----|----|")
        for c in keywords.top_phrases:
            flags = " | ".join("✅" if flag else "❌" for flag in c.placement_flags)
            lines.append(f"| {_table_cell(c.surface_form)} | {c.score:g} | {c.density_percent}% | {flags} |")
        lines.append("")
        if keywords.placement_gaps:
            lines.append(f"Primary phrase missing from: {', '.join(keywords.placement_gaps)}")
            lines.append("")
    else:
        lines.append("No clear target keywords detected.")
        lines.append("")

    if analysis.issues:
        lines.append("## Issues")
        lines.append("")
        lines.append("| Severity | Impact | Area | Issue |")
        lines.append("|----------|--------|------|-------|")
        for issue in analysis.issues:
            lines.append(
                f"| {issue.severity.value.upper()} | {issue.impact_score} | {_table_cell(issue.area)} | {_table_cell(issue.message)} |"
            )
        lines.append("")

    if analysis.recommendations:
        lines.append("## Recommendations")
        lines.append("")
        for i, rec in enumerate(analysis.recommendations, 1):
            lines.append(f"{i}. **{rec.text}** _(impact: {rec.impact_score})_")
            lines.append(f"   - Why: {rec.reason}")
            lines.append("   - How:")
            lines.append("")
            lines.append("     ```")
            for hint_line in rec.implementation_hint.splitlines():
                lines.append(f"     {hint_line}")
            lines.append("     ```")
        lines.append("")

    if analysis.is_client_rendered:
        lines.append(f"> **Note:** {_CLIENT_RENDER_NOTE}")

    return "\n".join(lines).rstrip()


def _format_markdown_totals(count: int, totals: dict[str, int]) -> str:
    lines = ["# SEO Batch Summary", "", f"**Pages analyzed:** {count}", ""]
    lines.append("| Severity | Issues |")
    lines.append("|----------|--------|")
    for severity, total in totals.items():
        lines.append(f"| {severity} | {total} |")
    return "\n".join(lines)
