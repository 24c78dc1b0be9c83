"""CLI commands."""
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from seo_inspector import __version__
from seo_inspector.config.log_config import configure_logging
from seo_inspector.config.settings import settings
from seo_inspector.fetcher.file_loader import DocumentLoadError, load_documents
from seo_inspector.report.aggregator import BatchAnalysis, analyze_html, analyze_many
from seo_inspector.report.formatter import OutputFormat, format_report

app = typer.Typer(
    add_completion=False,
    help="SEO Inspector - Analyze HTML pages for on-page SEO issues and target keywords",
)
console = Console()


def _has_critical(result) -> bool:
    pages = result.per_document if isinstance(result, BatchAnalysis) else [result]
    return any(issue.severity.value == "critical" for page in pages for issue in page.issues)


@app.command()
def run(
    target: str = typer.Argument(..., help="HTML file or directory to analyze"),
    output: str = typer.Option(
        "cli",
        "--output",
        "-o",
        help="Output format: cli, json, markdown",
    ),
    save: str | None = typer.Option(
        None,
        "--save",
        "-s",
        help="Save report to file",
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Parallel workers for directory analysis",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed analysis information",
    ),
) -> None:
    """Analyze an HTML file, or every HTML file under a directory.

    Examples:
        seo-inspector run index.html
        seo-inspector run ./build -o json
        seo-inspector run ./build -o markdown -s report.md
    """
    if output not in ("cli", "json", "markdown"):
        console.print(f"[red]Error:[/red] Invalid output format '{output}'. Use cli, json, or markdown.")
        raise typer.Exit(1)

    output_format: OutputFormat = output  # type: ignore
    configure_logging("DEBUG" if verbose else settings.logging.level)

    if output_format == "cli":
        console.print(Panel.fit(
            f"[bold cyan]SEO Inspector[/bold cyan]\n[dim]Analyzing:[/dim] {escape(target)}",
            border_style="cyan",
        ))

    try:
        documents = load_documents(target)
        if not documents:
            console.print(f"[yellow]No HTML files found in {escape(target)}[/yellow]")
            return

        if verbose:
            console.print(f"[dim]Loaded {len(documents)} document(s)[/dim]")

        if Path(target).is_file():
            page_identifier, html = documents[0]
            result = analyze_html(html, page_identifier)
        else:
            result = analyze_many(documents, max_workers=workers)

        report = format_report(result, output_format)

        if save:
            save_path = Path(save)
            save_path.write_text(report, encoding="utf-8")
            console.print(f"\n[green]Report saved to:[/green] {save_path}")
        elif output_format == "cli":
            console.print("")
            console.print(report)
        else:
            # JSON/Markdown - print raw
            console.print(report, markup=False, highlight=False, soft_wrap=True)

        if _has_critical(result):
            raise typer.Exit(1)

    except DocumentLoadError as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"\n[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            import traceback
            console.print(traceback.format_exc(), markup=False)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]SEO Inspector[/bold] v{__version__}")
    console.print("[dim]On-page SEO analyzer[/dim]")


@app.command()
def check(
    target: str = typer.Argument(..., help="HTML file or directory to quick-check"),
) -> None:
    """Quick check - one line per page with issue counts.

    Example:
        seo-inspector check ./build
    """
    try:
        documents = load_documents(target)
        batch = analyze_many(documents)
    except DocumentLoadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    for page in batch.per_document:
        counts = page.count_by_severity()
        color = "red" if counts["critical"] else "yellow" if counts["high"] else "green"
        summary = ", ".join(f"{severity}: {total}" for severity, total in counts.items() if total)
        console.print(
            f"[{color}]{escape(page.page_identifier)}[/{color}] "
            f"({summary or 'no issues'}) confidence {page.confidence}%",
            soft_wrap=True,
        )

    if _has_critical(batch):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
