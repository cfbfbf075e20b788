"""Console rendering of parsed scan reports."""

from rich.console import Console

from sastwrap.modules.scanners.models import ParsedReport

BANNER = "======= Scan Results ========="
FOOTER = "============================="


def _plain(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False)


def render_report(
    report: ParsedReport,
    raw: str,
    console: Console,
    *,
    show_raw: bool = False,
) -> None:
    """Print ``report``; fall back to ``raw`` when nothing was recognized."""
    console.print(f"\n[bold]{BANNER}[/bold]\n")

    if report.overview is not None:
        console.print("[bold]Overview:[/bold]")
        _plain(console, report.overview)

    if report.warning_types is not None:
        console.print("[bold]Warning Types:[/bold]")
        _plain(console, report.warning_types)
    else:
        console.print("[bold]Warning Types:[/bold] No warning types found")

    if report.warnings:
        console.print("[bold]Warnings:[/bold]")
        for index, warning in enumerate(report.warnings, start=1):
            console.print(f"[yellow]Warning {index}:[/yellow]")
            _plain(console, warning)
    else:
        console.print("[bold]Warnings:[/bold] [green]No vulnerabilities found.[/green]")

    if raw.strip() and (show_raw or report.is_empty):
        console.print("\n[bold]Raw output:[/bold]")
        _plain(console, raw.rstrip())

    console.print(f"\n[bold]{FOOTER}[/bold]\n")
