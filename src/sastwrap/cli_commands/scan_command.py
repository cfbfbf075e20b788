"""Scan CLI command."""

import sys

import typer
from rich.markup import escape

from sastwrap.console import StaticParameterSource
from sastwrap.modules.pipeline import execute_scan, gather_request
from sastwrap.modules.report import render_report
from sastwrap.modules.scanners import SastWrapError

from .deps import cli_module
from .scan_helpers import build_parameter_source, print_diagnostics
from .shared import app, console
from .tools_command import print_tool_help


@app.command()
def scan(
    scanner: str | None = typer.Option(
        None,
        "--scanner",
        "-s",
        help="Scanner to run: Ruby, Python, JavaScript",
    ),
    path: str | None = typer.Option(
        None,
        "--path",
        "-p",
        help="Absolute path of the code to scan",
    ),
    scan_all: bool | None = typer.Option(
        None,
        "--all/--files-only",
        help="Scan the whole codebase, or only the files given with --files",
    ),
    files: str | None = typer.Option(
        None,
        "--files",
        "-f",
        help="Comma-separated file paths relative to the code path",
    ),
    options: str | None = typer.Option(
        None,
        "--options",
        "-o",
        help="Additional scanner flags, passed through verbatim",
    ),
    skip_pull: bool = typer.Option(False, "--skip-pull", help="Do not pull the image first"),
    raw: bool = typer.Option(False, "--raw", help="Also print the raw scanner output"),
    show_help: bool = typer.Option(
        False,
        "--show-help",
        help="Print the scanner's own help before scanning",
    ),
    no_input: bool = typer.Option(
        False,
        "--no-input",
        help="Never prompt; missing parameters are an error",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Pick a scanner, run it in a container and print the results."""
    cli = cli_module()
    cli.set_debug_enabled(verbose or cli.is_verbose())

    static = StaticParameterSource(
        scanner=scanner,
        path=path,
        scan_all=scan_all,
        files=files,
        options=options,
    )
    interactive = None
    if not no_input and sys.stdin.isatty():
        interactive = cli.InteractiveParameterSource(console)
    source = build_parameter_source(static, interactive)

    executor = cli.ContainerExecutor(runtime=cli.get_container_runtime())
    effective_skip_pull = skip_pull or cli.should_skip_pull()

    try:
        request = gather_request(source)
        if show_help:
            print_tool_help(request.scanner, executor)
        run = cli.safe_async_run(
            execute_scan(
                request,
                executor,
                skip_pull=effective_skip_pull,
                progress=lambda msg: console.print(f"[blue]{escape(msg)}[/blue]"),
            )
        )
    except SastWrapError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Scan interrupted.[/yellow]")
        raise typer.Exit(130) from None

    print_diagnostics(run.outcome, console)
    if run.outcome.succeeded_with_findings:
        console.print(
            "[yellow]The scan completed with findings (vulnerabilities were detected):[/yellow]"
        )
    console.print("[green]Scan completed.[/green]")
    render_report(run.report, run.outcome.raw_stdout, console, show_raw=raw)
