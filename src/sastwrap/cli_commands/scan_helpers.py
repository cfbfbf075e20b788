"""Helpers for the scan command."""

from rich.console import Console
from rich.markup import escape

from sastwrap.console import ChainedParameterSource, ParameterSource, StaticParameterSource
from sastwrap.modules.scanners import ScanOutcome


def build_parameter_source(
    static: StaticParameterSource,
    interactive: ParameterSource | None,
) -> ParameterSource:
    """Combine command-line answers with an interactive fallback.

    Without a fallback, a missing whole-codebase answer is inferred from
    ``--files`` and missing options default to none.
    """
    if static.scan_all is None and static.files is not None:
        static.scan_all = False
    if interactive is None:
        if static.options is None:
            static.options = ""
        return static
    return ChainedParameterSource(static, interactive)


def print_diagnostics(outcome: ScanOutcome, console: Console) -> None:
    """Print scanner stderr without treating it as a failure."""
    if not outcome.has_diagnostics:
        return
    console.print("[yellow]Container stderr:[/yellow]")
    console.print(escape(outcome.raw_stderr.rstrip()), style="dim")
