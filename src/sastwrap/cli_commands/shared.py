"""Shared CLI app objects."""

import typer
from rich.console import Console

app = typer.Typer(
    name="sastwrap",
    help="Run containerized static-analysis scanners against a local codebase",
    no_args_is_help=True,
)
console = Console()
