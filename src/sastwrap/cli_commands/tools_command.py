"""Scanner catalogue and tool help commands."""

import typer
from rich.markup import escape
from rich.table import Table

from sastwrap.modules.scanners import SCANNERS, SastWrapError, ScannerDefinition, lookup
from sastwrap.tools.container import ContainerExecutor

from .deps import cli_module
from .shared import app, console


def print_tool_help(scanner: ScannerDefinition, executor: ContainerExecutor) -> None:
    """Run the scanner's help invocation and print it."""
    cli = cli_module()
    console.print(f"[blue]Showing help for {scanner.name}...[/blue]")
    result = cli.safe_async_run(executor.help(scanner.help_command(executor.runtime)))
    if result.stderr.strip():
        console.print(f"[yellow]Error showing help:[/yellow] {escape(result.stderr.strip())}")
    console.print(result.stdout, markup=False, highlight=False)


@app.command()
def scanners() -> None:
    """List the supported scanners."""
    runtime = cli_module().get_container_runtime()
    table = Table(title="Supported scanners")
    table.add_column("Language", style="cyan")
    table.add_column("Tool")
    table.add_column("Image")
    table.add_column("Help command", style="dim")
    for scanner in SCANNERS:
        table.add_row(scanner.name, scanner.tool, scanner.image_ref, scanner.help_command(runtime))
    console.print(table)


@app.command("tool-help")
def tool_help(
    name: str = typer.Argument(..., help="Scanner name (e.g. Ruby, Python, JavaScript)"),
) -> None:
    """Show the underlying tool's own --help output."""
    cli = cli_module()
    try:
        scanner = lookup(name)
        print_tool_help(scanner, cli.ContainerExecutor(runtime=cli.get_container_runtime()))
    except SastWrapError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
