"""Configuration CLI command."""

import typer
import yaml

from .deps import cli_module
from .shared import app, console

CONFIG_KEYS = ("SASTWRAP_CONTAINER_RUNTIME", "SASTWRAP_VERBOSE", "SASTWRAP_SKIP_PULL")


@app.command()
def config(
    action: str = typer.Argument("show", help="Action: show, edit, init"),
    global_config: bool = typer.Option(
        False,
        "--global",
        help="Show the raw global config file instead of effective values",
    ),
) -> None:
    """Show or create sastwrap configuration."""
    cli = cli_module()

    if action == "init":
        config_path = cli.create_global_config()
        console.print(f"[green]Created global config:[/green] {config_path}")
        return

    if action == "edit":
        config_path = cli.create_global_config()
        console.print(f"[green]Edit this file:[/green] {config_path}")
        console.print(
            f"[dim]Per-directory overrides go in {cli.get_local_env_path()}[/dim]"
        )
        return

    if action == "show":
        if global_config:
            config_data = cli.load_global_config()
            console.print(f"[bold]Global Configuration ({cli.get_global_config_path()}):[/bold]")
            console.print(yaml.dump(config_data, default_flow_style=False))
            return

        console.print("[bold]Effective configuration:[/bold]")
        for key in CONFIG_KEYS:
            value = cli.get_config(key)
            console.print(f"  {key}={'' if value is None else value}")
        console.print(f"  [dim]container runtime in use: {cli.get_container_runtime()}[/dim]")
        return

    console.print(f"[red]Unknown action: {action}. Use 'show', 'edit', or 'init'.[/red]")
    raise typer.Exit(1)
