"""sastwrap CLI - containerized static-analysis scanner front end."""

from sastwrap.config import (
    create_global_config,
    get_config,
    get_container_runtime,
    get_global_config_path,
    get_local_env_path,
    is_verbose,
    load_global_config,
    should_skip_pull,
)
from sastwrap.console import InteractiveParameterSource
from sastwrap.tools.container import ContainerExecutor
from sastwrap.utils.async_utils import safe_async_run
from sastwrap.utils.debug import set_debug_enabled

from .cli_commands.shared import app, console

# Command registration (modules attach themselves to ``app`` on import)
from .cli_commands import config_command as _config_command  # noqa: F401
from .cli_commands import doctor_command as _doctor_command  # noqa: F401
from .cli_commands import scan_command as _scan_command  # noqa: F401
from .cli_commands import tools_command as _tools_command  # noqa: F401

__all__ = [
    "ContainerExecutor",
    "InteractiveParameterSource",
    "app",
    "console",
    "create_global_config",
    "get_config",
    "get_container_runtime",
    "get_global_config_path",
    "get_local_env_path",
    "is_verbose",
    "load_global_config",
    "main",
    "safe_async_run",
    "set_debug_enabled",
    "should_skip_pull",
]


@app.command()
def version() -> None:
    """Show the installed sastwrap version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("sastwrap")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"sastwrap {current_version}")


def main():
    """Entry point for the CLI."""
    app()
