"""Container runtime wrapper."""

from .runtime import CommandResult, ContainerExecutor, run_shell_command

__all__ = ["CommandResult", "ContainerExecutor", "run_shell_command"]
