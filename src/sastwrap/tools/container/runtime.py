"""Container runtime invocation for image pulls, scans and tool help."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from sastwrap.modules.scanners.errors import ExecutionFailure, PullError
from sastwrap.modules.scanners.models import (
    DEFAULT_RUNTIME,
    ExitPolicy,
    ScanOutcome,
    findings_on_output,
)
from sastwrap.utils.debug import debug_print

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Captured subprocess result."""

    command: str
    returncode: int
    stdout: str
    stderr: str


CommandRunner = Callable[[str], Awaitable[CommandResult]]


def _first_line(text: str) -> str:
    lines = text.strip().splitlines()
    return lines[0] if lines else "unknown error"


def _failure_detail(result: CommandResult) -> str:
    return result.stderr.strip() or "no output was produced"


async def run_shell_command(command: str) -> CommandResult:
    """Run a shell command line to completion and capture decoded output."""
    started = time.perf_counter()
    process = await asyncio.create_subprocess_shell(
        command,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await process.communicate()
    except asyncio.CancelledError:
        if process.returncode is None:
            process.terminate()
            try:
                await asyncio.wait_for(process.wait(), timeout=3.0)
            except TimeoutError:
                process.kill()
                await process.wait()
        raise

    result = CommandResult(
        command=command,
        returncode=process.returncode if process.returncode is not None else -1,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )
    debug_print(
        "runtime",
        f"exit={result.returncode} ({time.perf_counter() - started:.2f}s)",
        Command=command,
    )
    return result


class ContainerExecutor:
    """Runs scanner containers through a docker-compatible CLI."""

    def __init__(
        self,
        runtime: str = DEFAULT_RUNTIME,
        command_runner: CommandRunner | None = None,
    ):
        self.runtime = runtime
        self._runner = command_runner or run_shell_command

    async def _invoke(self, command: str) -> CommandResult:
        logger.debug("Running: %s", command)
        try:
            return await self._runner(command)
        except OSError as e:
            raise ExecutionFailure(command, str(e)) from e

    async def pull(self, image_ref: str) -> None:
        """Pull ``image_ref``; any failure aborts before a scan is attempted."""
        command = f"{self.runtime} pull {image_ref}"
        try:
            result = await self._invoke(command)
        except ExecutionFailure as e:
            logger.debug("Image pull could not start: %s", e.detail)
            raise PullError(image_ref, e.detail) from e

        if result.returncode != 0:
            detail = _first_line(result.stderr or result.stdout)
            logger.debug("Image pull failed for %s: %s", image_ref, detail)
            raise PullError(image_ref, detail)

    async def run(self, command: str, exit_policy: ExitPolicy = findings_on_output) -> ScanOutcome:
        """Run a scan command line and classify its exit status.

        A non-zero exit is reported as a completed scan with findings when
        ``exit_policy`` accepts it (by default: stdout is non-empty).
        Otherwise it raises :class:`ExecutionFailure`.
        """
        result = await self._invoke(command)
        if result.stderr.strip():
            logger.debug("Scanner stderr: %s", result.stderr.strip())

        if result.returncode == 0:
            return ScanOutcome(
                raw_stdout=result.stdout,
                raw_stderr=result.stderr,
                exit_code=0,
            )

        if exit_policy(result.returncode, result.stdout):
            return ScanOutcome(
                raw_stdout=result.stdout,
                raw_stderr=result.stderr,
                exit_code=result.returncode,
                succeeded_with_findings=True,
            )

        raise ExecutionFailure(
            command,
            _failure_detail(result),
            exit_code=result.returncode,
        )

    async def help(self, help_command: str) -> CommandResult:
        """Run a tool's help invocation and return the captured result."""
        result = await self._invoke(help_command)
        if result.returncode != 0 and not result.stdout:
            raise ExecutionFailure(
                help_command,
                _failure_detail(result),
                exit_code=result.returncode,
            )
        return result
