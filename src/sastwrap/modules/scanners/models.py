"""Data models for scanner definitions, scan requests and outcomes."""

import shlex
from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_RUNTIME = "docker"
DEFAULT_MOUNT_TARGET = "/code"

# (files, scan_all, extra_args) -> tool arguments placed after the image reference
ArgsTemplate = Callable[[tuple[str, ...], bool, str], list[str]]
# (exit_code, stdout) -> True when a non-zero exit still counts as a completed scan
ExitPolicy = Callable[[int, str], bool]


def findings_on_output(exit_code: int, stdout: str) -> bool:
    """Treat a non-zero exit as "completed with findings" when stdout is non-empty."""
    del exit_code
    return bool(stdout)


@dataclass(frozen=True)
class ScannerDefinition:
    """A registered static-analysis scanner shipped as a container image."""

    name: str
    tool: str
    image_ref: str
    template: ArgsTemplate
    mount_target: str = DEFAULT_MOUNT_TARGET
    help_args: tuple[str, ...] = ("--help",)
    exit_policy: ExitPolicy = findings_on_output

    def build_command(
        self,
        code_path: str,
        files: tuple[str, ...],
        scan_all: bool,
        extra_args: str,
        runtime: str = DEFAULT_RUNTIME,
    ) -> str:
        """Render the full container command line for this scanner."""
        mount = f"{shlex.quote(code_path)}:{self.mount_target}"
        parts = [runtime, "run", "--rm", "-v", mount, self.image_ref]
        parts.extend(self.template(files, scan_all, extra_args))
        return " ".join(part for part in parts if part)

    def help_command(self, runtime: str = DEFAULT_RUNTIME) -> str:
        """Return the command line that prints the tool's own help."""
        return " ".join([runtime, "run", "--rm", self.image_ref, *self.help_args])


@dataclass
class ScanRequest:
    """Parameters of a single scan invocation."""

    scanner: ScannerDefinition
    code_path: str
    scan_all: bool = True
    files: list[str] = field(default_factory=list)
    extra_args: str = ""


@dataclass
class ScanOutcome:
    """Captured output of a finished scan."""

    raw_stdout: str
    raw_stderr: str
    exit_code: int = 0
    succeeded_with_findings: bool = False

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.raw_stderr.strip())


@dataclass
class ParsedReport:
    """Sections recovered from a scanner's text report."""

    overview: str | None = None
    warning_types: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.overview is None and self.warning_types is None and not self.warnings
