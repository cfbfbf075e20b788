"""Scan flow: gather parameters, build, pull, run and extract."""

from collections.abc import Callable
from dataclasses import dataclass

from sastwrap.console.prompts import ParameterSource
from sastwrap.modules.report.extractor import ReportExtractor, default_extractor
from sastwrap.modules.scanners import (
    InvalidRequest,
    ParsedReport,
    ScanOutcome,
    ScanRequest,
    build_command,
    lookup,
    parse_file_list,
    scanner_names,
    validate_request,
)
from sastwrap.tools.container import ContainerExecutor
from sastwrap.utils.debug import debug_print

Progress = Callable[[str], None]


@dataclass
class ScanRun:
    """Everything produced by one pass through the scan flow."""

    request: ScanRequest
    command: str
    outcome: ScanOutcome
    report: ParsedReport


def gather_request(source: ParameterSource) -> ScanRequest:
    """Ask ``source`` for the scan parameters and validate the result."""
    name = source.select_scanner(scanner_names())
    if name is None:
        raise InvalidRequest("No scanner selected")
    scanner = lookup(name)

    code_path = source.code_path()
    if not code_path or not code_path.strip():
        raise InvalidRequest("Code path cannot be empty")

    scan_all = source.scan_whole_codebase()
    if scan_all is None:
        raise InvalidRequest(
            "Choose --all to scan the whole codebase or --files-only with --files"
        )

    files: list[str] = []
    if not scan_all:
        files = parse_file_list(source.specific_files() or "")

    request = ScanRequest(
        scanner=scanner,
        code_path=code_path.strip(),
        scan_all=scan_all,
        files=files,
        extra_args=source.additional_options(scanner.name) or "",
    )
    validate_request(request)
    return request


async def execute_scan(
    request: ScanRequest,
    executor: ContainerExecutor,
    *,
    skip_pull: bool = False,
    extractor: ReportExtractor = default_extractor,
    progress: Progress | None = None,
) -> ScanRun:
    """Run ``request`` to completion; errors propagate to the caller."""
    notify = progress or (lambda _msg: None)
    scanner = request.scanner

    command = build_command(request, runtime=executor.runtime)
    debug_print("command", "Built scan command", Scanner=scanner.name, Command=command)

    if not skip_pull:
        notify(f"Pulling container image for {scanner.name} ({scanner.image_ref})...")
        await executor.pull(scanner.image_ref)

    notify(f"Running SAST tool for {scanner.name} on {request.code_path}...")
    notify(f"Executing command: {command}")
    outcome = await executor.run(command, exit_policy=scanner.exit_policy)

    return ScanRun(
        request=request,
        command=command,
        outcome=outcome,
        report=extractor.extract(outcome.raw_stdout),
    )
