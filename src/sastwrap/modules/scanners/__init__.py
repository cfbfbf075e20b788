"""Scanner registry and command construction."""

from .builder import build_command, parse_file_list, validate_request
from .errors import ExecutionFailure, InvalidRequest, PullError, SastWrapError, UnknownScanner
from .models import (
    DEFAULT_RUNTIME,
    ParsedReport,
    ScannerDefinition,
    ScanOutcome,
    ScanRequest,
    findings_on_output,
)
from .registry import SCANNERS, lookup, scanner_names

__all__ = [
    "DEFAULT_RUNTIME",
    "ExecutionFailure",
    "InvalidRequest",
    "ParsedReport",
    "PullError",
    "SCANNERS",
    "SastWrapError",
    "ScanOutcome",
    "ScanRequest",
    "ScannerDefinition",
    "UnknownScanner",
    "build_command",
    "findings_on_output",
    "lookup",
    "parse_file_list",
    "scanner_names",
    "validate_request",
]
