"""Turn a scan request into an executable container command line.

File names are inserted as-is: only the code path is quoted, so a file
list containing shell metacharacters reaches the shell unmodified. The
mapping is one-way; a built command is not parsed back into a request.
"""

from .errors import InvalidRequest
from .models import DEFAULT_RUNTIME, ScanRequest


def parse_file_list(raw: str) -> list[str]:
    """Split a comma-separated answer into trimmed, non-empty file entries."""
    return [entry.strip() for entry in raw.split(",") if entry.strip()]


def validate_request(request: ScanRequest) -> tuple[str, ...]:
    """Check a request and return the normalized file selection."""
    if not request.code_path or not request.code_path.strip():
        raise InvalidRequest("Code path cannot be empty")
    if request.scan_all:
        return ()
    files = tuple(entry.strip() for entry in request.files if entry.strip())
    if not files:
        raise InvalidRequest(
            "You must enter at least one file when not scanning the whole codebase"
        )
    return files


def build_command(request: ScanRequest, runtime: str = DEFAULT_RUNTIME) -> str:
    """Build the command line for ``request``."""
    files = validate_request(request)
    return request.scanner.build_command(
        request.code_path.strip(),
        files,
        request.scan_all,
        request.extra_args.strip(),
        runtime=runtime,
    )
