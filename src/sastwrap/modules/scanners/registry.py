"""Catalogue of supported scanners and their flag vocabularies."""

from .errors import UnknownScanner
from .models import ScannerDefinition


def _join_files(files: tuple[str, ...]) -> str:
    return " ".join(entry.strip() for entry in files if entry.strip())


def brakeman_args(files: tuple[str, ...], scan_all: bool, extra_args: str) -> list[str]:
    """Brakeman: quiet mode, ``--only-files`` restricts the file set."""
    if scan_all:
        return ["--quiet", extra_args]
    return ["--quiet", extra_args, "--only-files", _join_files(files)]


def bandit_args(files: tuple[str, ...], scan_all: bool, extra_args: str) -> list[str]:
    """Bandit: recursive scan of the mount, or positional file paths."""
    if scan_all:
        return ["-r", ".", extra_args]
    return [extra_args, _join_files(files)]


def semgrep_args(files: tuple[str, ...], scan_all: bool, extra_args: str) -> list[str]:
    """Semgrep: registry rules via ``--config auto``, ``--include`` for files."""
    if scan_all:
        return ["--config", "auto", extra_args]
    return ["--config", "auto", "--include", _join_files(files), extra_args]


SCANNERS: tuple[ScannerDefinition, ...] = (
    ScannerDefinition(
        name="Ruby",
        tool="brakeman",
        image_ref="presidentbeef/brakeman",
        template=brakeman_args,
    ),
    ScannerDefinition(
        name="Python",
        tool="bandit",
        image_ref="ghcr.io/pycqa/bandit/bandit",
        template=bandit_args,
    ),
    ScannerDefinition(
        name="JavaScript",
        tool="semgrep",
        image_ref="semgrep/semgrep",
        template=semgrep_args,
    ),
)

_BY_NAME: dict[str, ScannerDefinition] = {scanner.name: scanner for scanner in SCANNERS}


def scanner_names() -> list[str]:
    """Display names in registration order."""
    return [scanner.name for scanner in SCANNERS]


def lookup(name: str) -> ScannerDefinition:
    """Return the scanner registered under ``name`` (case-sensitive)."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownScanner(name, scanner_names()) from None
