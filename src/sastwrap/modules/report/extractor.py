"""Marker-based sectioning of scanner text reports.

The markers match the brakeman text format (``== Overview ==``,
``== Warning Types ==``, ``== Warnings ==`` and ``File:`` entries). Output
from tools without these markers yields an empty :class:`ParsedReport`;
callers keep the raw text for display.
"""

import re
from typing import Protocol

from sastwrap.modules.scanners.models import ParsedReport

OVERVIEW_MARKER = "== Overview =="
WARNING_TYPES_MARKER = "== Warning Types =="
WARNINGS_MARKER = "== Warnings =="
FILE_MARKER = "File:"

_NEXT_SECTION_RE = re.compile(r"\n==")
_WARNING_BLOCK_RE = re.compile(
    rf"(?:{re.escape(WARNINGS_MARKER)}|{re.escape(FILE_MARKER)})"
    rf".*?(?={re.escape(FILE_MARKER)}|{re.escape(OVERVIEW_MARKER)}|\Z)",
    re.DOTALL,
)


class ReportExtractor(Protocol):
    """Anything that can turn raw scanner stdout into a ParsedReport."""

    def extract(self, raw: str) -> ParsedReport: ...


def _section_end(raw: str, body_start: int) -> int:
    match = _NEXT_SECTION_RE.search(raw, body_start)
    return match.start() if match else len(raw)


def _overview(raw: str) -> str | None:
    start = raw.find(OVERVIEW_MARKER)
    if start < 0:
        return None
    body_start = start + len(OVERVIEW_MARKER)
    end = raw.find(WARNING_TYPES_MARKER, body_start)
    if end < 0:
        end = _section_end(raw, body_start)
    return raw[body_start:end].strip()


def _warning_types(raw: str) -> str | None:
    start = raw.find(WARNING_TYPES_MARKER)
    if start < 0:
        return None
    body_start = start + len(WARNING_TYPES_MARKER)
    return raw[body_start : _section_end(raw, body_start)].strip()


def _warnings(raw: str) -> list[str]:
    entries: list[str] = []
    for match in _WARNING_BLOCK_RE.finditer(raw):
        block = match.group(0)
        if block.startswith(WARNINGS_MARKER):
            # Header directly followed by File: entries carries no text of its own
            block = block[len(WARNINGS_MARKER) :]
        block = block.strip()
        if block:
            entries.append(block)
    return entries


class MarkerReportExtractor:
    """Split brakeman-style text output into overview, warning types and warnings."""

    def extract(self, raw: str) -> ParsedReport:
        if not raw:
            return ParsedReport()
        return ParsedReport(
            overview=_overview(raw),
            warning_types=_warning_types(raw),
            warnings=_warnings(raw),
        )


default_extractor: ReportExtractor = MarkerReportExtractor()


def extract(raw: str) -> ParsedReport:
    """Extract report sections from ``raw`` with the default extractor."""
    return default_extractor.extract(raw)
