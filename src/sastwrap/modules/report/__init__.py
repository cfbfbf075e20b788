"""Report extraction and rendering."""

from .extractor import MarkerReportExtractor, ReportExtractor, extract
from .presenter import render_report

__all__ = ["MarkerReportExtractor", "ReportExtractor", "extract", "render_report"]
