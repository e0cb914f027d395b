"""Report output modules."""

from .excel_writer import ExcelWriter
from .report import (
    FindingRecord,
    Report,
    build_report,
    format_text,
    sort_findings,
    write_report,
)

__all__ = [
    "ExcelWriter",
    "FindingRecord",
    "Report",
    "build_report",
    "format_text",
    "sort_findings",
    "write_report",
]
