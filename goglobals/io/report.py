"""Text and JSON rendering of findings."""

from typing import List, TextIO
import logging

from pydantic import BaseModel, Field

from ..models.finding import Finding

logger = logging.getLogger(__name__)


class FindingRecord(BaseModel):
    """Serialized form of one finding."""

    file: str = Field(description="Path of the Go source file")
    line: int = Field(ge=1, description="1-based line of the identifier")
    column: int = Field(ge=1, description="1-based byte column of the identifier")
    offset: int = Field(ge=0, description="0-based byte offset of the identifier")
    rule: str = Field(description="Rule that produced the finding")
    message: str = Field(description="Human readable message")

    @classmethod
    def from_finding(cls, finding: Finding) -> "FindingRecord":
        return cls(**finding.to_dict())


class Report(BaseModel):
    """Structured report of a whole run."""

    findings: List[FindingRecord] = Field(default_factory=list)
    files_scanned: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0)


def sort_findings(findings: List[Finding]) -> List[Finding]:
    """Order findings by file, line and column for presentation."""
    return sorted(findings, key=Finding.sort_key)


def format_text(findings: List[Finding]) -> str:
    """Render findings one per line.

    Args:
        findings: Findings to render

    Returns:
        Text with a trailing newline, or an empty string
    """
    lines = [str(f) for f in sort_findings(findings)]
    return "\n".join(lines) + "\n" if lines else ""


def build_report(
    findings: List[Finding],
    files_scanned: int = 0,
    errors: int = 0
) -> Report:
    """Build the JSON report model.

    Args:
        findings: Findings of the run
        files_scanned: Number of files that were scanned
        errors: Number of files that could not be read

    Returns:
        Report model
    """
    return Report(
        findings=[FindingRecord.from_finding(f) for f in sort_findings(findings)],
        files_scanned=files_scanned,
        errors=errors,
    )


def write_report(
    stream: TextIO,
    findings: List[Finding],
    output_format: str = "text",
    files_scanned: int = 0,
    errors: int = 0
) -> None:
    """Write findings in text or JSON form to a stream.

    Args:
        stream: Destination stream
        findings: Findings of the run
        output_format: "text" or "json"
        files_scanned: Number of files that were scanned
        errors: Number of files that could not be read
    """
    if output_format == "json":
        report = build_report(findings, files_scanned, errors)
        stream.write(report.model_dump_json(indent=2))
        stream.write("\n")
    elif output_format == "text":
        stream.write(format_text(findings))
    else:
        raise ValueError(f"Unsupported stream format: {output_format}")

    logger.debug(f"Wrote {len(findings)} findings as {output_format}")
