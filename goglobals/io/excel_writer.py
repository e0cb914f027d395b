"""Excel output of findings."""

from collections import Counter
from typing import List
from pathlib import Path
import logging

from openpyxl import Workbook
from openpyxl.styles import PatternFill, Font, Alignment, Border, Side

from ..models.finding import Finding
from .report import sort_findings

logger = logging.getLogger(__name__)


class ExcelWriter:
    """Writes findings to a new Excel workbook."""

    HEADERS = ["File", "Line", "Column", "Rule", "Message"]

    COLUMN_WIDTHS = {"A": 60, "B": 8, "C": 8, "D": 20, "E": 60}

    def __init__(self, output_file: str, sheet_name: str = "Findings"):
        """Initialize the Excel writer.

        Args:
            output_file: Path of the workbook to create
            sheet_name: Name of the findings sheet
        """
        self.output_file = Path(output_file)
        self.sheet_name = sheet_name

    def write(self, findings: List[Finding], files_scanned: int = 0) -> None:
        """Write the findings sheet and a summary sheet.

        Args:
            findings: Findings to write
            files_scanned: Number of scanned files for the summary
        """
        wb = Workbook()
        ws = wb.active
        ws.title = self.sheet_name

        self._add_headers(ws)

        for row_num, finding in enumerate(sort_findings(findings), 2):
            ws.cell(row=row_num, column=1).value = finding.position.file_path
            ws.cell(row=row_num, column=2).value = finding.position.line
            ws.cell(row=row_num, column=3).value = finding.position.column
            ws.cell(row=row_num, column=4).value = finding.rule_id
            cell_message = ws.cell(row=row_num, column=5)
            cell_message.value = finding.message
            cell_message.alignment = Alignment(wrap_text=True, vertical="top")

        for col_letter, width in self.COLUMN_WIDTHS.items():
            ws.column_dimensions[col_letter].width = width
        ws.freeze_panes = "A2"

        self._write_summary(wb, findings, files_scanned)

        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        wb.save(self.output_file)
        logger.info(f"Findings written to {self.output_file}")

    def _add_headers(self, ws) -> None:
        """Add the styled header row.

        Args:
            ws: Worksheet object
        """
        header_alignment = Alignment(horizontal="center", vertical="center")
        header_fill = PatternFill(
            start_color="4472C4",
            end_color="4472C4",
            fill_type="solid"
        )
        white_font = Font(bold=True, color="FFFFFF")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin")
        )

        for i, header in enumerate(self.HEADERS, 1):
            cell = ws.cell(row=1, column=i)
            cell.value = header
            cell.font = white_font
            cell.fill = header_fill
            cell.alignment = header_alignment
            cell.border = thin_border

    def _write_summary(self, wb, findings: List[Finding], files_scanned: int) -> None:
        """Add a summary sheet with per-file counts.

        Args:
            wb: Workbook object
            findings: Findings of the run
            files_scanned: Number of scanned files
        """
        ws = wb.create_sheet(title="Summary")
        header_font = Font(bold=True)

        ws["A1"] = "Files scanned"
        ws["A1"].font = header_font
        ws["B1"] = files_scanned
        ws["A2"] = "Global variables"
        ws["A2"].font = header_font
        ws["B2"] = len(findings)

        ws["A4"] = "File"
        ws["A4"].font = header_font
        ws["B4"] = "Count"
        ws["B4"].font = header_font

        per_file = Counter(f.position.file_path for f in findings)
        for row_num, (file_path, count) in enumerate(sorted(per_file.items()), 5):
            ws.cell(row=row_num, column=1).value = file_path
            ws.cell(row=row_num, column=2).value = count

        ws.column_dimensions["A"].width = 60
        ws.column_dimensions["B"].width = 12
