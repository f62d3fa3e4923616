"""Results workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from openpyxl import Workbook
from openpyxl.styles import Alignment
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .report_models import CheckStatus, RunMetadata

if TYPE_CHECKING:
    from outcome_matchers.check_execution.check_contracts import CheckResult

RESULTS_SHEET_NAME = "Results"
RUN_INFO_SHEET_NAME = "RunInfo"
RESULT_COLUMNS = ("Check", "Kind", "Status", "Expected", "But")
_COLUMN_WIDTHS = (28, 10, 10, 60, 60)


def write_results_workbook(
    *,
    output_path: Path | str,
    results: Sequence[CheckResult],
    metadata: RunMetadata,
) -> None:
    """Write one row per check result plus a RunInfo sheet."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = RESULTS_SHEET_NAME

    _write_header(sheet)
    for row_index, result in enumerate(results, start=2):
        status = CheckStatus.OK if result.passed else CheckStatus.FAILED
        values = (
            result.name,
            result.kind.value,
            status.value,
            _flatten_diagnostic(result.expectation),
            _flatten_diagnostic(result.mismatch),
        )
        for column_index, value in enumerate(values, start=1):
            cell = sheet.cell(row=row_index, column=column_index, value=value)
            cell.alignment = Alignment(wrap_text=True, vertical="top")

    _write_run_info_sheet(workbook, metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)


def _write_header(sheet: Worksheet) -> None:
    for column_index, (name, width) in enumerate(
        zip(RESULT_COLUMNS, _COLUMN_WIDTHS, strict=True), start=1
    ):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 3"
        sheet.column_dimensions[get_column_letter(column_index)].width = width
    sheet.freeze_panes = "A2"


def _write_run_info_sheet(workbook: Workbook, metadata: RunMetadata) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = [
        ("run_start", metadata.run_start.isoformat()),
        ("suite_path", str(metadata.suite_path)),
        ("output_path", str(metadata.output_path)),
        ("total", metadata.passed + metadata.failed),
        ("passed", metadata.passed),
        ("failed", metadata.failed),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)


def _flatten_diagnostic(text: str | None) -> str | None:
    """Drop the line margin used for terminal output; cells keep one criterion per line."""
    if not text:
        return None
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())
