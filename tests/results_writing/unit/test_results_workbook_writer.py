"""Results workbook writer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from openpyxl import load_workbook
from outcome_matchers.check_execution import CheckKind, CheckResult
from outcome_matchers.diagnostics import NEW_LINE_INDENT
from outcome_matchers.results_writing import (
    RESULT_COLUMNS,
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    CheckStatus,
    RunMetadata,
    write_results_workbook,
)


def _results() -> list[CheckResult]:
    return [
        CheckResult(
            name="greeting",
            kind=CheckKind.TEXT,
            passed=True,
            expectation="a string containing ALL of the specified substrings [Hello]",
            mismatch=None,
        ),
        CheckResult(
            name="settle",
            kind=CheckKind.OUTCOME,
            passed=False,
            expectation=NEW_LINE_INDENT + "ValueError" + NEW_LINE_INDENT + "and cause: KeyError",
            mismatch=NEW_LINE_INDENT + "the cause was: TypeError",
        ),
    ]


def _metadata(tmp_path: Path, output_path: Path) -> RunMetadata:
    return RunMetadata(
        run_start=datetime(2026, 3, 1, 12, 30, tzinfo=UTC),
        suite_path=tmp_path / "checks.yaml",
        output_path=output_path,
        passed=1,
        failed=1,
    )


def test_writes_one_row_per_check_result(tmp_path: Path) -> None:
    output_path = tmp_path / "reports" / "checks-results.xlsx"

    write_results_workbook(
        output_path=output_path, results=_results(), metadata=_metadata(tmp_path, output_path)
    )

    workbook = load_workbook(output_path)
    sheet = workbook[RESULTS_SHEET_NAME]
    header = tuple(cell.value for cell in sheet[1])
    assert header == RESULT_COLUMNS
    assert sheet.freeze_panes == "A2"
    assert [cell.value for cell in sheet[2]] == [
        "greeting",
        "text",
        CheckStatus.OK.value,
        "a string containing ALL of the specified substrings [Hello]",
        None,
    ]
    assert [cell.value for cell in sheet[3]] == [
        "settle",
        "outcome",
        CheckStatus.FAILED.value,
        "ValueError\nand cause: KeyError",
        "the cause was: TypeError",
    ]
    assert sheet.max_row == 3


def test_writes_run_info_sheet(tmp_path: Path) -> None:
    output_path = tmp_path / "checks-results.xlsx"

    write_results_workbook(
        output_path=output_path, results=_results(), metadata=_metadata(tmp_path, output_path)
    )

    workbook = load_workbook(output_path)
    assert workbook.sheetnames == [RESULTS_SHEET_NAME, RUN_INFO_SHEET_NAME]
    run_info = {
        row[0].value: row[1].value for row in workbook[RUN_INFO_SHEET_NAME].iter_rows()
    }
    assert run_info == {
        "run_start": "2026-03-01T12:30:00+00:00",
        "suite_path": str(tmp_path / "checks.yaml"),
        "output_path": str(output_path),
        "total": 2,
        "passed": 1,
        "failed": 1,
    }
