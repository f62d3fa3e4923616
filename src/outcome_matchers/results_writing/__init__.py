"""Results writing domain exports."""

from .report_models import CheckStatus, RunMetadata
from .run_report_writer import (
    RESULT_COLUMNS,
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_results_workbook,
)

__all__ = [
    "CheckStatus",
    "RunMetadata",
    "RESULT_COLUMNS",
    "RESULTS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "write_results_workbook",
]
