"""Check execution domain exports."""

from .check_contracts import CheckKind, CheckResult, CheckRunOutcome, CheckRunRequest
from .check_run_use_case import (
    CheckExecutionError,
    describe_check_suite,
    evaluate_check_suite,
    execute_check_suite,
    load_suite,
)
from .matcher_assembly import build_outcome_matcher, build_text_matcher

__all__ = [
    "CheckKind",
    "CheckResult",
    "CheckRunOutcome",
    "CheckRunRequest",
    "CheckExecutionError",
    "describe_check_suite",
    "evaluate_check_suite",
    "execute_check_suite",
    "load_suite",
    "build_outcome_matcher",
    "build_text_matcher",
]
