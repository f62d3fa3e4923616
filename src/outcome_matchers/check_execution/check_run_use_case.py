"""Check-suite execution use-case service."""

from __future__ import annotations

import functools
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from outcome_matchers.configuration import (
    CheckSuite,
    ConfigurationError,
    OutcomeCheckConfig,
    TextCheckConfig,
    load_check_suite,
)
from outcome_matchers.results_writing import RunMetadata, write_results_workbook

from .check_contracts import CheckKind, CheckResult, CheckRunOutcome, CheckRunRequest
from .matcher_assembly import build_outcome_matcher, build_text_matcher

_LOGGER = logging.getLogger(__name__)


class CheckExecutionError(Exception):
    """Raised when a check-suite run cannot be completed."""


def execute_check_suite(request: CheckRunRequest) -> CheckRunOutcome:
    """Evaluate every check of one suite and optionally write a results workbook."""
    suite = load_suite(request.suite_path)
    run_start = datetime.now(UTC)
    results = evaluate_check_suite(suite)

    output_path = None
    if request.output_dir:
        output_path = _resolve_output_path(suite.path, request.output_dir)
        metadata = RunMetadata(
            run_start=run_start,
            suite_path=suite.path.resolve(),
            output_path=output_path.resolve(),
            passed=sum(1 for result in results if result.passed),
            failed=sum(1 for result in results if not result.passed),
        )
        try:
            write_results_workbook(output_path=output_path, results=results, metadata=metadata)
        except OSError as exc:
            raise CheckExecutionError(f"Failed to write results workbook: {exc}") from exc

    return CheckRunOutcome(
        suite_path=suite.path.resolve(),
        run_start=run_start,
        results=results,
        output_path=output_path.resolve() if output_path else None,
    )


def load_suite(suite_path: str) -> CheckSuite:
    """Load a check suite, wrapping configuration failures."""
    try:
        return load_check_suite(suite_path)
    except (ConfigurationError, OSError) as exc:
        raise CheckExecutionError(str(exc)) from exc


def describe_check_suite(suite: CheckSuite) -> tuple[tuple[str, str], ...]:
    """Return `(check name, expectation text)` pairs in suite order."""
    descriptions = [
        (check.name, _describe(build_text_matcher(check))) for check in suite.text_checks
    ]
    descriptions.extend(
        (check.name, _describe(build_outcome_matcher(check.expect)))
        for check in suite.outcome_checks
    )
    return tuple(descriptions)


def evaluate_check_suite(suite: CheckSuite) -> tuple[CheckResult, ...]:
    """Evaluate text checks, then outcome checks, each in file order."""
    results = [_evaluate_text_check(check) for check in suite.text_checks]
    results.extend(_evaluate_outcome_check(check) for check in suite.outcome_checks)
    return tuple(results)


def _evaluate_text_check(check: TextCheckConfig) -> CheckResult:
    matcher = build_text_matcher(check)
    passed = matcher.matches(check.text)
    mismatch = None
    if not passed:
        description = StringDescription()
        matcher.describe_mismatch(check.text, description)
        mismatch = str(description)
    _LOGGER.info("text check %s: %s", check.name, "passed" if passed else "failed")
    return CheckResult(
        name=check.name,
        kind=CheckKind.TEXT,
        passed=passed,
        expectation=_describe(matcher),
        mismatch=mismatch,
    )


def _evaluate_outcome_check(check: OutcomeCheckConfig) -> CheckResult:
    matcher = build_outcome_matcher(check.expect)
    procedure = functools.partial(check.target, *check.args)
    verdict = matcher.evaluate(procedure)
    _LOGGER.info("outcome check %s: %s", check.name, "passed" if verdict.is_ok else "failed")
    return CheckResult(
        name=check.name,
        kind=CheckKind.OUTCOME,
        passed=verdict.is_ok,
        expectation=_describe(matcher),
        mismatch=verdict.failure.mismatch if verdict.failure else None,
    )


def _describe(matcher: Matcher[Any]) -> str:
    description = StringDescription()
    matcher.describe_to(description)
    return str(description)


def _resolve_output_path(suite_path: Path, output_dir: str) -> Path:
    timestamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    return Path(output_dir) / f"{suite_path.stem}-results-{timestamp}.xlsx"
