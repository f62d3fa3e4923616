"""Failure reports rendered through PyHamcrest assert_that."""

from __future__ import annotations

import pytest
from hamcrest import assert_that, equal_to
from outcome_matchers import contains_all_in_sequence, exception, throws_exception


class SettlementError(Exception):
    """Raised when a ledger settlement cannot be completed."""


def _settle(amount: str) -> None:
    try:
        int(amount)
    except ValueError as exc:
        raise SettlementError(f"cannot settle amount {amount!r}") from exc


def _report_lines(excinfo: pytest.ExceptionInfo[AssertionError]) -> list[str]:
    return [line.rstrip() for line in str(excinfo.value).splitlines()]


def test_assert_that_passes_for_matching_chain() -> None:
    assert_that(
        lambda: _settle("ten"),
        throws_exception(SettlementError)
        .with_message_containing("cannot settle", "ten")
        .with_cause(exception(ValueError).with_message_containing("invalid literal")),
    )


def test_assert_that_reports_type_mismatch() -> None:
    def procedure() -> None:
        raise ValueError("bad input") from TypeError("x is None")

    with pytest.raises(AssertionError) as excinfo:
        assert_that(procedure, throws_exception(TypeError))

    assert _report_lines(excinfo) == [
        "",
        "Expected:",
        "          TypeError",
        "     but:",
        "          was ValueError",
    ]


def test_assert_that_reports_nested_cause_mismatch() -> None:
    matcher = throws_exception(SettlementError).with_cause(
        exception(ValueError).with_message("other")
    )

    with pytest.raises(AssertionError) as excinfo:
        assert_that(lambda: _settle("ten"), matcher)

    lines = _report_lines(excinfo)
    assert lines[lines.index("     but:") + 1 :] == [
        "          the cause did not match: {",
        "          the message was \"invalid literal for int() with base 10: 'ten'\"",
        "          }",
    ]


def test_assert_that_reports_missing_exception() -> None:
    with pytest.raises(AssertionError) as excinfo:
        assert_that(lambda: _settle("10"), throws_exception(SettlementError))

    assert "          no exception was thrown" in _report_lines(excinfo)


def test_assert_that_reports_failing_custom_function() -> None:
    matcher = throws_exception(SettlementError).with_function(
        lambda error: type(error.__cause__), equal_to(KeyError)
    )

    with pytest.raises(AssertionError) as excinfo:
        assert_that(lambda: _settle("ten"), matcher)

    assert (
        "          the value retrieved by the function #1 was <class 'ValueError'>"
        in _report_lines(excinfo)
    )


def test_assert_that_reports_substring_sequence() -> None:
    with pytest.raises(AssertionError) as excinfo:
        assert_that("settled 10 then refunded 4", contains_all_in_sequence("refunded", "settled"))

    assert _report_lines(excinfo)[-1] == (
        '     but: the substring "settled" was not found after "refunded" in: '
        '"settled 10 then refunded 4"'
    )
