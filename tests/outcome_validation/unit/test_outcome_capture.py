"""Outcome capture and error introspection tests."""

from __future__ import annotations

import logging
import sys

import pytest
from outcome_matchers.outcome_validation import capture_outcome, error_cause, error_message


def _fail() -> None:
    raise ValueError("bad input")


def test_capture_records_raised_error() -> None:
    outcome = capture_outcome(_fail)

    assert outcome.raised
    assert isinstance(outcome.error, ValueError)


def test_capture_records_normal_completion() -> None:
    outcome = capture_outcome(lambda: 42)

    assert not outcome.raised
    assert outcome.error is None


def test_capture_lets_keyboard_interrupt_through() -> None:
    def interrupted() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        capture_outcome(interrupted)


def test_capture_records_system_exit() -> None:
    outcome = capture_outcome(lambda: sys.exit(3))

    assert isinstance(outcome.error, SystemExit)


def test_capture_takes_error_instance_as_already_raised() -> None:
    error = KeyError("k")

    assert capture_outcome(error).error is error


def test_capture_logs_outcome_at_debug_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="outcome_matchers"):
        capture_outcome(_fail)

    assert "raised ValueError" in caplog.text


def test_error_message_is_none_without_arguments() -> None:
    assert error_message(ValueError()) is None
    assert error_message(ValueError("")) == ""
    assert error_message(ValueError("bad input")) == "bad input"


def test_error_cause_returns_explicit_cause() -> None:
    try:
        try:
            raise KeyError("inner")
        except KeyError:
            raise ValueError("outer") from TypeError("explicit")
    except ValueError as error:
        cause = error_cause(error)

    assert isinstance(cause, TypeError)


def test_error_cause_ignores_implicit_context() -> None:
    try:
        try:
            raise KeyError("inner")
        except KeyError:
            raise ValueError("outer")  # noqa: B904
    except ValueError as error:
        cause = error_cause(error)
        context = error.__context__

    assert cause is None
    assert isinstance(context, KeyError)


def test_error_cause_respects_suppressed_context() -> None:
    try:
        try:
            raise KeyError("inner")
        except KeyError:
            raise ValueError("outer") from None
    except ValueError as error:
        cause = error_cause(error)

    assert cause is None
    assert error_cause(ValueError("standalone")) is None
