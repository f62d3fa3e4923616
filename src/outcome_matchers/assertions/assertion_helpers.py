"""Assertion helpers raising `AssertionError` with a ready-to-read message."""

from __future__ import annotations

from decimal import Decimal
from numbers import Real

from hamcrest.core.string_description import StringDescription

from outcome_matchers.companion_matchers import instantiation_not_allowed
from outcome_matchers.diagnostics import quoted, type_name_text
from outcome_matchers.outcome_validation import (
    FailureKind,
    Procedure,
    capture_outcome,
    throws_exception,
)

EXPECTED_BUT_NOT_THROWN = "Expected but not thrown: {expected}"
_EXPECTED_STRING_NOT_FOUND = "Expected string {substring} not found in: {text}"
_UNEXPECTED_STRING_FOUND = "Unexpected string {substring} found in: {text}"
_EXPECTED_POSITIVE = "Expected a positive number but was: {number}"
_EXPECTED_NEGATIVE = "Expected a negative number but was: {number}"


def assert_exception(
    expected_type: type[BaseException],
    subject: Procedure | BaseException,
    *,
    message: str | None = None,
    cause: type[BaseException] | None = None,
) -> None:
    """Assert that `subject` raises (or is) an error of `expected_type`.

    Args:
      expected_type: Required error type; subclasses are accepted.
      subject: A procedure to run, or an error that was already caught.
      message: Exact message to require, when given.
      cause: Cause type to require, when given.

    Raises:
      AssertionError: If nothing was raised or any requirement is not met.
    """
    outcome = capture_outcome(subject)
    matcher = throws_exception(expected_type)
    if message is not None:
        matcher = matcher.with_message(message)
    if cause is not None:
        matcher = matcher.with_cause(cause)

    verdict = matcher.evaluate_outcome(outcome)
    if verdict.failure is None:
        return
    if verdict.failure.kind is FailureKind.NO_ERROR_RAISED:
        raise AssertionError(
            EXPECTED_BUT_NOT_THROWN.format(expected=quoted(type_name_text(expected_type)))
        )
    description = StringDescription()
    description.append_text("Expected:")
    matcher.describe_to(description)
    description.append_text("\nbut:").append_text(verdict.failure.mismatch)
    raise AssertionError(str(description))


def assert_string_contains(text: str, *substrings: str) -> None:
    """Assert that every substring occurs in `text`."""
    for substring in substrings:
        if substring not in text:
            raise AssertionError(
                _EXPECTED_STRING_NOT_FOUND.format(substring=quoted(substring), text=quoted(text))
            )


def assert_string_does_not_contain(text: str, *substrings: str) -> None:
    """Assert that no substring occurs in `text`."""
    for substring in substrings:
        if substring in text:
            raise AssertionError(
                _UNEXPECTED_STRING_FOUND.format(substring=quoted(substring), text=quoted(text))
            )


def assert_positive_number(number: Real | Decimal) -> None:
    """Assert that `number` is not negative."""
    if number < 0:
        raise AssertionError(_EXPECTED_POSITIVE.format(number=number))


def assert_negative_number(number: Real | Decimal) -> None:
    """Assert that `number` is not positive."""
    if number > 0:
        raise AssertionError(_EXPECTED_NEGATIVE.format(number=number))


def assert_instantiation_not_allowed(
    target_class: type,
    expected_type: type[BaseException] | None = None,
    message: str | None = None,
) -> None:
    """Assert that calling `target_class()` raises, optionally of a type and with a message."""
    matcher = instantiation_not_allowed()
    if expected_type is not None:
        matcher = matcher.throwing(expected_type)
    if message is not None:
        matcher = matcher.with_message(message)
    if matcher.matches(target_class):
        return
    description = StringDescription()
    description.append_text("Expected: ").append_description_of(matcher)
    description.append_text("\nbut: ")
    matcher.describe_mismatch(target_class, description)
    raise AssertionError(str(description))
