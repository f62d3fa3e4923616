"""Matcher validating what a procedure raises.

Typical use with PyHamcrest::

    assert_that(lambda: parse(""), throws_exception(ValueError).with_message_containing("empty"))

    assert_that(
        lambda: load(path),
        throws_exception(ConfigError).with_cause(exception(FileNotFoundError).with_message("gone")),
    )

Each configuration method returns a new matcher, so a configured matcher can be
shared and evaluated any number of times. Evaluation runs these steps in order,
stopping at the first failure: capture the outcome, identity, message (when
configured), cause (when configured), custom checks (when configured).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.matcher import Matcher

from .expectation_models import (
    CauseMatcher,
    CauseType,
    CustomCheck,
    ExpectationSpecification,
    ExpectedClassifier,
    ExpectedInstance,
    ExpectedType,
    IdentityStrategy,
    MessageMatcher,
    MessageSubstrings,
    OutcomeVerdict,
)
from .outcome_capture import CapturedOutcome, Procedure, capture_outcome
from .validation_steps import (
    describe_cause,
    describe_custom_checks,
    describe_identity,
    describe_message,
    validate_cause,
    validate_custom_checks,
    validate_identity,
    validate_message,
)

_LOGGER = logging.getLogger(__name__)

ExpectedOutcome = type[BaseException] | BaseException | Matcher[Any] | None


@dataclass(frozen=True, eq=False)
class ExceptionMatcher(BaseMatcher[Any]):
    """Matches procedures (or already-raised errors) against an expectation specification."""

    specification: ExpectationSpecification

    def with_message_containing(self, *substrings: str) -> ExceptionMatcher:
        """Require a message containing every substring; no substrings accepts a missing message."""
        for substring in substrings:
            if not isinstance(substring, str):
                raise TypeError(f"Message substrings must be strings, got {substring!r}.")
        return self._configure(message=MessageSubstrings(substrings=tuple(substrings)))

    def with_message(self, message: Matcher[Any] | str | None) -> ExceptionMatcher:
        """Require a message matching a matcher, or equal to a literal (None: no message)."""
        return self._configure(message=MessageMatcher(matcher=wrap_matcher(message)))

    def with_cause(self, cause: type[BaseException] | ExceptionMatcher | None) -> ExceptionMatcher:
        """Require a cause of the given type (None: no cause), or one matching a nested matcher."""
        if isinstance(cause, ExceptionMatcher):
            return self._configure(cause=CauseMatcher(matcher=cause))
        if cause is None or _is_error_type(cause):
            return self._configure(cause=CauseType(error_type=cause))
        raise TypeError(
            f"Expected cause must be an exception type, an ExceptionMatcher or None, got {cause!r}."
        )

    def with_no_cause(self) -> ExceptionMatcher:
        """Require an error without cause."""
        return self.with_cause(None)

    def with_function(
        self, function: Callable[[Any], Any], matcher: Matcher[Any] | object
    ) -> ExceptionMatcher:
        """Require `function(error)` to satisfy `matcher` (a plain value means equality)."""
        if not callable(function):
            raise TypeError(f"Custom check function must be callable, got {function!r}.")
        check = CustomCheck(function=function, matcher=wrap_matcher(matcher))
        return self._configure(custom_checks=(*self.specification.custom_checks, check))

    def matches_error(self, error: BaseException | None) -> bool:
        """Match an already-caught error; None stands for a procedure that raised nothing."""
        return self.evaluate_outcome(CapturedOutcome(error=error)).is_ok

    def evaluate(self, subject: Procedure | BaseException) -> OutcomeVerdict:
        """Run the procedure once and validate its outcome."""
        return self.evaluate_outcome(capture_outcome(subject))

    def evaluate_outcome(self, outcome: CapturedOutcome) -> OutcomeVerdict:
        """Validate a captured outcome; shared by top-level and nested cause evaluation."""
        expected = self.specification
        failure = validate_identity(expected.identity, outcome)
        if failure is None and outcome.error is not None:
            error = outcome.error
            if expected.message is not None:
                failure = validate_message(expected.message, error)
            if failure is None and expected.cause is not None:
                failure = validate_cause(expected.cause, error)
            if failure is None and expected.custom_checks:
                failure = validate_custom_checks(expected.custom_checks, error)
        if failure is not None:
            _LOGGER.debug("outcome rejected: %s", failure.kind.value)
        return OutcomeVerdict(failure=failure)

    def _matches(self, item: Any) -> bool:
        if not _is_subject(item):
            return False
        return self.evaluate(item).is_ok

    def describe_to(self, description: Description) -> None:
        expected = self.specification
        describe_identity(expected.identity, description)
        if expected.message is not None:
            describe_message(expected.message, description)
        if expected.cause is not None:
            describe_cause(expected.cause, description)
        describe_custom_checks(expected.custom_checks, description)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if not _is_subject(item):
            mismatch_description.append_text("was not a callable procedure: ").append_description_of(
                item
            )
            return
        verdict = self.evaluate(item)
        if verdict.failure is not None:
            mismatch_description.append_text(verdict.failure.mismatch)

    def _configure(self, **changes: Any) -> ExceptionMatcher:
        return ExceptionMatcher(specification=replace(self.specification, **changes))


def throws_exception(expected: ExpectedOutcome = Exception) -> ExceptionMatcher:
    """Build a matcher from an expected type, an expected instance or a type matcher.

    Args:
      expected: An exception type (subclasses also match), None for "no error
        expected", an exception instance (matched by identity), or a PyHamcrest
        matcher applied to the raised error's type.

    Raises:
      TypeError: If `expected` is none of the accepted shapes.
    """
    return ExceptionMatcher(specification=ExpectationSpecification(identity=_identity_of(expected)))


def exception(expected: ExpectedOutcome = Exception) -> ExceptionMatcher:
    """Alias of `throws_exception` that reads naturally inside `with_cause(...)`."""
    return throws_exception(expected)


def throws_no_exception() -> ExceptionMatcher:
    """Build a matcher accepting only procedures that complete without raising."""
    return throws_exception(None)


def _identity_of(expected: ExpectedOutcome) -> IdentityStrategy:
    if expected is None or _is_error_type(expected):
        return ExpectedType(error_type=expected)  # type: ignore[arg-type]
    if isinstance(expected, BaseException):
        return ExpectedInstance(error=expected)
    if isinstance(expected, Matcher):
        return ExpectedClassifier(matcher=expected)
    raise TypeError(
        "Expected outcome must be an exception type, an exception instance, "
        f"a matcher or None, got {expected!r}."
    )


def _is_error_type(value: object) -> bool:
    return isinstance(value, type) and issubclass(value, BaseException)


def _is_subject(item: object) -> bool:
    return isinstance(item, BaseException) or callable(item)
