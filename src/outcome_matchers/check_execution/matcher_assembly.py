"""Translation of configured checks into matchers."""

from __future__ import annotations

from outcome_matchers.configuration import (
    CauseTypeConfig,
    OutcomeExpectationConfig,
    TextCheckConfig,
)
from outcome_matchers.containment import SubstringMatcher
from outcome_matchers.outcome_validation import ExceptionMatcher, throws_exception


def build_text_matcher(check: TextCheckConfig) -> SubstringMatcher:
    """Build the containment matcher described by a text check."""
    matcher = SubstringMatcher(check.strategy, check.substrings)
    if check.ignore_case:
        return matcher.ignore_case()
    return matcher


def build_outcome_matcher(expectation: OutcomeExpectationConfig) -> ExceptionMatcher:
    """Build the outcome matcher described by an expectation, recursing into nested causes."""
    matcher = throws_exception(expectation.error_type)
    if expectation.message is not None:
        matcher = matcher.with_message(expectation.message)
    if expectation.message_containing is not None:
        matcher = matcher.with_message_containing(*expectation.message_containing)
    if isinstance(expectation.cause, CauseTypeConfig):
        matcher = matcher.with_cause(expectation.cause.error_type)
    elif isinstance(expectation.cause, OutcomeExpectationConfig):
        matcher = matcher.with_cause(build_outcome_matcher(expectation.cause))
    return matcher
