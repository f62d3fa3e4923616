"""Outcome validation exports."""

from .exception_matcher import (
    ExceptionMatcher,
    exception,
    throws_exception,
    throws_no_exception,
)
from .expectation_models import (
    CauseMatcher,
    CauseType,
    CustomCheck,
    ExpectationSpecification,
    ExpectedClassifier,
    ExpectedInstance,
    ExpectedType,
    FailureKind,
    MessageMatcher,
    MessageSubstrings,
    OutcomeVerdict,
    StepFailure,
)
from .outcome_capture import CapturedOutcome, Procedure, capture_outcome, error_cause, error_message

__all__ = [
    "ExceptionMatcher",
    "exception",
    "throws_exception",
    "throws_no_exception",
    "CauseMatcher",
    "CauseType",
    "CustomCheck",
    "ExpectationSpecification",
    "ExpectedClassifier",
    "ExpectedInstance",
    "ExpectedType",
    "FailureKind",
    "MessageMatcher",
    "MessageSubstrings",
    "OutcomeVerdict",
    "StepFailure",
    "CapturedOutcome",
    "Procedure",
    "capture_outcome",
    "error_cause",
    "error_message",
]
