"""Validation and description of each expectation category.

Every category (identity, message, cause, custom checks) has one `validate_*`
function returning the first `StepFailure` or None, and one `describe_*`
function appending its expectation line to a PyHamcrest description. Lines
start with a line break and the shared margin so that combined descriptions
stack vertically.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from outcome_matchers.diagnostics import NEW_LINE_INDENT, identity_text, type_name_text

from .expectation_models import (
    CauseMatcher,
    CauseStrategy,
    CauseType,
    CustomCheck,
    ExpectedClassifier,
    ExpectedInstance,
    ExpectedType,
    FailureKind,
    IdentityStrategy,
    MessageMatcher,
    MessageStrategy,
    MessageSubstrings,
    StepFailure,
)
from .outcome_capture import CapturedOutcome, error_cause, error_message

_NO_EXCEPTION_THROWN = "no exception was thrown"


def validate_identity(identity: IdentityStrategy, outcome: CapturedOutcome) -> StepFailure | None:
    """Check the raised error (or its absence) against the identity strategy."""
    error = outcome.error
    if isinstance(identity, ExpectedType) and identity.error_type is None:
        if error is None:
            return None
        return _failure(FailureKind.UNEXPECTED_ERROR_RAISED, f"was {type_name_text(type(error))}")

    if error is None:
        return _failure(FailureKind.NO_ERROR_RAISED, _NO_EXCEPTION_THROWN)

    if isinstance(identity, ExpectedType):
        if isinstance(error, identity.error_type):
            return None
        return _failure(FailureKind.TYPE_MISMATCH, f"was {type_name_text(type(error))}")

    if isinstance(identity, ExpectedInstance):
        if error is identity.error:
            return None
        return _failure(FailureKind.IDENTITY_MISMATCH, f"was {identity_text(error)}")

    if identity.matcher.matches(type(error)):
        return None
    return _failure(FailureKind.TYPE_MISMATCH, f"was {type_name_text(type(error))}")


def validate_message(strategy: MessageStrategy, error: BaseException) -> StepFailure | None:
    """Check the error message against the configured message strategy."""
    message = error_message(error)
    if isinstance(strategy, MessageSubstrings):
        if message is None:
            if not strategy.substrings:
                return None
            return _failure(FailureKind.MESSAGE_MISMATCH, "the message was None")
        if all(substring in message for substring in strategy.substrings):
            return None
        return _failure(
            FailureKind.MESSAGE_MISMATCH,
            "the message was " + str(StringDescription().append_description_of(message)),
        )

    if strategy.matcher.matches(message):
        return None
    return _failure(
        FailureKind.MESSAGE_MISMATCH,
        "the message " + _mismatch_text(strategy.matcher, message),
    )


def validate_cause(strategy: CauseStrategy, error: BaseException) -> StepFailure | None:
    """Check the error's cause against a type, or recurse into a nested matcher."""
    cause = error_cause(error)
    if isinstance(strategy, CauseType):
        if cause is None:
            if strategy.error_type is None:
                return None
            return _failure(FailureKind.CAUSE_MISMATCH, "the cause was None")
        if strategy.error_type is not None and isinstance(cause, strategy.error_type):
            return None
        return _failure(FailureKind.CAUSE_MISMATCH, f"the cause was: {type_name_text(type(cause))}")

    nested = strategy.matcher.evaluate_outcome(CapturedOutcome(error=cause))
    if nested.failure is None:
        return None
    return _failure(
        FailureKind.CAUSE_MISMATCH,
        "the cause did not match: {" + nested.failure.mismatch + NEW_LINE_INDENT + "}",
    )


def validate_custom_checks(
    checks: Sequence[CustomCheck], error: BaseException
) -> StepFailure | None:
    """Run custom checks in order and stop at the first one that fails or raises."""
    for position, check in enumerate(checks, start=1):
        try:
            value = check.function(error)
        except Exception as exc:  # noqa: BLE001
            return _failure(
                FailureKind.CUSTOM_CHECK_MISMATCH,
                f"the function #{position} raised {type_name_text(type(exc))}: {exc}",
            )
        if check.matcher.matches(value):
            continue
        return _failure(
            FailureKind.CUSTOM_CHECK_MISMATCH,
            f"the value retrieved by the function #{position} "
            + _mismatch_text(check.matcher, value),
        )
    return None


def describe_identity(identity: IdentityStrategy, description: Description) -> None:
    description.append_text(NEW_LINE_INDENT)
    if isinstance(identity, ExpectedType):
        description.append_text(type_name_text(identity.error_type))
    elif isinstance(identity, ExpectedInstance):
        description.append_text(identity_text(identity.error))
    elif isinstance(identity, ExpectedClassifier):
        description.append_text("an exception whose type is ").append_description_of(
            identity.matcher
        )


def describe_message(strategy: MessageStrategy, description: Description) -> None:
    description.append_text(NEW_LINE_INDENT)
    if isinstance(strategy, MessageSubstrings):
        description.append_text(
            "with message containing: [" + ", ".join(strategy.substrings) + "]"
        )
    elif isinstance(strategy, MessageMatcher):
        description.append_text("with message: ").append_description_of(strategy.matcher)


def describe_cause(strategy: CauseStrategy, description: Description) -> None:
    description.append_text(NEW_LINE_INDENT)
    if isinstance(strategy, CauseType):
        description.append_text("and cause: " + type_name_text(strategy.error_type))
    elif isinstance(strategy, CauseMatcher):
        description.append_text("and cause: {")
        strategy.matcher.describe_to(description)
        description.append_text(NEW_LINE_INDENT + "}")


def describe_custom_checks(checks: Sequence[CustomCheck], description: Description) -> None:
    for position, check in enumerate(checks, start=1):
        description.append_text(f"{NEW_LINE_INDENT}and the function #{position}: ")
        description.append_description_of(check.matcher)


def _mismatch_text(matcher: Matcher[Any], item: object) -> str:
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)


def _failure(kind: FailureKind, text: str) -> StepFailure:
    return StepFailure(kind=kind, mismatch=NEW_LINE_INDENT + text)
