"""Expectation strategies held by an outcome matcher."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from hamcrest.core.matcher import Matcher

if TYPE_CHECKING:
    from .exception_matcher import ExceptionMatcher


@dataclass(frozen=True)
class ExpectedType:
    """Raised error must be an instance of `error_type`; `None` means no error at all."""

    error_type: type[BaseException] | None


@dataclass(frozen=True)
class ExpectedInstance:
    """Raised error must be this very object."""

    error: BaseException


@dataclass(frozen=True)
class ExpectedClassifier:
    """Raised error's runtime type must satisfy `matcher`."""

    matcher: Matcher[Any]


IdentityStrategy = ExpectedType | ExpectedInstance | ExpectedClassifier


@dataclass(frozen=True)
class MessageSubstrings:
    """Message must contain every substring; an empty tuple also accepts no message."""

    substrings: tuple[str, ...]


@dataclass(frozen=True)
class MessageMatcher:
    """Message, possibly `None`, is handed to a delegated matcher."""

    matcher: Matcher[Any]


MessageStrategy = MessageSubstrings | MessageMatcher


@dataclass(frozen=True)
class CauseType:
    """Cause must be an instance of `error_type`; `None` means the error has no cause."""

    error_type: type[BaseException] | None


@dataclass(frozen=True)
class CauseMatcher:
    """Cause is evaluated by a nested outcome matcher."""

    matcher: ExceptionMatcher


CauseStrategy = CauseType | CauseMatcher


@dataclass(frozen=True)
class CustomCheck:
    """Value derived from the raised error by `function`, tested by `matcher`."""

    function: Callable[[Any], Any]
    matcher: Matcher[Any]


@dataclass(frozen=True)
class ExpectationSpecification:
    """Complete, immutable set of expectations checked against one outcome."""

    identity: IdentityStrategy
    message: MessageStrategy | None = None
    cause: CauseStrategy | None = None
    custom_checks: tuple[CustomCheck, ...] = ()


class FailureKind(str, Enum):
    """Why an outcome did not satisfy its expectation."""

    NO_ERROR_RAISED = "no_error_raised"
    UNEXPECTED_ERROR_RAISED = "unexpected_error_raised"
    TYPE_MISMATCH = "type_mismatch"
    IDENTITY_MISMATCH = "identity_mismatch"
    MESSAGE_MISMATCH = "message_mismatch"
    CAUSE_MISMATCH = "cause_mismatch"
    CUSTOM_CHECK_MISMATCH = "custom_check_mismatch"


@dataclass(frozen=True)
class StepFailure:
    """First failing validation step and its rendered mismatch text."""

    kind: FailureKind
    mismatch: str


@dataclass(frozen=True)
class OutcomeVerdict:
    """Result of evaluating one outcome against an expectation specification."""

    failure: StepFailure | None = None

    @property
    def is_ok(self) -> bool:
        """Return True when every configured step passed."""
        return self.failure is None
