"""Matcher for classes that refuse to be instantiated."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.matcher import Matcher

from outcome_matchers.diagnostics import type_name_text
from outcome_matchers.outcome_validation import ExceptionMatcher, FailureKind, throws_exception


@dataclass(frozen=True, eq=False)
class InstantiationNotAllowedMatcher(BaseMatcher[type]):
    """Matches classes whose no-argument instantiation raises.

    The raised error can be narrowed with `throwing()` and `with_message()`;
    both are validated by an `ExceptionMatcher`.
    """

    error_type: type[BaseException] = BaseException
    message: Matcher[Any] | None = None

    def throwing(self, error_type: type[BaseException]) -> InstantiationNotAllowedMatcher:
        """Require instantiation to raise `error_type` (or a subclass)."""
        if error_type is None:
            raise TypeError("Expected error type must not be None.")
        return replace(self, error_type=error_type)

    def with_message(self, message: Matcher[Any] | str | None) -> InstantiationNotAllowedMatcher:
        """Require the raised error's message to match (a literal means equality)."""
        return replace(self, message=wrap_matcher(message))

    @property
    def outcome_matcher(self) -> ExceptionMatcher:
        """Return the matcher applied to the instantiation outcome."""
        matcher = throws_exception(self.error_type)
        if self.message is not None:
            matcher = matcher.with_message(self.message)
        return matcher

    def _matches(self, item: object) -> bool:
        if not isinstance(item, type):
            return False
        return self.outcome_matcher.evaluate(item).is_ok

    def describe_to(self, description: Description) -> None:
        description.append_text("a class which cannot be instantiated")
        if self.error_type is not BaseException or self.message is not None:
            description.append_text(", raising:")
            self.outcome_matcher.describe_to(description)

    def describe_mismatch(self, item: object, mismatch_description: Description) -> None:
        if not isinstance(item, type):
            super().describe_mismatch(item, mismatch_description)
            return
        verdict = self.outcome_matcher.evaluate(item)
        if verdict.failure is None:
            return
        if verdict.failure.kind is FailureKind.NO_ERROR_RAISED:
            mismatch_description.append_text(f"instantiation was allowed for {type_name_text(item)}")
            return
        mismatch_description.append_text(verdict.failure.mismatch)


def instantiation_not_allowed() -> InstantiationNotAllowedMatcher:
    """Build a matcher accepting classes that cannot be instantiated without arguments."""
    return InstantiationNotAllowedMatcher()
