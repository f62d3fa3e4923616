"""PyHamcrest matcher checking a string for configured substrings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from .containment_rules import CaseMode, ContainmentStrategy, evaluate_containment

_EXPECTED_SCENARIO = "a string containing {strategy} of the specified substrings [{substrings}]"


@dataclass(frozen=True, eq=False)
class SubstringMatcher(BaseMatcher[str]):
    """Matches strings containing the configured substrings under one strategy.

    Instances are immutable; `ignore_case()` returns a new matcher. A `None` or
    non-string subject never matches, whatever the strategy.
    """

    strategy: ContainmentStrategy
    substrings: tuple[str, ...]
    case_mode: CaseMode = CaseMode.SENSITIVE
    _search_terms: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for substring in self.substrings:
            if not isinstance(substring, str):
                raise TypeError(f"Substrings must be strings, got {type(substring).__name__}.")
        object.__setattr__(
            self,
            "_search_terms",
            tuple(self.case_mode.fold(substring) for substring in self.substrings),
        )

    def ignore_case(self) -> SubstringMatcher:
        """Return a copy of this matcher comparing without regard to case."""
        return replace(self, case_mode=CaseMode.INSENSITIVE)

    def _matches(self, item: object) -> bool:
        if not isinstance(item, str):
            return False
        return evaluate_containment(
            item, self.substrings, self._search_terms, self.strategy, self.case_mode
        ).matched

    def describe_to(self, description: Description) -> None:
        description.append_text(
            _EXPECTED_SCENARIO.format(
                strategy=self.strategy.label,
                substrings=", ".join(self.substrings),
            )
        )
        if self.case_mode is CaseMode.INSENSITIVE:
            description.append_text(" (ignore case)")

    def describe_mismatch(self, item: object, mismatch_description: Description) -> None:
        if not isinstance(item, str):
            super().describe_mismatch(item, mismatch_description)
            return
        verdict = evaluate_containment(
            item, self.substrings, self._search_terms, self.strategy, self.case_mode
        )
        if verdict.mismatch is not None:
            mismatch_description.append_text(verdict.mismatch)


def contains_all(*substrings: str) -> SubstringMatcher:
    """Match strings containing every substring, in any order."""
    return SubstringMatcher(ContainmentStrategy.ALL, substrings)


def contains_all_in_sequence(*substrings: str) -> SubstringMatcher:
    """Match strings containing every substring, one after another in the given order."""
    return SubstringMatcher(ContainmentStrategy.ALL_IN_SEQUENCE, substrings)


def contains_any(*substrings: str) -> SubstringMatcher:
    """Match strings containing at least one substring."""
    return SubstringMatcher(ContainmentStrategy.ANY, substrings)


def contains_none(*substrings: str) -> SubstringMatcher:
    """Match strings containing none of the substrings."""
    return SubstringMatcher(ContainmentStrategy.NONE, substrings)
