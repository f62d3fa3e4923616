"""Containment strategies evaluated over a subject string."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from outcome_matchers.diagnostics import quoted

_NOT_FOUND = "the substring {substring} was not found in: {subject}"
_NOT_FOUND_AFTER = "the substring {substring} was not found after {previous} in: {subject}"
_NONE_FOUND = "none of the specified substrings was found in: {subject}"
_UNEXPECTED_FOUND = "the unexpected string {substring} was found in: {subject}"


class ContainmentStrategy(str, Enum):
    """Supported substring containment strategies."""

    ALL = "all"
    ANY = "any"
    NONE = "none"
    ALL_IN_SEQUENCE = "all_in_sequence"

    @property
    def label(self) -> str:
        """Return the label rendered in expectation descriptions."""
        if self is ContainmentStrategy.ALL_IN_SEQUENCE:
            return "ALL (in sequence)"
        return self.name


class CaseMode(str, Enum):
    """Case handling applied to subject and substrings before comparison."""

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"

    def fold(self, text: str) -> str:
        """Return the text in the form used for comparisons under this mode."""
        if self is CaseMode.INSENSITIVE:
            return text.lower()
        return text


@dataclass(frozen=True)
class ContainmentVerdict:
    """Outcome of one containment evaluation."""

    matched: bool
    mismatch: str | None = None


_MATCHED = ContainmentVerdict(matched=True)


def evaluate_containment(
    subject: str,
    substrings: Sequence[str],
    search_terms: Sequence[str],
    strategy: ContainmentStrategy,
    case_mode: CaseMode,
) -> ContainmentVerdict:
    """Evaluate `subject` against `substrings` under one strategy.

    Args:
      subject: The string under test, as received.
      substrings: Substrings as configured, used for mismatch rendering.
      search_terms: The substrings already folded by `case_mode`, same order.
      strategy: The containment strategy to apply.
      case_mode: Case handling applied to the subject.

    Returns:
      A verdict carrying the mismatch text for the first failing substring.
    """
    haystack = case_mode.fold(subject)
    pairs = list(zip(substrings, search_terms, strict=True))
    if strategy is ContainmentStrategy.ALL:
        return _evaluate_all(subject, haystack, pairs)
    if strategy is ContainmentStrategy.ANY:
        return _evaluate_any(subject, haystack, pairs)
    if strategy is ContainmentStrategy.NONE:
        return _evaluate_none(subject, haystack, pairs)
    return _evaluate_all_in_sequence(subject, haystack, pairs)


def _evaluate_all(
    subject: str, haystack: str, pairs: Sequence[tuple[str, str]]
) -> ContainmentVerdict:
    for substring, term in pairs:
        if term not in haystack:
            return ContainmentVerdict(
                matched=False,
                mismatch=_NOT_FOUND.format(substring=quoted(substring), subject=quoted(subject)),
            )
    return _MATCHED


def _evaluate_any(
    subject: str, haystack: str, pairs: Sequence[tuple[str, str]]
) -> ContainmentVerdict:
    if any(term in haystack for _, term in pairs):
        return _MATCHED
    return ContainmentVerdict(matched=False, mismatch=_NONE_FOUND.format(subject=quoted(subject)))


def _evaluate_none(
    subject: str, haystack: str, pairs: Sequence[tuple[str, str]]
) -> ContainmentVerdict:
    for substring, term in pairs:
        if term in haystack:
            return ContainmentVerdict(
                matched=False,
                mismatch=_UNEXPECTED_FOUND.format(
                    substring=quoted(substring), subject=quoted(subject)
                ),
            )
    return _MATCHED


def _evaluate_all_in_sequence(
    subject: str, haystack: str, pairs: Sequence[tuple[str, str]]
) -> ContainmentVerdict:
    # Each substring must start at or after the end of the previous occurrence.
    minimum_index = 0
    previous: str | None = None
    for substring, term in pairs:
        index = haystack.find(term, minimum_index)
        if index == -1:
            if previous is None:
                mismatch = _NOT_FOUND.format(substring=quoted(substring), subject=quoted(subject))
            else:
                mismatch = _NOT_FOUND_AFTER.format(
                    substring=quoted(substring),
                    previous=quoted(previous),
                    subject=quoted(subject),
                )
            return ContainmentVerdict(matched=False, mismatch=mismatch)
        minimum_index = index + len(term)
        previous = substring
    return _MATCHED
