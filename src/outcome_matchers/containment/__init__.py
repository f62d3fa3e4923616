"""Substring containment exports."""

from .containment_rules import (
    CaseMode,
    ContainmentStrategy,
    ContainmentVerdict,
    evaluate_containment,
)
from .substring_matcher import (
    SubstringMatcher,
    contains_all,
    contains_all_in_sequence,
    contains_any,
    contains_none,
)

__all__ = [
    "CaseMode",
    "ContainmentStrategy",
    "ContainmentVerdict",
    "evaluate_containment",
    "SubstringMatcher",
    "contains_all",
    "contains_all_in_sequence",
    "contains_any",
    "contains_none",
]
