"""Composable PyHamcrest matchers for raised errors, messages, cause chains and substrings."""

import logging

from .companion_matchers import instantiation_not_allowed, is_negative, is_positive
from .containment import (
    SubstringMatcher,
    contains_all,
    contains_all_in_sequence,
    contains_any,
    contains_none,
)
from .outcome_validation import (
    ExceptionMatcher,
    exception,
    throws_exception,
    throws_no_exception,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ExceptionMatcher",
    "SubstringMatcher",
    "contains_all",
    "contains_all_in_sequence",
    "contains_any",
    "contains_none",
    "exception",
    "instantiation_not_allowed",
    "is_negative",
    "is_positive",
    "throws_exception",
    "throws_no_exception",
]
