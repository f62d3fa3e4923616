"""One-shot assertion helper exports."""

from .assertion_helpers import (
    assert_exception,
    assert_instantiation_not_allowed,
    assert_negative_number,
    assert_positive_number,
    assert_string_contains,
    assert_string_does_not_contain,
)

__all__ = [
    "assert_exception",
    "assert_instantiation_not_allowed",
    "assert_negative_number",
    "assert_positive_number",
    "assert_string_contains",
    "assert_string_does_not_contain",
]
