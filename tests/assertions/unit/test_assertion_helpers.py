"""Assertion helper tests."""

from __future__ import annotations

from decimal import Decimal

import pytest
from outcome_matchers.assertions import (
    assert_exception,
    assert_instantiation_not_allowed,
    assert_negative_number,
    assert_positive_number,
    assert_string_contains,
    assert_string_does_not_contain,
)


class _Namespace:
    def __init__(self) -> None:
        raise RuntimeError("namespace only")


def _fail_with_cause() -> None:
    raise ValueError("bad input") from TypeError("x is None")


def test_assert_exception_accepts_matching_error() -> None:
    assert_exception(ValueError, lambda: int("ten"))
    assert_exception(LookupError, KeyError("missing"))
    assert_exception(ValueError, _fail_with_cause, message="bad input", cause=TypeError)


def test_assert_exception_reports_missing_error() -> None:
    with pytest.raises(AssertionError) as excinfo:
        assert_exception(ValueError, lambda: None)

    assert str(excinfo.value) == 'Expected but not thrown: "ValueError"'


def test_assert_exception_reports_wrong_type() -> None:
    with pytest.raises(AssertionError) as excinfo:
        assert_exception(KeyError, _fail_with_cause)

    assert str(excinfo.value).splitlines() == [
        "Expected:",
        "          KeyError",
        "but:",
        "          was ValueError",
    ]


def test_assert_exception_reports_wrong_message_and_cause() -> None:
    with pytest.raises(AssertionError, match="the message was 'bad input'"):
        assert_exception(ValueError, _fail_with_cause, message="other")

    with pytest.raises(AssertionError, match="the cause was: TypeError"):
        assert_exception(ValueError, _fail_with_cause, cause=KeyError)


def test_assert_exception_runs_procedure_once() -> None:
    calls: list[int] = []

    def procedure() -> None:
        calls.append(1)
        raise ValueError("bad input")

    assert_exception(ValueError, procedure)

    assert calls == [1]


def test_assert_string_contains() -> None:
    assert_string_contains("settled 10 then refunded 4", "settled", "refunded")

    with pytest.raises(AssertionError) as excinfo:
        assert_string_contains("settled 10", "settled", "refunded")

    assert str(excinfo.value) == 'Expected string "refunded" not found in: "settled 10"'


def test_assert_string_does_not_contain() -> None:
    assert_string_does_not_contain("settled 10", "refunded")

    with pytest.raises(AssertionError) as excinfo:
        assert_string_does_not_contain("settled 10", "refunded", "10")

    assert str(excinfo.value) == 'Unexpected string "10" found in: "settled 10"'


def test_number_assertions_only_reject_the_opposite_sign() -> None:
    assert_positive_number(0)
    assert_positive_number(Decimal("1.5"))
    assert_negative_number(0)
    assert_negative_number(-2)

    with pytest.raises(AssertionError, match="Expected a positive number but was: -1"):
        assert_positive_number(-1)
    with pytest.raises(AssertionError, match="Expected a negative number but was: 2.5"):
        assert_negative_number(2.5)


def test_assert_instantiation_not_allowed() -> None:
    assert_instantiation_not_allowed(_Namespace)
    assert_instantiation_not_allowed(_Namespace, RuntimeError, "namespace only")

    with pytest.raises(AssertionError, match="instantiation was allowed for object"):
        assert_instantiation_not_allowed(object)
    with pytest.raises(AssertionError, match="was RuntimeError"):
        assert_instantiation_not_allowed(_Namespace, ValueError)
