"""Diagnostic text layout tests."""

from __future__ import annotations

import json

from outcome_matchers.diagnostics import (
    INDENT,
    NEW_LINE_INDENT,
    identity_text,
    quoted,
    type_name_text,
)


class _Outer:
    class NestedError(Exception):
        pass


def test_margin_is_ten_spaces_after_a_line_break() -> None:
    assert INDENT == " " * 10
    assert NEW_LINE_INDENT == "\n" + " " * 10


def test_builtin_types_render_without_module() -> None:
    assert type_name_text(ValueError) == "ValueError"


def test_library_types_render_with_module_and_qualified_name() -> None:
    assert type_name_text(json.JSONDecodeError) == "json.decoder.JSONDecodeError"
    assert type_name_text(_Outer.NestedError).endswith("._Outer.NestedError")


def test_missing_type_renders_as_no_exception() -> None:
    assert type_name_text(None) == "no exception"


def test_identity_text_distinguishes_instances_of_same_type() -> None:
    first = ValueError("same")
    second = ValueError("same")

    assert identity_text(first) == f"ValueError@{id(first):x}"
    assert identity_text(first) != identity_text(second)
    assert identity_text(None) == "no exception"
    assert identity_text(None, default="nothing") == "nothing"


def test_quoted_wraps_in_double_quotes() -> None:
    assert quoted("fox") == '"fox"'
