"""Line-based layout shared by matcher expectation and mismatch descriptions."""

from __future__ import annotations

INDENT = " " * 10
NEW_LINE_INDENT = "\n" + INDENT
NO_EXCEPTION = "no exception"


def type_name_text(error_type: type | None) -> str:
    """Render a type as `module.QualifiedName`, omitting the builtins module."""
    if error_type is None:
        return NO_EXCEPTION
    module = error_type.__module__
    if module == "builtins":
        return error_type.__qualname__
    return f"{module}.{error_type.__qualname__}"


def identity_text(value: object | None, default: str = NO_EXCEPTION) -> str:
    """Render an object as `TypeName@<hex id>` so distinct instances stay distinguishable."""
    if value is None:
        return default
    return f"{type_name_text(type(value))}@{id(value):x}"


def quoted(text: str) -> str:
    return f'"{text}"'
