"""Diagnostic text layout exports."""

from .text_layout import (
    INDENT,
    NEW_LINE_INDENT,
    NO_EXCEPTION,
    identity_text,
    quoted,
    type_name_text,
)

__all__ = [
    "INDENT",
    "NEW_LINE_INDENT",
    "NO_EXCEPTION",
    "identity_text",
    "quoted",
    "type_name_text",
]
