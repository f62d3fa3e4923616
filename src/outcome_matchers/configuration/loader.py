"""Check-suite loader service."""

from __future__ import annotations

import builtins
import importlib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from outcome_matchers.containment import ContainmentStrategy

from .suite_settings import (
    CauseTypeConfig,
    CheckSuite,
    OutcomeCheckConfig,
    OutcomeExpectationConfig,
    TextCheckConfig,
)

_DEFAULT_ERROR = "builtins.Exception"


class ConfigurationError(Exception):
    """Raised when the check-suite file is invalid."""


def load_check_suite(suite_path: Path | str) -> CheckSuite:
    """Load and validate the check-suite file."""
    path = Path(suite_path)
    if not path.exists():
        raise ConfigurationError(f"Check-suite file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Check-suite file {path} is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse check-suite file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Check-suite root must be a mapping.")

    text_checks = tuple(
        _parse_text_check(entry, f"text_checks[{index}]", path.parent)
        for index, entry in enumerate(_optional_sequence(parsed.get("text_checks"), "text_checks"))
    )
    outcome_checks = tuple(
        _parse_outcome_check(entry, f"outcome_checks[{index}]")
        for index, entry in enumerate(
            _optional_sequence(parsed.get("outcome_checks"), "outcome_checks")
        )
    )
    if not text_checks and not outcome_checks:
        raise ConfigurationError("Check suite must define at least one text or outcome check.")
    _require_unique_names([check.name for check in (*text_checks, *outcome_checks)])

    return CheckSuite(path=path, text_checks=text_checks, outcome_checks=outcome_checks)


def _parse_text_check(value: Any, label: str, base_path: Path) -> TextCheckConfig:
    section = _require_mapping(value, label)
    name = _require_non_empty_string(section.get("name"), f"{label}.name")
    text, source_path = _load_text(section, label, base_path)
    strategy = _parse_strategy(section.get("strategy", "all"), f"{label}.strategy")
    substrings = _require_string_sequence(section.get("substrings"), f"{label}.substrings")
    ignore_case = section.get("ignore_case", False)
    if not isinstance(ignore_case, bool):
        raise ConfigurationError(f"{label}.ignore_case must be a boolean.")
    return TextCheckConfig(
        name=name,
        text=text,
        source_path=source_path,
        strategy=strategy,
        substrings=substrings,
        ignore_case=ignore_case,
    )


def _load_text(section: Mapping[str, Any], label: str, base_path: Path) -> tuple[str, Path | None]:
    inline = section.get("text")
    path_value = section.get("path")
    if inline is not None and path_value is not None:
        raise ConfigurationError(f"{label} must not set both text and path.")
    if inline is not None:
        if not isinstance(inline, str):
            raise ConfigurationError(f"{label}.text must be a string.")
        return inline, None
    if path_value is not None:
        if not isinstance(path_value, str):
            raise ConfigurationError(f"{label}.path must be a string.")
        text_path = _resolve_path(base_path, path_value)
        if not text_path.exists():
            raise ConfigurationError(f"Text file not found: {text_path}")
        try:
            return text_path.read_text(encoding="utf-8"), text_path
        except UnicodeDecodeError as exc:
            raise ConfigurationError(f"Text file {text_path} is not valid UTF-8: {exc}") from exc
    raise ConfigurationError(f"{label} requires either text or path.")


def _parse_strategy(value: Any, field_name: str) -> ContainmentStrategy:
    raw = _require_non_empty_string(value, field_name).lower()
    try:
        return ContainmentStrategy(raw)
    except ValueError as exc:
        allowed = ", ".join(strategy.value for strategy in ContainmentStrategy)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _parse_outcome_check(value: Any, label: str) -> OutcomeCheckConfig:
    section = _require_mapping(value, label)
    name = _require_non_empty_string(section.get("name"), f"{label}.name")
    target_path = _require_non_empty_string(section.get("target"), f"{label}.target")
    target = _resolve_target(target_path, f"{label}.target")
    args = section.get("args", [])
    if not isinstance(args, Sequence) or isinstance(args, str):
        raise ConfigurationError(f"{label}.args must be a list.")
    expect = _parse_expectation(section.get("expect", {}), f"{label}.expect")
    return OutcomeCheckConfig(
        name=name,
        target_path=target_path,
        target=target,
        args=tuple(args),
        expect=expect,
    )


def _parse_expectation(value: Any, label: str) -> OutcomeExpectationConfig:
    section = _require_mapping(value, label)
    error_value = section.get("error", _DEFAULT_ERROR)
    error_type = (
        None if error_value is None else _resolve_error_type(error_value, f"{label}.error")
    )

    if "message" in section and "message_containing" in section:
        raise ConfigurationError(f"{label} must not set both message and message_containing.")
    message = section.get("message")
    if message is not None and not isinstance(message, str):
        raise ConfigurationError(f"{label}.message must be a string.")
    message_containing = None
    if "message_containing" in section:
        message_containing = _require_string_sequence(
            section.get("message_containing"), f"{label}.message_containing"
        )

    cause: CauseTypeConfig | OutcomeExpectationConfig | None = None
    if "cause" in section:
        cause_value = section["cause"]
        if cause_value is None:
            cause = CauseTypeConfig(error_type=None)
        elif isinstance(cause_value, Mapping):
            cause = _parse_expectation(cause_value, f"{label}.cause")
        else:
            cause = CauseTypeConfig(error_type=_resolve_error_type(cause_value, f"{label}.cause"))

    return OutcomeExpectationConfig(
        error_type=error_type,
        message=message,
        message_containing=message_containing,
        cause=cause,
    )


def _resolve_error_type(value: Any, field_name: str) -> type[BaseException]:
    dotted = _require_non_empty_string(value, field_name)
    module_name, _, attribute = dotted.rpartition(".")
    resolved = _import_attribute(module_name or builtins.__name__, attribute, field_name)
    if not (isinstance(resolved, type) and issubclass(resolved, BaseException)):
        raise ConfigurationError(f"{field_name} '{dotted}' is not an exception type.")
    return resolved


def _resolve_target(target_path: str, field_name: str) -> Any:
    module_name, separator, attribute_path = target_path.partition(":")
    if not separator or not module_name or not attribute_path:
        raise ConfigurationError(f"{field_name} must use the form 'package.module:callable'.")
    resolved: Any = _import_module(module_name, field_name)
    for attribute in attribute_path.split("."):
        if not hasattr(resolved, attribute):
            raise ConfigurationError(f"{field_name} '{target_path}' does not exist.")
        resolved = getattr(resolved, attribute)
    if not callable(resolved):
        raise ConfigurationError(f"{field_name} '{target_path}' is not callable.")
    return resolved


def _import_attribute(module_name: str, attribute: str, field_name: str) -> Any:
    module = _import_module(module_name, field_name)
    if not hasattr(module, attribute):
        raise ConfigurationError(f"{field_name} '{module_name}.{attribute}' does not exist.")
    return getattr(module, attribute)


def _import_module(module_name: str, field_name: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"{field_name} module '{module_name}' cannot be imported: {exc}"
        ) from exc
    except Exception as exc:
        raise ConfigurationError(
            f"{field_name} module '{module_name}' failed during import: "
            f"{type(exc).__name__}: {exc}"
        ) from exc


def _require_unique_names(names: Sequence[str]) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise ConfigurationError(f"Check name '{name}' is defined more than once.")
        seen.add(name)


def _optional_sequence(value: Any, section_name: str) -> Sequence[Any]:
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a list.")
    return value


def _require_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a list of strings.")
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(f"{field_name} entries must be strings.")
    return tuple(value)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
