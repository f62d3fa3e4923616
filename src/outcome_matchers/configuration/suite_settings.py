"""Check-suite configuration entities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from outcome_matchers.containment import ContainmentStrategy


@dataclass(frozen=True)
class TextCheckConfig:
    """Containment expectation over a text given inline or read from a file."""

    name: str
    text: str
    source_path: Path | None
    strategy: ContainmentStrategy
    substrings: tuple[str, ...]
    ignore_case: bool


@dataclass(frozen=True)
class CauseTypeConfig:
    """Cause given as an error type; None means the error must have no cause."""

    error_type: type[BaseException] | None


@dataclass(frozen=True)
class OutcomeExpectationConfig:
    """Declarative counterpart of an outcome matcher configuration."""

    error_type: type[BaseException] | None
    message: str | None = None
    message_containing: tuple[str, ...] | None = None
    cause: CauseTypeConfig | OutcomeExpectationConfig | None = None


@dataclass(frozen=True)
class OutcomeCheckConfig:
    """Callable target invoked with `args` and the expectation on what it raises."""

    name: str
    target_path: str
    target: Callable[..., object]
    args: tuple[object, ...]
    expect: OutcomeExpectationConfig


@dataclass(frozen=True)
class CheckSuite:
    """Top-level check-suite aggregate."""

    path: Path
    text_checks: tuple[TextCheckConfig, ...]
    outcome_checks: tuple[OutcomeCheckConfig, ...]

    @property
    def check_count(self) -> int:
        """Return the number of configured checks."""
        return len(self.text_checks) + len(self.outcome_checks)
