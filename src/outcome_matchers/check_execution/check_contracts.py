"""Check execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class CheckKind(str, Enum):
    """Kind of configured check."""

    TEXT = "text"
    OUTCOME = "outcome"


@dataclass(frozen=True)
class CheckRunRequest:
    """Input contract for executing one check suite."""

    suite_path: str
    output_dir: str | None = None


@dataclass(frozen=True)
class CheckResult:
    """Evaluation result of one configured check."""

    name: str
    kind: CheckKind
    passed: bool
    expectation: str
    mismatch: str | None

    @property
    def is_ok(self) -> bool:
        """Return True when the check passed."""
        return self.passed


@dataclass(frozen=True)
class CheckRunOutcome:
    """Output contract for one completed check-suite run."""

    suite_path: Path
    run_start: datetime
    results: tuple[CheckResult, ...]
    output_path: Path | None

    @property
    def passed(self) -> int:
        """Return the number of passing checks."""
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        """Return the number of failing checks."""
        return len(self.results) - self.passed
