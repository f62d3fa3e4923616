"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class CheckStatus(str, Enum):
    """Rendered status in the results sheet."""

    OK = "OK"
    FAILED = "FAILED"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    suite_path: Path
    output_path: Path
    passed: int
    failed: int
