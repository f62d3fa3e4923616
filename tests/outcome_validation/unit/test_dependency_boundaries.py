"""Boundary tests for the matcher core's internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_matcher_core_does_not_import_runner_or_io_libraries() -> None:
    package_dir = _project_root() / "src" / "outcome_matchers"
    core_dirs = (
        package_dir / "diagnostics",
        package_dir / "containment",
        package_dir / "outcome_validation",
        package_dir / "companion_matchers",
    )
    forbidden_import_fragments = (
        "outcome_matchers.configuration",
        "outcome_matchers.check_execution",
        "outcome_matchers.results_writing",
        "outcome_matchers.cli",
        "import click",
        "import yaml",
        "import openpyxl",
        "from openpyxl",
    )

    for core_dir in core_dirs:
        for module_path in core_dir.glob("*.py"):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert fragment not in text, (
                    f"Forbidden core dependency in {module_path}: {fragment}"
                )
