"""Check-suite scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SUITE_FILENAME = "checks.yaml"

_SUITE_SCAFFOLD_TEMPLATE = """# Check-suite template for outcome-matchers.
# Replace every <REQUIRED> placeholder before running describe or run.
# Remove the sections you do not need; at least one check is required.

text_checks:
  - name: "<REQUIRED>"
    # Provide either inline text or a path relative to this file.
    text: "<REQUIRED>"
    # path: "<OPTIONAL>"
    # One of: all, any, none, all_in_sequence.
    strategy: all
    substrings:
      - "<REQUIRED>"
    ignore_case: false

outcome_checks:
  - name: "<REQUIRED>"
    # Callable invoked once per run, written as package.module:callable.
    target: "<REQUIRED>"
    args: []
    expect:
      # Dotted exception type; null expects the call to complete without raising.
      error: "builtins.Exception"
      # Use either message (exact) or message_containing (substrings).
      # message: "<OPTIONAL>"
      # message_containing:
      #   - "<OPTIONAL>"
      # Dotted exception type, null for "no cause", or a nested expect mapping.
      # cause: "<OPTIONAL>"
"""


def build_placeholder_suite() -> str:
    """Build a YAML check-suite template with placeholders and inline guidance."""
    return _SUITE_SCAFFOLD_TEMPLATE


def write_placeholder_suite(output_path: Path | str) -> Path:
    """Write the placeholder check-suite template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Check-suite file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_suite(), encoding="utf-8")
    return destination.resolve()
