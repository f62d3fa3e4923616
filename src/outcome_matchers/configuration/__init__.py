"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_SUITE_FILENAME,
    build_placeholder_suite,
    write_placeholder_suite,
)
from .loader import ConfigurationError, load_check_suite
from .suite_settings import (
    CauseTypeConfig,
    CheckSuite,
    OutcomeCheckConfig,
    OutcomeExpectationConfig,
    TextCheckConfig,
)

__all__ = [
    "CauseTypeConfig",
    "CheckSuite",
    "OutcomeCheckConfig",
    "OutcomeExpectationConfig",
    "TextCheckConfig",
    "ConfigurationError",
    "load_check_suite",
    "DEFAULT_SUITE_FILENAME",
    "build_placeholder_suite",
    "write_placeholder_suite",
]
