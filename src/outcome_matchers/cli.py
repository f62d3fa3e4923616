"""Command line interface for check suites and ad hoc substring checks."""

from __future__ import annotations

import logging
import sys

import click
from hamcrest.core.string_description import StringDescription

from outcome_matchers.check_execution import (
    CheckExecutionError,
    CheckResult,
    CheckRunRequest,
    describe_check_suite,
    execute_check_suite,
    load_suite,
)
from outcome_matchers.configuration import DEFAULT_SUITE_FILENAME, write_placeholder_suite
from outcome_matchers.containment import ContainmentStrategy, SubstringMatcher

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_suite_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON check-suite file",
)


class CliError(Exception):
    """Command failure reported on stderr without a traceback."""


class ChecksFailed(Exception):
    """Raised when a command completed but at least one check failed."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="outcome-matchers")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Evaluate substring and raised-error expectations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    default=DEFAULT_SUITE_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Where to write the check-suite template",
)
def generate_config(output_path: str) -> None:
    """Write a check-suite template with <REQUIRED> placeholders."""
    try:
        written = write_placeholder_suite(output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@cli.command(name="describe")
@_suite_option
def describe(config_path: str) -> None:
    """Print the expectation of every configured check."""
    try:
        suite = load_suite(config_path)
    except CheckExecutionError as exc:
        raise CliError(str(exc)) from exc
    for name, expectation in describe_check_suite(suite):
        click.echo(_labelled(f"{name}:", expectation))


@cli.command(name="run")
@_suite_option
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=str),
    help="Directory receiving the results workbook; no workbook when omitted",
)
def run_checks(config_path: str, output_dir: str | None) -> None:
    """Evaluate every check of a check suite."""
    request = CheckRunRequest(suite_path=config_path, output_dir=output_dir)
    try:
        outcome = execute_check_suite(request)
    except CheckExecutionError as exc:
        raise CliError(str(exc)) from exc

    for result in outcome.results:
        _echo_result(result)
    click.echo(f"{outcome.passed} passed, {outcome.failed} failed")
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    if outcome.failed:
        raise ChecksFailed(f"{outcome.failed} check(s) failed")


@cli.command(name="check-text")
@click.argument("subject")
@click.argument("substrings", nargs=-1)
@click.option(
    "--strategy",
    type=click.Choice([strategy.value for strategy in ContainmentStrategy]),
    default=ContainmentStrategy.ALL.value,
    show_default=True,
    help="How the substrings must occur in SUBJECT",
)
@click.option("--ignore-case", is_flag=True, default=False, help="Compare without regard to case.")
def check_text(subject: str, substrings: tuple[str, ...], strategy: str, ignore_case: bool) -> None:
    """Check SUBJECT for SUBSTRINGS under one containment strategy."""
    matcher = SubstringMatcher(ContainmentStrategy(strategy), substrings)
    if ignore_case:
        matcher = matcher.ignore_case()
    if matcher.matches(subject):
        click.echo("PASS")
        return
    report = StringDescription()
    report.append_text("Expected: ").append_description_of(matcher)
    report.append_text("\n     but: ")
    matcher.describe_mismatch(subject, report)
    click.echo(str(report))
    raise ChecksFailed("text check failed")


def _echo_result(result: CheckResult) -> None:
    if result.passed:
        click.echo(f"PASS {result.name}")
        return
    click.echo(f"FAIL {result.name}")
    click.echo(_labelled("Expected:", result.expectation))
    click.echo(_labelled("     but:", result.mismatch or ""))


def _labelled(label: str, text: str) -> str:
    # Multi-line diagnostics already start with a line break.
    if not text or text.startswith("\n"):
        return label + text
    return f"{label} {text}"


def main(argv: list[str] | None = None) -> int:
    """Console-script entry point returning the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        cli.main(args=args, standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except ChecksFailed:
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
