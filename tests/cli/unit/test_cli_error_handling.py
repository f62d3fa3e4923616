"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from outcome_matchers.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["run"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["describe", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_strategy_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check-text", "subject", "sub", "--strategy", "most"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Invalid value for '--strategy'" in captured.err


def test_missing_suite_file_is_reported_without_traceback(capsys, tmp_path: Path) -> None:
    exit_code = main(["describe", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Check-suite file not found" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_suite_is_reported_without_traceback(capsys, tmp_path: Path) -> None:
    suite_path = tmp_path / "checks.yaml"
    suite_path.write_text("outcome_checks:\n  - name: a\n    target: nowhere\n", encoding="utf-8")

    exit_code = main(["run", "--config", str(suite_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "must use the form 'package.module:callable'" in captured.err


def test_generate_config_refuses_to_overwrite(capsys, tmp_path: Path) -> None:
    output_path = tmp_path / "checks.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"


def test_undecodable_text_file_is_reported_without_traceback(capsys, tmp_path: Path) -> None:
    (tmp_path / "bad.log").write_bytes(b"\xff\xfe bad")
    suite_path = tmp_path / "checks.yaml"
    suite_path.write_text(
        "text_checks:\n  - name: a\n    path: bad.log\n    substrings: [x]\n", encoding="utf-8"
    )

    exit_code = main(["run", "--config", str(suite_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "not valid UTF-8" in captured.err
    assert "Traceback" not in captured.err
