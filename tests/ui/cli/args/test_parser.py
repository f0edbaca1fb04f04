"""Tests for command line argument parser."""

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from codequiz.config import QuizConfig
from codequiz.ui.cli.args import ArgumentParser, CLIArgs


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture):
    """Keep the real logger untouched while parsing."""

    return mocker.patch("codequiz.ui.cli.args.parser.setup_logger")


def test_defaults(mock_setup_logger) -> None:
    args = ArgumentParser.process_args([])

    assert isinstance(args, CLIArgs)
    assert args.config == QuizConfig(root=Path("."), context=1, reveal=10)
    assert args.config.loop and not args.config.line_count_only
    assert args.log_file is None
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] is None


def test_all_options(mock_setup_logger, tmp_path: Path) -> None:
    log_file = tmp_path / "quiz.log"
    args = ArgumentParser.process_args(
        [
            "frontend/src",
            "--context",
            "2",
            "-r",
            "20",
            "--linecount",
            "--once",
            "--seed",
            "7",
            "--verbose",
            "--log-file",
            str(log_file),
        ]
    )

    assert args.config == QuizConfig(
        root=Path("frontend/src"),
        context=2,
        reveal=20,
        line_count_only=True,
        loop=False,
        seed=7,
    )
    assert args.verbose and not args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG
    assert mock_setup_logger.call_args.kwargs["log_file"] == log_file


def test_short_flags_and_quiet(mock_setup_logger) -> None:
    args = ArgumentParser.process_args(["-c", "0", "-r", "0", "-l", "-q"])

    assert (args.config.context, args.config.reveal) == (0, 0)
    assert args.config.line_count_only
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_double_dash_ends_options() -> None:
    args = ArgumentParser.process_args(["--", "-weird-dir"])

    assert args.config.root == Path("-weird-dir")


@pytest.mark.parametrize("value", ["abc", "-1", "1.5", ""])
def test_non_numeric_context_is_usage_error(value: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["--context", value])

    assert excinfo.value.code == 2
    assert "non-negative integer" in capsys.readouterr().err


def test_non_numeric_reveal_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["-r", "ten"])

    assert excinfo.value.code == 2
    assert "non-negative integer" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["one", "two"],
        ["--bogus"],
        ["-c"],
        ["--verbose", "--quiet"],
        ["--cont", "3"],
        ["--rev", "4"],
        ["--line"],
    ],
)
def test_usage_errors_exit_2(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(argv)

    assert excinfo.value.code == 2
    assert capsys.readouterr().err


def test_help_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["--help"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "--context" in out and "--reveal" in out and "--linecount" in out
