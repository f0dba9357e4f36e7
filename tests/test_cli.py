from unittest.mock import MagicMock

import pytest

import git_open
from git_open import build_parser, main, run
from git_open.errors import GitStateError
from git_open.prefs import Preferences


@pytest.mark.parametrize(
    "argv, method, call_args",
    [
        ([], "open_repo", ()),
        (["repo"], "open_repo", ()),
        (["commit", "abc123"], "open_commit", ("abc123",)),
        (["line", "src/a.py:4"], "open_at_line_number", ("src/a.py:4",)),
        (["pr"], "push_and_open_pr", ()),
    ],
)
def test_run_dispatches(argv, method, call_args) -> None:
    app = MagicMock()
    run(build_parser().parse_args(argv), app=app)
    getattr(app, method).assert_called_once_with(*call_args)


def test_preferences_from_args() -> None:
    prefs = Preferences.from_args(build_parser().parse_args(["-v", "-n", "pr", "-u", "--marker", "hint:"]))
    assert prefs == Preferences(verbose=True, dry_run=True, separator=":", push_marker="hint:", set_upstream=True)


def test_preferences_from_line_args() -> None:
    prefs = Preferences.from_args(build_parser().parse_args(["line", "--separator", "#", "a.py#3"]))
    assert prefs.separator == "#"
    assert not prefs.dry_run


def test_main_success(monkeypatch) -> None:
    monkeypatch.setattr(git_open, "run", lambda args, app=None: "https://github.com/o/r")
    assert main(["repo"]) == 0


def test_main_reports_parse_error(capsys) -> None:
    # The argument is rejected before any git command runs
    with pytest.raises(SystemExit) as exc_info:
        main(["line", "README"])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: Expected <path>:<line>")


def test_main_reports_git_error(monkeypatch, capsys) -> None:
    def fail(args, app=None):
        raise GitStateError("Not on a branch (HEAD is detached or this is not a git repository).")

    monkeypatch.setattr(git_open, "run", fail)
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "Error: Not on a branch" in capsys.readouterr().err


def test_main_reports_unexpected_error(monkeypatch, capsys) -> None:
    def fail(args, app=None):
        raise ValueError("boom")

    monkeypatch.setattr(git_open, "run", fail)
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "An unexpected error occurred: boom" in capsys.readouterr().err


def test_main_sets_up_logging_from_preferences(monkeypatch) -> None:
    levels = []
    apps = []
    monkeypatch.setattr(git_open, "setup_logging", levels.append)
    monkeypatch.setattr(git_open, "run", lambda args, app=None: apps.append(app))
    assert main(["-v", "-n", "repo"]) == 0
    assert levels == [True]
    assert apps[0].prefs.verbose and apps[0].prefs.dry_run
