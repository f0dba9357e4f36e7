#!/usr/bin/env python3
"""
git-open
========

Opens the web page of the current repository on its git hosting service.

The web URL is derived from the remote configured for the current branch, e.g.
`git@github.com:org/project.git` becomes `https://github.com/org/project`.


Usage
-----

git-open [-v] [-n]                 # repository home page
git-open [-v] [-n] commit SHA      # a commit
git-open [-v] [-n] line PATH:LINE  # a file at a line, on the current branch
git-open [-v] [-n] pr [-u]         # push, then open the pull request page the server suggests

Help: to see all flags, run with `-h`


Supported
---------

- GitHub with links of the form:
    - `https://github.com/org/project/commit/commit_hash`
    - `https://github.com/org/project/blob/branch/url_path#Lline`
- GitLab (hosts whose name contains `gitlab`), with `/-/commit/` and `/-/blob/` links

Requires
--------
Python v3.9+
"""

import argparse
import logging
import sys
from typing import List, Optional

from .app import GitOpenApp
from .constants import DEFAULT_PATH_LINE_SEPARATOR, DEFAULT_PUSH_MARKER
from .errors import GitOpenError
from .prefs import Preferences


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-open",
        description="Opens the current repository's hosting service page in a web browser.\n"
        "Without a command, opens the repository home page.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output for more detailed logging.",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the URL instead of opening it in a browser.\n"
        "Note: `pr` still pushes; only the browser launch is skipped.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("repo", help="Open the repository home page (default).")

    commit_parser = subparsers.add_parser("commit", help="Open a commit.")
    commit_parser.add_argument("sha", help="Commit hash (passed through as is).")

    line_parser = subparsers.add_parser("line", help="Open a file at a line on the current branch.")
    line_parser.add_argument(
        "path_and_line",
        metavar="PATH:LINE",
        help="File path relative to the current directory and a 1-based line number, e.g. src/app.py:42.\n"
        "Split on the last separator.",
    )
    line_parser.add_argument(
        "--separator",
        default=DEFAULT_PATH_LINE_SEPARATOR,
        help="Separator between path and line (default: %(default)s).",
    )

    pr_parser = subparsers.add_parser(
        "pr", help="Push the current branch and open the pull request page printed by the server."
    )
    pr_parser.add_argument(
        "-u",
        "--set-upstream",
        action="store_true",
        help="Pass --set-upstream to git push.",
    )
    pr_parser.add_argument(
        "--marker",
        default=DEFAULT_PUSH_MARKER,
        help="Prefix of the push output lines to search for the URL (default: %(default)s).",
    )
    return parser


def run(args: argparse.Namespace, app: Optional[GitOpenApp] = None) -> str:
    """Dispatches the parsed command line to the matching action and returns the URL."""
    if app is None:
        app = GitOpenApp(Preferences.from_args(args))

    if args.command == "commit":
        return app.open_commit(args.sha)
    if args.command == "line":
        return app.open_at_line_number(args.path_and_line)
    if args.command == "pr":
        return app.push_and_open_pr()
    return app.open_repo()


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    prefs = Preferences.from_args(args)
    setup_logging(prefs.verbose)

    try:
        run(args, GitOpenApp(prefs))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
    except GitOpenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:  # Catch other unexpected errors
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc(file=sys.stderr)
        sys.exit(1)

    return 0


if __name__ == "__main__":
    main()
