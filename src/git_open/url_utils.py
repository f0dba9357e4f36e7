from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

from git_open.constants import (
    DEFAULT_PATH_LINE_SEPARATOR,
    DEFAULT_PUSH_MARKER,
    HTTPS_REMOTE_RE,
    LINE_NUMBER_RE,
    SSH_REMOTE_RE,
)
from git_open.errors import (
    EmptyPathError,
    InvalidLineNumberError,
    MissingSeparatorError,
    PathOutsideRepoError,
    PrUrlNotFoundError,
    UnrecognizedFormatError,
)


@dataclass(frozen=True)
class FileLineArgument:
    filepath: str
    line_number: int


@dataclass(frozen=True)
class LinkStyle:
    """Path segments a hosting service uses for its commit and file views."""
    name: str
    commit_path: str
    blob_path: str


GITHUB_STYLE = LinkStyle(name="github", commit_path="commit", blob_path="blob")
GITLAB_STYLE = LinkStyle(name="gitlab", commit_path="-/commit", blob_path="-/blob")


def _strip_remote_suffixes(raw: str) -> str:
    url = raw.strip().rstrip("/")
    if url.endswith(".git"):
        url = url[: -len(".git")]
    return url.rstrip("/")


def normalize_remote_url(raw: str) -> str:
    """
    Converts a remote URL as printed by `git config` into the repository's web URL.

    Examples:
        git@github.com:owner/repo.git        -> https://github.com/owner/repo
        https://github.com/owner/repo.git    -> https://github.com/owner/repo
        https://user@github.com/owner/repo\\n -> https://github.com/owner/repo

    Raises UnrecognizedFormatError for anything else (empty text, `ftp://`, ...).
    """
    url = _strip_remote_suffixes(raw)

    for pattern in (SSH_REMOTE_RE, HTTPS_REMOTE_RE):
        match = pattern.match(url)
        if match:
            return f"https://{match.group('host')}/{match.group('path')}"

    raise UnrecognizedFormatError(f"Unrecognized git remote URL format: {raw.strip()!r}")


def link_style_for(base_url: str) -> LinkStyle:
    """Picks the path conventions of the hosting service behind `base_url`."""
    host = (urlsplit(base_url).hostname or "").lower()
    if "gitlab" in host:
        return GITLAB_STYLE
    return GITHUB_STYLE


def commit_link(base_url: str, commit_sha: str, style: LinkStyle = GITHUB_STYLE) -> str:
    return f"{base_url}/{style.commit_path}/{commit_sha}"


def _normalize_repo_path(filepath: str) -> str:
    """Turns `filepath` into a clean path below the work tree root."""
    path = filepath.replace("\\", "/")
    if path.startswith("/"):
        raise PathOutsideRepoError(f"File path must be relative to the repository, got {filepath!r}")

    path = posixpath.normpath(path) if path else path
    if not path or path == ".":
        raise EmptyPathError(f"No file path given (got {filepath!r})")
    if path == ".." or path.startswith("../"):
        raise PathOutsideRepoError(f"File path {filepath!r} points outside the repository")
    return path


def line_link(
    base_url: str,
    branch: str,
    filepath: str,
    line_number: int,
    style: LinkStyle = GITHUB_STYLE,
) -> str:
    """Builds the link to `filepath` on `branch`, anchored at a 1-based line."""
    path = _normalize_repo_path(filepath)
    if line_number < 1:
        raise InvalidLineNumberError(f"Line numbers start at 1, got {line_number}")

    return (
        f"{base_url}/{style.blob_path}/{quote(branch, safe='/')}/{quote(path, safe='/')}"
        f"#L{line_number}"
    )


def parse_path_and_line(arg: str, separator: str = DEFAULT_PATH_LINE_SEPARATOR) -> FileLineArgument:
    """
    Splits a `path:line` token on the last separator.

    `C:\\dir\\file.txt:10` is therefore read as path `C:\\dir\\file.txt`, line 10.
    """
    filepath, found, line_text = arg.rpartition(separator)
    if not found:
        raise MissingSeparatorError(f"Expected <path>{separator}<line>, got {arg!r}")

    if not LINE_NUMBER_RE.fullmatch(line_text) or int(line_text) < 1:
        raise InvalidLineNumberError(f"Invalid line number {line_text!r} in {arg!r}")

    if not filepath:
        raise EmptyPathError(f"Missing file path before {separator!r} in {arg!r}")

    return FileLineArgument(filepath=filepath, line_number=int(line_text))


def extract_pr_url(push_output: str, marker: str = DEFAULT_PUSH_MARKER) -> str:
    """
    Finds the pull/merge request link the server printed while receiving a push.

    Only lines starting with `marker` are considered; the first `https` URL on
    such a line wins, up to the next whitespace.
    """
    pattern = re.compile(rf"^{re.escape(marker)}.*?(https\S*)", re.MULTILINE)
    match = pattern.search(push_output)
    if not match:
        raise PrUrlNotFoundError(
            f"No pull request URL found on a '{marker}' line of the push output "
            "(branch already up to date, or the server printed no link)."
        )
    return match.group(1)
