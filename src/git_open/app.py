import logging
from typing import Callable, Optional

from . import git_utils
from .constants import DEFAULT_REMOTE
from .errors import GitStateError, PathOutsideRepoError
from .prefs import Preferences
from .url_utils import (
    commit_link,
    extract_pr_url,
    line_link,
    link_style_for,
    normalize_remote_url,
    parse_path_and_line,
)
from .web_utils import open_url_in_browser

logger = logging.getLogger(__name__)


class GitOpenApp:
    """
    Runs the user-facing actions.

    `git` is anything exposing the functions of `git_open.git_utils` and
    `open_url` is called with the final link; both are swapped for doubles in tests.
    """

    def __init__(
        self,
        prefs: Optional[Preferences] = None,
        git=git_utils,
        open_url: Callable[[str], None] = open_url_in_browser,
    ):
        self.prefs = prefs or Preferences()
        self.git = git
        self.open_url = open_url

    def _launch(self, url: str) -> str:
        if self.prefs.dry_run:
            print(url)
        else:
            self.open_url(url)
        return url

    def _base_url(self, branch: str) -> str:
        remote_name = self.git.get_remote_name_for_branch(branch)
        raw_url = self.git.get_remote_url(remote_name)
        base_url = normalize_remote_url(raw_url)
        logger.debug(f"Remote '{remote_name}' of branch '{branch}' resolves to {base_url}")
        return base_url

    def open_repo(self) -> str:
        branch = self.git.get_current_branch()
        return self._launch(self._base_url(branch))

    def open_commit(self, commit_sha: str) -> str:
        branch = self.git.get_current_branch()
        base_url = self._base_url(branch)
        return self._launch(commit_link(base_url, commit_sha, link_style_for(base_url)))

    def open_at_line_number(self, path_and_line: str) -> str:
        file_at_line = parse_path_and_line(path_and_line, self.prefs.separator)
        if file_at_line.filepath.startswith(("/", "\\")):
            raise PathOutsideRepoError(
                f"File path must be relative to the repository, got {file_at_line.filepath!r}"
            )

        branch = self.git.get_current_branch()
        base_url = self._base_url(branch)

        # Paths are given relative to the current directory, links are relative to the repo root
        prefix = self.git.get_prefix()

        return self._launch(
            line_link(
                base_url, branch, prefix + file_at_line.filepath, file_at_line.line_number, link_style_for(base_url)
            )
        )

    def push_and_open_pr(self) -> str:
        branch = self.git.get_current_branch()
        try:
            remote = self.git.get_remote_name_for_branch(branch)
        except GitStateError:
            # A branch being pushed for the first time has no upstream yet
            logger.debug(f"Branch '{branch}' has no remote configured, pushing to '{DEFAULT_REMOTE}'")
            remote = DEFAULT_REMOTE

        push_output = self.git.push_current_branch(branch, remote=remote, set_upstream=self.prefs.set_upstream)
        return self._launch(extract_pr_url(push_output, self.prefs.push_marker))
