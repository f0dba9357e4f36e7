"""Shared test fixtures and utilities."""

from typing import List, Optional, Tuple

import pytest

from git_open.errors import GitStateError

GITHUB_PUSH_OUTPUT = """Counting objects: 4, done.
Delta compression using up to 12 threads.
Compressing objects: 100% (4/4), done.
Writing objects: 100% (4/4), 3.01 KiB | 3.01 MiB/s, done.
Total 4 (delta 2), reused 0 (delta 0)
remote: Resolving deltas: 100% (2/2), completed with 2 local objects.
remote:
remote: Create a pull request for 'feat/add-more-pokemons' on GitHub by visiting:
remote:      https://github.com/tobiasbueschel/awesome-pokemon/pull/new/feat/add-more-pokemons
remote:
To github.com:tobiasbueschel/awesome-pokemon.git
 * [new branch]      feat/add-more-pokemons -> feat/add-more-pokemons
"""

UP_TO_DATE_PUSH_OUTPUT = "Everything up-to-date\n"


class FakeGit:
    """Stands in for `git_open.git_utils`, answering with canned strings.

    Passing None for `branch` or `remote` makes the matching query fail like
    a detached HEAD or an unconfigured branch would.
    """

    def __init__(
        self,
        branch: Optional[str] = "main",
        remote: Optional[str] = "origin",
        url: str = "git@github.com:o/r.git\n",
        prefix: str = "",
        push_output: str = GITHUB_PUSH_OUTPUT,
    ) -> None:
        self.branch = branch
        self.remote = remote
        self.url = url
        self.prefix = prefix
        self.push_output = push_output
        self.pushes: List[Tuple[str, str, bool]] = []
        self.url_lookups: List[str] = []

    def get_current_branch(self) -> str:
        if self.branch is None:
            raise GitStateError("Not on a branch (HEAD is detached or this is not a git repository).")
        return self.branch

    def get_remote_name_for_branch(self, branch: str) -> str:
        if self.remote is None:
            raise GitStateError(f"Branch '{branch}' has no configured remote.")
        return self.remote

    def get_remote_url(self, remote_name: str) -> str:
        self.url_lookups.append(remote_name)
        return self.url

    def get_prefix(self) -> str:
        return self.prefix

    def push_current_branch(self, branch: str, remote: str = "origin", set_upstream: bool = False) -> str:
        self.pushes.append((branch, remote, set_upstream))
        return self.push_output


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def opened_urls() -> List[str]:
    """URLs handed to the browser opener double."""
    return []
