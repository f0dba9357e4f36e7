import logging
import subprocess
from typing import List

from .constants import DEFAULT_REMOTE
from .errors import GitStateError

logger = logging.getLogger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def _run_git(args: List[str], what: str) -> subprocess.CompletedProcess:
    """Runs git with `args`; any failure becomes a GitStateError describing `what` was attempted."""
    cmd = ["git", *args]
    logger.debug(f"Running: {subprocess.list2cmdline(cmd)}")
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr_output = e.stderr.strip() if e.stderr else "N/A"
        logger.debug(
            f"Command '{subprocess.list2cmdline(e.cmd)}' failed (rc={e.returncode}). Stderr: '{stderr_output}'"
        )
        raise GitStateError(f"Failed to {what}: {stderr_output}") from e
    except FileNotFoundError as e:
        raise GitStateError(f"Failed to {what}: git executable not found") from e
    except UnicodeDecodeError as e:
        raise GitStateError(f"Failed to {what}: git output is not valid UTF-8") from e


def get_current_branch() -> str:
    """Returns the checked-out branch name; fails on a detached HEAD."""
    try:
        result = _run_git(["symbolic-ref", "--quiet", "HEAD"], "read the current branch")
    except GitStateError as e:
        raise GitStateError("Not on a branch (HEAD is detached or this is not a git repository).") from e

    ref = result.stdout.strip()
    if not ref.startswith(BRANCH_REF_PREFIX):
        raise GitStateError(f"HEAD does not point at a local branch: '{ref}'")
    return ref[len(BRANCH_REF_PREFIX):]


def _get_config_value(key: str, missing_message: str) -> str:
    try:
        result = _run_git(["config", "--get", key], f"read git config '{key}'")
    except GitStateError as e:
        raise GitStateError(missing_message) from e

    value = result.stdout.strip()
    if not value:
        raise GitStateError(missing_message)
    return value


def get_remote_name_for_branch(branch: str) -> str:
    return _get_config_value(
        f"branch.{branch}.remote",
        f"Branch '{branch}' has no configured remote (branch.{branch}.remote is unset).",
    )


def get_remote_url(remote_name: str) -> str:
    """Returns the URL configured for `remote_name`, as git prints it."""
    result = _run_git(["config", "--get", f"remote.{remote_name}.url"], f"read the URL of remote '{remote_name}'")
    if not result.stdout.strip():
        raise GitStateError(f"Remote '{remote_name}' has no configured URL.")
    return result.stdout


def get_prefix() -> str:
    """Returns the current directory relative to the work tree root ('' at the root, else ending in '/')."""
    result = _run_git(["rev-parse", "--show-prefix"], "locate the current directory in the work tree")
    return result.stdout.strip()


def push_current_branch(branch: str, remote: str = DEFAULT_REMOTE, set_upstream: bool = False) -> str:
    """Pushes `branch` to `remote` and returns what git printed on stderr."""
    args = ["push"]
    if set_upstream:
        args.append("--set-upstream")
    args += [remote, branch]
    result = _run_git(args, f"push '{branch}' to '{remote}'")
    return result.stderr
