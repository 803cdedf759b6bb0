# pkgurls/git.py
"""
Git utilities for reading the remote URL of a project.
"""

import pathlib
import re
import shutil
import subprocess

from .constants import DEFAULT_GIT_REMOTE, GIT_COMMAND_TIMEOUT


class GitError(Exception):
    """Raised when a git command fails."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class GitNotFoundError(Exception):
    """Raised when git is not available on the system."""

    pass


# Greedy up to the last "@" so that passwords containing "@" are dropped too
_CREDENTIALS_RE = re.compile(r"//.*@")
_GIT_SUFFIX_RE = re.compile(r"\.git\Z")


def is_available() -> bool:
    """Check if git is available on the system."""
    return shutil.which("git") is not None


def validate_remote_name(name: str) -> None:
    """
    Validate a remote name to prevent option injection.

    Raises:
        ValueError: If name is empty or could be interpreted as a git option.
    """
    if not name:
        raise ValueError("Remote name cannot be empty")
    if name.startswith("-"):
        raise ValueError(f"Invalid remote name: {name!r} (cannot start with '-')")


def run(*args: str, cwd: pathlib.Path | None = None, error_msg: str = "Git command failed") -> subprocess.CompletedProcess:
    """
    Run a git command and return the result.

    Args:
        *args: Git subcommand and arguments (e.g., "config", "remote.origin.url").
               Do NOT include "git", it's prepended automatically.
        cwd: Working directory for the command.
        error_msg: Message to include in exception on failure.

    Raises:
        GitNotFoundError: If git is not installed.
        GitError: If the command fails, times out or returns non-zero.
    """
    if not is_available():
        raise GitNotFoundError("git executable not found")

    cmd = ["git", *args]
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, timeout=GIT_COMMAND_TIMEOUT)
    except (OSError, subprocess.SubprocessError) as e:
        raise GitError(f"{error_msg}: {e}") from e

    if result.returncode != 0:
        raise GitError(error_msg, result.stderr)
    return result


def normalize_remote_url(url: str) -> str | None:
    """
    Normalize a git remote URL for display and inference.

    Drops a `//user:password@` credentials segment and a trailing `.git`.
    SSH shorthand such as `git@github.com:user/repo.git` only loses its suffix.

    Returns:
        The normalized URL, or None if nothing is left.
    """
    url = _CREDENTIALS_RE.sub("//", url.strip(), count=1)
    url = _GIT_SUFFIX_RE.sub("", url)
    return url or None


def get_remote_url(cwd: pathlib.Path, remote: str = DEFAULT_GIT_REMOTE) -> str | None:
    """
    Read the URL of a git remote.

    Returns:
        The normalized remote URL, or None when git is missing, `cwd` is not
        a repository, or the remote is not configured.
    """
    validate_remote_name(remote)
    try:
        result = run("config", f"remote.{remote}.url", cwd=cwd, error_msg=f"Failed to read remote '{remote}'")
    except (GitError, GitNotFoundError):
        return None

    line = next((line for line in result.stdout.splitlines() if line.strip()), None)
    if line is None:
        return None
    return normalize_remote_url(line)
