"""Git utilities for cppnew.

Repository initialization is the only version-control operation the
scaffolder performs. Failures surface as GitError subclasses.
"""

import subprocess
from pathlib import Path
from typing import Optional

# Default timeout for git operations (seconds)
DEFAULT_GIT_TIMEOUT = 60


# =============================================================================
# Exceptions
# =============================================================================

class GitError(Exception):
    """Base exception for Git operations."""
    pass


class GitNotInstalledError(GitError):
    """Git is not installed or not in PATH."""
    pass


class GitTimeoutError(GitError):
    """Git command timed out."""

    def __init__(self, message: str, timeout: int):
        super().__init__(message)
        self.timeout = timeout


class GitCommandError(GitError):
    """Git command failed with non-zero exit code."""

    def __init__(self, message: str, returncode: int, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


# =============================================================================
# Core Functions
# =============================================================================

def run_git(
    *args,
    cwd: Optional[Path] = None,
    check: bool = False,
    timeout: int = DEFAULT_GIT_TIMEOUT
) -> subprocess.CompletedProcess:
    """Run a git command with standard options.

    Args:
        *args: Git command arguments
        cwd: Working directory
        check: Raise exception on failure
        timeout: Command timeout in seconds

    Returns:
        CompletedProcess result

    Raises:
        GitNotInstalledError: If git is not installed
        GitTimeoutError: If command times out
        GitCommandError: If check=True and command fails
    """
    cmd = ["git"] + list(args)
    cmd_str = " ".join(cmd)

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd or Path.cwd(),
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except FileNotFoundError:
        raise GitNotInstalledError(
            "Git is not installed or not in PATH. "
            "Please install git: https://git-scm.com/downloads"
        )
    except subprocess.TimeoutExpired:
        raise GitTimeoutError(
            f"Git command timed out after {timeout}s: {cmd_str}",
            timeout=timeout
        )

    if check and result.returncode != 0:
        raise GitCommandError(
            f"Git command failed: {cmd_str}\n{result.stderr}",
            returncode=result.returncode,
            stderr=result.stderr
        )
    return result


def init_repository(path: Path, timeout: int = DEFAULT_GIT_TIMEOUT) -> None:
    """Initialize a Git repository at path.

    Raises:
        GitError: If git is missing, times out or exits non-zero
    """
    run_git("init", cwd=path, check=True, timeout=timeout)

