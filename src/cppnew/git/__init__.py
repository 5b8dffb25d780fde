"""Git utilities for cppnew."""

from cppnew.git.utils import (
    GitError,
    GitNotInstalledError,
    GitTimeoutError,
    GitCommandError,
    init_repository,
    run_git,
)

__all__ = [
    "GitError",
    "GitNotInstalledError",
    "GitTimeoutError",
    "GitCommandError",
    "init_repository",
    "run_git",
]
