"""
Git Operations Module for Latest Tag Finder

This module handles repository discovery.

Functions:
    open_repository: Opens the git repository containing a directory

Raises:
    GitOperationError: When no repository can be found
"""

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from .exceptions import GitOperationError


def open_repository(path: str = ".") -> Repo:
    """Open the repository containing ``path``, searching parent directories."""
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise GitOperationError(
            f"No git repository found in {path} or parent directories"
        ) from e
