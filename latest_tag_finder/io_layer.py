"""
I/O Layer for Latest Tag Finder

This module contains all I/O operations (git repository, CI output file)
separated from the tag selection logic. This is the "imperative shell" that
handles all side effects.
"""

import logging
from pathlib import Path
from typing import List, Optional

from git import Repo
from git.exc import GitCommandError

from .config import DETACHED_HEAD_NAME
from .exceptions import GitOperationError, OutputError

logger = logging.getLogger(__name__)


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(self, repo: Repo, dry_run: bool = False):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object
            dry_run: If True, don't write the CI output file
        """
        self.repo = repo
        self.dry_run = dry_run

    # -----------------------------------------------------------------------------
    # Git Operations
    # -----------------------------------------------------------------------------

    def current_branch(self) -> str:
        """Get the name of the checked-out branch.

        Returns:
            Branch name, or "HEAD" when HEAD is detached
        """
        try:
            if self.repo.head.is_detached:
                logger.warning("HEAD is detached, no branch is checked out")
                return DETACHED_HEAD_NAME
            return self.repo.active_branch.name
        except (TypeError, ValueError) as e:
            raise GitOperationError(f"Failed to get current branch name: {e}") from e

    def list_tags(self, pattern: Optional[str] = None) -> List[str]:
        """List tag names of the repository.

        Args:
            pattern: Optional glob pattern passed to ``git tag --list``

        Returns:
            List of tag names
        """
        try:
            if pattern is None:
                return [tag.name for tag in self.repo.tags]
            output = self.repo.git.tag("--list", "--", pattern)
        except GitCommandError as e:
            raise GitOperationError(f"Failed to list tags: {e}") from e

        return [line.strip() for line in output.splitlines() if line.strip()]

    # -----------------------------------------------------------------------------
    # CI Output
    # -----------------------------------------------------------------------------

    def write_output(self, path: Optional[str], key: str, value: str) -> bool:
        """Append a ``key=value`` line to the CI output file.

        Args:
            path: Path of the output file (GITHUB_OUTPUT)
            key: Output name
            value: Output value

        Returns:
            True if written, False if dry run
        """
        line = f"{key}={value}\n"
        if self.dry_run:
            print(f"[DRY RUN] Would write to {path or '<no output file>'}: {line.strip()}")
            return False

        if not path:
            raise OutputError("GITHUB_OUTPUT environment variable missing.")

        try:
            with Path(path).open("a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise OutputError(f"Failed to write output to {path}: {e}") from e

        return True
