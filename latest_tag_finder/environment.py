"""
Environment Configuration Module

Handles parsing and validation of configuration from environment variables
and command-line arguments.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional
import logging

from .config import (
    DEFAULT_PRERELEASE_SUFFIX,
    DEFAULT_TAG_PREFIX,
    ENV_DRY_RUN,
    ENV_FILTER_MODE,
    ENV_GITHUB_OUTPUT,
    ENV_PRERELEASE_SUFFIX,
    ENV_RELEASE_BRANCH,
    ENV_TAG_PREFIX,
)
from .models import FilterMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentConfig:
    """Configuration of a single tag lookup."""

    release_branch: str
    tag_prefix: str = DEFAULT_TAG_PREFIX
    prerelease_suffix: str = DEFAULT_PRERELEASE_SUFFIX
    filter_mode: FilterMode = FilterMode.GLOB
    output_path: Optional[str] = None
    working_directory: str = "."
    dry_run: bool = False
    verbose: bool = False
    invalid_filter_mode: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        filter_mode, invalid_filter_mode = _parse_filter_mode(env.get(ENV_FILTER_MODE, ""))

        return cls(
            release_branch=env.get(ENV_RELEASE_BRANCH, "").strip(),
            tag_prefix=env.get(ENV_TAG_PREFIX, DEFAULT_TAG_PREFIX),
            prerelease_suffix=env.get(ENV_PRERELEASE_SUFFIX, "").strip() or DEFAULT_PRERELEASE_SUFFIX,
            filter_mode=filter_mode,
            output_path=env.get(ENV_GITHUB_OUTPUT) or None,
            dry_run=env.get(ENV_DRY_RUN, "false").lower() == "true",
            invalid_filter_mode=invalid_filter_mode,
        )

    def with_args(self, args) -> "EnvironmentConfig":
        """Overlay parsed command-line arguments on top of this configuration.

        Arguments left at None keep the environment value.

        Args:
            args: argparse.Namespace produced by cli.build_parser

        Returns:
            New EnvironmentConfig instance
        """
        changes = {}
        if args.release_branch is not None:
            changes["release_branch"] = args.release_branch.strip()
        if args.tag_prefix is not None:
            changes["tag_prefix"] = args.tag_prefix
        if args.prerelease_suffix is not None:
            changes["prerelease_suffix"] = args.prerelease_suffix
        if args.filter_mode is not None:
            filter_mode, invalid_filter_mode = _parse_filter_mode(args.filter_mode)
            changes["filter_mode"] = filter_mode
            changes["invalid_filter_mode"] = invalid_filter_mode
        if args.working_directory is not None:
            changes["working_directory"] = args.working_directory
        if args.dry_run:
            changes["dry_run"] = True
        if args.verbose:
            changes["verbose"] = True
        return replace(self, **changes)

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.release_branch:
            errors.append(f"Release branch is required (--release-branch or {ENV_RELEASE_BRANCH})")

        if self.invalid_filter_mode is not None:
            valid_modes = [m.value for m in FilterMode]
            errors.append(
                f"Invalid filter mode '{self.invalid_filter_mode}'. "
                f"Valid options are: {', '.join(valid_modes)}"
            )

        if not self.output_path and not self.dry_run:
            errors.append(f"{ENV_GITHUB_OUTPUT} environment variable missing.")

        return errors


def _parse_filter_mode(value: str):
    """Parse a filter mode name, returning (mode, rejected_value)."""
    value = value.strip().lower()
    if not value:
        return FilterMode.GLOB, None
    try:
        return FilterMode(value), None
    except ValueError:
        # Invalid mode - will be caught in validation
        logger.debug(f"Unknown filter mode {value!r}")
        return FilterMode.GLOB, value
