"""Lookup pipeline - gathers repository state and selects the latest tag."""

import logging

from .environment import EnvironmentConfig
from .io_layer import IOLayer
from .models import FilterMode
from .tag_patterns import build_tag_filter
from .tag_selection import select_latest_tag

logger = logging.getLogger(__name__)


def is_prerelease_branch(branch_name: str, release_branch: str) -> bool:
    """Every branch except the release branch selects prerelease tags."""
    return branch_name != release_branch


def find_latest_tag(config: EnvironmentConfig, io_layer: IOLayer) -> str:
    """
    Find the latest tag for the checked-out branch.

    Reads the current branch and the tag list through the I/O layer, then
    delegates the selection to the pure tag selector.

    Args:
        config: Environment configuration
        io_layer: I/O layer for git operations

    Returns:
        The latest matching tag name
    """
    branch_name = io_layer.current_branch()
    prerelease = is_prerelease_branch(branch_name, config.release_branch)

    if prerelease:
        print(
            f"Current branch ({branch_name}) is not the release branch "
            f"({config.release_branch}). Including only prerelease tags."
        )
    else:
        print(f"Current branch ({branch_name}) is the release branch. Excluding prerelease tags.")

    tag_filter = build_tag_filter(
        config.tag_prefix, config.prerelease_suffix, prerelease, config.filter_mode
    )

    if tag_filter.mode == FilterMode.GLOB:
        tags = io_layer.list_tags(tag_filter.pattern)
    else:
        tags = io_layer.list_tags()
    logger.info(f"Found {len(tags)} candidate tag(s) for {tag_filter.describe()}")

    return select_latest_tag(
        tags,
        tag_prefix=config.tag_prefix,
        prerelease_suffix=config.prerelease_suffix,
        prerelease=prerelease,
        mode=config.filter_mode,
    )
