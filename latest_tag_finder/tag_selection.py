"""
Tag Selection Module

Pure functions for selecting the latest tag from a list of candidates.
This module contains no side effects besides logging.
"""

import logging
from typing import Iterable, List, Tuple

import semver

from .config import DEFAULT_PRERELEASE_SUFFIX, DEFAULT_TAG_PREFIX
from .exceptions import NoMatchingTagError
from .models import FilterMode, TagFilter
from .tag_patterns import build_tag_filter, filter_tags
from .version_parsing import parse_tag_version

logger = logging.getLogger(__name__)


def rank_tags(tags: Iterable[str], tag_filter: TagFilter) -> List[Tuple[str, semver.Version]]:
    """
    Filter tags and pair each survivor with its parsed version.

    In glob stable mode ``prefix*`` also matches prerelease tags, so tags
    whose parsed version carries a prerelease identifier are dropped there.

    Args:
        tags: Candidate tag names
        tag_filter: Active filter

    Returns:
        List of (tag, version) pairs in input order
    """
    ranked = []
    for tag in filter_tags(tags, tag_filter):
        version = parse_tag_version(tag, tag_filter.prefix)
        if not tag_filter.prerelease and version.prerelease is not None:
            logger.debug(f"Skipping prerelease tag {tag} in stable mode")
            continue
        ranked.append((tag, version))
    return ranked


def pick_latest(ranked: List[Tuple[str, semver.Version]]) -> str:
    """
    Return the tag with the highest version.

    Equal versions resolve to the first occurrence in ``ranked``.
    """
    latest_tag, _ = max(ranked, key=lambda pair: pair[1])
    return latest_tag


def select_latest_tag(
    tags: Iterable[str],
    tag_prefix: str = DEFAULT_TAG_PREFIX,
    prerelease_suffix: str = DEFAULT_PRERELEASE_SUFFIX,
    prerelease: bool = False,
    mode: FilterMode = FilterMode.GLOB,
) -> str:
    """
    Select the latest tag according to semantic versioning.

    Pure function: the same inputs always give the same result.

    Args:
        tags: Candidate tag names, in the order the repository reported them
        tag_prefix: Literal prefix of release tags (e.g. "v")
        prerelease_suffix: Literal prerelease label (e.g. "beta", "rc")
        prerelease: If True, select among prerelease tags instead of stable ones
        mode: Tag filter mode, glob (default) or regex

    Returns:
        The latest matching tag name

    Raises:
        ConfigurationError: If the filter cannot be built
        NoMatchingTagError: If no tag satisfies the filter
    """
    tag_filter = build_tag_filter(tag_prefix, prerelease_suffix, prerelease, mode)
    ranked = rank_tags(tags, tag_filter)

    if not ranked:
        raise NoMatchingTagError(
            f"No tags found matching pattern: {tag_filter.describe()}",
            tag_filter=tag_filter,
        )

    logger.debug(f"{len(ranked)} candidate tag(s) for {tag_filter.describe()}")
    return pick_latest(ranked)
