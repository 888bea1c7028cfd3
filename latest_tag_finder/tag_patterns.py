"""
Tag Pattern Module

Pure functions for building tag filters and matching tags against them.
This module contains no side effects - only pattern construction logic.

Prefix and prerelease suffix are always treated as literal text, never as
pattern fragments.
"""

import fnmatch
import glob
import re
from typing import Iterable, List

from .exceptions import ConfigurationError
from .models import FilterMode, TagFilter

VERSION_CORE_REGEX = r"\d+\.\d+\.\d+"


def build_regex_pattern(tag_prefix: str, prerelease_suffix: str, prerelease: bool) -> str:
    """
    Build the anchored regular expression for regex mode.

    Args:
        tag_prefix: Literal prefix of every tag (e.g. "v")
        prerelease_suffix: Literal prerelease label (e.g. "beta")
        prerelease: If True, match only <prefix>X.Y.Z-<suffix>.N tags

    Returns:
        Regular expression source text
    """
    pattern = re.escape(tag_prefix) + VERSION_CORE_REGEX
    if prerelease:
        pattern += "-" + re.escape(prerelease_suffix) + r"\.\d+"
    return f"^{pattern}$"


def build_glob_pattern(tag_prefix: str, prerelease_suffix: str, prerelease: bool) -> str:
    """
    Build the shell-glob pattern for glob mode.

    The same pattern is understood by ``git tag --list`` and by fnmatch.

    Args:
        tag_prefix: Literal prefix of every tag
        prerelease_suffix: Literal prerelease label
        prerelease: If True, require the prerelease label after the prefix

    Returns:
        Glob pattern text, ``prefix*`` or ``prefix*suffix*``
    """
    pattern = glob.escape(tag_prefix) + "*"
    if prerelease:
        pattern += glob.escape(prerelease_suffix) + "*"
    return pattern


def build_tag_filter(
    tag_prefix: str,
    prerelease_suffix: str,
    prerelease: bool,
    mode: FilterMode = FilterMode.GLOB,
) -> TagFilter:
    """
    Build a validated tag filter from configuration.

    Raises:
        ConfigurationError: If prerelease tags are selected without a suffix,
            or the mode is unknown
    """
    if prerelease and not prerelease_suffix:
        raise ConfigurationError("Prerelease suffix must not be empty when selecting prerelease tags")

    if mode == FilterMode.REGEX:
        pattern = build_regex_pattern(tag_prefix, prerelease_suffix, prerelease)
    elif mode == FilterMode.GLOB:
        pattern = build_glob_pattern(tag_prefix, prerelease_suffix, prerelease)
    else:
        raise ConfigurationError(f"Unsupported filter mode: {mode!r}")

    return TagFilter(
        prefix=tag_prefix,
        prerelease_suffix=prerelease_suffix,
        prerelease=prerelease,
        mode=mode,
        pattern=pattern,
    )


def tag_matches(tag: str, tag_filter: TagFilter) -> bool:
    """Check whether a single tag satisfies the filter."""
    if tag_filter.mode == FilterMode.REGEX:
        return re.fullmatch(tag_filter.pattern, tag, re.ASCII) is not None
    return fnmatch.fnmatchcase(tag, tag_filter.pattern)


def filter_tags(tags: Iterable[str], tag_filter: TagFilter) -> List[str]:
    """
    Keep only the tags matching the filter, preserving input order.

    Args:
        tags: Candidate tag names
        tag_filter: Filter built by build_tag_filter

    Returns:
        List of matching tag names
    """
    return [tag for tag in tags if tag_matches(tag, tag_filter)]
