"""
Version Parsing Module

Turns tag names into semantic versions. A tag that cannot be parsed is
ranked as 0.0.0 instead of aborting the selection.
"""

import logging

import semver

logger = logging.getLogger(__name__)

ZERO_VERSION = semver.Version(0, 0, 0)


def strip_prefix(tag: str, tag_prefix: str) -> str:
    """Remove the tag prefix, if present."""
    if tag_prefix and tag.startswith(tag_prefix):
        return tag[len(tag_prefix):]
    return tag


def parse_tag_version(tag: str, tag_prefix: str = "") -> semver.Version:
    """
    Parse a tag into a semantic version.

    Args:
        tag: Tag name, e.g. "v1.2.3-beta.4"
        tag_prefix: Prefix to strip before parsing, e.g. "v"

    Returns:
        Parsed version, or 0.0.0 when the remainder is not a valid semver
    """
    try:
        return semver.Version.parse(strip_prefix(tag, tag_prefix))
    except (ValueError, TypeError) as e:
        logger.warning(f"Tag '{tag}' is not a valid semantic version, ranking it as {ZERO_VERSION}: {e}")
        return ZERO_VERSION
