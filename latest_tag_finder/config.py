"""
Configuration Module for Latest Tag Finder

This module contains constants used throughout the application.

Constants:
    DEFAULT_PRERELEASE_SUFFIX: Prerelease label used when none is configured
    DEFAULT_TAG_PREFIX: Tag prefix used when none is configured
    OUTPUT_KEY: Key of the line written to the CI output file
    DETACHED_HEAD_NAME: Branch name reported when HEAD is detached
    ENV_*: Names of the environment variables read by the tool
"""

DEFAULT_PRERELEASE_SUFFIX = "prerelease"
DEFAULT_TAG_PREFIX = ""
OUTPUT_KEY = "latest_tag"
DETACHED_HEAD_NAME = "HEAD"

# GitHub Actions exposes action inputs as INPUT_<NAME>
ENV_RELEASE_BRANCH = "INPUT_RELEASE_BRANCH"
ENV_TAG_PREFIX = "INPUT_TAG_PREFIX"
ENV_PRERELEASE_SUFFIX = "INPUT_PRERELEASE_SUFFIX"
ENV_FILTER_MODE = "INPUT_FILTER_MODE"
ENV_DRY_RUN = "INPUT_DRY_RUN"
ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"
