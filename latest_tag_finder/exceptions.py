"""Custom exceptions for Latest Tag Finder."""


class LatestTagError(Exception):
    """Base class for errors that abort a tag lookup."""


class ConfigurationError(LatestTagError):
    """Raised when the tag filter cannot be built from the given configuration."""


class NoMatchingTagError(LatestTagError):
    """Raised when no tag satisfies the active filter."""

    def __init__(self, message: str, tag_filter=None):
        self.tag_filter = tag_filter
        super().__init__(message)


class GitOperationError(LatestTagError):
    """Raised when the git repository cannot be opened or read."""


class OutputError(LatestTagError):
    """Raised when the CI output file cannot be written."""
