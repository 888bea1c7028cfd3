"""Data models shared by the tag filter and the tag selector."""

from dataclasses import dataclass
from enum import Enum


class FilterMode(Enum):
    """How candidate tags are matched against the naming convention."""
    GLOB = "glob"    # prefix* / prefix*suffix*, pre-filtered by git
    REGEX = "regex"  # strict anchored pattern


@dataclass(frozen=True)
class TagFilter:
    """Filter built from the tag naming configuration."""
    prefix: str
    prerelease_suffix: str
    prerelease: bool
    mode: FilterMode
    pattern: str

    def describe(self) -> str:
        """Human-readable summary used in diagnostics."""
        kind = "prerelease" if self.prerelease else "stable"
        return f"{self.pattern} ({self.mode.value} mode, {kind} tags)"
