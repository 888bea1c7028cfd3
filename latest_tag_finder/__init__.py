"""Find the latest semantic-version tag of a git repository for CI pipelines."""

__version__ = "0.1.0"
