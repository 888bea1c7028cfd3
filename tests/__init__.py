"""Test suite for Latest Tag Finder.

This package contains test modules and fixtures for verifying the functionality
of the Latest Tag Finder tool. It includes tests for:
- Tag pattern construction and filtering
- Version parsing and latest tag selection
- Git operations and the I/O layer
- Configuration handling and the CLI

The test suite uses pytest and provides fixtures for common test scenarios.
"""
