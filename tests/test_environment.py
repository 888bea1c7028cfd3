"""Unit tests for environment and argument configuration."""

import pytest

from latest_tag_finder.cli import build_parser
from latest_tag_finder.environment import EnvironmentConfig
from latest_tag_finder.models import FilterMode


class TestFromEnv:
    """Test configuration parsed from environment variables."""

    def test_defaults(self):
        """Test defaults for an empty environment."""
        config = EnvironmentConfig.from_env({})
        assert config.release_branch == ""
        assert config.tag_prefix == ""
        assert config.prerelease_suffix == "prerelease"
        assert config.filter_mode == FilterMode.GLOB
        assert config.output_path is None
        assert config.dry_run is False

    def test_action_inputs(self):
        """Test that GitHub Actions inputs are read."""
        config = EnvironmentConfig.from_env({
            "INPUT_RELEASE_BRANCH": " main ",
            "INPUT_TAG_PREFIX": "v",
            "INPUT_PRERELEASE_SUFFIX": "rc",
            "INPUT_FILTER_MODE": "Regex",
            "INPUT_DRY_RUN": "TRUE",
            "GITHUB_OUTPUT": "/tmp/output",
        })
        assert config.release_branch == "main"
        assert config.tag_prefix == "v"
        assert config.prerelease_suffix == "rc"
        assert config.filter_mode == FilterMode.REGEX
        assert config.dry_run is True
        assert config.output_path == "/tmp/output"

    def test_blank_suffix_falls_back_to_default(self):
        """Test that an unset action input keeps the default suffix."""
        config = EnvironmentConfig.from_env({"INPUT_PRERELEASE_SUFFIX": ""})
        assert config.prerelease_suffix == "prerelease"


class TestWithArgs:
    """Test command-line arguments overlaid on the environment."""

    def test_arguments_override_environment(self):
        """Test that explicit arguments win."""
        env_config = EnvironmentConfig.from_env({
            "INPUT_RELEASE_BRANCH": "main",
            "INPUT_TAG_PREFIX": "v",
            "GITHUB_OUTPUT": "/tmp/output",
        })
        args = build_parser().parse_args(
            ["-r", "release", "-t", "app-", "--prerelease-suffix", "beta", "--filter-mode", "regex"]
        )

        config = env_config.with_args(args)

        assert config.release_branch == "release"
        assert config.tag_prefix == "app-"
        assert config.prerelease_suffix == "beta"
        assert config.filter_mode == FilterMode.REGEX
        assert config.output_path == "/tmp/output"

    def test_missing_arguments_keep_environment(self):
        """Test that unset arguments do not clobber environment values."""
        env_config = EnvironmentConfig.from_env({"INPUT_RELEASE_BRANCH": "main", "INPUT_TAG_PREFIX": "v"})
        config = env_config.with_args(build_parser().parse_args([]))
        assert config == env_config

    def test_empty_prefix_argument_overrides_environment(self):
        """Test that an explicit empty prefix is honoured."""
        env_config = EnvironmentConfig.from_env({"INPUT_TAG_PREFIX": "v"})
        config = env_config.with_args(build_parser().parse_args(["--tag-prefix", ""]))
        assert config.tag_prefix == ""

    def test_flags(self):
        """Test boolean flags."""
        config = EnvironmentConfig.from_env({}).with_args(
            build_parser().parse_args(["--dry-run", "--verbose", "-C", "/src"])
        )
        assert config.dry_run is True
        assert config.verbose is True
        assert config.working_directory == "/src"

    def test_invalid_filter_mode_rejected_by_parser(self):
        """Test that argparse rejects unknown modes."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--filter-mode", "fuzzy"])


class TestValidate:
    """Test configuration validation."""

    def test_valid_configuration(self):
        """Test that a complete configuration has no errors."""
        config = EnvironmentConfig(release_branch="main", output_path="/tmp/output")
        assert config.validate() == []

    def test_missing_release_branch(self):
        """Test that the release branch is required."""
        errors = EnvironmentConfig(release_branch="", output_path="/tmp/output").validate()
        assert len(errors) == 1
        assert "Release branch is required" in errors[0]

    def test_missing_output_path(self):
        """Test that GITHUB_OUTPUT is required outside dry runs."""
        errors = EnvironmentConfig(release_branch="main").validate()
        assert errors == ["GITHUB_OUTPUT environment variable missing."]

    def test_missing_output_path_allowed_in_dry_run(self):
        """Test that dry runs do not need an output file."""
        assert EnvironmentConfig(release_branch="main", dry_run=True).validate() == []

    def test_empty_prerelease_suffix_is_not_a_configuration_error(self):
        """Test that the suffix is only checked once prerelease mode is chosen."""
        config = EnvironmentConfig(release_branch="main", prerelease_suffix="", dry_run=True)
        assert config.validate() == []

    def test_invalid_filter_mode(self):
        """Test that an unknown mode from the environment is reported."""
        config = EnvironmentConfig.from_env({
            "INPUT_RELEASE_BRANCH": "main",
            "INPUT_FILTER_MODE": "fuzzy",
            "INPUT_DRY_RUN": "true",
        })
        errors = config.validate()
        assert len(errors) == 1
        assert "Invalid filter mode 'fuzzy'" in errors[0]
        assert "glob, regex" in errors[0]

    def test_all_errors_reported(self):
        """Test that every problem is collected."""
        errors = EnvironmentConfig(release_branch="", prerelease_suffix="").validate()
        assert len(errors) == 2
