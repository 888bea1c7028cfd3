#!/usr/bin/env python3

"""
Latest Tag Finder CLI

Finds the latest semantic-version tag of the repository in the working
directory and writes it as the ``latest_tag`` output of a GitHub Actions step.
All selection logic is in pure functions, all I/O is in the I/O layer.
"""

import argparse
import logging
import os
import sys

from .config import OUTPUT_KEY
from .environment import EnvironmentConfig
from .exceptions import LatestTagError
from .git_operations import open_repository
from .io_layer import IOLayer
from .lookup import find_latest_tag
from .models import FilterMode
from .utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Unset options fall back to the environment."""
    parser = argparse.ArgumentParser(
        prog="latest-tag-finder",
        description="Find the latest semantic-version tag for the current branch.",
    )
    parser.add_argument("-r", "--release-branch", help="Branch on which only stable tags are considered")
    parser.add_argument("-t", "--tag-prefix", help="Prefix of release tags, e.g. 'v' (default: none)")
    parser.add_argument("--prerelease-suffix", help="Prerelease label, e.g. 'beta' (default: prerelease)")
    parser.add_argument(
        "--filter-mode",
        choices=[m.value for m in FilterMode],
        help="How tags are matched (default: glob)",
    )
    parser.add_argument("-C", "--working-directory", help="Directory inside the repository (default: .)")
    parser.add_argument("--dry-run", action="store_true", help="Print the output instead of writing it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Step 1: Parse environment and arguments
    config = EnvironmentConfig.from_env(os.environ).with_args(args)
    setup_logging(logging.DEBUG if config.verbose else logging.INFO)

    # Step 2: Validate configuration
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Error: {error}")
        sys.exit(1)

    try:
        # Step 3: Setup I/O layer
        repo = open_repository(config.working_directory)
        io_layer = IOLayer(repo, config.dry_run)

        # Step 4: Select the latest tag
        latest_tag = find_latest_tag(config, io_layer)
        print(f"Latest tag found: {latest_tag}")

        # Step 5: Write as GitHub Actions output
        io_layer.write_output(config.output_path, OUTPUT_KEY, latest_tag)
    except LatestTagError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
