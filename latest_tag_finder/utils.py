"""
Utility Functions Module for Latest Tag Finder

Functions:
    setup_logging: Configures application logging
"""

import logging


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
