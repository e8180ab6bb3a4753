"""
Utility functions for weathertool.
"""

import logging
import sys


def setup_logging(level: str = "INFO", fmt: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s') -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=fmt,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
    )

    # Reduce noise from third-party libraries unless debugging
    if level.upper() != "DEBUG":
        for name in ("jsonschema", "urllib3"):
            logging.getLogger(name).setLevel(logging.WARNING)

