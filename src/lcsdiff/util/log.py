"""Logging setup for the CLI entrypoint"""

import logging


def setup_logging(level: str = "WARNING") -> None:
    """Call this once at app startup."""
    root_logger = logging.getLogger()

    # Clear any existing handlers (prevents duplicates)
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)

    root_logger.addHandler(handler)
    root_logger.setLevel(level)
