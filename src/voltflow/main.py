"""Main module for voltflow."""

import logging
import os
import sys

from voltflow.cli.app import run
from voltflow.config.paths import get_paths


def setup_logging() -> None:
    """Configure logging to file for debugging."""
    paths = get_paths()
    paths.workspace_config.mkdir(parents=True, exist_ok=True)
    log_file = paths.debug_log

    # Set level from env var, default to INFO
    level = os.environ.get("VOLTFLOW_LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("Voltflow starting, logging to %s", log_file)


def main() -> None:
    """Entry point for the Voltflow application."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
