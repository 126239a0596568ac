"""Entry-point for launching the CLI application."""
from __future__ import annotations

import logging
import sys

from .presentation.cli import config
from .presentation.cli.app import main as cli_main


def setup_logging() -> None:
    """Configure root logging; DEBUG when QUESTBOARD_DEBUG=1."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug_enabled() else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Run the CLI presentation layer."""
    setup_logging()
    cli_main()


if __name__ == "__main__":
    main()
