"""Command-line entry point for the termfolio terminal window."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .core.profile import ProfileError, load_profile
from .widget.config import CONFIG_PATH, TerminalConfig

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="termfolio",
        description="Portfolio terminal with a command prompt and a pixel-art horse",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=CONFIG_PATH,
        help=f"Path to JSON configuration file (default: {CONFIG_PATH.name})",
    )
    parser.add_argument(
        "-p", "--profile",
        type=Path,
        default=None,
        help="Path to a YAML profile (overrides profile_path from the config)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config and profile, then open the window."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
        format="%(name)s %(levelname)s: %(message)s",
    )

    config = TerminalConfig.load(args.config)
    try:
        profile = load_profile(args.profile) if args.profile else config.load_profile()
    except ProfileError as e:
        logger.error("%s", e)
        return 1

    from .widget.app import TerminalWindow

    logger.info("Starting %s for %s", config.display.title, profile.name)
    TerminalWindow(config, profile).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
