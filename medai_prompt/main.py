"""
Main entry point for medai_prompt.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "-c", "--command",
        type=str,
        help="Execute a single command (e.g. \"/show\") and exit"
    )

    parser.add_argument(
        "--state",
        type=str,
        help="Path to the working configuration file"
    )

    parser.add_argument(
        "--base-url",
        type=str,
        help="Base URL for share links"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    """Configure the root logger for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    from .config import get_settings
    settings = get_settings().settings

    if args.base_url:
        settings.share_base_url = args.base_url

    state_path = Path(args.state).expanduser() if args.state else None

    from .cli import CLI
    cli = CLI(settings=settings, state_path=state_path)

    if args.command:
        return cli.run_once(args.command)

    try:
        cli.run()
        return 0
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
