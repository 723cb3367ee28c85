"""CLI entry point for metamark."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="metamark",
        description="Resolve meta-markers and repeatable markers of Python elements",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Print the resolved marker closure"
    )
    commands.add_inspect_arguments(inspect_parser)
    inspect_parser.add_argument(
        "-d",
        "--declared",
        action="store_true",
        help="Only markers directly present on the target",
    )
    inspect_parser.add_argument(
        "-f",
        "--format",
        choices=["tree", "json"],
        help="Output format (default: tree)",
    )

    types_parser = subparsers.add_parser("types", help="Count markers per type")
    commands.add_inspect_arguments(types_parser)

    return parser


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def main() -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()
    config = Config.from_env()

    configure_logging("DEBUG" if args.verbose else config.log_level)

    try:
        if args.command == "inspect":
            commands.handle_inspect(args, config)
        elif args.command == "types":
            commands.handle_types(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
