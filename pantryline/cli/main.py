#!/usr/bin/env python3

import argparse
import logging
from collections.abc import Sequence

from pantryline.runtime.logging import configure_logging, set_log_level


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Restaurant supply inventory tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Global options:
  --log-level LEVEL, -v      Log level for this run (DEBUG with -v)

Commands:
  parse <file> [--format json|table]
                             Parse an inventory text export
  vocabulary                 Show remarks, item types and hint keywords in use

Inventory line format:
  CODE [REMARK] [ITEM_TYPE...] [CATEGORY] DESCRIPTION... UNITS PACKING SHELF_LIFE_DAYS
""",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for this run (default: PANTRYLINE_LOG_LEVEL or INFO)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Shorthand for --log-level DEBUG")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse an inventory text export")
    parse_parser.add_argument("file", help="Path to the inventory text file")
    parse_parser.add_argument(
        "--format", choices=["table", "json"], default="table", help="Output format (default: table)"
    )
    parse_parser.add_argument("--show-skipped", action="store_true", help="List lines dropped as malformed")
    parse_parser.add_argument(
        "--vocabulary",
        action="append",
        metavar="TOML",
        help="Vocabulary config file (repeatable; default: config/inventory_vocabulary.toml)",
    )

    # vocabulary command
    vocabulary_parser = subparsers.add_parser("vocabulary", help="Show the effective parsing vocabulary")
    vocabulary_parser.add_argument("--vocabulary", action="append", metavar="TOML", help="Vocabulary config file")

    args = parser.parse_args(argv)

    configure_logging()
    if args.verbose:
        set_log_level(logging.DEBUG)
    elif args.log_level:
        set_log_level(getattr(logging, args.log_level))

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        from pantryline.cli.inventory import cmd_parse

        return cmd_parse(args)
    elif args.command == "vocabulary":
        from pantryline.cli.inventory import cmd_vocabulary

        return cmd_vocabulary(args)

    return 1


def entrypoint() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    entrypoint()
