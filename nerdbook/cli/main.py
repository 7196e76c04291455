"""Main CLI entry point for nerdbook."""

import argparse
import logging
import sys

from nerdbook import __version__
from nerdbook.cli.commands import lookup, suggest
from nerdbook.models import SynonymView


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="nerdbook",
        description="Look up synonyms, definitions and suggestions via Datamuse",
        epilog="Use 'nerdbook <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and lookup failures to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # nerdbook lookup <word>
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Show synonyms and a definition for a word",
        description="Fetch synonyms and a short definition from Datamuse",
    )
    lookup_parser.add_argument("word", help="Word or phrase to look up")
    lookup_parser.add_argument(
        "--view",
        choices=[view.value for view in SynonymView],
        default=SynonymView.NORMAL.value,
        help="Synonym ordering: service order, lyrical (short first) or pretentious (long first)",
    )
    lookup_parser.add_argument(
        "--max",
        type=int,
        default=None,
        help="Maximum number of results to request and print",
    )
    lookup_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for both requests to finish",
    )

    # nerdbook suggest <text>
    suggest_parser = subparsers.add_parser(
        "suggest",
        help="Show autocomplete suggestions for partial input",
        description="Fetch spelling-tolerant completions from Datamuse",
    )
    suggest_parser.add_argument("text", help="Partial word to complete")
    suggest_parser.add_argument(
        "--max",
        type=int,
        default=None,
        help="Maximum number of suggestions to request and print",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Dispatch to appropriate command
    if args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "suggest":
        return suggest.suggest_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
