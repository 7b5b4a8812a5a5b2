"""
skilltree.cli - Command-line interface.

Main entry point for the skilltree CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from skilltree import __version__
from skilltree.commands import render, validate


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="skilltree",
        description="Render skill trees as Graphviz digraphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  skilltree render tree.toml             # Print the digraph to stdout
  skilltree render tree.toml -o tree.dot # Write it to a file
  skilltree render tree.toml | dot -Tsvg > tree.svg
  skilltree validate                     # Check ./skill-tree.toml
  skilltree validate tree.toml -j        # JSON summary for tooling

For detailed command help: skilltree <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"skilltree {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # render command
    render_parser = subparsers.add_parser(
        "render",
        help="Write the Graphviz digraph for a skill tree",
    )
    render_parser.add_argument(
        "tree",
        nargs="?",
        type=Path,
        help="Skill tree TOML file (default: nearest skill-tree.toml)",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file (default: stdout)",
        metavar="PATH",
    )
    render_parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip structural validation before rendering",
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a skill tree for structural errors",
    )
    validate_parser.add_argument(
        "tree",
        nargs="?",
        type=Path,
        help="Skill tree TOML file (default: nearest skill-tree.toml)",
    )
    validate_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output a JSON summary",
    )

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Send library log records to stderr at the level the flags ask for."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install skilltree[completion]
    # Then activate: eval "$(register-python-argcomplete skilltree)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args)

    try:
        if args.command == "render":
            return render.run(args)
        elif args.command == "validate":
            return validate.run(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
