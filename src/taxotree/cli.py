"""
taxotree.cli - Command-line interface.

Main entry point for the taxotree CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from taxotree import __version__
from taxotree.commands import config_cmd, render, serve, show
from taxotree.utilities.logconfig import configure_logging, level_from_flags


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        help="Taxonomy file (markdown table or nested JSON); defaults to [data] source",
    )
    parser.add_argument(
        "--category",
        help="Focus the tree on the first category with this name",
        metavar="NAME",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="taxotree",
        description="Interactive taxonomy tree diagrams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taxotree show taxonomy.md                     # Print the category tree
  taxotree show taxonomy.md --category Drama    # Focus on one category
  taxotree render taxonomy.md -o tree.html      # Export a static SVG tree
  taxotree render taxonomy.md --mode categories # Grid of top-level categories
  taxotree serve taxonomy.md                    # Interactive expand/collapse view

Configuration:
  taxotree config path          # Show config file location
  taxotree config show          # View merged settings

For detailed command help: taxotree <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"taxotree {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
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

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the taxonomy as an indented tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Markers:
  -  category with children
  +  collapsed category
  ·  leaf category
""",
    )
    _add_source_arguments(show_parser)
    show_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output the tree as nested JSON",
    )
    show_parser.add_argument(
        "--no-ids",
        action="store_true",
        help="Omit record ids from the tree listing",
    )

    # render command
    render_parser = subparsers.add_parser(
        "render",
        help="Export a static HTML/SVG view",
    )
    _add_source_arguments(render_parser)
    render_parser.add_argument(
        "--mode",
        choices=["tree", "categories"],
        help="View to export (default: [view] mode)",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file (default: stdout)",
        metavar="FILE",
    )
    render_parser.add_argument(
        "--title",
        default="Taxonomy",
        help="Page title",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the interactive tree server",
    )
    _add_source_arguments(serve_parser)
    serve_parser.add_argument(
        "--host",
        help="Bind address (default: [server] host)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Port (default: [server] port)",
    )
    serve_parser.add_argument(
        "--title",
        default="Taxonomy",
        help="Page title",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="View configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    config_show = config_subparsers.add_parser(
        "show",
        help="Show merged configuration",
    )
    config_show.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    config_subparsers.add_parser(
        "path",
        help="Show path to the active configuration file",
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information",
    )

    return parser


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
    # Install with: pip install taxotree[completion]
    # Then activate: eval "$(register-python-argcomplete taxotree)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)
    configure_logging(level_from_flags(args.verbose, args.quiet))

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    try:
        # Dispatch to command handlers
        if args.command == "show":
            return show.run(args)
        elif args.command == "render":
            return render.run(args)
        elif args.command == "serve":
            return serve.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "version":
            return version_command(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


def version_command(args: argparse.Namespace) -> int:
    """Handle version command."""
    print(f"taxotree {__version__}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
