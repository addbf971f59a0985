"""Command-line interface for mp3meta.

This package provides the 'mp3meta' command-line tool with the subcommands:
    show: Display the tag of an MP3 file
    edit: Change tag fields
    clear: Remove every tag field and the cover art
    cover: Export, replace or remove embedded cover art

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..errors import MP3MetaError
from ..constants import NUMERIC_FRAMES, NUMBER_PAIR_FRAMES, TEXT_FRAMES
from .utils import ExitCode, non_negative_int, setup_logging
from .commands import cmd_show, cmd_edit, cmd_clear, cmd_cover

__all__ = [
    "main",
    "cmd_show",
    "cmd_edit",
    "cmd_clear",
    "cmd_cover",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        help="Write the result to this file instead of modifying FILE",
    )
    parser.add_argument("-c", "--config", help="Path to configuration file")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        # SUPPRESS keeps a subcommand from resetting a level given before it
        default=argparse.SUPPRESS,
        help="Set logging level (disabled by default)",
    )

    parser = argparse.ArgumentParser(
        prog="mp3meta",
        usage="mp3meta <command> [options]",
        description="mp3meta - Read and write ID3 tags of MP3 files",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # show
    # ──────────────────────────────
    show_parser = subparsers.add_parser(
        "show",
        help="Display the tag of an MP3 file",
        usage="mp3meta show <file> [options]",
        description="Read an MP3 file and print its tag fields",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    show_parser.add_argument("file", help="MP3 file to read")
    show_parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Also list empty fields",
    )
    show_parser.add_argument("--json", action="store_true", help="Print the tag as JSON")
    show_parser.set_defaults(func=cmd_show)

    # ──────────────────────────────
    # edit
    # ──────────────────────────────
    edit_parser = subparsers.add_parser(
        "edit",
        help="Change tag fields",
        usage="mp3meta edit <file> [--artist NAME] [--year N] ... [options]",
        description="Set the given fields and save the file. Pass an empty string to remove a text field.",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    edit_parser.add_argument("file", help="MP3 file to modify")
    fields_group = edit_parser.add_argument_group("Fields")
    for name, frameid in TEXT_FRAMES.items():
        fields_group.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            metavar="TEXT",
            help=f"{name.replace('_', ' ').capitalize()} ({frameid})",
        )
    for name, frameid in NUMERIC_FRAMES.items():
        fields_group.add_argument(
            "--" + name,
            dest=name,
            type=non_negative_int,
            metavar="N",
            help=f"{name.upper() if name == 'bpm' else name.capitalize()} ({frameid}, 0 removes it)",
        )
    for (number_name, total_name), frameid in NUMBER_PAIR_FRAMES.items():
        for name in (number_name, total_name):
            fields_group.add_argument(
                "--" + name.replace("_", "-"),
                dest=name,
                type=non_negative_int,
                metavar="N",
                help=f"{name.replace('_', ' ').capitalize()} ({frameid})",
            )
    _add_output_options(edit_parser)
    edit_parser.set_defaults(func=cmd_edit)

    # ──────────────────────────────
    # clear
    # ──────────────────────────────
    clear_parser = subparsers.add_parser(
        "clear",
        help="Remove every tag field and the cover art",
        usage="mp3meta clear <file> [options]",
        description="Reset all tag fields and remove the cover art, keeping the audio",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    clear_parser.add_argument("file", help="MP3 file to modify")
    _add_output_options(clear_parser)
    clear_parser.set_defaults(func=cmd_clear)

    # ──────────────────────────────
    # cover
    # ──────────────────────────────
    cover_parser = subparsers.add_parser(
        "cover",
        help="Export, replace or remove cover art",
        usage="mp3meta cover <file> (--export IMG | --set IMG | --remove) [options]",
        description="Work with the embedded front cover of an MP3 file",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    cover_parser.add_argument("file", help="MP3 file")
    cover_action = cover_parser.add_mutually_exclusive_group(required=True)
    cover_action.add_argument("--export", metavar="IMG", help="Save the cover art to IMG")
    cover_action.add_argument("--set", metavar="IMG", help="Embed IMG as the cover art")
    cover_action.add_argument("--remove", action="store_true", help="Remove the cover art")
    _add_output_options(cover_parser)
    cover_parser.set_defaults(func=cmd_cover)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(ExitCode.INVALID_INPUT)

    # Logging setup
    log_level = getattr(args, "log_level", None)
    try:
        setup_logging(log_level or "critical")
    except ValueError as e:
        parser.error(str(e))

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(ExitCode.INTERRUPTED)
    except MP3MetaError as e:
        logging.error(f"Error: {e}", exc_info=log_level == "debug")
        sys.exit(ExitCode.DATA_ERROR)


if __name__ == "__main__":
    main()
