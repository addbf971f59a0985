"""Cover command - Export, replace or remove embedded cover art."""

import argparse
import logging
from pathlib import Path

from PIL import Image
from rich.console import Console

from ..schemas import WriteSuccessResponse
from ..utils import ExitCode, fail, json_output, load_tag, save_tag


def cmd_cover(args: argparse.Namespace) -> None:
    """Export, replace or remove the cover art of an MP3 file.

    Args:
        args: Parsed command-line arguments
    """
    tag = load_tag(args)
    console = Console(quiet=args.json)

    if args.export:
        if tag.cover_art is None:
            fail(args, "data_error", f"No cover art in {args.file}", ExitCode.DATA_ERROR)
        export_path = Path(args.export)
        try:
            tag.cover_art.save(export_path)
        except (OSError, ValueError) as e:
            fail(args, "write_failed", f"Failed to export cover art: {e}", ExitCode.WRITE_FAILED)
        if args.json:
            json_output(
                WriteSuccessResponse(file=str(args.file), output=str(export_path)),
                ExitCode.SUCCESS,
            )
        console.print(f"[green]✓ Cover art exported to[/green] {export_path}")
        return

    if args.set:
        try:
            with Image.open(args.set) as image:
                image.load()
                tag.cover_art = image.copy()
        except (OSError, ValueError) as e:
            fail(args, "invalid_input", f"Failed to load image {args.set}: {e}", ExitCode.INVALID_INPUT)
        logging.debug("Loaded cover art %s (%dx%d)", args.set, *tag.cover_art.size)
    else:
        tag.cover_art = None

    output = save_tag(args, tag)

    if args.json:
        json_output(
            WriteSuccessResponse(file=str(args.file), output=str(output), changed=["cover_art"]),
            ExitCode.SUCCESS,
        )
    action = "replaced" if args.set else "removed"
    console.print(f"[green]✓ Cover art {action}[/green] in {output}")
