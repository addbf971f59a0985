"""Edit command - Change tag fields of an MP3 file."""

import argparse
import logging

from rich.console import Console

from ...tag import MP3Tag
from ..schemas import WriteSuccessResponse
from ..utils import ExitCode, json_output, load_tag, save_tag


def cmd_edit(args: argparse.Namespace) -> None:
    """Set the fields given on the command line and save the file.

    Args:
        args: Parsed command-line arguments
    """
    tag = load_tag(args)

    changed = []
    for name in MP3Tag.fields():
        value = getattr(args, name, None)
        if value is None:
            continue
        if tag[name] != value:
            logging.debug("Setting %s: %r -> %r", name, tag[name], value)
            tag[name] = value
            changed.append(name)

    output = save_tag(args, tag)

    if args.json:
        json_output(
            WriteSuccessResponse(file=str(args.file), output=str(output), changed=changed),
            ExitCode.SUCCESS,
        )

    console = Console()
    if changed:
        console.print(f"[green]✓ Updated {', '.join(changed)}[/green] in {output}")
    else:
        console.print(f"[yellow]No changes[/yellow], rewrote {output}")
