"""Clear command - Remove every modeled tag field from an MP3 file."""

import argparse

from rich.console import Console

from ..schemas import WriteSuccessResponse
from ..utils import ExitCode, json_output, load_tag, save_tag


def cmd_clear(args: argparse.Namespace) -> None:
    """Reset all fields and the cover art, then save the file.

    Args:
        args: Parsed command-line arguments
    """
    tag = load_tag(args)
    changed = [name for name in tag.fields() if tag[name]]
    if tag.cover_art is not None:
        changed.append("cover_art")

    tag.clear_all_tags()
    output = save_tag(args, tag)

    if args.json:
        json_output(
            WriteSuccessResponse(file=str(args.file), output=str(output), changed=changed),
            ExitCode.SUCCESS,
        )

    Console().print(f"[green]✓ Cleared {len(changed)} fields[/green] in {output}")
