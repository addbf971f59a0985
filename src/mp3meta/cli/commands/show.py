"""Show command - Display the tag of an MP3 file."""

import argparse

from rich.console import Console
from rich.table import Table

from ..schemas import CoverArtInfo, ShowSuccessResponse, TagFields
from ..utils import ExitCode, json_output, load_tag


def cmd_show(args: argparse.Namespace) -> None:
    """Display every tag field of an MP3 file.

    Args:
        args: Parsed command-line arguments
    """
    tag = load_tag(args)

    cover = None
    if tag.cover_art is not None:
        cover = CoverArtInfo(
            width=tag.cover_art.width,
            height=tag.cover_art.height,
            mode=tag.cover_art.mode,
            format=tag.cover_art.format,
        )

    if args.json:
        json_output(
            ShowSuccessResponse(
                file=str(args.file),
                tags=TagFields(**tag.as_dict()),
                cover_art=cover,
            ),
            ExitCode.SUCCESS,
        )

    console = Console()
    table = Table(title=str(args.file), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="magenta")

    for name in tag.fields():
        value = tag[name]
        if not value and not args.all:
            continue
        table.add_row(name, str(value))

    if cover:
        table.add_row(
            "cover_art",
            f"{cover.width}x{cover.height} {cover.mode}"
            + (f" ({cover.format})" if cover.format else ""),
        )
    elif args.all:
        table.add_row("cover_art", "[dim]<none>[/dim]")

    console.print(table)
