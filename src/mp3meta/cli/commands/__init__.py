"""CLI command implementations.

Each module in this package implements a specific mp3meta subcommand:
    show.py: Display the tag of a file
    edit.py: Change tag fields
    clear.py: Remove all tag fields
    cover.py: Export, replace or remove cover art
"""

from .show import cmd_show
from .edit import cmd_edit
from .clear import cmd_clear
from .cover import cmd_cover

__all__ = [
    "cmd_show",
    "cmd_edit",
    "cmd_clear",
    "cmd_cover",
]
