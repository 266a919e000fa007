"""Subcommand modules for slugline.

register_commands() uses deferred imports to keep ``slugline --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``encode`` and ``decode`` groups on the root CLI group."""
    from slugline.commands.decode import decode
    from slugline.commands.encode import encode

    cli.add_command(encode)
    cli.add_command(decode)
