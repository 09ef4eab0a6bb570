"""Subcommand modules for displaykit.

register_commands() uses deferred imports to keep ``displaykit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from displaykit.commands.describe import describe
    from displaykit.commands.label import label
    from displaykit.commands.scan import scan
    from displaykit.commands.title import title

    cli.add_command(describe)
    cli.add_command(label)
    cli.add_command(scan)
    cli.add_command(title)
