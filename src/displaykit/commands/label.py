"""Command: split PascalCase names into labels."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from displaykit.commands._base import DkCommand

if TYPE_CHECKING:
    from displaykit.commands._context import AppContext


@click.command(
    cls=DkCommand,
    examples="""\
  displaykit label FirstName
  displaykit label HTTPServer EmailAddress""",
)
@click.argument("names", nargs=-1)
@click.pass_obj
def label(app: AppContext, names: tuple[str, ...]) -> None:
    """Print the generated label for each NAME."""
    from displaykit.services.display import DisplayService

    app.emit(DisplayService.labels(list(names)))
