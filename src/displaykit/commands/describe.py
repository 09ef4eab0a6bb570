"""Command: resolve display metadata for a model."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from displaykit.commands._base import DkCommand

if TYPE_CHECKING:
    from displaykit.commands._context import AppContext


@click.command(
    cls=DkCommand,
    examples="""\
  displaykit describe myapp.models:Person
  displaykit describe myapp.models:Person --scope myapp.models:Person
  displaykit describe myapp.models:Customer --scope myapp.models:Person --include-derived
  displaykit --json describe myapp.models:Person""",
)
@click.argument("target")
@click.option(
    "--scope",
    "scope_targets",
    multiple=True,
    help="Container type that receives generated labels (repeatable).",
)
@click.option(
    "--include-derived/--exact-only",
    default=None,
    help="Also label subclasses of scope types.",
)
@click.pass_obj
def describe(
    app: AppContext,
    target: str,
    scope_targets: tuple[str, ...],
    include_derived: bool | None,
) -> None:
    """Show formats, hints, and labels for each property of TARGET."""
    from displaykit.services.display import DisplayService

    svc = DisplayService(app.settings)
    app.emit(
        svc.describe(
            target,
            scope_targets=list(scope_targets),
            include_derived=include_derived,
        )
    )
