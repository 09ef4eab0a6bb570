"""Command: list class names in a source folder or module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from displaykit.commands._base import DkCommand

if TYPE_CHECKING:
    from displaykit.commands._context import AppContext


@click.command(
    cls=DkCommand,
    examples="""\
  displaykit scan src/myapp/models
  displaykit scan --module myapp.models""",
)
@click.argument("location")
@click.option("--module", "as_module", is_flag=True, help="Treat LOCATION as an importable module.")
@click.pass_obj
def scan(app: AppContext, location: str, as_module: bool) -> None:
    """List classes declared under LOCATION (relative to the project root)."""
    from displaykit.services.scan import ScanService

    svc = ScanService(app.settings.project_root)
    if as_module:
        app.emit(svc.scan_module(location))
    else:
        app.emit(svc.scan_folder(location))
