"""Command: set the console window title (development only)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from displaykit.commands._base import DkCommand

if TYPE_CHECKING:
    from displaykit.commands._context import AppContext


@click.command(
    cls=DkCommand,
    examples="""\
  DISPLAYKIT_ENVIRONMENT=development displaykit title "Payroll dev server"
  displaykit title""",
)
@click.argument("text", required=False)
@click.pass_obj
def title(app: AppContext, text: str | None) -> None:
    """Set the terminal title to TEXT (default: [console] title)."""
    from displaykit.output.console import set_console_title
    from displaykit.services.result import ServiceResult

    resolved = text or app.settings.console.title
    written = set_console_title(resolved, development=app.settings.is_development)
    app.emit(
        ServiceResult(
            ok=True,
            op="set_title",
            data={
                "title": resolved,
                "written": written,
                "environment": app.settings.environment,
            },
        )
    )
