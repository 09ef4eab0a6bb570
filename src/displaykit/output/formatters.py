"""Rich/JSON output helpers.

Human output renders ServiceResult data as key-value pairs, with a
table for property listings. ``--json`` emits the ServiceResult as-is.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table

from displaykit.output.console import create_console, get_output, style_for_hint

if TYPE_CHECKING:
    from displaykit.services.result import ServiceResult


def _format_data_human(data: dict[str, Any]) -> str:
    """Format scalar result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if key == "properties":
            continue
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def _properties_table(rows: list[dict[str, Any]], *, no_color: bool) -> str:
    table = Table(show_header=True, header_style="dk.key", box=None)
    table.add_column("Property")
    table.add_column("Label", style="dk.label")
    table.add_column("Hint")
    table.add_column("Display", style="dk.format")
    table.add_column("Edit", style="dk.format")
    for row in rows:
        hint = row.get("template_hint")
        table.add_row(
            row["name"],
            row.get("label") or "",
            f"[{style_for_hint(hint)}]{hint}[/]" if hint else "",
            row.get("display_format") or "",
            row.get("edit_format") or "",
        )
    console = create_console(no_color=no_color)
    console.print(table)
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    quiet: bool = False,
    no_color: bool = True,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        quiet: Suppress the key-value summary on success.
        no_color: Disable ANSI colors in tables.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"

    parts = [f"OK: {result.op}"]
    if result.data and not quiet:
        summary = _format_data_human(result.data)
        if summary:
            parts.append(summary)
    rows = result.data.get("properties")
    if rows:
        parts.append(_properties_table(rows, no_color=no_color))
    return "\n".join(parts)
