"""Type-based display formats and their rendering.

Templates follow the composite ``{0:pattern}`` convention used by
templated renderers: a boolean pattern holds ``;``-separated sections,
a date pattern holds custom date tokens.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, NamedTuple

from displaykit.domain.errors import FormatTemplateError
from displaykit.domain.types import TypeTag

BOOLEAN_FORMAT = "{0:Yes;Yes;No}"
DATE_FORMAT = "{0:yyyy-MM-dd}"

_TEMPLATE_RE = re.compile(r"^\{0(?::(?P<pattern>.*))?\}$", re.DOTALL)
_DATE_TOKEN_RE = re.compile(r"yyyy|yy|MM|dd|HH|mm|ss")


class TypeFormat(NamedTuple):
    """Display and edit templates for one declared type."""

    display: str | None
    edit: str | None


_NO_FORMAT = TypeFormat(None, None)

TYPE_FORMATS: dict[TypeTag, TypeFormat] = {
    TypeTag.BOOLEAN: TypeFormat(BOOLEAN_FORMAT, None),
    TypeTag.DATE: TypeFormat(DATE_FORMAT, None),
    # Edit controls need an unambiguous, round-trippable value.
    TypeTag.DATE_ONLY: TypeFormat(DATE_FORMAT, DATE_FORMAT),
}


def format_for_type(declared_type: TypeTag) -> TypeFormat:
    """Return the templates for *declared_type*, or an empty TypeFormat."""
    return TYPE_FORMATS.get(declared_type, _NO_FORMAT)


def _render_sections(pattern: str, value: bool) -> str:
    sections = pattern.split(";")
    if value:
        return sections[0]
    return sections[2] if len(sections) > 2 else sections[-1]


def _render_date(pattern: str, value: date) -> str:
    fields = {
        "yyyy": f"{value.year:04d}",
        "yy": f"{value.year % 100:02d}",
        "MM": f"{value.month:02d}",
        "dd": f"{value.day:02d}",
        "HH": f"{getattr(value, 'hour', 0):02d}",
        "mm": f"{getattr(value, 'minute', 0):02d}",
        "ss": f"{getattr(value, 'second', 0):02d}",
    }
    return _DATE_TOKEN_RE.sub(lambda m: fields[m.group(0)], pattern)


def render_value(template: str, value: Any) -> str:
    """Apply a ``{0:pattern}`` template to *value*.

    Examples:
        >>> render_value("{0:Yes;Yes;No}", False)
        'No'
        >>> render_value("{0:yyyy-MM-dd}", date(2024, 1, 5))
        '2024-01-05'
    """
    match = _TEMPLATE_RE.match(template)
    if match is None:
        msg = f"Unsupported display template: {template!r}"
        raise FormatTemplateError(msg)

    if value is None:
        return ""

    pattern = match.group("pattern")
    if pattern is None:
        return str(value)
    if isinstance(value, bool):
        return _render_sections(pattern, value)
    if isinstance(value, date):
        return _render_date(pattern, value)
    return str(value)
