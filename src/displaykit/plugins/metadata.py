"""DisplayMetadata: the mutable per-property record providers write to."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from displaykit.domain.formats import render_value


@dataclass
class DisplayMetadata:
    """Rendering metadata owned by the host for one property.

    ``display_name`` is a callable so labels are produced lazily, when
    the renderer asks for them.
    """

    property_name: str
    display_format_string: str | None = None
    edit_format_string: str | None = None
    template_hint: str | None = None
    display_name: Callable[[], str] | None = None

    def label(self) -> str:
        """Resolved label, falling back to the property name."""
        if self.display_name is not None:
            value = self.display_name()
            if value:
                return value
        return self.property_name

    def has_label(self) -> bool:
        return self.display_name is not None and bool(self.display_name())

    def format_display(self, value: Any) -> str:
        if self.display_format_string is None:
            return "" if value is None else str(value)
        return render_value(self.display_format_string, value)

    def format_edit(self, value: Any) -> str:
        if self.edit_format_string is None:
            return self.format_display(value)
        return render_value(self.edit_format_string, value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.property_name,
            "label": self.label(),
            "display_format": self.display_format_string,
            "edit_format": self.edit_format_string,
            "template_hint": self.template_hint,
        }
