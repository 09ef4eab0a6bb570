"""Type tags and UI hints used by the presentation rules."""

from __future__ import annotations

from enum import StrEnum


class TypeTag(StrEnum):
    """Declared property types the formatter distinguishes."""

    BOOLEAN = "Boolean"
    DATE = "Date"
    DATE_ONLY = "DateOnly"
    OTHER = "Other"


class UiHint(StrEnum):
    """Template names consumed by templated renderers."""

    HIDDEN = "Hidden"
    EMAIL = "Email"
