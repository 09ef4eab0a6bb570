"""Pure domain logic — presentation rules with no I/O.

INVARIANT: Every function here is deterministic over its inputs.
"""

from displaykit.domain.conventions import hint_for_name
from displaykit.domain.descriptors import DisplayDecision, PropertyDescriptor
from displaykit.domain.errors import FormatTemplateError, InvalidArgumentError
from displaykit.domain.formats import format_for_type, render_value
from displaykit.domain.scope import ScopeRule
from displaykit.domain.types import TypeTag, UiHint
from displaykit.domain.words import split_pascal_case

__all__ = [
    "DisplayDecision",
    "FormatTemplateError",
    "InvalidArgumentError",
    "PropertyDescriptor",
    "ScopeRule",
    "TypeTag",
    "UiHint",
    "format_for_type",
    "hint_for_name",
    "render_value",
    "split_pascal_case",
]
