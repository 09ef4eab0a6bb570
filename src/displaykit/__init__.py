"""displaykit — display metadata conventions for model properties."""

from __future__ import annotations

__version__ = "0.1.0"

from displaykit.domain import (  # noqa: E402
    DisplayDecision,
    PropertyDescriptor,
    ScopeRule,
    TypeTag,
    UiHint,
    split_pascal_case,
)
from displaykit.services.introspect import describe_model  # noqa: E402
from displaykit.services.resolver import FieldPresentationResolver  # noqa: E402

__all__ = [
    "DisplayDecision",
    "FieldPresentationResolver",
    "PropertyDescriptor",
    "ScopeRule",
    "TypeTag",
    "UiHint",
    "__version__",
    "describe_model",
    "split_pascal_case",
]
