"""FieldPresentationResolver — composes the presentation rules.

Order of evaluation for one property:
  1. Type formats (unconditional, independent of the hint outcome)
  2. Name ends with "Id"  -> Hidden, stop
  3. Name contains "Email" -> Email, stop
  4. In scope and no explicit label -> PascalCase label
"""

from __future__ import annotations

from displaykit.domain.conventions import hint_for_name
from displaykit.domain.descriptors import DisplayDecision, PropertyDescriptor
from displaykit.domain.formats import format_for_type
from displaykit.domain.scope import ScopeRule
from displaykit.domain.words import split_pascal_case


class FieldPresentationResolver:
    """Pure function from PropertyDescriptor to DisplayDecision.

    The scope rule is the only state and is immutable, so one resolver
    can be shared by concurrent metadata builds.
    """

    def __init__(self, scope: ScopeRule | None = None) -> None:
        self._scope = scope if scope is not None else ScopeRule(())

    @property
    def scope(self) -> ScopeRule:
        return self._scope

    def resolve(self, descriptor: PropertyDescriptor) -> DisplayDecision:
        """Decide formats, hint, and label for *descriptor*."""
        formats = format_for_type(descriptor.declared_type)

        hint = hint_for_name(descriptor.name)
        label: str | None = None
        if (
            hint is None
            and not descriptor.has_explicit_label
            and self._scope.applies_to(descriptor.container_type)
        ):
            label = split_pascal_case(descriptor.name)

        return DisplayDecision(
            display_format=formats.display,
            edit_format=formats.edit,
            ui_hint=hint,
            label=label,
        )

    def resolve_all(self, descriptors: list[PropertyDescriptor]) -> list[DisplayDecision]:
        return [self.resolve(d) for d in descriptors]
