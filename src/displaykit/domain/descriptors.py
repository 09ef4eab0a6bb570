"""PropertyDescriptor and DisplayDecision — the resolver's input and output.

Both are frozen value objects. Two descriptors with equal fields always
resolve to equal decisions.
"""

from __future__ import annotations

from pydantic import BaseModel

from displaykit.domain.types import TypeTag, UiHint


class PropertyDescriptor(BaseModel):
    """Static description of one model property.

    Attributes:
        name: Property name as exposed to the renderer.
        declared_type: Type tag derived from the annotation.
        container_type: Class declaring the property, if known.
        explicit_label: Label already supplied by the model author.
        nullable: Whether the annotation admits ``None``.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    name: str
    declared_type: TypeTag = TypeTag.OTHER
    container_type: type | None = None
    explicit_label: str | None = None
    nullable: bool = False

    @property
    def has_explicit_label(self) -> bool:
        return bool(self.explicit_label)


class DisplayDecision(BaseModel):
    """Rendering decision for a single property."""

    model_config = {"frozen": True}

    display_format: str | None = None
    edit_format: str | None = None
    ui_hint: UiHint | None = None
    label: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when no rule produced anything."""
        return (
            self.display_format is None
            and self.edit_format is None
            and self.ui_hint is None
            and self.label is None
        )
