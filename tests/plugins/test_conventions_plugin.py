"""Tests for the built-in PresentationConventionsPlugin."""

from __future__ import annotations

from displaykit.domain.descriptors import PropertyDescriptor
from displaykit.domain.scope import ScopeRule
from displaykit.domain.types import TypeTag
from displaykit.plugins.builtins.conventions import PresentationConventionsPlugin
from displaykit.plugins.metadata import DisplayMetadata
from displaykit.services.resolver import FieldPresentationResolver


class Order:
    pass


def _apply(descriptor: PropertyDescriptor, metadata: DisplayMetadata | None = None) -> DisplayMetadata:
    plugin = PresentationConventionsPlugin(FieldPresentationResolver(ScopeRule([Order])))
    metadata = metadata or DisplayMetadata(property_name=descriptor.name)
    plugin.create_display_metadata(descriptor=descriptor, metadata=metadata)
    return metadata


class TestPresentationConventionsPlugin:
    def test_writes_label(self) -> None:
        md = _apply(PropertyDescriptor(name="ShippedOn", container_type=Order))
        assert md.label() == "Shipped On"

    def test_keeps_existing_display_name(self) -> None:
        existing = DisplayMetadata(property_name="ShippedOn", display_name=lambda: "Shipped")
        md = _apply(PropertyDescriptor(name="ShippedOn", container_type=Order), existing)
        assert md.label() == "Shipped"

    def test_empty_display_name_is_replaced(self) -> None:
        existing = DisplayMetadata(property_name="ShippedOn", display_name=lambda: "")
        md = _apply(PropertyDescriptor(name="ShippedOn", container_type=Order), existing)
        assert md.label() == "Shipped On"

    def test_writes_hint_string(self) -> None:
        md = _apply(PropertyDescriptor(name="OrderId", container_type=Order))
        assert md.template_hint == "Hidden"
        assert md.display_name is None

    def test_writes_formats(self) -> None:
        md = _apply(PropertyDescriptor(name="DueDate", declared_type=TypeTag.DATE_ONLY))
        assert md.display_format_string == "{0:yyyy-MM-dd}"
        assert md.edit_format_string == "{0:yyyy-MM-dd}"

    def test_default_resolver(self) -> None:
        plugin = PresentationConventionsPlugin()
        assert plugin.resolver.scope.target_types == frozenset()
