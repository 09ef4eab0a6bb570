"""Tests for FieldPresentationResolver — rule composition and ordering."""

from __future__ import annotations

import pytest

from displaykit.domain.descriptors import DisplayDecision, PropertyDescriptor
from displaykit.domain.scope import ScopeRule
from displaykit.domain.types import TypeTag, UiHint
from displaykit.services.resolver import FieldPresentationResolver


class Person:
    pass


class Employee(Person):
    pass


class Other:
    pass


def _prop(name: str, declared_type: TypeTag = TypeTag.OTHER, **kwargs) -> PropertyDescriptor:
    kwargs.setdefault("container_type", Person)
    return PropertyDescriptor(name=name, declared_type=declared_type, **kwargs)


@pytest.fixture
def resolver() -> FieldPresentationResolver:
    return FieldPresentationResolver(ScopeRule([Person]))


class TestLabels:
    def test_pascal_case_label(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("FirstName"))
        assert decision.label == "First Name"
        assert decision.ui_hint is None

    def test_capital_run_label(self, resolver: FieldPresentationResolver) -> None:
        assert resolver.resolve(_prop("HTTPServer")).label == "HTTP Server"

    def test_explicit_label_is_never_overridden(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("FirstName", explicit_label="Given Name"))
        assert decision.label is None

    def test_out_of_scope_container_gets_no_label(
        self, resolver: FieldPresentationResolver
    ) -> None:
        assert resolver.resolve(_prop("FirstName", container_type=Other)).label is None

    def test_derived_container_requires_include_derived(self) -> None:
        exact = FieldPresentationResolver(ScopeRule([Person]))
        derived = FieldPresentationResolver(ScopeRule([Person], include_derived=True))
        prop = _prop("FirstName", container_type=Employee)
        assert exact.resolve(prop).label is None
        assert derived.resolve(prop).label == "First Name"

    @pytest.mark.parametrize("container", [Person, Employee, Other, None])
    def test_empty_scope_never_labels(self, container: type | None) -> None:
        resolver = FieldPresentationResolver(ScopeRule([], include_derived=False))
        assert resolver.resolve(_prop("FirstName", container_type=container)).label is None

    def test_default_resolver_has_empty_scope(self) -> None:
        assert FieldPresentationResolver().resolve(_prop("FirstName")).label is None


class TestHints:
    def test_id_is_hidden_without_label(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("UserId"))
        assert decision.ui_hint is UiHint.HIDDEN
        assert decision.label is None

    def test_email(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("EmailAddress"))
        assert decision.ui_hint is UiHint.EMAIL
        assert decision.label is None

    def test_id_checked_before_email(self, resolver: FieldPresentationResolver) -> None:
        assert resolver.resolve(_prop("EmailId")).ui_hint is UiHint.HIDDEN

    def test_hints_apply_outside_scope(self, resolver: FieldPresentationResolver) -> None:
        assert resolver.resolve(_prop("OrderId", container_type=Other)).ui_hint is UiHint.HIDDEN


class TestFormats:
    def test_boolean_format(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("IsActive", TypeTag.BOOLEAN))
        assert decision.display_format == "{0:Yes;Yes;No}"
        assert decision.edit_format is None
        assert decision.label == "Is Active"

    def test_nullable_boolean_same_format(self, resolver: FieldPresentationResolver) -> None:
        plain = resolver.resolve(_prop("IsActive", TypeTag.BOOLEAN))
        nullable = resolver.resolve(_prop("IsActive", TypeTag.BOOLEAN, nullable=True))
        assert plain.display_format == nullable.display_format

    def test_date_only_formats(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("BirthDate", TypeTag.DATE_ONLY))
        assert decision.display_format == "{0:yyyy-MM-dd}"
        assert decision.edit_format == "{0:yyyy-MM-dd}"

    def test_formats_apply_regardless_of_scope(self) -> None:
        resolver = FieldPresentationResolver(ScopeRule([]))
        decision = resolver.resolve(_prop("CreatedOn", TypeTag.DATE, container_type=Other))
        assert decision.display_format == "{0:yyyy-MM-dd}"
        assert decision.label is None

    def test_format_coexists_with_hint(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("ValidId", TypeTag.BOOLEAN))
        assert decision.ui_hint is UiHint.HIDDEN
        assert decision.display_format == "{0:Yes;Yes;No}"

    def test_other_type_has_no_format(self, resolver: FieldPresentationResolver) -> None:
        decision = resolver.resolve(_prop("LastName"))
        assert decision.display_format is None
        assert decision.edit_format is None


class TestDeterminism:
    def test_same_descriptor_same_decision(self, resolver: FieldPresentationResolver) -> None:
        prop = _prop("IsHTTPEnabled", TypeTag.BOOLEAN)
        first = resolver.resolve(prop)
        second = resolver.resolve(prop)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_resolve_all_preserves_order(self, resolver: FieldPresentationResolver) -> None:
        decisions = resolver.resolve_all([_prop("UserId"), _prop("FirstName")])
        assert decisions == [
            DisplayDecision(ui_hint=UiHint.HIDDEN),
            DisplayDecision(label="First Name"),
        ]
