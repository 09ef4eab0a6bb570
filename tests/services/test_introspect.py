"""Tests for model introspection."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Annotated, ClassVar, Optional, Union

import pytest
from pydantic import BaseModel, Field

from displaykit.domain.types import TypeTag
from displaykit.services.introspect import describe_model, type_tag_for


class Person(BaseModel):
    PersonId: int
    FirstName: str
    IsActive: bool = True
    BirthDate: date | None = None
    LastLogin: Optional[datetime] = None
    nickname: str = Field(default="", alias="Nickname", title="Known As")


@dataclasses.dataclass
class Invoice:
    InvoiceId: int
    DueDate: date
    IsPaid: bool
    BillingContact: str = dataclasses.field(default="", metadata={"label": "Bill To"})


class Plain:
    Title: str
    Published: Annotated[bool, "flag"]
    Registry: ClassVar[dict[str, int]] = {}
    _private: int = 0


class TestTypeTagFor:
    @pytest.mark.parametrize(
        ("annotation", "expected"),
        [
            (bool, (TypeTag.BOOLEAN, False)),
            (bool | None, (TypeTag.BOOLEAN, True)),
            (Optional[bool], (TypeTag.BOOLEAN, True)),
            (datetime, (TypeTag.DATE, False)),
            (date, (TypeTag.DATE_ONLY, False)),
            (Optional[date], (TypeTag.DATE_ONLY, True)),
            (Annotated[datetime | None, "meta"], (TypeTag.DATE, True)),
            (int, (TypeTag.OTHER, False)),
            (str | None, (TypeTag.OTHER, True)),
            (Union[bool, int], (TypeTag.OTHER, False)),
            (list[bool], (TypeTag.OTHER, False)),
        ],
    )
    def test_mapping(self, annotation: object, expected: tuple[TypeTag, bool]) -> None:
        assert type_tag_for(annotation) == expected


class TestDescribeModel:
    def test_pydantic_model(self) -> None:
        by_name = {d.name: d for d in describe_model(Person)}
        assert list(by_name) == [
            "PersonId",
            "FirstName",
            "IsActive",
            "BirthDate",
            "LastLogin",
            "Nickname",
        ]
        assert by_name["IsActive"].declared_type is TypeTag.BOOLEAN
        assert by_name["BirthDate"].declared_type is TypeTag.DATE_ONLY
        assert by_name["BirthDate"].nullable is True
        assert by_name["LastLogin"].declared_type is TypeTag.DATE
        assert by_name["Nickname"].explicit_label == "Known As"
        assert all(d.container_type is Person for d in by_name.values())

    def test_dataclass(self) -> None:
        by_name = {d.name: d for d in describe_model(Invoice)}
        assert by_name["DueDate"].declared_type is TypeTag.DATE_ONLY
        assert by_name["IsPaid"].declared_type is TypeTag.BOOLEAN
        assert by_name["BillingContact"].explicit_label == "Bill To"
        assert by_name["InvoiceId"].explicit_label is None

    def test_annotated_class_skips_classvars_and_private(self) -> None:
        names = [d.name for d in describe_model(Plain)]
        assert names == ["Title", "Published"]

    def test_annotated_extras_unwrapped(self) -> None:
        published = describe_model(Plain)[1]
        assert published.declared_type is TypeTag.BOOLEAN

    def test_non_class_rejected(self) -> None:
        with pytest.raises(TypeError):
            describe_model(Person(PersonId=1, FirstName="Ada"))  # type: ignore[arg-type]
