"""Tests for the DisplayMetadata record."""

from __future__ import annotations

from datetime import date

from displaykit.plugins.metadata import DisplayMetadata


class TestDisplayMetadata:
    def test_label_falls_back_to_property_name(self) -> None:
        assert DisplayMetadata(property_name="Total").label() == "Total"

    def test_label_is_lazy(self) -> None:
        calls: list[int] = []

        def produce() -> str:
            calls.append(1)
            return "Grand Total"

        md = DisplayMetadata(property_name="Total", display_name=produce)
        assert calls == []
        assert md.label() == "Grand Total"
        assert calls == [1]

    def test_format_display_without_template(self) -> None:
        md = DisplayMetadata(property_name="Total")
        assert md.format_display(12) == "12"
        assert md.format_display(None) == ""

    def test_edit_falls_back_to_display(self) -> None:
        md = DisplayMetadata(property_name="IsPaid", display_format_string="{0:Yes;Yes;No}")
        assert md.format_edit(False) == "No"

    def test_edit_format(self) -> None:
        md = DisplayMetadata(
            property_name="DueDate",
            display_format_string="{0:dd/MM/yyyy}",
            edit_format_string="{0:yyyy-MM-dd}",
        )
        assert md.format_display(date(2025, 2, 1)) == "01/02/2025"
        assert md.format_edit(date(2025, 2, 1)) == "2025-02-01"

    def test_to_dict(self) -> None:
        md = DisplayMetadata(property_name="UserId", template_hint="Hidden")
        assert md.to_dict() == {
            "name": "UserId",
            "label": "UserId",
            "display_format": None,
            "edit_format": None,
            "template_hint": "Hidden",
        }
