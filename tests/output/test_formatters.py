"""Tests for the output formatter layer."""

from __future__ import annotations

import json

from displaykit.output.formatters import format_result
from displaykit.services.result import ServiceResult


def _describe_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="describe_model",
        data={
            "model": "app.models:Person",
            "count": 2,
            "properties": [
                {
                    "name": "PersonId",
                    "label": "PersonId",
                    "display_format": None,
                    "edit_format": None,
                    "template_hint": "Hidden",
                },
                {
                    "name": "BirthDate",
                    "label": "Birth Date",
                    "display_format": "{0:yyyy-MM-dd}",
                    "edit_format": "{0:yyyy-MM-dd}",
                    "template_hint": None,
                },
            ],
        },
    )


class TestFormatResult:
    def test_success_human(self) -> None:
        output = format_result(ServiceResult(ok=True, op="split_labels", data={"count": 1}))
        assert output.startswith("OK: split_labels")
        assert "count: 1" in output

    def test_nested_data_is_compact_json(self) -> None:
        result = ServiceResult(ok=True, op="split_labels", data={"labels": {"A": "A"}})
        assert 'labels: {"A":"A"}' in format_result(result)

    def test_failure_human(self) -> None:
        result = ServiceResult.failure("describe_model", "invalid_target", "No module named x")
        assert format_result(result) == "ERROR: describe_model - No module named x"

    def test_json(self) -> None:
        output = format_result(_describe_result(), json_output=True)
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["properties"][0]["template_hint"] == "Hidden"

    def test_properties_table(self) -> None:
        output = format_result(_describe_result())
        assert "Property" in output
        assert "Birth Date" in output
        assert "{0:yyyy-MM-dd}" in output
        assert "Hidden" in output
        assert "properties:" not in output

    def test_quiet_hides_summary_but_keeps_table(self) -> None:
        output = format_result(_describe_result(), quiet=True)
        assert "model:" not in output
        assert "Birth Date" in output
