"""Tests for documentation export."""

import csv
import io
import json

import pytest
import yaml

from graph_permissions.catalog import (
    Category,
    ExportFormat,
    PermissionRecord,
    export_permissions,
    to_records,
)


class TestRecords:
    """Test conversion of definitions to records."""

    def test_record_fields(self, catalog):
        """Test a serialized definition."""
        record = to_records([catalog.get("user_age_range")])[0]
        assert record == {
            "identifier": "user_age_range",
            "category": "USER_DATA",
            "description": "Access to a person's age range.",
            "introduced_in_version": "3.0",
            "review": "required",
            "requires_review": True,
        }

    def test_from_definition(self, catalog):
        """Test building the pydantic model."""
        record = PermissionRecord.from_definition(catalog.get("email"))
        assert record.category == Category.USER_DATA
        assert record.introduced_in_version is None
        assert record.requires_review is False


class TestExport:
    """Test rendering exports."""

    def test_json(self, catalog):
        """Test JSON export keeps catalog order."""
        data = json.loads(export_permissions(catalog.all(), ExportFormat.JSON))
        assert len(data) == len(catalog)
        assert [r["identifier"] for r in data] == [d.identifier for d in catalog.all()]

    def test_yaml(self, small_catalog):
        """Test YAML export."""
        data = yaml.safe_load(export_permissions(small_catalog.all(), "yaml"))
        assert [r["identifier"] for r in data] == ["public_profile", "user_posts", "user_link"]
        assert data[2]["introduced_in_version"] == "3.0"

    def test_csv(self, small_catalog):
        """Test CSV export with header row."""
        output = export_permissions(small_catalog.all(), ExportFormat.CSV)
        rows = list(csv.DictReader(io.StringIO(output)))
        assert len(rows) == 3
        assert rows[0]["identifier"] == "public_profile"
        assert rows[0]["introduced_in_version"] == ""
        assert rows[2]["category"] == "USER_DATA"

    def test_markdown(self, small_catalog):
        """Test Markdown table export."""
        output = export_permissions(small_catalog.all(), "MARKDOWN")
        lines = output.strip().splitlines()
        assert lines[0].startswith("| Permission |")
        assert len(lines) == 2 + len(small_catalog)
        assert "| `user_link` | USER_DATA | 3.0 | required |" in lines[4]

    def test_markdown_escapes_pipes(self):
        """Test descriptions cannot break the table."""
        from graph_permissions.catalog import PermissionDefinition

        perm = PermissionDefinition("x", Category.OTHER, "a | b")
        assert "a \\| b" in export_permissions([perm], "markdown")

    def test_empty_export(self):
        """Test exporting nothing."""
        assert json.loads(export_permissions([], "json")) == []

    def test_unknown_format(self, catalog):
        """Test unsupported formats are rejected."""
        with pytest.raises(ValueError):
            export_permissions(catalog.all(), "xml")
