"""Documentation export of permission definitions.

Renders definitions as JSON, YAML, CSV or a Markdown table for developer
documentation. The export is a convenience view of the catalog, not a
persistence format.
"""

import csv
import io
import json
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml
from pydantic import BaseModel, Field

from .definitions import Category, PermissionDefinition, ReviewRequirement


class ExportFormat(str, Enum):
    """Supported export formats."""

    JSON = "json"
    YAML = "yaml"
    CSV = "csv"
    MARKDOWN = "markdown"


class PermissionRecord(BaseModel):
    """Serialized form of a permission definition."""
    identifier: str
    category: Category
    description: str = ""
    introduced_in_version: Optional[str] = Field(None, description="Graph API version")
    review: ReviewRequirement = ReviewRequirement.UNSPECIFIED
    requires_review: bool = False

    @classmethod
    def from_definition(cls, definition: PermissionDefinition) -> "PermissionRecord":
        return cls(
            identifier=definition.identifier,
            category=definition.category,
            description=definition.description,
            introduced_in_version=definition.introduced_in_version,
            review=definition.review,
            requires_review=definition.requires_review,
        )


RECORD_FIELDS = list(PermissionRecord.model_fields)


def to_records(definitions: Iterable[PermissionDefinition]) -> List[Dict[str, Any]]:
    """Convert definitions to JSON-compatible dictionaries, keeping order."""
    return [
        PermissionRecord.from_definition(d).model_dump(mode="json") for d in definitions
    ]


def _to_csv(records: List[Dict[str, Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=RECORD_FIELDS, lineterminator="\n")
    writer.writeheader()
    for record in records:
        writer.writerow(
            {key: "" if value is None else value for key, value in record.items()}
        )
    return buffer.getvalue()


def _to_markdown(records: List[Dict[str, Any]]) -> str:
    lines = [
        "| Permission | Category | Since | Review | Description |",
        "|------------|----------|-------|--------|-------------|",
    ]
    for record in records:
        # Pipes would split the table cell
        description = record["description"].replace("|", "\\|")
        lines.append(
            f"| `{record['identifier']}` | {record['category']} "
            f"| {record['introduced_in_version'] or ''} | {record['review']} "
            f"| {description} |"
        )
    return "\n".join(lines) + "\n"


def export_permissions(
    definitions: Iterable[PermissionDefinition],
    fmt: Union[ExportFormat, str] = ExportFormat.JSON,
) -> str:
    """Render definitions in the requested format.

    Args:
        definitions: Definitions to export, in output order
        fmt: Export format (json, yaml, csv or markdown)

    Returns:
        Rendered document

    Raises:
        ValueError: If the format is not supported
    """
    fmt = ExportFormat(fmt.lower() if isinstance(fmt, str) else fmt)
    records = to_records(definitions)

    if fmt is ExportFormat.JSON:
        return json.dumps(records, indent=2) + "\n"
    if fmt is ExportFormat.YAML:
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)
    if fmt is ExportFormat.CSV:
        return _to_csv(records)
    return _to_markdown(records)
