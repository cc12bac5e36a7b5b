"""Shared helpers for MCP tools."""

from __future__ import annotations

from typing import Any

import pyarrow as pa


def field_to_dict(field: pa.Field) -> dict[str, Any]:
    """Describe an Arrow field as JSON-serializable data."""
    return {
        "name": field.name,
        "type": str(field.type),
        "nullable": field.nullable,
    }


def schema_to_dict(schema: pa.Schema) -> dict[str, Any]:
    """Convert an Arrow schema into a dict with the field list and a one-line summary."""
    fields = [field_to_dict(f) for f in schema]
    return {
        "fields": fields,
        "field_count": len(fields),
        "summary": ", ".join(f"{f['name']}: {f['type']}" for f in fields),
    }
