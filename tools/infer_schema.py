"""Infer the column schema of a node label, relationship type or query."""

from __future__ import annotations

import logging
from typing import Any, Literal, Optional

from pydantic import ValidationError

from graph_schema.errors import DiscoveryError
from graph_schema.options import QueryType, SchemaOptions
from graph_schema.schema_service import SchemaService
from neo4j_config import get_driver

from tools._shared import schema_to_dict

logger = logging.getLogger(__name__)


def infer_schema(
    value: str,
    query_type: Literal["labels", "relationship", "query"] = "labels",
    limit: Optional[int] = None,
) -> dict[str, Any]:
    """
    Return the typed columns (Arrow types) for reading nodes with the given
    label expression, e.g. "Person" or "Person:Employee". Uses APOC metadata when
    installed, otherwise samples up to `limit` nodes. Relationship and query
    schemas are not supported yet and come back empty.
    """
    try:
        kwargs: dict[str, Any] = {"query_type": QueryType(query_type), "value": value}
        if limit is not None:
            kwargs["schema_flatten_limit"] = limit
        options = SchemaOptions(**kwargs)
    except (ValidationError, ValueError) as e:
        return {"error": str(e)}

    try:
        with SchemaService(options, driver=get_driver()) as service:
            schema = service.from_query()
    except DiscoveryError as e:
        logger.error("Schema inference for %s failed: %s", value, e)
        return {"error": str(e), "kind": e.kind.value}

    out = schema_to_dict(schema)
    out["query_type"] = options.query_type.value
    out["value"] = options.value
    return out
