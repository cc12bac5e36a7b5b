"""
Infer node property types by sampling nodes, for stores without APOC.

The type of each property comes from the first value seen for it. Properties
missing from every sampled node are absent from the result, and a property
stored with different types on different nodes gets whichever type is read
first. Both follow from reading at most ``limit`` nodes in server order.
"""

from __future__ import annotations

import logging
from typing import Any

import pyarrow as pa

from graph_schema._shared import NODE_ALIAS, node_match_query
from graph_schema.errors import DRIVER_ERRORS, classify_driver_error
from graph_schema.types import ARRAY_SUFFIX, cypher_to_arrow_type, cypher_type_name

logger = logging.getLogger(__name__)


def value_type_name(value: Any) -> str:
    """Cypher type name of a property value; lists are typed by their first element."""
    if isinstance(value, list):
        element = cypher_type_name(value[0]) if value else "String"
        return f"{element}{ARRAY_SUFFIX}"
    return cypher_type_name(value)


def flatten_properties(records, node_var: str = NODE_ALIAS) -> dict[str, list[Any]]:
    """Group every (name, value) property pair of the returned nodes by name."""
    grouped: dict[str, list[Any]] = {}
    for record in records:
        node = record[node_var]
        if node is None:
            continue
        for name, value in dict(node).items():
            grouped.setdefault(name, []).append(value)
    return grouped


def discover_by_sampling(session, label_expr: str, limit: int) -> dict[str, pa.DataType]:
    """
    Read at most ``limit`` nodes matching ``label_expr`` and return an Arrow type
    per property name, in first-seen order.
    Raises DiscoveryError (DISCOVERY_FAILED) if the query fails.
    """
    if limit <= 0:
        raise ValueError(f"limit must be a positive integer, got {limit}")
    query = node_match_query(label_expr)
    logger.debug("Sampling schema with %s (limit=%d)", query, limit)
    try:
        result = session.run(query, {"limit": limit})
        records = list(result)
    except DRIVER_ERRORS as e:
        raise classify_driver_error(e, f"Sampling nodes for {label_expr!r}") from e

    grouped = flatten_properties(records)
    fields = {
        name: cypher_to_arrow_type(value_type_name(values[0]))
        for name, values in grouped.items()
    }
    logger.debug("Sampled %d nodes, found %d properties", len(records), len(fields))
    return fields
