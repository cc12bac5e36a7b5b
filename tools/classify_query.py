"""Tell whether a Cypher query is read-only without running it."""

from __future__ import annotations

from typing import Any

from neo4j.exceptions import DriverError, Neo4jError
from pydantic import ValidationError

from graph_schema.options import QueryClassification, SchemaOptions
from graph_schema.schema_service import SchemaService
from neo4j_config import get_driver


def classify_query(query: str) -> dict[str, Any]:
    """
    Classify a Cypher query as "read_only" or "mutating" from its EXPLAIN plan.
    Schema-only writes (index or constraint changes) count as read_only.
    """
    query = (query or "").strip()
    if not query:
        return {"error": "Query cannot be empty"}

    try:
        options = SchemaOptions(query_type="query", value=query)
    except ValidationError as e:
        return {"error": str(e)}

    try:
        with SchemaService(options, driver=get_driver()) as service:
            classification = service.classify_query(query)
    except (Neo4jError, DriverError) as e:
        return {"error": str(e)}
    return {
        "query": query,
        "classification": classification.value,
        "read_only": classification is QueryClassification.READ_ONLY,
    }
