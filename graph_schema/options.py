"""Per-request options for schema inference."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from graph_schema._shared import split_labels
from neo4j_config import NEO4J_DATABASE, NEO4J_SCHEMA_FLATTEN_LIMIT


class QueryType(str, Enum):
    LABELS = "labels"
    RELATIONSHIP = "relationship"
    QUERY = "query"


class QueryClassification(str, Enum):
    READ_ONLY = "read_only"
    MUTATING = "mutating"


class SchemaOptions(BaseModel):
    """
    What to infer a schema for.
    value is a label expression (``Person:Employee``) for LABELS, a relationship
    type for RELATIONSHIP, or a Cypher query for QUERY.
    """

    query_type: QueryType = QueryType.LABELS
    value: str
    schema_flatten_limit: int = Field(default=NEO4J_SCHEMA_FLATTEN_LIMIT, gt=0)
    # Forwarded to APOC as `sample`; unset lets APOC use its own default
    metadata_sample: Optional[int] = Field(default=None, gt=0)
    database: Optional[str] = NEO4J_DATABASE

    @field_validator("value")
    @classmethod
    def _value_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v.strip(":"):
            raise ValueError("value must not be empty")
        return v

    @property
    def labels(self) -> list[str]:
        return split_labels(self.value)
