"""Infer the Arrow schema of a Neo4j read and classify queries as read-only or mutating."""

from __future__ import annotations

import logging

import pyarrow as pa

from graph_schema._shared import INTERNAL_ID_FIELD, INTERNAL_LABELS_FIELD
from graph_schema.errors import DiscoveryError, DiscoveryErrorKind
from graph_schema.metadata_discovery import discover_via_metadata
from graph_schema.options import QueryClassification, QueryType, SchemaOptions
from graph_schema.sampling_discovery import discover_by_sampling
from graph_schema.types import cypher_to_arrow_type
from neo4j_config import get_driver

logger = logging.getLogger(__name__)

# ResultSummary.query_type values that do not touch data
READ_QUERY_TYPES = frozenset({"r", "s"})


class SchemaService:
    """
    Holds one session for the lifetime of the service. Use as a context manager,
    or call close() when done; close() is safe to call more than once.
    """

    def __init__(self, options: SchemaOptions, driver=None):
        self.options = options
        driver = driver if driver is not None else get_driver()
        if options.database:
            self._session = driver.session(database=options.database)
        else:
            self._session = driver.session()

    def __enter__(self) -> "SchemaService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def query_for_node(self) -> pa.Schema:
        """
        Schema of the nodes matching the label expression: discovered properties
        sorted by name, then ``<labels>`` and ``<id>``.
        """
        labels = self.options.labels
        limit = self.options.schema_flatten_limit
        result = discover_via_metadata(self._session, labels, self.options.metadata_sample)
        if result.ok:
            logger.info("Schema for %s read from APOC metadata", self.options.value)
            fields = [pa.field(name, cypher_to_arrow_type(type_name)) for name, type_name in result.value]
        elif result.error.recoverable:
            logger.warning(
                "APOC not available (%s), sampling up to %d nodes for %s",
                result.error,
                limit,
                self.options.value,
            )
            sampled = discover_by_sampling(self._session, self.options.value, limit)
            fields = [pa.field(name, arrow_type) for name, arrow_type in sampled.items()]
        else:
            raise result.error

        fields.sort(key=lambda f: f.name)
        fields.append(pa.field(INTERNAL_LABELS_FIELD, pa.list_(pa.string()), nullable=True))
        fields.append(pa.field(INTERNAL_ID_FIELD, pa.int64(), nullable=False))
        logger.info("Inferred %d fields for %s", len(fields), self.options.value)
        return pa.schema(fields)

    def query_for_relationship(self) -> pa.Schema:
        return self._unsupported(QueryType.RELATIONSHIP)

    def query(self) -> pa.Schema:
        return self._unsupported(QueryType.QUERY)

    def from_query(self) -> pa.Schema:
        """Dispatch on the configured query type."""
        query_type = self.options.query_type
        if query_type is QueryType.LABELS:
            return self.query_for_node()
        if query_type is QueryType.RELATIONSHIP:
            return self.query_for_relationship()
        if query_type is QueryType.QUERY:
            return self.query()
        raise DiscoveryError(
            DiscoveryErrorKind.UNSUPPORTED_SCHEMA_KIND,
            f"Unknown query type: {query_type!r}",
        )

    def classify_query(self, query: str) -> QueryClassification:
        """
        Plan the query with EXPLAIN (nothing is executed) and classify it by the
        plan's query type. Read-only and schema-write plans count as READ_ONLY.
        """
        summary = self._session.run(f"EXPLAIN {query}").consume()
        query_type = summary.query_type
        logger.debug("EXPLAIN reported query type %r", query_type)
        if query_type in READ_QUERY_TYPES:
            return QueryClassification.READ_ONLY
        return QueryClassification.MUTATING

    def is_read_query(self, query: str) -> bool:
        return self.classify_query(query) is QueryClassification.READ_ONLY

    def close(self) -> None:
        session = self._session
        if session is None:
            return
        self._session = None
        try:
            session.close()
        except Exception as e:
            logger.warning("Failed to close Neo4j session: %s", e)

    def _unsupported(self, query_type: QueryType) -> pa.Schema:
        logger.warning(
            "Schema inference for %s is not supported yet, returning an empty schema",
            query_type.value,
        )
        return pa.schema([])
