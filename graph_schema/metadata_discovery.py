"""Discover node property types through the APOC metadata procedure."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from graph_schema.errors import DRIVER_ERRORS, DiscoveryResult, classify_driver_error

logger = logging.getLogger(__name__)

NODE_TYPE_PROPERTIES_QUERY = "CALL apoc.meta.nodeTypeProperties({ includeLabels: $labels })"

NODE_TYPE_PROPERTIES_SAMPLED_QUERY = (
    "CALL apoc.meta.nodeTypeProperties({ includeLabels: $labels, sample: $sample })"
)


def discover_via_metadata(
    session,
    labels: Iterable[str],
    sample: Optional[int] = None,
) -> DiscoveryResult[list[tuple[str, str]]]:
    """
    Return (property_name, cypher_type_name) pairs for the given labels, read from
    the store's metadata instead of scanning nodes. When a property is reported with
    several types, or under several label combinations, the first one reported wins.
    ``sample`` is forwarded to APOC only when set; otherwise APOC's default applies.
    A missing APOC install comes back as a PROCEDURE_UNAVAILABLE error.
    """
    labels = list(labels)
    if sample is None:
        query, params = NODE_TYPE_PROPERTIES_QUERY, {"labels": labels}
    else:
        query, params = NODE_TYPE_PROPERTIES_SAMPLED_QUERY, {"labels": labels, "sample": sample}
    logger.debug("Running %s with %s", query, params)
    try:
        result = session.run(query, params)
        records = list(result)
    except DRIVER_ERRORS as e:
        return DiscoveryResult(error=classify_driver_error(e, "apoc.meta.nodeTypeProperties"))

    properties: list[tuple[str, str]] = []
    seen: set[str] = set()
    for record in records:
        name = record["propertyName"]
        # Labels without any property are reported with a null name
        if name is None or name in seen:
            continue
        types = record["propertyTypes"] or []
        seen.add(name)
        properties.append((name, str(types[0]) if types else "String"))
    logger.debug("Metadata reported %d properties for %s", len(properties), labels)
    return DiscoveryResult(value=properties)
