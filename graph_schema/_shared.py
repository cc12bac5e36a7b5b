"""Shared constants and Cypher helpers for schema discovery."""

from __future__ import annotations

from typing import Iterable

# Synthetic columns appended to every node schema
INTERNAL_LABELS_FIELD = "<labels>"
INTERNAL_ID_FIELD = "<id>"

# Variable bound to the node in generated MATCH queries
NODE_ALIAS = "n"

PROCEDURE_NOT_FOUND_CODE = "Neo.ClientError.Procedure.ProcedureNotFound"


def split_labels(label_expr: str) -> list[str]:
    """Split a label expression like ``Person:Employee`` (or ``:Person``) into labels."""
    return [lbl.strip() for lbl in (label_expr or "").split(":") if lbl.strip()]


def quote_name(name: str) -> str:
    """Backtick-quote a label or property name for safe use inside Cypher."""
    return "`" + name.replace("`", "``") + "`"


def label_pattern(labels: Iterable[str]) -> str:
    """Return ``:`A`:`B``` for use in a node pattern."""
    return "".join(f":{quote_name(lbl)}" for lbl in labels)


def node_match_query(label_expr: str, node_var: str = NODE_ALIAS) -> str:
    """
    Build a bounded MATCH query returning whole nodes for the label expression.
    The row bound is passed as the ``$limit`` parameter.
    """
    labels = split_labels(label_expr)
    return f"MATCH ({node_var}{label_pattern(labels)}) RETURN {node_var} LIMIT $limit"
