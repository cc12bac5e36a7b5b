"""
Graph Schema MCP server entry point.

Exposes Neo4j schema inference and query classification as MCP tools.
Tools live in the tools/ folder; the inference core lives in graph_schema/.
"""

import logging

import colorlog
from fastmcp import FastMCP

from neo4j_config import LOG_LEVEL, close_driver
from tools.classify_query import classify_query  # Read-only vs mutating, from the EXPLAIN plan
from tools.infer_schema import infer_schema  # Typed columns for a node label expression

# -----------------------------------------------------------------------------
# MCP instructions
# -----------------------------------------------------------------------------

MCP_INSTRUCTIONS: str = (
    "Discover the column schema of Neo4j data via MCP tools. "
    "infer_schema(value, query_type='labels', limit?) returns the typed columns for nodes with the given "
    "label expression (e.g. 'Person' or 'Person:Employee'): one column per property sorted by name, "
    "then '<labels>' and '<id>'. Types come from APOC metadata when installed, otherwise from sampling "
    "up to `limit` nodes, so rare properties can be missing. "
    "Relationship and query schemas are not supported yet and return no columns. "
    "classify_query(query) reports whether a Cypher query is read_only or mutating without running it."
)

# -----------------------------------------------------------------------------
# MCP app and tool registration
# -----------------------------------------------------------------------------

mcp = FastMCP(
    "Graph Schema",
    instructions=MCP_INSTRUCTIONS,
)

mcp.tool()(infer_schema)
mcp.tool()(classify_query)


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

def setup_logging(level: str = LOG_LEVEL) -> None:
    """Send colored log lines to stderr (stdout carries the MCP stdio transport)."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    }
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = colorlog.StreamHandler()
    stream_handler.setFormatter(colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors))
    logger.addHandler(stream_handler)


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

def run() -> None:
    """Run the MCP server."""
    setup_logging()
    try:
        mcp.run()
    finally:
        close_driver()


if __name__ == "__main__":
    run()
