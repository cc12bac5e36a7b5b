"""
Neo4j connection and env config for schema inference.
"""
import os
from typing import Optional

from dotenv import load_dotenv
from neo4j import GraphDatabase

load_dotenv()

NEO4J_URI = os.getenv("NEO4J_URI", "neo4j://localhost:7687")
NEO4J_USER = os.getenv("NEO4J_USER", "neo4j")
NEO4J_PASSWORD = os.getenv("NEO4J_PASSWORD", "password")
NEO4J_DATABASE: Optional[str] = os.getenv("NEO4J_DATABASE") or None
NEO4J_CONNECTION_TIMEOUT = float(os.getenv("NEO4J_CONNECTION_TIMEOUT", "15"))

# Max nodes read by the sampling fallback when APOC is not installed
NEO4J_SCHEMA_FLATTEN_LIMIT = int(os.getenv("NEO4J_SCHEMA_FLATTEN_LIMIT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_driver = None


def get_driver():
    global _driver
    if _driver is None:
        _driver = GraphDatabase.driver(
            NEO4J_URI,
            auth=(NEO4J_USER, NEO4J_PASSWORD),
            connection_timeout=NEO4J_CONNECTION_TIMEOUT,
        )
    return _driver


def close_driver() -> None:
    """Close the cached driver, if one was created."""
    global _driver
    if _driver is not None:
        _driver.close()
        _driver = None
