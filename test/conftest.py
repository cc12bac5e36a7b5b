"""Shared pytest fixtures: fake neo4j driver/session, no live database needed."""

import os
import sys
from unittest.mock import MagicMock

import pytest
from neo4j.exceptions import ClientError

# Ensure project root is on path
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)


class FakeClientError(ClientError):
    """ClientError with a fixed server status code."""

    code = "Neo.ClientError.Statement.SyntaxError"

    def __init__(self, message: str = "client error"):
        Exception.__init__(self, message)
        self._text = message

    def __str__(self) -> str:
        return self._text


class ProcedureNotFoundError(FakeClientError):
    code = "Neo.ClientError.Procedure.ProcedureNotFound"


class SyntaxClientError(FakeClientError):
    code = "Neo.ClientError.Statement.SyntaxError"


def metadata_record(name, *types):
    return {"nodeType": ":`Person`", "propertyName": name, "propertyTypes": list(types)}


def node_record(props):
    return {"n": props}


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(name="session")


@pytest.fixture
def driver(session: MagicMock) -> MagicMock:
    drv = MagicMock(name="driver")
    drv.session.return_value = session
    return drv
