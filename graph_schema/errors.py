"""Classified errors raised or returned by schema discovery."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from neo4j.exceptions import DriverError, Neo4jError

from graph_schema._shared import PROCEDURE_NOT_FOUND_CODE

T = TypeVar("T")


class DiscoveryErrorKind(str, Enum):
    PROCEDURE_UNAVAILABLE = "procedure_unavailable"
    DISCOVERY_FAILED = "discovery_failed"
    UNSUPPORTED_SCHEMA_KIND = "unsupported_schema_kind"


class DiscoveryError(Exception):
    """
    Schema discovery failure with a kind.
    Only PROCEDURE_UNAVAILABLE is recoverable (by falling back to sampling);
    the driver exception that caused it, if any, is chained as ``__cause__``.
    """

    def __init__(self, kind: DiscoveryErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    @property
    def recoverable(self) -> bool:
        return self.kind is DiscoveryErrorKind.PROCEDURE_UNAVAILABLE


@dataclass(frozen=True)
class DiscoveryResult(Generic[T]):
    """Either a discovered value or the classified error that prevented it."""

    value: Optional[T] = None
    error: Optional[DiscoveryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value


def classify_driver_error(exc: Exception, action: str) -> DiscoveryError:
    """Wrap a neo4j driver exception into a DiscoveryError of the matching kind."""
    code = getattr(exc, "code", None) if isinstance(exc, Neo4jError) else None
    if code == PROCEDURE_NOT_FOUND_CODE:
        error = DiscoveryError(
            DiscoveryErrorKind.PROCEDURE_UNAVAILABLE,
            f"{action}: procedure not available ({code})",
        )
    else:
        error = DiscoveryError(
            DiscoveryErrorKind.DISCOVERY_FAILED,
            f"{action} failed: {exc}",
        )
    error.__cause__ = exc
    return error


DRIVER_ERRORS = (Neo4jError, DriverError)
