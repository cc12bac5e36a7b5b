"""Map Cypher property types to Arrow column types."""

from __future__ import annotations

import datetime
from typing import Any

import pyarrow as pa
from neo4j.spatial import Point
from neo4j.time import Date, DateTime, Duration, Time

# Values of the ``type`` member carried by the composite structs
POINT_TYPE_2D = "point-2d"
POINT_TYPE_3D = "point-3d"

TIME_TYPE_OFFSET = "offset-time"
TIME_TYPE_LOCAL = "local-time"

DURATION_TYPE = "duration"

ARRAY_SUFFIX = "Array"

DURATION_STRUCT = pa.struct(
    [
        pa.field("type", pa.string(), nullable=False),
        pa.field("months", pa.int64(), nullable=False),
        pa.field("days", pa.int64(), nullable=False),
        pa.field("seconds", pa.int64(), nullable=False),
        pa.field("nanoseconds", pa.int32(), nullable=False),
        pa.field("value", pa.string(), nullable=False),
    ]
)

POINT_STRUCT = pa.struct(
    [
        pa.field("type", pa.string(), nullable=False),
        pa.field("srid", pa.int32(), nullable=False),
        pa.field("x", pa.float64(), nullable=False),
        pa.field("y", pa.float64(), nullable=False),
        pa.field("z", pa.float64(), nullable=True),
    ]
)

TIME_STRUCT = pa.struct(
    [
        pa.field("type", pa.string(), nullable=False),
        pa.field("value", pa.string(), nullable=False),
    ]
)

TIMESTAMP = pa.timestamp("us")

_SCALAR_TYPES: dict[str, pa.DataType] = {
    "Boolean": pa.bool_(),
    "String": pa.string(),
    "Long": pa.int64(),
    "Double": pa.float64(),
    "Point": POINT_STRUCT,
    "InternalPoint2D": POINT_STRUCT,
    "InternalPoint3D": POINT_STRUCT,
    "LocalDateTime": TIMESTAMP,
    "DateTime": TIMESTAMP,
    "ZonedDateTime": TIMESTAMP,
    "OffsetTime": TIME_STRUCT,
    "Time": TIME_STRUCT,
    "LocalTime": TIME_STRUCT,
    "LocalDate": pa.date32(),
    "Date": pa.date32(),
    "Duration": DURATION_STRUCT,
    "InternalIsoDuration": DURATION_STRUCT,
}


def cypher_to_arrow_type(cypher_type: str) -> pa.DataType:
    """
    Return the Arrow type for a Cypher type name such as ``Long`` or ``DateTimeArray``.
    Names not in the table (including bare ``Array``) map to string.
    """
    name = cypher_type or ""
    if name.endswith(ARRAY_SUFFIX):
        element = _SCALAR_TYPES.get(name[: -len(ARRAY_SUFFIX)])
        if element is not None:
            return pa.list_(element)
    return _SCALAR_TYPES.get(name, pa.string())


def cypher_type_name(value: Any) -> str:
    """
    Return the Cypher type name of a property value as returned by the neo4j driver.
    Unrecognized values give their Python class name, which maps to string.
    """
    # bool is an int subclass
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, int):
        return "Long"
    if isinstance(value, float):
        return "Double"
    if isinstance(value, str):
        return "String"
    if isinstance(value, Point):
        return "Point"
    if isinstance(value, (DateTime, datetime.datetime)):
        return "ZonedDateTime" if value.tzinfo is not None else "LocalDateTime"
    if isinstance(value, (Date, datetime.date)):
        return "LocalDate"
    if isinstance(value, (Time, datetime.time)):
        return "OffsetTime" if value.tzinfo is not None else "LocalTime"
    if isinstance(value, (Duration, datetime.timedelta)):
        return "Duration"
    return type(value).__name__
