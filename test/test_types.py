"""Cypher type name -> Arrow type mapping."""

import datetime

import pyarrow as pa
import pytest
from neo4j.spatial import CartesianPoint, WGS84Point
from neo4j.time import Date, DateTime, Duration, Time

from graph_schema.types import (
    DURATION_TYPE,
    DURATION_STRUCT,
    POINT_STRUCT,
    POINT_TYPE_2D,
    POINT_TYPE_3D,
    TIME_STRUCT,
    TIME_TYPE_LOCAL,
    TIME_TYPE_OFFSET,
    cypher_to_arrow_type,
    cypher_type_name,
)

SCALARS = {
    "Boolean": pa.bool_(),
    "String": pa.string(),
    "Long": pa.int64(),
    "Double": pa.float64(),
    "Point": POINT_STRUCT,
    "InternalPoint2D": POINT_STRUCT,
    "InternalPoint3D": POINT_STRUCT,
    "LocalDateTime": pa.timestamp("us"),
    "DateTime": pa.timestamp("us"),
    "ZonedDateTime": pa.timestamp("us"),
    "OffsetTime": TIME_STRUCT,
    "Time": TIME_STRUCT,
    "LocalTime": TIME_STRUCT,
    "LocalDate": pa.date32(),
    "Date": pa.date32(),
    "Duration": DURATION_STRUCT,
    "InternalIsoDuration": DURATION_STRUCT,
}


@pytest.mark.parametrize("name,expected", sorted(SCALARS.items()))
def test_scalar_types(name, expected):
    assert cypher_to_arrow_type(name) == expected


@pytest.mark.parametrize("name,expected", sorted(SCALARS.items()))
def test_array_types(name, expected):
    assert cypher_to_arrow_type(f"{name}Array") == pa.list_(expected)


@pytest.mark.parametrize("name", ["Foo", "", "Array", "Integer", "long", "ByteArray", "MapArray", None])
def test_unknown_types_are_strings(name):
    assert cypher_to_arrow_type(name) == pa.string()


def test_examples():
    assert cypher_to_arrow_type("LongArray") == pa.list_(pa.int64())
    assert cypher_to_arrow_type("InternalPoint3D") == POINT_STRUCT
    assert cypher_to_arrow_type("Foo") == pa.string()


def test_point_struct_shape():
    assert [f.name for f in POINT_STRUCT] == ["type", "srid", "x", "y", "z"]
    assert [f.type for f in POINT_STRUCT] == [pa.string(), pa.int32(), pa.float64(), pa.float64(), pa.float64()]
    assert [f.nullable for f in POINT_STRUCT] == [False, False, False, False, True]


def test_duration_struct_shape():
    assert [f.name for f in DURATION_STRUCT] == ["type", "months", "days", "seconds", "nanoseconds", "value"]
    assert [f.type for f in DURATION_STRUCT] == [
        pa.string(),
        pa.int64(),
        pa.int64(),
        pa.int64(),
        pa.int32(),
        pa.string(),
    ]
    assert not any(f.nullable for f in DURATION_STRUCT)


def test_time_struct_shape():
    assert [(f.name, f.type, f.nullable) for f in TIME_STRUCT] == [
        ("type", pa.string(), False),
        ("value", pa.string(), False),
    ]


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "Boolean"),
        (False, "Boolean"),
        (42, "Long"),
        (1.5, "Double"),
        ("x", "String"),
        (CartesianPoint((1.0, 2.0)), "Point"),
        (WGS84Point((1.0, 2.0, 3.0)), "Point"),
        (DateTime(2024, 1, 2, 3, 4, 5), "LocalDateTime"),
        (datetime.datetime(2024, 1, 2, tzinfo=datetime.timezone.utc), "ZonedDateTime"),
        (Date(2024, 1, 2), "LocalDate"),
        (datetime.date(2024, 1, 2), "LocalDate"),
        (Time(10, 30), "LocalTime"),
        (datetime.time(10, 30, tzinfo=datetime.timezone.utc), "OffsetTime"),
        (Duration(months=1, days=2), "Duration"),
        (datetime.timedelta(seconds=3), "Duration"),
        (b"raw", "bytes"),
    ],
)
def test_cypher_type_name(value, expected):
    assert cypher_type_name(value) == expected


def test_struct_type_tags():
    # Values carried in the `type` member of the composite structs
    assert (POINT_TYPE_2D, POINT_TYPE_3D) == ("point-2d", "point-3d")
    assert (TIME_TYPE_OFFSET, TIME_TYPE_LOCAL) == ("offset-time", "local-time")
    assert DURATION_TYPE == "duration"
    for struct in (POINT_STRUCT, TIME_STRUCT, DURATION_STRUCT):
        assert struct.field("type").type == pa.string()
