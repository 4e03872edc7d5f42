import json

import pytest

from planargeom.geojson import (
    GeoJSONError,
    as_geojson,
    from_geojson,
    from_geojson_dict,
    to_geojson_dict,
)
from planargeom.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
HOLE = [(1, 1), (2, 1), (2, 2), (1, 1)]

SAMPLES = [
    Point((1.5, -2.0)),
    Point(),
    LineString([(0, 0), (1, 1), (2, 0)]),
    LineString(),
    Polygon([SQUARE, HOLE]),
    Polygon(),
    MultiPoint([Point((1, 2)), Point((3, 4))]),
    MultiPoint(),
    MultiLineString([LineString([(0, 0), (1, 1)]), LineString([(2, 2), (3, 3)])]),
    MultiPolygon([Polygon([SQUARE]), Polygon([SQUARE, HOLE])]),
    GeometryCollection([Point((1, 1)), LineString([(0, 0), (5, 5)])]),
    GeometryCollection(),
]


@pytest.mark.parametrize("geom", SAMPLES)
def test_round_trip(geom):
    assert from_geojson(as_geojson(geom)) == geom


@pytest.mark.parametrize("geom", SAMPLES)
def test_dict_round_trip(geom):
    assert from_geojson_dict(to_geojson_dict(geom)) == geom


def test_point_text_is_compact():
    assert as_geojson(Point((1, 2))) == '{"type":"Point","coordinates":[1.0,2.0]}'


def test_empty_point_has_empty_coordinates():
    assert to_geojson_dict(Point()) == {"type": "Point", "coordinates": []}


def test_collection_uses_geometries_key():
    result = json.loads(as_geojson(GeometryCollection([Point((1, 2))])))
    assert result["type"] == "GeometryCollection"
    assert result["geometries"] == [{"type": "Point", "coordinates": [1.0, 2.0]}]


def test_multipoint_skips_empty_members():
    result = to_geojson_dict(MultiPoint([Point((1, 2)), Point()]))
    assert result["coordinates"] == [[1.0, 2.0]]


def test_comments_and_trailing_commas_allowed():
    text = '{"type": "LineString", /* note */ "coordinates": [[0, 0], [1, 2],], // end\n}'
    assert from_geojson(text) == LineString([(0, 0), (1, 2)])


def test_integer_coordinates_become_floats():
    geom = from_geojson('{"type":"Point","coordinates":[3,4]}')
    assert geom.vertex.x == 3.0 and isinstance(geom.vertex.x, float)


@pytest.mark.parametrize(
    "text, message",
    [
        ("not json", "Could not parse GeoJSON input"),
        ("[1, 2]", "Could not parse GeoJSON input"),
        ('{"coordinates": []}', "does not have a type field"),
        ('{"type": 5, "coordinates": []}', "type field is not a string"),
        ('{"type": "Point"}', "does not have a coordinates field"),
        ('{"type": "Point", "coordinates": 5}', "coordinates field is not an array"),
        ('{"type": "Point", "coordinates": [1, 2, 3]}', "array of length 2 or 0"),
        ('{"type": "Point", "coordinates": ["a", 2]}', "not an array of numbers"),
        ('{"type": "LineString", "coordinates": [1, 2]}', "not an array of arrays"),
        ('{"type": "LineString", "coordinates": [[1, 2, 3]]}', "arrays of length 2"),
        ('{"type": "LineString", "coordinates": [[1, true]]}', "arrays of numbers"),
        ('{"type": "MultiPoint", "coordinates": [[1]]}', "arrays of length 2"),
        ('{"type": "Circle", "coordinates": []}', "invalid type field"),
        ('{"type": "GeometryCollection"}', "does not have a geometries field"),
        ('{"type": "GeometryCollection", "geometries": 1}', "geometries field is not an array"),
        ('{"type": "GeometryCollection", "geometries": [3]}', "does not have a type field"),
    ],
)
def test_invalid_input(text, message):
    with pytest.raises(GeoJSONError, match=message):
        from_geojson(text)


def test_unsupported_value_rejected():
    with pytest.raises(TypeError):
        to_geojson_dict("POINT (1 2)")