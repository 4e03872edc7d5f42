import math

import pytest

from planargeom.geometry import (
    Box2D,
    GeometryCollection,
    LineString,
    LineString2D,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Point2D,
    Polygon,
    Polygon2D,
)
from planargeom.text import (
    as_text,
    box2d_to_text,
    format_coord,
    geometry_to_text,
    linestring2d_to_text,
    point2d_to_text,
    polygon2d_to_text,
)

SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]
HOLE = [(0.25, 0.25), (0.5, 0.25), (0.5, 0.5), (0.25, 0.25)]


def test_format_coord_trims_integral_values():
    assert format_coord(1.0, 2.0) == "1 2"


def test_format_coord_keeps_fractions():
    assert format_coord(1.5, -2.25) == "1.5 -2.25"


def test_box_text():
    assert box2d_to_text(Box2D(0, 0, 1, 1)) == "BOX(0 0, 1 1)"


def test_point2d_empty_when_nan():
    assert point2d_to_text(Point2D(math.nan, 1)) == "POINT EMPTY"
    assert point2d_to_text(Point2D(1, math.nan)) == "POINT EMPTY"


def test_point2d_text_wraps_coord():
    assert point2d_to_text(Point2D(3, 4)) == "POINT (" + format_coord(3, 4) + ")"


def test_linestring2d_text():
    assert linestring2d_to_text(LineString2D()) == "LINESTRING EMPTY"
    text = linestring2d_to_text(LineString2D([(0, 0), (1, 1), (2, 0)]))
    assert text.startswith("LINESTRING (")
    assert text.endswith(")")
    assert text.count(", ") == 2
    assert format_coord(2, 0) in text


def test_polygon2d_text():
    assert polygon2d_to_text(Polygon2D()) == "POLYGON EMPTY"
    text = polygon2d_to_text(Polygon2D([SQUARE, HOLE]))
    assert text.startswith("POLYGON ((")
    assert text.count("(") == 3
    assert text.count(")") == 3
    assert format_coord(0.25, 0.25) in text


def test_geometry_matches_fixed_types():
    assert geometry_to_text(Point((3, 4))) == point2d_to_text(Point2D(3, 4))
    line = [(0, 0), (1.5, 2)]
    assert geometry_to_text(LineString(line)) == linestring2d_to_text(LineString2D(line))
    assert geometry_to_text(Polygon([SQUARE, HOLE])) == polygon2d_to_text(Polygon2D([SQUARE, HOLE]))


@pytest.mark.parametrize(
    "geom, name",
    [
        (Point(), "POINT"),
        (LineString(), "LINESTRING"),
        (Polygon(), "POLYGON"),
        (MultiPoint(), "MULTIPOINT"),
        (MultiLineString(), "MULTILINESTRING"),
        (MultiPolygon(), "MULTIPOLYGON"),
        (GeometryCollection(), "GEOMETRYCOLLECTION"),
    ],
)
def test_empty_geometries(geom, name):
    assert geometry_to_text(geom) == f"{name} EMPTY"


def test_multi_geometries_contain_members():
    mline = MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]])
    text = geometry_to_text(mline)
    assert text.startswith("MULTILINESTRING ((")
    assert text.count("(") == 3

    mpoly = MultiPolygon([[SQUARE], [SQUARE, HOLE]])
    text = geometry_to_text(mpoly)
    assert text.startswith("MULTIPOLYGON (((")
    assert text.count("(") == 6

    mpoint = MultiPoint([(1, 2), (3, 4)])
    assert format_coord(3, 4) in geometry_to_text(mpoint)


def test_collection_embeds_member_text():
    pt = Point((1, 2))
    ln = LineString([(0, 0), (1, 1)])
    text = geometry_to_text(GeometryCollection([pt, ln]))
    assert text == "GEOMETRYCOLLECTION (" + geometry_to_text(pt) + ", " + geometry_to_text(ln) + ")"


def test_as_text_dispatch():
    box = Box2D(0, 0, 1, 1)
    assert as_text(box) == box2d_to_text(box)
    assert as_text(Point2D(3, 4)) == point2d_to_text(Point2D(3, 4))
    assert as_text(LineString2D()) == "LINESTRING EMPTY"
    assert as_text(Polygon2D()) == "POLYGON EMPTY"
    assert as_text(Point()) == "POINT EMPTY"


def test_as_text_rejects_unknown():
    with pytest.raises(TypeError):
        as_text(42)