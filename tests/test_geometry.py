import pytest

from planargeom.geometry import (
    BoundingBox,
    Box2D,
    GeometryCollection,
    GeometryError,
    GeometryType,
    LineString,
    LineString2D,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Point2D,
    Polygon,
    Polygon2D,
    Vertex,
    dimension,
    geometry_type,
    is_empty,
)

SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]


def test_geometry_type_order_is_fixed():
    samples = [
        Point((1, 2)),
        LineString([(0, 0), (1, 1)]),
        Polygon([SQUARE]),
        MultiPoint([(1, 2)]),
        MultiLineString([[(0, 0), (1, 1)]]),
        MultiPolygon([[SQUARE]]),
        GeometryCollection([Point((1, 2))]),
    ]
    kinds = [geometry_type(g) for g in samples]
    assert [k.name for k in kinds] == [
        "POINT",
        "LINESTRING",
        "POLYGON",
        "MULTIPOINT",
        "MULTILINESTRING",
        "MULTIPOLYGON",
        "GEOMETRYCOLLECTION",
    ]
    members = list(GeometryType)
    assert members[: len(kinds)] == kinds
    assert len(members) == len(kinds) + 1
    assert members[-1].name == "UNKNOWN"


def test_geometry_type_of_fixed_types():
    assert geometry_type(Point2D(1, 2)) is GeometryType.POINT
    assert geometry_type(LineString2D([(0, 0), (1, 1)])) is GeometryType.LINESTRING
    assert geometry_type(Polygon2D([SQUARE])) is GeometryType.POLYGON


@pytest.mark.parametrize(
    "geom, expected",
    [
        (Point((1, 2)), GeometryType.POINT),
        (LineString([(0, 0), (1, 1)]), GeometryType.LINESTRING),
        (Polygon([SQUARE]), GeometryType.POLYGON),
        (MultiPoint([(1, 2)]), GeometryType.MULTIPOINT),
        (MultiLineString([[(0, 0), (1, 1)]]), GeometryType.MULTILINESTRING),
        (MultiPolygon([[SQUARE]]), GeometryType.MULTIPOLYGON),
        (GeometryCollection([Point((1, 2))]), GeometryType.GEOMETRYCOLLECTION),
    ],
)
def test_geometry_type_of_geometries(geom, expected):
    assert geometry_type(geom) is expected


def test_geometry_type_rejects_box():
    with pytest.raises(TypeError):
        geometry_type(Box2D(0, 0, 1, 1))


def test_dimension_ordering_and_multis():
    p, ln, pg = Point((1, 2)), LineString([(0, 0), (1, 1)]), Polygon([SQUARE])
    assert dimension(p) == 0
    assert dimension(p) < dimension(ln) < dimension(pg)
    assert dimension(MultiPoint([(1, 2)])) == dimension(p)
    assert dimension(MultiLineString([[(0, 0), (1, 1)]])) == dimension(ln)
    assert dimension(MultiPolygon([[SQUARE]])) == dimension(pg)


def test_collection_dimension_is_highest_member():
    pg = Polygon([SQUARE])
    coll = GeometryCollection([Point((1, 2)), pg, LineString([(0, 0), (2, 2)])])
    assert dimension(coll) == dimension(pg)
    assert dimension(GeometryCollection()) == dimension(Point())


def test_dimension_rejects_fixed_types():
    with pytest.raises(TypeError):
        dimension(Point2D(1, 2))


def test_is_empty_geometries():
    assert is_empty(Point()) is True
    assert is_empty(Point((1, 2))) is False
    assert is_empty(LineString()) is True
    assert is_empty(Polygon()) is True
    assert is_empty(Polygon([SQUARE])) is False
    assert is_empty(MultiPoint()) is True
    assert is_empty(MultiLineString()) is True
    assert is_empty(MultiPolygon()) is True
    assert is_empty(GeometryCollection()) is True
    assert is_empty(GeometryCollection([Point()])) is False


def test_is_empty_fixed_types():
    assert is_empty(LineString2D()) is True
    assert is_empty(LineString2D([(0, 0), (1, 1)])) is False
    assert is_empty(Polygon2D()) is True
    assert is_empty(Polygon2D([SQUARE])) is False


def test_is_empty_rejects_point2d():
    with pytest.raises(TypeError):
        is_empty(Point2D(1, 2))


def test_is_closed():
    assert LineString(SQUARE).is_closed() is True
    assert LineString([(0, 0), (1, 1)]).is_closed() is False
    assert LineString().is_closed() is False


def test_vertex_coercion():
    line = LineString([(1, 2), Vertex(3, 4)])
    assert line.vertices == (Vertex(1.0, 2.0), Vertex(3.0, 4.0))
    assert tuple(Vertex(5, 6)) == (5, 6)


def test_bad_vertex_raises():
    with pytest.raises(GeometryError):
        LineString([(1, 2, 3)])
    with pytest.raises(GeometryError):
        Point(5)


def test_collection_rejects_non_geometry():
    with pytest.raises(GeometryError):
        GeometryCollection([42])


def test_bounding_box_from_vertices():
    line = LineString([(1, 5), (3, -2), (0, 4)])
    assert line.bounding_box() == BoundingBox(0, -2, 3, 5)
    assert LineString().bounding_box() is None
    assert GeometryCollection([Point()]).bounding_box() is None


def test_bounding_box_intersects_is_symmetric():
    a = BoundingBox(0, 0, 1, 1)
    touching = BoundingBox(1, 1, 2, 2)
    apart = BoundingBox(3, 3, 4, 4)
    assert a.intersects(touching) and touching.intersects(a)
    assert not a.intersects(apart) and not apart.intersects(a)


def test_bounding_box_union_contains_both():
    a = BoundingBox(0, 0, 1, 1)
    b = BoundingBox(1, 1, 2, 2)
    u = a.union(b)
    assert u == BoundingBox(0, 0, 2, 2)
    assert u.union(a) == u


def test_iter_vertices_polygon():
    hole = [(0.2, 0.2), (0.4, 0.2), (0.4, 0.4), (0.2, 0.2)]
    poly = Polygon([SQUARE, hole])
    verts = list(poly.iter_vertices())
    assert len(verts) == len(SQUARE) + len(hole)
    assert verts[0] == Vertex(0, 0)
    assert verts[-1] == Vertex(0.2, 0.2)
    assert poly.shell == tuple(Vertex(*v) for v in SQUARE)