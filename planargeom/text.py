"""Well-known-text rendering of geometries and fixed 2D shapes."""

from __future__ import annotations

import math
from typing import Iterable

from .geometry import (
    Box2D,
    Geometry,
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
    Vertex,
)


def _format_number(value: float) -> str:
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_coord(x: float, y: float) -> str:
    """Render a coordinate pair as 'x y' without trailing zeros."""
    return f"{_format_number(x)} {_format_number(y)}"


def _coords(vertices: Iterable[Vertex]) -> str:
    return ", ".join(format_coord(v.x, v.y) for v in vertices)


def _ring(vertices: Iterable[Vertex]) -> str:
    return f"({_coords(vertices)})"


def _rings(rings: Iterable[Iterable[Vertex]]) -> str:
    return "(" + ", ".join(_ring(r) for r in rings) + ")"


def point2d_to_text(point: Point2D) -> str:
    """WKT for a fixed 2D point; NaN coordinates give an empty point."""
    if math.isnan(point.x) or math.isnan(point.y):
        return "POINT EMPTY"
    return f"POINT ({format_coord(point.x, point.y)})"


def linestring2d_to_text(line: LineString2D) -> str:
    """WKT for a fixed 2D line string."""
    if not line.vertices:
        return "LINESTRING EMPTY"
    return f"LINESTRING {_ring(line.vertices)}"


def polygon2d_to_text(polygon: Polygon2D) -> str:
    """WKT for a fixed 2D polygon."""
    if not polygon.rings:
        return "POLYGON EMPTY"
    return f"POLYGON {_rings(polygon.rings)}"


def box2d_to_text(box: Box2D) -> str:
    """Text for a box: its minimum and maximum corners."""
    return f"BOX({format_coord(box.min_x, box.min_y)}, {format_coord(box.max_x, box.max_y)})"


def _point_body(point: Point) -> str:
    if point.vertex is None:
        return "EMPTY"
    return format_coord(point.vertex.x, point.vertex.y)


def geometry_to_text(geom: Geometry) -> str:
    """WKT for any geometry."""
    name = geom.type.name
    if geom.is_empty():
        return f"{name} EMPTY"
    if isinstance(geom, Point):
        return f"POINT ({_point_body(geom)})"
    if isinstance(geom, LineString):
        return f"LINESTRING {_ring(geom.vertices)}"
    if isinstance(geom, Polygon):
        return f"POLYGON {_rings(geom.rings)}"
    if isinstance(geom, MultiPoint):
        return "MULTIPOINT (" + ", ".join(_point_body(p) for p in geom) + ")"
    if isinstance(geom, MultiLineString):
        return "MULTILINESTRING (" + ", ".join(_ring(ln.vertices) for ln in geom) + ")"
    if isinstance(geom, MultiPolygon):
        return "MULTIPOLYGON (" + ", ".join(_rings(p.rings) for p in geom) + ")"
    if isinstance(geom, GeometryCollection):
        return "GEOMETRYCOLLECTION (" + ", ".join(geometry_to_text(g) for g in geom) + ")"
    raise TypeError(f"cannot render {type(geom).__name__} as text")


def as_text(value: object) -> str:
    """WKT for a geometry or a fixed 2D shape."""
    if isinstance(value, Point2D):
        return point2d_to_text(value)
    if isinstance(value, LineString2D):
        return linestring2d_to_text(value)
    if isinstance(value, Polygon2D):
        return polygon2d_to_text(value)
    if isinstance(value, Box2D):
        return box2d_to_text(value)
    if isinstance(value, Geometry):
        return geometry_to_text(value)
    raise TypeError(f"as_text is not defined for {type(value).__name__}")