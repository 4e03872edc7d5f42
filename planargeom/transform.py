"""Coordinate transforms on geometries and fixed 2D shapes."""

from __future__ import annotations

from typing import Iterable, Tuple, TypeVar

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

T = TypeVar("T")


def _flip_vertex(vertex: Vertex) -> Vertex:
    return Vertex(vertex.y, vertex.x)


def _flip_vertices(vertices: Iterable[Vertex]) -> Tuple[Vertex, ...]:
    return tuple(_flip_vertex(v) for v in vertices)


def _flip_rings(rings: Iterable[Iterable[Vertex]]) -> Tuple[Tuple[Vertex, ...], ...]:
    return tuple(_flip_vertices(ring) for ring in rings)


def _flip_geometry(geom: Geometry) -> Geometry:
    if isinstance(geom, Point):
        return Point(None if geom.vertex is None else _flip_vertex(geom.vertex))
    if isinstance(geom, LineString):
        return LineString(_flip_vertices(geom.vertices))
    if isinstance(geom, Polygon):
        return Polygon(_flip_rings(geom.rings))
    if isinstance(geom, MultiPoint):
        return MultiPoint(tuple(_flip_geometry(p) for p in geom))
    if isinstance(geom, MultiLineString):
        return MultiLineString(tuple(_flip_geometry(ln) for ln in geom))
    if isinstance(geom, MultiPolygon):
        return MultiPolygon(tuple(_flip_geometry(p) for p in geom))
    if isinstance(geom, GeometryCollection):
        return GeometryCollection(tuple(_flip_geometry(g) for g in geom))
    raise NotImplementedError(f"Unimplemented geometry type: {type(geom).__name__}")


def flip_coordinates(value: T) -> T:
    """A copy of the value with every x and y coordinate swapped."""
    if isinstance(value, Point2D):
        return Point2D(value.y, value.x)
    if isinstance(value, LineString2D):
        return LineString2D(_flip_vertices(value.vertices))
    if isinstance(value, Polygon2D):
        return Polygon2D(_flip_rings(value.rings))
    if isinstance(value, Box2D):
        return Box2D(value.min_y, value.min_x, value.max_y, value.max_x)
    if isinstance(value, Geometry):
        return _flip_geometry(value)
    raise TypeError(f"flip_coordinates is not defined for {type(value).__name__}")