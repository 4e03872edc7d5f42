"""Building multi-geometries, lines and polygons from other geometries."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .geometry import (
    Geometry,
    GeometryCollection,
    GeometryError,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Vertex,
)


def collect(geoms: Iterable[Optional[Geometry]]) -> Geometry:
    """Gather geometries into the narrowest multi-geometry; None entries are skipped."""
    members: List[Geometry] = []
    for geom in geoms:
        if geom is None:
            continue
        if not isinstance(geom, Geometry):
            raise TypeError(f"collect is not defined for {type(geom).__name__}")
        members.append(geom)

    if not members:
        return GeometryCollection()
    if all(isinstance(g, Point) for g in members):
        return MultiPoint(members)
    if all(isinstance(g, LineString) for g in members):
        return MultiLineString(members)
    if all(isinstance(g, Polygon) for g in members):
        return MultiPolygon(members)
    return GeometryCollection(members)


def _points(geom: Geometry) -> Iterable[Point]:
    if isinstance(geom, Point):
        yield geom
    elif isinstance(geom, MultiPoint):
        yield from geom
    elif isinstance(geom, GeometryCollection):
        for child in geom:
            yield from _points(child)


def _lines(geom: Geometry) -> Iterable[LineString]:
    if isinstance(geom, LineString):
        yield geom
    elif isinstance(geom, MultiLineString):
        yield from geom
    elif isinstance(geom, GeometryCollection):
        for child in geom:
            yield from _lines(child)


def _polygons(geom: Geometry) -> Iterable[Polygon]:
    if isinstance(geom, Polygon):
        yield geom
    elif isinstance(geom, MultiPolygon):
        yield from geom
    elif isinstance(geom, GeometryCollection):
        for child in geom:
            yield from _polygons(child)


_COLLECTIONS = (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)

# requested type -> (single kind, multi kind, member extractor)
_EXTRACTORS = {
    1: (Point, MultiPoint, _points),
    2: (LineString, MultiLineString, _lines),
    3: (Polygon, MultiPolygon, _polygons),
}


def _extract_auto(geom: Geometry) -> Geometry:
    if not isinstance(geom, GeometryCollection) or geom.is_empty():
        return geom
    dim = 0
    for child in geom:
        if not child.is_empty():
            dim = max(dim, child.dimension())
    if dim == 0:
        return MultiPoint(list(_points(geom)))
    if dim == 1:
        return MultiLineString(list(_lines(geom)))
    if dim == 2:
        return MultiPolygon(list(_polygons(geom)))
    raise GeometryError("Invalid dimension in collection extract")


def collection_extract(geom: Geometry, requested_type: Optional[int] = None) -> Geometry:
    """Extract the members of one kind: 1 points, 2 lines, 3 polygons.

    Without a requested type, a collection is reduced to its members of the
    highest dimension found among its non-empty members.
    """
    if not isinstance(geom, Geometry):
        raise TypeError(f"collection_extract is not defined for {type(geom).__name__}")
    if requested_type is None:
        return _extract_auto(geom)

    entry = _EXTRACTORS.get(requested_type)
    if entry is None:
        raise GeometryError(
            "Invalid requested type parameter for collection extract, must be 1 "
            "(POINT), 2 (LINESTRING) or 3 (POLYGON)"
        )
    single, multi, extractor = entry
    if isinstance(geom, (single, multi)):
        return geom
    if isinstance(geom, _COLLECTIONS):
        if isinstance(geom, GeometryCollection) and not geom.is_empty():
            return multi(list(extractor(geom)))
        return multi()
    return single()


def _line_from_points(points: Iterable[Point]) -> LineString:
    vertices: List[Vertex] = [p.vertex for p in points if p.vertex is not None]
    if len(vertices) == 1:
        raise GeometryError("ST_MakeLine requires zero or two or more POINT geometries")
    return LineString(vertices)


def make_line(points: Iterable[Optional[Geometry]]) -> LineString:
    """A line through the given points; None and empty points are skipped."""
    collected: List[Point] = []
    for geom in points:
        if geom is None:
            continue
        if not isinstance(geom, Point):
            raise GeometryError("ST_MakeLine only accepts POINT geometries")
        collected.append(geom)
    return _line_from_points(collected)


def make_line_between(start: Geometry, end: Geometry) -> LineString:
    """A line from one point to another; empty points are skipped."""
    if not isinstance(start, Point) or not isinstance(end, Point):
        raise GeometryError("ST_MakeLine only accepts POINT geometries")
    return _line_from_points([start, end])


def make_polygon(
    shell: Geometry, holes: Optional[Iterable[Optional[Geometry]]] = None
) -> Polygon:
    """A polygon from a closed shell line and optional closed hole lines."""
    if not isinstance(shell, LineString):
        raise GeometryError("ST_MakePolygon only accepts LINESTRING geometries")
    if len(shell) < 4:
        raise GeometryError("ST_MakePolygon shell requires at least 4 vertices")
    if not shell.is_closed():
        raise GeometryError(
            "ST_MakePolygon shell must be closed (first and last vertex must be equal)"
        )

    rings = [shell.vertices]
    for number, hole in enumerate(holes or (), start=1):
        if hole is None:
            continue
        if not isinstance(hole, LineString):
            raise GeometryError(f"ST_MakePolygon hole #{number} is not a LINESTRING geometry")
        if len(hole) < 4:
            raise GeometryError(f"ST_MakePolygon hole #{number} requires at least 4 vertices")
        if not hole.is_closed():
            raise GeometryError(
                f"ST_MakePolygon hole #{number} must be closed "
                "(first and last vertex must be equal)"
            )
        rings.append(hole.vertices)
    return Polygon(rings)