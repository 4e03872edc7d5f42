"""Area, length, extents and envelopes of geometries and fixed 2D shapes."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from .geometry import (
    BoundingBox,
    Box2D,
    Geometry,
    GeometryCollection,
    LineString,
    LineString2D,
    MultiLineString,
    MultiPolygon,
    Point2D,
    Polygon,
    Polygon2D,
    Vertex,
)


def _ring_area(ring: Sequence[Vertex]) -> float:
    twice = sum(a.x * b.y - b.x * a.y for a, b in zip(ring, ring[1:]))
    return abs(twice) * 0.5


def _rings_area(rings: Sequence[Sequence[Vertex]]) -> float:
    if not rings:
        return 0.0
    shell, *holes = rings
    return _ring_area(shell) - sum(_ring_area(hole) for hole in holes)


def _polygonal_area(geom: Geometry) -> float:
    if isinstance(geom, Polygon):
        return _rings_area(geom.rings)
    if isinstance(geom, MultiPolygon):
        return sum(_rings_area(p.rings) for p in geom)
    return 0.0


def area(value: object) -> float:
    """The planar area; points and lines have none, holes are subtracted from shells."""
    if isinstance(value, (Point2D, LineString2D)):
        return 0.0
    if isinstance(value, Polygon2D):
        return _rings_area(value.rings)
    if isinstance(value, Box2D):
        return (value.max_x - value.min_x) * (value.max_y - value.min_y)
    if isinstance(value, GeometryCollection):
        # Only direct polygonal members count.
        return sum((_polygonal_area(g) for g in value), 0.0)
    if isinstance(value, Geometry):
        return _polygonal_area(value)
    raise TypeError(f"area is not defined for {type(value).__name__}")


def _line_length(vertices: Sequence[Vertex]) -> float:
    return sum(math.hypot(a.x - b.x, a.y - b.y) for a, b in zip(vertices, vertices[1:]))


def _lineal_length(geom: Geometry) -> float:
    if isinstance(geom, LineString):
        return _line_length(geom.vertices)
    if isinstance(geom, MultiLineString):
        return sum(_line_length(ln.vertices) for ln in geom)
    return 0.0


def length(value: object) -> float:
    """The total length of the line work; other geometries have none."""
    if isinstance(value, LineString2D):
        return _line_length(value.vertices)
    if isinstance(value, GeometryCollection):
        # Only direct lineal members count.
        return sum((_lineal_length(g) for g in value), 0.0)
    if isinstance(value, Geometry):
        return _lineal_length(value)
    raise TypeError(f"length is not defined for {type(value).__name__}")


def extent(geom: Geometry) -> Optional[Box2D]:
    """The bounding box of a geometry, or None when it has no vertices."""
    if not isinstance(geom, Geometry):
        raise TypeError(f"extent is not defined for {type(geom).__name__}")
    box = geom.bounding_box()
    if box is None:
        return None
    return Box2D(box.minx, box.miny, box.maxx, box.maxy)


def intersects_extent(left: Geometry, right: Geometry) -> bool:
    """True if the bounding boxes of both geometries exist and overlap."""
    for geom in (left, right):
        if not isinstance(geom, Geometry):
            raise TypeError(f"intersects_extent is not defined for {type(geom).__name__}")
    left_box = left.bounding_box()
    right_box = right.bounding_box()
    if left_box is None or right_box is None:
        return False
    return left_box.intersects(right_box)


def intersects(left: Box2D, right: Box2D) -> bool:
    """True if two boxes overlap or touch."""
    for box in (left, right):
        if not isinstance(box, Box2D):
            raise TypeError(f"intersects is not defined for {type(box).__name__}")
    return not (
        left.min_x > right.max_x
        or left.max_x < right.min_x
        or left.min_y > right.max_y
        or left.max_y < right.min_y
    )


def _box_polygon(minx: float, miny: float, maxx: float, maxy: float) -> Polygon:
    return Polygon(
        [
            [
                Vertex(minx, miny),
                Vertex(maxx, miny),
                Vertex(maxx, maxy),
                Vertex(minx, maxy),
                Vertex(minx, miny),
            ]
        ]
    )


class EnvelopeAggregate:
    """Running union of the extents of geometries; None inputs are ignored."""

    def __init__(self) -> None:
        self.box: Optional[BoundingBox] = None

    def add(self, geom: Optional[Geometry]) -> None:
        """Grow the envelope by the extent of a geometry."""
        if geom is None:
            return
        if not isinstance(geom, Geometry):
            raise TypeError(f"cannot aggregate {type(geom).__name__}")
        box = geom.bounding_box()
        if box is None:
            return
        self.box = box if self.box is None else self.box.union(box)

    def combine(self, other: "EnvelopeAggregate") -> None:
        """Merge another aggregate's envelope into this one."""
        if other.box is None:
            return
        self.box = other.box if self.box is None else self.box.union(other.box)

    def finalize(self) -> Optional[Polygon]:
        """The envelope as a polygon, or None if nothing with vertices was added."""
        if self.box is None:
            return None
        b = self.box
        return _box_polygon(b.minx, b.miny, b.maxx, b.maxy)


def envelope_agg(geoms: Iterable[Optional[Geometry]]) -> Optional[Polygon]:
    """The envelope polygon of all the geometries, or None if none have vertices."""
    agg = EnvelopeAggregate()
    for geom in geoms:
        agg.add(geom)
    return agg.finalize()


def make_envelope(min_x: float, min_y: float, max_x: float, max_y: float) -> Polygon:
    """A rectangular polygon from its corner coordinates."""
    return Polygon(
        [
            [
                Vertex(min_x, min_y),
                Vertex(min_x, max_y),
                Vertex(max_x, max_y),
                Vertex(max_x, min_y),
                Vertex(min_x, min_y),
            ]
        ]
    )