"""Accessors for parts of line strings and polygons."""

from __future__ import annotations

from typing import Optional, Union

from .geometry import (
    Geometry,
    LineString,
    LineString2D,
    Point,
    Point2D,
    Polygon,
    Polygon2D,
)


def end_point(value: object) -> Optional[Union[Point, Point2D]]:
    """The last vertex of a line string; None for empty lines and non-line geometries."""
    if isinstance(value, LineString2D):
        if not value.vertices:
            return None
        last = value.vertices[-1]
        return Point2D(last.x, last.y)
    if isinstance(value, LineString):
        if not value.vertices:
            return None
        return Point(value.vertices[-1])
    if isinstance(value, Geometry):
        return None
    raise TypeError(f"end_point is not defined for {type(value).__name__}")


def exterior_ring(value: object) -> Optional[Union[LineString, LineString2D]]:
    """The shell of a polygon as a line string; None for non-polygon geometries."""
    if isinstance(value, Polygon2D):
        return LineString2D(value.rings[0] if value.rings else ())
    if isinstance(value, Polygon):
        return LineString(value.shell)
    if isinstance(value, Geometry):
        return None
    raise TypeError(f"exterior_ring is not defined for {type(value).__name__}")