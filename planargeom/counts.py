"""Counting members of collections and interior rings of polygons."""

from __future__ import annotations

from typing import Optional

from .geometry import (
    Geometry,
    GeometryCollection,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Polygon,
    Polygon2D,
)


def n_geometries(geom: Geometry) -> int:
    """Members of a multi-geometry or collection; 1 for other non-empty geometries, else 0."""
    if isinstance(geom, (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)):
        return len(geom)
    if isinstance(geom, Geometry):
        return 0 if geom.is_empty() else 1
    raise TypeError(f"n_geometries is not defined for {type(geom).__name__}")


def n_interior_rings(value: object) -> Optional[int]:
    """Holes in a polygon; None for a geometry that is not a polygon."""
    if isinstance(value, (Polygon2D, Polygon)):
        return max(len(value.rings) - 1, 0)
    if isinstance(value, Geometry):
        return None
    raise TypeError(f"n_interior_rings is not defined for {type(value).__name__}")