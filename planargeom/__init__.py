"""Planar 2D geometry types, WKT/WKB/GeoJSON conversion, measures, accessors and constructors."""

__version__ = "0.1.0"

__all__ = [
    "accessors",
    "constructors",
    "counts",
    "geojson",
    "geometry",
    "measures",
    "text",
    "transform",
    "wkb",
]