"""GeoJSON geometry fragments: rendering geometries and parsing them back."""

from __future__ import annotations

import json
from typing import Any, Dict, List

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


class GeoJSONError(GeometryError):
    """Raised when a GeoJSON fragment cannot be turned into a geometry."""


# ---------------------------------------------------------------------------
# Geometry -> GeoJSON
# ---------------------------------------------------------------------------


def _coords(vertices) -> List[List[float]]:
    return [[float(v.x), float(v.y)] for v in vertices]


def to_geojson_dict(geom: Geometry) -> Dict[str, Any]:
    """The GeoJSON geometry object for a geometry, as plain dicts and lists."""
    if isinstance(geom, Point):
        coords = [] if geom.vertex is None else [float(geom.vertex.x), float(geom.vertex.y)]
        return {"type": "Point", "coordinates": coords}
    if isinstance(geom, LineString):
        return {"type": "LineString", "coordinates": _coords(geom.vertices)}
    if isinstance(geom, Polygon):
        return {"type": "Polygon", "coordinates": [_coords(r) for r in geom.rings]}
    if isinstance(geom, MultiPoint):
        # Empty member points contribute no coordinates.
        coords = [c for p in geom for c in _coords(p.iter_vertices())]
        return {"type": "MultiPoint", "coordinates": coords}
    if isinstance(geom, MultiLineString):
        return {"type": "MultiLineString", "coordinates": [_coords(ln.vertices) for ln in geom]}
    if isinstance(geom, MultiPolygon):
        return {
            "type": "MultiPolygon",
            "coordinates": [[_coords(r) for r in poly.rings] for poly in geom],
        }
    if isinstance(geom, GeometryCollection):
        return {"type": "GeometryCollection", "geometries": [to_geojson_dict(g) for g in geom]}
    raise TypeError(f"Geometry type {type(geom).__name__} not supported")


def as_geojson(geom: Geometry) -> str:
    """The compact GeoJSON text for a geometry."""
    return json.dumps(to_geojson_dict(geom), separators=(",", ":"))


# ---------------------------------------------------------------------------
# GeoJSON -> Geometry
# ---------------------------------------------------------------------------


def _is_num(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _point(coords: list, raw: str) -> Point:
    if len(coords) == 0:
        return Point()
    if len(coords) == 2:
        x, y = coords
        if not _is_num(x) or not _is_num(y):
            raise GeoJSONError(
                f"GeoJSON input coordinates field is not an array of numbers: {raw}"
            )
        return Point(Vertex(float(x), float(y)))
    raise GeoJSONError(
        f"GeoJSON input coordinates field is not an array of length 2 or 0: {raw}"
    )


def _vertices(coords: list, raw: str) -> List[Vertex]:
    result = []
    for coord in coords:
        if not isinstance(coord, list):
            raise GeoJSONError(
                f"GeoJSON input coordinates field is not an array of arrays: {raw}"
            )
        if len(coord) != 2:
            raise GeoJSONError(
                f"GeoJSON input coordinates field is not an array of arrays of length 2: {raw}"
            )
        x, y = coord
        if not _is_num(x) or not _is_num(y):
            raise GeoJSONError(
                f"GeoJSON input coordinates field is not an array of arrays of numbers: {raw}"
            )
        result.append(Vertex(float(x), float(y)))
    return result


def _require_array(value: Any, raw: str) -> list:
    if not isinstance(value, list):
        raise GeoJSONError(f"GeoJSON input coordinates field is not an array of arrays: {raw}")
    return value


def _polygon(coords: list, raw: str) -> Polygon:
    return Polygon([_vertices(_require_array(ring, raw), raw) for ring in coords])


def _multipoint(coords: list, raw: str) -> MultiPoint:
    points = []
    for item in coords:
        _require_array(item, raw)
        if len(item) != 2:
            raise GeoJSONError(
                f"GeoJSON input coordinates field is not an array of arrays of length 2: {raw}"
            )
        points.append(_point(item, raw))
    return MultiPoint(points)


def _multilinestring(coords: list, raw: str) -> MultiLineString:
    return MultiLineString(
        [LineString(_vertices(_require_array(item, raw), raw)) for item in coords]
    )


def _multipolygon(coords: list, raw: str) -> MultiPolygon:
    return MultiPolygon([_polygon(_require_array(item, raw), raw) for item in coords])


def _collection(obj: dict, raw: str) -> GeometryCollection:
    if "geometries" not in obj:
        raise GeoJSONError(f"GeoJSON input does not have a geometries field: {raw}")
    geometries = obj["geometries"]
    if not isinstance(geometries, list):
        raise GeoJSONError(f"GeoJSON input geometries field is not an array: {raw}")
    return GeometryCollection([from_geojson_dict(g, raw) for g in geometries])


_BUILDERS = {
    "Point": _point,
    "LineString": lambda coords, raw: LineString(_vertices(coords, raw)),
    "Polygon": _polygon,
    "MultiPoint": _multipoint,
    "MultiLineString": _multilinestring,
    "MultiPolygon": _multipolygon,
}


def from_geojson_dict(obj: Any, raw: str = "") -> Geometry:
    """Build a geometry from a parsed GeoJSON geometry object; raw is quoted in errors."""
    if not isinstance(obj, dict) or "type" not in obj:
        raise GeoJSONError(f"GeoJSON input does not have a type field: {raw}")
    kind = obj["type"]
    if not isinstance(kind, str):
        raise GeoJSONError(f"GeoJSON input type field is not a string: {raw}")
    if kind == "GeometryCollection":
        return _collection(obj, raw)
    if "coordinates" not in obj:
        raise GeoJSONError(f"GeoJSON input does not have a coordinates field: {raw}")
    coords = obj["coordinates"]
    if not isinstance(coords, list):
        raise GeoJSONError(f"GeoJSON input coordinates field is not an array: {raw}")
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise GeoJSONError(f"GeoJSON input has invalid type field: {raw}")
    return builder(coords, raw)


def _strip_comments(text: str) -> str:
    out = []
    i, n = 0, len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
        elif ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise GeoJSONError("unclosed comment")
            out.append(" ")
            i = end + 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _strip_trailing_commas(text: str) -> str:
    out = []
    i, n = 0, len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
            out.append(ch)
        elif ch == ",":
            j = i + 1
            while j < n and text[j] in " \t\r\n":
                j += 1
            if not (j < n and text[j] in "]}"):
                out.append(ch)
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def from_geojson(text: str) -> Geometry:
    """Parse a GeoJSON geometry fragment; comments and trailing commas are allowed."""
    try:
        cleaned = _strip_trailing_commas(_strip_comments(text))
        root = json.loads(cleaned)
    except (GeoJSONError, ValueError) as exc:
        raise GeoJSONError(f"Could not parse GeoJSON input: {exc}, ({text})") from exc
    if not isinstance(root, dict):
        raise GeoJSONError(f"Could not parse GeoJSON input: root is not an object, ({text})")
    return from_geojson_dict(root, text)