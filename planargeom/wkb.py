"""Well-known-binary reading and writing, including hex-encoded and EWKB input."""

from __future__ import annotations

import binascii
import math
import struct
from typing import List, Tuple, Union

from .geometry import (
    Geometry,
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
)

BytesLike = Union[bytes, bytearray, memoryview]

_EWKB_Z = 0x80000000
_EWKB_M = 0x40000000
_EWKB_SRID = 0x20000000

_WKB_CODES = {
    GeometryType.POINT: 1,
    GeometryType.LINESTRING: 2,
    GeometryType.POLYGON: 3,
    GeometryType.MULTIPOINT: 4,
    GeometryType.MULTILINESTRING: 5,
    GeometryType.MULTIPOLYGON: 6,
    GeometryType.GEOMETRYCOLLECTION: 7,
}
_TYPES_BY_CODE = {code: kind for kind, code in _WKB_CODES.items()}


class WKBError(GeometryError):
    """Raised when a WKB or hex WKB value cannot be decoded."""


class _Reader:
    """Cursor over a WKB buffer."""

    def __init__(self, data: BytesLike) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, got {type(data).__name__}")
        self._data = bytes(data)
        self._pos = 0

    def _take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise WKBError(
                f"unexpected end of WKB data: need {size} bytes at offset {self._pos}, "
                f"only {len(self._data) - self._pos} left"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def byte_order(self) -> str:
        order = self._take(1)[0]
        if order == 0:
            return ">"
        if order == 1:
            return "<"
        raise WKBError(f"invalid WKB byte order marker: {order}")

    def uint32(self, order: str) -> int:
        return struct.unpack(order + "I", self._take(4))[0]

    def doubles(self, order: str, count: int) -> Tuple[float, ...]:
        return struct.unpack(f"{order}{count}d", self._take(8 * count))


class _Header:
    __slots__ = ("order", "kind", "dims")

    def __init__(self, order: str, kind: GeometryType, dims: int) -> None:
        self.order = order
        self.kind = kind
        self.dims = dims


def _read_header(reader: _Reader) -> _Header:
    order = reader.byte_order()
    raw = reader.uint32(order)
    has_z = bool(raw & _EWKB_Z)
    has_m = bool(raw & _EWKB_M)
    has_srid = bool(raw & _EWKB_SRID)
    code = raw & 0x0000FFFF
    iso_flags, code = divmod(code, 1000)
    if iso_flags == 1:
        has_z = True
    elif iso_flags == 2:
        has_m = True
    elif iso_flags == 3:
        has_z = has_m = True
    elif iso_flags != 0:
        raise WKBError(f"unsupported WKB geometry type: {raw}")
    kind = _TYPES_BY_CODE.get(code)
    if kind is None:
        raise WKBError(f"unsupported WKB geometry type: {raw}")
    if has_srid:
        reader.uint32(order)  # the SRID is read and ignored
    return _Header(order, kind, 2 + has_z + has_m)


def _read_vertex(reader: _Reader, header: _Header) -> Tuple[float, float]:
    coords = reader.doubles(header.order, header.dims)
    return coords[0], coords[1]


def _read_vertices(reader: _Reader, header: _Header) -> List[Vertex]:
    count = reader.uint32(header.order)
    return [Vertex(*_read_vertex(reader, header)) for _ in range(count)]


def _read_rings(reader: _Reader, header: _Header) -> List[List[Vertex]]:
    count = reader.uint32(header.order)
    return [_read_vertices(reader, header) for _ in range(count)]


def _read_geometry(reader: _Reader) -> Geometry:
    header = _read_header(reader)
    kind = header.kind
    if kind is GeometryType.POINT:
        x, y = _read_vertex(reader, header)
        if math.isnan(x) and math.isnan(y):
            return Point()
        return Point(Vertex(x, y))
    if kind is GeometryType.LINESTRING:
        return LineString(_read_vertices(reader, header))
    if kind is GeometryType.POLYGON:
        return Polygon(_read_rings(reader, header))

    count = reader.uint32(header.order)
    children = [_read_geometry(reader) for _ in range(count)]
    expected = {
        GeometryType.MULTIPOINT: Point,
        GeometryType.MULTILINESTRING: LineString,
        GeometryType.MULTIPOLYGON: Polygon,
    }.get(kind)
    if expected is not None:
        for child in children:
            if not isinstance(child, expected):
                raise WKBError(f"{kind.name} may not contain a {child.type.name}")
    if kind is GeometryType.MULTIPOINT:
        return MultiPoint(children)
    if kind is GeometryType.MULTILINESTRING:
        return MultiLineString(children)
    if kind is GeometryType.MULTIPOLYGON:
        return MultiPolygon(children)
    return GeometryCollection(children)


def read_wkb(data: BytesLike) -> Geometry:
    """Decode a WKB or EWKB value; any SRID and Z/M values are dropped."""
    return _read_geometry(_Reader(data))


def _write(geom: Geometry, out: bytearray) -> None:
    out += struct.pack("<BI", 1, _WKB_CODES[geom.type])
    if isinstance(geom, Point):
        vertex = geom.vertex
        if vertex is None:
            out += struct.pack("<2d", math.nan, math.nan)
        else:
            out += struct.pack("<2d", vertex.x, vertex.y)
    elif isinstance(geom, LineString):
        _write_vertices(geom.vertices, out)
    elif isinstance(geom, Polygon):
        out += struct.pack("<I", len(geom.rings))
        for ring in geom.rings:
            _write_vertices(ring, out)
    elif isinstance(geom, (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)):
        members = list(geom)
        out += struct.pack("<I", len(members))
        for member in members:
            _write(member, out)
    else:
        raise TypeError(f"cannot encode {type(geom).__name__} as WKB")


def _write_vertices(vertices: Tuple[Vertex, ...], out: bytearray) -> None:
    out += struct.pack("<I", len(vertices))
    for v in vertices:
        out += struct.pack("<2d", v.x, v.y)


def write_wkb(geom: Geometry) -> bytes:
    """Encode a geometry as little-endian WKB."""
    if not isinstance(geom, Geometry):
        raise TypeError(f"write_wkb is not defined for {type(geom).__name__}")
    out = bytearray()
    _write(geom, out)
    return bytes(out)


def as_hex_wkb(geom: Geometry) -> str:
    """Encode a geometry as upper-case hexadecimal WKB."""
    return write_wkb(geom).hex().upper()


def from_hex_wkb(text: str) -> Geometry:
    """Decode a hexadecimal WKB or EWKB string."""
    if len(text) % 2 == 1:
        raise WKBError("Invalid HEX WKB string, length must be even.")
    try:
        data = binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise WKBError(f"Invalid HEX WKB string: {text!r}") from exc
    return read_wkb(data)


def _simple_header(reader: _Reader, code: int) -> None:
    if reader.byte_order() != "<":
        raise WKBError("only little-endian WKB is supported here")
    found = reader.uint32("<")
    if found != code:
        raise WKBError(f"expected WKB geometry type {code}, found {found}")


def _simple_vertices(reader: _Reader) -> List[Vertex]:
    count = reader.uint32("<")
    values = reader.doubles("<", 2 * count)
    return [Vertex(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def point2d_from_wkb(data: BytesLike) -> Point2D:
    """Decode a little-endian 2D WKB point."""
    reader = _Reader(data)
    _simple_header(reader, 1)
    x, y = reader.doubles("<", 2)
    return Point2D(x, y)


def linestring2d_from_wkb(data: BytesLike) -> LineString2D:
    """Decode a little-endian 2D WKB line string."""
    reader = _Reader(data)
    _simple_header(reader, 2)
    return LineString2D(_simple_vertices(reader))


def polygon2d_from_wkb(data: BytesLike) -> Polygon2D:
    """Decode a little-endian 2D WKB polygon."""
    reader = _Reader(data)
    _simple_header(reader, 3)
    ring_count = reader.uint32("<")
    return Polygon2D([_simple_vertices(reader) for _ in range(ring_count)])