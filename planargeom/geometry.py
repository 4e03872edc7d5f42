"""Planar geometry model: vertices, geometries, fixed 2D shapes and basic predicates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Iterable, Iterator, Optional, Sequence, Tuple, Union


class GeometryError(ValueError):
    """Raised when a geometry is built from invalid parts."""


class GeometryType(IntEnum):
    """Kinds of geometry, in their fixed canonical order."""

    POINT = 0
    LINESTRING = 1
    POLYGON = 2
    MULTIPOINT = 3
    MULTILINESTRING = 4
    MULTIPOLYGON = 5
    GEOMETRYCOLLECTION = 6
    UNKNOWN = 7


@dataclass(frozen=True)
class Vertex:
    """A single planar coordinate."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


VertexLike = Union[Vertex, Sequence[float]]


def _vertex(value: VertexLike) -> Vertex:
    if isinstance(value, Vertex):
        return value
    try:
        x, y = value
        return Vertex(float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise GeometryError(f"expected an (x, y) pair, got {value!r}") from exc


def _vertices(values: Iterable[VertexLike]) -> Tuple[Vertex, ...]:
    return tuple(_vertex(v) for v in values)


def _rings(values: Iterable[Iterable[VertexLike]]) -> Tuple[Tuple[Vertex, ...], ...]:
    return tuple(_vertices(ring) for ring in values)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent of a set of vertices."""

    minx: float
    miny: float
    maxx: float
    maxy: float

    def intersects(self, other: "BoundingBox") -> bool:
        """True if the two boxes overlap or touch."""
        return not (
            self.minx > other.maxx
            or self.maxx < other.minx
            or self.miny > other.maxy
            or self.maxy < other.miny
        )

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """The smallest box holding both boxes."""
        return BoundingBox(
            min(self.minx, other.minx),
            min(self.miny, other.miny),
            max(self.maxx, other.maxx),
            max(self.maxy, other.maxy),
        )

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> Optional["BoundingBox"]:
        """The extent of the vertices, or None when there are none."""
        box: Optional[BoundingBox] = None
        for v in vertices:
            point_box = cls(v.x, v.y, v.x, v.y)
            box = point_box if box is None else box.union(point_box)
        return box


class Geometry:
    """Base class of all variable-size geometries."""

    type: ClassVar[GeometryType] = GeometryType.UNKNOWN

    def is_empty(self) -> bool:
        raise NotImplementedError

    def dimension(self) -> int:
        raise NotImplementedError

    def iter_vertices(self) -> Iterator[Vertex]:
        raise NotImplementedError

    def bounding_box(self) -> Optional[BoundingBox]:
        """The extent of every vertex, or None for a geometry without vertices."""
        return BoundingBox.from_vertices(self.iter_vertices())


@dataclass(frozen=True)
class Point(Geometry):
    """A point; an empty point has no vertex."""

    vertex: Optional[Vertex] = None
    type: ClassVar[GeometryType] = GeometryType.POINT

    def __post_init__(self) -> None:
        if self.vertex is not None:
            object.__setattr__(self, "vertex", _vertex(self.vertex))

    def is_empty(self) -> bool:
        return self.vertex is None

    def dimension(self) -> int:
        return 0

    def iter_vertices(self) -> Iterator[Vertex]:
        if self.vertex is not None:
            yield self.vertex


@dataclass(frozen=True)
class LineString(Geometry):
    """An ordered sequence of vertices."""

    vertices: Tuple[Vertex, ...] = ()
    type: ClassVar[GeometryType] = GeometryType.LINESTRING

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", _vertices(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def is_empty(self) -> bool:
        return not self.vertices

    def dimension(self) -> int:
        return 1

    def iter_vertices(self) -> Iterator[Vertex]:
        yield from self.vertices

    def is_closed(self) -> bool:
        """True if the line has vertices and its first and last are equal."""
        return bool(self.vertices) and self.vertices[0] == self.vertices[-1]


@dataclass(frozen=True)
class Polygon(Geometry):
    """A shell ring followed by any number of hole rings."""

    rings: Tuple[Tuple[Vertex, ...], ...] = ()
    type: ClassVar[GeometryType] = GeometryType.POLYGON

    def __post_init__(self) -> None:
        object.__setattr__(self, "rings", _rings(self.rings))

    def __len__(self) -> int:
        return len(self.rings)

    @property
    def shell(self) -> Tuple[Vertex, ...]:
        return self.rings[0] if self.rings else ()

    def is_empty(self) -> bool:
        return not self.rings

    def dimension(self) -> int:
        return 2

    def iter_vertices(self) -> Iterator[Vertex]:
        for ring in self.rings:
            yield from ring


@dataclass(frozen=True)
class MultiPoint(Geometry):
    """A collection of points."""

    points: Tuple[Point, ...] = ()
    type: ClassVar[GeometryType] = GeometryType.MULTIPOINT

    def __post_init__(self) -> None:
        points = tuple(p if isinstance(p, Point) else Point(_vertex(p)) for p in self.points)
        object.__setattr__(self, "points", points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        return not self.points

    def dimension(self) -> int:
        return 0

    def iter_vertices(self) -> Iterator[Vertex]:
        for p in self.points:
            yield from p.iter_vertices()


@dataclass(frozen=True)
class MultiLineString(Geometry):
    """A collection of line strings."""

    lines: Tuple[LineString, ...] = ()
    type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING

    def __post_init__(self) -> None:
        lines = tuple(ln if isinstance(ln, LineString) else LineString(ln) for ln in self.lines)
        object.__setattr__(self, "lines", lines)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def dimension(self) -> int:
        return 1

    def iter_vertices(self) -> Iterator[Vertex]:
        for line in self.lines:
            yield from line.iter_vertices()


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    """A collection of polygons."""

    polygons: Tuple[Polygon, ...] = ()
    type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON

    def __post_init__(self) -> None:
        polys = tuple(p if isinstance(p, Polygon) else Polygon(p) for p in self.polygons)
        object.__setattr__(self, "polygons", polys)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __len__(self) -> int:
        return len(self.polygons)

    def is_empty(self) -> bool:
        return not self.polygons

    def dimension(self) -> int:
        return 2

    def iter_vertices(self) -> Iterator[Vertex]:
        for poly in self.polygons:
            yield from poly.iter_vertices()


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """A heterogeneous collection of geometries."""

    geometries: Tuple[Geometry, ...] = ()
    type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION

    def __post_init__(self) -> None:
        geoms = tuple(self.geometries)
        for g in geoms:
            if not isinstance(g, Geometry):
                raise GeometryError(f"collection members must be geometries, got {g!r}")
        object.__setattr__(self, "geometries", geoms)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)

    def __len__(self) -> int:
        return len(self.geometries)

    def is_empty(self) -> bool:
        return not self.geometries

    def dimension(self) -> int:
        return max((g.dimension() for g in self.geometries), default=0)

    def iter_vertices(self) -> Iterator[Vertex]:
        for g in self.geometries:
            yield from g.iter_vertices()


@dataclass(frozen=True)
class Point2D:
    """A fixed-size 2D point; NaN coordinates denote an empty point."""

    x: float
    y: float


@dataclass(frozen=True)
class LineString2D:
    """A fixed-layout 2D line string."""

    vertices: Tuple[Vertex, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", _vertices(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class Polygon2D:
    """A fixed-layout 2D polygon: shell ring first, then holes."""

    rings: Tuple[Tuple[Vertex, ...], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rings", _rings(self.rings))

    def __len__(self) -> int:
        return len(self.rings)


@dataclass(frozen=True)
class Box2D:
    """An axis-aligned 2D box."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float


def geometry_type(value: object) -> GeometryType:
    """The kind of geometry the value holds."""
    if isinstance(value, Point2D):
        return GeometryType.POINT
    if isinstance(value, LineString2D):
        return GeometryType.LINESTRING
    if isinstance(value, Polygon2D):
        return GeometryType.POLYGON
    if isinstance(value, Geometry):
        return value.type
    raise TypeError(f"geometry_type is not defined for {type(value).__name__}")


def dimension(geom: object) -> int:
    """The topological dimension of a geometry."""
    if not isinstance(geom, Geometry):
        raise TypeError(f"dimension is not defined for {type(geom).__name__}")
    return geom.dimension()


def is_empty(value: object) -> bool:
    """True if the value holds no coordinates."""
    if isinstance(value, (LineString2D, Polygon2D)):
        return len(value) == 0
    if isinstance(value, Geometry):
        return value.is_empty()
    raise TypeError(f"is_empty is not defined for {type(value).__name__}")