# planargeom

Planar (2D) geometry in pure Python, with no dependencies outside the
standard library: the simple-feature geometry types, conversion to and from
WKT text, WKB and GeoJSON, and a set of measures, accessors, transforms and
constructors.

## Installation

```
pip install planargeom
```

To run the test suite:

```
pip install "planargeom[test]"
pytest
```

## Geometry types

`planargeom.geometry` holds the geometry model. All geometries are frozen
dataclasses:

- `Point(vertex=None)`: an empty point has no vertex
- `LineString(vertices)`
- `Polygon(rings)`: the shell ring first, then the holes (`shell` gives the first ring)
- `MultiPoint(points)`, `MultiLineString(lines)`, `MultiPolygon(polygons)`
- `GeometryCollection(geometries)`

Coordinates are `Vertex(x, y)` values. The constructors also accept plain
`(x, y)` pairs, and the multi-geometries accept raw coordinates for their
members. Each geometry has a `type` (a `GeometryType` member) and the methods
`is_empty()`, `dimension()`, `iter_vertices()` and `bounding_box()`. The last
returns a `BoundingBox`, or `None` when there are no vertices. `BoundingBox`
has `intersects(other)` and `union(other)`, and `LineString` has
`is_closed()`.

There are also fixed-shape types: `Point2D(x, y)` (NaN coordinates mean
empty), `LineString2D(vertices)`, `Polygon2D(rings)` and
`Box2D(min_x, min_y, max_x, max_y)`.

The module-level helpers are:

- `geometry_type(value)`: any geometry, `Point2D`, `LineString2D` or `Polygon2D`
- `dimension(geom)`: geometries only
- `is_empty(value)`: any geometry, `LineString2D` or `Polygon2D`

They raise `TypeError` for other values. A geometry built from invalid parts
raises `GeometryError`, which is a `ValueError`.

```python
from planargeom.geometry import LineString, Point, Vertex, geometry_type

line = LineString([(0, 0), (3, 4)])
geometry_type(line)          # GeometryType.LINESTRING
line.bounding_box()          # BoundingBox(minx=0.0, miny=0.0, maxx=3.0, maxy=4.0)
Point().is_empty()           # True
```

## Text, WKB and GeoJSON

- `planargeom.text`: `as_text(value)` renders WKT for any geometry or
  fixed shape. A `Box2D` renders as `BOX(minx miny, maxx maxy)`. Whole-number
  coordinates are written without a decimal point. The per-type functions
  `geometry_to_text`, `point2d_to_text`, `linestring2d_to_text`,
  `polygon2d_to_text`, `box2d_to_text` and `format_coord` are also available.
- `planargeom.wkb`:
  - `write_wkb(geom)` writes little-endian WKB.
  - `read_wkb(data)` reads WKB in either byte order, as well as EWKB and ISO
    Z/M variants. It keeps only x and y and drops any SRID.
  - `as_hex_wkb(geom)` and `from_hex_wkb(text)` do the same in upper-case
    hexadecimal.
  - `point2d_from_wkb`, `linestring2d_from_wkb` and `polygon2d_from_wkb` read
    little-endian 2D WKB into the fixed shapes.
  - Bad input raises `WKBError`.
- `planargeom.geojson`:
  - `as_geojson(geom)` returns compact GeoJSON text, and
    `to_geojson_dict(geom)` returns the same as plain dicts and lists.
  - `from_geojson(text)` parses a geometry fragment and allows comments and
    trailing commas. `from_geojson_dict(obj, raw)` builds from an already
    parsed object.
  - Bad input raises `GeoJSONError`.

```python
from planargeom.geojson import as_geojson
from planargeom.text import as_text
from planargeom.wkb import as_hex_wkb, from_hex_wkb

same = from_hex_wkb(as_hex_wkb(line))
as_text(same)                # 'LINESTRING (0 0, 3 4)'
as_geojson(same)             # '{"type":"LineString","coordinates":[[0.0,0.0],[3.0,4.0]]}'
```

## Operations

- `planargeom.measures`:
  - `area(value)`: holes are subtracted from the shell.
  - `length(value)`
  - `extent(geom)`: returns a `Box2D`, or `None` when there are no vertices.
  - `intersects(left, right)`: compares two `Box2D` values.
  - `intersects_extent(left, right)`: compares the bounding boxes of two
    geometries.
  - `make_envelope(min_x, min_y, max_x, max_y)`
  - `envelope_agg(geoms)`, and the incremental `EnvelopeAggregate` with
    `add`, `combine` and `finalize`.
- `planargeom.counts`:
  - `n_geometries(geom)`
  - `n_interior_rings(value)`: `None` for a geometry that is not a polygon.
- `planargeom.accessors`:
  - `end_point(value)` and `exterior_ring(value)`: both return `None` when
    the value has no such part.
- `planargeom.transform`: `flip_coordinates(value)` swaps x and y.
- `planargeom.constructors`:
  - `collect(geoms)`
  - `collection_extract(geom, requested_type=None)`: 1 gives points, 2 lines,
    3 polygons. With no type given, it takes the highest dimension present.
  - `make_line(points)` and `make_line_between(start, end)`
  - `make_polygon(shell, holes=None)`: the shell and every hole must be
    closed and have at least 4 vertices.

```python
from planargeom.constructors import make_line
from planargeom.geometry import Point
from planargeom.measures import area, length, make_envelope

length(make_line([Point((0, 0)), Point((3, 4))]))   # 5.0
area(make_envelope(0, 0, 2, 3))                      # 6.0
```

## What it does not do

planargeom is a library only. It has none of the following:

- a command-line tool
- storage, indexing or query support
- coordinate reference systems
- Z or M values
- predicates or overlay operations beyond bounding-box intersection