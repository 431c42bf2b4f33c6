"""Bounding boxes of geometries, features and feature collections.

Two computations live here:

* the general one (`compute` and friends) works in any dimension, seeds the
  running box from the first real position and returns an `Envelope` made of
  separate `min` and `max` vectors, or `None` when there is nothing to bound
  or when the dimensions of the positions disagree;
* the lon/lat one (`lonlat_bbox` and friends) only looks at the first two
  axes and always returns the RFC 7946 `[west, south, east, north]` array,
  starting from an inverted world extent.

Both treat an entity as plain data: `type` names the kind, `coordinates` or
`geometries` / `geometry` / `features` hold the children, `bbox` the cached box.
"""
from geojson_kit.enums.geometry_type import GeoJSONType, GeometryType
from typing import Any, Iterable, NamedTuple, Sequence
import logging


logger = logging.getLogger(__name__)

# west, south, east, north: an inverted world extent, so that any real
# coordinate tightens it
LONLAT_SEED = (180.0, 90.0, -180.0, -90.0)


class Envelope(NamedTuple):
    min: list[float]
    max: list[float]

    @property
    def dimension(self) -> int:
        return len(self.min)

    def to_bbox(self) -> list[float]:
        return [*self.min, *self.max]


class _DimensionMismatch(Exception):
    pass


# ----- Cached bbox -----

def is_well_formed(bbox: Any) -> bool:
    """Whether `bbox` can be trusted as `[min_0..min_D-1, max_0..max_D-1]`. Never raises."""
    try:
        if len(bbox) == 0 or len(bbox) % 2 != 0:
            return False
        dimension = len(bbox) // 2
        return all(bbox[i] <= bbox[i + dimension] for i in range(dimension))
    except TypeError:
        return False


def split(bbox: Sequence[float]) -> Envelope:
    dimension = len(bbox) // 2
    return Envelope(list(bbox[:dimension]), list(bbox[dimension:]))


def _cached(entity: Any, force: bool) -> Envelope | None:
    if not force and is_well_formed(entity.bbox):
        return split(entity.bbox)
    return None


# ----- General mode -----

def _combine(running: Envelope | None, other: Envelope | None) -> Envelope | None:
    if other is None:
        return running
    if running is None:
        return Envelope(list(other.min), list(other.max))
    if running.dimension != other.dimension:
        raise _DimensionMismatch(running.dimension, other.dimension)
    for axis in range(running.dimension):
        running.min[axis] = min(running.min[axis], other.min[axis])
        running.max[axis] = max(running.max[axis], other.max[axis])
    return running


def _reduce_children(children: Iterable[Any], reduce_child) -> Envelope | None:
    running = None
    for child in children:
        running = _combine(running, reduce_child(child))
    return running


def _reduce_block(block: Any, depth: int) -> Envelope | None:
    # depth 0 is a single position, anything above is a list of sub-blocks
    if depth == 0:
        return Envelope(list(block), list(block))
    return _reduce_children(block, lambda child: _reduce_block(child, depth - 1))


def _geometry(geometry: Any, force: bool) -> Envelope | None:
    cached = _cached(geometry, force)
    if cached is not None:
        return cached
    kind = GeometryType(geometry.type)
    if kind is GeometryType.GEOMETRY_COLLECTION:
        return _reduce_children(geometry.geometries, lambda child: _geometry(child, force))
    return _reduce_block(geometry.coordinates, kind.coordinate_depth)


def _feature(feature: Any, force: bool) -> Envelope | None:
    cached = _cached(feature, force)
    if cached is not None:
        return cached
    if feature.geometry is None:
        return None
    return _geometry(feature.geometry, force)


def _feature_collection(collection: Any, force: bool) -> Envelope | None:
    cached = _cached(collection, force)
    if cached is not None:
        return cached
    return _reduce_children(collection.features, lambda feature: _feature(feature, force))


def _guarded(reduce, entity: Any, force: bool) -> Envelope | None:
    try:
        return reduce(entity, force)
    except _DimensionMismatch as exc:
        logger.debug('No bounding box for %s: mixes %dD and %dD positions', entity.type, *exc.args)
        return None


def envelope(positions: Iterable[Sequence[float]]) -> Envelope | None:
    """Envelope of a flat list of positions, `None` when empty or of mixed dimension."""
    try:
        return _reduce_block(positions, 1)
    except _DimensionMismatch as exc:
        logger.debug('No bounding box: mixes %dD and %dD positions', *exc.args)
        return None


def merge(a: Envelope | None, b: Envelope | None) -> Envelope | None:
    """Smallest envelope covering both `a` and `b`.

    `None` stands for "nothing to cover" on either side. Envelopes of
    different dimension cannot be merged and give `None`.
    """
    try:
        return _combine(_combine(None, a), b)
    except _DimensionMismatch as exc:
        logger.debug('Cannot merge a %dD envelope with a %dD envelope', *exc.args)
        return None


def geometry_envelope(geometry: Any, force: bool = False) -> Envelope | None:
    return _guarded(_geometry, geometry, force)


def feature_envelope(feature: Any, force: bool = False) -> Envelope | None:
    return _guarded(_feature, feature, force)


def collection_envelope(collection: Any, force: bool = False) -> Envelope | None:
    return _guarded(_feature_collection, collection, force)


def compute(entity: Any, force: bool = False) -> Envelope | None:
    """Envelope of a geometry, feature or feature collection.

    Unless `force` is set, a well-formed `bbox` already stored on the entity
    (or on any of its children) is returned as is, without looking at the
    coordinates. The result is never written back to the entity.
    Children without any position (an empty MultiPoint, a feature without
    geometry) are skipped; the result is None only when nothing has a position.
    """
    if entity.type == GeoJSONType.FEATURE:
        return feature_envelope(entity, force)
    if entity.type == GeoJSONType.FEATURE_COLLECTION:
        return collection_envelope(entity, force)
    return geometry_envelope(entity, force)


# ----- Lon/lat mode -----

def lonlat_points(positions: Iterable[Sequence[float]]) -> list[float]:
    west, south, east, north = LONLAT_SEED
    for position in positions:
        x, y = position[0], position[1]
        west, east = min(west, x), max(east, x)
        south, north = min(south, y), max(north, y)
    return [west, south, east, north]


def lonlat_push(bbox1: Sequence[float], bbox2: Sequence[float]) -> list[float]:
    return [
        min(bbox1[0], bbox2[0]),
        min(bbox1[1], bbox2[1]),
        max(bbox1[2], bbox2[2]),
        max(bbox1[3], bbox2[3]),
    ]


def lonlat_expand(bboxes: Iterable[Sequence[float]]) -> list[float]:
    result = None
    for bbox in bboxes:
        result = list(bbox) if result is None else lonlat_push(result, bbox)
    return list(LONLAT_SEED) if result is None else result


def _lonlat_block(block: Any, depth: int) -> list[float]:
    if depth == 0:
        return [block[0], block[1], block[0], block[1]]
    if depth == 1:
        return lonlat_points(block)
    return lonlat_expand(_lonlat_block(child, depth - 1) for child in block)


def lonlat_bbox(geometry: Any) -> list[float]:
    """`[west, south, east, north]` of a geometry, looking at x and y only.

    Meant for longitude/latitude data: nothing is read from the cached bbox
    and an empty geometry gives back the inverted seed `[180, 90, -180, -90]`.
    """
    kind = GeometryType(geometry.type)
    if kind is GeometryType.GEOMETRY_COLLECTION:
        return lonlat_expand(lonlat_bbox(child) for child in geometry.geometries)
    return _lonlat_block(geometry.coordinates, kind.coordinate_depth)


def lonlat_feature_bbox(feature: Any) -> list[float]:
    if feature.geometry is None:
        return list(LONLAT_SEED)
    return lonlat_bbox(feature.geometry)


def lonlat_collection_bbox(collection: Any) -> list[float]:
    return lonlat_expand(lonlat_feature_bbox(feature) for feature in collection.features)


def lonlat(entity: Any) -> list[float]:
    if entity.type == GeoJSONType.FEATURE:
        return lonlat_feature_bbox(entity)
    if entity.type == GeoJSONType.FEATURE_COLLECTION:
        return lonlat_collection_bbox(entity)
    return lonlat_bbox(entity)
