"""Geographic helpers: coordinates, distances and campus map tiles."""

from historian.domain.geo.coordinate import Coordinate
from historian.domain.geo.distance import EARTH_RADIUS_METERS, degrees_to_radians, get_distance
from historian.domain.geo.tiles import (
    BASE_LAYER,
    CAMPUS_LAYERS,
    LABELS_LAYER,
    TileLayer,
    TileLayerName,
    tile_url,
)

__all__ = [
    "BASE_LAYER",
    "CAMPUS_LAYERS",
    "Coordinate",
    "EARTH_RADIUS_METERS",
    "LABELS_LAYER",
    "TileLayer",
    "TileLayerName",
    "degrees_to_radians",
    "get_distance",
    "tile_url",
]
