"""Campus map tile layers.

The tile renderer itself lives in the UI; this module only describes the
layers and builds the URL for a given tile.
"""

from enum import StrEnum

from historian.domain.shared.model.value import ValueObject

TILE_URL_TEMPLATE = (
    "https://www.carleton.edu/global_stock/images/campus_map/tiles/"
    "{layer}/{zoom}_{x}_{y}.png"
)
TILE_SIZE = 256


class TileLayerName(StrEnum):
    BASE = "base"
    LABELS = "labels"


class TileLayer(ValueObject):
    """A URL-backed tile overlay drawn at a fixed z-index."""

    name: TileLayerName
    z_index: int
    tile_size: int = TILE_SIZE

    def url(self, x: int, y: int, zoom: int) -> str:
        """Build the tile URL for the given coordinates."""
        return tile_url(self.name, x, y, zoom)


def tile_url(layer: TileLayerName | str, x: int, y: int, zoom: int) -> str:
    """Build the URL of a campus map tile.

    Raises:
        ValueError: If x, y or zoom is negative, or the layer is unknown.
    """
    if x < 0 or y < 0 or zoom < 0:
        raise ValueError(f"Tile coordinates must be non-negative: x={x}, y={y}, zoom={zoom}")
    layer = TileLayerName(layer)
    return TILE_URL_TEMPLATE.format(layer=layer.value, zoom=zoom, x=x, y=y)


# Labels sit on top of the base imagery
BASE_LAYER = TileLayer(name=TileLayerName.BASE, z_index=0)
LABELS_LAYER = TileLayer(name=TileLayerName.LABELS, z_index=1)
CAMPUS_LAYERS: tuple[TileLayer, ...] = (BASE_LAYER, LABELS_LAYER)
