"""Offline geographic helpers."""

import cyclopts

from historian.cli.console import get_console
from historian.domain.geo.coordinate import Coordinate
from historian.domain.geo.distance import get_distance
from historian.domain.geo.tiles import TileLayerName, tile_url

app = cyclopts.App(name="geo", help="Distance and map tile helpers")


@app.command
def distance(lat1: float, lng1: float, lat2: float, lng2: float, /) -> None:
    """Print the great-circle distance between two points in meters."""
    meters = get_distance(
        Coordinate(latitude=lat1, longitude=lng1),
        Coordinate(latitude=lat2, longitude=lng2),
    )
    get_console().print(f"{meters:.1f} m")


@app.command
def tile(layer: TileLayerName, x: int, y: int, zoom: int, /) -> None:
    """Print the URL of a campus map tile."""
    get_console().print(tile_url(layer, x, y, zoom))
