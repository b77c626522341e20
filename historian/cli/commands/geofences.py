"""Nearby geofences command."""

import cyclopts

from historian.cli.console import get_console
from historian.cli.util import exit_on_failure, run_with_client
from historian.domain.geo.coordinate import Coordinate
from historian.domain.geo.distance import get_distance

app = cyclopts.App(name="geofences", help="Landmarks near a location")


@app.default
def geofences(lat: float, lng: float, /, radius: int = 100) -> None:
    """List geofences near a location, closest first.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees
        radius: Search radius in meters
    """
    here = Coordinate(latitude=lat, longitude=lng)
    result = run_with_client(lambda client: client.request_nearby_geofences(here, radius))
    exit_on_failure(result)

    rows = []
    for fence in sorted(result, key=lambda f: get_distance(here, f.center)):
        row = fence.as_mapping()
        row["distance"] = f"{get_distance(here, fence.center):.0f} m"
        rows.append(row)

    get_console().table(
        rows,
        [("name", "Name"), ("radius", "Radius (m)"), ("distance", "Distance")],
        numbered=True,
    )
