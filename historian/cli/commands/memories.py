"""Memories commands."""

import sys
from datetime import datetime
from pathlib import Path

import cyclopts

from historian.cli.console import get_console
from historian.cli.util import exit_on_failure, run_with_client
from historian.domain.geo.coordinate import Coordinate
from historian.domain.memory.model import Memory

app = cyclopts.App(name="memories", help="Memories posted around campus")


@app.default
def memories(lat: float, lng: float, /, radius: float = 0.1) -> None:
    """List memories posted near a location.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees
        radius: Search radius as understood by the server
    """
    here = Coordinate(latitude=lat, longitude=lng)
    result = run_with_client(lambda client: client.request_memories(here, radius))
    exit_on_failure(result)

    get_console().table(
        [record.as_mapping() for record in result],
        [("year", "Date"), ("caption", "Caption"), ("uploader", "Uploader")],
        numbered=True,
    )


@app.command
def upload(
    image: Path,
    /,
    *,
    title: str,
    desc: str,
    uploader: str,
    lat: float,
    lng: float,
) -> None:
    """Upload a JPEG as a memory taken now.

    Args:
        image: Path to an already-compressed JPEG
        title: Memory title
        desc: Memory description
        uploader: Name shown next to the memory
        lat: Latitude in degrees
        lng: Longitude in degrees
    """
    console = get_console()
    if not image.is_file():
        console.error(f"No such file: {image}")
        sys.exit(1)

    memory = Memory(
        title=title,
        desc=desc,
        timestamp=datetime.now(),
        uploader=uploader,
        location=Coordinate(latitude=lat, longitude=lng),
        image=image.read_bytes(),
    )
    if run_with_client(lambda client: client.upload_memory(memory)):
        console.success(f"Uploaded '{title}'")
    else:
        console.error("Upload failed.")
        sys.exit(1)
