"""Historical content command."""

import cyclopts

from historian.cli.console import get_console
from historian.cli.util import exit_on_failure, run_with_client

app = cyclopts.App(name="content", help="Historical content for a landmark")


@app.default
def content(geofence: str, /) -> None:
    """Show the historical entries attached to a landmark.

    Args:
        geofence: Landmark name (e.g., 'Skinner Memorial Chapel')
    """
    result = run_with_client(lambda client: client.request_content(geofence))
    exit_on_failure(result)

    console = get_console()
    rows = [record.as_mapping() for record in result]
    console.table(
        rows,
        [("type", "Type"), ("year", "Year"), ("summary", "Summary"), ("caption", "Caption")],
        title=geofence,
        numbered=True,
    )
