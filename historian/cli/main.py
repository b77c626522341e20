"""Main CLI application using Cyclopts.

The CLI is a thin HTTP client over the campus backend; all decoding lives in
historian.domain.
"""

import cyclopts

from historian.cli.commands import content, geo, geofences, memories

app = cyclopts.App(
    name="historian",
    help="Campus history - CLI",
)

app.command(content.app, name="content")
app.command(memories.app, name="memories")
app.command(geofences.app, name="geofences")
app.command(geo.app, name="geo")
