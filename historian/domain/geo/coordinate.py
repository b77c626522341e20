"""Geographic coordinate value object."""

from pydantic import Field

from historian.domain.shared.model.value import ValueObject


class Coordinate(ValueObject):
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    def to_wire(self) -> dict[str, float]:
        """Render as the backend's ``{"lat", "lng"}`` object."""
        return {"lat": self.latitude, "lng": self.longitude}
