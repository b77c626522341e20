"""Decoded content records.

Every record kind is a frozen model tagged by ``kind``. ``as_mapping()``
renders a record as the flat string-to-string mapping the UI layer reads,
using the backend's key names (``desc``, ``taken``, ``lat`` ...). Optional
keys are left out of the mapping when they were absent from the payload.
"""

from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import Field

from historian.domain.geo.coordinate import Coordinate
from historian.domain.shared.model.value import ValueObject


class RecordKind(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    MEMORY = "memory"
    GEOFENCE = "geofence"


class _Dated(ValueObject):
    """Optional display date parts shared by historical entries."""

    year: str | None = None
    month: str | None = None
    day: str | None = None

    def _date_parts(self) -> dict[str, str]:
        parts = {"year": self.year, "month": self.month, "day": self.day}
        return {k: v for k, v in parts.items() if v is not None}


class TextRecord(_Dated):
    """A historical fact rendered as text."""

    kind: Literal[RecordKind.TEXT] = RecordKind.TEXT
    summary: str
    description: str

    def as_mapping(self) -> dict[str, str]:
        return {
            "type": str(self.kind),
            "summary": self.summary,
            "desc": self.description,
            **self._date_parts(),
        }


class ImageRecord(_Dated):
    """A historical photo; ``data`` is the base64 image as sent by the server."""

    kind: Literal[RecordKind.IMAGE] = RecordKind.IMAGE
    description: str
    caption: str
    data: str

    def as_mapping(self) -> dict[str, str]:
        return {
            "type": str(self.kind),
            "desc": self.description,
            "caption": self.caption,
            "data": self.data,
            **self._date_parts(),
        }


class MemoryRecord(ValueObject):
    """A user-posted memory near the current location."""

    kind: Literal[RecordKind.MEMORY] = RecordKind.MEMORY
    data: str
    description: str
    caption: str
    uploader: str
    taken: str  # "YYYY-MM-DD HH:MM:SS"
    posted: str
    year: str  # derived from `taken`, see decode_memory_element

    def as_mapping(self) -> dict[str, str]:
        return {
            "type": str(self.kind),
            "data": self.data,
            "desc": self.description,
            "caption": self.caption,
            "uploader": self.uploader,
            "taken": self.taken,
            "posted": self.posted,
            "year": self.year,
        }


class GeofenceRecord(ValueObject):
    """A circular landmark region."""

    kind: Literal[RecordKind.GEOFENCE] = RecordKind.GEOFENCE
    name: str
    radius: int  # meters
    center: Coordinate

    def as_mapping(self) -> dict[str, str]:
        return {
            "type": str(self.kind),
            "name": self.name,
            "radius": str(self.radius),
            "lat": str(self.center.latitude),
            "lng": str(self.center.longitude),
        }


# Historical content arrays mix text and image entries
ContentRecord = Annotated[Union[TextRecord, ImageRecord], Field(discriminator="kind")]

AnyRecord = Annotated[
    Union[TextRecord, ImageRecord, MemoryRecord, GeofenceRecord],
    Field(discriminator="kind"),
]
