"""Memory upload model."""

import base64
from datetime import datetime
from typing import Any

from pydantic import Field

from historian.domain.geo.coordinate import Coordinate
from historian.domain.shared.model.value import ValueObject

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
BASE64_LINE_LENGTH = 64


def format_timestamp(date: datetime) -> str:
    """Format a date the way the server accepts upload timestamps."""
    return date.strftime(TIMESTAMP_FORMAT)


def encode_image(image: bytes) -> str:
    """Base64-encode image bytes wrapped at 64 characters with CRLF line breaks."""
    encoded = base64.b64encode(image).decode("ascii")
    lines = [
        encoded[i : i + BASE64_LINE_LENGTH] for i in range(0, len(encoded), BASE64_LINE_LENGTH)
    ]
    return "\r\n".join(lines)


class Memory(ValueObject):
    """A photo memory a user posts at a campus location.

    ``image`` holds already-encoded JPEG bytes; compressing the picture is the
    caller's job.
    """

    title: str
    desc: str
    timestamp: datetime
    uploader: str
    location: Coordinate
    image: bytes = Field(repr=False)

    @property
    def timestamp_string(self) -> str:
        return format_timestamp(self.timestamp)

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for the add-memory endpoint."""
        return {
            "title": self.title,
            "desc": self.desc,
            "timestamp": self.timestamp_string,
            "uploader": self.uploader,
            "location": self.location.to_wire(),
            "image": encode_image(self.image),
        }
