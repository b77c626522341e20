"""historian - campus history data client and tolerant record decoder."""

from historian.domain.content.model.outcome import DecodeResult, FailureKind
from historian.domain.content.model.value import (
    GeofenceRecord,
    ImageRecord,
    MemoryRecord,
    RecordKind,
    TextRecord,
)
from historian.domain.content.service.decoder import (
    Feed,
    decode,
    decode_geofences,
    decode_historical,
    decode_memories,
)
from historian.domain.geo.coordinate import Coordinate
from historian.domain.geo.distance import get_distance
from historian.domain.memory.model import Memory
from historian.infrastructure.http.client import HistoricalDataClient

__all__ = [
    "Coordinate",
    "DecodeResult",
    "FailureKind",
    "Feed",
    "GeofenceRecord",
    "HistoricalDataClient",
    "ImageRecord",
    "Memory",
    "MemoryRecord",
    "RecordKind",
    "TextRecord",
    "decode",
    "decode_geofences",
    "decode_historical",
    "decode_memories",
    "get_distance",
]
