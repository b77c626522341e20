from historian.domain.content.model.outcome import DecodeResult, FailureKind
from historian.domain.content.model.value import (
    AnyRecord,
    ContentRecord,
    GeofenceRecord,
    ImageRecord,
    MemoryRecord,
    RecordKind,
    TextRecord,
)

__all__ = [
    "AnyRecord",
    "ContentRecord",
    "DecodeResult",
    "FailureKind",
    "GeofenceRecord",
    "ImageRecord",
    "MemoryRecord",
    "RecordKind",
    "TextRecord",
]
