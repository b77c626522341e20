"""Tolerant record decoder.

Turns a JSON-like response payload into a batch of typed records. A batch is
all-or-nothing: the first element that is missing a required key (or carries
it with the wrong type) aborts the batch and no records are returned.

Element decoders raise MalformedElementError; batch decoders convert every
outcome into a DecodeResult so callers only ever inspect one channel.
"""

import logging
from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import ValidationError

from historian.domain.content.model.outcome import DecodeResult, FailureKind
from historian.domain.content.model.value import (
    GeofenceRecord,
    ImageRecord,
    MemoryRecord,
    RecordKind,
    TextRecord,
)
from historian.domain.geo.coordinate import Coordinate
from historian.domain.shared.error import MalformedElementError

logger = logging.getLogger(__name__)

R = TypeVar("R")

_MISSING = object()


class Feed(StrEnum):
    """Which backend array a payload carries."""

    HISTORICAL = "historical"  # content.<geofence name>
    MEMORIES = "memories"  # content
    GEOFENCES = "geofences"  # content


# =============================================================================
# Field readers
# =============================================================================


def _lookup(element: Any, path: str) -> Any:
    """Follow a dotted path through nested mappings, or return _MISSING."""
    value = element
    for part in path.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _is_number(value: Any) -> bool:
    # JSON booleans decode to bool, which Python treats as an int
    return isinstance(value, int | float) and not isinstance(value, bool)


def require_str(element: Any, path: str) -> str:
    value = _lookup(element, path)
    if value is _MISSING or value is None:
        raise MalformedElementError(f"Missing required key '{path}'", field=path)
    if not isinstance(value, str):
        raise MalformedElementError(
            f"Key '{path}' must be a string, got {type(value).__name__}", field=path
        )
    return value


def require_int(element: Any, path: str) -> int:
    """Read an integer; integral floats such as ``100.0`` are accepted."""
    value = _lookup(element, path)
    if value is _MISSING or value is None:
        raise MalformedElementError(f"Missing required key '{path}'", field=path)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not _is_number(value) or isinstance(value, float):
        raise MalformedElementError(
            f"Key '{path}' must be an integer, got {value!r}", field=path
        )
    return value


def require_float(element: Any, path: str) -> float:
    value = _lookup(element, path)
    if value is _MISSING or value is None:
        raise MalformedElementError(f"Missing required key '{path}'", field=path)
    if not _is_number(value):
        raise MalformedElementError(
            f"Key '{path}' must be a number, got {value!r}", field=path
        )
    return float(value)


def optional_str(element: Any, path: str) -> str | None:
    value = _lookup(element, path)
    return value if isinstance(value, str) else None


def optional_year(element: Any) -> str | None:
    """Read ``year`` as a display string. Only numeric years are kept."""
    value = _lookup(element, "year")
    if not _is_number(value):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def derive_memory_year(taken: str) -> str:
    """Leading token of the taken timestamp, e.g. "2016-05-03 14:22:00" -> "2016-05-03".

    The result is the full date portion, not a four-digit year.
    """
    tokens = [token for token in taken.split(" ") if token]
    if not tokens:
        raise MalformedElementError(
            "Key 'timestamps.taken' is blank", field="timestamps.taken"
        )
    return tokens[0]


# =============================================================================
# Element decoders
# =============================================================================


def _require_mapping(element: Any) -> Mapping[str, Any]:
    if not isinstance(element, Mapping):
        raise MalformedElementError(
            f"Element must be an object, got {type(element).__name__}"
        )
    return element


def decode_content_element(element: Any) -> TextRecord | ImageRecord:
    """Decode one historical entry, dispatching on its ``type`` tag."""
    element = _require_mapping(element)
    kind = require_str(element, "type")

    dates = {
        "year": optional_year(element),
        "month": optional_str(element, "month"),
        "day": optional_str(element, "day"),
    }

    if kind == RecordKind.TEXT:
        return TextRecord(
            summary=require_str(element, "summary"),
            description=require_str(element, "data"),
            **dates,
        )
    if kind == RecordKind.IMAGE:
        return ImageRecord(
            description=require_str(element, "desc"),
            caption=require_str(element, "caption"),
            data=require_str(element, "data"),
            **dates,
        )
    raise MalformedElementError(f"Unknown content type '{kind}'", field="type")


def decode_memory_element(element: Any) -> MemoryRecord:
    element = _require_mapping(element)
    taken = require_str(element, "timestamps.taken")
    return MemoryRecord(
        data=require_str(element, "image"),
        caption=require_str(element, "caption"),
        description=require_str(element, "desc"),
        uploader=require_str(element, "uploader"),
        taken=taken,
        posted=require_str(element, "timestamps.posted"),
        year=derive_memory_year(taken),
    )


def decode_geofence_element(element: Any) -> GeofenceRecord:
    element = _require_mapping(element)
    name = require_str(element, "name")
    radius = require_int(element, "geofence.radius")
    latitude = require_float(element, "geofence.location.lat")
    longitude = require_float(element, "geofence.location.lng")
    try:
        center = Coordinate(latitude=latitude, longitude=longitude)
    except ValidationError as e:
        raise MalformedElementError(
            f"Geofence center out of range: ({latitude}, {longitude})",
            field="geofence.location",
        ) from e
    return GeofenceRecord(name=name, radius=radius, center=center)


# =============================================================================
# Batch decoders
# =============================================================================


def decode_batch(
    payload: Any,
    path: tuple[str, ...],
    element_decoder: Callable[[Any], R],
    label: str,
) -> DecodeResult[R]:
    """Decode the array found at ``path`` inside ``payload``.

    Args:
        payload: Parsed JSON response, or None when the transport produced nothing.
        path: Keys leading to the array (e.g. ("content", "Skinner Memorial Chapel")).
        element_decoder: Converts one element, raising MalformedElementError.
        label: Human-readable batch name for log messages.

    Returns:
        DecodeResult with every record in source order, or a failure kind.
    """
    if payload is None:
        logger.warning("Connection to server failed (%s)", label)
        return DecodeResult.failed(FailureKind.TRANSPORT_FAILURE, "No response from server")

    array: Any = payload
    for key in path:
        array = array.get(key) if isinstance(array, Mapping) else None

    if not isinstance(array, list) or not array:
        logger.info("No results were found for %s", label)
        return DecodeResult.failed(FailureKind.EMPTY_RESULT)

    records: list[R] = []
    for index, element in enumerate(array):
        try:
            records.append(element_decoder(element))
        except MalformedElementError as e:
            e.index = index
            logger.warning(
                "Data returned for %s is malformed at element %d [%s]: %s",
                label,
                index,
                e.code,
                e.message,
            )
            return DecodeResult.failed(
                FailureKind.MALFORMED_ELEMENT, f"element {index}: {e.message}"
            )

    logger.info("Data successfully retrieved for %s (%d records)", label, len(records))
    return DecodeResult.ok(records)


def decode_historical(payload: Any, geofence_name: str) -> DecodeResult[TextRecord | ImageRecord]:
    """Decode historical content for one landmark from ``content.<geofence_name>``."""
    return decode_batch(
        payload, ("content", geofence_name), decode_content_element, f"geofence '{geofence_name}'"
    )


def decode_memories(payload: Any) -> DecodeResult[MemoryRecord]:
    """Decode nearby memories from ``content``."""
    return decode_batch(payload, ("content",), decode_memory_element, "memories")


def decode_geofences(payload: Any) -> DecodeResult[GeofenceRecord]:
    """Decode nearby geofences from ``content``."""
    return decode_batch(payload, ("content",), decode_geofence_element, "geofences")


def decode(payload: Any, feed: Feed | str, key: str | None = None) -> DecodeResult:
    """Decode a payload for the given feed.

    Args:
        payload: Parsed JSON response, or None on transport failure.
        feed: Which array the payload carries.
        key: Geofence name; required for the historical feed.

    Raises:
        ValueError: If the feed is unknown or the historical feed has no key.
    """
    feed = Feed(feed)
    if feed is Feed.HISTORICAL:
        if key is None:
            raise ValueError("The historical feed needs a geofence name")
        return decode_historical(payload, key)
    if feed is Feed.MEMORIES:
        return decode_memories(payload)
    return decode_geofences(payload)
