"""Tests for the tolerant record decoder."""

import copy
from typing import Any

import pytest

from historian.domain.content.model.outcome import FailureKind
from historian.domain.content.model.value import (
    GeofenceRecord,
    ImageRecord,
    MemoryRecord,
    TextRecord,
)
from historian.domain.content.service.decoder import (
    Feed,
    decode,
    decode_content_element,
    decode_geofence_element,
    decode_geofences,
    decode_historical,
    decode_memories,
    decode_memory_element,
    derive_memory_year,
    optional_year,
    require_int,
)
from historian.domain.shared.error import MalformedElementError

CHAPEL = "Skinner Memorial Chapel"


class TestHistoricalBatch:
    """Tests for decoding historical content keyed by geofence name."""

    def test_decodes_every_entry_in_order(self, historical_payload: dict[str, Any]) -> None:
        """Each element becomes one record, in source order."""
        result = decode_historical(historical_payload, CHAPEL)

        assert result.success
        assert result.failure is None
        assert len(result) == 2
        assert isinstance(result.records[0], TextRecord)
        assert isinstance(result.records[1], ImageRecord)

    def test_text_mapping_has_required_and_present_optional_keys(
        self, historical_payload: dict[str, Any]
    ) -> None:
        """Text records carry type, summary, desc plus only the dates that were sent."""
        text = decode_historical(historical_payload, CHAPEL).records[0]

        assert text.as_mapping() == {
            "type": "text",
            "summary": "Chapel dedicated",
            "desc": "The chapel was dedicated in 1916.",
            "year": "1916",
            "month": "June",
        }

    def test_image_mapping(self, historical_payload: dict[str, Any]) -> None:
        image = decode_historical(historical_payload, CHAPEL).records[1]

        assert image.as_mapping() == {
            "type": "image",
            "desc": "The chapel under construction",
            "caption": "Construction, 1915",
            "data": "aGVsbG8=",
            "year": "1915",
            "month": "May",
            "day": "3",
        }

    def test_missing_geofence_key_is_empty_result(
        self, historical_payload: dict[str, Any]
    ) -> None:
        """Content for another landmark means no results for this one."""
        result = decode_historical(historical_payload, "Goodsell Observatory")

        assert result.failure is FailureKind.EMPTY_RESULT
        assert result.records == ()

    def test_empty_array_is_empty_result(self) -> None:
        result = decode_historical({"content": {CHAPEL: []}}, CHAPEL)

        assert result.failure is FailureKind.EMPTY_RESULT
        assert result.records == ()

    def test_none_payload_is_transport_failure(self) -> None:
        result = decode_historical(None, CHAPEL)

        assert result.failure is FailureKind.TRANSPORT_FAILURE
        assert not result.success
        assert result.records == ()

    @pytest.mark.parametrize("bad_index", [0, 1, 2])
    def test_any_malformed_element_fails_whole_batch(
        self, text_entry: dict[str, Any], bad_index: int
    ) -> None:
        """A single bad element discards records decoded before and after it."""
        entries = [copy.deepcopy(text_entry) for _ in range(3)]
        del entries[bad_index]["summary"]

        result = decode_historical({"content": {CHAPEL: entries}}, CHAPEL)

        assert result.failure is FailureKind.MALFORMED_ELEMENT
        assert result.records == ()
        assert result.error is not None
        assert f"element {bad_index}" in result.error

    def test_unknown_type_is_malformed(self, text_entry: dict[str, Any]) -> None:
        text_entry["type"] = "video"

        result = decode_historical({"content": {CHAPEL: [text_entry]}}, CHAPEL)

        assert result.failure is FailureKind.MALFORMED_ELEMENT

    def test_decoding_twice_gives_equal_results(
        self, historical_payload: dict[str, Any]
    ) -> None:
        first = decode_historical(historical_payload, CHAPEL)
        second = decode_historical(historical_payload, CHAPEL)

        assert first == second


class TestContentElement:
    """Tests for single historical entries."""

    def test_optional_dates_are_omitted_when_absent(self) -> None:
        record = decode_content_element({"type": "text", "summary": "s", "data": "d"})

        assert record.as_mapping() == {"type": "text", "summary": "s", "desc": "d"}

    def test_image_requires_caption(self, image_entry: dict[str, Any]) -> None:
        del image_entry["caption"]

        with pytest.raises(MalformedElementError) as exc_info:
            decode_content_element(image_entry)

        assert exc_info.value.field == "caption"

    def test_non_string_required_value_is_malformed(self, text_entry: dict[str, Any]) -> None:
        text_entry["summary"] = 42

        with pytest.raises(MalformedElementError, match="must be a string"):
            decode_content_element(text_entry)

    def test_non_object_element_is_malformed(self) -> None:
        with pytest.raises(MalformedElementError, match="must be an object"):
            decode_content_element(["text"])


class TestOptionalYear:
    """Tests for numeric year handling."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(1887, "1887"), (1887.0, "1887"), (1887.5, "1887.5")],
    )
    def test_numeric_year_becomes_decimal_string(self, raw: float, expected: str) -> None:
        assert optional_year({"year": raw}) == expected

    @pytest.mark.parametrize("raw", ["1887", True, None])
    def test_non_numeric_year_is_ignored(self, raw: Any) -> None:
        assert optional_year({"year": raw}) is None

    def test_missing_year(self) -> None:
        assert optional_year({}) is None


class TestMemories:
    """Tests for decoding memories."""

    def test_decodes_memory_with_derived_year(self, memory_entry: dict[str, Any]) -> None:
        result = decode_memories({"content": [memory_entry]})

        assert result.success
        memory = result.records[0]
        assert isinstance(memory, MemoryRecord)
        assert memory.as_mapping() == {
            "type": "memory",
            "data": "aW1hZ2U=",
            "desc": "Bald Spot after commencement",
            "caption": "Graduation",
            "uploader": "alum",
            "taken": "2016-05-03 14:22:00",
            "posted": "2016-05-04 09:00:00",
            "year": "2016-05-03",
        }

    def test_year_is_leading_token_of_taken(self) -> None:
        """The derived year is the date portion, not a four-digit year."""
        assert derive_memory_year("2016-05-03 14:22:00") == "2016-05-03"

    def test_year_without_space_is_whole_timestamp(self) -> None:
        assert derive_memory_year("2016") == "2016"

    def test_year_skips_leading_spaces(self) -> None:
        assert derive_memory_year("  2016-05-03 14:22:00") == "2016-05-03"

    def test_blank_taken_is_malformed(self, memory_entry: dict[str, Any]) -> None:
        memory_entry["timestamps"]["taken"] = " "

        with pytest.raises(MalformedElementError) as exc_info:
            decode_memory_element(memory_entry)

        assert exc_info.value.field == "timestamps.taken"

    def test_missing_nested_timestamp_fails_batch(self, memory_entry: dict[str, Any]) -> None:
        good = copy.deepcopy(memory_entry)
        del memory_entry["timestamps"]["posted"]

        result = decode_memories({"content": [good, memory_entry]})

        assert result.failure is FailureKind.MALFORMED_ELEMENT
        assert result.records == ()

    def test_content_not_a_list_is_empty_result(self) -> None:
        result = decode_memories({"content": {"unexpected": "object"}})

        assert result.failure is FailureKind.EMPTY_RESULT

    def test_missing_content_is_empty_result(self) -> None:
        result = decode_memories({"status": "ok"})

        assert result.failure is FailureKind.EMPTY_RESULT


class TestGeofences:
    """Tests for decoding geofences."""

    def test_decodes_geofence(self, geofence_entry: dict[str, Any]) -> None:
        result = decode_geofences({"content": [geofence_entry]})

        assert result.success
        fence = result.records[0]
        assert isinstance(fence, GeofenceRecord)
        assert fence.name == CHAPEL
        assert fence.radius == 50
        assert isinstance(fence.radius, int)
        assert fence.center.latitude == 44.4606
        assert fence.center.longitude == -93.1536

    def test_large_radius_keeps_integer_precision(self, geofence_entry: dict[str, Any]) -> None:
        geofence_entry["geofence"]["radius"] = 2**53 + 1

        fence = decode_geofence_element(geofence_entry)

        assert fence.radius == 2**53 + 1

    def test_integer_coordinates_become_floats(self, geofence_entry: dict[str, Any]) -> None:
        geofence_entry["geofence"]["location"] = {"lat": 44, "lng": -93}

        fence = decode_geofence_element(geofence_entry)

        assert isinstance(fence.center.latitude, float)
        assert fence.center.latitude == 44.0

    def test_fractional_radius_is_malformed(self, geofence_entry: dict[str, Any]) -> None:
        geofence_entry["geofence"]["radius"] = 50.5

        with pytest.raises(MalformedElementError) as exc_info:
            decode_geofence_element(geofence_entry)

        assert exc_info.value.field == "geofence.radius"

    def test_string_latitude_is_malformed(self, geofence_entry: dict[str, Any]) -> None:
        geofence_entry["geofence"]["location"]["lat"] = "44.46"

        with pytest.raises(MalformedElementError):
            decode_geofence_element(geofence_entry)

    def test_out_of_range_center_is_malformed(self, geofence_entry: dict[str, Any]) -> None:
        geofence_entry["geofence"]["location"]["lat"] = 144.0

        with pytest.raises(MalformedElementError) as exc_info:
            decode_geofence_element(geofence_entry)

        assert exc_info.value.field == "geofence.location"

    def test_empty_array_is_empty_result(self) -> None:
        result = decode_geofences({"content": []})

        assert result.failure is FailureKind.EMPTY_RESULT
        assert result.records == ()

    @pytest.mark.parametrize("bad_index", [0, 1, 2])
    def test_any_malformed_geofence_fails_whole_batch(
        self,
        geofence_entry: dict[str, Any],
        bad_index: int,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        entries = [copy.deepcopy(geofence_entry) for _ in range(3)]
        del entries[bad_index]["geofence"]["radius"]

        result = decode_geofences({"content": entries})

        assert result.failure is FailureKind.MALFORMED_ELEMENT
        assert result.records == ()
        assert result.error is not None
        assert f"element {bad_index}" in result.error
        assert "[MALFORMED_ELEMENT]" in caplog.text


class TestRequireInt:
    def test_boolean_is_not_an_integer(self) -> None:
        with pytest.raises(MalformedElementError):
            require_int({"radius": True}, "radius")

    def test_integral_float_is_accepted(self) -> None:
        assert require_int({"radius": 100.0}, "radius") == 100


class TestDecodeDispatch:
    """Tests for the feed-selecting entry point."""

    def test_historical_feed_uses_key(self, historical_payload: dict[str, Any]) -> None:
        result = decode(historical_payload, Feed.HISTORICAL, key=CHAPEL)

        assert len(result) == 2

    def test_historical_feed_without_key_raises(self) -> None:
        with pytest.raises(ValueError, match="geofence name"):
            decode({"content": {}}, Feed.HISTORICAL)

    def test_feed_accepts_string(self, geofence_entry: dict[str, Any]) -> None:
        result = decode({"content": [geofence_entry]}, "geofences")

        assert isinstance(result.records[0], GeofenceRecord)

    def test_memories_feed(self, memory_entry: dict[str, Any]) -> None:
        result = decode({"content": [memory_entry]}, Feed.MEMORIES)

        assert isinstance(result.records[0], MemoryRecord)

    def test_unknown_feed_raises(self) -> None:
        with pytest.raises(ValueError):
            decode({"content": []}, "calendar")
