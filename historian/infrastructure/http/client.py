"""Historical data client - talks to the campus backend over JSON POSTs."""

import logging
from typing import Any

import httpx

from historian.config import Config
from historian.domain.content.model.outcome import DecodeResult
from historian.domain.content.model.value import (
    GeofenceRecord,
    ImageRecord,
    MemoryRecord,
    TextRecord,
)
from historian.domain.content.service.decoder import (
    decode_geofences,
    decode_historical,
    decode_memories,
)
from historian.domain.geo.coordinate import Coordinate
from historian.domain.memory.model import Memory
from historian.domain.shared.error import TransportError

logger = logging.getLogger(__name__)

UPLOAD_SUCCESS_STATUS = "Success!"
DEFAULT_MEMORY_RADIUS = 0.1
DEFAULT_GEOFENCE_RADIUS = 100  # meters


class HistoricalDataClient:
    """Requests landmark content, memories and geofences from the backend.

    Every request method returns a DecodeResult (or a bool for uploads);
    transport problems are reported as TRANSPORT_FAILURE, never raised.
    """

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client or httpx.AsyncClient(timeout=config.server.timeout)

    async def __aenter__(self) -> "HistoricalDataClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def request_content(
        self, geofence_name: str
    ) -> DecodeResult[TextRecord | ImageRecord]:
        """Request historical content for a campus landmark.

        Args:
            geofence_name: Name of the landmark to get content for.
        """
        payload = await self._post_or_none(
            "historical_info", {"geofences": [geofence_name]}
        )
        return decode_historical(payload, geofence_name)

    async def request_memories(
        self,
        location: Coordinate,
        radius: float = DEFAULT_MEMORY_RADIUS,
    ) -> DecodeResult[MemoryRecord]:
        """Request memories posted around a location."""
        payload = await self._post_or_none(
            "memories_info",
            {"lat": location.latitude, "lng": location.longitude, "rad": radius},
        )
        return decode_memories(payload)

    async def request_nearby_geofences(
        self,
        location: Coordinate,
        radius: int = DEFAULT_GEOFENCE_RADIUS,
    ) -> DecodeResult[GeofenceRecord]:
        """Request geofences near a location.

        Args:
            location: The user's current location.
            radius: Search radius in meters.
        """
        payload = await self._post_or_none(
            "geofences",
            {"geofence": {"location": location.to_wire(), "radius": radius}},
        )
        return decode_geofences(payload)

    async def upload_memory(self, memory: Memory) -> bool:
        """Upload a memory; True only if the server answers with the success status."""
        payload = await self._post_or_none("add_memory", memory.to_payload())
        if isinstance(payload, dict) and payload.get("status") == UPLOAD_SUCCESS_STATUS:
            logger.info("Memory '%s' uploaded", memory.title)
            return True
        logger.warning("Upload failed for memory '%s'", memory.title)
        return False

    async def _post_or_none(self, endpoint: str, body: dict[str, Any]) -> Any:
        """POST and return the parsed JSON, or None when the transport fails."""
        try:
            return await self._post(endpoint, body)
        except TransportError as e:
            logger.warning("Connection to server failed [%s]: %s", e.code, e.message)
            return None

    async def _post(self, endpoint: str, body: dict[str, Any]) -> Any:
        url = self._config.endpoint_url(endpoint)
        try:
            resp = await self._client.post(url, json=body)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(f"{url} returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"{url} returned a non-JSON body") from e
