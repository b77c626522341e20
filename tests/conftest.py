"""Global test fixtures."""

from typing import Any

import pytest

CHAPEL = "Skinner Memorial Chapel"


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer settings out of tests."""
    monkeypatch.delenv("HISTORIAN_CONFIG_FILE", raising=False)
    monkeypatch.delenv("HISTORIAN_LOG_FILE", raising=False)
    monkeypatch.delenv("HISTORIAN_SERVER__BASE_URL", raising=False)
    monkeypatch.delenv("HISTORIAN_SERVER__TIMEOUT", raising=False)


@pytest.fixture
def text_entry() -> dict[str, Any]:
    return {
        "type": "text",
        "summary": "Chapel dedicated",
        "data": "The chapel was dedicated in 1916.",
        "year": 1916,
        "month": "June",
    }


@pytest.fixture
def image_entry() -> dict[str, Any]:
    return {
        "type": "image",
        "desc": "The chapel under construction",
        "caption": "Construction, 1915",
        "data": "aGVsbG8=",
        "year": 1915,
        "month": "May",
        "day": "3",
    }


@pytest.fixture
def historical_payload(text_entry: dict[str, Any], image_entry: dict[str, Any]) -> dict[str, Any]:
    return {"content": {CHAPEL: [text_entry, image_entry]}}


@pytest.fixture
def memory_entry() -> dict[str, Any]:
    return {
        "image": "aW1hZ2U=",
        "caption": "Graduation",
        "desc": "Bald Spot after commencement",
        "uploader": "alum",
        "timestamps": {"taken": "2016-05-03 14:22:00", "posted": "2016-05-04 09:00:00"},
    }


@pytest.fixture
def geofence_entry() -> dict[str, Any]:
    return {
        "name": CHAPEL,
        "geofence": {"radius": 50, "location": {"lat": 44.4606, "lng": -93.1536}},
    }
