"""HTTP transport for the campus backend."""

from historian.infrastructure.http.client import HistoricalDataClient

__all__ = ["HistoricalDataClient"]
