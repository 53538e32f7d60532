"""Period-aware ingestion of EIA energy data series."""

from eia_feed.data import EiaFetcher, SeriesReader
from eia_feed.errors import (
    InvalidQuarterToken,
    MalformedPayload,
    SeriesError,
    UnsupportedCadence,
)
from eia_feed.models import Observation, SeriesBatch

__all__ = [
    "EiaFetcher",
    "SeriesReader",
    "Observation",
    "SeriesBatch",
    "SeriesError",
    "UnsupportedCadence",
    "InvalidQuarterToken",
    "MalformedPayload",
]
