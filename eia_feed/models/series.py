"""Data models for EIA series."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterator

import httpx
import pandas as pd


class Cadence(Enum):
    """Reporting cadence encoded by the last letter of a series code."""
    ANNUAL = "A"
    QUARTERLY = "Q"
    MONTHLY = "M"
    DAILY = "D"
    HOURLY = "H"


@dataclass(frozen=True)
class CadenceSpec:
    """Covered span and date format for one cadence."""

    cadence: Cadence
    period: timedelta
    date_format: str  # strptime pattern
    token_pattern: str  # exact shape a token must have before strptime


@dataclass(frozen=True)
class Observation:
    """Single observation from an EIA series.

    ``timestamp`` is the start of the covered interval, in UTC.
    """

    timestamp: datetime
    period: timedelta
    value: float
    series_id: str

    @property
    def end(self) -> datetime:
        return self.timestamp + self.period


@dataclass(frozen=True)
class SeriesBatch:
    """Observations produced by one parse call, ordered by timestamp."""

    series_id: str
    request_date: date
    observations: tuple[Observation, ...] = ()

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.observations)

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def is_empty(self) -> bool:
        return not self.observations

    def to_frame(self) -> pd.DataFrame:
        """
        Convert to a DataFrame.

        Returns:
            DataFrame with UTC timestamp index and value, period, end columns
        """
        if not self.observations:
            return pd.DataFrame(columns=["value", "period", "end"])

        df = pd.DataFrame(
            {
                "timestamp": [obs.timestamp for obs in self.observations],
                "value": [obs.value for obs in self.observations],
                "period": [obs.period for obs in self.observations],
                "end": [obs.end for obs in self.observations],
            }
        )
        df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
        df["end"] = pd.to_datetime(df["end"], utc=True)
        df.set_index("timestamp", inplace=True)
        return df


@dataclass(frozen=True)
class FetchDescriptor:
    """Describes the HTTP request that retrieves a series."""

    endpoint: str
    params: dict[str, str] = field(default_factory=dict)
    method: str = "GET"
    transport: str = "rest"
    # The response is one JSON document, not a line-per-record file
    file_format: str = "collection"

    @property
    def url(self) -> str:
        return str(httpx.URL(self.endpoint, params=self.params))
