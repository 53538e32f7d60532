"""Series parsing and fetching."""

from .reader import SeriesReader
from .eia_fetcher import EiaFetcher

__all__ = ["SeriesReader", "EiaFetcher"]
