"""EIA API data fetcher.

Executes the request a SeriesReader describes and parses the response.
No retries and no caching: every call hits the API.
"""

import logging
from datetime import date

import httpx

from eia_feed.config import Settings
from eia_feed.data.reader import SeriesReader
from eia_feed.models import SeriesBatch


logger = logging.getLogger(__name__)


class EiaFetcher:
    """Fetches series from the EIA API."""

    def __init__(
        self,
        settings: Settings | None = None,
        reader: SeriesReader | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self.reader = reader or SeriesReader(self.settings)
        self._client = client

        if not self.settings.has_api_key():
            logger.warning("EIA_API_KEY not set")

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "EiaFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_raw(self, series_id: str) -> str:
        """Fetch the response body for a series."""
        descriptor = self.reader.build_fetch_descriptor(
            series_id, self.settings.eia_api_key
        )
        response = self.client.request(
            descriptor.method, descriptor.endpoint, params=descriptor.params
        )
        response.raise_for_status()
        return response.text

    def fetch_series(
        self,
        series_id: str,
        request_date: date | None = None,
        strict: bool | None = None,
    ) -> SeriesBatch:
        """
        Fetch and parse a single series.

        Args:
            series_id: EIA series ID, e.g. "EBA.AZPS-ALL.D.H"
            request_date: Logical request date, defaults to today
            strict: Override the reader's strict/lenient mode

        Returns:
            SeriesBatch ordered by timestamp
        """
        logger.info(f"Fetching {series_id}...")
        request_date = request_date or date.today()

        content = self.fetch_raw(series_id)
        batch = self.reader.parse(series_id, content, request_date, strict=strict)

        if batch.is_empty:
            logger.info("  No observations")
        else:
            first, last = batch.observations[0], batch.observations[-1]
            logger.info(
                f"  Parsed {len(batch)} observations "
                f"({first.timestamp:%Y-%m-%d %H:%M} to {last.timestamp:%Y-%m-%d %H:%M})"
            )
        return batch


def main() -> None:
    """CLI entry point for fetching a series."""
    import argparse
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Fetch an EIA data series")
    parser.add_argument(
        "series_id",
        type=str,
        help="EIA series ID ending in A, Q, M, D or H",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        help="EIA API key (overrides EIA_API_KEY)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed payloads instead of returning no data",
    )
    parser.add_argument(
        "--frame",
        action="store_true",
        help="Print the series as a table",
    )
    args = parser.parse_args()

    settings = Settings()
    settings.set_api_key(args.api_key)

    try:
        with EiaFetcher(settings) as fetcher:
            batch = fetcher.fetch_series(args.series_id, strict=args.strict or None)

        if args.frame:
            print(batch.to_frame().to_string())
        else:
            for obs in batch:
                print(f"{obs.timestamp:%Y-%m-%d %H:%M} - {obs.series_id} - {obs.value}")

    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)


if __name__ == "__main__":
    main()
