"""Parse EIA series payloads into period-aware observations."""

import json
import logging
import math
import re
from datetime import date, datetime, timezone
from operator import attrgetter

from eia_feed.config import Settings
from eia_feed.data.cadence import normalize_quarter_token, resolve_cadence
from eia_feed.errors import MalformedPayload
from eia_feed.models import CadenceSpec, FetchDescriptor, Observation, SeriesBatch


logger = logging.getLogger(__name__)


class SeriesReader:
    """Turns raw EIA series responses into ordered observations.

    The reader keeps no per-call state, so one instance can serve
    different series from several threads at once.
    """

    resolve_cadence = staticmethod(resolve_cadence)
    normalize_quarter_token = staticmethod(normalize_quarter_token)

    def __init__(
        self, settings: Settings | None = None, strict: bool | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.strict = self.settings.strict_parsing if strict is None else strict

    def build_fetch_descriptor(
        self, series_id: str, auth_token: str | None = None
    ) -> FetchDescriptor:
        """
        Describe the GET request for a series.

        Args:
            series_id: EIA series ID
            auth_token: API key; falls back to the configured key when None.
                An empty key gives an unauthenticated request.
        """
        if auth_token is None:
            auth_token = self.settings.eia_api_key

        return FetchDescriptor(
            endpoint=self.settings.base_url,
            params={"api_key": auth_token, "series_id": series_id},
        )

    def parse(
        self,
        series_id: str,
        raw_payload: str | bytes,
        request_date: date,
        strict: bool | None = None,
    ) -> SeriesBatch:
        """
        Parse a series response.

        Args:
            series_id: EIA series ID, its last letter selects the cadence
            raw_payload: JSON body with a ``series[0].data`` list of pairs
            request_date: Date the data was requested for, passed through
            strict: Override the reader's mode for this call

        Returns:
            SeriesBatch ordered by timestamp. In lenient mode a malformed
            payload gives an empty batch instead of raising.
        """
        if strict is None:
            strict = self.strict

        cadence = resolve_cadence(series_id)

        try:
            observations = self._read_observations(series_id, raw_payload, cadence)
        except MalformedPayload as e:
            if strict:
                raise
            logger.error(f"Exception reading {series_id}: {e}")
            return SeriesBatch(series_id=series_id, request_date=request_date)

        return SeriesBatch(
            series_id=series_id,
            request_date=request_date,
            observations=tuple(observations),
        )

    def _read_observations(
        self, series_id: str, raw_payload: str | bytes, cadence: CadenceSpec
    ) -> list[Observation]:
        pairs = self._extract_pairs(series_id, raw_payload)

        observations = []
        skipped = 0
        for raw_token, raw_value in pairs:
            value = _to_number(raw_value)
            if value is None:
                skipped += 1
                continue

            token = str(raw_token)
            observations.append(
                Observation(
                    timestamp=_parse_timestamp(series_id, token, cadence),
                    period=cadence.period,
                    value=value,
                    series_id=series_id,
                )
            )

        if skipped:
            logger.debug(f"  {series_id}: skipped {skipped} non-numeric values")

        # list.sort is stable, equal timestamps keep payload order
        observations.sort(key=attrgetter("timestamp"))
        return observations

    @staticmethod
    def _extract_pairs(series_id: str, raw_payload: str | bytes) -> list:
        """Pull the ``[date, value]`` pairs out of the response document."""
        try:
            pairs = json.loads(raw_payload)["series"][0]["data"]
        except (json.JSONDecodeError, UnicodeDecodeError, KeyError, IndexError, TypeError) as e:
            raise MalformedPayload(series_id, e) from e

        if not isinstance(pairs, list):
            e = TypeError(f"expected a list of pairs, got {type(pairs).__name__}")
            raise MalformedPayload(series_id, e) from e

        for pair in pairs:
            if not isinstance(pair, list) or len(pair) != 2:
                e = TypeError(f"expected a [date, value] pair, got {pair!r}")
                raise MalformedPayload(series_id, e) from e

        return pairs


def _to_number(raw) -> float | None:
    """Coerce a data value to a finite float, or None when it is not one."""
    # JSON true/false are not values even though bool is an int subclass
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str) and "_" in raw:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_timestamp(series_id: str, token: str, cadence: CadenceSpec) -> datetime:
    """Parse a date token with the cadence's exact format, in UTC."""
    normalized = normalize_quarter_token(token)
    if not re.fullmatch(cadence.token_pattern, normalized):
        e = ValueError(
            f"{normalized!r} does not match format {cadence.date_format!r}"
        )
        raise MalformedPayload(series_id, e, token=token) from e
    try:
        timestamp = datetime.strptime(normalized, cadence.date_format)
    except ValueError as e:
        raise MalformedPayload(series_id, e, token=token) from e
    return timestamp.replace(tzinfo=timezone.utc)
