"""Errors raised while reading EIA series."""


class SeriesError(ValueError):
    """Base class for series ingestion errors."""


class UnsupportedCadence(SeriesError):
    """Series code does not end in a known cadence letter."""

    def __init__(self, series_id: str) -> None:
        self.series_id = series_id
        super().__init__(f"Unsupported period for series {series_id!r}")


class InvalidQuarterToken(SeriesError):
    """Quarter marker is not followed by 1, 2, 3 or 4."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid quarter input: {token!r}")


class MalformedPayload(SeriesError):
    """Response body does not have the expected shape or contents."""

    def __init__(
        self,
        series_id: str,
        cause: BaseException,
        token: str | None = None,
    ) -> None:
        self.series_id = series_id
        self.cause = cause
        self.token = token
        detail = f" (date token {token!r})" if token is not None else ""
        super().__init__(f"Malformed payload for {series_id}{detail}: {cause}")
