"""Cadence lookup and quarter date handling."""

from datetime import timedelta

from eia_feed.errors import InvalidQuarterToken, UnsupportedCadence
from eia_feed.models import Cadence, CadenceSpec


# Periods are the closest approximation in days, except hourly.
# Quarterly tokens are matched after quarter normalization.
CADENCES: dict[str, CadenceSpec] = {
    "A": CadenceSpec(Cadence.ANNUAL, timedelta(days=365), "%Y", r"[0-9]{4}"),
    "Q": CadenceSpec(Cadence.QUARTERLY, timedelta(days=90), "%Y%m%d", r"[0-9]{8}"),
    "M": CadenceSpec(Cadence.MONTHLY, timedelta(days=30), "%Y%m", r"[0-9]{6}"),
    "D": CadenceSpec(Cadence.DAILY, timedelta(days=1), "%Y%m%d", r"[0-9]{8}"),
    "H": CadenceSpec(
        Cadence.HOURLY, timedelta(hours=1), "%Y%m%dT%HZ", r"[0-9]{8}T[0-9]{2}Z"
    ),
}

QUARTER_MARKER = "Q"

# Quarters are anchored on their first day
QUARTER_ANCHORS: dict[str, str] = {
    "1": "0101",
    "2": "0401",
    "3": "0701",
    "4": "1001",
}


def resolve_cadence(series_id: str) -> CadenceSpec:
    """Look up the cadence for a series from its trailing character."""
    if not series_id:
        raise UnsupportedCadence(series_id)
    try:
        return CADENCES[series_id[-1]]
    except KeyError:
        raise UnsupportedCadence(series_id) from None


def normalize_quarter_token(token: str) -> str:
    """
    Replace a quarter suffix with a calendar date.

    "2021Q2" becomes "20210401". Tokens without a quarter marker are
    returned unchanged. The marker must be followed by exactly one digit.
    """
    if QUARTER_MARKER not in token:
        return token

    if len(token) < 2 or token[-2] != QUARTER_MARKER:
        raise InvalidQuarterToken(token)
    anchor = QUARTER_ANCHORS.get(token[-1])
    if anchor is None:
        raise InvalidQuarterToken(token)
    return token[:4] + anchor
