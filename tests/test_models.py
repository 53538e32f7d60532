"""Tests for series models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from eia_feed.models import FetchDescriptor, Observation, SeriesBatch


START = datetime(2020, 1, 1, tzinfo=timezone.utc)


def make_batch() -> SeriesBatch:
    observations = tuple(
        Observation(START + timedelta(days=i), timedelta(days=1), float(i), "X.D")
        for i in range(3)
    )
    return SeriesBatch("X.D", date(2020, 1, 5), observations)


class TestObservation:
    def test_end_adds_period(self):
        obs = Observation(START, timedelta(hours=1), 1.0, "X.H")
        assert obs.end == datetime(2020, 1, 1, 1, tzinfo=timezone.utc)

    def test_immutable(self):
        obs = Observation(START, timedelta(days=1), 1.0, "X.D")
        with pytest.raises(FrozenInstanceError):
            obs.value = 2.0


class TestSeriesBatch:
    def test_iteration_and_length(self):
        batch = make_batch()
        assert len(batch) == 3
        assert [obs.value for obs in batch] == [0.0, 1.0, 2.0]
        assert not batch.is_empty

    def test_empty(self):
        batch = SeriesBatch("X.D", date(2020, 1, 5))
        assert batch.is_empty
        assert len(batch) == 0
        assert batch.to_frame().empty

    def test_to_frame(self):
        df = make_batch().to_frame()
        assert list(df.columns) == ["value", "period", "end"]
        assert df.index[0] == pd.Timestamp("2020-01-01", tz="UTC")
        assert df["value"].tolist() == [0.0, 1.0, 2.0]
        assert df["end"].iloc[0] == pd.Timestamp("2020-01-02", tz="UTC")


class TestFetchDescriptor:
    def test_url(self):
        descriptor = FetchDescriptor(
            "https://api.eia.gov/series/", {"api_key": "k", "series_id": "PET.RWTC.D"}
        )
        assert descriptor.url == "https://api.eia.gov/series/?api_key=k&series_id=PET.RWTC.D"
        assert descriptor.method == "GET"
