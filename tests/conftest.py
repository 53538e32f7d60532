"""Shared fixtures."""

from __future__ import annotations

import json

import pytest

from eia_feed.config import Settings
from eia_feed.data import SeriesReader


@pytest.fixture
def settings() -> Settings:
    return Settings(eia_api_key="test-key", strict_parsing=False)


@pytest.fixture
def reader(settings: Settings) -> SeriesReader:
    return SeriesReader(settings)


@pytest.fixture
def strict_reader(settings: Settings) -> SeriesReader:
    return SeriesReader(settings, strict=True)


@pytest.fixture
def make_payload():
    def _make(pairs) -> str:
        return json.dumps({"series": [{"data": pairs}]})

    return _make
