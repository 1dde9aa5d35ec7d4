from __future__ import annotations

from typing import Any

import pytest

from config.settings import Settings, get_settings
from fares.service import FareService
from forecast.service import ForecastService
from gateway.dispatcher import Dispatcher
from stops.service import StopLookupError, StopService

FORECAST_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<stopInfo created="2026-10-19T08:15:02" stop="Ranelagh" stopAbv="RAN">
  <message>Green Line services operating normally</message>
  <direction name="Inbound" statusMessage="Services operating normally" forecastsEnabled="True" operatingNormally="True">
    <tram dueMins="DUE" destination="Broombridge" />
    <tram dueMins="" destination="No trams forecast" />
    <tram dueMins="7" destination="Parnell" />
  </direction>
  <direction name="Outbound" statusMessage="Delays at Sandyford" forecastsEnabled="True" operatingNormally="False">
    <tram dueMins="3" destination="Bride's Glen" />
    <tram dueMins="-" destination="See timetable" />
    <tram dueMins="12" destination="Sandyford" />
  </direction>
</stopInfo>
"""

FARECALC_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<farecalc created="2026-10-19T08:15:02">
  <result peak="2.30" offpeak="2.00" zonesTravelled="2" />
</farecalc>
"""

RANELAGH: dict[str, Any] = {
    "car": 1,
    "coordinates": {"latitude": 53.326, "longitude": -6.256},
    "cycle": 1,
    "displayIrishName": "Raghnallach",
    "displayName": "Ranelagh",
    "line": "Green",
    "shortName": "RAN",
}


class FakeStopStore:
    def __init__(
        self,
        records: dict[str, dict[str, Any]] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.records = records if records is not None else {"RAN": RANELAGH}
        self.error = error
        self.lookups: list[str] = []

    def lookup(self, short_name: str) -> dict[str, Any]:
        self.lookups.append(short_name)
        if self.error is not None:
            raise self.error
        return self.records.get(short_name, {})


class FakeRPAClient:
    def __init__(self, payload: bytes = FORECAST_XML, *, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the developer's environment."""

    for name in ("STOPS_TABLE", "TRAM_FILTER", "FORECAST_ERROR_POLICY", "RPA_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def store() -> FakeStopStore:
    return FakeStopStore()


@pytest.fixture
def rpa_client() -> FakeRPAClient:
    return FakeRPAClient()


@pytest.fixture
def make_dispatcher(settings: Settings):
    def _make(
        store: FakeStopStore | None = None,
        client: Any | None = None,
        **overrides: Any,
    ) -> Dispatcher:
        configured = settings.model_copy(update=overrides) if overrides else settings
        client = client or FakeRPAClient()
        return Dispatcher(
            configured,
            StopService(store or FakeStopStore()),
            ForecastService(client, tram_filter=configured.tram_filter),
            FareService(client),
        )

    return _make


@pytest.fixture
def failing_store() -> FakeStopStore:
    return FakeStopStore(error=StopLookupError("connection reset"))
