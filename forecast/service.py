"""Forecast pipeline: RPA forecast XML into the normalized forecast contract."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from rpa.client import MalformedUpstreamResponse, RPAClient, forecast_url
from rpa.models import RpaDirection, RpaForecast, read_rpa_forecast

logger = logging.getLogger(__name__)

DIRECTION_LABELS: tuple[str, ...] = ("Inbound", "Outbound")
DUE = "DUE"

TramFilter = Callable[[str], bool]


class DirectionStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str = ""
    forecasts_enabled: str = Field("", alias="forecastsEnabled")
    operating_normally: str = Field("", alias="operatingNormally")


class ForecastStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    inbound: DirectionStatus = Field(default_factory=DirectionStatus)
    outbound: DirectionStatus = Field(default_factory=DirectionStatus)


class Tram(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    direction: str
    due_minutes: str = Field(..., alias="dueMinutes")
    destination: str


class NormalizedForecast(BaseModel):
    """Stable JSON contract returned for ``action=times``."""

    model_config = ConfigDict(frozen=True)

    message: str = ""
    status: ForecastStatus = Field(default_factory=ForecastStatus)
    trams: list[Tram] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


def is_listed_tram(due_mins: str) -> bool:
    """Accept ``DUE`` or a positive whole number of minutes."""

    if due_mins == DUE:
        return True
    return due_mins.isascii() and due_mins.isdigit() and int(due_mins) > 0


def has_due_time(due_mins: str) -> bool:
    """Accept any non-empty due time."""

    return due_mins != ""


TRAM_FILTERS: dict[str, TramFilter] = {
    "strict": is_listed_tram,
    "loose": has_due_time,
}


def _status(direction: RpaDirection) -> DirectionStatus:
    return DirectionStatus(
        message=direction.status_message,
        forecasts_enabled=direction.forecasts_enabled,
        operating_normally=direction.operating_normally,
    )


def create_forecast(
    rpa_forecast: RpaForecast,
    *,
    include_tram: TramFilter = is_listed_tram,
) -> NormalizedForecast:
    """Reshape an upstream forecast. Directions are positional: 0 inbound, 1 outbound."""

    if len(rpa_forecast.directions) != len(DIRECTION_LABELS):
        raise MalformedUpstreamResponse(
            f"Expected {len(DIRECTION_LABELS)} direction blocks, "
            f"got {len(rpa_forecast.directions)}"
        )

    inbound, outbound = rpa_forecast.directions
    trams = [
        Tram(direction=label, due_minutes=tram.due_mins, destination=tram.destination)
        for label, direction in zip(DIRECTION_LABELS, rpa_forecast.directions)
        for tram in direction.trams
        if include_tram(tram.due_mins)
    ]
    return NormalizedForecast(
        message=rpa_forecast.message,
        status=ForecastStatus(inbound=_status(inbound), outbound=_status(outbound)),
        trams=trams,
    )


class ForecastService:
    """Fetches and normalizes stop forecasts."""

    def __init__(
        self,
        client: RPAClient,
        *,
        tram_filter: Literal["strict", "loose"] = "strict",
    ) -> None:
        self._client = client
        self._include_tram = TRAM_FILTERS[tram_filter]

    def get_forecast(self, base_url: str, stop: str) -> NormalizedForecast:
        logger.info("Stop forecast requested for param station=%s", stop)
        payload = self._client.fetch(forecast_url(base_url, stop))
        return create_forecast(read_rpa_forecast(payload), include_tram=self._include_tram)


__all__ = [
    "DirectionStatus",
    "ForecastService",
    "ForecastStatus",
    "NormalizedForecast",
    "TRAM_FILTERS",
    "Tram",
    "create_forecast",
    "has_due_time",
    "is_listed_tram",
]
