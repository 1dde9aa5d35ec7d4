"""Fare pipeline: the RPA fare calculator result passed through as JSON."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from rpa.client import RPAClient, farecalc_url
from rpa.models import read_rpa_fare_calc

logger = logging.getLogger(__name__)


class FareRequest(BaseModel):
    from_stop: str
    to_stop: str
    adults: str
    children: str


class FareResult(BaseModel):
    """Upstream fare figures, kept as text."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    peak: str = ""
    offpeak: str = ""
    zones_travelled: str = Field("", alias="zonesTravelled")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class FareService:
    def __init__(self, client: RPAClient) -> None:
        self._client = client

    def get_fare(self, base_url: str, request: FareRequest) -> FareResult:
        logger.info(
            "Fare calculation requested for params from=%s,to=%s,adults=%s,children=%s",
            request.from_stop,
            request.to_stop,
            request.adults,
            request.children,
        )
        url = farecalc_url(
            base_url,
            request.from_stop,
            request.to_stop,
            request.adults,
            request.children,
        )
        fare_calc = read_rpa_fare_calc(self._client.fetch(url))
        return FareResult(
            peak=fare_calc.result.peak,
            offpeak=fare_calc.result.offpeak,
            zones_travelled=fare_calc.result.zones_travelled,
        )


__all__ = ["FareRequest", "FareResult", "FareService"]
