"""Upstream XML shapes and their decoders.

The RPA feed carries almost everything as attributes::

    <stopInfo created="..." stop="Ranelagh" stopAbv="RAN">
      <message>Green Line services operating normally</message>
      <direction name="Inbound" statusMessage="..." forecastsEnabled="True" operatingNormally="True">
        <tram dueMins="3" destination="Broombridge" />
      </direction>
      ...
    </stopInfo>

Missing attributes decode to empty strings, matching how the feed itself
signals "no data".
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from pydantic import BaseModel, Field

from rpa.client import MalformedUpstreamResponse


class RpaTram(BaseModel):
    due_mins: str = ""
    destination: str = ""


class RpaDirection(BaseModel):
    name: str = ""
    status_message: str = ""
    forecasts_enabled: str = ""
    operating_normally: str = ""
    trams: list[RpaTram] = Field(default_factory=list)


class RpaForecast(BaseModel):
    created: str = ""
    stop: str = ""
    stop_abv: str = ""
    message: str = ""
    directions: list[RpaDirection] = Field(default_factory=list)


class RpaFareCalcResult(BaseModel):
    peak: str = ""
    offpeak: str = ""
    zones_travelled: str = ""


class RpaFareCalc(BaseModel):
    created: str = ""
    result: RpaFareCalcResult


def _parse(payload: bytes) -> ET.Element:
    try:
        return ET.fromstring(payload)
    except ET.ParseError as exc:
        raise MalformedUpstreamResponse(f"Upstream body is not valid XML: {exc}") from exc


def read_rpa_forecast(payload: bytes) -> RpaForecast:
    """Decode a forecast document, keeping direction and tram order."""

    root = _parse(payload)
    directions = []
    for node in root.findall("direction"):
        trams = [
            RpaTram(
                due_mins=tram.get("dueMins", ""),
                destination=tram.get("destination", ""),
            )
            for tram in node.findall("tram")
        ]
        directions.append(
            RpaDirection(
                name=node.get("name", ""),
                status_message=node.get("statusMessage", ""),
                forecasts_enabled=node.get("forecastsEnabled", ""),
                operating_normally=node.get("operatingNormally", ""),
                trams=trams,
            )
        )
    return RpaForecast(
        created=root.get("created", ""),
        stop=root.get("stop", ""),
        stop_abv=root.get("stopAbv", ""),
        message=root.findtext("message", default=""),
        directions=directions,
    )


def read_rpa_fare_calc(payload: bytes) -> RpaFareCalc:
    root = _parse(payload)
    result = root.find("result")
    if result is None:
        raise MalformedUpstreamResponse("Fare calculation has no result block")
    return RpaFareCalc(
        created=root.get("created", ""),
        result=RpaFareCalcResult(
            peak=result.get("peak", ""),
            offpeak=result.get("offpeak", ""),
            zones_travelled=result.get("zonesTravelled", ""),
        ),
    )


__all__ = [
    "RpaDirection",
    "RpaFareCalc",
    "RpaFareCalcResult",
    "RpaForecast",
    "RpaTram",
    "read_rpa_fare_calc",
    "read_rpa_forecast",
]
