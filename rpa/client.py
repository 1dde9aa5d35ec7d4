"""HTTP access to the RPA Luas forecast XML API."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class RPAError(RuntimeError):
    """Base class for upstream failures."""


class RPAFetchError(RPAError):
    """Raised when the upstream request cannot be completed."""


class MalformedUpstreamResponse(RPAError):
    """Raised when an upstream body cannot be decoded into the expected shape."""


def forecast_url(base_url: str, stop: str) -> str:
    return f"{base_url}action=forecast&stop={stop}"


def farecalc_url(base_url: str, from_stop: str, to_stop: str, adults: str, children: str) -> str:
    return (
        f"{base_url}action=farecalc&from={from_stop}&to={to_stop}"
        f"&adults={adults}&children={children}"
    )


class RPAClient:
    """Thin HTTP client returning raw upstream bodies."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def fetch(self, url: str) -> bytes:
        """Return the upstream body. Error statuses only fail when nothing came back."""

        logger.debug("Requesting %s", url)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as exc:
            if exc.response.content:
                logger.warning(
                    "RPA API responded with status %s, decoding body anyway",
                    exc.response.status_code,
                )
                return exc.response.content
            raise RPAFetchError(
                f"RPA API request failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RPAFetchError("Error establishing HTTP connection to RPA API") from exc


__all__ = [
    "MalformedUpstreamResponse",
    "RPAClient",
    "RPAError",
    "RPAFetchError",
    "farecalc_url",
    "forecast_url",
]
