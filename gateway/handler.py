"""AWS Lambda-style handler for the Luas gateway."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from config.settings import Settings, get_settings
from fares.service import FareService
from forecast.service import ForecastService
from gateway.dispatcher import Dispatcher
from gateway.models import GatewayRequest
from rpa.client import RPAClient
from stops.service import DynamoDBStopStore, StopService

logger = logging.getLogger(__name__)

_dispatcher: Dispatcher | None = None


def build_dispatcher(settings: Settings) -> Dispatcher:
    """Wire the production store and upstream client into a dispatcher."""

    store = DynamoDBStopStore(settings.stops_table, region_name=settings.aws_region)
    client = RPAClient(timeout=settings.rpa_timeout)
    return Dispatcher(
        settings,
        StopService(store),
        ForecastService(client, tram_filter=settings.tram_filter),
        FareService(client),
    )


def _get_dispatcher() -> Dispatcher:
    global _dispatcher
    if _dispatcher is None:
        settings = get_settings()
        logging.getLogger().setLevel(settings.log_level)
        _dispatcher = build_dispatcher(settings)
    return _dispatcher


def lambda_handler(event: dict[str, Any], _context: Any | None = None) -> dict[str, Any]:
    """Entry point compatible with AWS Lambda."""

    try:
        request = GatewayRequest.model_validate(event)
    except ValidationError as exc:
        logger.error("Invalid gateway event: %s", exc)
        raise

    response = _get_dispatcher().dispatch(request)
    return response.to_proxy()


__all__ = ["build_dispatcher", "lambda_handler"]
