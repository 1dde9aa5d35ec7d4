"""Routes a gateway request to the times, farecalc or teapot paths."""

from __future__ import annotations

import logging

from config.settings import Settings
from fares.service import FareRequest, FareService
from forecast.service import ForecastService, NormalizedForecast
from gateway.models import GatewayRequest, GatewayResponse, QueryParameters, build_response
from rpa.client import MalformedUpstreamResponse, RPAError, RPAFetchError
from stops.service import StopLookupError, StopService, UnknownStopError

logger = logging.getLogger(__name__)

ACTION_TIMES = "times"
ACTION_FARECALC = "farecalc"
ACTION_BREW_COFFEE = "brewcoffee"


class Dispatcher:
    """Turns one request into one response. Holds no per-request state."""

    def __init__(
        self,
        settings: Settings,
        stop_service: StopService,
        forecast_service: ForecastService,
        fare_service: FareService,
    ) -> None:
        self._settings = settings
        self._messages = settings.messages
        self._stops = stop_service
        self._forecasts = forecast_service
        self._fares = fare_service

    def dispatch(self, request: GatewayRequest) -> GatewayResponse:
        logger.info(
            "Processing request data for request %s with query string parameters %s",
            request.request_id,
            request.raw_params,
        )
        params = request.params
        base_url = self._settings.forecast_url(params.ver)

        if params.action == ACTION_TIMES and params.station:
            return self._times(request, params, base_url)
        if params.action == ACTION_FARECALC and all(
            (params.from_stop, params.to_stop, params.adults, params.children)
        ):
            return self._farecalc(request, params, base_url)
        if params.action == ACTION_BREW_COFFEE:
            return build_response(request, self._messages.im_a_teapot, 418)
        return build_response(request, self._messages.invalid_request, 400)

    def _times(
        self, request: GatewayRequest, params: QueryParameters, base_url: str
    ) -> GatewayResponse:
        try:
            self._stops.validate_stop(params.station)
        except StopLookupError as exc:
            logger.error("Error getting stop for param station=%s: %s", params.station, exc)
            return build_response(request, self._messages.general_times_error, 500)
        except UnknownStopError:
            logger.info("Stop not found for param station=%s", params.station)
            return build_response(request, self._messages.unknown_stop, 404)

        try:
            forecast = self._forecasts.get_forecast(base_url, params.station)
        except RPAFetchError as exc:
            logger.error("Error getting forecast for param station=%s: %s", params.station, exc)
            return build_response(request, self._messages.general_times_error, 500)
        except MalformedUpstreamResponse as exc:
            logger.error("Error decoding forecast for param station=%s: %s", params.station, exc)
            if self._settings.forecast_error_policy == "strict":
                return build_response(request, self._messages.general_times_error, 500)
            forecast = NormalizedForecast()

        return build_response(request, forecast.to_json(), 200)

    def _farecalc(
        self, request: GatewayRequest, params: QueryParameters, base_url: str
    ) -> GatewayResponse:
        fare_request = FareRequest(
            from_stop=params.from_stop,
            to_stop=params.to_stop,
            adults=params.adults,
            children=params.children,
        )
        try:
            fare = self._fares.get_fare(base_url, fare_request)
        except RPAError as exc:
            logger.error(
                "Error getting fare calculation for params from=%s,to=%s,adults=%s,children=%s: %s",
                params.from_stop,
                params.to_stop,
                params.adults,
                params.children,
                exc,
            )
            return build_response(request, self._messages.general_fares_error, 500)
        return build_response(request, fare.to_json(), 200)


__all__ = ["ACTION_BREW_COFFEE", "ACTION_FARECALC", "ACTION_TIMES", "Dispatcher"]
