"""Fixed JSON bodies for the responses that carry no upstream data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

INVALID_REQUEST = '{"message": "Invalid request"}'
UNKNOWN_STOP = '{"message": "Unknown stop"}'
GENERAL_TIMES_ERROR = '{"message": "General error getting times"}'
GENERAL_FARES_ERROR = '{"message": "General error getting fares"}'
IM_A_TEAPOT = (
    '{"message": "Your request to brew coffee with this server has failed. '
    "This HTCPCP server is a teapot. The requested entity body is short and stout. "
    'Tip me over and pour me out."}'
)


class ResponseMessages(BaseModel):
    """Static response bodies carried on the settings object."""

    model_config = ConfigDict(frozen=True)

    invalid_request: str = INVALID_REQUEST
    unknown_stop: str = UNKNOWN_STOP
    general_times_error: str = GENERAL_TIMES_ERROR
    general_fares_error: str = GENERAL_FARES_ERROR
    im_a_teapot: str = IM_A_TEAPOT


__all__ = [
    "GENERAL_FARES_ERROR",
    "GENERAL_TIMES_ERROR",
    "IM_A_TEAPOT",
    "INVALID_REQUEST",
    "UNKNOWN_STOP",
    "ResponseMessages",
]
