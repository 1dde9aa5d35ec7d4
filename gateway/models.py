"""API Gateway proxy event and response shapes."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class QueryParameters(BaseModel):
    """Recognised query string parameters; anything missing reads as ``""``."""

    model_config = ConfigDict(frozen=True)

    ver: str = ""
    action: str = ""
    station: str = ""
    from_stop: str = Field("", alias="from")
    to_stop: str = Field("", alias="to")
    adults: str = ""
    children: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_when_null(cls, value: Any) -> Any:
        return "" if value is None else value


class RequestContext(BaseModel):
    request_id: str = Field("", alias="requestId")


class GatewayRequest(BaseModel):
    """The subset of an API Gateway proxy event the dispatcher reads."""

    model_config = ConfigDict(populate_by_name=True)

    query_string_parameters: dict[str, str | None] | None = Field(
        default=None, alias="queryStringParameters"
    )
    request_context: RequestContext = Field(default_factory=RequestContext, alias="requestContext")

    @property
    def request_id(self) -> str:
        return self.request_context.request_id

    @property
    def raw_params(self) -> dict[str, str | None]:
        return self.query_string_parameters or {}

    @property
    def params(self) -> QueryParameters:
        return QueryParameters.model_validate(self.raw_params)


class GatewayResponse(BaseModel):
    status_code: int
    body: str

    def to_proxy(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": {"Content-Type": "application/json"},
            "body": self.body,
        }


def build_response(request: GatewayRequest, body: str, status_code: int) -> GatewayResponse:
    """Wrap a body and status code, logging what is sent back."""

    response = GatewayResponse(status_code=status_code, body=body)
    logger.info(
        "Responding to request %s for parameters %s with status code %s and response object: %s",
        request.request_id,
        request.raw_params,
        response.status_code,
        response.body,
    )
    return response


__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "QueryParameters",
    "RequestContext",
    "build_response",
]
