"""Stop metadata lookups against the DynamoDB stops table."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import boto3
from boto3.dynamodb.types import TypeDeserializer
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

_deserializer = TypeDeserializer()


class StopLookupError(RuntimeError):
    """Raised when the stops table cannot be read or its record decoded."""


class UnknownStopError(LookupError):
    """Raised when no usable record exists for a stop code."""


class StopRecord(BaseModel):
    """A row of the stops table."""

    model_config = ConfigDict(populate_by_name=True)

    car: int = 0
    coordinates: dict[str, float] = Field(default_factory=dict)
    cycle: int = 0
    display_irish_name: str = Field("", alias="displayIrishName")
    display_name: str = Field("", alias="displayName")
    line: str = ""
    short_name: str = Field("", alias="shortName")

    @property
    def found(self) -> bool:
        return bool(self.display_name)


class StopStore(Protocol):
    def lookup(self, short_name: str) -> dict[str, Any]:
        """Return the raw record for a stop, or an empty mapping."""


class DynamoDBStopStore:
    """Reads stop records by their ``shortName`` hash key."""

    def __init__(
        self,
        table_name: str,
        *,
        region_name: str | None = None,
        client: Any | None = None,
    ) -> None:
        self._table_name = table_name
        self._client = client or boto3.client("dynamodb", region_name=region_name)

    def lookup(self, short_name: str) -> dict[str, Any]:
        try:
            result = self._client.get_item(
                TableName=self._table_name,
                Key={"shortName": {"S": short_name}},
            )
        except (BotoCoreError, ClientError) as exc:
            raise StopLookupError(
                f"Error getting item from DynamoDB table with shortName:{short_name}"
            ) from exc

        item = result.get("Item") or {}
        try:
            return {key: _deserializer.deserialize(value) for key, value in item.items()}
        except (TypeError, ValueError) as exc:
            raise StopLookupError("Failed to unmarshal record") from exc


class StopService:
    """Resolves a stop code into a known StopRecord."""

    def __init__(self, store: StopStore) -> None:
        self._store = store

    def validate_stop(self, short_name: str) -> StopRecord:
        raw = self._store.lookup(short_name)
        try:
            stop = StopRecord.model_validate(raw)
        except ValidationError as exc:
            raise StopLookupError(f"Failed to unmarshal record for shortName:{short_name}") from exc

        if not stop.found:
            raise UnknownStopError(short_name)
        return stop


__all__ = [
    "DynamoDBStopStore",
    "StopLookupError",
    "StopRecord",
    "StopService",
    "StopStore",
    "UnknownStopError",
]
