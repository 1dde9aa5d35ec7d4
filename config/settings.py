"""Centralised configuration for the Luas gateway Lambda."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.messages import ResponseMessages


class Settings(BaseSettings):
    """Environment-driven settings, built once per process."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    aws_region: str = Field("eu-west-1", description="Region hosting the stops table.")
    stops_table: str = Field("GoLuasStops", description="DynamoDB table keyed by shortName.")

    rpa_forecast_url_v1: str = Field(
        "http://luasforecasts.rpa.ie/xml/get.ashx?encrypt=false&ver=1&",
        description="RPA endpoint template selected by ver=1 (or no ver).",
    )
    rpa_forecast_url_v2: str = Field(
        "http://luasforecasts.rpa.ie/xml/get.ashx?encrypt=false&ver=2&",
        description="RPA endpoint template selected by ver=2.",
    )
    rpa_timeout: float | None = Field(
        None,
        gt=0,
        description="Optional upstream timeout in seconds. Unset means wait indefinitely.",
    )

    tram_filter: Literal["strict", "loose"] = "strict"
    forecast_error_policy: Literal["lenient", "strict"] = "lenient"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    messages: ResponseMessages = Field(default_factory=ResponseMessages)

    def forecast_url(self, ver: str) -> str:
        """Return the upstream template for the requested API version."""

        if ver == "2":
            return self.rpa_forecast_url_v2
        return self.rpa_forecast_url_v1


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
