"""Application configuration.

Loads settings from ``STOREFRONT_``-prefixed environment variables and an
optional ``.env`` file.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront_pipeline.record import MIN_LINE_LENGTH
from storefront_pipeline.stages.cors import (
    DEFAULT_ALLOW_HEADERS,
    DEFAULT_ALLOW_METHODS,
    DEFAULT_ALLOW_ORIGIN,
)


class Settings(BaseSettings):
    """Storefront settings loaded from the environment.

    Attributes:
        project_name: Display name for the API.
        version: API version string.
        debug: Expose the interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_response_bodies: Append the captured JSON body to access lines.
        log_line_max_length: Truncation length for access lines with bodies,
            at least 2.
        cors_allow_origin: ``Access-Control-Allow-Origin`` value.
        cors_allow_methods: ``Access-Control-Allow-Methods`` value.
        cors_allow_headers: ``Access-Control-Allow-Headers`` value.
        api_prefix: Mount point of the catalog routes.
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_", env_file=".env", env_file_encoding="utf-8"
    )

    project_name: str = "Storefront"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_response_bodies: bool = False
    log_line_max_length: int = Field(80, ge=MIN_LINE_LENGTH)
    cors_allow_origin: str = DEFAULT_ALLOW_ORIGIN
    cors_allow_methods: str = DEFAULT_ALLOW_METHODS
    cors_allow_headers: str = DEFAULT_ALLOW_HEADERS
    api_prefix: str = "/api"
