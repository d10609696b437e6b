"""Settings for building a REST client from the environment or a .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rest_api.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_READ_TIMEOUT_SECONDS,
    MediaType,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    base_address: str = Field(..., validation_alias="REST_API_BASE_ADDRESS")
    proxy: str | None = Field(None, validation_alias="REST_API_PROXY")

    content_type: MediaType = Field(MediaType.JSON, validation_alias="REST_API_CONTENT_TYPE")
    accept_type: MediaType = Field(MediaType.JSON, validation_alias="REST_API_ACCEPT_TYPE")

    access_token: str = Field("", validation_alias="REST_API_ACCESS_TOKEN")
    user_agent: str = Field("", validation_alias="REST_API_USER_AGENT")

    connect_timeout_seconds: float = Field(
        DEFAULT_CONNECT_TIMEOUT_SECONDS,
        validation_alias="REST_API_CONNECT_TIMEOUT_SECONDS",
    )
    read_timeout_seconds: float = Field(
        DEFAULT_READ_TIMEOUT_SECONDS,
        validation_alias="REST_API_READ_TIMEOUT_SECONDS",
    )
