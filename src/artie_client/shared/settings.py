"""Environment-driven configuration for the Artie API client."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from artie_client import __version__


DEFAULT_ENDPOINT = "https://api.artie.com"


class ClientSettings(BaseSettings):
    """Connection settings, read from ``ARTIE_*`` environment variables."""

    endpoint: str = DEFAULT_ENDPOINT
    api_key: SecretStr = SecretStr("")
    timeout_seconds: float = 30.0
    version: str = __version__

    model_config = SettingsConfigDict(
        env_prefix="ARTIE_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> ClientSettings:
    return ClientSettings()
