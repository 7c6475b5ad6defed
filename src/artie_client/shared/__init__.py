"""Shared configuration and error types."""

from artie_client.shared.errors import (
    ArtieClientError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    HttpError,
    NotFoundError,
    TranslationError,
    TransportError,
    ValidationError,
)
from artie_client.shared.settings import ClientSettings, get_settings

__all__ = [
    "ArtieClientError",
    "ConfigurationError",
    "DecodingError",
    "EncodingError",
    "HttpError",
    "NotFoundError",
    "TranslationError",
    "TransportError",
    "ValidationError",
    "ClientSettings",
    "get_settings",
]
