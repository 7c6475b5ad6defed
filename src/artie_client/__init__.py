"""Typed client for the Artie API."""

__version__ = "0.1.0"

from artie_client.clients.api_client import ArtieClient
from artie_client.shared.settings import ClientSettings, get_settings

__all__ = ["ArtieClient", "ClientSettings", "get_settings", "__version__"]
