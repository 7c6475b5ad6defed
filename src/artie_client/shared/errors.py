"""Error taxonomy for the Artie API client."""

from typing import Optional


class ArtieClientError(Exception):
    """Base error for everything raised by the client."""


class ConfigurationError(ArtieClientError):
    """The client was configured with an invalid endpoint or API key."""


class EncodingError(ArtieClientError):
    """A request body could not be serialized to JSON."""


class TransportError(ArtieClientError):
    """The HTTP request failed before a response was received."""


class NotFoundError(ArtieClientError):
    """The API returned 404 for the requested resource."""

    def __init__(self, method: str, url: str):
        self.method = method
        self.url = url
        super().__init__(f"artie-client: not found, request: {url!r}, method: {method!r}")


class HttpError(ArtieClientError):
    """The API returned a non-success status other than 404."""

    DEFAULT_MESSAGE = "server returned a non-200 status code"

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message or ""
        super().__init__(str(self))

    def __str__(self) -> str:
        message = self.message or self.DEFAULT_MESSAGE
        return f"{message} (HTTP {self.status_code})"


class DecodingError(ArtieClientError):
    """A response body did not match the expected shape."""


class TranslationError(ArtieClientError):
    """A value could not be converted between the API and domain models."""


class ValidationError(ArtieClientError):
    """A ping or validate endpoint reported a logical failure with a 200 status."""

    def __init__(self, message: str, reason: str):
        self.reason = reason
        super().__init__(f"{message}: {reason}")
