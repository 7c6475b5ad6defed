"""Transport core: one authenticated request/response cycle against the Artie API."""

import json
import logging
from typing import Any, Callable, Optional, TypeVar
from urllib.parse import urljoin

import requests

from artie_client import __version__
from artie_client.shared.errors import (
    ConfigurationError,
    DecodingError,
    EncodingError,
    HttpError,
    NotFoundError,
    TransportError,
)
from artie_client.shared.settings import DEFAULT_ENDPOINT, ClientSettings


logger = logging.getLogger(__name__)

API_KEY_PREFIX = "arsk_"

T = TypeVar("T")


def _to_jsonable(body: Any) -> Any:
    if hasattr(body, "to_dict"):
        return body.to_dict()
    return body


def _build_error(response: requests.Response, method: str, url: str) -> Exception:
    """Classify a non-success response."""
    status = response.status_code
    if status == 404:
        return NotFoundError(method, url)

    if 400 <= status < 500:
        try:
            payload = json.loads(response.text)
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), str):
            return HttpError(status, payload["error"])

    return HttpError(status)


class ArtieClient:
    """Authenticated JSON client for the Artie API.

    The client is immutable after construction and holds no entity state, so
    a single instance can be shared by any number of callers.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        api_key: str = "",
        version: str = __version__,
        timeout: float = 30.0,
    ):
        """
        Initialize the client.

        Args:
            endpoint: Base URL of the Artie API
            api_key: API key, must start with ``arsk_``
            version: Client version reported in the User-Agent header
            timeout: Per-request timeout in seconds

        Raises:
            ConfigurationError: If the API key is malformed
        """
        if not api_key.startswith(API_KEY_PREFIX):
            raise ConfigurationError(
                f"artie-client: api key is malformed (should start with {API_KEY_PREFIX})"
            )

        self._endpoint = endpoint
        self._api_key = api_key
        self._version = version
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "ArtieClient":
        """Build a client from a settings object."""
        return cls(
            endpoint=settings.endpoint,
            api_key=settings.api_key.get_secret_value(),
            version=settings.version,
            timeout=settings.timeout_seconds,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def build_url(self, path: str) -> str:
        base = self._endpoint if self._endpoint.endswith("/") else self._endpoint + "/"
        return urljoin(base, path.lstrip("/"))

    def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        decode: Optional[Callable[[Any], T]] = None,
    ) -> Optional[T]:
        """
        Perform a single API request.

        Args:
            method: HTTP method
            path: Path relative to the endpoint
            body: Request body; dataclasses with ``to_dict`` are converted first
            decode: Converts the decoded JSON response into the target type.
                If omitted the response body is discarded.

        Returns:
            The decoded response, or None when there is nothing to decode
        """
        url = self.build_url(path)

        data = None
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "User-Agent": f"artie-client/{self._version}",
        }
        if body is not None:
            try:
                data = json.dumps(_to_jsonable(body))
            except (TypeError, ValueError) as e:
                raise EncodingError(f"artie-client: failed to encode request body: {e}") from e
            headers["Content-Type"] = "application/json"

        logger.info(f"Making API request: {method} {url}")
        try:
            response = requests.request(
                method, url, data=data, headers=headers, timeout=self._timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"request failed: {e}") from e

        logger.debug(f"API responded with HTTP {response.status_code}: {method} {url}")

        if response.status_code >= 300:
            raise _build_error(response, method, url)

        if decode is None or response.status_code == 204 or not response.text:
            return None

        try:
            return decode(json.loads(response.text))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise DecodingError(f"artie-client: failed to decode response body: {e}") from e

    def connectors(self):
        from artie_client.clients.connector_client import ConnectorClient
        return ConnectorClient(self)

    def destinations(self):
        from artie_client.clients.destination_client import DestinationClient
        return DestinationClient(self)

    def source_readers(self):
        from artie_client.clients.source_reader_client import SourceReaderClient
        return SourceReaderClient(self)

    def pipelines(self):
        from artie_client.clients.pipeline_client import PipelineClient
        return PipelineClient(self)

    def ssh_tunnels(self):
        from artie_client.clients.ssh_tunnel_client import SSHTunnelClient
        return SSHTunnelClient(self)

    def private_links(self):
        from artie_client.clients.private_link_client import PrivateLinkClient
        return PrivateLinkClient(self)

    def deployments(self):
        from artie_client.clients.deployment_client import DeploymentClient
        return DeploymentClient(self)
