"""Base class shared by the per-resource API clients."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from artie_client.clients.api_client import ArtieClient
from artie_client.shared.errors import ValidationError


logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Body returned by ping and validate endpoints.

    These endpoints answer 200 even when the check fails; the failure is
    reported through ``error`` instead of the HTTP status.
    """

    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationResult":
        return cls(error=data.get("error") or "")


class ResourceClient(ABC):
    """Client for one kind of API resource rooted at a fixed base path."""

    def __init__(self, client: ArtieClient):
        """
        Initialize the resource client.

        Args:
            client: Transport used for every request
        """
        self.client = client

    @property
    @abstractmethod
    def base_path(self) -> str:
        """Path of the resource collection, relative to the API endpoint."""
        pass

    def _path(self, *parts: str) -> str:
        return "/".join([self.base_path, *(str(part) for part in parts)])

    def _delete(self, resource_uuid: str) -> None:
        logger.info(f"Deleting {self.base_path}/{resource_uuid}")
        self.client.execute("DELETE", self._path(resource_uuid))

    def _validate(self, path: str, body: Any, failure_message: str) -> None:
        """
        Call a ping/validate endpoint and raise if it reports a logical failure.

        Raises:
            ValidationError: If the response carries a non-empty ``error`` field
        """
        result = self.client.execute("POST", path, body, ValidationResult.from_dict)
        if result is not None and not result.ok:
            logger.info(f"Validation failed for {path}: {result.error}")
            raise ValidationError(failure_message, result.error)
