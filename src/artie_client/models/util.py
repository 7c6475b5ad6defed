"""Conversion helpers shared by the domain models."""

from typing import Any, List, Optional
from uuid import UUID

from artie_client.shared.errors import TranslationError


def parse_uuid(value: Optional[str]) -> UUID:
    """
    Parse a required UUID string.

    Raises:
        TranslationError: If the value is empty or not a valid UUID
    """
    if not value:
        raise TranslationError("UUID is empty")
    try:
        return UUID(value)
    except ValueError:
        raise TranslationError(f"unable to parse UUID: {value!r}") from None


def parse_optional_uuid(value: Optional[str]) -> Optional[UUID]:
    if not value:
        return None
    return parse_uuid(value)


def uuid_to_string(value: Optional[UUID]) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def list_or_empty(value: Optional[List[Any]]) -> List[Any]:
    """Normalize an absent list to an empty one so round trips compare equal."""
    if value is None:
        return []
    return list(value)
