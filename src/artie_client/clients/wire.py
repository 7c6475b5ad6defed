"""Helpers for encoding and decoding JSON wire values."""

from typing import Any, Dict, List, Optional
from uuid import UUID


def parse_optional_uuid(value: Optional[str]) -> Optional[UUID]:
    if not value:
        return None
    return UUID(value)


def format_uuid(value: Optional[UUID]) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def omit_empty(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop zero-valued entries so unrelated fields are left out of the payload."""
    return {key: value for key, value in data.items() if value not in (None, "", 0)}


def omit_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def optional_list(value: Optional[List[Any]]) -> Optional[List[Any]]:
    if value is None:
        return None
    return list(value)
