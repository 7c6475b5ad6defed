"""Pytest configuration and fixtures."""

import json
from unittest.mock import MagicMock, patch

import pytest

from artie_client.clients.api_client import ArtieClient


API_KEY = "arsk_test_key"
ENDPOINT = "https://api.example.com"


def make_response(status_code=200, body=None, text=None):
    """Build a fake ``requests.Response`` with the given status and JSON body."""
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        text = "" if body is None else json.dumps(body)
    response.text = text
    return response


@pytest.fixture
def client():
    """Provide a client pointed at a fake endpoint."""
    return ArtieClient(endpoint=ENDPOINT, api_key=API_KEY)


@pytest.fixture
def mock_request():
    """Patch the HTTP layer; tests set ``return_value`` to a fake response."""
    with patch("artie_client.clients.api_client.requests.request") as mock:
        mock.return_value = make_response(200, {})
        yield mock


@pytest.fixture
def sent_json(mock_request):
    """Return the decoded JSON body of the last request."""
    def _sent_json():
        return json.loads(mock_request.call_args.kwargs["data"])
    return _sent_json
