"""Tests for the transport core."""

import json

import pytest
import requests

from artie_client import __version__
from artie_client.clients.api_client import ArtieClient
from artie_client.shared.errors import (
    ArtieClientError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    HttpError,
    NotFoundError,
    TransportError,
)
from artie_client.shared.settings import ClientSettings
from conftest import API_KEY, ENDPOINT, make_response


class TestClientConstruction:
    """Test suite for client configuration."""

    def test_rejects_key_without_prefix(self, mock_request):
        """Test a malformed key fails before any request is made."""
        with pytest.raises(ConfigurationError):
            ArtieClient(endpoint=ENDPOINT, api_key="sk_live_123")
        mock_request.assert_not_called()

    def test_rejects_empty_key(self):
        with pytest.raises(ConfigurationError):
            ArtieClient(endpoint=ENDPOINT, api_key="")

    def test_from_settings(self):
        settings = ClientSettings(endpoint=ENDPOINT, api_key=API_KEY, timeout_seconds=5)
        client = ArtieClient.from_settings(settings)
        assert client.endpoint == ENDPOINT

    def test_build_url_joins_path(self, client):
        assert client.build_url("connectors/abc") == "https://api.example.com/connectors/abc"

    def test_build_url_keeps_endpoint_prefix(self):
        client = ArtieClient(endpoint="https://example.com/api", api_key=API_KEY)
        assert client.build_url("pipelines") == "https://example.com/api/pipelines"


class TestExecute:
    """Test suite for a single request/response cycle."""

    def test_sets_auth_and_user_agent_headers(self, client, mock_request):
        client.execute("GET", "connectors/abc", decode=dict)

        headers = mock_request.call_args.kwargs["headers"]
        assert headers["Authorization"] == f"Bearer {API_KEY}"
        assert headers["User-Agent"] == f"artie-client/{__version__}"
        assert "Content-Type" not in headers

    def test_sends_json_body(self, client, mock_request, sent_json):
        client.execute("POST", "connectors", {"label": "prod"})

        method, url = mock_request.call_args.args
        assert method == "POST"
        assert url == f"{ENDPOINT}/connectors"
        assert mock_request.call_args.kwargs["headers"]["Content-Type"] == "application/json"
        assert sent_json() == {"label": "prod"}

    def test_passes_timeout(self, mock_request):
        client = ArtieClient(endpoint=ENDPOINT, api_key=API_KEY, timeout=7.5)
        client.execute("GET", "connectors")
        assert mock_request.call_args.kwargs["timeout"] == 7.5

    def test_decodes_response(self, client, mock_request):
        mock_request.return_value = make_response(200, {"uuid": "abc"})
        assert client.execute("GET", "x", decode=lambda data: data["uuid"]) == "abc"

    def test_returns_none_without_decoder(self, client, mock_request):
        mock_request.return_value = make_response(200, {"uuid": "abc"})
        assert client.execute("DELETE", "x") is None

    def test_returns_none_for_empty_body(self, client, mock_request):
        mock_request.return_value = make_response(204)
        assert client.execute("POST", "x", decode=dict) is None

    def test_unserializable_body_raises_encoding_error(self, client, mock_request):
        with pytest.raises(EncodingError):
            client.execute("POST", "x", {"value": object()})
        mock_request.assert_not_called()

    def test_transport_failure_wraps_cause(self, client, mock_request):
        cause = requests.ConnectionError("connection refused")
        mock_request.side_effect = cause

        with pytest.raises(TransportError) as exc_info:
            client.execute("GET", "x")

        assert exc_info.value.__cause__ is cause

    def test_invalid_json_raises_decoding_error(self, client, mock_request):
        mock_request.return_value = make_response(200, text="<html>")
        with pytest.raises(DecodingError):
            client.execute("GET", "x", decode=dict)

    def test_wrong_shape_raises_decoding_error(self, client, mock_request):
        mock_request.return_value = make_response(200, {"unexpected": True})
        with pytest.raises(DecodingError):
            client.execute("GET", "x", decode=lambda data: data["uuid"])


class TestErrorClassification:
    """Test suite for non-success responses."""

    @pytest.mark.parametrize("body", [None, {"error": "gone"}, {"unrelated": 1}])
    def test_404_is_not_found_regardless_of_body(self, client, mock_request, body):
        mock_request.return_value = make_response(404, body)

        with pytest.raises(NotFoundError) as exc_info:
            client.execute("GET", "connectors/abc")

        assert exc_info.value.method == "GET"
        assert exc_info.value.url == f"{ENDPOINT}/connectors/abc"

    def test_4xx_with_error_body(self, client, mock_request):
        mock_request.return_value = make_response(400, {"error": "boom"})

        with pytest.raises(HttpError) as exc_info:
            client.execute("POST", "x", {})

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "boom"
        assert str(exc_info.value) == "boom (HTTP 400)"

    def test_4xx_with_unparseable_body(self, client, mock_request):
        mock_request.return_value = make_response(400, text="not json")

        with pytest.raises(HttpError) as exc_info:
            client.execute("POST", "x", {})

        assert exc_info.value.message == ""
        assert str(exc_info.value) == f"{HttpError.DEFAULT_MESSAGE} (HTTP 400)"

    def test_4xx_with_non_string_error(self, client, mock_request):
        mock_request.return_value = make_response(422, {"error": {"field": "name"}})

        with pytest.raises(HttpError) as exc_info:
            client.execute("POST", "x", {})

        assert exc_info.value.message == ""

    def test_5xx_does_not_extract_message(self, client, mock_request):
        mock_request.return_value = make_response(500, {"error": "database down"})

        with pytest.raises(HttpError) as exc_info:
            client.execute("GET", "x")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == ""

    def test_errors_share_a_base_class(self, client, mock_request):
        mock_request.return_value = make_response(404)
        with pytest.raises(ArtieClientError):
            client.execute("GET", "x")

    def test_error_body_is_json(self, client, mock_request):
        mock_request.return_value = make_response(401, text=json.dumps({"error": "bad key"}))
        with pytest.raises(HttpError, match="bad key"):
            client.execute("GET", "x")
