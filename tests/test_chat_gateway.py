"""
Tests for Chat Gateway - Llama chat-completion client

Tests cover request construction, response envelope parsing, HTTP error
classification, mock fallback on recoverable failures, and the
connection check.
"""

import pytest
from unittest.mock import MagicMock, patch
import requests
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.chat_gateway import ChatGateway, normalize_messages
from services.mock_responder import MockResponder
from utils.exceptions import (
    AuthError, BadRequestError, ConfigurationError, GatewayError, NetworkUnreachableError,
    RateLimitedError, ResponseShapeError, UpstreamUnavailableError
)
from conftest import TEST_API_URL, TEST_API_KEY, TEST_MODEL

MESSAGES = [
    {'role': 'system', 'content': 'You are a helpful Instagram assistant.'},
    {'role': 'user', 'content': 'What is the tone of the comments?'},
]


class TestGatewayInit:
    """Tests for gateway construction."""

    def test_missing_api_key_raises(self):
        with pytest.raises(ConfigurationError, match="LLAMA_API_KEY"):
            ChatGateway(TEST_API_URL, "", TEST_MODEL)

    def test_missing_api_url_raises(self):
        with pytest.raises(ConfigurationError, match="LLAMA_API_URL"):
            ChatGateway("", TEST_API_KEY, TEST_MODEL)

    def test_default_mock_responder(self):
        gateway = ChatGateway(TEST_API_URL, TEST_API_KEY, TEST_MODEL)
        assert isinstance(gateway.mock_responder, MockResponder)
        assert gateway.timeout == 20.0

    def test_from_settings_reads_config(self):
        with patch('services.chat_gateway.settings') as mock_settings:
            mock_settings.LLAMA_API_URL = "https://configured.test/chat"
            mock_settings.LLAMA_API_KEY = "configured-key"
            mock_settings.LLAMA_MODEL = "configured-model"
            mock_settings.LLAMA_REQUEST_TIMEOUT = 7.0

            gateway = ChatGateway.from_settings()

        assert gateway.api_url == "https://configured.test/chat"
        assert gateway.api_key == "configured-key"
        assert gateway.model == "configured-model"
        assert gateway.timeout == 7.0


class TestNormalizeMessages:
    """Tests for structured content flattening."""

    def test_text_parts_are_joined(self):
        messages = [{'role': 'user', 'content': [
            {'type': 'text', 'text': 'What is'},
            {'type': 'image_url', 'image_url': {'url': 'https://picsum.photos/id/1/1/1'}},
            {'type': 'text', 'text': 'in this image?'},
        ]}]
        assert normalize_messages(messages) == [{'role': 'user', 'content': 'What is in this image?'}]

    def test_string_content_is_unchanged(self):
        assert normalize_messages(MESSAGES) == MESSAGES

    def test_input_is_not_mutated(self):
        messages = [{'role': 'user', 'content': [{'type': 'text', 'text': 'hi'}]}]
        normalize_messages(messages)
        assert isinstance(messages[0]['content'], list)


class TestComplete:
    """Tests for the raw request path."""

    def test_success_returns_completion_text(self, gateway, mock_requests, completion_response):
        mock_requests.post.return_value = completion_response("The tone is upbeat.")

        assert gateway.complete(MESSAGES) == "The tone is upbeat."

    def test_request_shape(self, gateway, mock_requests, completion_response):
        mock_requests.post.return_value = completion_response("ok")

        gateway.complete([{'role': 'user', 'content': [{'type': 'text', 'text': 'hello'}]}])

        args, kwargs = mock_requests.post.call_args
        assert args[0] == TEST_API_URL
        assert kwargs['json'] == {'model': TEST_MODEL, 'messages': [{'role': 'user', 'content': 'hello'}]}
        assert kwargs['headers']['Authorization'] == f'Bearer {TEST_API_KEY}'
        assert kwargs['headers']['Content-Type'] == 'application/json'
        assert kwargs['timeout'] == 5

    @pytest.mark.parametrize("status_code,error_class", [
        (400, BadRequestError),
        (401, AuthError),
        (429, RateLimitedError),
        (502, UpstreamUnavailableError),
        (500, GatewayError),
    ])
    def test_http_errors_are_classified(self, gateway, mock_requests, status_code, error_class):
        mock_requests.post.return_value = mock_requests.response(
            status_code=status_code, json_data={'error': {'message': 'upstream says no'}}
        )

        with pytest.raises(error_class) as exc_info:
            gateway.complete(MESSAGES)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.api_message == 'upstream says no'

    def test_error_without_json_body(self, gateway, mock_requests):
        mock_requests.post.return_value = mock_requests.response(status_code=401, text='Unauthorized')

        with pytest.raises(AuthError) as exc_info:
            gateway.complete(MESSAGES)

        assert exc_info.value.api_message is None

    def test_connection_error_is_network_unreachable(self, gateway, mock_requests):
        mock_requests.post.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(NetworkUnreachableError):
            gateway.complete(MESSAGES)

    def test_timeout_is_generic_gateway_error(self, gateway, mock_requests):
        mock_requests.post.side_effect = requests.exceptions.Timeout("slow")

        with pytest.raises(GatewayError) as exc_info:
            gateway.complete(MESSAGES)

        assert type(exc_info.value) is GatewayError

    def test_missing_envelope_is_response_shape_error(self, gateway, mock_requests):
        mock_requests.post.return_value = mock_requests.response(json_data={'choices': []})

        with pytest.raises(ResponseShapeError):
            gateway.complete(MESSAGES)

    def test_non_json_success_is_response_shape_error(self, gateway, mock_requests):
        mock_requests.post.return_value = mock_requests.response(status_code=200, text='<html>')

        with pytest.raises(ResponseShapeError):
            gateway.complete(MESSAGES)


class TestSendFallback:
    """Tests for the mock fallback policy."""

    @pytest.mark.parametrize("status_code", [400, 401, 429, 502])
    def test_recoverable_status_returns_mock_answer(self, gateway, mock_requests, status_code):
        mock_requests.post.return_value = mock_requests.response(
            status_code=status_code, json_data={'error': {'message': 'nope'}}
        )

        assert gateway.send(MESSAGES) == MockResponder().respond(MESSAGES)

    def test_connection_error_returns_mock_answer(self, gateway, mock_requests):
        mock_requests.post.side_effect = requests.exceptions.ConnectionError("no route")

        assert gateway.send(MESSAGES) == MockResponder().respond(MESSAGES)

    def test_unrecoverable_status_propagates(self, gateway, mock_requests):
        mock_requests.post.return_value = mock_requests.response(status_code=500, json_data={})

        with pytest.raises(GatewayError):
            gateway.send(MESSAGES)

    def test_response_shape_error_propagates(self, gateway, mock_requests):
        mock_requests.post.return_value = mock_requests.response(json_data={'unexpected': True})

        with pytest.raises(ResponseShapeError):
            gateway.send(MESSAGES)

    def test_success_does_not_consult_mock(self, mock_requests, completion_response):
        responder = MagicMock(spec=MockResponder)
        gateway = ChatGateway(TEST_API_URL, TEST_API_KEY, TEST_MODEL, mock_responder=responder)
        mock_requests.post.return_value = completion_response("real answer")

        assert gateway.send(MESSAGES) == "real answer"
        responder.respond.assert_not_called()

    def test_fallback_is_logged(self, gateway, mock_requests, capture_logs):
        mock_requests.post.return_value = mock_requests.response(status_code=429, json_data={})

        gateway.send(MESSAGES)

        assert any("Falling back to mock response" in record.getMessage() for record in capture_logs)


class TestCheckConnection:
    """Tests for the connectivity check."""

    def test_success(self, gateway, mock_requests, completion_response):
        mock_requests.post.return_value = completion_response("Hi, I'm Llama.")

        result = gateway.check_connection()

        assert result == {'success': True, 'response': "Hi, I'm Llama."}

    def test_failure_reports_status_and_message(self, gateway, mock_requests):
        mock_requests.post.return_value = mock_requests.response(
            status_code=401, json_data={'error': {'message': 'invalid key'}}
        )

        result = gateway.check_connection()

        assert result['success'] is False
        assert result['status_code'] == 401
        assert result['api_message'] == 'invalid key'

    def test_failure_does_not_use_mock(self, gateway, mock_requests):
        mock_requests.post.side_effect = requests.exceptions.ConnectionError("down")

        result = gateway.check_connection()

        assert result['success'] is False
        assert result['status_code'] is None


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
