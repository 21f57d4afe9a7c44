"""
Chat Gateway Module

This module handles all outbound calls to the Llama chat-completion endpoint.
It normalizes message shapes, performs the HTTP request, classifies failures,
and answers with the mock responder when the service is unreachable or
rejects the request.
"""

from typing import Any, Dict, List, Optional

import requests

from config import settings
from data.models import CapabilityReport
from services.capability_probe import CapabilityProbe
from services.mock_responder import MockResponder
from utils.exceptions import (
    ConfigurationError, GatewayError, NetworkUnreachableError, ResponseShapeError,
    RECOVERABLE_GATEWAY_ERRORS, classify_http_error
)
from utils.helpers import flatten_content, safe_get
from utils.logger import get_logger

logger = get_logger(__name__)

Message = Dict[str, Any]


def normalize_messages(messages: List[Message]) -> List[Message]:
    """
    Collapse structured message content to plain text.

    Args:
        messages: Role-tagged messages whose content may be a list of parts

    Returns:
        List[Message]: New message dicts whose content is always a string
    """
    return [
        {'role': message.get('role'), 'content': flatten_content(message.get('content'))}
        for message in messages
    ]


class ChatGateway:
    """Client for the chat-completion endpoint with mock fallback."""

    def __init__(self, api_url: str, api_key: str, model: str,
                 timeout: float = 20.0, mock_responder: Optional[MockResponder] = None):
        """
        Initialize the gateway.

        Args:
            api_url: Full URL of the chat-completion endpoint
            api_key: Bearer credential for the endpoint
            model: Model identifier sent with every request
            timeout: Seconds to wait for each request
            mock_responder: Responder used when the endpoint is unavailable
        """
        if not api_key:
            raise ConfigurationError("Missing required LLAMA_API_KEY")
        if not api_url:
            raise ConfigurationError("Missing required LLAMA_API_URL")

        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.mock_responder = mock_responder or MockResponder()

    @classmethod
    def from_settings(cls) -> "ChatGateway":
        """Build a gateway from config.settings."""
        return cls(
            api_url=settings.LLAMA_API_URL,
            api_key=settings.LLAMA_API_KEY,
            model=settings.LLAMA_MODEL,
            timeout=settings.LLAMA_REQUEST_TIMEOUT,
        )

    def _headers(self) -> Dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self.api_key}',
        }

    def complete(self, messages: List[Message]) -> str:
        """
        Send messages to the endpoint without any fallback.

        Args:
            messages: Role-tagged messages; structured content is flattened first

        Returns:
            str: The assistant's reply text

        Raises:
            GatewayError: A subclass matching the failure (network, HTTP status, response shape)
        """
        payload = {
            'model': self.model,
            'messages': normalize_messages(messages),
        }
        logger.debug(f"Sending {len(payload['messages'])} messages to Llama API")

        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise GatewayError(f"Llama API request timed out after {self.timeout}s: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkUnreachableError(f"Llama API unreachable: {e}") from e
        except requests.exceptions.RequestException as e:
            raise GatewayError(f"Llama API request failed: {e}") from e

        if not response.ok:
            api_message = None
            try:
                api_message = safe_get(response.json(), 'error', 'message')
            except ValueError:
                pass
            raise classify_http_error(
                response.status_code,
                f"Llama API returned HTTP {response.status_code}",
                api_message
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseShapeError(f"Llama API returned a non-JSON body: {e}",
                                     status_code=response.status_code) from e

        text = safe_get(data, 'completion_message', 'content', 'text')
        if not isinstance(text, str):
            raise ResponseShapeError("No response from Llama API: completion_message.content.text missing",
                                     status_code=response.status_code)

        logger.debug(f"Llama API response: {text[:100]}")
        return text

    def send(self, messages: List[Message]) -> str:
        """
        Send messages to the endpoint, answering with a mock response on recoverable failures.

        Authentication, rate limit, bad gateway, bad request and connection
        failures are answered by the mock responder. Any other failure propagates.

        Args:
            messages: Role-tagged messages

        Returns:
            str: The reply text, real or mocked

        Raises:
            GatewayError: For failures the mock responder does not cover
        """
        try:
            return self.complete(messages)
        except RECOVERABLE_GATEWAY_ERRORS as e:
            logger.warning(f"Falling back to mock response due to {type(e).__name__}: {e}")
            return self.mock_responder.respond(messages)
        except GatewayError as e:
            logger.error(f"Error calling Llama API ({type(e).__name__}): {e}")
            raise

    def probe(self) -> CapabilityReport:
        """Report which analysis capabilities are live. Never raises."""
        return CapabilityProbe(self).probe()

    def check_connection(self) -> Dict[str, Any]:
        """
        Send a greeting straight to the endpoint to test connectivity.

        Returns:
            Dict: ``success`` plus ``response`` on success, or ``error`` and ``status_code`` on failure
        """
        try:
            reply = self.complete([{'role': 'user', 'content': settings.CONNECTION_TEST_MESSAGE}])
            logger.info("Llama API connection successful")
            return {'success': True, 'response': reply}
        except GatewayError as e:
            logger.error(f"Llama API connection failed ({type(e).__name__}): {e}")
            return {
                'success': False,
                'error': str(e),
                'status_code': e.status_code,
                'api_message': e.api_message,
            }
