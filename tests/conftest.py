"""
Shared Test Fixtures for Post Insights

This module provides common fixtures used across all test modules.
Fixtures include mocks for HTTP responses, the chat gateway, logging,
a fake clock, and data factories for test objects.
"""

import pytest
from unittest.mock import MagicMock, patch
from typing import Optional, Dict, Any, List
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

TEST_API_URL = "https://llama.test/v1/chat/completions"
TEST_API_KEY = "test-llama-api-key"
TEST_MODEL = "test-llama-model"


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def capture_logs():
    """
    Capture log messages for assertion in tests.

    Captures actual log records from the root logger for inspection.

    Returns:
        list: A list that will contain captured log records.
    """
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

    handler = LogCapture()
    handler.setLevel(logging.DEBUG)

    app_logger = logging.getLogger("post_insights")
    original_level = app_logger.level
    app_logger.setLevel(logging.DEBUG)
    app_logger.addHandler(handler)

    yield handler.records

    app_logger.removeHandler(handler)
    app_logger.setLevel(original_level)


# =============================================================================
# HTTP Response Fixtures
# =============================================================================

@pytest.fixture
def mock_http_response():
    """
    Factory for fake requests.Response objects returned by the chat endpoint.

    Usage:
        def test_auth_failure(mock_http_response):
            response = mock_http_response(401, {'error': {'message': 'bad key'}})

    Returns:
        callable: (status_code, json_data, text, url) -> MagicMock response.
    """
    import json

    def _build(status_code: int = 200, json_data: Optional[Dict[str, Any]] = None,
               text: str = '', url: str = TEST_API_URL) -> MagicMock:
        response = MagicMock(status_code=status_code, url=url, ok=200 <= status_code < 300)
        if json_data is None:
            response.text = text
            response.json.side_effect = ValueError("Response body is not JSON")
        else:
            response.text = text or json.dumps(json_data)
            response.json.return_value = json_data
        return response

    return _build


@pytest.fixture
def completion_response(mock_http_response):
    """
    Factory for a successful chat-completion response carrying ``text``.

    Returns:
        callable: text -> mock response with the completion envelope.
    """
    def _create(text: str) -> MagicMock:
        return mock_http_response(
            status_code=200,
            json_data={'completion_message': {'role': 'assistant', 'content': {'type': 'text', 'text': text}}}
        )

    return _create


@pytest.fixture
def mock_requests(mock_http_response):
    """
    Patch requests.post so no test reaches the network.

    ``mock_requests.post`` is the patched function and ``mock_requests.response``
    the response factory, e.g.
    ``mock_requests.post.return_value = mock_requests.response(429, {})``.
    """
    with patch('requests.post') as mock_post:
        yield MagicMock(post=mock_post, response=mock_http_response)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def gateway():
    """A ChatGateway pointed at a test endpoint. Pair with mock_requests."""
    from services.chat_gateway import ChatGateway
    return ChatGateway(TEST_API_URL, TEST_API_KEY, TEST_MODEL, timeout=5)


@pytest.fixture
def stub_gateway():
    """
    A MagicMock standing in for ChatGateway.

    Configure ``stub_gateway.send`` with return_value or side_effect.
    """
    from services.chat_gateway import ChatGateway
    return MagicMock(spec=ChatGateway)


@pytest.fixture
def fake_sleep():
    """
    Fake clock recording every requested delay instead of sleeping.

    Returns:
        MagicMock: Callable whose call_args_list holds the delays.
    """
    return MagicMock(name="sleep")


# =============================================================================
# Data Model Factories
# =============================================================================

@pytest.fixture
def comment_factory():
    """Factory fixture for creating Comment test objects."""
    from data.models import Comment

    def _create_comment(id: str = '1', username: str = 'commenter',
                        text: str = 'Nice post!', timestamp: str = '1h ago'):
        return Comment(id=id, username=username, text=text, timestamp=timestamp)

    return _create_comment


@pytest.fixture
def post_factory(comment_factory):
    """
    Factory fixture for creating Post test objects.

    Usage:
        def test_post(post_factory):
            post = post_factory(id='1', caption='blue sky')

    Returns:
        callable: A factory function for creating Post objects.
    """
    from data.models import Post

    def _create_post(
        id: str = '1',
        username: str = 'test_user',
        caption: str = 'Test caption #test',
        image_url: Optional[str] = None,
        likes: int = 10,
        comments: Optional[List] = None,
        **kwargs
    ):
        """
        Create a Post instance for testing.

        Args:
            id: Post id.
            username: Author username.
            caption: Caption text (hashtags are derived from it).
            image_url: Image URL (a picsum URL by default).
            likes: Like count.
            comments: List of Comment objects (one default comment if None).
            **kwargs: Additional fields (ignored, for forward compatibility).

        Returns:
            Post: A configured Post instance.
        """
        if comments is None:
            comments = [comment_factory(id=f'{id}01')]
        return Post(
            id=id,
            username=username,
            user_avatar='https://picsum.photos/id/64/100/100',
            image_url=image_url or f'https://picsum.photos/id/{id}/800/800',
            caption=caption,
            likes=likes,
            timestamp='2h ago',
            comments=comments,
        )

    return _create_post
