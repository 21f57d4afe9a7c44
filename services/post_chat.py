"""
Post Chat Module

A conversational assistant scoped to one post. The visible transcript keeps
every turn; requests replay only the system prompt, the post context and the
user's own messages.
"""

from typing import Dict, List

from config import settings
from data.models import Post
from services.chat_gateway import ChatGateway
from services.image_analysis import build_post_context
from utils.exceptions import GatewayError, ResponseShapeError
from utils.logger import get_logger

logger = get_logger(__name__)

ERROR_PREFIX = "I apologize, but I encountered an error while processing your request."


def describe_chat_error(error: Exception) -> str:
    """Build the apology shown in the transcript for a failed turn."""
    if isinstance(error, ResponseShapeError) or not isinstance(error, GatewayError):
        return f"{ERROR_PREFIX} Something unexpected happened. Please try again."
    if error.status_code:
        return (f"{ERROR_PREFIX} There was an issue with the AI service "
                f"(Error {error.status_code}). Please try again later.")
    return f"{ERROR_PREFIX} Could not reach the AI service. Please check your internet connection."


class PostChatSession:
    """Chat transcript about a single post."""

    def __init__(self, post: Post, gateway: ChatGateway):
        self.post = post
        self.gateway = gateway
        self.transcript: List[Dict[str, str]] = [
            {'role': 'system', 'content': settings.POST_ASSISTANT_SYSTEM_PROMPT},
            {'role': 'assistant', 'content': settings.POST_ASSISTANT_GREETING},
        ]

    def _request_messages(self) -> List[Dict[str, str]]:
        context = f"I'm looking at this Instagram post:\n{build_post_context(self.post)}"
        user_turns = [m for m in self.transcript if m['role'] == 'user']
        return [
            {'role': 'system', 'content': settings.POST_ASSISTANT_SYSTEM_PROMPT},
            {'role': 'user', 'content': context},
        ] + user_turns

    def ask(self, text: str) -> str:
        """
        Send a user message and record the reply.

        Args:
            text: The user's message; blank messages are ignored

        Returns:
            str: The assistant reply, or an apology if the call failed
        """
        if not text or not text.strip():
            return ""

        self.transcript.append({'role': 'user', 'content': text})

        try:
            reply = self.gateway.send(self._request_messages())
        except Exception as e:
            logger.error(f"Error calling Llama API for post {self.post.id} chat ({type(e).__name__}): {e}")
            reply = describe_chat_error(e)

        self.transcript.append({'role': 'assistant', 'content': reply})
        return reply
