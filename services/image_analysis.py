"""
Image Analysis Module

This module answers questions about images and posts through a text-only
chat model. Images are "seen" through the description ContextHeuristics
derives from the URL, which is injected into the prompt. Every failure path
ends in a user-facing string; nothing here raises to its caller.
"""

from typing import Any, Dict, List, Optional

from config import settings
from data.models import Post
from services import context_heuristics
from services.chat_gateway import ChatGateway
from utils.exceptions import GatewayError
from utils.logger import get_logger

logger = get_logger(__name__)

SIMULATED_VISION_PROMPT = """You are a multimodal AI with vision capabilities.
You are analyzing an image that contains the following:

{description}

Respond to the user's question about this image as if you directly analyzed the image pixels.
Be detailed and specific in your analysis. If the question asks about something not visible
in the description provided, politely explain that you can't see that aspect in the image."""

CONTEXT_ASSISTED_PROMPT = """You are a vision-capable assistant that can analyze images. For this specific image, I'll provide context about what it contains.

The image context is: {description}

Please answer questions about this image as if you could see it, based on the context provided.
If you can't answer something specific that would require seeing details not in the context,
indicate that those specific details aren't available in the context provided."""

POST_CONTEXT_TEMPLATE = """The user is asking about this Instagram post:
{context}

User Query: {query}"""


def build_post_context(post: Post) -> str:
    """Render the post fields the assistant prompts share, one per line."""
    return (
        f"Caption: {post.caption}\n"
        f"Username: {post.username}\n"
        f"Hashtags: {' '.join(post.hashtags)}\n"
        f"Comments: {post.comments_text()}\n"
        f"Likes: {post.likes}"
    )


def failure_message(error: Optional[Exception]) -> str:
    """
    Turn a failed analysis into the string shown to the user.

    Args:
        error: The last error raised, if any

    Returns:
        str: The upstream API message when one exists, otherwise a fixed apology
    """
    api_message = getattr(error, 'api_message', None)
    if api_message:
        return f"{settings.API_ERROR_PREFIX} {api_message}"
    return settings.ANALYSIS_FAILURE_MESSAGE


class ImageAnalysisOrchestrator:
    """Answers free-form questions about images and posts."""

    def __init__(self, gateway: ChatGateway):
        self.gateway = gateway

    def _simulated_vision_messages(self, description: str, question: str) -> List[Dict[str, Any]]:
        # The user turn mimics a vision API content list; the gateway flattens it
        return [
            {'role': 'system', 'content': SIMULATED_VISION_PROMPT.format(description=description)},
            {'role': 'user', 'content': [
                {'type': 'text', 'text': question or settings.DEFAULT_IMAGE_QUESTION},
            ]},
        ]

    def _context_assisted_messages(self, description: str, question: str) -> List[Dict[str, Any]]:
        return [
            {'role': 'system', 'content': CONTEXT_ASSISTED_PROMPT.format(description=description)},
            {'role': 'user', 'content': question or settings.DEFAULT_CONTEXT_QUESTION},
        ]

    def analyze(self, image_url: str, question: str) -> str:
        """
        Answer a question about an image.

        Tries a simulated vision prompt first, then a context-assisted prompt.
        Each is attempted once.

        Args:
            image_url: URL of the image
            question: The user's question; a default descriptive question is used if empty

        Returns:
            str: The answer, an "Error from Llama API: ..." string, or a fixed apology
        """
        logger.info(f"Analyzing image via Llama API: {image_url}")
        try:
            description = context_heuristics.describe(image_url)

            try:
                return self.gateway.send(self._simulated_vision_messages(description, question))
            except GatewayError as e:
                logger.warning(f"Simulated vision analysis failed, falling back to context prompt ({type(e).__name__}): {e}")

            try:
                return self.gateway.send(self._context_assisted_messages(description, question))
            except GatewayError as e:
                logger.error(f"Context-assisted image analysis failed ({type(e).__name__}): {e}")
                return failure_message(e)

        except Exception as e:
            logger.error(f"Error analyzing image: {e}", exc_info=True)
            return failure_message(e)

    def analyze_post(self, post: Post, query: str) -> str:
        """
        Answer a question about a post's caption, hashtags and comments.

        Args:
            post: The post to analyze
            query: The user's question

        Returns:
            str: The answer, or an error string shaped like analyze()'s
        """
        messages = [
            {'role': 'system', 'content': settings.POST_ASSISTANT_SYSTEM_PROMPT},
            {'role': 'user', 'content': POST_CONTEXT_TEMPLATE.format(context=build_post_context(post), query=query)},
        ]

        logger.info(f"Analyzing content of post {post.id}")
        try:
            return self.gateway.send(messages)
        except Exception as e:
            logger.error(f"Error analyzing post {post.id} ({type(e).__name__}): {e}")
            return failure_message(e)
