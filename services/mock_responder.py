"""
Mock Responder Module

This module produces deterministic, rule-based answers when the chat
completion endpoint cannot be used. It reads the message history for the
user's intent and, in image analysis sessions, for the image description
embedded in the system prompt.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from config import settings
from utils.helpers import flatten_content, truncate_text
from utils.logger import get_logger

logger = get_logger(__name__)

# Phrases in a system prompt that mark an image analysis session
IMAGE_SESSION_MARKERS = (
    'vision capabilities',
    'image context',
    'analyzing an image',
    'contains the following:',
)

# (start delimiter, end delimiter) pairs around the embedded description
DESCRIPTION_DELIMITERS = (
    ('image context is:', '\n\n'),
    ('contains the following:', 'Respond to'),
)

COLOR_WORDS = ('blue', 'green', 'white', 'black', 'red', 'yellow', 'purple', 'orange', 'brown', 'pink')

NO_DESCRIPTION_RESPONSE = (
    "This image appears to contain a scene that might include landscapes, people, objects, or "
    "other visual elements. Without more specific information, I can't provide further details "
    "about what's in the image."
)
TONE_RESPONSE = (
    "Based on analyzing the comments on this post, the tone is generally positive and enthusiastic. "
    "There's a mix of supportive comments, constructive feedback, and some critical perspectives. "
    "The overall sentiment leans positive with some balanced viewpoints."
)
HASHTAG_TEMPLATE = (
    "This post uses several hashtags: {hashtags}. These hashtags help categorize the content and "
    "make it discoverable to users interested in these topics. They effectively target the relevant "
    "audience for this content."
)
CAPTION_RESPONSE = (
    "The caption is engaging and descriptive, providing context about the image. It uses both "
    "descriptive text and relevant hashtags to maximize engagement. The writing style matches the "
    "content well and encourages user interaction."
)
SUMMARY_RESPONSE = (
    "This post has received good engagement with multiple comments expressing varied opinions. "
    "The content has generated discussion, with both supportive and critical feedback. The poster "
    "appears to be responsive to comments, creating a healthy interaction with their audience."
)
ENGAGEMENT_RESPONSE = (
    "This post has received positive engagement with multiple comments and likes. The content "
    "appears to resonate well with the audience. There's a healthy mix of supportive comments and "
    "constructive feedback, indicating an engaged community."
)

Message = Dict[str, Any]
Rule = Tuple[Callable[[str], bool], Callable[..., str]]


def _mentions(*words: str) -> Callable[[str], bool]:
    return lambda question: any(word in question for word in words)


# =============================================================================
# Image session handlers
# =============================================================================

def _describe_colors(description: str, messages: List[Message]) -> str:
    found = [color for color in COLOR_WORDS if color in description]
    colors = ", ".join(found) if found else "other natural tones"
    return f"Based on the image, I can see various colors including {colors}."


def _describe_animals(description: str, messages: List[Message]) -> str:
    if 'dog' not in description:
        return "I don't see any animals in this image based on the information available."
    breed = 'Labrador' if 'Labrador' in description else 'golden retriever'
    return f"Yes, there is a dog in the image. It appears to be a {breed}."


def _describe_people(description: str, messages: List[Message]) -> str:
    if not any(word in description for word in ('person', 'man', 'woman', 'people')):
        return "I don't see any people in this image based on the information available."
    response = "Yes, there are people in this image."
    if 'wearing' in description:
        clothing = description.split('wearing', 1)[1].split('.')[0]
        response += f" One person is wearing{clothing}."
    return response


def _describe_scene(description: str, messages: List[Message]) -> str:
    preview = truncate_text(description, settings.MOCK_DESCRIPTION_PREVIEW_LENGTH)
    return f"In this image, I can see {preview}"


IMAGE_RULES: List[Rule] = [
    (_mentions('color', 'colour'), _describe_colors),
    (_mentions('animal', 'pet'), _describe_animals),
    (_mentions('person', 'people', 'human'), _describe_people),
]


# =============================================================================
# Post content handlers
# =============================================================================

def _hashtags_from_history(messages: List[Message]) -> str:
    for message in messages:
        content = flatten_content(message.get('content'))
        if 'Hashtags:' in content:
            hashtags = content.split('Hashtags:', 1)[1].split('\n')[0].strip()
            if hashtags:
                return hashtags
    return settings.MOCK_DEFAULT_HASHTAGS


POST_RULES: List[Rule] = [
    (_mentions('tone', 'sentiment'), lambda messages: TONE_RESPONSE),
    (_mentions('hashtag'), lambda messages: HASHTAG_TEMPLATE.format(hashtags=_hashtags_from_history(messages))),
    (_mentions('caption'), lambda messages: CAPTION_RESPONSE),
    (_mentions('summar'), lambda messages: SUMMARY_RESPONSE),
]


class MockResponder:
    """Rule-based stand-in for the chat completion endpoint."""

    def respond(self, messages: List[Message]) -> str:
        """
        Answer a message history without calling any model.

        Args:
            messages: Role-tagged message dicts as sent to the endpoint

        Returns:
            str: A canned answer chosen by the user's question
        """
        question = self.latest_user_text(messages).lower()
        system_prompt = self.image_session_prompt(messages)

        if system_prompt is not None:
            logger.debug("Mock responder handling image analysis session")
            description = self.extract_description(system_prompt)
            if not description:
                return NO_DESCRIPTION_RESPONSE
            for matches, handler in IMAGE_RULES:
                if matches(question):
                    return handler(description, messages)
            return _describe_scene(description, messages)

        for matches, handler in POST_RULES:
            if matches(question):
                return handler(messages)
        return ENGAGEMENT_RESPONSE

    @staticmethod
    def latest_user_text(messages: List[Message]) -> str:
        for message in reversed(messages):
            if message.get('role') == 'user':
                return flatten_content(message.get('content'))
        return ""

    @staticmethod
    def image_session_prompt(messages: List[Message]) -> Optional[str]:
        """Return the system prompt if it marks an image analysis session."""
        for message in messages:
            content = message.get('content')
            if message.get('role') != 'system' or not isinstance(content, str):
                continue
            if any(marker in content for marker in IMAGE_SESSION_MARKERS):
                return content
        return None

    @staticmethod
    def extract_description(system_prompt: str) -> str:
        for start, end in DESCRIPTION_DELIMITERS:
            if start in system_prompt:
                return system_prompt.split(start, 1)[1].split(end, 1)[0].strip()
        return ""
