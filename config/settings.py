"""
Configuration Settings for Post Insights

This module centralizes all configuration settings for the Post Insights application,
including environment variables, API credentials, and application constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Determine the application root directory
APP_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(dotenv_path=os.path.join(APP_ROOT, '.env'))


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        # validators.validate_settings() reports the bad value
        return -1.0


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        return -1


# =============================================================================
# Chat Completion API
# =============================================================================

LLAMA_API_KEY = os.getenv("LLAMA_API_KEY")
LLAMA_API_URL = os.getenv("LLAMA_API_URL", "https://api.llama.com/v1/chat/completions")
LLAMA_MODEL = os.getenv("LLAMA_MODEL", "Llama-4-Maverick-17B-128E-Instruct-FP8")
LLAMA_REQUEST_TIMEOUT = _get_float("LLAMA_REQUEST_TIMEOUT", 20.0)   # Seconds per outbound call

# =============================================================================
# Image Analysis Settings
# =============================================================================

DEFAULT_IMAGE_QUESTION = "What can you see in this image?"
DEFAULT_CONTEXT_QUESTION = "What is in this image? Describe it in detail."
MOCK_DESCRIPTION_PREVIEW_LENGTH = 150     # Characters of description echoed by the mock responder
MOCK_DEFAULT_HASHTAGS = "#travel #adventure #photography"

ANALYSIS_FAILURE_MESSAGE = (
    "I'm currently having trouble analyzing this image. The Llama API is configured as a "
    "text-only model without vision capabilities. We're using our best effort to simulate "
    "image analysis based on context from the image URL."
)
API_ERROR_PREFIX = "Error from Llama API:"

# =============================================================================
# Capability Probe Settings
# =============================================================================

PROBE_MESSAGE = "Hello, can you see images? Please only answer yes or no."
PROBE_REFERENCE_URL = "https://picsum.photos/id/237/800/800"
CONTEXT_EXTRACTION_MIN_LENGTH = 50        # Description length that counts as "extraction active"
CONNECTION_TEST_MESSAGE = "Hello Llama! Can you give me a quick intro?"

# =============================================================================
# Search Settings
# =============================================================================

IMAGE_ANALYSIS_DELAY = _get_float("IMAGE_ANALYSIS_DELAY", 0.5)     # Seconds between per-post analyses
RECENTLY_VIEWED_LIMIT = _get_int("RECENTLY_VIEWED_LIMIT", 3)
IMAGE_DESCRIPTION_PROMPT = (
    "Describe this image in detail, including objects, people, colors, setting, and any notable features."
)
IMAGE_DESCRIPTION_LOG_PREVIEW = 100

# Substrings that mark an analysis answer as an error rather than a description
SEARCH_ERROR_MARKERS = [
    API_ERROR_PREFIX,
    "having trouble",
    "I don't have the ability",
]

# =============================================================================
# Post Assistant Settings
# =============================================================================

POST_ASSISTANT_SYSTEM_PROMPT = (
    "You are a helpful Instagram assistant. You can analyze posts, captions, and comments. "
    "You can provide insights about tone, sentiment, and content of posts."
)
POST_ASSISTANT_GREETING = (
    "I can help analyze this post! You can ask me about the tone of the comments, hashtags, "
    "sentiment, or any other questions about the post content."
)
