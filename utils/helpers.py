"""
Helper Utility Module

This module provides various helper functions used throughout the Post Insights application.
"""

from typing import Any, Dict, List, Union
from urllib.parse import urlparse


def is_valid_url(url: str) -> bool:
    """
    Check if a URL is valid.

    Args:
        url: The URL to validate

    Returns:
        bool: True if the URL is valid, False otherwise
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except Exception:
        return False


def flatten_content(content: Union[str, List[Dict[str, Any]], None]) -> str:
    """
    Collapse message content to plain text.

    Structured content is a list of parts shaped like vision API input;
    only ``{"type": "text"}`` parts are kept, joined by single spaces.

    Args:
        content: A string, a list of content parts, or None

    Returns:
        str: The plain text content
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        texts = [
            part.get("text", "")
            for part in content
            if isinstance(part, dict) and part.get("type") == "text"
        ]
        return " ".join(texts).strip()
    return str(content)


def extract_hashtags(text: str) -> List[str]:
    """
    Get the space-separated words of a text that start with '#'.

    Args:
        text: Caption or other free text

    Returns:
        List[str]: Hashtags in order of appearance
    """
    if not text:
        return []
    return [word for word in text.split(' ') if word.startswith('#')]


def truncate_text(text: str, max_length: int = 100, add_ellipsis: bool = True) -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: The text to truncate
        max_length: Maximum length
        add_ellipsis: Whether to add an ellipsis if text is truncated

    Returns:
        str: Truncated text
    """
    if not text or len(text) <= max_length:
        return text

    truncated = text[:max_length]
    if add_ellipsis:
        truncated += "..."

    return truncated


def safe_get(data: Dict[str, Any], *keys, default: Any = None) -> Any:
    """
    Safely get a value from a nested dictionary.

    Args:
        data: The dictionary to search
        *keys: The keys to follow
        default: Default value if key doesn't exist

    Returns:
        The value at the specified keys or the default value
    """
    for key in keys:
        try:
            data = data[key]
        except (KeyError, TypeError, IndexError):
            return default
    return data

