"""
Context Heuristics Module

This module turns an image URL into a synthetic text description so a
text-only chat model can answer questions about the image. Known stock photo
ids and URL patterns map to hand-written descriptions; anything else falls
back to keywords pulled from the file name.
"""

import re
from typing import List, Optional
from urllib.parse import urlparse

from config import image_catalog
from utils.logger import get_logger

logger = get_logger(__name__)


def _picsum_description(hostname: str, segments: List[str]) -> Optional[str]:
    if image_catalog.PICSUM_HOST not in hostname or 'id' not in segments:
        return None

    id_index = segments.index('id')
    if id_index >= len(segments) - 1:
        return None

    photo_id = segments[id_index + 1]
    if not photo_id.isdigit():
        return None

    logger.debug(f"Detected Picsum photo ID: {photo_id}")
    if photo_id in image_catalog.PICSUM_DESCRIPTIONS:
        return image_catalog.PICSUM_DESCRIPTIONS[photo_id]
    return image_catalog.PICSUM_GENERIC_TEMPLATE.format(photo_id=photo_id)


def _pattern_description(image_url: str) -> Optional[str]:
    for pattern, description in image_catalog.URL_PATTERN_DESCRIPTIONS:
        if pattern in image_url:
            return description
    return None


def extract_url_keywords(image_url: str) -> List[str]:
    """
    Pull keywords out of an image URL's path.

    The file name loses its extension and is split on '-' and '_'. Unsplash
    photo page URLs also contribute their photo id.

    Args:
        image_url: The image URL

    Returns:
        List[str]: Non-empty keywords in path order
    """
    segments = urlparse(image_url).path.split('/')
    keywords = []

    if image_catalog.UNSPLASH_PHOTOS_PATH in image_url and len(segments) >= 2:
        keywords.append(segments[-2])

    filename = segments[-1]
    if filename:
        name_only = filename.split('.')[0]
        keywords.extend(re.split(r'[-_]', name_only))

    return [k for k in keywords if k]


def describe(image_url: str) -> str:
    """
    Describe an image using only what its URL reveals.

    Never raises: any failure while inspecting the URL yields a generic
    "cannot be determined" description.

    Args:
        image_url: URL of the image

    Returns:
        str: A non-empty description of the likely image content
    """
    try:
        parsed = urlparse(image_url)
        if not parsed.scheme or not parsed.netloc:
            logger.warning(f"Could not parse image URL: {image_url!r}")
            return image_catalog.UNDETERMINED_IMAGE_DESCRIPTION

        hostname = parsed.hostname or ""
        segments = parsed.path.split('/')

        description = _picsum_description(hostname, segments)
        if description:
            return description

        description = _pattern_description(image_url)
        if description:
            return description

        keywords = extract_url_keywords(image_url)
        if image_catalog.UNSPLASH_HOST in hostname:
            return image_catalog.UNSPLASH_KEYWORD_TEMPLATE.format(keywords=", ".join(keywords))
        if keywords:
            return image_catalog.GENERIC_KEYWORD_TEMPLATE.format(keywords=", ".join(keywords))

        return image_catalog.GENERIC_IMAGE_DESCRIPTION

    except Exception as e:
        logger.error(f"Error extracting image context: {e}")
        return image_catalog.UNDETERMINED_IMAGE_DESCRIPTION
