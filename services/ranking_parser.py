"""
Ranking Response Parser

Extracts the ordered list of post ids from a loosely structured model
reply. Two strategies are tried in order: a strict pattern for a JSON array
of quoted strings, then a lenient scan between the first '[' and the last ']'.
"""

import json
import re
from typing import Any, List, Optional

from utils.exceptions import ResponseParseError
from utils.logger import get_logger

logger = get_logger(__name__)

STRICT_ARRAY_PATTERN = re.compile(r'\[\s*"[^"]*"(?:\s*,\s*"[^"]*")*\s*\]')


def _as_id_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    ids = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            return None
        ids.append(str(item))
    return ids


def strict_strategy(text: str) -> Optional[List[str]]:
    match = STRICT_ARRAY_PATTERN.search(text)
    if not match:
        return None
    try:
        return _as_id_list(json.loads(match.group(0)))
    except ValueError:
        return None


def lenient_strategy(text: str) -> Optional[List[str]]:
    start = text.find('[')
    end = text.rfind(']')
    if start == -1 or end == -1 or end < start:
        return None
    try:
        return _as_id_list(json.loads(text[start:end + 1]))
    except ValueError:
        return None


PARSE_STRATEGIES = (strict_strategy, lenient_strategy)


def parse_ranked_ids(text: str) -> List[str]:
    """
    Parse the ranked post ids out of a model reply.

    An empty list means the model answered with a valid, empty array.

    Args:
        text: The model's reply

    Returns:
        List[str]: Post ids in ranked order

    Raises:
        ResponseParseError: If no strategy finds a usable array
    """
    if not isinstance(text, str):
        raise ResponseParseError(f"Ranking response is not text: {type(text).__name__}")

    for strategy in PARSE_STRATEGIES:
        ids = strategy(text)
        if ids is not None:
            logger.debug(f"Parsed {len(ids)} ids with {strategy.__name__}")
            return ids

    raise ResponseParseError(f"No id array found in ranking response: {text[:100]!r}")
