"""
Rate-Limited Task Sequence

Runs one task per item, one at a time, with a fixed pause between
successive tasks. The pause function is injectable so tests can use a
fake clock.
"""

import time
from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class RateLimitedSequence:
    """Sequential task runner with a configurable inter-task delay."""

    def __init__(self, delay: float, sleep: Callable[[float], None] = time.sleep):
        """
        Args:
            delay: Seconds to wait between the end of one task and the start of the next
            sleep: Function used to wait; defaults to time.sleep
        """
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        self.delay = delay
        self.sleep = sleep

    def run(self, items: Iterable[T], task: Callable[[T], R],
            on_error: Optional[Callable[[T, Exception], R]] = None) -> List[Tuple[T, R]]:
        """
        Apply ``task`` to each item in order.

        A failing task does not stop the sequence. Its result comes from
        ``on_error`` when given; otherwise the exception is re-raised.

        Args:
            items: Items to process
            task: Function applied to each item
            on_error: Produces a substitute result from the item and the exception

        Returns:
            List[Tuple[T, R]]: (item, result) pairs in input order
        """
        results = []
        for index, item in enumerate(items):
            if index > 0 and self.delay:
                self.sleep(self.delay)

            try:
                result = task(item)
            except Exception as e:
                if on_error is None:
                    raise
                logger.warning(f"Task failed for item {index}: {e}")
                result = on_error(item, e)

            results.append((item, result))
        return results
