"""
Data Layer Protocol Definitions

This module defines typing.Protocol interfaces for data layer operations.
These protocols enable dependency injection for post data, making services
testable without the bundled mock collection.

Protocols defined:
- PostSource: Interface for reading posts and the recently viewed history
"""

from typing import List, Optional, Protocol, Sequence

from data.models import Post


class PostSource(Protocol):
    """Protocol defining the interface for read-only post access.

    Implementations should provide methods for:
    - Listing the canonical post collection
    - Looking a post up by id
    - Listing the posts most recently viewed, newest first
    """

    def list_posts(self) -> List[Post]:
        """Return every post in the collection in feed order."""
        ...

    def get_post(self, post_id: str) -> Optional[Post]:
        """Return the post with the given id, or None if absent."""
        ...

    def recently_viewed(self, limit: int) -> List[Post]:
        """Return up to ``limit`` recently viewed posts."""
        ...


class InMemoryPostSource:
    """PostSource over an in-memory list.

    The view history is a placeholder: without a real history store the
    first posts of the collection stand in for the recently viewed ones.
    """

    def __init__(self, posts: Optional[Sequence[Post]] = None):
        if posts is None:
            from data.mock_posts import get_posts
            posts = get_posts()
        self._posts = list(posts)

    def list_posts(self) -> List[Post]:
        return list(self._posts)

    def get_post(self, post_id: str) -> Optional[Post]:
        return next((p for p in self._posts if p.id == str(post_id)), None)

    def recently_viewed(self, limit: int) -> List[Post]:
        return self._posts[:max(limit, 0)]
