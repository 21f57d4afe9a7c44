"""
Data Models for Post Insights

This module contains data classes and models used throughout the application.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from utils.helpers import extract_hashtags


@dataclass
class Comment:
    """Data class for a single comment on a post."""
    id: str
    username: str
    text: str
    timestamp: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            id=str(data['id']),
            username=data.get('username', ''),
            text=data.get('text', ''),
            timestamp=data.get('timestamp', ''),
        )


@dataclass
class Post:
    """Data class for a feed post and its comments."""
    id: str                            # Unique within a collection
    username: str
    user_avatar: str                   # Avatar URL
    image_url: str
    caption: str
    likes: int = 0
    timestamp: str = ""
    comments: List[Comment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        """Build a Post from a camelCase or snake_case mapping."""
        return cls(
            id=str(data['id']),
            username=data.get('username', ''),
            user_avatar=data.get('userAvatar', data.get('user_avatar', '')),
            image_url=data.get('imageUrl', data.get('image_url', '')),
            caption=data.get('caption', ''),
            likes=max(int(data.get('likes', 0)), 0),
            timestamp=data.get('timestamp', ''),
            comments=[Comment.from_dict(c) for c in data.get('comments', [])],
        )

    @property
    def hashtags(self) -> List[str]:
        return extract_hashtags(self.caption)

    def comments_text(self) -> str:
        """Comments flattened to 'username: text' pairs separated by ' | '."""
        return " | ".join(f"{c.username}: {c.text}" for c in self.comments)


@dataclass
class EnrichedPost(Post):
    """A Post carrying an AI-derived image description, used only during search."""
    image_description: str = ""

    @classmethod
    def from_post(cls, post: Post, image_description: str) -> "EnrichedPost":
        return cls(
            id=post.id,
            username=post.username,
            user_avatar=post.user_avatar,
            image_url=post.image_url,
            caption=post.caption,
            likes=post.likes,
            timestamp=post.timestamp,
            comments=list(post.comments),
            image_description=image_description,
        )


@dataclass
class CapabilityReport:
    """Data class describing which analysis capabilities are live."""
    chat_endpoint: bool = False
    vision_endpoint: bool = False          # True only with a real vision endpoint
    simulated_vision_capability: bool = True
    context_extraction_active: bool = True
    supported_features: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
