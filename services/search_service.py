"""
Search Service Module

This module handles natural-language search over posts. Each post is first
enriched with an AI-generated image description, then the chat model ranks
the enriched posts against the query. Whenever the model gives no usable
ranking, the search falls back to case-insensitive keyword matching.
"""

import time
from typing import Callable, Dict, List, Optional

from config import settings
from data.models import EnrichedPost, Post
from data.protocols import InMemoryPostSource, PostSource
from services.chat_gateway import ChatGateway
from services.image_analysis import ImageAnalysisOrchestrator
from services.ranking_parser import parse_ranked_ids
from services.rate_limiter import RateLimitedSequence
from utils.exceptions import ResponseParseError
from utils.helpers import truncate_text
from utils.logger import get_logger

logger = get_logger(__name__)

RANKING_SYSTEM_PROMPT = """You are a search assistant for an Instagram-like app.
You'll be given a set of posts with captions, comments, and image descriptions.
Your task is to determine which posts match the natural language query and rank them by relevance.
Consider both the text content AND the image descriptions when matching.
Respond with ONLY post IDs in JSON format like ["1", "3"] - no other text.
Put the most relevant matches first."""

RANKING_POST_TEMPLATE = """Post ID: {id}
Username: {username}
Caption: {caption}
Hashtags: {hashtags}
Comments: {comments}
Image Description: {description}"""

RANKING_USER_TEMPLATE = """Here are the posts to search through:

{posts}

Search query: "{query}"

Return only matching post IDs in a JSON array, ranked by relevance. If no posts match, return empty array."""


def generic_description(post: Post) -> str:
    return f"Image related to: {post.caption}"


def keyword_search(query: str, posts: List[Post]) -> List[Post]:
    """
    Case-insensitive substring search over captions, usernames and comments.

    Args:
        query: Search text
        posts: Posts to search

    Returns:
        List[Post]: Matching posts in their original order
    """
    needle = query.lower()

    def matches(post: Post) -> bool:
        if needle in post.caption.lower() or needle in post.username.lower():
            return True
        return any(
            needle in comment.text.lower() or needle in comment.username.lower()
            for comment in post.comments
        )

    return [post for post in posts if matches(post)]


def build_ranking_messages(query: str, posts: List[EnrichedPost]) -> List[Dict[str, str]]:
    """Build the system and user messages asking the model to rank posts."""
    post_blocks = "\n\n".join(
        RANKING_POST_TEMPLATE.format(
            id=post.id,
            username=post.username,
            caption=post.caption,
            hashtags=' '.join(post.hashtags),
            comments=post.comments_text(),
            description=post.image_description or 'No description available',
        )
        for post in posts
    )
    return [
        {'role': 'system', 'content': RANKING_SYSTEM_PROMPT},
        {'role': 'user', 'content': RANKING_USER_TEMPLATE.format(posts=post_blocks, query=query)},
    ]


class SearchOrchestrator:
    """Semantic search over posts with keyword fallback."""

    keyword_search = staticmethod(keyword_search)

    def __init__(self, gateway: ChatGateway, analyzer: Optional[ImageAnalysisOrchestrator] = None,
                 post_source: Optional[PostSource] = None,
                 delay: Optional[float] = None, sleep: Callable[[float], None] = time.sleep):
        """
        Initialize the search orchestrator.

        Args:
            gateway: Gateway used for the ranking call
            analyzer: Image analyzer used to describe post images
            post_source: Source of the canonical posts and view history
            delay: Seconds between per-post image analyses (defaults to settings)
            sleep: Wait function, replaceable in tests
        """
        self.gateway = gateway
        self.analyzer = analyzer or ImageAnalysisOrchestrator(gateway)
        self.post_source = post_source or InMemoryPostSource()
        self.sequence = RateLimitedSequence(
            settings.IMAGE_ANALYSIS_DELAY if delay is None else delay,
            sleep=sleep
        )
        self.cached_image_descriptions: Dict[str, str] = {}

    def search(self, query: str, posts: Optional[List[Post]] = None) -> List[Post]:
        """
        Search posts with a natural-language query.

        Args:
            query: The search query; blank queries return ``posts`` unchanged
            posts: Posts to search (defaults to the post source's collection)

        Returns:
            List[Post]: Matching posts, most relevant first
        """
        if posts is None:
            posts = self.post_source.list_posts()

        if not query or not query.strip():
            return posts

        try:
            enriched = self.enrich_posts(posts)
            messages = build_ranking_messages(query, enriched)

            logger.info("Sending semantic search request to Llama...")
            response = self.gateway.send(messages)
            logger.debug(f"Search response: {response}")

            try:
                ranked_ids = parse_ranked_ids(response)
            except ResponseParseError as e:
                logger.warning(f"Could not parse search ranking: {e}")
                ranked_ids = []

            by_id = {post.id: post for post in enriched}
            results = [by_id[post_id] for post_id in ranked_ids if post_id in by_id]

            if results:
                logger.info(f"Semantic search for '{query}' matched {len(results)} posts")
                return results

            logger.info("No AI results, falling back to keyword search")

        except Exception as e:
            logger.error(f"Error in semantic search, falling back to keyword search ({type(e).__name__}): {e}")

        return keyword_search(query, posts)

    def enrich_posts(self, posts: List[Post]) -> List[EnrichedPost]:
        """
        Attach an AI-generated image description to each post.

        Posts are analyzed one at a time with the configured delay between
        calls. A failed or error-shaped analysis is replaced by a generic
        description built from the caption.

        Args:
            posts: Posts to enrich

        Returns:
            List[EnrichedPost]: Enriched copies in input order
        """
        logger.info(f"Generating image descriptions for {len(posts)} posts...")

        def describe(post: Post) -> str:
            description = self.analyzer.analyze(post.image_url, settings.IMAGE_DESCRIPTION_PROMPT)
            if not description or any(marker in description for marker in settings.SEARCH_ERROR_MARKERS):
                logger.warning(f"Could not get proper description for post {post.id}, using generic description")
                return generic_description(post)
            logger.debug(f"Generated description for post {post.id}: "
                         f"{truncate_text(description, settings.IMAGE_DESCRIPTION_LOG_PREVIEW)}")
            return description

        def on_error(post: Post, error: Exception) -> str:
            logger.error(f"Error analyzing image for post {post.id}: {error}")
            return generic_description(post)

        described = self.sequence.run(posts, describe, on_error=on_error)

        self.cached_image_descriptions = {post.id: description for post, description in described}
        return [EnrichedPost.from_post(post, description) for post, description in described]

    def get_recently_viewed(self) -> List[Post]:
        """Return the recently viewed posts from the post source."""
        return self.post_source.recently_viewed(settings.RECENTLY_VIEWED_LIMIT)
