"""
Post Insights Application

This is the main entry point for the Post Insights application.
It answers questions about post images and content, runs semantic search
over the post feed, and reports which AI capabilities are live.
"""

import sys
import argparse
import json
import logging
from typing import List, Optional

from config.validators import validate_settings, get_config_summary
from data.models import CapabilityReport, Post
from data.protocols import InMemoryPostSource, PostSource
from services.capability_probe import format_capability_report
from services.chat_gateway import ChatGateway
from services.image_analysis import ImageAnalysisOrchestrator
from services.post_chat import PostChatSession
from services.search_service import SearchOrchestrator
from utils.exceptions import PostInsightsError
from utils.logger import get_logger, setup_file_logging

# Set up logging
logger = get_logger(__name__)

ANALYSIS_MODES = ("image", "content")


class PostInsights:
    """
    Main application class for Post Insights.

    This class wires the chat gateway, image analysis, search and chat
    services together and exposes the operations the UI calls.
    """

    def __init__(self, gateway: Optional[ChatGateway] = None,
                 post_source: Optional[PostSource] = None):
        """Initialize the Post Insights application."""
        if gateway is None:
            validate_settings()
            gateway = ChatGateway.from_settings()

        self.gateway = gateway
        self.post_source = post_source or InMemoryPostSource()
        self.analyzer = ImageAnalysisOrchestrator(self.gateway)
        self.search_service = SearchOrchestrator(self.gateway, self.analyzer, self.post_source)

    def find_post(self, post_id: str) -> Post:
        post = self.post_source.get_post(post_id)
        if post is None:
            raise PostInsightsError(f"No post with id {post_id}")
        return post

    def analyze(self, image_url: str, question: str) -> str:
        return self.analyzer.analyze(image_url, question)

    def analyze_post(self, post: Post, query: str) -> str:
        return self.analyzer.analyze_post(post, query)

    def ask(self, post: Post, question: str, mode: str = "image") -> str:
        """
        Answer a question about a post's image or its content.

        Args:
            post: The post being viewed
            question: The user's question
            mode: 'image' to analyze the image, 'content' to analyze caption and comments

        Returns:
            str: The answer
        """
        if mode not in ANALYSIS_MODES:
            raise ValueError(f"mode must be one of {ANALYSIS_MODES}, got {mode!r}")
        if mode == "image":
            return self.analyze(post.image_url, question)
        return self.analyze_post(post, question)

    def search(self, query: str, posts: Optional[List[Post]] = None) -> List[Post]:
        return self.search_service.search(query, posts)

    def recently_viewed(self) -> List[Post]:
        return self.search_service.get_recently_viewed()

    def probe(self) -> CapabilityReport:
        return self.gateway.probe()

    def chat(self, post: Post) -> PostChatSession:
        return PostChatSession(post, self.gateway)


def _print_posts(posts: List[Post]) -> None:
    if not posts:
        print("No posts found.")
        return
    for post in posts:
        print(f"[{post.id}] @{post.username}: {post.caption}")


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Post Insights Application')
    parser.add_argument('--log-file', type=str, default=None, help='Log file path')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='INFO', help='Logging level')

    subparsers = parser.add_subparsers(dest='command', required=True)

    search_parser = subparsers.add_parser('search', help='Semantic search over the post feed')
    search_parser.add_argument('query', type=str, help='Natural language search query')

    analyze_parser = subparsers.add_parser('analyze', help='Ask a question about an image URL')
    analyze_parser.add_argument('image_url', type=str, help='URL of the image')
    analyze_parser.add_argument('question', type=str, help='Question about the image')

    post_parser = subparsers.add_parser('analyze-post', help='Ask a question about a post')
    post_parser.add_argument('post_id', type=str, help='Id of the post')
    post_parser.add_argument('question', type=str, help='Question about the post')
    post_parser.add_argument('--mode', choices=ANALYSIS_MODES, default='content',
                             help='Analyze the post image or its caption and comments')

    chat_parser = subparsers.add_parser('chat', help='Chat about a post, one message per argument')
    chat_parser.add_argument('post_id', type=str, help='Id of the post')
    chat_parser.add_argument('messages', nargs='+', help='Messages sent in order')

    subparsers.add_parser('probe', help='Report which AI capabilities are live')
    subparsers.add_parser('recent', help='List recently viewed posts')
    subparsers.add_parser('config', help='Show the configuration summary')

    return parser.parse_args(argv)


def run_command(app: PostInsights, args) -> int:
    """Run one CLI command and return its exit code."""
    if args.command == 'search':
        _print_posts(app.search(args.query))
    elif args.command == 'analyze':
        print(app.analyze(args.image_url, args.question))
    elif args.command == 'analyze-post':
        print(app.ask(app.find_post(args.post_id), args.question, mode=args.mode))
    elif args.command == 'chat':
        session = app.chat(app.find_post(args.post_id))
        for message in args.messages:
            print(f"> {message}")
            print(session.ask(message))
    elif args.command == 'probe':
        print(format_capability_report(app.probe()))
    elif args.command == 'recent':
        _print_posts(app.recently_viewed())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_arguments(argv)

    # Set up logging
    log_level = getattr(logging, args.log_level)
    setup_file_logging(args.log_file, log_level)

    if args.command == 'config':
        print(json.dumps(get_config_summary(), indent=2))
        return 0

    logger.info(f"Starting Post Insights command: {args.command}")

    try:
        app = PostInsights()
        exit_code = run_command(app, args)
    except PostInsightsError as e:
        logger.error(f"Post Insights error: {e}")
        exit_code = 1
    except Exception as e:
        logger.error(f"Unhandled exception in Post Insights: {e}", exc_info=True)
        exit_code = 2

    logger.info(f"Post Insights finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
