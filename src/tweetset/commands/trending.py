"""
Trending command implementation.
Loads the configured tweet sources, keeps the tweets matching the selected
topics and prints them ranked by retweet count.
"""

import logging
from typing import Callable, Iterable, Optional

from ..core.command_utils import resolve_limit, resolve_topics, take
from ..core.config import ConfigManager
from ..core.models import Tweet
from ..core.text_utils import normalize_whitespace
from ..core.tweet_list import TweetList
from ..processors.trend_processor import TrendProcessor

logger = logging.getLogger(__name__)


def format_tweet(tweet: Tweet) -> str:
    """Return the two-line display form with the text collapsed onto one line."""
    return f"User: {tweet.user}\nText: {normalize_whitespace(tweet.text)} [{tweet.retweets}]"


def build_trending(config_manager: ConfigManager, topics: Optional[Iterable[str]] = None) -> TweetList:
    """Validate the configuration and return the ranked tweets for *topics*.

    Raises:
        ValueError: If the configuration is invalid or no topics are available
    """
    if not config_manager.validate_config():
        raise ValueError(f"Invalid configuration at {config_manager.config_path}")

    topics_to_process = resolve_topics(config_manager, topics)
    if not topics_to_process:
        raise ValueError("No topics available in configuration")
    logger.info(f"Processing topics: {topics_to_process}")

    return TrendProcessor(config_manager).trending(topics_to_process)


def run(
    config_path: Optional[str] = None,
    topics: Optional[Iterable[str]] = None,
    limit: Optional[int] = None,
    echo: Callable[[str], None] = print,
) -> TweetList:
    """Print the trending tweets for one or more topics.

    Workflow:
    1. Load and validate configuration.
    2. Read every enabled source into a tweet set.
    3. Filter each set by every selected topic's keywords and union the matches.
    4. Rank the union by retweet count and emit each tweet (up to ``limit``).

    Args:
        config_path: Path to the main configuration file
        topics: Topics to include (if empty, every topic)
        limit: Maximum number of tweets to emit (``defaults.limit`` when None)
        echo: Callable receiving each tweet's display text

    Returns:
        The full ranked list, independent of ``limit``
    """
    logger.info("Starting trending command")

    try:
        config_manager = ConfigManager(config_path)
        ranked = build_trending(config_manager, topics)

        shown = take(ranked, resolve_limit(config_manager, limit))
        for tweet in shown:
            echo(format_tweet(tweet))

        logger.info(f"Trending command completed: {len(shown)} of {len(ranked)} tweets shown")
        return ranked

    except Exception as e:
        logger.error(f"Trending command failed: {e}")
        raise
