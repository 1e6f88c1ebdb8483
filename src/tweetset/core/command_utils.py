"""Shared utilities for command implementations.

Provides common patterns used across multiple commands.
"""

from itertools import islice
from typing import Iterable, List, Optional

from .config import ConfigManager
from .models import Tweet
from .tweet_list import TweetList


def resolve_topics(config_manager: ConfigManager, topics: Optional[Iterable[str]] = None) -> List[str]:
    """Resolve topic arguments to the list of topics to process.

    Args:
        config_manager: Configuration manager instance
        topics: Optional topic names. If None or empty, all topics are returned.

    Returns:
        List of topic names to process

    Examples:
        >>> cfg = ConfigManager()
        >>> resolve_topics(cfg, ["apple"])  # Returns ["apple"]
        >>> resolve_topics(cfg, None)  # Returns all topics like ["apple", "google"]
    """
    selected = [t for t in (topics or []) if t]
    if selected:
        return selected
    return config_manager.get_available_topics()


def resolve_limit(config_manager: ConfigManager, limit: Optional[int] = None) -> Optional[int]:
    """Return the effective result limit; 0 or None means unlimited."""
    if limit is None:
        limit = config_manager.get_default('limit', 0)
    return limit or None


def take(ranked: TweetList, limit: Optional[int] = None) -> List[Tweet]:
    """Return the first *limit* tweets of *ranked* (all of them when None)."""
    return list(islice(ranked, limit))
