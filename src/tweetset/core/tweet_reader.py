"""
Tweet dump parsing.
Reads JSON tweet dumps into Tweet records and builds one tweet set per source.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .config import ConfigManager
from .models import Tweet
from .paths import resolve_data_file
from .tweet_set import TweetSet, tweet_set_of

logger = logging.getLogger(__name__)


def _coerce_retweets(value: Any, text: str) -> int:
    """Return a non-negative retweet count, falling back to 0 on bad input."""
    if value is None:
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid retweet count {value!r} for tweet '{text[:40]}'; using 0")
        return 0
    if count < 0:
        logger.warning(f"Negative retweet count {count} for tweet '{text[:40]}'; using 0")
        return 0
    return count


def parse_tweets(raw: str, source: str = "<string>") -> List[Tweet]:
    """Parse a JSON tweet dump.

    Accepts either a top-level array of ``{"user", "text", "retweets"}``
    objects or an object wrapping that array under ``"tweets"``.

    Args:
        raw: JSON document
        source: Name used in log and error messages

    Returns:
        Tweets in document order; objects without text are skipped

    Raises:
        ValueError: If the document is not valid JSON or has the wrong shape
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed tweet JSON in {source}: {e}") from e

    if isinstance(data, dict):
        data = data.get('tweets')
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of tweets in {source}")

    tweets = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or not isinstance(item.get('text'), str):
            logger.warning(f"Skipping tweet #{index} in {source}: missing text")
            continue
        text = item['text']
        user = item.get('user') or ""
        tweets.append(Tweet(str(user), text, _coerce_retweets(item.get('retweets'), text)))

    logger.debug(f"Parsed {len(tweets)} tweets from {source}")
    return tweets


def read_tweet_file(path: str) -> List[Tweet]:
    """Read and parse a tweet dump from *path*."""
    with open(path, 'r', encoding='utf-8') as f:
        return parse_tweets(f.read(), source=str(path))


def to_tweet_set(tweets: Iterable[Tweet]) -> TweetSet:
    """Fold tweets into a set; the first tweet seen for a given text wins."""
    return tweet_set_of(tweets)


class TweetReader:
    """Loads the configured tweet sources into tweet sets."""

    def __init__(self, config_manager: ConfigManager):
        self.config = config_manager

    def source_path(self, source_config: Dict[str, Any]) -> Path:
        """Resolve a source's ``path`` against the runtime data directory."""
        return resolve_data_file(str(source_config['path']))

    def tweet_sets(self, source_names: Optional[Iterable[str]] = None) -> Dict[str, TweetSet]:
        """
        Build one tweet set per enabled source.

        Returns:
            Dict mapping source names to their tweet sets; sources that cannot
            be read are logged and left out
        """
        enabled_sources = self.config.get_enabled_sources()
        names = list(source_names) if source_names is not None else list(enabled_sources)

        sets = {}
        for name in names:
            if name not in enabled_sources:
                logger.warning(f"Source '{name}' not enabled, skipping")
                continue

            source_config = enabled_sources[name]
            display_name = source_config.get('name', name)
            path = self.source_path(source_config)
            try:
                tweets = read_tweet_file(str(path))
            except (OSError, ValueError) as e:
                logger.error(f"Error reading source '{display_name}' from {path}: {e}")
                continue

            sets[name] = to_tweet_set(tweets)
            logger.info(f"Loaded {len(tweets)} tweets from source '{display_name}'")

        return sets


__all__ = ["parse_tweets", "read_tweet_file", "to_tweet_set", "TweetReader"]
