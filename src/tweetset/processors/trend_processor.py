"""
Topic classification and ranking.
Filters the per-source tweet sets by topic keywords, unions the matches and
ranks them by retweet count.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..core.config import ConfigManager
from ..core.text_utils import keyword_predicate
from ..core.tweet_list import TweetList
from ..core.tweet_reader import TweetReader
from ..core.tweet_set import Empty, TweetSet

logger = logging.getLogger(__name__)


def tweets_matching(
    tweet_sets: Iterable[TweetSet],
    keywords: Iterable[str],
    ignore_case: bool = False,
) -> TweetSet:
    """Union of every set filtered down to tweets mentioning any keyword.

    Folds right, ``s1.filter(p).union(s2.filter(p).union(...))``, so when two
    sources share a text the later source's tweet is kept.
    """
    predicate = keyword_predicate(keywords, ignore_case=ignore_case)
    result: TweetSet = Empty()
    for tweet_set in reversed(list(tweet_sets)):
        result = tweet_set.filter(predicate).union(result)
    return result


class TrendProcessor:
    """Builds topic tweet sets and the trending list, computing each once."""

    def __init__(self, config_manager: ConfigManager, reader: Optional[TweetReader] = None):
        self.config = config_manager
        self.reader = reader or TweetReader(config_manager)
        self._source_sets: Optional[Dict[str, TweetSet]] = None
        self._topic_sets: Dict[str, TweetSet] = {}
        self._trending: Dict[Tuple[str, ...], TweetList] = {}

    @property
    def source_sets(self) -> Mapping[str, TweetSet]:
        """Tweet sets for every enabled source, loaded on first access."""
        if self._source_sets is None:
            self._source_sets = self.reader.tweet_sets()
        return self._source_sets

    def topic_tweets(self, topic_name: str) -> TweetSet:
        """Return the tweets matching *topic_name*'s keywords.

        Only the sources listed under the topic's ``sources`` key are searched
        when that key is present; otherwise every enabled source is.
        """
        if topic_name not in self._topic_sets:
            topic_config = self.config.load_topic_config(topic_name)
            filter_cfg = topic_config.get('filter') or {}
            keywords: List[str] = filter_cfg.get('keywords') or []
            wanted = topic_config.get('sources')

            sets = [
                tweet_set
                for name, tweet_set in self.source_sets.items()
                if not wanted or name in wanted
            ]
            matched = tweets_matching(sets, keywords, ignore_case=bool(filter_cfg.get('ignore_case', False)))
            logger.info(f"Topic '{topic_name}' matched {len(matched)} tweets across {len(sets)} sources")
            self._topic_sets[topic_name] = matched

        return self._topic_sets[topic_name]

    def trending(self, topics: Iterable[str]) -> TweetList:
        """Return the union of the topics' tweets ranked by retweets, highest first."""
        key = tuple(topics)
        if key not in self._trending:
            combined: TweetSet = Empty()
            for topic_name in key:
                combined = combined.union(self.topic_tweets(topic_name))
            logger.debug(f"Ranking {len(combined)} tweets for topics {list(key)}")
            self._trending[key] = combined.descending_by_retweet()

        return self._trending[key]


__all__ = ["tweets_matching", "TrendProcessor"]
