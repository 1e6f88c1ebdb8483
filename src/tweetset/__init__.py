from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .commands import export as export_cmd
from .commands import trending as trending_cmd
from .core.command_utils import resolve_limit, take
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.models import Tweet
from .core.tweet_list import Cons, EmptyCollectionError, Nil, TweetList, tweet_list_of
from .core.tweet_set import Empty, Node, TweetSet, tweet_set_of

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = str(DEFAULT_CONFIG_PATH)

__all__ = [
    'Tweet',
    'Empty',
    'Node',
    'TweetSet',
    'tweet_set_of',
    'Nil',
    'Cons',
    'TweetList',
    'tweet_list_of',
    'EmptyCollectionError',
    'trending',
    'export',
    'status',
]


def trending(
    topics: Optional[List[str]] = None,
    *,
    limit: Optional[int] = None,
    config_path: Optional[str] = None,
) -> List[Tweet]:
    """Return the tweets matching *topics*, most retweeted first.

    Args:
        topics: Topic names to include; every configured topic when omitted.
        limit: Optional cap on the number of tweets returned; falls back to
            ``defaults.limit`` from the config when omitted.
        config_path: Path to main YAML config; defaults to the data-dir config.
    """
    cfg_path = config_path or _DEFAULT_CONFIG
    ranked = trending_cmd.run(cfg_path, topics, limit=limit, echo=lambda _line: None)
    return take(ranked, resolve_limit(ConfigManager(cfg_path), limit))


def export(
    output_name: Optional[str] = None,
    topics: Optional[List[str]] = None,
    *,
    limit: Optional[int] = None,
    config_path: Optional[str] = None,
) -> Path:
    """Write the ranked tweets to JSON and return the output path."""
    cfg_path = config_path or _DEFAULT_CONFIG
    return export_cmd.run(cfg_path, output_name, topics, limit=limit)


def status(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return configuration and environment status for programmatic use."""
    cfg_path = config_path or _DEFAULT_CONFIG
    info: Dict[str, Any] = {'config_path': cfg_path}
    if not os.path.exists(cfg_path):
        info.update({'valid': False, 'error': f'Config file not found: {cfg_path}'})
        return info
    try:
        cm = ConfigManager(cfg_path)
        valid = cm.validate_config()
        info.update({
            'valid': bool(valid),
            'topics': cm.get_available_topics(),
            'enabled_sources_count': len(cm.get_enabled_sources()) if valid else 0,
        })
        return info
    except Exception as e:
        logger.error(f"Status check failed for {cfg_path}: {e}")
        info.update({'valid': False, 'error': str(e)})
        return info
