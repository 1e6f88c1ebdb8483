"""
Export command implementation.
Writes the ranked tweets for the selected topics to a JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from ..core.command_utils import resolve_limit, take
from ..core.config import ConfigManager
from ..core.paths import resolve_data_file
from .trending import build_trending

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "exports/trending.json"


def run(
    config_path: Optional[str] = None,
    output_name: Optional[str] = None,
    topics: Optional[Iterable[str]] = None,
    limit: Optional[int] = None,
) -> Path:
    """Export the ranked tweets as a JSON array of ``{user, text, retweets}``.

    Args:
        config_path: Path to the main configuration file
        output_name: Output file; relative paths resolve under the data dir
            (default: exports/trending.json)
        topics: Topics to include (if empty, every topic)
        limit: Maximum number of tweets to write (``defaults.limit`` when None)

    Returns:
        Path of the written file
    """
    logger.info("Starting export command")

    try:
        config_manager = ConfigManager(config_path)
        ranked = build_trending(config_manager, topics)
        tweets = take(ranked, resolve_limit(config_manager, limit))

        output_path = resolve_data_file(output_name or DEFAULT_OUTPUT_NAME, ensure_parent=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump([tweet.to_dict() for tweet in tweets], f, ensure_ascii=False, indent=2)

        logger.info(f"Exported {len(tweets)} tweets to {output_path}")
        return output_path

    except Exception as e:
        logger.error(f"Export command failed: {e}")
        raise
