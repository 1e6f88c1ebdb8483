"""Configuration management for YAML-based config files."""

import os
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .paths import get_data_dir, get_system_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = get_data_dir() / "config"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"
_TEMPLATE_DIR = get_system_path("config")
_TEMPLATE_CONFIG = _TEMPLATE_DIR / "config.yaml"
_TEMPLATE_TOPICS_DIR = _TEMPLATE_DIR / "topics"

_DEFAULT_CONFIG_TEMPLATE = """# Auto-generated default configuration for tweetset
sources:
  gizmodo:
    name: "Gizmodo"
    path: "tweets/gizmodo.json"
    enabled: true
  techcrunch:
    name: "TechCrunch"
    path: "tweets/techcrunch.json"
    enabled: true
  engadget:
    name: "Engadget"
    path: "tweets/engadget.json"
    enabled: true

defaults:
  limit: 0
"""

_DEFAULT_TOPIC_TEMPLATES = {
    "google": """name: "Google"
description: "Tweets mentioning Android devices."

filter:
  keywords: ["android", "Android", "galaxy", "Galaxy", "nexus", "Nexus"]
""",
    "apple": """name: "Apple"
description: "Tweets mentioning iOS devices."

filter:
  keywords: ["ios", "iOS", "iphone", "iPhone", "ipad", "iPad"]
""",
}


def _write_template(path: Path, content: str) -> None:
    """Write templated YAML content to disk with a trailing newline."""
    path.write_text(content.strip() + "\n", encoding="utf-8")


def _copy_tree(src: Path, dest: Path) -> bool:
    """Copy files from *src* to *dest* without overwriting existing files."""

    if not src.exists():
        return False

    created = False
    for item in src.iterdir():
        target = dest / item.name
        if item.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            if _copy_tree(item, target):
                created = True
        elif not target.exists():
            shutil.copyfile(item, target)
            created = True
    return created


class ConfigManager:
    """Manages loading and validation of YAML configuration files."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the manager and ensure baseline config/topic files exist."""
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        if not path.is_absolute():
            path = path.resolve()
        self.config_path = str(path)
        self.base_dir = str(path.parent)
        self._config = None
        self._topics = {}
        self._ensure_default_config()

    def load_config(self) -> Dict[str, Any]:
        """Load the main configuration file."""
        if self._config is None:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f) or {}
                logger.info(f"Loaded configuration from {self.config_path}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise

        return self._config

    def _resolve_topic_path(self, topic_name: str) -> Path:
        """Return the filesystem path for *topic_name* supporting .yaml and .yml."""
        topics_dir = Path(self.base_dir) / "topics"
        for candidate in (topics_dir / f"{topic_name}.yaml", topics_dir / f"{topic_name}.yml"):
            if candidate.exists():
                return candidate

        raise FileNotFoundError(
            f"Topic configuration file for '{topic_name}' not found (.yaml or .yml) in {topics_dir}"
        )

    def load_topic_config(self, topic_name: str) -> Dict[str, Any]:
        """Load a topic-specific configuration file."""
        if topic_name not in self._topics:
            topic_path = self._resolve_topic_path(topic_name)
            try:
                with open(topic_path, 'r', encoding='utf-8') as f:
                    self._topics[topic_name] = yaml.safe_load(f) or {}
                logger.info("Loaded topic config for '%s' from %s", topic_name, topic_path)
            except Exception as e:
                logger.error("Failed to load topic config from %s: %s", topic_path, e)
                raise

        return self._topics[topic_name]

    def _ensure_default_config(self) -> None:
        """Create default configuration files if they are missing."""

        config_file = Path(self.config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        if not config_file.exists():
            if _TEMPLATE_CONFIG.exists():
                shutil.copyfile(_TEMPLATE_CONFIG, config_file)
                logger.info("Created default config.yaml at %s", config_file)
            else:
                _write_template(config_file, _DEFAULT_CONFIG_TEMPLATE)
                logger.info("Created fallback default config.yaml at %s", config_file)

        # Only seed topics if the directory doesn't exist (one-time initialization)
        topics_dir = Path(self.base_dir) / "topics"
        if topics_dir.exists():
            return
        topics_dir.mkdir(parents=True)

        try:
            _copy_tree(_TEMPLATE_TOPICS_DIR, topics_dir)
        except OSError as exc:
            logger.warning("Failed to copy topics template tree: %s", exc)

        for name, content in _DEFAULT_TOPIC_TEMPLATES.items():
            target = topics_dir / f"{name}.yaml"
            if not target.exists():
                _write_template(target, content)
                logger.info("Created fallback topic config at %s", target)
        self._topics.clear()

    def get_available_topics(self) -> List[str]:
        """Get the sorted list of available topic configuration files."""
        topics_dir = os.path.join(self.base_dir, "topics")
        if not os.path.exists(topics_dir):
            return []

        topics = []
        for filename in os.listdir(topics_dir):
            if filename.endswith('.yaml') or filename.endswith('.yml'):
                topics.append(os.path.splitext(filename)[0])

        return sorted(topics)

    def get_enabled_sources(self) -> Dict[str, Dict[str, Any]]:
        """Get all enabled tweet sources from the main configuration."""
        config = self.load_config()
        sources = config.get('sources') or {}

        return {
            name: source_config
            for name, source_config in sources.items()
            if source_config.get('enabled', True)
        }

    def get_default(self, key: str, default: Any = None) -> Any:
        """Get a value from the ``defaults`` section of the main config."""
        defaults = self.load_config().get('defaults') or {}
        return defaults.get(key, default)

    def validate_config(self) -> bool:
        """Validate the configuration files."""
        try:
            config = self.load_config()

            sources = config.get('sources')
            if not isinstance(sources, dict):
                logger.error("Missing required section 'sources' in main config")
                return False

            for source_name, source_config in sources.items():
                if not isinstance(source_config, dict) or not source_config.get('path'):
                    logger.error(f"Source '{source_name}' must define a 'path'")
                    return False

            limit = (config.get('defaults') or {}).get('limit')
            if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool) or limit < 0):
                logger.error("'defaults.limit' must be a non-negative integer")
                return False

            for topic in self.get_available_topics():
                topic_config = self.load_topic_config(topic)

                for key in ('name', 'filter'):
                    if key not in topic_config:
                        logger.error(f"Missing required key '{key}' in topic '{topic}'")
                        return False

                keywords = (topic_config.get('filter') or {}).get('keywords')
                if (
                    not isinstance(keywords, list)
                    or not keywords
                    or not all(isinstance(k, str) and k for k in keywords)
                ):
                    logger.error(f"Topic '{topic}' filter.keywords must be a non-empty list of strings")
                    return False

                for source in topic_config.get('sources') or []:
                    if source not in sources:
                        logger.error(f"Topic '{topic}' references unknown source '{source}'")
                        return False

            logger.info("Configuration validation passed")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return False


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_DIR",
]
