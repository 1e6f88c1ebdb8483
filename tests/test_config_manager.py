"""Tests for configuration management defaults and validation."""

from __future__ import annotations

from pathlib import Path
import sys
import textwrap

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import tweetset.core.config as core_config  # noqa: E402
from tweetset.core.config import ConfigManager  # noqa: E402


def write_config(config_dir: Path, body: str) -> Path:
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"
    config_path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return config_path


def write_topic(config_dir: Path, name: str, body: str, suffix: str = ".yaml") -> Path:
    topics_dir = config_dir / "topics"
    topics_dir.mkdir(parents=True, exist_ok=True)
    topic_path = topics_dir / f"{name}{suffix}"
    topic_path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return topic_path


BASIC_CONFIG = """
sources:
  local:
    name: "Local"
    path: "tweets/local.json"
"""


def test_config_manager_creates_defaults(tmp_path):
    """When pointed at an empty directory, default config and topic files are created."""

    config_path = tmp_path / "config.yaml"
    assert not config_path.exists()

    cfg = ConfigManager(str(config_path))

    assert config_path.exists(), "config.yaml should be created on first run"
    assert cfg.get_available_topics() == ["apple", "google"]

    data = cfg.load_config()
    assert isinstance(data, dict)
    assert "gizmodo" in cfg.get_enabled_sources()
    assert cfg.validate_config()


def test_fallback_templates_when_system_dir_missing(tmp_path, monkeypatch):
    """Inline templates are used when the bundled system templates are unavailable."""
    monkeypatch.setattr(core_config, "_TEMPLATE_CONFIG", tmp_path / "missing.yaml")
    monkeypatch.setattr(core_config, "_copy_tree", lambda src, dest: False)

    cfg = ConfigManager(str(tmp_path / "conf" / "config.yaml"))

    assert cfg.get_available_topics() == ["apple", "google"]
    google = cfg.load_topic_config("google")
    assert "Android" in google["filter"]["keywords"]
    assert cfg.validate_config()


def test_load_topic_config_supports_yml_extension(tmp_path):
    """Topics saved with a .yml suffix should load just like .yaml files."""
    config_dir = tmp_path / "custom"
    config_path = write_config(config_dir, BASIC_CONFIG)
    write_topic(
        config_dir,
        "my_topic",
        """
        name: "My Topic"
        filter:
          keywords: ["nexus"]
        """,
        suffix=".yml",
    )

    cfg = ConfigManager(str(config_path))
    data = cfg.load_topic_config("my_topic")

    assert data["name"] == "My Topic"
    assert data["filter"]["keywords"] == ["nexus"]


def test_config_manager_no_reseed_if_topics_dir_exists(tmp_path):
    """If the topics directory already exists, no template topics are added."""
    config_dir = tmp_path / "config_test"
    config_path = write_config(config_dir, BASIC_CONFIG)
    write_topic(
        config_dir,
        "custom",
        """
        name: "Custom"
        filter:
          keywords: ["test"]
        """,
    )

    cfg = ConfigManager(str(config_path))

    assert cfg.get_available_topics() == ["custom"]


def test_validate_rejects_unknown_source(tmp_path):
    config_dir = tmp_path / "conf"
    config_path = write_config(config_dir, BASIC_CONFIG)
    write_topic(
        config_dir,
        "bad",
        """
        name: "Bad"
        sources: ["nowhere"]
        filter:
          keywords: ["x"]
        """,
    )

    assert ConfigManager(str(config_path)).validate_config() is False


def test_validate_rejects_missing_keywords(tmp_path):
    config_dir = tmp_path / "conf"
    config_path = write_config(config_dir, BASIC_CONFIG)
    write_topic(
        config_dir,
        "bad",
        """
        name: "Bad"
        filter:
          keywords: []
        """,
    )

    assert ConfigManager(str(config_path)).validate_config() is False


def test_validate_rejects_source_without_path(tmp_path):
    config_dir = tmp_path / "conf"
    config_path = write_config(
        config_dir,
        """
        sources:
          broken:
            name: "No path"
        """,
    )
    write_topic(config_dir, "ok", 'name: "OK"\nfilter:\n  keywords: ["x"]')

    assert ConfigManager(str(config_path)).validate_config() is False


def test_validate_rejects_negative_limit(tmp_path):
    config_dir = tmp_path / "conf"
    config_path = write_config(config_dir, BASIC_CONFIG + "defaults:\n  limit: -3\n")
    write_topic(config_dir, "ok", 'name: "OK"\nfilter:\n  keywords: ["x"]')

    assert ConfigManager(str(config_path)).validate_config() is False


def test_enabled_sources_skip_disabled(tmp_path):
    config_dir = tmp_path / "conf"
    config_path = write_config(
        config_dir,
        """
        sources:
          primary:
            path: "a.json"
          secondary:
            path: "b.json"
            enabled: false
        """,
    )
    write_topic(config_dir, "ok", 'name: "OK"\nfilter:\n  keywords: ["x"]')

    assert list(ConfigManager(str(config_path)).get_enabled_sources()) == ["primary"]
