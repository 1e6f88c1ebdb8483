import json
import textwrap
from pathlib import Path

import pytest


SOURCE_ONE = [
    {"user": "a", "text": "Android is huge", "retweets": 50},
    {"user": "b", "text": "new iPhone today", "retweets": 80},
    {"user": "c", "text": "nothing relevant", "retweets": 500},
    {"user": "d", "text": "shared Galaxy iPad story", "retweets": 20},
]

SOURCE_TWO = [
    {"user": "e", "text": "iPad mini", "retweets": 30},
    {"user": "f", "text": "shared Galaxy iPad story", "retweets": 25},
    {"user": "g", "text": "Nexus 7", "retweets": 30},
]


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Config dir with two sources and the google/apple topics; returns the config path."""
    data_dir = tmp_path / "data"
    tweets_dir = data_dir / "tweets"
    tweets_dir.mkdir(parents=True)
    (tweets_dir / "one.json").write_text(json.dumps(SOURCE_ONE), encoding="utf-8")
    (tweets_dir / "two.json").write_text(json.dumps({"tweets": SOURCE_TWO}), encoding="utf-8")
    monkeypatch.setenv("TWEETSET_DATA_DIR", str(data_dir))

    config_dir = tmp_path / "config"
    topics_dir = config_dir / "topics"
    topics_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"
    config_path.write_text(textwrap.dedent("""
        sources:
          one:
            name: "Source One"
            path: "tweets/one.json"
          two:
            name: "Source Two"
            path: "tweets/two.json"
        defaults:
          limit: 0
        """).strip() + "\n", encoding="utf-8")
    (topics_dir / "google.yaml").write_text(textwrap.dedent("""
        name: "Google"
        filter:
          keywords: ["android", "Android", "galaxy", "Galaxy", "nexus", "Nexus"]
        """).strip() + "\n", encoding="utf-8")
    (topics_dir / "apple.yaml").write_text(textwrap.dedent("""
        name: "Apple"
        filter:
          keywords: ["ios", "iOS", "iphone", "iPhone", "ipad", "iPad"]
        """).strip() + "\n", encoding="utf-8")

    return config_path
