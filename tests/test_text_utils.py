import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tweetset.core.models import Tweet  # noqa: E402
from tweetset.core.text_utils import contains_any, keyword_predicate, normalize_whitespace  # noqa: E402


@pytest.mark.parametrize(
    "text,keywords,expected",
    [
        ("New Galaxy phone", ["galaxy", "Galaxy"], True),
        ("New Galaxy phone", ["galaxy"], False),
        ("iPhone 5 hands-on", ["ios", "iPhone"], True),
        ("anything", [], False),
    ],
)
def test_contains_any(text, keywords, expected):
    assert contains_any(text, keywords) is expected


def test_contains_any_ignore_case():
    assert contains_any("NEXUS 7 review", ["nexus"], ignore_case=True)


def test_keyword_predicate_matches_tweet_text():
    is_apple = keyword_predicate(["ipad", "iPad"])
    assert is_apple(Tweet("u", "iPad mini review", 3))
    assert not is_apple(Tweet("iPad", "headphones", 3))


def test_keyword_predicate_ignores_empty_keywords():
    predicate = keyword_predicate(["", "nexus"])
    assert not predicate(Tweet("u", "plain text", 1))


def test_normalize_whitespace():
    assert normalize_whitespace("  RT  new\n iPad ") == "RT new iPad"
