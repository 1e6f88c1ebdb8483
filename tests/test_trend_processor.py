import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tweetset.core.config import ConfigManager  # noqa: E402
from tweetset.core.models import Tweet  # noqa: E402
from tweetset.core.tweet_set import tweet_set_of  # noqa: E402
from tweetset.processors.trend_processor import TrendProcessor, tweets_matching  # noqa: E402


class CountingReader:
    """Reader stub that records how often sources are loaded."""

    def __init__(self, sets):
        self.sets = sets
        self.calls = 0

    def tweet_sets(self, source_names=None):
        self.calls += 1
        return dict(self.sets)


def test_tweets_matching_later_source_wins_on_shared_text():
    first = tweet_set_of([Tweet("first", "Galaxy news", 1), Tweet("x", "other", 9)])
    second = tweet_set_of([Tweet("second", "Galaxy news", 2)])

    matched = tweets_matching([first, second], ["Galaxy"])

    assert [(t.user, t.text) for t in matched] == [("second", "Galaxy news")]


def test_tweets_matching_without_sets_is_empty():
    assert tweets_matching([], ["x"]).is_empty()


def test_topic_tweets_and_trending(workspace):
    processor = TrendProcessor(ConfigManager(str(workspace)))

    google = processor.topic_tweets("google")
    assert {t.text for t in google} == {"Android is huge", "shared Galaxy iPad story", "Nexus 7"}

    ranked = processor.trending(["google", "apple"])
    assert [(t.user, t.retweets) for t in ranked] == [
        ("b", 80),
        ("a", 50),
        ("g", 30),
        ("e", 30),
        ("f", 25),
    ]


def test_results_are_memoized(workspace):
    one = tweet_set_of([Tweet("u", "iPhone", 3)])
    reader = CountingReader({"one": one})
    processor = TrendProcessor(ConfigManager(str(workspace)), reader=reader)

    first = processor.trending(["apple"])
    second = processor.trending(["apple"])

    assert first is second
    assert processor.topic_tweets("apple") is processor.topic_tweets("apple")
    assert reader.calls == 1


def test_topic_sources_restrict_search(workspace):
    topic_path = workspace.parent / "topics" / "apple.yaml"
    topic_path.write_text(
        'name: "Apple"\nsources: ["two"]\nfilter:\n  keywords: ["iPhone", "iPad"]\n',
        encoding="utf-8",
    )
    processor = TrendProcessor(ConfigManager(str(workspace)))

    assert {t.user for t in processor.topic_tweets("apple")} == {"e", "f"}
