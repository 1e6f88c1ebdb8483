"""Shared text matching utilities.

Builds the keyword predicates used to classify tweets into topics and
normalizes tweet text for display.
"""

import re
from typing import Callable, Iterable, List

from .models import Tweet


def contains_any(text: str, keywords: Iterable[str], ignore_case: bool = False) -> bool:
    """Return True if any of *keywords* occurs as a substring of *text*.

    Matching is case-sensitive by default, which is why topic files usually
    list both spellings ("iphone", "iPhone").

    Args:
        text: Tweet text to search
        keywords: Substrings to look for
        ignore_case: Compare case-insensitively when True

    Returns:
        True on the first keyword found, False otherwise (including when the
        keyword list is empty)

    Examples:
        >>> contains_any("New Galaxy phone", ["galaxy", "Galaxy"])
        True
        >>> contains_any("New Galaxy phone", ["galaxy"])
        False
        >>> contains_any("New Galaxy phone", ["galaxy"], ignore_case=True)
        True
    """
    if ignore_case:
        text = text.casefold()
    for keyword in keywords:
        needle = keyword.casefold() if ignore_case else keyword
        if needle in text:
            return True
    return False


def keyword_predicate(keywords: Iterable[str], ignore_case: bool = False) -> Callable[[Tweet], bool]:
    """Return a predicate selecting tweets whose text mentions any keyword.

    Args:
        keywords: Substrings to look for in ``tweet.text``
        ignore_case: Compare case-insensitively when True

    Examples:
        >>> is_google = keyword_predicate(["android", "Android"])
        >>> is_google(Tweet("u", "Android 5 is out", 3))
        True
    """
    frozen: List[str] = [k for k in keywords if k]

    def predicate(tweet: Tweet) -> bool:
        return contains_any(tweet.text, frozen, ignore_case=ignore_case)

    return predicate


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including newlines) into single spaces.

    Examples:
        >>> normalize_whitespace("  RT  new\\n iPad ")
        'RT new iPad'
    """
    return re.sub(r"\s+", " ", text or "").strip()


__all__ = ["contains_any", "keyword_predicate", "normalize_whitespace"]
