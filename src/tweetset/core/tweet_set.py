"""Persistent binary search tree of tweets keyed by text.

A tweet set is either :class:`Empty` or a :class:`Node` holding one tweet and
two child sets. For every node, all tweets in ``left`` have a smaller text and
all tweets in ``right`` a larger one. Operations never modify an existing
node: they return a new set that shares every untouched subtree with the
receiver, so older versions stay valid after a "write".

The tree is not balanced. Sorted input degenerates it into a list, so all
traversals below walk the tree with loops and explicit stacks rather than
recursion; the results match the recursive definitions exactly.

Example:
    ```python
    tweets = tweet_set_of([Tweet("a", "hello world", 5), Tweet("b", "hello", 10)])
    top = tweets.most_retweeted()              # Tweet("b", "hello", 10)
    ranked = tweets.descending_by_retweet()    # Cons(b, Cons(a, Nil))
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .models import Tweet
from .tweet_list import EmptyCollectionError, Nil, TweetList, tweet_list_of

Predicate = Callable[[Tweet], bool]


class Empty:
    """The empty tweet set; identity element for :meth:`union`."""

    __slots__ = ()

    def is_empty(self) -> bool:
        return True

    def contains(self, tweet: Tweet) -> bool:
        return False

    def insert(self, tweet: Tweet) -> "TweetSet":
        return Node(tweet, _EMPTY, _EMPTY)

    incl = insert

    def remove(self, tweet: Tweet) -> "TweetSet":
        return self

    def filter(self, p: Predicate) -> "TweetSet":
        return self

    def filter_acc(self, p: Predicate, acc: "TweetSet") -> "TweetSet":
        return acc

    def union(self, other: "TweetSet") -> "TweetSet":
        return other

    def most_retweeted(self) -> Tweet:
        raise EmptyCollectionError("most_retweeted of empty TweetSet")

    def descending_by_retweet(self) -> TweetList:
        return Nil

    def foreach(self, f: Callable[[Tweet], None]) -> None:
        pass

    def __iter__(self) -> Iterator[Tweet]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False

    def __contains__(self, tweet: object) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Empty)

    def __hash__(self) -> int:
        return hash(Empty)

    def __repr__(self) -> str:
        return "Empty()"


_EMPTY = Empty()


@dataclass(frozen=True, eq=False, repr=False)
class Node:
    """A non-empty tweet set rooted at ``elem``."""

    elem: Tweet
    left: "TweetSet"
    right: "TweetSet"

    def is_empty(self) -> bool:
        return False

    def contains(self, tweet: Tweet) -> bool:
        """Binary search on ``tweet.text``."""
        current: TweetSet = self
        while isinstance(current, Node):
            if tweet.text < current.elem.text:
                current = current.left
            elif current.elem.text < tweet.text:
                current = current.right
            else:
                return True
        return False

    def insert(self, tweet: Tweet) -> "TweetSet":
        """Return a set that also holds *tweet*.

        If a tweet with the same text is already present the set is returned
        unchanged: the first tweet inserted for a given text always wins.
        """
        path, found = _search_path(self, tweet.text)
        if found is not None:
            return self
        return _rebuild(path, Node(tweet, _EMPTY, _EMPTY))

    incl = insert

    def remove(self, tweet: Tweet) -> "TweetSet":
        """Return a set without the tweet whose text equals ``tweet.text``.

        The matched node is replaced by ``left.union(right)`` rather than by its
        in-order successor, so the result can be shaped quite differently from
        the receiver. Only membership is guaranteed.
        """
        path, found = _search_path(self, tweet.text)
        if found is None:
            return self
        return _rebuild(path, found.left.union(found.right))

    def filter(self, p: Predicate) -> "TweetSet":
        """Return the set of tweets for which *p* holds."""
        return self.filter_acc(p, _EMPTY)

    def filter_acc(self, p: Predicate, acc: "TweetSet") -> "TweetSet":
        """Insert every tweet satisfying *p* into *acc*, in left/node/right order."""
        for tweet in _in_order(self):
            if p(tweet):
                acc = acc.insert(tweet)
        return acc

    def union(self, other: "TweetSet") -> "TweetSet":
        """Return the set of tweets present in either set.

        Equivalent to ``right.union(left.union(other.insert(elem)))``: the
        receiver's tweets are inserted into *other* node first, then the left
        subtree, then the right one. When both sets hold a tweet with the same
        text, the one already in *other* is kept.
        """
        acc = other
        stack: List[TweetSet] = [self]
        while stack:
            current = stack.pop()
            if isinstance(current, Node):
                acc = acc.insert(current.elem)
                stack.append(current.right)
                stack.append(current.left)
        return acc

    def most_retweeted(self) -> Tweet:
        """Return the tweet with the highest retweet count.

        Ties keep the tweet visited first in left/node/right order, i.e. the
        one with the smallest text.
        """
        tweets = _in_order(self)
        best = next(tweets)
        for tweet in tweets:
            if tweet.retweets > best.retweets:
                best = tweet
        return best

    def descending_by_retweet(self) -> TweetList:
        """Return every tweet ordered by retweet count, highest first.

        Repeatedly extracts :meth:`most_retweeted` and removes it, which is
        quadratic in the size of the set.
        """
        ranked: List[Tweet] = []
        current: TweetSet = self
        while isinstance(current, Node):
            top = current.most_retweeted()
            ranked.append(top)
            current = current.remove(top)
        return tweet_list_of(ranked)

    def foreach(self, f: Callable[[Tweet], None]) -> None:
        for tweet in _in_order(self):
            f(tweet)

    def __iter__(self) -> Iterator[Tweet]:
        return _in_order(self)

    def __len__(self) -> int:
        return sum(1 for _ in _in_order(self))

    def __bool__(self) -> bool:
        return True

    def __contains__(self, tweet: object) -> bool:
        return isinstance(tweet, Tweet) and self.contains(tweet)

    def __repr__(self) -> str:
        return "TweetSet(" + ", ".join(repr(t.text) for t in self) + ")"


TweetSet = Union[Empty, Node]


def _search_path(tree: TweetSet, text: str) -> Tuple[List[Tuple[Node, bool]], Optional[Node]]:
    """Walk from *tree* towards *text*.

    Returns the visited ancestors as ``(node, went_left)`` pairs together with
    the node holding *text*, or None when the walk ended on an empty subtree.
    """
    path: List[Tuple[Node, bool]] = []
    current = tree
    while isinstance(current, Node):
        if text < current.elem.text:
            path.append((current, True))
            current = current.left
        elif current.elem.text < text:
            path.append((current, False))
            current = current.right
        else:
            return path, current
    return path, None


def _rebuild(path: List[Tuple[Node, bool]], subtree: TweetSet) -> TweetSet:
    """Copy the nodes on *path* bottom-up around a replacement *subtree*."""
    for node, went_left in reversed(path):
        if went_left:
            subtree = Node(node.elem, subtree, node.right)
        else:
            subtree = Node(node.elem, node.left, subtree)
    return subtree


def _in_order(tree: TweetSet) -> Iterator[Tweet]:
    stack: List[Node] = []
    current = tree
    while stack or isinstance(current, Node):
        while isinstance(current, Node):
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node.elem
        current = node.right


def tweet_set_of(tweets: Iterable[Tweet]) -> TweetSet:
    """Build a set by inserting *tweets* one by one into an empty set."""
    result: TweetSet = _EMPTY
    for tweet in tweets:
        result = result.insert(tweet)
    return result


__all__ = ["Empty", "Node", "TweetSet", "Predicate", "tweet_set_of", "EmptyCollectionError"]
