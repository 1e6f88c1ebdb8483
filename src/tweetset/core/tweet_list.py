"""Persistent singly-linked list of tweets.

Used as the result of :meth:`Node.descending_by_retweet`. The list has two
variants, the :data:`Nil` singleton and :class:`Cons` cells, and neither is
ever mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Union

from .models import Tweet


class EmptyCollectionError(LookupError):
    """Raised when an operation needs an element but the collection is empty."""


class _NilType:
    """The empty list. Use the module-level :data:`Nil` instance."""

    __slots__ = ()

    def is_empty(self) -> bool:
        return True

    @property
    def head(self) -> Tweet:
        raise EmptyCollectionError("head of EmptyList")

    @property
    def tail(self) -> "TweetList":
        raise EmptyCollectionError("tail of EmptyList")

    def foreach(self, f: Callable[[Tweet], None]) -> None:
        pass

    def __iter__(self) -> Iterator[Tweet]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nil"


Nil = _NilType()


@dataclass(frozen=True, eq=False, repr=False)
class Cons:
    """A list cell holding ``head`` in front of ``tail``."""

    head: Tweet
    tail: "TweetList"

    def is_empty(self) -> bool:
        return False

    def foreach(self, f: Callable[[Tweet], None]) -> None:
        for tweet in self:
            f(tweet)

    def __iter__(self) -> Iterator[Tweet]:
        # Walk the cells in a loop; long result lists would overflow the
        # interpreter stack with a recursive walk.
        cell: TweetList = self
        while isinstance(cell, Cons):
            yield cell.head
            cell = cell.tail

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Cons(" + ", ".join(repr(t) for t in self) + ")"


TweetList = Union[_NilType, Cons]


def tweet_list_of(tweets: Iterable[Tweet]) -> TweetList:
    """Build a list holding *tweets* front to back."""
    result: TweetList = Nil
    for tweet in reversed(list(tweets)):
        result = Cons(tweet, result)
    return result


__all__ = ["EmptyCollectionError", "Nil", "Cons", "TweetList", "tweet_list_of"]
