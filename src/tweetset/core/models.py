"""Record type shared by the set engine, the reader and the commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Tweet:
    """A tweet keyed by its text.

    Equality and hashing only look at ``text``: two tweets with the same text
    are the same element no matter who posted them or how often they were
    retweeted.
    """

    user: str = field(compare=False)
    text: str
    retweets: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.retweets < 0:
            raise ValueError(f"retweets must be >= 0, got {self.retweets}")

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable mapping of the tweet."""
        return {'user': self.user, 'text': self.text, 'retweets': self.retweets}

    def __str__(self) -> str:
        return f"User: {self.user}\nText: {self.text} [{self.retweets}]"


__all__ = ["Tweet"]
