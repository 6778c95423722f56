"""Suggestion matching for hinted input.

A query is matched against the hint corpus in three passes whose results
are concatenated in order:

1. prefix   -- the hint starts with the query (exact matches excluded)
2. token    -- a token of the hint starts with the query
3. subsequence -- every query character appears in order, greedy leftmost

Matching is case-sensitive. Hints matched by several passes appear once
per pass.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

_TOKEN_SPLIT_RE = re.compile(r"[ ;\-_]")


@dataclass(frozen=True)
class Suggestion:
    """A hint matched against the query.

    ``highlight_indexes`` are the positions in ``value`` that correspond to
    typed characters, in ascending order.
    """

    value: str
    highlight_indexes: tuple[int, ...] = ()


def _prefix_matches(hints: Sequence[str], query: str) -> list[Suggestion]:
    span = tuple(range(len(query)))
    return [
        Suggestion(hint, span)
        for hint in hints
        if len(hint) > len(query) and hint[: len(query)] == query
    ]


def _token_matches(hints: Sequence[str], query: str) -> list[Suggestion]:
    results: list[Suggestion] = []
    for hint in hints:
        tokens = [t for t in _TOKEN_SPLIT_RE.split(hint) if t]
        candidate = next((t for t in tokens if t.startswith(query)), None)
        if candidate is None:
            continue
        start = hint.find(candidate)
        results.append(Suggestion(hint, tuple(range(start, start + len(query)))))
    return results


def match_subsequence(hint: str, query: str) -> tuple[int, ...] | None:
    """Return greedy leftmost positions of *query* characters in *hint*.

    Returns ``None`` when some character cannot be found in order.
    """
    indexes: list[int] = []
    start = 0
    for ch in query:
        idx = hint.find(ch, start)
        if idx < 0:
            return None
        indexes.append(idx)
        start = idx + 1
    return tuple(indexes)


def _subsequence_matches(hints: Sequence[str], query: str) -> list[Suggestion]:
    results: list[Suggestion] = []
    for hint in hints:
        indexes = match_subsequence(hint, query)
        if indexes is not None:
            results.append(Suggestion(hint, indexes))
    return results


def compute_suggestions(hints: Sequence[str], query: str) -> list[Suggestion]:
    """Match *query* against *hints* and return ordered suggestions."""
    if not query:
        return []
    if all(len(hint) < len(query) for hint in hints):
        return []
    return (
        _prefix_matches(hints, query)
        + _token_matches(hints, query)
        + _subsequence_matches(hints, query)
    )


@dataclass
class SuggestionList:
    """Suggestions for the current query with a cyclic selection cursor."""

    items: list[Suggestion] = field(default_factory=list)
    position: int = 0

    @classmethod
    def compute(cls, hints: Sequence[str], query: str) -> SuggestionList:
        return cls(compute_suggestions(hints, query))

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def first(self) -> Suggestion | None:
        self.position = 0
        return self.items[0] if self.items else None

    def next(self) -> Suggestion | None:
        if not self.items:
            return None
        self.position += 1
        if self.position >= len(self.items):
            self.position = 0
        return self.items[self.position]

    def previous(self) -> Suggestion | None:
        if not self.items:
            return None
        self.position -= 1
        if self.position < 0:
            self.position = len(self.items) - 1
        return self.items[self.position]


class HintCorpus:
    """Fixed vocabulary of hint strings.

    Duplicates are kept as given.
    """

    def __init__(self, hints: Iterable[str]) -> None:
        self._hints: tuple[str, ...] = tuple(hints)

    @property
    def hints(self) -> tuple[str, ...]:
        return self._hints

    def __len__(self) -> int:
        return len(self._hints)

    def __iter__(self):
        return iter(self._hints)

    def suggest(self, query: str) -> SuggestionList:
        """Return a fresh suggestion list for *query*."""
        return SuggestionList.compute(self._hints, query)
