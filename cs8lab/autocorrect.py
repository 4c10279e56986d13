"""Word suggestions ranked by edit distance, and identifier validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Union

from cs8lab.heap import Heap
from cs8lab.state_machine import StateMachine

PathLike = Union[str, "os.PathLike[str]"]

PREFIX_BONUS = 3
MIN_QUERY_LENGTH = 2
DEFAULT_SUGGESTIONS = 5


@dataclass(eq=False)
class Word:
    """A word and its ranking priority; words compare by priority alone."""

    text: str
    priority: int = 0

    def __lt__(self, other: Word) -> bool:
        return self.priority < other.priority

    def __gt__(self, other: Word) -> bool:
        return self.priority > other.priority

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.priority == other.priority

    __hash__ = None  # type: ignore[assignment]


def read_words(path: PathLike) -> list[Word]:
    """Read one word per line from ``path``.

    Only the newline ending each line is removed; raises ``OSError`` if the
    file cannot be opened.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        return [Word(line[:-1] if line.endswith("\n") else line) for line in handle]


def levenshtein_distance(first: str, second: str) -> int:
    """Number of single-character edits turning ``first`` into ``second``."""
    row = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        diagonal, row[0] = row[0], i
        for j, b in enumerate(second, start=1):
            above = row[j]
            if a == b:
                row[j] = diagonal
            else:
                row[j] = 1 + min(row[j - 1], above, diagonal)
            diagonal = above
    return row[-1]


class WordSuggester:
    """Suggests dictionary words close to a query."""

    def __init__(self, words: Iterable[Union[str, Word]], count: int = DEFAULT_SUGGESTIONS) -> None:
        if count < 0:
            raise ValueError("suggestion count must not be negative")
        self.words = [w.text if isinstance(w, Word) else w for w in words]
        self.count = count

    @classmethod
    def from_file(cls, path: PathLike, count: int = DEFAULT_SUGGESTIONS) -> WordSuggester:
        """Build a suggester from a word-per-line file."""
        return cls(read_words(path), count)

    def suggest(self, query: str) -> list[str]:
        """Return up to ``count`` words, best first.

        A word scores its edit distance to ``query``, less a bonus when it
        starts with ``query``; lower scores rank higher. Queries shorter than
        two characters give no suggestions.
        """
        if len(query) < MIN_QUERY_LENGTH:
            return []
        heap: Heap[Word] = Heap()
        for text in self.words:
            score = levenshtein_distance(query, text)
            if text.startswith(query):
                score -= PREFIX_BONUS
            heap.push(Word(text, -score))
        suggestions = []
        while len(suggestions) < self.count and not heap.empty():
            suggestions.append(heap.pop().text)
        return suggestions


class IdentifierValidator:
    """Accepts identifier-shaped strings that are not reserved keywords."""

    def __init__(self, reserved: Iterable[Union[str, Word]]) -> None:
        self.reserved = {w.text if isinstance(w, Word) else w for w in reserved}
        self._machine = StateMachine()

    @classmethod
    def from_file(cls, path: PathLike) -> IdentifierValidator:
        """Build a validator from a keyword-per-line file."""
        return cls(read_words(path))

    def is_reserved_keyword(self, text: str) -> bool:
        """True if ``text`` is exactly one of the reserved keywords."""
        return text in self.reserved

    def is_valid_identifier(self, text: str) -> bool:
        """True if ``text`` is built of identifier characters and is not reserved."""
        return self._machine.valid(text) and not self.is_reserved_keyword(text)