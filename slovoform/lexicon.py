"""
Sorted lexicon of (word, payload) entries.

The lexicon is built once and never changes afterwards, so it can be shared
between threads and iterated without locking.
"""

import logging
from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from slovoform.characters import normalize_word
from slovoform.ordering import suffix_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """
    A lexicon record.

    Attributes:
        key: Lowercased headword as stored in the dictionary.
        payload: Opaque reference (an index into the schema table for
            adjectives). The search code never looks inside it.
    """
    key: str
    payload: Any = None

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of a lookup.

    entry is None when nothing was found. exact is False when the entry comes
    from the similarity fallback and its key differs from the query.
    """
    entry: Optional[Entry] = None
    exact: bool = False

    @classmethod
    def absent(cls) -> "MatchResult":
        return cls(None, False)

    @property
    def found(self) -> bool:
        return self.entry is not None

    def __bool__(self) -> bool:
        return self.entry is not None


class SortedLexicon:
    """
    Entries in ascending suffix order.

    Homonyms (equal keys) keep their source order and are adjacent, because
    the sort is stable and keys compare equal only when they are identical.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        items = sorted(entries, key=lambda e: suffix_key(e.key))
        self._entries: Tuple[Entry, ...] = tuple(items)
        self._keys: Tuple[str, ...] = tuple(suffix_key(e.key) for e in items)
        logger.debug(f"Built lexicon with {len(self._entries)} entries")

    @classmethod
    def from_records(
        cls,
        records: Iterable[Tuple[str, str]],
        payload_for: Optional[Callable[[str], Any]] = None,
    ) -> "SortedLexicon":
        """
        Build a lexicon from (word, descriptor) records.

        Words are stored normalized (NFC, stripped, lowercased), the same
        way queries are.

        Args:
            records: Finite iterable of records, consumed completely before
                the lexicon exists. Errors raised while reading propagate.
            payload_for: Maps a descriptor to the stored payload. Defaults to
                storing the descriptor itself.

        Returns:
            The new lexicon.
        """
        entries: List[Entry] = []
        for word, descriptor in records:
            payload = payload_for(descriptor) if payload_for else descriptor
            entries.append(Entry(normalize_word(word), payload))
        lexicon = cls(entries)
        logger.info(f"Loaded {len(lexicon)} lexicon entries")
        return lexicon

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"<SortedLexicon entries={len(self._entries)}>"

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def keys(self) -> List[str]:
        """Headwords in lexicon order."""
        return [e.key for e in self._entries]

    def locate(self, word: str) -> Tuple[bool, int]:
        """
        Binary-search a word.

        Returns:
            (found, index). When found, index is the first entry of the run of
            equal keys; otherwise it is the insertion point.
        """
        target = suffix_key(word)
        i = bisect_left(self._keys, target)
        return i < len(self._keys) and self._keys[i] == target, i

    def run_end(self, start: int) -> int:
        """Index one past the run of keys equal to the key at start."""
        target = self._keys[start]
        end = start + 1
        while end < len(self._keys) and self._keys[end] == target:
            end += 1
        return end
