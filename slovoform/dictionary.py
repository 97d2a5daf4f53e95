"""
Common lookup glue for the word-class dictionaries.

A WordDictionary owns a SortedLexicon, normalizes input words, runs the
lookup engine and wraps raw entries into word objects. Subclasses decide what
the wrapped object is and how comparability is read from an entry.
"""

import logging
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from slovoform.characters import normalize_word
from slovoform.constants import Comparability
from slovoform.lexicon import Entry, SortedLexicon
from slovoform import search

logger = logging.getLogger(__name__)

W = TypeVar('W')

WordFilter = Union[Comparability, Callable[[W], bool], None]


class WordDictionary(Generic[W]):
    """Base class for Adjectives and Adverbs."""

    word_class = "word"

    def __init__(self, lexicon: SortedLexicon):
        self.lexicon = lexicon

    def __len__(self) -> int:
        return len(self.lexicon)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} entries={len(self.lexicon)}>"

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    def _wrap(self, entry: Entry, word: str, inexact: bool = False) -> W:
        raise NotImplementedError

    def comparability_of(self, entry: Entry) -> Comparability:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def _entry_filter(self, word_filter: WordFilter) -> Optional[search.Predicate]:
        """Turn a comparability or a predicate over wrapped words into an entry predicate."""
        if word_filter is None or word_filter == Comparability.UNDEFINED:
            return None
        if isinstance(word_filter, Comparability):
            return lambda entry: self.comparability_of(entry) == word_filter
        return lambda entry: word_filter(self._wrap(entry, entry.key))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_one(self, source_form: str, word_filter: WordFilter = None) -> Optional[W]:
        """
        Find an exact match.

        Args:
            source_form: Word as typed; case is ignored.
            word_filter: Comparability or predicate over wrapped words.

        Returns:
            The word, or None if the dictionary has no matching entry.
        """
        result = search.find_one(self.lexicon, normalize_word(source_form), self._entry_filter(word_filter))
        if not result:
            return None
        return self._wrap(result.entry, source_form)

    def find_similar(self, source_form: str, word_filter: WordFilter = None) -> Optional[W]:
        """
        Find an exact match, or the closest entry when there is none.

        The returned word keeps `source_form` as its spelling and borrows the
        entry's paradigm; its `inexact` flag is set when the entry's headword
        differs from the query.
        """
        search_word = normalize_word(source_form)
        result = search.find_similar(self.lexicon, search_word, self._entry_filter(word_filter))
        if not result:
            logger.debug(f"No {self.word_class} similar to {source_form!r}")
            return None
        return self._wrap(result.entry, source_form, inexact=result.entry.key != search_word)

    def find_all(self, source_form: str) -> Iterator[W]:
        """Yield every homonym of `source_form`, spelled as given."""
        for entry in search.find_all(self.lexicon, normalize_word(source_form)):
            yield self._wrap(entry, source_form)

    def get_all(self) -> Iterator[W]:
        """Yield every word in the dictionary in lexicon order."""
        for entry in self.lexicon:
            yield self._wrap(entry, entry.key)
