"""
Lookup engine over a SortedLexicon.

Three operations:

- find_one: first entry of the equal-key run that passes a filter.
- find_all: every entry of the equal-key run (homonyms).
- find_similar: like find_one, falling back to the closest filtered
  neighbour in suffix order when the word itself is missing.

"Not found" is always an absent MatchResult (or an empty sequence), never an
exception.
"""

import logging
from typing import Callable, Iterator, Optional

from slovoform.lexicon import Entry, MatchResult, SortedLexicon
from slovoform.ordering import suffix_distance
from slovoform.settings import SIMILARITY_THRESHOLD

logger = logging.getLogger(__name__)

Predicate = Callable[[Entry], bool]


def _accept_all(entry: Entry) -> bool:
    return True


def find_one(
    lexicon: SortedLexicon,
    word: str,
    predicate: Optional[Predicate] = None,
) -> MatchResult:
    """
    Find the first entry keyed `word` that satisfies `predicate`.

    The run of equal keys is scanned in lexicon order.
    """
    predicate = predicate or _accept_all
    found, start = lexicon.locate(word)
    if not found:
        return MatchResult.absent()

    for i in range(start, lexicon.run_end(start)):
        if predicate(lexicon[i]):
            return MatchResult(lexicon[i], True)
    return MatchResult.absent()


class Homonyms:
    """
    Lazy view of every entry keyed `word`, in lexicon order.

    Each iteration locates the run again, so the view is restartable.
    """

    def __init__(self, lexicon: SortedLexicon, word: str):
        self.lexicon = lexicon
        self.word = word

    def __iter__(self) -> Iterator[Entry]:
        found, start = self.lexicon.locate(self.word)
        if not found:
            return
        for i in range(start, self.lexicon.run_end(start)):
            yield self.lexicon[i]

    def __repr__(self) -> str:
        return f"<Homonyms {self.word!r}>"


def find_all(lexicon: SortedLexicon, word: str) -> Homonyms:
    """All homonyms keyed `word`; no filter is applied."""
    return Homonyms(lexicon, word)


def find_similar(
    lexicon: SortedLexicon,
    word: str,
    predicate: Optional[Predicate] = None,
    threshold: int = SIMILARITY_THRESHOLD,
) -> MatchResult:
    """
    Find `word`, or the closest entry in suffix order that satisfies `predicate`.

    When the word is present and one of its entries passes the filter the
    result is exact. Otherwise the nearest filtered entry is searched on both
    sides of the binary-search position. The candidate with the larger
    suffix_distance() wins, ties going to the entry after the origin, provided
    that score is above `threshold`.

    Args:
        lexicon: Lexicon to search.
        word: Normalized query.
        predicate: Entry filter; None accepts everything.
        threshold: Candidates scoring at or below this are rejected.

    Returns:
        MatchResult; exact is False for fallback hits.
    """
    if len(lexicon) == 0:
        return MatchResult.absent()

    predicate = predicate or _accept_all
    found, origin = lexicon.locate(word)
    if found:
        result = find_one(lexicon, word, predicate)
        if result:
            return result

    # Nearest accepted entry above the origin
    lo = None
    j = origin - 1
    while j >= 0:
        if predicate(lexicon[j]):
            lo = lexicon[j]
            break
        j -= 1

    # Nearest accepted entry from the origin downward
    hi = None
    j = origin
    while j < len(lexicon):
        if predicate(lexicon[j]):
            hi = lexicon[j]
            break
        j += 1

    if lo is None and hi is None:
        return MatchResult.absent()

    if lo is None or hi is None:
        candidate = lo if hi is None else hi
        score = suffix_distance(candidate.key, word)
        if score > threshold:
            logger.debug(f"Similar to {word!r}: {candidate.key!r} (score {score})")
            return MatchResult(candidate, False)
        return MatchResult.absent()

    lo_score = suffix_distance(lo.key, word)
    hi_score = suffix_distance(hi.key, word)
    candidate = lo if lo_score > hi_score else hi
    best = max(lo_score, hi_score)
    if best > threshold:
        logger.debug(f"Similar to {word!r}: {candidate.key!r} (score {best})")
        return MatchResult(candidate, False)
    return MatchResult.absent()
