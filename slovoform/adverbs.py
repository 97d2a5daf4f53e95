"""
Adverb dictionary.

Adverb comparatives follow a small fixed rule set rather than schemas:
qualitative adverbs end in "-о" and swap it for "-ее"/"-ей" (трудно ->
труднее, трудней). A handful of common adverbs are irregular; a dictionary
record may also carry an irregular comparative as its second field:

    хорошо<TAB>лучше
    трудно<TAB>
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from slovoform.characters import is_capitalized, match_case
from slovoform.constants import Comparability, Comparison
from slovoform.dictionary import WordDictionary
from slovoform.lexicon import Entry, SortedLexicon
from slovoform.loading import iter_records
from slovoform.settings import ADVERBS_PATH

logger = logging.getLogger(__name__)

COMPARABLE_ENDING = "о"

IRREGULAR_COMPARATIVES: Dict[str, str] = {
    "долго": "дольше",
    "круто": "круче",
    "свято": "свяче",
    "легко": "легче",
    "мягко": "мягче",
    "мелко": "мельче",
    "хорошо": "лучше",
    "плохо": "хуже",
    "высоко": "выше",
    "низко": "ниже",
    "далеко": "дальше",
    "близко": "ближе",
    "рано": "раньше",
    "поздно": "позже",
    "много": "больше",
    "мало": "меньше",
}

# Endings substituted for the final "о"
REGULAR_SUFFIXES: Dict[Comparison, str] = {
    Comparison.COMPARATIVE1: "ее",
    Comparison.COMPARATIVE2: "ее",
    Comparison.COMPARATIVE3: "ей",
    Comparison.COMPARATIVE4: "ей",
}


class Adverb:
    """
    An adverb and its comparative forms.

    Attributes:
        word: Spelling the adverb was requested with.
        irregular: Irregular comparative (лучше for хорошо), if any.
        inexact: True when found through the similarity fallback.
    """

    word_class = "adverb"

    def __init__(self, word: str, irregular: Optional[str] = None, inexact: bool = False):
        self.word = word
        self.irregular = irregular or IRREGULAR_COMPARATIVES.get(word.lower())
        self.inexact = inexact

    @classmethod
    def of(cls, word: str) -> "Adverb":
        """Wrap any word as an adverb, without a dictionary lookup."""
        return cls(word)

    def __repr__(self) -> str:
        flag = " inexact" if self.inexact else ""
        return f"<Adverb {self.word!r}{flag}>"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Adverb):
            return NotImplemented
        return (self.word, self.irregular, self.inexact) == (other.word, other.irregular, other.inexact)

    def __hash__(self) -> int:
        return hash((self.word, self.irregular, self.inexact))

    @property
    def comparability(self) -> Comparability:
        if self.irregular or self.word.lower().endswith(COMPARABLE_ENDING):
            return Comparability.COMPARABLE
        return Comparability.INCOMPARABLE

    def comparative(self, comparison: Comparison) -> Optional[str]:
        """
        Comparative degree, or None if the adverb has no such form.

        COMPARATIVE5 is the analytic form (более трудно). Irregular adverbs
        have no "-ей" variants.
        """
        if self.comparability != Comparability.COMPARABLE or not self.word:
            return None

        # Whole adverb after "более" ("более трудно"), never the stem without "о"
        if comparison == Comparison.COMPARATIVE5:
            return match_case("более ", self.word) + self.word.lower()

        po = "По" if is_capitalized(self.word) else "по"
        prefixed = comparison in (Comparison.COMPARATIVE2, Comparison.COMPARATIVE4)

        if self.irregular:
            if comparison in (Comparison.COMPARATIVE3, Comparison.COMPARATIVE4):
                return None
            base = self.irregular.lower()
            return po + base if prefixed else match_case(base, self.word)

        base = self.word[:-1].lower() + REGULAR_SUFFIXES[comparison]
        return po + base if prefixed else match_case(base, self.word)

    def __getitem__(self, comparison: Comparison) -> Optional[str]:
        return self.comparative(comparison)

    def comparatives(self) -> Dict[str, str]:
        result = {}
        for comparison in Comparison:
            value = self.comparative(comparison)
            if value is not None:
                result[comparison.name.lower()] = value
        return result


class Adverbs(WordDictionary[Adverb]):
    """Adverb dictionary; entry payloads are irregular comparatives or None."""

    word_class = "adverb"

    @classmethod
    def from_records(cls, records: Iterable[Tuple[str, str]]) -> "Adverbs":
        lexicon = SortedLexicon.from_records(records, lambda descriptor: descriptor.strip() or None)
        logger.info(f"Adverbs: {len(lexicon)} entries")
        return cls(lexicon)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None, encoding: Optional[str] = None) -> "Adverbs":
        """Load a dictionary file (defaults to settings.ADVERBS_PATH)."""
        return cls.from_records(iter_records(path or ADVERBS_PATH, encoding))

    def _wrap(self, entry: Entry, word: str, inexact: bool = False) -> Adverb:
        # An irregular comparative belongs to its headword only
        irregular = None if inexact else entry.payload
        return Adverb(word, irregular, inexact)

    def comparability_of(self, entry: Entry) -> Comparability:
        return Adverb(entry.key, entry.payload).comparability
