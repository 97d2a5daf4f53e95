"""
Adjective dictionary.

Each lexicon entry is a headword plus the index of its inflection schema.
Adjective objects compute their forms on demand through that schema:

    >>> adjectives = Adjectives.load()
    >>> adj = adjectives.find_one("Быстрый")
    >>> adj[Case.GENITIVE, Gender.FEMININE]
    'Быстрой'
    >>> adj[Comparison.COMPARATIVE2]
    'Побыстрее'
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from slovoform.characters import is_capitalized
from slovoform.constants import (
    Case, Comparability, Comparison, Gender,
    FORM_COMPARATIVE, PO_PREFIXED,
    adjective_form_index, comparative_form_index, form_name,
)
from slovoform.dictionary import WordDictionary
from slovoform.lexicon import Entry, SortedLexicon
from slovoform.loading import iter_records
from slovoform.schemas import Schemas
from slovoform.settings import ADJECTIVES_PATH

logger = logging.getLogger(__name__)


class Adjective:
    """
    An adjective and its word forms.

    Attributes:
        word: Spelling the adjective was requested with (or the headword for
            get_all()). Forms are built from this spelling.
        schema_index: Index of the paradigm in the schema table.
        inexact: True when the paradigm was borrowed from a similar headword.
    """

    word_class = "adjective"

    def __init__(self, word: str, schema_index: int, schemas: Schemas, inexact: bool = False):
        self.word = word
        self.schema_index = schema_index
        self.inexact = inexact
        self._schemas = schemas

    def __repr__(self) -> str:
        flag = " inexact" if self.inexact else ""
        return f"<Adjective {self.word!r} schema={self.schema_index}{flag}>"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Adjective):
            return NotImplemented
        return (self.word, self.schema_index, self.inexact) == (other.word, other.schema_index, other.inexact)

    def __hash__(self) -> int:
        return hash((self.word, self.schema_index, self.inexact))

    def _form(self, index: int) -> Optional[str]:
        return self._schemas.get_form(self.schema_index, self.word, index)

    @property
    def comparability(self) -> Comparability:
        """Comparable iff the paradigm has a comparative form."""
        if self._form(FORM_COMPARATIVE) is not None:
            return Comparability.COMPARABLE
        return Comparability.INCOMPARABLE

    def form(self, case: Case, gender: Gender) -> Optional[str]:
        """Form by case and gender/number; None if the word lacks it."""
        return self._form(adjective_form_index(case, gender))

    def comparative(self, comparison: Comparison) -> Optional[str]:
        """
        Comparative degree.

        COMPARATIVE2 and COMPARATIVE4 are the "по" forms (побыстрее,
        побыстрей). Adjectives have no COMPARATIVE5; None is returned for it
        and for incomparable adjectives.
        """
        if comparison > Comparison.COMPARATIVE4:
            return None
        res = self._form(comparative_form_index(comparison))
        if not res:
            return None
        if comparison in PO_PREFIXED:
            return "По" + res.lower() if is_capitalized(res) else "по" + res
        return res

    def __getitem__(self, key: Union[Comparison, Tuple[Case, Gender]]) -> Optional[str]:
        if isinstance(key, Comparison):
            return self.comparative(key)
        case, gender = key
        return self.form(case, gender)

    def forms(self) -> Dict[str, str]:
        """All available declension forms keyed by 'case gender' labels."""
        result = {}
        for gender in Gender:
            for case in Case:
                value = self.form(case, gender)
                if value is not None:
                    result[form_name(case, gender)] = value
        return result

    def comparatives(self) -> Dict[str, str]:
        """All available comparative forms keyed by Comparison name."""
        result = {}
        for comparison in Comparison:
            value = self.comparative(comparison)
            if value is not None:
                result[comparison.name.lower()] = value
        return result


class Adjectives(WordDictionary[Adjective]):
    """
    Adjective dictionary.

    Build it with load() or from_records(); both fail on a malformed
    dictionary rather than return a partial one.
    """

    word_class = "adjective"

    def __init__(self, lexicon: SortedLexicon, schemas: Schemas):
        super().__init__(lexicon)
        self.schemas = schemas

    @classmethod
    def from_records(cls, records: Iterable[Tuple[str, str]]) -> "Adjectives":
        """
        Build from (word, schema descriptor) records.

        Raises:
            LexiconFormatError: On a malformed record or schema.
        """
        schemas = Schemas()
        schemas.begin_init()
        lexicon = SortedLexicon.from_records(records, schemas.get_or_add)
        schemas.end_init()
        logger.info(f"Adjectives: {len(lexicon)} entries, {len(schemas)} schemas")
        return cls(lexicon, schemas)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None, encoding: Optional[str] = None) -> "Adjectives":
        """Load a dictionary file (defaults to settings.ADJECTIVES_PATH)."""
        return cls.from_records(iter_records(path or ADJECTIVES_PATH, encoding))

    def _wrap(self, entry: Entry, word: str, inexact: bool = False) -> Adjective:
        return Adjective(word, entry.payload, self.schemas, inexact)

    def comparability_of(self, entry: Entry) -> Comparability:
        if self.schemas.get_form(entry.payload, entry.key, FORM_COMPARATIVE) is not None:
            return Comparability.COMPARABLE
        return Comparability.INCOMPARABLE
