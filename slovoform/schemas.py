"""
Inflection schemas.

A schema is a stem rule plus the list of endings of a full paradigm:

    2|ый,ого,ому,ый,ого,ым,ом,,ая,...

The number before the bar is how many trailing characters to cut from the
headword to get the stem. Form i is stem + ending i; an empty ending means the
bare stem and "-" means the word has no such form. Indices past the last
ending have no form either. See constants.py for the index layout.

Many headwords share a paradigm, so descriptors are interned in a Schemas
table and entries only store the table index.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from slovoform.loading import LexiconFormatError

NO_FORM = "-"
SEPARATOR = "|"


class SchemaFormatError(LexiconFormatError):
    """A schema descriptor could not be parsed."""


@dataclass(frozen=True)
class Schema:
    """
    A parsed paradigm.

    Attributes:
        strip: Number of characters to remove from the end of the headword.
        endings: Ending per form index, None where there is no form.
    """
    strip: int
    endings: Tuple[Optional[str], ...]

    @classmethod
    def parse(cls, descriptor: str) -> "Schema":
        """
        Parse a descriptor string.

        Raises:
            SchemaFormatError: If the strip count is missing or not a
                non-negative integer.
        """
        strip_str, sep, endings_str = descriptor.partition(SEPARATOR)
        if not sep:
            raise SchemaFormatError(f"missing '{SEPARATOR}' in schema {descriptor!r}")
        try:
            strip = int(strip_str)
        except ValueError:
            raise SchemaFormatError(f"bad stem length {strip_str!r} in schema {descriptor!r}") from None
        if strip < 0:
            raise SchemaFormatError(f"negative stem length in schema {descriptor!r}")

        endings = tuple(
            None if ending == NO_FORM else ending
            for ending in endings_str.split(",")
        ) if endings_str else ()
        return cls(strip, endings)

    def stem(self, word: str) -> Optional[str]:
        if self.strip > len(word):
            return None
        return word[:len(word) - self.strip]

    def get_form(self, word: str, index: int) -> Optional[str]:
        """
        Inflect `word` into form `index`.

        Returns:
            The form, or None if the schema has no form at that index.
        """
        if index < 0 or index >= len(self.endings):
            return None
        ending = self.endings[index]
        if ending is None:
            return None
        stem = self.stem(word)
        if stem is None:
            return None
        return stem + ending

    def has_form(self, index: int) -> bool:
        return 0 <= index < len(self.endings) and self.endings[index] is not None


class Schemas:
    """
    Interning table of schemas.

    Filled between begin_init() and end_init(); after end_init() the table is
    sealed and only read.
    """

    def __init__(self):
        self._schemas: List[Schema] = []
        self._ids: Dict[str, int] = {}
        self._sealed = False

    def begin_init(self):
        """Start (re)filling the table."""
        self._schemas = []
        self._ids = {}
        self._sealed = False

    def end_init(self):
        """Seal the table."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get_or_add(self, descriptor: str) -> int:
        """
        Return the index of a descriptor, parsing and adding it if new.

        Raises:
            SchemaFormatError: If the descriptor is malformed.
            RuntimeError: If a new descriptor is added to a sealed table.
        """
        schema_id = self._ids.get(descriptor)
        if schema_id is not None:
            return schema_id
        if self._sealed:
            raise RuntimeError("Schema table is sealed")

        schema = Schema.parse(descriptor)
        schema_id = len(self._schemas)
        self._schemas.append(schema)
        self._ids[descriptor] = schema_id
        return schema_id

    def __getitem__(self, index: int) -> Schema:
        return self._schemas[index]

    def __len__(self) -> int:
        return len(self._schemas)

    def get_form(self, schema_id: int, word: str, index: int) -> Optional[str]:
        return self._schemas[schema_id].get_form(word, index)
