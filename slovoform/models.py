"""
Pydantic models for serialising lookup results.

Usage:
    from slovoform.models import LookupResult, WordResult

    adj = adjectives.find_similar("синенький")
    print(WordResult.from_word(adj).model_dump_json())
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from slovoform.constants import Comparability


class WordResult(BaseModel):
    """A single adjective or adverb with its forms."""
    word: str = Field(..., description="Word as requested")
    word_class: str = Field(..., description="'adjective' or 'adverb'")
    inexact: bool = Field(False, description="True if the paradigm comes from a similar headword")
    comparability: str = Field(..., description="'comparable' or 'incomparable'")
    schema_index: Optional[int] = Field(None, description="Schema table index (adjectives only)")
    forms: Dict[str, str] = Field(default_factory=dict, description="Declension forms by 'case gender'")
    comparatives: Dict[str, str] = Field(default_factory=dict, description="Comparative forms by degree")

    @classmethod
    def from_word(cls, w: Any) -> "WordResult":
        """Create a WordResult from an Adjective or Adverb."""
        forms = w.forms() if hasattr(w, "forms") else {}
        return cls(
            word=w.word,
            word_class=w.word_class,
            inexact=w.inexact,
            comparability=Comparability(w.comparability).name.lower(),
            schema_index=getattr(w, "schema_index", None),
            forms=forms,
            comparatives=w.comparatives(),
        )


class LookupResult(BaseModel):
    """
    Results of one query.

    mode is 'one', 'similar' or 'all'; results is empty when nothing matched.
    """
    query: str = Field(..., description="Query as typed")
    mode: str = Field(..., description="Lookup mode")
    results: List[WordResult] = Field(default_factory=list)
    count: int = Field(0, description="Number of results")

    @classmethod
    def from_words(cls, query: str, mode: str, words: Iterable[Any]) -> "LookupResult":
        results = [WordResult.from_word(w) for w in words if w is not None]
        return cls(query=query, mode=mode, results=results, count=len(results))
