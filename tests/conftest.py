"""
Shared fixtures for slovoform tests.
"""

import pytest

from slovoform.adjectives import Adjectives
from slovoform.adverbs import Adverbs
from slovoform.lexicon import Entry, SortedLexicon

# Hard stem, comparable (быстрый)
HARD = "2|ый,ого,ому,ый,ого,ым,ом,,ая,ой,ой,ую,ую,ой,ой,а,ое,ого,ому,ое,ое,ым,ом,о,ые,ых,ым,ые,ых,ыми,ых,ы,ее,ей"
# Stressed -ой, comparable (живой)
STRESSED = "2|ой,ого,ому,ой,ого,ым,ом,,ая,ой,ой,ую,ую,ой,ой,а,ое,ого,ому,ое,ое,ым,ом,о,ые,ых,ым,ые,ых,ыми,ых,ы,ее,ей"
# Hard stem, relative adjective without short forms or comparatives (деревянный)
RELATIVE = "2|ый,ого,ому,ый,ого,ым,ом,-,ая,ой,ой,ую,ую,ой,ой,-,ое,ого,ому,ое,ое,ым,ом,-,ые,ых,ым,ые,ых,ыми,ых,-"
# Soft stem (синий)
SOFT = "2|ий,его,ему,ий,его,им,ем,-,яя,ей,ей,юю,юю,ей,ей,-,ее,его,ему,ее,ее,им,ем,-,ие,их,им,ие,их,ими,их,-"
# Stressed -ой without comparatives, for homonym tests
STRESSED_RELATIVE = "2|ой,ого,ому,ой,ого,ым,ом,-,ая,ой,ой,ую,ую,ой,ой,-,ое,ого,ому,ое,ое,ым,ом,-,ые,ых,ым,ые,ых,ыми,ых,-"


@pytest.fixture
def adjective_records():
    return [
        ("быстрый", HARD),
        ("новый", HARD),
        ("деревянный", RELATIVE),
        ("живой", STRESSED),
        ("синий", SOFT),
        ("простой", STRESSED),
        ("простой", STRESSED_RELATIVE),
    ]


@pytest.fixture
def adjectives(adjective_records):
    return Adjectives.from_records(adjective_records)


@pytest.fixture
def adverb_records():
    return [
        ("хорошо", "лучше"),
        ("трудно", ""),
        ("вчера", ""),
        ("быстро", ""),
    ]


@pytest.fixture
def adverbs(adverb_records):
    return Adverbs.from_records(adverb_records)


@pytest.fixture
def make_lexicon():
    """Factory: lexicon whose payloads are the positions of the words as given."""
    def _make(*words):
        return SortedLexicon(Entry(word, i) for i, word in enumerate(words))
    return _make


@pytest.fixture
def empty_lexicon():
    return SortedLexicon()
