"""
Character handling for Slovoform.

Case folding of input words and restoring the caller's capitalisation on
generated forms.
"""

import unicodedata
from typing import Optional

def normalize_word(word: str) -> str:
    """
    Normalize a surface form for lookup.

    Applies NFC (so a decomposed "й" matches the dictionary), strips
    surrounding whitespace and lowercases.
    """
    return unicodedata.normalize("NFC", word).strip().lower()


def is_capitalized(word: Optional[str]) -> bool:
    """True if the first character is uppercase."""
    return bool(word) and word[0].isupper()


def match_case(form: str, like: str) -> str:
    """
    Give `form` the capitalisation of `like`.

    Only a leading capital is carried over: "Быстрый" makes "быстрее" into
    "Быстрее". Words in all caps are treated the same way.
    """
    if not form or not is_capitalized(like):
        return form
    return form[0].upper() + form[1:]
