"""
Suffix ordering for the lexicon.

Russian inflection changes the ending of a word and leaves the stem alone, so
the lexicon is ordered by comparing words from the last character backward.
Words sharing an ending then sit next to each other whatever their stems are.

Two separate functions come out of the same backward walk:

- compare_suffix_order() is the ordering, nothing more.
- suffix_distance() is a similarity heuristic. It is NOT a metric (no triangle
  inequality); it only ranks the two neighbours of an insertion point against
  each other.
"""

from typing import Tuple


def suffix_key(word: str) -> str:
    """Sort key for suffix order: the word read right to left."""
    return word[::-1]


def _walk(a: str, b: str) -> Tuple[int, int]:
    """
    Walk both words from the end.

    Returns:
        (matched, sign) where matched is the number of equal trailing
        characters and sign orders a against b (0 when they are equal).
    """
    i = len(a) - 1
    j = len(b) - 1
    matched = 0
    while i >= 0 and j >= 0:
        if a[i] != b[j]:
            return matched, (-1 if a[i] < b[j] else 1)
        matched += 1
        i -= 1
        j -= 1

    # One word is a suffix of the other: the shorter sorts first
    if len(a) == len(b):
        return matched, 0
    return matched, (-1 if len(a) < len(b) else 1)


def compare_suffix_order(a: str, b: str) -> int:
    """
    Compare two words in suffix order.

    Returns:
        -1, 0 or 1, consistent with comparing suffix_key(a) to suffix_key(b).
    """
    return _walk(a, b)[1]


def common_suffix_length(a: str, b: str) -> int:
    """Number of trailing characters a and b share."""
    return _walk(a, b)[0]


def suffix_distance(a: str, b: str) -> int:
    """
    Similarity score between two words.

    0 for equal words, otherwise the number of trailing positions left
    unmatched when the backward walk stops, counted on the longer word.
    The score grows with the number of mismatching trailing characters.
    """
    matched, sign = _walk(a, b)
    if sign == 0:
        return 0
    return max(len(a), len(b)) - matched
