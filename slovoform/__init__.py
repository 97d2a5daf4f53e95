"""
Slovoform: Russian adjective and adverb form lookup.

Finds a word in a suffix-ordered dictionary (or the closest headword when the
word itself is missing) and generates its case, gender, number and comparative
forms from the headword's paradigm.
"""

import time
from typing import Optional, Tuple

from slovoform import settings
from slovoform.adjectives import Adjective, Adjectives
from slovoform.adverbs import Adverb, Adverbs
from slovoform.cache import defcache
from slovoform.constants import Case, Comparability, Comparison, Gender

__version__ = "0.1.0"

__all__ = [
    "Adjective", "Adjectives", "Adverb", "Adverbs",
    "Case", "Comparability", "Comparison", "Gender",
    "default_adjectives", "default_adverbs", "reload_dictionaries", "warm_up",
    "find_adjective",
]


@defcache("adjectives")
def _adjectives_cache() -> Adjectives:
    return Adjectives.load(settings.ADJECTIVES_PATH)


@defcache("adverbs")
def _adverbs_cache() -> Adverbs:
    return Adverbs.load(settings.ADVERBS_PATH)


def default_adjectives() -> Adjectives:
    """Process-wide adjective dictionary, loaded on first use."""
    return _adjectives_cache.ensure()


def default_adverbs() -> Adverbs:
    """Process-wide adverb dictionary, loaded on first use."""
    return _adverbs_cache.ensure()


def reload_dictionaries():
    """Forget the default dictionaries; they are read again on next use."""
    _adjectives_cache.invalidate()
    _adverbs_cache.invalidate()


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Load the default dictionaries up front.

    Args:
        verbose: If True, print timing information.

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)
    """
    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Loading slovoform dictionaries...")

    t0 = time.perf_counter()
    default_adjectives()
    timings['adjectives'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  Adjectives:  {timings['adjectives']:>7.1f}ms")

    t0 = time.perf_counter()
    default_adverbs()
    timings['adverbs'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  Adverbs:     {timings['adverbs']:>7.1f}ms")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000
    if verbose:
        print(f"Total:         {timings['total']:>7.1f}ms")

    return total_time, timings


def find_adjective(word: str, similar: bool = True) -> Optional[Adjective]:
    """
    Look up an adjective in the default dictionary.

    With `similar` (the default) a missing word falls back to the closest
    headword and the result is flagged inexact.
    """
    adjectives = default_adjectives()
    if similar:
        return adjectives.find_similar(word)
    return adjectives.find_one(word)
