"""
Grammatical descriptors and form index layout for Slovoform.

A schema stores the paradigm of a word as a flat list of forms. This module is
the single source of truth for which grammatical form lives at which index:

    index = 8 * gender_slot + case_slot      (0..31, declension)
    32                                       synthetic comparative (быстрее)
    33                                       short comparative (быстрей)

Case slots within one gender block:

    0 nominative    1 genitive     2 dative        3 accusative (inanimate)
    4 accusative (animate)         5 instrumental  6 prepositional
    7 short form
"""

from enum import IntEnum
from typing import Dict


class Case(IntEnum):
    """Grammatical case. SHORT stands for the predicative short form."""
    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    PREPOSITIONAL = 5
    SHORT = 6


class Gender(IntEnum):
    """Gender/number, each with an animate variant (affects the accusative)."""
    MASCULINE = 0
    FEMININE = 1
    NEUTER = 2
    PLURAL = 3
    MASCULINE_ANIMATE = 4
    FEMININE_ANIMATE = 5
    NEUTER_ANIMATE = 6
    PLURAL_ANIMATE = 7

    @property
    def slot(self) -> int:
        """Gender block in the form table, ignoring animacy."""
        return self.value % 4

    @property
    def animate(self) -> bool:
        return self.value >= 4


class Comparison(IntEnum):
    """Comparative degree variants."""
    COMPARATIVE1 = 0  # быстрее
    COMPARATIVE2 = 1  # побыстрее
    COMPARATIVE3 = 2  # быстрей
    COMPARATIVE4 = 3  # побыстрей
    COMPARATIVE5 = 4  # более быстро (adverbs only)


class Comparability(IntEnum):
    """Whether a word forms comparatives."""
    UNDEFINED = 0
    COMPARABLE = 1
    INCOMPARABLE = 2


FORMS_PER_GENDER = 8
DECLENSION_FORMS = 4 * FORMS_PER_GENDER

FORM_COMPARATIVE = 32
FORM_COMPARATIVE_SHORT = 33
FORM_COUNT = 34

# Case -> slot inside a gender block (accusative is resolved by animacy)
CASE_SLOTS: Dict[Case, int] = {
    Case.NOMINATIVE: 0,
    Case.GENITIVE: 1,
    Case.DATIVE: 2,
    Case.ACCUSATIVE: 3,
    Case.INSTRUMENTAL: 5,
    Case.PREPOSITIONAL: 6,
    Case.SHORT: 7,
}

CASE_NAMES: Dict[Case, str] = {
    Case.NOMINATIVE: "nominative",
    Case.GENITIVE: "genitive",
    Case.DATIVE: "dative",
    Case.ACCUSATIVE: "accusative",
    Case.INSTRUMENTAL: "instrumental",
    Case.PREPOSITIONAL: "prepositional",
    Case.SHORT: "short",
}

GENDER_NAMES: Dict[Gender, str] = {
    Gender.MASCULINE: "masculine",
    Gender.FEMININE: "feminine",
    Gender.NEUTER: "neuter",
    Gender.PLURAL: "plural",
    Gender.MASCULINE_ANIMATE: "masculine animate",
    Gender.FEMININE_ANIMATE: "feminine animate",
    Gender.NEUTER_ANIMATE: "neuter animate",
    Gender.PLURAL_ANIMATE: "plural animate",
}

# Comparisons that take the "по" prefix
PO_PREFIXED = frozenset({Comparison.COMPARATIVE2, Comparison.COMPARATIVE4})


def case_index(case: Case, gender: Gender) -> int:
    """Slot of a case inside its gender block."""
    slot = CASE_SLOTS[case]
    if case == Case.ACCUSATIVE and gender.animate:
        slot += 1
    return slot


def adjective_form_index(case: Case, gender: Gender) -> int:
    """Index of a declension form in a schema."""
    return FORMS_PER_GENDER * gender.slot + case_index(case, gender)


def comparative_form_index(comparison: Comparison) -> int:
    """
    Index of the comparative a Comparison is built from.

    COMPARATIVE1/2 share the synthetic form and COMPARATIVE3/4 the short one.
    """
    return FORM_COMPARATIVE + int(comparison) // 2


def form_name(case: Case, gender: Gender) -> str:
    """Human-readable label, e.g. 'genitive feminine'."""
    return f"{CASE_NAMES[case]} {GENDER_NAMES[gender]}"
