"""SQLite export of the dictionaries."""

from slovoform.db.models import Base, Headword, WordForm
from slovoform.db.export import export_lexicon, get_session

__all__ = [
    "Base", "Headword", "WordForm",
    "export_lexicon", "get_session",
]
