"""
Export dictionaries to SQLite.

Walks get_all() of each dictionary and stores every headword with all of its
generated forms, for inspection with ordinary SQL tools.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from slovoform.constants import Comparability
from slovoform.db.models import Base, Headword, WordForm
from slovoform.settings import EXPORT_BATCH_SIZE

logger = logging.getLogger(__name__)


def get_session(db_path: Union[str, Path], create: bool = True) -> Session:
    """
    Open a session on a SQLite file.

    Args:
        db_path: Database file; ":memory:" for an in-memory database.
        create: Create missing tables.
    """
    db_path = str(db_path)
    url = "sqlite://" if db_path == ":memory:" else f"sqlite:///{db_path}"
    engine = create_engine(url)
    if create:
        Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)()


def _headword(w) -> Headword:
    row = Headword(
        word=w.word,
        word_class=w.word_class,
        schema_index=getattr(w, "schema_index", None),
        comparability=Comparability(w.comparability).name.lower(),
    )
    forms = w.forms() if hasattr(w, "forms") else {}
    for label, form in forms.items():
        row.forms.append(WordForm(label=label, form=form))
    for label, form in w.comparatives().items():
        row.forms.append(WordForm(label=label, form=form))
    return row


def write_words(session: Session, words: Iterable, batch_size: int = EXPORT_BATCH_SIZE) -> int:
    """Insert words, committing every `batch_size` headwords."""
    count = 0
    for w in words:
        session.add(_headword(w))
        count += 1
        if count % batch_size == 0:
            session.commit()
            logger.info(f"Exported {count} headwords...")
    session.commit()
    return count


def export_lexicon(
    db_path: Union[str, Path],
    adjectives=None,
    adverbs=None,
    batch_size: int = EXPORT_BATCH_SIZE,
    session: Optional[Session] = None,
) -> int:
    """
    Export dictionaries into a SQLite database.

    Args:
        db_path: Target database file (ignored when `session` is given).
        adjectives: Adjectives dictionary or None.
        adverbs: Adverbs dictionary or None.
        batch_size: Headwords per commit.
        session: Existing session to write into.

    Returns:
        Number of headwords written.
    """
    own_session = session is None
    if own_session:
        session = get_session(db_path)

    try:
        total = 0
        for dictionary in (adjectives, adverbs):
            if dictionary is None:
                continue
            written = write_words(session, dictionary.get_all(), batch_size)
            logger.info(f"Exported {written} {dictionary.word_class} headwords")
            total += written
        return total
    except Exception:
        session.rollback()
        raise
    finally:
        if own_session:
            session.close()
