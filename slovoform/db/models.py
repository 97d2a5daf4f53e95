"""
SQLAlchemy tables for the lexicon export.

    headword   one row per dictionary entry
    word_form  one row per generated form of a headword
"""

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from typing import List, Optional


class Base(DeclarativeBase):
    pass


class Headword(Base):
    __tablename__ = "headword"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    word: Mapped[str] = mapped_column(String, nullable=False)
    word_class: Mapped[str] = mapped_column(String, nullable=False)
    schema_index: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    comparability: Mapped[str] = mapped_column(String, nullable=False)

    forms: Mapped[List["WordForm"]] = relationship(back_populates="headword", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_headword_word", "word"),
    )

    def __repr__(self) -> str:
        return f"<Headword {self.word!r} ({self.word_class})>"


class WordForm(Base):
    __tablename__ = "word_form"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    headword_id: Mapped[int] = mapped_column(ForeignKey("headword.id"), nullable=False)
    label: Mapped[str] = mapped_column(String, nullable=False)
    form: Mapped[str] = mapped_column(String, nullable=False)

    headword: Mapped[Headword] = relationship(back_populates="forms")

    __table_args__ = (
        Index("idx_word_form_headword", "headword_id"),
        Index("idx_word_form_form", "form"),
    )
