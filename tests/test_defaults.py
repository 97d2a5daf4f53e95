"""
Tests for the process-wide default dictionaries in slovoform/__init__.py.
"""

import importlib

import pytest

import slovoform
from slovoform import settings

from conftest import HARD


@pytest.fixture
def dictionary_env(tmp_path, monkeypatch):
    """Point the default dictionaries at small temporary files."""
    adjectives = tmp_path / "adjectives.tsv"
    adjectives.write_text(f"новый\t{HARD}\nбыстрый\t{HARD}\n", encoding="utf-8")
    adverbs = tmp_path / "adverbs.tsv"
    adverbs.write_text("трудно\t\n", encoding="utf-8")

    monkeypatch.setenv("SLOVOFORM_ADJECTIVES_PATH", str(adjectives))
    monkeypatch.setenv("SLOVOFORM_ADVERBS_PATH", str(adverbs))
    importlib.reload(settings)
    slovoform.reload_dictionaries()
    yield adjectives

    monkeypatch.undo()
    importlib.reload(settings)
    slovoform.reload_dictionaries()


class TestDefaults:
    def test_env_path(self, dictionary_env):
        assert settings.ADJECTIVES_PATH == dictionary_env
        assert len(slovoform.default_adjectives()) == 2
        assert len(slovoform.default_adverbs()) == 1

    def test_loaded_once(self, dictionary_env):
        assert slovoform.default_adjectives() is slovoform.default_adjectives()

    def test_reload(self, dictionary_env):
        first = slovoform.default_adjectives()
        dictionary_env.write_text(f"новый\t{HARD}\n", encoding="utf-8")
        assert slovoform.default_adjectives() is first

        slovoform.reload_dictionaries()
        assert len(slovoform.default_adjectives()) == 1


class TestWarmUp:
    def test_timings(self, dictionary_env):
        total, timings = slovoform.warm_up()
        assert total >= 0
        assert set(timings) == {"adjectives", "adverbs", "total"}
        assert len(slovoform.default_adverbs()) == 1

    def test_verbose(self, dictionary_env, capsys):
        slovoform.warm_up(verbose=True)
        captured = capsys.readouterr()
        assert "Loading slovoform dictionaries" in captured.out
        assert "Adjectives:" in captured.out


class TestFindAdjective:
    def test_exact(self, dictionary_env):
        adj = slovoform.find_adjective("Новый")
        assert adj.word == "Новый"
        assert not adj.inexact

    def test_similar(self, dictionary_env):
        adj = slovoform.find_adjective("бурый")
        assert adj.inexact
        assert adj[slovoform.Case.GENITIVE, slovoform.Gender.MASCULINE] == "бурого"

    def test_exact_only(self, dictionary_env):
        assert slovoform.find_adjective("бурый", similar=False) is None
