"""
Tests for schemas.py - paradigm descriptors and the schema table.
"""

import pytest

from slovoform.constants import FORM_COMPARATIVE, FORM_COMPARATIVE_SHORT
from slovoform.loading import LexiconFormatError
from slovoform.schemas import Schema, SchemaFormatError, Schemas

from conftest import HARD, RELATIVE


class TestSchemaParse:
    def test_parse(self):
        schema = Schema.parse(HARD)
        assert schema.strip == 2
        assert len(schema.endings) == 34

    def test_no_form_marker(self):
        schema = Schema.parse(RELATIVE)
        assert schema.endings[7] is None
        assert len(schema.endings) == 32

    def test_empty_endings(self):
        assert Schema.parse("0|").endings == ()

    @pytest.mark.parametrize("descriptor", [
        "ый,ого,ому",
        "x|ый",
        "-1|ый",
        "",
    ])
    def test_malformed(self, descriptor):
        with pytest.raises(SchemaFormatError):
            Schema.parse(descriptor)

    def test_error_is_lexicon_error(self):
        with pytest.raises(LexiconFormatError):
            Schema.parse("nope")


class TestGetForm:
    @pytest.fixture
    def schema(self):
        return Schema.parse(HARD)

    def test_headword(self, schema):
        assert schema.get_form("быстрый", 0) == "быстрый"

    def test_oblique(self, schema):
        assert schema.get_form("быстрый", 1) == "быстрого"
        assert schema.get_form("быстрый", 29) == "быстрыми"

    def test_bare_stem(self, schema):
        assert schema.get_form("быстрый", 7) == "быстр"

    def test_comparatives(self, schema):
        assert schema.get_form("быстрый", FORM_COMPARATIVE) == "быстрее"
        assert schema.get_form("быстрый", FORM_COMPARATIVE_SHORT) == "быстрей"

    def test_out_of_range(self, schema):
        assert schema.get_form("быстрый", 34) is None
        assert schema.get_form("быстрый", -1) is None

    def test_no_form(self):
        schema = Schema.parse(RELATIVE)
        assert schema.get_form("деревянный", 7) is None
        assert schema.get_form("деревянный", FORM_COMPARATIVE) is None
        assert not schema.has_form(FORM_COMPARATIVE)

    def test_keeps_capital(self, schema):
        assert schema.get_form("Быстрый", 1) == "Быстрого"

    def test_word_shorter_than_strip(self, schema):
        assert schema.get_form("й", 1) is None


class TestSchemas:
    def test_interning(self):
        schemas = Schemas()
        schemas.begin_init()
        a = schemas.get_or_add(HARD)
        b = schemas.get_or_add(RELATIVE)
        assert schemas.get_or_add(HARD) == a
        assert a != b
        assert len(schemas) == 2
        assert schemas[a] == Schema.parse(HARD)

    def test_sealed(self):
        schemas = Schemas()
        schemas.begin_init()
        a = schemas.get_or_add(HARD)
        schemas.end_init()
        assert schemas.sealed
        assert schemas.get_or_add(HARD) == a
        with pytest.raises(RuntimeError):
            schemas.get_or_add(RELATIVE)

    def test_get_form(self):
        schemas = Schemas()
        a = schemas.get_or_add(HARD)
        assert schemas.get_form(a, "новый", 9) == "новой"
