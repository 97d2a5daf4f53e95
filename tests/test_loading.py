"""
Tests for loading.py - reading dictionary files.
"""

import gzip

import pytest

from slovoform.loading import LexiconFormatError, iter_records, parse_record
from slovoform.settings import DEFAULT_ADJECTIVES_PATH, DEFAULT_ADVERBS_PATH


class TestParseRecord:
    def test_two_fields(self):
        assert parse_record("новый\t2|ый\n") == ("новый", "2|ый")

    def test_empty_descriptor(self):
        assert parse_record("вчера\t") == ("вчера", "")

    def test_crlf(self):
        assert parse_record("новый\t2|ый\r\n") == ("новый", "2|ый")

    @pytest.mark.parametrize("line", [
        "новый",
        "новый\t2|ый\textra",
        "\t2|ый",
    ])
    def test_malformed(self, line):
        with pytest.raises(LexiconFormatError):
            parse_record(line, 7)

    def test_error_location(self):
        with pytest.raises(LexiconFormatError) as exc_info:
            parse_record("новый", 7, "dict.tsv")
        assert exc_info.value.line_no == 7
        assert exc_info.value.path == "dict.tsv"
        assert "dict.tsv:7" in str(exc_info.value)


class TestIterRecords:
    def test_plain_file(self, tmp_path):
        path = tmp_path / "adj.tsv"
        path.write_text("новый\t2|ый\n\nсиний\t2|ий\n", encoding="utf-8")
        assert list(iter_records(path)) == [("новый", "2|ый"), ("синий", "2|ий")]

    def test_gzip_cp1251(self, tmp_path):
        path = tmp_path / "adj.tsv.gz"
        with gzip.open(path, "wt", encoding="cp1251") as f:
            f.write("новый\t2|ый\nсиний\t2|ий\n")
        assert list(iter_records(path, encoding="cp1251")) == [("новый", "2|ый"), ("синий", "2|ий")]

    def test_malformed_line_reports_line_number(self, tmp_path):
        path = tmp_path / "adj.tsv"
        path.write_text("новый\t2|ый\nсиний\n", encoding="utf-8")
        with pytest.raises(LexiconFormatError) as exc_info:
            list(iter_records(path))
        assert exc_info.value.line_no == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(iter_records(tmp_path / "missing.tsv"))

    def test_lazy(self, tmp_path):
        path = tmp_path / "adj.tsv"
        path.write_text("новый\t2|ый\nсиний\n", encoding="utf-8")
        records = iter_records(path)
        assert next(records) == ("новый", "2|ый")
        with pytest.raises(LexiconFormatError):
            next(records)

    def test_bundled_dictionaries(self):
        assert len(list(iter_records(DEFAULT_ADJECTIVES_PATH))) > 0
        assert len(list(iter_records(DEFAULT_ADVERBS_PATH))) > 0
