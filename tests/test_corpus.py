"""Tests for corpus reading."""

import pytest

from passpal.core.exceptions import CorpusError
from passpal.services.pipeline.corpus import CorpusReader, strip_terminator, text_lines


class TestStripTerminator:
    """Test line terminator handling."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("abc\n", "abc"),
            ("abc\r\n", "abc"),
            ("abc\r", "abc"),
            ("abc", "abc"),
            ("abc \n", "abc "),
            ("\n", ""),
        ],
    )
    def test_strip(self, line, expected):
        assert strip_terminator(line) == expected

    def test_text_lines(self):
        assert list(text_lines("a\r\nb\n\nc")) == ["a", "b", "", "c"]
        assert list(text_lines("")) == []

    def test_text_lines_keep_lone_carriage_return(self):
        assert list(text_lines("pass\rword\nabc\r\r\n")) == ["pass\rword", "abc\r"]


class TestCorpusReader:
    """Test streaming a word list from disk."""

    def test_reads_lines(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_bytes(b"password\r\n123456\nPass 1!\n")

        assert list(CorpusReader(path)) == ["password", "123456", "Pass 1!"]

    def test_lone_carriage_return_does_not_split(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_bytes(b"pass\rword\nabc\r\r\n")

        assert list(CorpusReader(path)) == ["pass\rword", "abc\r"]

    def test_utf8(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("café\nnaïve\n", encoding="utf-8")
        assert list(CorpusReader(path)) == ["café", "naïve"]

    def test_progress_reports_bytes(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("café\nabc\n", encoding="utf-8")
        seen = []

        list(CorpusReader(path).lines(progress=seen.append))

        assert sum(seen) == path.stat().st_size

    def test_missing_file(self, tmp_path):
        reader = CorpusReader(tmp_path / "missing.txt")
        with pytest.raises(CorpusError):
            reader.check()
        with pytest.raises(CorpusError):
            list(reader)

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_bytes(b"good\n\xff\xfebad\n")
        with pytest.raises(CorpusError):
            list(CorpusReader(path))
