"""Tests for the shared charset catalog."""

import string

import pytest

from passpal.services.analysis.charsets import CHARSETS, SYMBOLS, classify_char


class TestCatalog:
    """Test the catalog's shape and keyspaces."""

    def test_fifteen_classes_in_canonical_order(self):
        names = [charset.name for charset in CHARSETS]
        assert names == [
            "lower",
            "upper",
            "numeric",
            "symbolic",
            "lower-upper",
            "lower-numeric",
            "lower-symbolic",
            "upper-numeric",
            "upper-symbolic",
            "numeric-symbolic",
            "lower-upper-numeric",
            "lower-upper-symbolic",
            "lower-numeric-symbolic",
            "upper-numeric-symbolic",
            "lower-upper-numeric-symbolic",
        ]

    @pytest.mark.parametrize(
        "name,keyspace",
        [
            ("lower", 26),
            ("symbolic", 33),
            ("lower-numeric", 36),
            ("lower-symbolic", 59),
            ("numeric-symbolic", 43),
            ("lower-upper-numeric", 62),
            ("lower-upper-symbolic", 85),
            ("lower-upper-numeric-symbolic", 95),
        ],
    )
    def test_keyspace_is_sum_of_primitives(self, name, keyspace):
        assert CHARSETS.get(name).keyspace == keyspace

    def test_symbols_are_ascii_punctuation_and_space(self):
        assert len(SYMBOLS) == 33
        assert set(SYMBOLS) == set(string.punctuation) | {" "}


class TestMatching:
    """Test class predicates."""

    def test_lowercase_word_matches_supersets_of_lower(self):
        matched = {charset.name for charset in CHARSETS.matching("password")}
        expected = {charset.name for charset in CHARSETS if "lower" in charset.primitives}
        assert matched == expected
        assert len(matched) == 8

    def test_mixed_word_matches_only_full_union(self):
        matched = [charset.name for charset in CHARSETS.matching("Pass 1!")]
        assert matched == ["lower-upper-numeric-symbolic"]

    def test_empty_word_matches_nothing(self):
        assert CHARSETS.matching("") == []

    def test_non_ascii_matches_nothing(self):
        assert CHARSETS.matching("pässword") == []


class TestClassifyChar:
    """Test single character classification."""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("a", "lower"),
            ("Z", "upper"),
            ("7", "numeric"),
            ("!", "symbolic"),
            (" ", "symbolic"),
            ("é", None),
            ("\t", None),
        ],
    )
    def test_classify(self, char, expected):
        assert classify_char(char) == expected
