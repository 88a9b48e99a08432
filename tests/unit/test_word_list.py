"""Tests for word list loading and parsing."""

import pytest
from passforge.domain.errors import RankParseError, WordListError, WordListIOError
from passforge.domain.models import BuiltinWordSource, ExternalWordSource
from passforge.services.word_list import (
    load_word_list,
    parse_line,
    parse_rank,
    parse_word_list,
)


class TestParseLine:
    """Tests for single-line parsing."""
    
    @pytest.mark.parametrize("line,expected", [
        ("apple", "apple"),
        ("  apple  \n", "apple"),
        ("11111 apple", "apple"),
        ("42\tapple", "apple"),
        ("-7 apple", "apple"),
        ("12345", "12345"),
        ("Apple", "Apple"),
    ])
    def test_valid_lines(self, line, expected):
        """Test that one-token and '<rank> <word>' lines yield a word."""
        assert parse_line(line) == expected
    
    @pytest.mark.parametrize("line", [
        "",
        "   ",
        "\n",
        "abc apple",
        "1.5 apple",
        "1 2 3",
        "11111 apple pie",
    ])
    def test_malformed_lines_are_skipped(self, line):
        """Test that malformed lines yield None."""
        assert parse_line(line) is None


class TestParseRank:
    """Tests for rank token parsing."""
    
    def test_integer_rank(self):
        """Test that integer tokens parse."""
        assert parse_rank("11111") == 11111
    
    def test_non_integer_rank_raises(self):
        """Test that non-integer tokens raise RankParseError."""
        with pytest.raises(RankParseError, match="Invalid rank token"):
            parse_rank("abc")
    
    def test_negative_rank(self):
        """Test that a leading minus sign is accepted."""
        assert parse_rank("-7") == -7
    
    @pytest.mark.parametrize("token", ["+5", "1_000", "\u0663", "", "-", "1.5", " 1"])
    def test_non_ascii_digit_forms_rejected(self, token):
        """Test that only an optional minus and ASCII digits form a rank."""
        with pytest.raises(RankParseError):
            parse_rank(token)
    
    @pytest.mark.parametrize("line", ["+5 apple", "1_000 apple", "\u0663 apple"])
    def test_lines_with_lenient_ranks_skipped(self, line):
        """Test that lines whose rank only int() would accept are dropped."""
        assert parse_line(line) is None


class TestParseWordList:
    """Tests for parsing whole word lists."""
    
    def test_mixed_input(self):
        """Test that valid lines are kept in order and malformed ones dropped."""
        lines = [
            "11111 alpha",
            " bravo",
            "notanumber charlie",
            "1 2 3",
            "",
            "22222\tdelta",
        ]
        assert parse_word_list(lines) == ["alpha", "bravo", "delta"]
    
    def test_bad_rank_skips_line_not_load(self):
        """Test that a rank parse failure drops only that line."""
        words = parse_word_list(["x1 alpha", "2 bravo"])
        assert words == ["bravo"]
    
    def test_duplicates_are_kept(self):
        """Test that no deduplication happens."""
        assert parse_word_list(["same", "1 same"]) == ["same", "same"]
    
    def test_case_is_preserved(self):
        """Test that no case normalization happens."""
        assert parse_word_list(["Alpha", "BRAVO"]) == ["Alpha", "BRAVO"]
    
    def test_empty_input_raises(self):
        """Test that no lines at all is a WordListError."""
        with pytest.raises(WordListError, match="empty or invalid"):
            parse_word_list([])
    
    def test_only_malformed_lines_raises(self):
        """Test that a list with no usable lines is a WordListError."""
        with pytest.raises(WordListError):
            parse_word_list(["a b c", "x y", ""])


class TestLoadWordList:
    """Tests for loading from builtin and external sources."""
    
    def test_builtin_list_loads(self):
        """Test that the bundled list holds several thousand words."""
        words = load_word_list(BuiltinWordSource())
        assert len(words) > 3000
    
    def test_builtin_words_are_distinct_lowercase(self):
        """Test that the bundled list is deduplicated plain lowercase words."""
        words = load_word_list(BuiltinWordSource())
        assert len(set(words)) == len(words)
        assert all(word.isalpha() and word.islower() for word in words)
    
    def test_external_list_loads(self, small_word_list):
        """Test loading a '<rank> <word>' file."""
        words = load_word_list(ExternalWordSource(path=small_word_list))
        assert words == ["alpha", "bravo", "charlie", "delta", "echo"]
    
    def test_external_plain_list_loads(self, tmp_path):
        """Test loading a one-word-per-line file."""
        path = tmp_path / "plain.txt"
        path.write_text("one\ntwo\nthree\n", encoding="utf-8")
        assert load_word_list(ExternalWordSource(path=path)) == ["one", "two", "three"]
    
    def test_missing_file_raises_io_error(self, tmp_path):
        """Test that a nonexistent path fails instead of falling back to builtin."""
        source = ExternalWordSource(path=tmp_path / "missing.txt")
        with pytest.raises(WordListIOError, match="Cannot read word list"):
            load_word_list(source)
    
    def test_io_error_is_chained(self, tmp_path):
        """Test that the original OSError is preserved as the cause."""
        source = ExternalWordSource(path=tmp_path / "missing.txt")
        with pytest.raises(WordListIOError) as exc_info:
            load_word_list(source)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    
    def test_directory_path_raises_io_error(self, tmp_path):
        """Test that a directory cannot be loaded as a word list."""
        with pytest.raises(WordListIOError):
            load_word_list(ExternalWordSource(path=tmp_path))
    
    def test_empty_file_raises(self, tmp_path):
        """Test that an empty file is a WordListError, not an IO error."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(WordListError) as exc_info:
            load_word_list(ExternalWordSource(path=path))
        assert not isinstance(exc_info.value, WordListIOError)
    
    def test_undecodable_file_raises(self, tmp_path):
        """Test that non-UTF-8 content is reported as a WordListError."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa\n\x80word\n")
        with pytest.raises(WordListError, match="not valid UTF-8"):
            load_word_list(ExternalWordSource(path=path))
