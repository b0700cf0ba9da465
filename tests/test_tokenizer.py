"""
Tests for tokenizer.py module.

Tests cover:
- Splitting on each delimiter character
- Runs of delimiters and leading/trailing delimiters
- Absence of quoting semantics
"""

import pytest
from lsh_shell.tokenizer import TOKEN_DELIMITERS, split_line


class TestSplitLine:
    """Tests for split_line()."""

    def test_simple_command(self):
        """Test splitting a command with arguments."""
        assert split_line("ls -l /tmp") == ["ls", "-l", "/tmp"]

    def test_empty_line(self):
        """Test empty input yields an empty vector."""
        assert split_line("") == []

    @pytest.mark.parametrize("line", [" ", "\t", " \t\r\n\a ", "\a\a"])
    def test_whitespace_only_line(self, line):
        """Test delimiter-only input yields an empty vector."""
        assert split_line(line) == []

    def test_extra_spaces_are_collapsed(self):
        """Test padded input splits the same as tight input."""
        assert split_line("a b") == ["a", "b"]
        assert split_line("  a   b  ") == ["a", "b"]

    @pytest.mark.parametrize("delimiter", list(TOKEN_DELIMITERS))
    def test_each_delimiter_splits(self, delimiter):
        """Test every delimiter character separates tokens."""
        assert split_line(f"echo{delimiter}hi") == ["echo", "hi"]

    def test_mixed_delimiters(self):
        """Test a run of different delimiters counts as one separator."""
        assert split_line("echo \t\r\a hi\n") == ["echo", "hi"]

    def test_other_whitespace_is_not_a_delimiter(self):
        """Test vertical tab and form feed stay inside tokens."""
        assert split_line("a\vb c\fd") == ["a\vb", "c\fd"]

    def test_quotes_are_ordinary_characters(self):
        """Test quoted phrases are split like any other text."""
        assert split_line('echo "hello world"') == ["echo", '"hello', 'world"']

    def test_single_token(self):
        """Test a bare command name."""
        assert split_line("help") == ["help"]

    def test_many_arguments(self):
        """Test the vector has no fixed upper bound."""
        words = [f"arg{i}" for i in range(500)]
        assert split_line(" ".join(words)) == words

    def test_returns_new_list(self):
        """Test each call returns an independent vector."""
        first = split_line("a b")
        first.append("c")
        assert split_line("a b") == ["a", "b"]

    def test_custom_delimiters(self):
        """Test the delimiter set can be overridden."""
        assert split_line("a:b::c", delimiters=":") == ["a", "b", "c"]
