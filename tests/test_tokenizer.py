"""
Unit tests for the lossless tokenizer.
"""

import pytest

from termedit.exceptions import LexError
from termedit.parser import TokenKind, tokenize, tokenize_all


def kinds(text):
    return [token.kind for token in tokenize_all(text)[1:]]


class TestTokenize:
    """Test rule order, positions and losslessness."""

    def test_root_token_first(self):
        """Token 0 is the synthetic root with empty content."""
        tokens = tokenize_all("{a, 1}.")
        assert tokens[0].kind is TokenKind.ROOT
        assert tokens[0].content == ""
        assert [token.id for token in tokens] == list(range(len(tokens)))

    def test_round_trip(self, sample_text):
        """Concatenated contents reproduce the input exactly."""
        assert "".join(token.content for token in tokenize(sample_text)) == sample_text

    def test_round_trip_crlf_and_tabs(self):
        """Carriage returns and tabs are kept inside space tokens."""
        text = "{a,\t[\r\n\t{b, 1}\r\n]}.\r\n"
        assert "".join(token.content for token in tokenize(text)) == text

    def test_literal_kinds(self):
        """Bare atoms, quoted atoms, numbers and strings are told apart."""
        assert kinds("{name, 'quoted-atom', -1.5e3, \"text\"}") == [
            TokenKind.BEGIN_TUPLE,
            TokenKind.ATOM,
            TokenKind.COMMA,
            TokenKind.SPACE,
            TokenKind.ATOM,
            TokenKind.COMMA,
            TokenKind.SPACE,
            TokenKind.NUM,
            TokenKind.COMMA,
            TokenKind.SPACE,
            TokenKind.TEXT,
            TokenKind.END_TUPLE,
        ]

    def test_atom_allows_at_and_digits(self):
        tokens = tokenize_all("node1@host_a")
        assert len(tokens) == 2
        assert tokens[1].kind is TokenKind.ATOM

    def test_comment_runs_to_end_of_line(self):
        tokens = tokenize_all("% note, with {braces}\n{a}.")
        assert tokens[1].kind is TokenKind.COMMENT
        assert tokens[1].content == "% note, with {braces}"
        assert tokens[2].kind is TokenKind.NEWLINE

    def test_end_root_is_not_a_number(self):
        """A lone '.' after a closing brace terminates the statement."""
        assert kinds("{a, 1}.")[-1] is TokenKind.END_ROOT

    def test_line_numbers(self):
        """Line counter advances on newlines, including those inside strings."""
        tokens = tokenize_all('{a, "two\nlines"}.\n{b}.')
        b_token = [token for token in tokens if token.content == "b"][0]
        assert b_token.line == 3

    def test_offsets(self):
        tokens = tokenize_all("{ab, 12}")
        number = tokens[-2]
        assert number.content == "12"
        assert number.offset == 5
        assert number.length == 2

    def test_tokenize_is_lazy(self):
        """Tokens before a bad character are produced before the error."""
        stream = tokenize("{a, $}.")
        produced = [next(stream) for _ in range(5)]
        assert produced[-1].kind is TokenKind.SPACE
        with pytest.raises(LexError):
            list(stream)


class TestLexError:
    """Test error reporting for unrecognized input."""

    def test_unrecognized_character(self):
        with pytest.raises(LexError) as exc_info:
            tokenize_all("{a, 1}.\n{b, $oops}.")
        assert exc_info.value.line == 2
        assert exc_info.value.snippet.startswith("$oops")

    def test_snippet_is_truncated(self):
        with pytest.raises(LexError) as exc_info:
            tokenize_all("#" * 100)
        assert len(exc_info.value.snippet) == 30

    def test_uppercase_bare_word_is_rejected(self):
        """Bare atoms must start lower-case."""
        with pytest.raises(LexError):
            tokenize_all("{Var}.")
