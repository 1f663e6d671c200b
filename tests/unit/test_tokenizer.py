"""Unit tests for dialect_gen.tokenizer."""

import pytest

from dialect_gen.tokenizer import TokenCursor, is_whitespace, tokenize


# ── tokenize ─────────────────────────────────────────────────────────


class TestTokenize:
    def test_empty_input(self) -> None:
        assert list(tokenize("")) == []

    def test_identifiers_and_spaces(self) -> None:
        assert list(tokenize("void foo")) == ["void", " ", "foo"]

    def test_each_whitespace_character_is_a_token(self) -> None:
        assert list(tokenize("a  \n\tb")) == ["a", " ", " ", "\n", "\t", "b"]

    def test_braces_split_out(self) -> None:
        assert list(tokenize("{x}")) == ["{", "x", "}"]

    def test_quotes_split_out(self) -> None:
        assert list(tokenize("\"abc\"'d'")) == ['"', "abc", '"', "'", "d", "'"]

    def test_comment_delimiters(self) -> None:
        assert list(tokenize("a//b/*c*/d")) == ["a", "//", "b", "/*", "c", "*/", "d"]

    def test_lone_slash_and_star_are_text(self) -> None:
        assert list(tokenize("a/b*c")) == ["a/b*c"]

    def test_block_comment_start_preferred_over_slash(self) -> None:
        assert list(tokenize("x/*")) == ["x", "/*"]

    def test_parentheses_are_not_delimiters(self) -> None:
        assert list(tokenize("foo(int x) :")) == ["foo(int", " ", "x)", " ", ":"]

    def test_is_lazy(self) -> None:
        tokens = tokenize("a b")
        assert next(tokens) == "a"

    def test_restartable(self) -> None:
        text = "int x(int y) :\n{ }"
        assert list(tokenize(text)) == list(tokenize(text))

    @pytest.mark.parametrize(
        "text",
        [
            "int foo(int x) :\n{\n  a;\n}\n{\n  b;\n}",
            "{ \"}\" '{' // }\n /* { */ }",
            "a*/b//c/*/d",
            "\r\n\t  x  y\n",
            "<#-- template comment --> ${name}",
        ],
    )
    def test_lossless(self, text: str) -> None:
        assert "".join(tokenize(text)) == text


# ── TokenCursor ──────────────────────────────────────────────────────


class TestTokenCursor:
    def test_next_token_tracks_offset(self) -> None:
        cursor = TokenCursor("ab {")
        assert cursor.next_token() == "ab"
        assert cursor.offset == 2
        assert cursor.next_token() == " "
        assert cursor.next_token() == "{"
        assert cursor.offset == 4
        assert cursor.next_token() is None

    def test_peek_does_not_consume(self) -> None:
        cursor = TokenCursor("a b")
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.offset == 0

    def test_advance_to_token_boundary(self) -> None:
        cursor = TokenCursor("foo bar baz")
        assert cursor.advance_to(4) == "foo "
        assert cursor.offset == 4
        assert cursor.next_token() == "bar"

    def test_advance_splits_straddling_token(self) -> None:
        cursor = TokenCursor(".foo bar")
        assert cursor.advance_to(1) == "."
        assert cursor.next_token() == "foo"
        assert cursor.offset == 4

    def test_advance_behind_cursor_is_noop(self) -> None:
        cursor = TokenCursor("foo bar")
        cursor.advance_to(4)
        assert cursor.advance_to(2) == ""
        assert cursor.offset == 4

    def test_advance_past_end(self) -> None:
        cursor = TokenCursor("ab")
        assert cursor.advance_to(10) == "ab"
        assert cursor.peek() is None


# ── ASCII delimiters ─────────────────────────────────────────────────


class TestAsciiWhitespace:
    def test_non_breaking_space_is_text(self) -> None:
        assert list(tokenize("a\u00a0b c")) == ["a\u00a0b", " ", "c"]

    def test_is_whitespace_ascii_only(self) -> None:
        assert is_whitespace("\t")
        assert not is_whitespace("\u00a0")
