"""Lossless tokenizer for fragment file text.

Delimiters are emitted as their own tokens:
    whitespace  one token per character (space, newline, tab, ...)
    quotes      ``"`` and ``'``
    comments    ``//``, ``/*`` and ``*/``
    braces      ``{`` and ``}``

Every other run of characters becomes a single token, so joining the
tokens back together always reproduces the input.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

DELIMITERS = r"//|/\*|\*/|\s|\"|'|\{|\}"

TOKEN_PATTERN = re.compile(rf"{DELIMITERS}|(?:(?!{DELIMITERS}).)+", re.DOTALL | re.ASCII)

SPACE = " "
NEWLINE = "\n"
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"
LINE_COMMENT = "//"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"


def tokenize(text: str) -> Iterator[str]:
    """Yield the tokens of ``text`` in order."""
    for match in TOKEN_PATTERN.finditer(text):
        yield match.group()


def is_whitespace(token: str) -> bool:
    return token.isascii() and token.isspace()


class TokenCursor:
    """Forward-only cursor over the tokens of one file.

    Tracks the character offset of the next unread token. A token that
    straddles a requested offset is split there; the remainder is served
    as the next token.
    """

    def __init__(self, text: str) -> None:
        self._tokens = tokenize(text)
        self._pending: str | None = None
        self.offset = 0

    def peek(self) -> str | None:
        """Return the next token without consuming it (None at end of file)."""
        if self._pending is None:
            self._pending = next(self._tokens, None)
        return self._pending

    def next_token(self) -> str | None:
        """Consume and return the next token (None at end of file)."""
        token = self.peek()
        self._pending = None
        if token is not None:
            self.offset += len(token)
        return token

    def advance_to(self, target: int) -> str:
        """Consume tokens up to ``target`` and return the consumed text.

        Returns an empty string when the cursor is already at or past
        ``target``.
        """
        consumed: list[str] = []
        while self.offset < target:
            token = self.peek()
            if token is None:
                break
            if self.offset + len(token) > target:
                head = token[: target - self.offset]
                self._pending = token[len(head):]
                self.offset += len(head)
                consumed.append(head)
                break
            consumed.append(token)
            self.next_token()
        return "".join(consumed)
