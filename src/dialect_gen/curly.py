"""State machine for a single block of text surrounded by curly braces.

Braces only count when they are not inside a string, a character
literal or a comment. The inside-state is updated for the current token
before the token's effect on the brace counter is evaluated.
"""

from __future__ import annotations

import re
from enum import Enum, auto

from dialect_gen.errors import StructuralMismatchError
from dialect_gen.tokenizer import (
    BLOCK_COMMENT_END,
    BLOCK_COMMENT_START,
    CLOSE_BRACE,
    DOUBLE_QUOTE,
    LINE_COMMENT,
    NEWLINE,
    OPEN_BRACE,
    SINGLE_QUOTE,
    is_whitespace,
)

_TRAILING_BACKSLASHES = re.compile(r"\\+$")


class InsideState(Enum):
    """The structure the parser is currently inside of."""

    NONE = auto()
    STRING = auto()
    CHARACTER = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()


def _is_escaped(previous_token: str) -> bool:
    match = _TRAILING_BACKSLASHES.search(previous_token)
    return match is not None and len(match.group()) % 2 == 1


class CurlyParser:
    """Tracks brace nesting for one curly block, fed one token at a time."""

    def __init__(self) -> None:
        self.inside_state = InsideState.NONE
        self.open_brace_count = 0
        self._opened = False
        self._previous_token = ""

    @property
    def opened(self) -> bool:
        return self._opened

    @property
    def done(self) -> bool:
        return self._opened and self.open_brace_count == 0

    def parse_token(self, token: str) -> bool:
        """Consume ``token``; return True once the block has been fully closed.

        Whitespace before the opening brace is accepted. Any other token
        before it raises StructuralMismatchError.
        """
        if self.done:
            raise ValueError("Curly block is already closed")
        if not self._opened:
            if is_whitespace(token):
                return False
            if token != OPEN_BRACE:
                raise StructuralMismatchError(token)
            self._opened = True
        self._update_state(token)
        self._previous_token = token
        return self.done

    def _update_state(self, token: str) -> None:
        state = self.inside_state
        if token == NEWLINE:
            if state is InsideState.LINE_COMMENT:
                self.inside_state = InsideState.NONE
        elif token == DOUBLE_QUOTE:
            if state is InsideState.NONE:
                self.inside_state = InsideState.STRING
            elif state is InsideState.STRING and not _is_escaped(self._previous_token):
                self.inside_state = InsideState.NONE
        elif token == SINGLE_QUOTE:
            if state is InsideState.NONE:
                self.inside_state = InsideState.CHARACTER
            elif state is InsideState.CHARACTER and not _is_escaped(self._previous_token):
                self.inside_state = InsideState.NONE
        elif token == LINE_COMMENT:
            if state is InsideState.NONE:
                self.inside_state = InsideState.LINE_COMMENT
        elif token == BLOCK_COMMENT_START:
            if state is InsideState.NONE:
                self.inside_state = InsideState.BLOCK_COMMENT
        elif token == BLOCK_COMMENT_END:
            if state is InsideState.BLOCK_COMMENT:
                self.inside_state = InsideState.NONE
        elif token == OPEN_BRACE:
            if self.inside_state is InsideState.NONE:
                self.open_brace_count += 1
        elif token == CLOSE_BRACE:
            if self.inside_state is InsideState.NONE:
                self.open_brace_count -= 1
