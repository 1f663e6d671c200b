"""Error types for dialect extraction."""

from __future__ import annotations

from pathlib import Path


class DialectGenError(Exception):
    """Base error for dialect-gen."""

    pass


class ExtractionError(DialectGenError):
    """Fragment text could not be split into productions."""

    def __init__(
        self, message: str, source_file: str | None = None, offset: int | None = None
    ) -> None:
        location = ""
        if source_file is not None:
            location = f"{source_file}"
            if offset is not None:
                location += f" (offset {offset})"
            location += ": "
        super().__init__(f"{location}{message}")
        self.source_file = source_file
        self.offset = offset


class StructuralMismatchError(ExtractionError):
    """A curly block did not start with an opening brace."""

    def __init__(
        self, token: str | None, source_file: str | None = None, offset: int | None = None
    ) -> None:
        found = "end of file" if token is None else repr(token)
        super().__init__(
            f"First token of curly block must be a curly brace, found {found}",
            source_file=source_file,
            offset=offset,
        )
        self.token = token


class UnterminatedBlockError(ExtractionError):
    """Tokens ran out before a curly block was closed."""

    def __init__(
        self, open_braces: int, source_file: str | None = None, offset: int | None = None
    ) -> None:
        super().__init__(
            f"Curly block never closed ({open_braces} brace(s) still open at end of file)",
            source_file=source_file,
            offset=offset,
        )
        self.open_braces = open_braces


class PathResolutionError(DialectGenError):
    """The dialect directory cannot be reached from the root directory."""

    def __init__(self, message: str, root: Path, dialect: Path) -> None:
        super().__init__(f"{message} (root: {root}, dialect: {dialect})")
        self.root = root
        self.dialect = dialect


class KeywordFileError(DialectGenError):
    """A keyword table line is not a ``NAME: value`` pair."""

    def __init__(self, source_file: str, line_number: int, line: str) -> None:
        super().__init__(
            f"{source_file}:{line_number}: expected 'NAME: value', got {line!r}"
        )
        self.source_file = source_file
        self.line_number = line_number


class ConfigError(DialectGenError):
    """Configuration file is unreadable or holds invalid values."""

    pass
