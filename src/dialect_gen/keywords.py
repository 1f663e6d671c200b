"""Keyword tables declared in ``*.txt`` files of the grammar hierarchy."""

from __future__ import annotations

from dialect_gen.errors import KeywordFileError
from dialect_gen.models import ExtractedData, Keyword

NON_RESERVED_KEYWORDS_FILE = "nonReservedKeywords.txt"

# File name -> ExtractedData attribute holding the table.
KEY_VALUE_FILES = {
    "keywords.txt": "keywords",
    "operators.txt": "operators",
    "separators.txt": "separators",
    "identifiers.txt": "identifiers",
}

KEYWORD_FILES = frozenset({NON_RESERVED_KEYWORDS_FILE, *KEY_VALUE_FILES})


def strip_license(text: str, license_text: str) -> str:
    if license_text and text.startswith(license_text):
        return text[len(license_text):]
    return text


def parse_key_value_pairs(text: str, source_file: str) -> dict[str, Keyword]:
    """Parse ``NAME: value`` lines. Blank lines are skipped."""
    table: dict[str, Keyword] = {}
    for line_number, raw in enumerate(text.split("\n"), 1):
        line = raw.strip()
        if not line:
            continue
        if ":" not in line:
            raise KeywordFileError(source_file, line_number, line)
        key, value = line.split(":", 1)
        keyword = Keyword(name=key.strip(), value=value.strip(), source_file=source_file)
        table[keyword.name] = keyword
    return table


def parse_non_reserved_keywords(text: str, source_file: str) -> dict[str, Keyword]:
    """Parse one keyword per line. Blank lines are skipped."""
    table: dict[str, Keyword] = {}
    for raw in text.split("\n"):
        line = raw.strip()
        if line:
            keyword = Keyword(name=line, value=line, source_file=source_file)
            table[keyword.name] = keyword
    return table


def add_or_replace_entries(main: dict[str, Keyword], other: dict[str, Keyword]) -> None:
    """Merge ``other`` into ``main``; an overridden entry moves to the end."""
    for name, keyword in other.items():
        main.pop(name, None)
        main[name] = keyword


def process_keyword_file(
    file_name: str, text: str, data: ExtractedData, source_file: str, license_text: str = ""
) -> None:
    """Merge one keyword table file into ``data``."""
    text = strip_license(text, license_text)
    if file_name == NON_RESERVED_KEYWORDS_FILE:
        add_or_replace_entries(
            data.non_reserved_keywords, parse_non_reserved_keywords(text, source_file)
        )
        return
    attribute = KEY_VALUE_FILES.get(file_name)
    if attribute is None:
        raise ValueError(f"Not a keyword table file: {file_name}")
    add_or_replace_entries(getattr(data, attribute), parse_key_value_pairs(text, source_file))


def validate_non_reserved_keywords(data: ExtractedData) -> list[str]:
    """Return the non-reserved keywords missing from the keywords table."""
    return [name for name in data.non_reserved_keywords if name not in data.keywords]
