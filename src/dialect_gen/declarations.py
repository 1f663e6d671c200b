"""Locate production and token-assignment headers in fragment text."""

from __future__ import annotations

import re

from dialect_gen.models import ProductionSignature, TokenAssignmentSignature

_TYPE_AND_NAME = r"\w+\s+\w+"

# <return_type> <name>(<type> <arg>, ...) :
DECLARATION_PATTERN = re.compile(
    rf"{_TYPE_AND_NAME}\s*\(\s*(?:{_TYPE_AND_NAME}\s*(?:,\s*{_TYPE_AND_NAME}\s*)*)?\)\s*:\n?",
    re.ASCII,
)

# [<STATE, ...> | <*>] TOKEN :
TOKEN_ASSIGNMENT_PATTERN = re.compile(
    r"(?:<\s*(?:\*|\w+(?:\s*,\s*\w+)*)\s*>\s*)?"
    r"\b(?P<kind>SPECIAL_TOKEN|TOKEN|SKIP|MORE)\s*:\n?",
    re.ASCII,
)

NAME_PATTERN = re.compile(r"\w+", re.ASCII)


def find_declarations(text: str) -> list[ProductionSignature]:
    """Return every production signature in ``text``, in file order."""
    return [
        ProductionSignature(
            name=get_production_name(m.group()), start=m.start(), end=m.end()
        )
        for m in DECLARATION_PATTERN.finditer(text)
    ]


def get_production_name(declaration: str) -> str:
    """The name is the second identifier; the first is the return type."""
    names = NAME_PATTERN.findall(declaration)
    if len(names) < 2:
        raise ValueError(f"Not a production declaration: {declaration!r}")
    return names[1]


def find_token_assignments(text: str) -> list[TokenAssignmentSignature]:
    """Return every ``TOKEN``/``SKIP``/``MORE``/``SPECIAL_TOKEN`` header."""
    return [
        TokenAssignmentSignature(kind=m.group("kind"), start=m.start(), end=m.end())
        for m in TOKEN_ASSIGNMENT_PATTERN.finditer(text)
    ]
