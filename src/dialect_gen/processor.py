"""Extract productions from the text of one fragment file.

A production has the form::

    <return_type> <name>(<args>) :
    {
        <initializer>
    }
    {
        <body>
    }

The file is tokenized once. A single cursor moves forward through the
tokens; each header found by the matchers is captured in file order.
"""

from __future__ import annotations

from dialect_gen.curly import CurlyParser
from dialect_gen.declarations import find_declarations, find_token_assignments
from dialect_gen.errors import StructuralMismatchError, UnterminatedBlockError
from dialect_gen.logging import get_logger
from dialect_gen.models import (
    FileResult,
    Production,
    ProductionSignature,
    TokenAssignment,
    TokenAssignmentSignature,
)
from dialect_gen.tokenizer import TokenCursor

log = get_logger(__name__)


def process_file(text: str, source_file: str | None = None) -> FileResult:
    """Extract all productions and token assignments from ``text``."""
    headers: list[ProductionSignature | TokenAssignmentSignature] = [
        *find_declarations(text),
        *find_token_assignments(text),
    ]
    headers.sort(key=lambda h: h.start)

    cursor = TokenCursor(text)
    result = FileResult()
    for header in headers:
        if header.start < cursor.offset:
            # Inside the blocks of something already captured.
            log.debug(
                "signature_skipped",
                source_file=source_file,
                offset=header.start,
            )
            continue
        cursor.advance_to(header.start)
        if isinstance(header, ProductionSignature):
            result.productions.append(
                process_production(cursor, header, source_file=source_file)
            )
        else:
            result.token_assignments.append(
                process_token_assignment(cursor, header, source_file=source_file)
            )
    return result


def extract_productions(text: str, source_file: str | None = None) -> dict[str, str]:
    """Map production name to verbatim text for one file.

    A name defined twice in the same file keeps the later definition.
    """
    return {p.name: p.text for p in process_file(text, source_file).productions}


def process_production(
    cursor: TokenCursor,
    signature: ProductionSignature,
    source_file: str | None = None,
) -> Production:
    """Capture the signature and both curly blocks starting at the cursor."""
    parts = [cursor.advance_to(signature.end)]
    # Initializer block, then body block.
    parts.append(process_curly_block(cursor, source_file=source_file))
    parts.append(process_curly_block(cursor, source_file=source_file))
    return Production(name=signature.name, text="".join(parts), source_file=source_file)


def process_token_assignment(
    cursor: TokenCursor,
    header: TokenAssignmentSignature,
    source_file: str | None = None,
) -> TokenAssignment:
    parts = [cursor.advance_to(header.end)]
    parts.append(process_curly_block(cursor, source_file=source_file))
    return TokenAssignment(text="".join(parts), source_file=source_file)


def process_curly_block(cursor: TokenCursor, source_file: str | None = None) -> str:
    """Consume one curly block, including any whitespace before it."""
    parser = CurlyParser()
    parts: list[str] = []
    while True:
        offset = cursor.offset
        token = cursor.next_token()
        if token is None:
            if not parser.opened:
                raise StructuralMismatchError(None, source_file=source_file, offset=offset)
            raise UnterminatedBlockError(
                parser.open_brace_count, source_file=source_file, offset=offset
            )
        try:
            done = parser.parse_token(token)
        except StructuralMismatchError as e:
            raise StructuralMismatchError(
                e.token, source_file=source_file, offset=offset
            ) from e
        parts.append(token)
        if done:
            return "".join(parts)
