"""Render and write the merged parserImpls file for a dialect."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from dialect_gen.config import resolve_config
from dialect_gen.logging import get_logger
from dialect_gen.models import ExtractedData, GeneratorConfig, Keyword, Production
from dialect_gen.traverser import DialectTraverser

log = get_logger(__name__)

NON_RESERVED_KEYWORD_PRODUCTION = "NonReservedKeyWord"


def read_license_text(root_directory: Path, config: GeneratorConfig) -> str:
    """Contents of the license file, or an empty string if it is missing."""
    path = Path(root_directory) / config.license_file
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.warning("license_missing", path=str(path))
        return ""


def unparse_token_assignment(table: dict[str, Keyword], token_states: str) -> str:
    """Render a keyword table as a TOKEN block; empty string for an empty table."""
    if not table:
        return ""
    header = f"{token_states} TOKEN :" if token_states else "TOKEN :"
    lines = [header, "{"]
    for i, keyword in enumerate(table.values()):
        prefix = "    " if i == 0 else "|   "
        lines.append(f"{prefix}< {keyword.name}: {keyword.value} >")
    lines.append("}")
    return "\n".join(lines)


def unparse_non_reserved_keywords(data: ExtractedData) -> Production | None:
    """Build the production matching any non-reserved keyword."""
    if not data.non_reserved_keywords:
        return None
    lines = [
        f"String {NON_RESERVED_KEYWORD_PRODUCTION}() :",
        "{",
        "}",
        "{",
        "    (",
    ]
    for i, name in enumerate(data.non_reserved_keywords):
        prefix = "        " if i == 0 else "    |   "
        lines.append(f"{prefix}<{name}>")
    lines += [
        "    )",
        "    {",
        "        return unquotedIdentifier();",
        "    }",
        "}",
    ]
    return Production(name=NON_RESERVED_KEYWORD_PRODUCTION, text="\n".join(lines))


def render_parser_impls(data: ExtractedData, license_text: str, token_states: str) -> str:
    """Assemble the parserImpls file content."""
    special = [
        unparse_token_assignment(table, token_states)
        for table in (data.keywords, data.operators, data.separators, data.identifiers)
    ]
    productions = dict(data.productions)
    non_reserved = unparse_non_reserved_keywords(data)
    if non_reserved is not None:
        productions[non_reserved.name] = non_reserved

    parts = [license_text]
    parts += [f"\n{t.text}\n" for t in data.token_assignments]
    parts += [f"\n{block}\n" for block in special if block]
    parts += [f"\n{p.text}\n" for p in productions.values()]
    return "".join(parts)


def generate_parser_impls(
    root_directory: Path,
    dialect_directory: Path,
    config: GeneratorConfig | None = None,
    output_file: str | None = None,
) -> Path:
    """Extract the dialect and write its parserImpls file. Returns the path written."""
    root_directory = Path(root_directory)
    dialect_directory = Path(dialect_directory)
    config = config or resolve_config(root_directory)
    if output_file is not None:
        config = replace(config, output_file=output_file)
    license_text = read_license_text(root_directory, config)

    traverser = DialectTraverser(
        root_directory, dialect_directory, config=config, license_text=license_text
    )
    data = traverser.extract_data()
    content = render_parser_impls(data, license_text, config.token_states)

    output_path = traverser.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    log.info("parser_impls_written", path=str(output_path))
    return output_path
