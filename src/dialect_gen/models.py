"""Core data models for dialect-gen."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductionSignature:
    """A matched production declaration: ``<type> <name>(<args>) :``."""

    name: str
    start: int
    end: int


@dataclass(frozen=True)
class TokenAssignmentSignature:
    """A matched ``[<STATES>] TOKEN :`` header."""

    kind: str  # "TOKEN", "SKIP", "MORE", "SPECIAL_TOKEN"
    start: int
    end: int


@dataclass(frozen=True)
class Production:
    """A named production: signature plus initializer and body blocks, verbatim."""

    name: str
    text: str
    source_file: str | None = None


@dataclass(frozen=True)
class TokenAssignment:
    """A lexical token block, verbatim."""

    text: str
    source_file: str | None = None


@dataclass(frozen=True)
class Keyword:
    """A keyword table entry. Names are always upper case."""

    name: str
    value: str
    source_file: str | None = None

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValueError("Keyword name must not be None")
        object.__setattr__(self, "name", self.name.upper())


@dataclass
class FileResult:
    """Everything extracted from a single fragment file, in file order."""

    productions: list[Production] = field(default_factory=list)
    token_assignments: list[TokenAssignment] = field(default_factory=list)


@dataclass
class ExtractedData:
    """Accumulator for one dialect extraction run."""

    productions: dict[str, Production] = field(default_factory=dict)
    token_assignments: list[TokenAssignment] = field(default_factory=list)
    keywords: dict[str, Keyword] = field(default_factory=dict)
    operators: dict[str, Keyword] = field(default_factory=dict)
    separators: dict[str, Keyword] = field(default_factory=dict)
    identifiers: dict[str, Keyword] = field(default_factory=dict)
    non_reserved_keywords: dict[str, Keyword] = field(default_factory=dict)

    def production_texts(self) -> dict[str, str]:
        return {name: p.text for name, p in self.productions.items()}


@dataclass
class GeneratorConfig:
    """Configuration for a grammar root directory."""

    version: str = "0.1.0"
    fragment_extension: str = "ftl"
    output_file: str = "parserImpls.ftl"
    license_file: str = "src/resources/license.txt"
    token_states: str = "<DEFAULT, DQID, BTID>"
