"""Walk the grammar hierarchy from the root directory down to one dialect.

Only the directories on the path from root to dialect are visited. In
each one, files are processed before descending into the next directory
on the path, so definitions closer to the dialect override those of its
ancestors.
"""

from __future__ import annotations

from collections import deque
from pathlib import Path

import structlog

from dialect_gen.errors import ExtractionError, PathResolutionError
from dialect_gen.keywords import (
    KEYWORD_FILES,
    process_keyword_file,
    validate_non_reserved_keywords,
)
from dialect_gen.logging import get_logger
from dialect_gen.models import ExtractedData, GeneratorConfig
from dialect_gen.processor import process_file

log = get_logger(__name__)


def traversal_path(root_directory: Path, dialect_directory: Path) -> list[str]:
    """Path segments leading from the root directory to the dialect directory.

    Empty when both are the same directory.
    """
    root = root_directory.resolve()
    dialect = dialect_directory.resolve()
    if not root.is_dir():
        raise PathResolutionError("Root directory does not exist", root, dialect)
    try:
        relative = dialect.relative_to(root)
    except ValueError:
        raise PathResolutionError(
            "Dialect directory is not inside the root directory", root, dialect
        ) from None
    return list(relative.parts)


def _sort_key(path: Path) -> tuple[bool, str]:
    # Files first, then directories; by name within each group.
    return (path.is_dir(), path.name)


class DialectTraverser:
    """Extracts the merged productions of one dialect."""

    def __init__(
        self,
        root_directory: Path,
        dialect_directory: Path,
        config: GeneratorConfig | None = None,
        license_text: str = "",
    ) -> None:
        self.root_directory = Path(root_directory).resolve()
        self.dialect_directory = Path(dialect_directory).resolve()
        self.config = config or GeneratorConfig()
        self.license_text = license_text

    @property
    def output_path(self) -> Path:
        return self.dialect_directory / self.config.output_file

    def is_generated_output(self, path: Path) -> bool:
        """True if ``path`` is the output file of any dialect on the walked chain."""
        for directory in path.parents:
            if directory / self.config.output_file == path:
                return True
            if directory == self.root_directory:
                break
        return False

    def extract_productions(self) -> dict[str, str]:
        """Map production name to verbatim text for the dialect."""
        return self.extract_data().production_texts()

    def extract_data(self) -> ExtractedData:
        """Walk root to dialect and return everything extracted on the way."""
        segments = deque(traversal_path(self.root_directory, self.dialect_directory))
        data = ExtractedData()
        with structlog.contextvars.bound_contextvars(dialect="/".join(segments) or "."):
            self._traverse(segments, self.root_directory, data)
            for name in validate_non_reserved_keywords(data):
                log.warning("non_reserved_keyword_undefined", keyword=name)
            log.info(
                "dialect_extracted",
                productions=len(data.productions),
                token_assignments=len(data.token_assignments),
            )
        return data

    def _traverse(self, segments: deque[str], directory: Path, data: ExtractedData) -> None:
        log.debug("directory_entered", directory=str(directory))
        next_directory = segments[0] if segments else None
        descended = False
        for entry in sorted(directory.iterdir(), key=_sort_key):
            if entry.is_file():
                self._process_entry(entry, data)
            elif entry.is_dir() and not descended and entry.name == next_directory:
                segments.popleft()
                descended = True
                self._traverse(segments, entry, data)
        if next_directory is not None and not descended:
            raise PathResolutionError(
                f"Directory '{next_directory}' not found in {directory}",
                self.root_directory,
                self.dialect_directory,
            )

    def _relative_path(self, path: Path) -> str:
        return path.relative_to(self.root_directory.parent).as_posix()

    def _process_entry(self, path: Path, data: ExtractedData) -> None:
        if self.is_generated_output(path):
            # Output of a previous generation run, here or for an ancestor dialect.
            log.debug("generated_output_skipped", path=str(path))
            return
        if path.suffix == f".{self.config.fragment_extension}":
            self._process_fragment(path, data)
        elif path.name in KEYWORD_FILES:
            process_keyword_file(
                path.name,
                path.read_text(encoding="utf-8"),
                data,
                source_file=self._relative_path(path),
                license_text=self.license_text,
            )

    def _process_fragment(self, path: Path, data: ExtractedData) -> None:
        source_file = self._relative_path(path)
        text = path.read_text(encoding="utf-8")
        try:
            result = process_file(text, source_file=source_file)
        except ExtractionError:
            log.error("fragment_failed", source_file=source_file)
            raise
        for production in result.productions:
            previous = data.productions.get(production.name)
            if previous is not None:
                log.debug(
                    "production_overridden",
                    name=production.name,
                    previous=previous.source_file,
                    source_file=source_file,
                )
            data.productions[production.name] = production
        data.token_assignments.extend(result.token_assignments)
        log.debug(
            "fragment_processed",
            source_file=source_file,
            productions=len(result.productions),
        )


def extract_productions(
    root_directory: Path,
    dialect_directory: Path,
    config: GeneratorConfig | None = None,
) -> dict[str, str]:
    """Merged productions of ``dialect_directory``, inherited from ``root_directory``."""
    return DialectTraverser(root_directory, dialect_directory, config).extract_productions()
