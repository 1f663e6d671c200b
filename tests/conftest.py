"""Shared test fixtures for dialect-gen."""

import logging
from pathlib import Path

import pytest
import structlog

BASE_FTL = """\
<#-- Base productions shared by every dialect. -->
SqlNode SqlStatement() :
{
    SqlNode stmt;
}
{
    { return parseGeneric(); }
}

SqlNode SqlSelect(Span s) :
{
    final String marker = "{";
}
{
    <SELECT> { return parseSelect(s); }
}
"""

MYSQL_FTL = """\
SqlNode SqlStatement() :
{
}
{
    { return parseMysqlSpecific(); }
}

void ShowDatabases() :
{
    // no locals }
}
{
    <SHOW> <DATABASES>
}
"""


@pytest.fixture(autouse=True)
def _reset_logging():
    """Keep structlog and stdlib logging configuration local to each test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


@pytest.fixture
def write_file():
    """Write text to a path, creating parent directories."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def grammar_tree(tmp_path: Path, write_file) -> Path:
    """A root grammar directory with one intermediate level and two dialects.

    Layout::

        parsing/
            base.ftl
            keywords.txt
            intermediate/
                shared.ftl
                dialects/
                    mysql/mysql.ftl
                    postgres/postgres.ftl
    """
    root = tmp_path / "parsing"
    write_file(root / "base.ftl", BASE_FTL)
    write_file(root / "keywords.txt", "select: \"SELECT\"\nshow: \"SHOW\"\n")
    write_file(root / "README.md", "SqlNode NotAProduction() :\n{\n}\n{\n}\n")
    write_file(
        root / "intermediate" / "shared.ftl",
        "SqlNode SqlSelect(Span s) :\n{\n}\n{\n    <SELECT> { return parseSharedSelect(s); }\n}\n",
    )
    write_file(root / "intermediate" / "dialects" / "mysql" / "mysql.ftl", MYSQL_FTL)
    write_file(
        root / "intermediate" / "dialects" / "postgres" / "postgres.ftl",
        "void Vacuum() :\n{\n}\n{\n    <VACUUM>\n}\n",
    )
    return root


@pytest.fixture
def mysql_dialect(grammar_tree: Path) -> Path:
    return grammar_tree / "intermediate" / "dialects" / "mysql"
