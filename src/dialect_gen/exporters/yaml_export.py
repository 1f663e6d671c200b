"""YAML export for production mappings."""

from __future__ import annotations

import yaml


class _LiteralDumper(yaml.SafeDumper):
    pass


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_LiteralDumper.add_representer(str, _represent_str)


def export_yaml(productions: dict[str, str]) -> str:
    """Export a name -> text mapping; multi-line texts become literal blocks."""
    return yaml.dump(
        productions,
        Dumper=_LiteralDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
