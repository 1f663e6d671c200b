"""JSON export for production mappings."""

from __future__ import annotations

import json


def export_json(productions: dict[str, str], indent: int = 2) -> str:
    """Export a name -> text mapping as a JSON object, in mapping order."""
    return json.dumps(productions, indent=indent)
