"""Serializers for extracted production mappings."""

from dialect_gen.exporters.json_export import export_json
from dialect_gen.exporters.yaml_export import export_yaml

__all__ = ["export_json", "export_yaml"]
