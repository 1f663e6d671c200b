"""Configuration management for grammar root directories."""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from pathlib import Path

from dialect_gen.errors import ConfigError
from dialect_gen.models import GeneratorConfig

DIALECT_GEN_DIR = ".dialect-gen"
CONFIG_FILE = "config.json"


def _config_path(root_directory: Path) -> Path:
    return root_directory / DIALECT_GEN_DIR / CONFIG_FILE


def save_config(config: GeneratorConfig, root_directory: Path) -> Path:
    """Save config to .dialect-gen/config.json. Returns the config path."""
    validate_config(config)
    config_dir = root_directory / DIALECT_GEN_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    path = _config_path(root_directory)
    path.write_text(json.dumps(asdict(config), indent=2) + "\n")
    return path


def load_config(root_directory: Path) -> GeneratorConfig:
    """Load config from .dialect-gen/config.json."""
    path = _config_path(root_directory)
    if not path.exists():
        raise FileNotFoundError(f"No config found at {path}")
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse config at {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config at {path} must be a JSON object")

    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    defaults = GeneratorConfig()
    config = GeneratorConfig(
        version=data.get("version", defaults.version),
        fragment_extension=data.get("fragment_extension", defaults.fragment_extension),
        output_file=data.get("output_file", defaults.output_file),
        license_file=data.get("license_file", defaults.license_file),
        token_states=data.get("token_states", defaults.token_states),
    )
    validate_config(config)
    return config


def validate_config(config: GeneratorConfig) -> None:
    """Raise ConfigError if any field holds an unusable value."""
    for f in fields(GeneratorConfig):
        value = getattr(config, f.name)
        if not isinstance(value, str):
            raise ConfigError(f"Invalid value for '{f.name}': expected a string, got {value!r}")
    extension = config.fragment_extension
    if not extension or extension.startswith(".") or "/" in extension:
        raise ConfigError(
            f"Invalid value for 'fragment_extension': {extension!r} "
            "(use a bare extension such as 'ftl')"
        )
    if not config.output_file:
        raise ConfigError("Invalid value for 'output_file': must not be empty")


def is_initialized(root_directory: Path) -> bool:
    """Check if the grammar root has a config file."""
    return _config_path(root_directory).exists()


def resolve_config(root_directory: Path) -> GeneratorConfig:
    """Load the root's config, falling back to defaults when there is none."""
    if not is_initialized(root_directory):
        return GeneratorConfig()
    return load_config(root_directory)
