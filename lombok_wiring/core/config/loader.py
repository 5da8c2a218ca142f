"""
build.yml loader — YAML in, validated BuildDescriptor out.

The file is either flat or has everything under a top-level ``build:``
key. Any problem (missing file, bad YAML, schema violation) surfaces
as a ConfigError with the path in its message.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lombok_wiring.core.models.build import BuildDescriptor

logger = logging.getLogger(__name__)

BUILD_CONFIG_FILE = "build.yml"

# Directory levels searched upward before giving up
_MAX_SEARCH_DEPTH = 20


class ConfigError(Exception):
    """build.yml is missing or does not describe a valid build."""


def find_build_file(start_dir: Path | None = None) -> Path | None:
    """Nearest build.yml in ``start_dir`` (default: cwd) or its parents."""
    directory = (start_dir or Path.cwd()).resolve()
    for candidate_dir in [directory, *directory.parents][:_MAX_SEARCH_DEPTH]:
        candidate = candidate_dir / BUILD_CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_build(path: Path | None = None) -> BuildDescriptor:
    """Read and validate a build descriptor.

    Raises:
        ConfigError: if no file is found or its content is invalid.
    """
    path = path or find_build_file()
    if path is None:
        raise ConfigError(f"No {BUILD_CONFIG_FILE} found. Specify one with --config.")
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    data = _read_mapping(path)
    if isinstance(data.get("build"), dict):
        data = data["build"]

    try:
        descriptor = BuildDescriptor.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid build configuration in {path}: {e}") from e

    logger.info(
        "Loaded build '%s' from %s (%d plugins, %d source sets)",
        descriptor.name,
        path,
        len(descriptor.plugins),
        len(descriptor.source_sets),
    )
    return descriptor


def _read_mapping(path: Path) -> dict[str, Any]:
    logger.debug("Reading %s", path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def project_root(config_path: Path) -> Path:
    """The project directory a build.yml describes: its parent."""
    return config_path.parent.resolve()
