"""Cluster definition loader.

Reads apimodel documents from JSON or YAML files and validates them.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from akshelper.config.validator import validate_cluster_definition
from akshelper.lib.errors import ConfigError, FileNotFoundError
from akshelper.models.cluster import ClusterDefinition

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def read_cluster_document(path: Path) -> dict[str, Any]:
    """Read a cluster definition file into a dictionary.

    ``.json`` files are parsed as JSON, ``.yaml`` and ``.yml`` files as YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file cannot be parsed or is not a mapping
    """
    if not path.exists():
        raise FileNotFoundError(
            str(path),
            "Pass the path of an apimodel file (.json, .yaml or .yml).",
        )
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ConfigError(
            str(path),
            f"Unsupported file type '{path.suffix}'. "
            f"Expected one of: {', '.join(SUPPORTED_SUFFIXES)}",
        )

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(str(path), f"File is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(str(path), f"Failed to read file: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            content = json.loads(text)
        else:
            content = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(str(path), f"Failed to parse file: {e}") from e

    if not isinstance(content, dict):
        raise ConfigError(str(path), "Cluster definition must be a mapping")
    return content


def load_cluster_definition(path: str | Path) -> ClusterDefinition:
    """Load and validate a cluster definition file.

    Args:
        path: Path to the apimodel file

    Returns:
        Validated ClusterDefinition

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file cannot be parsed
        ClusterValidationError: If the definition is invalid
    """
    path = Path(path)
    logger.debug(f"Loading cluster definition from {path}")
    return validate_cluster_definition(read_cluster_document(path))
