"""
Loading configuration documents from YAML.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from plztree.exceptions import ConfigLoadError
from plztree.schema.commands import Configuration

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("plz.yaml", "plz.yml")


def parse_config(data: Any, source: str = "<document>") -> Configuration:
    """
    Validate already-deserialized configuration data.

    Params:
        data: Mapping produced by a YAML/JSON parser
        source: Description of where the data came from, for error messages

    Returns:
        Validated, immutable Configuration

    Raises:
        ConfigLoadError: If the data does not match the configuration schema
    """
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigLoadError(source, f"expected a mapping at the top level, got {type(data).__name__}")

    try:
        return Configuration.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(source, str(e)) from e


def load_config(path: str | Path) -> Configuration:
    """
    Read and validate a YAML configuration file.

    Params:
        path: Path to the configuration file

    Returns:
        Validated, immutable Configuration

    Raises:
        ConfigLoadError: If the file is missing, is not valid YAML, or does not
            match the configuration schema
    """
    path = Path(path)
    logger.debug("Loading configuration from %s", path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(str(path), e.strerror or str(e)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(str(path), f"invalid YAML: {e}") from e

    return parse_config(data, source=str(path))


def find_config_file(start: str | Path | None = None) -> Path | None:
    """
    Find the nearest configuration file.

    Looks in ``start`` (default: the current directory) and then in each of
    its parents.

    Params:
        start: Directory to begin the search in

    Returns:
        Path of the first configuration file found, or None
    """
    directory = Path(start) if start is not None else Path.cwd()
    directory = directory.resolve()

    for candidate_dir in (directory, *directory.parents):
        for file_name in CONFIG_FILE_NAMES:
            candidate = candidate_dir / file_name
            if candidate.is_file():
                return candidate

    return None
