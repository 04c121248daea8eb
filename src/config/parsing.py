"""Configuration file reading and schema parsing."""

import json
import re
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from .cascade import FATAL
from .models import ConfigFile, ConfigIssue


COORDINATE_PATTERN = re.compile(r'^\s*(\d+)\s*:\s*(\d+)\s*$')


def read_config_file(path: str | Path) -> Any:
    """
    Read a configuration file into plain Python data.

    ``.yaml`` and ``.yml`` files are read with PyYAML, anything else as JSON.
    Coordinates in YAML files must be quoted: PyYAML reads ``1:2`` as the
    base-60 integer 62.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError / yaml.YAMLError: If the content cannot be parsed
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        if path.suffix.lower() in ('.yaml', '.yml'):
            return yaml.safe_load(f)
        return json.load(f)


def parse_coordinate(text: str) -> Optional[Tuple[int, int]]:
    """Parse a ``"row:column"`` coordinate, returning None if malformed."""
    match = COORDINATE_PATTERN.match(text)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def parse_config(data: Any) -> Tuple[Optional[ConfigFile], List[ConfigIssue]]:
    """
    Parse raw configuration data into the file schema with error collection.

    Returns a tuple of (config_file, issues).
    """
    if not isinstance(data, dict):
        return None, [ConfigIssue(
            code="INVALID_ROOT",
            message=f"Configuration root must be an object, got {type(data).__name__}",
            cascade_level=FATAL
        )]

    try:
        return ConfigFile.model_validate(data), []
    except ValidationError as e:
        issues = [
            ConfigIssue(
                code="SCHEMA_ERROR",
                message=f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}",
                path='.'.join(str(part) for part in err['loc']),
                cascade_level=FATAL
            )
            for err in e.errors()
        ]
        return None, issues
