"""Load game configuration files into engine models."""

import json
from pathlib import Path

import yaml

from ..engine.errors import ConfigurationError
from ..engine.models import GameConfig
from .cascade import FATAL, filter_cascading_issues
from .models import ConfigIssue, ValidationReport
from .parsing import read_config_file
from .validate import validate


def validate_file(path: str | Path) -> ValidationReport:
    """
    Read and validate a configuration file.

    Unparseable content is reported as a FATAL issue rather than raised.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    try:
        data = read_config_file(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        return ValidationReport(valid=False, errors=[ConfigIssue(
            code="UNREADABLE_FILE",
            message=f"Could not parse {path}: {e}",
            cascade_level=FATAL
        )])
    return validate(data)


def load_config(path: str | Path) -> GameConfig:
    """
    Load a game configuration from a JSON or YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is unreadable or the configuration is invalid
    """
    report = validate_file(path)

    if not report.valid:
        issues = filter_cascading_issues(report.errors)
        details = "\n".join(f"  [{issue.code}] {issue.message}" for issue in issues)
        raise ConfigurationError(f"Invalid configuration in {path}:\n{details}", issues=issues)

    return report.config
