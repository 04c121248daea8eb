"""Game configuration loading and validation."""

from .loader import load_config, validate_file
from .validate import validate, build_game_config
from .models import ConfigFile, ConfigIssue, ValidationReport
from .parsing import read_config_file, parse_config, parse_coordinate
from .cascade import filter_cascading_issues, FATAL, CRITICAL, HIGH, MEDIUM, LOW

__all__ = [
    # Loading
    "load_config",
    "validate_file",
    # Validation
    "validate",
    "build_game_config",
    "filter_cascading_issues",
    "FATAL",
    "CRITICAL",
    "HIGH",
    "MEDIUM",
    "LOW",
    # Models
    "ConfigFile",
    "ConfigIssue",
    "ValidationReport",
    # Parsing
    "read_config_file",
    "parse_config",
    "parse_coordinate",
]
