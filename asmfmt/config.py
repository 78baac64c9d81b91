"""
Formatter configuration files.

Parses and validates YAML files holding layout settings, e.g.:

    instruction_indent: 4
    comment_column: 32
"""

import yaml

from .errors import ConfigError
from .printer import FormatConfig

# Keys accepted in a configuration file
VALID_KEYS = {
    'instruction_indent',   # Spaces before instruction text
    'comment_column',       # Column where trailing comments start
}


def parse_config(yaml_content: str, base: FormatConfig = None) -> FormatConfig:
    """
    Parse and validate a YAML configuration.

    Args:
        yaml_content: Raw YAML string content
        base: Settings used for keys missing from the file. Uses defaults
            if None.

    Returns:
        Validated layout settings

    Raises:
        ConfigError: If the configuration is invalid
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    base = base or FormatConfig()

    # Empty document
    if data is None:
        return base

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML mapping/dictionary")

    _validate_config(data)

    return FormatConfig(
        instruction_indent=data.get('instruction_indent', base.instruction_indent),
        comment_column=data.get('comment_column', base.comment_column),
    )


def load_config(path: str, base: FormatConfig = None) -> FormatConfig:
    """
    Load layout settings from a YAML file.

    Raises:
        ConfigError: If the file cannot be read or is invalid
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read configuration: {e.strerror}", path)

    try:
        return parse_config(content, base)
    except ConfigError as e:
        raise ConfigError(str(e), path)


def _validate_config(data: dict) -> None:
    """Validate configuration keys and values."""
    for key in data:
        if key not in VALID_KEYS:
            raise ConfigError(f"Unknown configuration key '{key}'")

    for key in sorted(VALID_KEYS):
        if key in data:
            _require_non_negative_int(data[key], key)


def _require_non_negative_int(value: any, field_path: str) -> None:
    """Validate that a value is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{field_path} must be a non-negative integer")
