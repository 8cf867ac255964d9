"""Configuration loader with YAML support and environment variable substitution."""

import copy
import os
import re
from typing import Any, Dict, Optional

import yaml

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
HEADING_STYLES = {"atx", "atx_closed", "setext", "underlined"}
NEWLINE_STYLES = {"backslash", "spaces"}

DEFAULT_CONFIG: Dict[str, Any] = {
    'export': {
        'output_directory': './content',
        'paginate_by': 5,
        'section_filename': '_index.md',
        'confine_to_output_root': False,
    },
    'markdown': {
        'heading_style': 'ATX',
        'bullets': '-',
        'newline_style': 'backslash',
    },
    'logging': {
        'level': None,
        'file': None,
        'show_progress': False,
    },
}


class ConfigLoader:
    """Handles loading and validation of configuration files."""

    ENV_VAR_PATTERN = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)\}')

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file with environment variable substitution.

        Values from the file are layered over DEFAULT_CONFIG. Without a path
        the defaults are returned.

        Args:
            config_path: Optional path to YAML configuration file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML parsing fails
        """
        config = copy.deepcopy(DEFAULT_CONFIG)
        if config_path is None:
            return config

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            return config
        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a dictionary")

        config_data = cls._substitute_env_vars_recursive(config_data)

        return _deep_merge(config, config_data)

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> None:
        """
        Validate configuration values.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValueError: If validation fails
        """
        paginate_by = get_nested(config, 'export.paginate_by', 5)
        if isinstance(paginate_by, bool) or not isinstance(paginate_by, int) or paginate_by < 1:
            raise ValueError("export.paginate_by must be a positive integer")

        section_filename = get_nested(config, 'export.section_filename', '_index.md')
        if not isinstance(section_filename, str) or not section_filename:
            raise ValueError("export.section_filename must be a non-empty string")
        if '/' in section_filename or '\\' in section_filename:
            raise ValueError("export.section_filename must be a file name, not a path")

        output_dir = get_nested(config, 'export.output_directory')
        if output_dir and os.path.exists(output_dir) and not os.path.isdir(output_dir):
            raise ValueError(f"export.output_directory '{output_dir}' is not a directory")

        confine = get_nested(config, 'export.confine_to_output_root', False)
        if not isinstance(confine, bool):
            raise ValueError("export.confine_to_output_root must be a boolean")

        heading_style = get_nested(config, 'markdown.heading_style', 'ATX')
        if not isinstance(heading_style, str) or heading_style.lower() not in HEADING_STYLES:
            raise ValueError(
                f"markdown.heading_style must be one of: {sorted(s.upper() for s in HEADING_STYLES)}"
            )

        bullets = get_nested(config, 'markdown.bullets', '-')
        if not isinstance(bullets, str) or not bullets:
            raise ValueError("markdown.bullets must be a non-empty string")

        newline_style = get_nested(config, 'markdown.newline_style', 'backslash')
        if not isinstance(newline_style, str) or newline_style.lower() not in NEWLINE_STYLES:
            raise ValueError(f"markdown.newline_style must be one of: {sorted(NEWLINE_STYLES)}")

        level = get_nested(config, 'logging.level')
        if level is not None and (not isinstance(level, str) or level.upper() not in LOG_LEVELS):
            raise ValueError(f"logging.level must be one of: {sorted(LOG_LEVELS)}")

        show_progress = get_nested(config, 'logging.show_progress', False)
        if not isinstance(show_progress, bool):
            raise ValueError("logging.show_progress must be a boolean")

    @classmethod
    def merge_with_args(cls, config: Dict[str, Any], args) -> Dict[str, Any]:
        """
        Merge configuration file with CLI arguments.
        CLI arguments take precedence over config file values.

        Args:
            config: Base configuration dictionary
            args: CLI arguments with attributes matching config keys

        Returns:
            Merged configuration dictionary
        """
        merged = copy.deepcopy(config)

        for section in ('export', 'markdown', 'logging'):
            if section not in merged:
                merged[section] = {}

        if getattr(args, 'output_dir', None):
            merged['export']['output_directory'] = args.output_dir

        if getattr(args, 'paginate_by', None) is not None:
            merged['export']['paginate_by'] = args.paginate_by

        if getattr(args, 'log_file', None):
            merged['logging']['file'] = args.log_file

        if getattr(args, 'progress', None) is not None:
            merged['logging']['show_progress'] = args.progress

        verbose = getattr(args, 'verbose', 0) or 0
        if verbose >= 2:
            merged['logging']['level'] = 'DEBUG'
        elif verbose == 1:
            merged['logging']['level'] = 'INFO'

        return merged

    @classmethod
    def _substitute_env_vars_recursive(cls, data: Any) -> Any:
        """Recursively substitute environment variables in data structure."""
        if isinstance(data, dict):
            return {key: cls._substitute_env_vars_recursive(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars_recursive(item) for item in data]
        elif isinstance(data, str):
            return cls._substitute_env_vars(data)
        else:
            return data

    @classmethod
    def _substitute_env_vars(cls, value: str) -> str:
        """Substitute environment variables in a string value."""
        def replace_match(match):
            var_name = match.group(1)
            env_value = os.getenv(var_name)
            return env_value if env_value is not None else match.group(0)

        return cls.ENV_VAR_PATTERN.sub(replace_match, value)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into ``base`` recursively; ``base`` is modified."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Safely retrieve nested configuration values using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "export.paginate_by")
        default: Default value if path doesn't exist

    Returns:
        Value at the nested path or default
    """
    keys = path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


__all__ = ['ConfigLoader', 'DEFAULT_CONFIG', 'get_nested']
