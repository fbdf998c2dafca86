"""
Configuration utilities for the grant store.
Provides configuration loading from the environment and from files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = "GRANTSTORE_") -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        if cast_type == bool:
            # Handle boolean conversion specially
            if isinstance(value, str):
                return value.lower() in ('true', '1', 'yes', 'on')
            return bool(value)
        else:
            return cast_type(value)
    except (ValueError, TypeError):
        return default


def get_bool_config(key: str, default: bool = False,
                    env_prefix: str = "GRANTSTORE_") -> bool:
    """Get boolean configuration value."""
    return get_config_value(key, default, bool, env_prefix)


def get_int_config(key: str, default: int = 0,
                   env_prefix: str = "GRANTSTORE_") -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix)


def normalize_config_key(key: str) -> str:
    """Normalize configuration key to standard format."""
    return key.lower().replace('-', '_')


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext in ['.json']:
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            try:
                import yaml
            except ImportError:
                raise ImportError("PyYAML is required to load YAML configuration files")
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {file_path}")

    return {normalize_config_key(k): v for k, v in data.items()}
