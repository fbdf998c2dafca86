"""
Configuration module for the grant store.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

from ..util.config import get_bool_config, get_config_value, get_int_config, load_config_file


@dataclass
class StoreConfig:
    """Configuration for grant persistence"""
    backend: str = "memory"
    require_filter_predicate: bool = False
    handle_length: int = 32

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create configuration from environment variables"""
        defaults = cls()
        return cls(
            backend=get_config_value("backend", defaults.backend),
            require_filter_predicate=get_bool_config(
                "require_filter_predicate", defaults.require_filter_predicate
            ),
            handle_length=get_int_config("handle_length", defaults.handle_length),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoreConfig":
        """Create configuration from a dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_file(cls, file_path: str) -> "StoreConfig":
        """Create configuration from a JSON or YAML file"""
        return cls.from_dict(load_config_file(file_path))

    def validate(self) -> bool:
        """Validate the configuration"""
        if not self.backend or not str(self.backend).strip():
            raise ValueError("backend is required")
        if not isinstance(self.require_filter_predicate, bool):
            raise ValueError("require_filter_predicate must be a boolean")
        if not isinstance(self.handle_length, int) or isinstance(self.handle_length, bool):
            raise ValueError("handle_length must be an integer")
        if self.handle_length < 16:
            raise ValueError("handle_length must be at least 16 bytes")
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'backend': self.backend,
            'require_filter_predicate': self.require_filter_predicate,
            'handle_length': self.handle_length,
        }
