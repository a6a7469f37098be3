#!/usr/bin/env python3

"""
Configuration management for the hexamer classifier.

Centralized configuration with support for file-based configuration
and environment variable overrides.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes')


@dataclass
class ClassifierConfig:
    """Centralized configuration for the hexamer classifier."""

    # Window extraction
    hexamer_size: int = 6
    step_size: int = 3  # one codon

    # Record validation
    min_sequence_length: int = 6

    # Reporting
    warn_unknown_hexamers: bool = True
    show_scores: bool = False

    # Performance settings
    memory_limit_mb: int = 4096
    enable_memory_monitoring: bool = True

    debug_mode: bool = False

    @classmethod
    def from_file(cls, config_path: str) -> 'ClassifierConfig':
        """Load configuration from file (JSON or YAML)."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                if config_path.lower().endswith(YAML_SUFFIXES):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML configuration file format: {e}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration: {e}")

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ClassifierConfig':
        """Create configuration from dictionary."""
        # Filter out unknown keys
        known_keys = set(cls.__dataclass_fields__.keys())
        filtered_dict = {k: v for k, v in config_dict.items() if k in known_keys}

        try:
            return cls(**filtered_dict)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration parameters: {e}")

    @classmethod
    def from_env(cls) -> 'ClassifierConfig':
        """Load configuration from environment variables."""
        config = cls()

        env_mappings = {
            'HEXAMER_SIZE': ('hexamer_size', int),
            'HEXAMER_STEP_SIZE': ('step_size', int),
            'HEXAMER_MIN_SEQUENCE_LENGTH': ('min_sequence_length', int),
            'HEXAMER_WARN_UNKNOWN': ('warn_unknown_hexamers', _parse_bool),
            'HEXAMER_SHOW_SCORES': ('show_scores', _parse_bool),
            'HEXAMER_MEMORY_LIMIT_MB': ('memory_limit_mb', int),
            'HEXAMER_MEMORY_MONITORING': ('enable_memory_monitoring', _parse_bool),
            'HEXAMER_DEBUG_MODE': ('debug_mode', _parse_bool),
        }

        for env_var, (field_name, converter) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                try:
                    setattr(config, field_name, converter(env_value))
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(f"Invalid environment variable {env_var}: {e}")

        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to file."""
        config_dict = self.to_dict()

        try:
            with open(config_path, 'w') as f:
                if config_path.lower().endswith(YAML_SUFFIXES):
                    yaml.safe_dump(config_dict, f, default_flow_style=False)
                else:
                    json.dump(config_dict, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.hexamer_size < 1:
            raise ConfigurationError("hexamer_size must be >= 1")

        if self.step_size < 1:
            raise ConfigurationError("step_size must be >= 1")

        if self.min_sequence_length < self.hexamer_size:
            raise ConfigurationError("min_sequence_length must be >= hexamer_size")

        if self.memory_limit_mb < 100:
            raise ConfigurationError("memory_limit_mb must be >= 100")

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()


def load_config(config_path: Optional[str] = None,
                use_env: bool = True) -> ClassifierConfig:
    """
    Load configuration with priority: file > environment > defaults.

    Args:
        config_path: Path to configuration file (optional)
        use_env: Whether to load environment variables

    Returns:
        ClassifierConfig: Loaded configuration
    """
    defaults = ClassifierConfig()
    config = ClassifierConfig()

    if use_env:
        try:
            env_config = ClassifierConfig.from_env()
        except ConfigurationError as e:
            logger.warning(f"Ignoring environment configuration: {e}")
        else:
            _merge_non_defaults(config, env_config, defaults)

    if config_path:
        _merge_non_defaults(config, ClassifierConfig.from_file(config_path), defaults)

    config.validate()
    return config


def _merge_non_defaults(target: ClassifierConfig, source: ClassifierConfig,
                        defaults: ClassifierConfig) -> None:
    """Copy every field of source that differs from the defaults into target."""
    for field_name in ClassifierConfig.__dataclass_fields__:
        value = getattr(source, field_name)
        if value != getattr(defaults, field_name):
            setattr(target, field_name, value)
