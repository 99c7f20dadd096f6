"""
Configuration loading and management for the dealer data generator.

This module provides utilities for locating, loading and overriding
configuration settings.
"""

import os
from pathlib import Path

from .models import GenerationConfig

SEED_ENV_VAR = "DEALER_DATAGEN_SEED"
LOG_LEVEL_ENV_VAR = "DEALER_DATAGEN_LOG_LEVEL"


def load_config(
    config_path: str | Path | None = None,
    config_name: str = "config.json",
    required: bool = False,
) -> GenerationConfig:
    """
    Load configuration from file with path resolution and env overrides.

    Without an explicit path the current directory and its ``config/``
    subdirectory are searched. When nothing is found the defaults are
    used unless ``required`` is set.

    Args:
        config_path: Explicit path to config file or directory containing config
        config_name: Name of config file (default: "config.json")
        required: Raise instead of falling back to defaults

    Returns:
        GenerationConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If a required configuration file is not found
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / config_name,
            Path.cwd() / "config" / config_name,
        ]

        for path in search_paths:
            if path.exists():
                config_path = path
                break
        else:
            if required:
                raise FileNotFoundError(
                    f"Configuration file '{config_name}' not found in any of: "
                    f"{[str(p) for p in search_paths]}"
                )
            return apply_env_overrides(GenerationConfig())

    config_path = Path(config_path)

    # If path is a directory, look for config file inside it
    if config_path.is_dir():
        config_path = config_path / config_name

    return apply_env_overrides(GenerationConfig.from_file(config_path))


def apply_env_overrides(config: GenerationConfig) -> GenerationConfig:
    """Apply DEALER_DATAGEN_* environment variables on top of ``config``."""
    updates: dict = {}

    seed = os.getenv(SEED_ENV_VAR)
    if seed:
        updates["seed"] = seed

    log_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if log_level:
        updates["log_level"] = log_level

    if not updates:
        return config

    # Re-validate so overrides go through the same field validators
    return GenerationConfig(**{**config.model_dump(), **updates})


def create_default_config(output_path: str | Path) -> GenerationConfig:
    """
    Create a default configuration file with standard values.

    Args:
        output_path: Where to save the default config file

    Returns:
        GenerationConfig: The default configuration
    """
    default_config = GenerationConfig(seed=42)
    default_config.to_file(output_path)
    return default_config
