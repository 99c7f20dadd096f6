"""
Configuration for the dealer data generator.
"""

from .models import GenerationConfig, VolumeConfig
from .settings import create_default_config, load_config

__all__ = ["GenerationConfig", "VolumeConfig", "create_default_config", "load_config"]
