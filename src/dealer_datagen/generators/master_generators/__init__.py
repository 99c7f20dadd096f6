"""
Entity factory package.

Each entity family is a mixin over BaseGenerator; DatasetGenerator
combines them and assembles a full Dataset.
"""

from .base_generator import BaseGenerator
from .dataset_generator import DatasetGenerator, generate_dataset

__all__ = ["BaseGenerator", "DatasetGenerator", "generate_dataset"]
