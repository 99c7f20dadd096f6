"""
Generators module for dealership data generation.

This module contains the random source, identifier and address helpers,
and the collection progress tracker shared by the entity factories in
``master_generators``.
"""

from .progress_tracker import CollectionProgressTracker
from .utils import AddressGenerator, IdentifierGenerator, RandomSource

__all__ = [
    "AddressGenerator",
    "CollectionProgressTracker",
    "IdentifierGenerator",
    "RandomSource",
]
