"""Core Game of Life engine."""

from .cell import Cell
from .config import InvalidDimension, UniverseConfig, default_seed, seed_from_coordinates
from .universe import Universe, next_state

__all__ = [
    "Cell",
    "InvalidDimension",
    "Universe",
    "UniverseConfig",
    "default_seed",
    "next_state",
    "seed_from_coordinates",
]
