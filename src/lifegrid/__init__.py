"""Conway's Game of Life on a fixed-size toroidal grid."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.config import InvalidDimension, UniverseConfig
from .core.universe import Universe

__all__ = ["Cell", "InvalidDimension", "Universe", "UniverseConfig"]
