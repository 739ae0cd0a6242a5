"""Construction parameters for a Universe."""

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Callable, Dict, Iterable, Tuple, Union

from .cell import Cell

SeedFunction = Callable[[int], Union[Cell, bool, int]]

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64


class InvalidDimension(ValueError):
    """Raised when a grid width or height is not a positive integer."""


def default_seed(index: int) -> Cell:
    """Initial pattern: alive where the linear index is divisible by 2 or 7."""
    if index % 2 == 0 or index % 7 == 0:
        return Cell.ALIVE
    return Cell.DEAD


def seed_from_coordinates(
    width: int, height: int, alive: Iterable[Tuple[int, int]]
) -> SeedFunction:
    """Build a seed function that makes only the given cells alive.

    Coordinates wrap around the edges, the same way ``Universe.get_cell`` does.

    Args:
        width: Number of columns of the grid the seed will be used with
        height: Number of rows of the grid the seed will be used with
        alive: (row, column) coordinates of living cells

    Returns:
        Function mapping a linear index to its initial Cell
    """
    alive_indices = frozenset((row % height) * width + (column % width) for row, column in alive)

    def seed(index: int) -> Cell:
        return Cell.ALIVE if index in alive_indices else Cell.DEAD

    return seed


@dataclass(frozen=True)
class UniverseConfig:
    """Configuration for a Universe.

    Attributes:
        width: Number of columns
        height: Number of rows
        seed_fn: Maps each linear index in [0, width * height) to its initial state
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed_fn: SeedFunction = default_seed

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidDimension(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidDimension(f"{name} must be > 0, got {value}")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def to_dict(self) -> Dict[str, Any]:
        """Dimension fields as a dictionary."""
        return {"width": self.width, "height": self.height}
