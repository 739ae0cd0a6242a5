"""Toroidal Game of Life grid engine."""

import logging
from dataclasses import replace
from typing import Iterable, Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .cell import ALIVE_GLYPH, DEAD_GLYPH, Cell
from .config import UniverseConfig, seed_from_coordinates

logger = logging.getLogger(__name__)


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply Conway's rules to a single cell.

    Args:
        cell: Current state of the cell
        live_neighbors: Number of living neighbors (0-8)

    Returns:
        State of the cell in the next generation
    """
    if cell == Cell.ALIVE and live_neighbors < 2:
        return Cell.DEAD
    if cell == Cell.ALIVE and live_neighbors in (2, 3):
        return Cell.ALIVE
    if cell == Cell.ALIVE and live_neighbors > 3:
        return Cell.DEAD
    if cell == Cell.DEAD and live_neighbors == 3:
        return Cell.ALIVE
    return Cell(cell)


# Next state indexed by [current cell, live neighbor count]
_TRANSITIONS = np.array(
    [[next_state(cell, count) for count in range(9)] for cell in Cell],
    dtype=np.uint8,
)


class Universe:
    """A fixed-size grid of cells whose edges wrap around.

    Cells live in a flat row-major buffer, so the cell at (row, column)
    is stored at ``row * width + column``. Each call to ``tick`` replaces
    the whole buffer with the next generation.
    """

    def __init__(self, config: Optional[UniverseConfig] = None) -> None:
        """Initialize a new universe.

        Args:
            config: Dimensions and initial pattern; defaults to a 64x64
                grid seeded with every cell whose index is divisible by 2 or 7
        """
        config = config or UniverseConfig()
        self._width = config.width
        self._height = config.height
        self._generation = 0

        seed_fn = config.seed_fn
        self._cells = np.fromiter(
            (Cell.ALIVE if seed_fn(i) else Cell.DEAD for i in range(config.size)),
            dtype=np.uint8,
            count=config.size,
        )

        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )
        # Extra times the kernel counts a cell as its own neighbor
        self._self_overcount = (2 if self._height == 1 else 1) * (2 if self._width == 1 else 1) - 1

        logger.debug(
            "Created %dx%d universe with %d live cells", self._width, self._height, self.population
        )

    @classmethod
    def new(cls) -> "Universe":
        """Create a universe with the default dimensions and seed."""
        return cls()

    @classmethod
    def from_alive(cls, width: int, height: int, alive: Iterable[Tuple[int, int]]) -> "Universe":
        """Create a universe where only the given cells are alive.

        Args:
            width: Number of columns
            height: Number of rows
            alive: (row, column) coordinates of living cells

        Raises:
            InvalidDimension: If width or height is not positive
        """
        config = UniverseConfig(width=width, height=height)
        return cls(replace(config, seed_fn=seed_from_coordinates(width, height, alive)))

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def generation(self) -> int:
        """Number of ticks applied since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def cells(self) -> np.ndarray:
        """Read-only view over the row-major cell buffer.

        The view borrows the current generation's buffer. ``tick`` swaps in
        a new buffer, so a view taken earlier keeps showing the old generation.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def index(self, row: int, column: int) -> int:
        """Position of (row, column) in the cell buffer.

        Coordinates must already be wrapped into range.
        """
        return row * self._width + column

    def get_cell(self, row: int, column: int) -> Cell:
        """Get the state of a cell, wrapping coordinates around the edges."""
        return Cell(int(self._cells[self.index(row % self._height, column % self._width)]))

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count living neighbors of a cell.

        Offsets of ``dimension - 1`` stand in for -1, and only offsets that
        are literally (0, 0) are skipped. On a grid one cell wide or high the
        cell itself is therefore counted among its own neighbors.

        Args:
            row: Row coordinate in [0, height)
            column: Column coordinate in [0, width)

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for delta_row in (self._height - 1, 0, 1):
            for delta_column in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_column == 0:
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_column = (column + delta_column) % self._width
                count += int(self._cells[self.index(neighbor_row, neighbor_column)])
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells using a circular-padded convolution.

        Returns:
            Array of shape (height, width) with each cell's live neighbor count
        """
        grid = self._cells.reshape(self._height, self._width)
        padded = F.pad(
            torch.from_numpy(grid.astype(np.float32)).unsqueeze(0).unsqueeze(0), (1, 1, 1, 1), mode="circular"
        )
        neighbors = F.conv2d(padded, self._kernel)
        counts = neighbors[0, 0].round().numpy().astype(np.int16)

        # The kernel sees the cell itself more often than live_neighbor_count
        # does when a dimension is 1
        if self._self_overcount:
            counts -= self._self_overcount * grid
        return counts.astype(np.uint8)

    def tick(self) -> None:
        """Advance the universe by one generation.

        The next generation is looked up from the current buffer only and
        written into a fresh buffer, which then replaces the current one.
        """
        counts = self.neighbor_counts().ravel()
        self._cells = _TRANSITIONS[self._cells, counts]
        self._generation += 1

    def render(self) -> str:
        """Text snapshot with one line per row.

        Dead cells are drawn as '◻' and living cells as '◼'; every row,
        including the last, ends with a newline.
        """
        glyphs = np.array([DEAD_GLYPH, ALIVE_GLYPH])[self._cells].reshape(self._height, self._width)
        return "".join("".join(row) + "\n" for row in glyphs)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Universe(width={self._width}, height={self._height}, "
            f"generation={self._generation}, population={self.population})"
        )

    def __eq__(self, other: object) -> bool:
        """Check if two universes hold the same cells."""
        if not isinstance(other, Universe):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)
