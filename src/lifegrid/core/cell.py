"""Cell states for the Game of Life grid."""

from enum import IntEnum


class Cell(IntEnum):
    """State of a single grid cell.

    Values are stored directly in the grid buffer, so summing cells
    counts the living ones.
    """

    DEAD = 0
    ALIVE = 1

    @property
    def glyph(self) -> str:
        """Character used for this state in text renderings."""
        return ALIVE_GLYPH if self is Cell.ALIVE else DEAD_GLYPH


DEAD_GLYPH = "◻"
ALIVE_GLYPH = "◼"
