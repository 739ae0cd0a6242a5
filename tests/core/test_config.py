"""Tests for UniverseConfig and seed helpers."""

import pytest

from lifegrid.core.cell import Cell
from lifegrid.core.config import (
    InvalidDimension,
    UniverseConfig,
    default_seed,
    seed_from_coordinates,
)


class TestUniverseConfig:
    """Test cases for UniverseConfig."""

    def test_defaults(self):
        """Config defaults to a 64x64 grid with the standard seed."""
        config = UniverseConfig()

        assert config.width == 64
        assert config.height == 64
        assert config.size == 64 * 64
        assert config.seed_fn is default_seed

    def test_custom_values(self):
        """Config accepts custom dimensions."""
        config = UniverseConfig(width=8, height=3)

        assert config.width == 8
        assert config.height == 3
        assert config.to_dict() == {"width": 8, "height": 3}

    def test_zero_width_rejected(self):
        """Config rejects a zero width."""
        with pytest.raises(InvalidDimension, match="width"):
            UniverseConfig(width=0)

    def test_zero_height_rejected(self):
        """Config rejects a zero height."""
        with pytest.raises(InvalidDimension, match="height"):
            UniverseConfig(height=0)

    def test_negative_rejected(self):
        """Config rejects negative dimensions."""
        with pytest.raises(InvalidDimension):
            UniverseConfig(width=-4)

    def test_non_integer_rejected(self):
        """Config rejects non-integer dimensions."""
        with pytest.raises(InvalidDimension):
            UniverseConfig(width=2.5)
        with pytest.raises(InvalidDimension):
            UniverseConfig(height=True)

    def test_invalid_dimension_is_value_error(self):
        """InvalidDimension can be caught as ValueError."""
        with pytest.raises(ValueError):
            UniverseConfig(width=0, height=0)


class TestSeeds:
    """Test cases for seed functions."""

    def test_default_seed(self):
        """Indices divisible by 2 or 7 start alive."""
        assert default_seed(0) is Cell.ALIVE
        assert default_seed(1) is Cell.DEAD
        assert default_seed(2) is Cell.ALIVE
        assert default_seed(7) is Cell.ALIVE
        assert default_seed(9) is Cell.DEAD
        assert default_seed(21) is Cell.ALIVE
        assert default_seed(25) is Cell.DEAD

    def test_seed_from_coordinates(self):
        """Only listed (row, column) pairs are alive."""
        seed = seed_from_coordinates(4, 4, [(0, 1), (2, 3)])

        alive = [i for i in range(16) if seed(i) is Cell.ALIVE]
        assert alive == [1, 11]

    def test_seed_from_no_coordinates(self):
        """An empty coordinate list seeds an empty grid."""
        seed = seed_from_coordinates(3, 3, [])
        assert all(seed(i) is Cell.DEAD for i in range(9))

    def test_seed_from_coordinates_wraps(self):
        """Coordinates outside the grid wrap around its edges."""
        seed = seed_from_coordinates(3, 2, [(2, 4), (-1, -1)])

        alive = [i for i in range(6) if seed(i) is Cell.ALIVE]
        assert alive == [1, 5]
