"""Pytest fixtures for lifegrid tests."""

import pytest

from lifegrid.core.universe import Universe


@pytest.fixture
def default_universe() -> Universe:
    """Universe with the default 64x64 seed."""
    return Universe.new()


@pytest.fixture
def blinker() -> Universe:
    """Horizontal blinker on row 1 of a 5x5 grid."""
    return Universe.from_alive(5, 5, [(1, 0), (1, 1), (1, 2)])


@pytest.fixture
def block() -> Universe:
    """2x2 block in the middle of an otherwise empty 6x6 grid."""
    return Universe.from_alive(6, 6, [(2, 2), (2, 3), (3, 2), (3, 3)])
