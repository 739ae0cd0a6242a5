#!/usr/bin/env python3
"""
Example host driving the lifegrid engine.
"""

import time

from lifegrid import Universe, UniverseConfig


def main():
    """Print a small universe for a few generations."""
    universe = Universe(UniverseConfig(width=32, height=16))

    for _ in range(10):
        print(f"Generation {universe.generation} (population {universe.population}):")
        print(universe.render(), end="")
        universe.tick()
        time.sleep(0.1)


if __name__ == "__main__":
    main()
