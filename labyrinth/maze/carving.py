"""Silhouette carving: turn the cubic lattice into the playable volume.

Cells beyond the silhouette are marked outside, which closes all of their
edges. Interior edges are left alone; any disconnection this causes is
repaired later by the region cleaner.
"""

from __future__ import annotations

from typing import Callable, Dict

from .errors import ConfigurationError
from .lattice import Maze


def _carve_where(maze: Maze, is_out: Callable[[int, int, int], bool]) -> int:
    carved = 0
    for c in maze.cells():
        if maze.is_outside(c):
            continue
        if is_out(*c):
            maze.mark_outside(c)
            carved += 1
    return carved


def circle(maze: Maze) -> int:
    """Keep the sphere inscribed in the lattice (radius half_size + 0.5)."""
    r2 = (maze.half_size + 0.5) ** 2
    return _carve_where(maze, lambda x, y, z: x * x + y * y + z * z > r2)


def cylinder(maze: Maze) -> int:
    """Keep a vertical cylinder around the y axis."""
    r2 = (maze.half_size + 0.5) ** 2
    return _carve_where(maze, lambda x, y, z: x * x + z * z > r2)


def cube(maze: Maze) -> int:
    return 0


SHAPES: Dict[str, Callable[[Maze], int]] = {
    "sphere": circle,
    "cylinder": cylinder,
    "cube": cube,
}


def carve(maze: Maze, shape: str = "sphere") -> int:
    try:
        fn = SHAPES[shape]
    except KeyError:
        raise ConfigurationError(f"unknown shape {shape!r}") from None
    return fn(maze)
