"""Boundary smoothing.

Each pass looks at the outer layer of the structure (active cells that touch
the lattice border, an outside cell or a solid cell) and removes redundant
unit-square loops there. An edge is closed only when:

    * both endpoints are boundary cells,
    * both endpoints have degree >= 3, so neither becomes a dead end, and
    * the three other edges of a unit square through the edge are open, so
      the endpoints stay connected.

Decisions use the live edge state, so edges closed earlier in the same pass
are taken into account and connectivity is preserved edge by edge.
"""

from __future__ import annotations

from .cells import Coord3D, add, perpendicular
from .lattice import Maze


def _square_backed(maze: Maze, a: Coord3D, b: Coord3D, axis: int) -> bool:
    for d in perpendicular(axis):
        a2, b2 = add(a, d), add(b, d)
        if not (maze.contains(a2) and maze.contains(b2)):
            continue
        if maze.is_open(a, a2) and maze.is_open(a2, b2) and maze.is_open(b2, b):
            return True
    return False


def reduce_pass(maze: Maze) -> int:
    boundary = {c for c in maze.cells() if maze.is_boundary(c)}
    closed = 0
    for a, b, axis in maze.edges():
        if a not in boundary or b not in boundary:
            continue
        if not maze.is_open(a, b):
            continue
        if maze.degree(a) < 3 or maze.degree(b) < 3:
            continue
        if _square_backed(maze, a, b, axis):
            maze.close_edge(a, b)
            closed += 1
    return closed


def reduce(maze: Maze, n: int) -> int:
    """Apply ``n`` smoothing passes; returns the number of edges closed."""
    closed = 0
    for _ in range(max(n, 0)):
        closed += reduce_pass(maze)
    return closed
