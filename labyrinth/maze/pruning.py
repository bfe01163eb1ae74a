"""Dead-end corridor elimination.

A dead end is an active, non-feature cell with exactly one open edge. Filling
it closes that edge, which can turn its neighbor into the next dead end, so
callers repeat sweeps until one reports no change::

    while fill_dead_corridors(maze):
        pass

What survives is every cycle of the maze plus the corridors that lead to
feature cells. Only the terminal stub cell loses access when a dead end is
filled, so no cell that is still part of the structure is disconnected.

``eliminate_dead_ends`` runs the same sweeps to a fixpoint but only rescans
the neighbors of cells filled by the previous sweep. After a sweep every
remaining dead end is such a neighbor, so both loops fill the same cells in
the same number of sweeps.
"""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from .cells import Coord3D
from .lattice import Maze


def _is_dead_end(maze: Maze, c: Coord3D) -> bool:
    return maze.is_active(c) and not maze.is_feature(c) and maze.degree(c) == 1


def dead_ends(maze: Maze) -> List[Coord3D]:
    return [c for c in maze.cells() if _is_dead_end(maze, c)]


def _sweep(maze: Maze, candidates: Iterable[Coord3D]) -> Tuple[bool, Set[Coord3D]]:
    """One sweep over ``candidates``; returns (changed, cells whose degree dropped)."""
    candidates = list(candidates)
    changed = False
    touched: Set[Coord3D] = set()
    for c in [c for c in candidates if _is_dead_end(maze, c)]:
        # an earlier fill in this sweep may have isolated the cell already
        if maze.degree(c) > 1:
            continue
        touched.update(maze.open_neighbors(c))
        maze.fill(c)
        changed = True
    # cells orphaned by this sweep (e.g. the far end of a two-cell stub)
    for c in sorted(touched.union(candidates)):
        if maze.is_active(c) and not maze.is_feature(c) and maze.degree(c) == 0:
            maze.fill(c)
            changed = True
    return changed, {c for c in touched if maze.is_active(c)}


def fill_dead_corridors(maze: Maze) -> bool:
    """Run one sweep over the whole lattice; return True when at least one cell was filled."""
    changed, _touched = _sweep(maze, maze.cells())
    return changed


def eliminate_dead_ends(maze: Maze) -> int:
    """Sweep until nothing changes; returns the number of sweeps that filled cells."""
    sweeps = 0
    changed, frontier = _sweep(maze, maze.cells())
    while changed:
        sweeps += 1
        changed, frontier = _sweep(maze, sorted(frontier))
    return sweeps


def count_filled(maze: Maze) -> int:
    return sum(1 for c in maze.cells() if maze.is_solid(c))
