"""Region cleanup after carving.

Only the largest connected region survives. Every smaller pocket is filled
solid. Ties go to the region discovered first when cells are scanned in
lexicographic (x, y, z) order, so the choice never depends on hash order.
"""

from __future__ import annotations

from typing import List, Tuple

from .cells import Coord3D
from .lattice import Maze


def largest_component(components: List[List[Coord3D]]) -> int:
    """Index of the largest component; first one wins on ties. -1 when empty."""
    best, best_size = -1, 0
    for i, comp in enumerate(components):
        if len(comp) > best_size:
            best, best_size = i, len(comp)
    return best


def fill_smallests(maze: Maze) -> Tuple[int, int]:
    comps = maze.components()
    keep = largest_component(comps)
    regions = cells = 0
    for i, comp in enumerate(comps):
        if i == keep:
            continue
        for c in comp:
            maze.fill(c)
        regions += 1
        cells += len(comp)
    maze.features = {c for c in maze.features if maze.is_active(c)}
    return regions, cells
