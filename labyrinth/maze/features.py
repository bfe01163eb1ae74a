"""Feature column placement.

Feature cells are the rooms of the level: the dead-end eliminator never fills
them, so the corridor leading to each one survives cleanup.
"""
from __future__ import annotations

import random
from typing import List

from .cells import Coord3D
from .lattice import Maze


def place_columns(maze: Maze, count: int, rng: random.Random) -> List[Coord3D]:
    if count <= 0:
        return []
    candidates = sorted(c for c in maze.active_cells() if not maze.is_feature(c))
    picked = sorted(rng.sample(candidates, min(count, len(candidates))))
    for c in picked:
        maze.mark_feature(c)
    return picked
