"""Randomized Kruskal construction of the base maze.

Every candidate edge is keyed with a random float, sorted, and opened when it
joins two different union-find sets. That yields a spanning tree over all
cells. A second pass over the edges the tree left closed opens each one with
probability ``percent`` to add loops.

The jitter vector (``bug``) pushes edges lying on odd layers of a flagged axis
later in the ordering. Connectivity does not depend on the ordering.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .cells import Bug, Coord3D
from .errors import ConfigurationError
from .lattice import Maze
from .union_find import DisjointSet

JITTER_BIAS = 0.5


def _edge_key(rng: random.Random, low: Coord3D, axis: int, bug: Bug, half_size: int) -> float:
    key = rng.random()
    if bug[axis] and (low[axis] + half_size) % 2 == 1:
        key += JITTER_BIAS
    return key


def new_kruskal(
    half_size: int,
    percent: float,
    bug: Bug = (0, 0, 0),
    rng: Optional[random.Random] = None,
) -> Maze:
    if half_size < 1:
        raise ConfigurationError(f"half_size must be >= 1 (got {half_size})")
    if not 0.0 <= percent <= 1.0:
        raise ConfigurationError(f"percent must be within [0, 1] (got {percent})")
    if rng is None:
        rng = random.Random()
    maze = Maze(half_size)

    keyed: List[Tuple[float, int, int, Coord3D, Coord3D]] = []
    for a, b, axis in maze.edges():
        keyed.append((_edge_key(rng, a, axis, bug, half_size), maze.index(a), maze.index(b), a, b))
    keyed.sort()

    sets = DisjointSet(maze.cell_count)
    leftovers = []
    for _key, ia, ib, a, b in keyed:
        if sets.union(ia, ib):
            maze.open_edge(a, b)
        else:
            leftovers.append((a, b))

    for a, b in leftovers:
        if rng.random() < percent:
            maze.open_edge(a, b)
    return maze
