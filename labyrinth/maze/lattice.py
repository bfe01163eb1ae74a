"""Cubic lattice of cells and the open/closed edge relation between them.

The maze is stored as flat, directly indexed lists so every neighbor and edge
query is a constant-time lookup:

    * ``_open[axis][i]`` is the edge from cell ``i`` to its ``+axis`` neighbor.
    * ``_outside[i]`` marks cells carved away by the silhouette.
    * ``_solid[i]`` marks cells filled in by cleanup passes.
    * ``features`` holds designated cells that pruning must keep.

Cells are never destroyed; outside and solid cells stay addressable with all
of their edges closed.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Set, Tuple

from .cells import AXES, DIRECTIONS, NEGATIVE_UNITS, UNITS, Coord3D, add


class Maze:
    def __init__(self, half_size: int):
        if half_size < 0:
            raise ValueError(f"half_size must be >= 0 (got {half_size})")
        self.half_size = half_size
        self.size = half_size * 2 + 1
        self.cell_count = self.size ** 3
        # index offset of the +axis neighbor
        self._stride = (self.size * self.size, self.size, 1)
        self._open: List[List[bool]] = [[False] * self.cell_count for _ in AXES]
        self._outside: List[bool] = [False] * self.cell_count
        self._solid: List[bool] = [False] * self.cell_count
        self.features: Set[Coord3D] = set()

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------
    def contains(self, c: Coord3D) -> bool:
        h = self.half_size
        return -h <= c[0] <= h and -h <= c[1] <= h and -h <= c[2] <= h

    def index(self, c: Coord3D) -> int:
        h, n = self.half_size, self.size
        return ((c[0] + h) * n + (c[1] + h)) * n + (c[2] + h)

    def coord(self, i: int) -> Coord3D:
        h, n = self.half_size, self.size
        i, z = divmod(i, n)
        x, y = divmod(i, n)
        return (x - h, y - h, z - h)

    def cells(self) -> Iterator[Coord3D]:
        """All cells in lexicographic (x, y, z) order."""
        r = range(-self.half_size, self.half_size + 1)
        for x in r:
            for y in r:
                for z in r:
                    yield (x, y, z)

    def neighbors(self, c: Coord3D) -> List[Coord3D]:
        return [n for n in (add(c, d) for d in DIRECTIONS) if self.contains(n)]

    def edges(self) -> Iterator[Tuple[Coord3D, Coord3D, int]]:
        """Every candidate edge once, as (a, b, axis) with b = a + e_axis."""
        for c in self.cells():
            for axis in AXES:
                n = add(c, UNITS[axis])
                if self.contains(n):
                    yield c, n, axis

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------
    def _slot(self, a: Coord3D, b: Coord3D) -> Tuple[int, int]:
        delta = (b[0] - a[0], b[1] - a[1], b[2] - a[2])
        if abs(delta[0]) + abs(delta[1]) + abs(delta[2]) != 1 or not (self.contains(a) and self.contains(b)):
            raise ValueError(f"{a} and {b} are not lattice neighbors")
        axis = next(ax for ax in AXES if delta[ax])
        low = a if delta[axis] > 0 else b
        return axis, self.index(low)

    def is_open(self, a: Coord3D, b: Coord3D) -> bool:
        axis, i = self._slot(a, b)
        return self._open[axis][i]

    def open_edge(self, a: Coord3D, b: Coord3D) -> None:
        axis, i = self._slot(a, b)
        self._open[axis][i] = True

    def close_edge(self, a: Coord3D, b: Coord3D) -> None:
        axis, i = self._slot(a, b)
        self._open[axis][i] = False

    def open_neighbors(self, c: Coord3D) -> List[Coord3D]:
        """Neighbors across open edges, in DIRECTIONS order."""
        h = self.half_size
        i = self.index(c)
        out = []
        for axis in AXES:
            flags = self._open[axis]
            if c[axis] < h and flags[i]:
                out.append(add(c, UNITS[axis]))
            if c[axis] > -h and flags[i - self._stride[axis]]:
                out.append(add(c, NEGATIVE_UNITS[axis]))
        return out

    def degree(self, c: Coord3D) -> int:
        h = self.half_size
        i = self.index(c)
        n = 0
        for axis in AXES:
            flags = self._open[axis]
            if c[axis] < h and flags[i]:
                n += 1
            if c[axis] > -h and flags[i - self._stride[axis]]:
                n += 1
        return n

    def open_edge_count(self) -> int:
        return sum(sum(flags) for flags in self._open)

    def edge_state(self) -> bytes:
        return b"".join(bytes(flags) for flags in self._open)

    # ------------------------------------------------------------------
    # Cell state
    # ------------------------------------------------------------------
    def _isolate(self, c: Coord3D) -> None:
        h = self.half_size
        i = self.index(c)
        for axis in AXES:
            if c[axis] < h:
                self._open[axis][i] = False
            if c[axis] > -h:
                self._open[axis][i - self._stride[axis]] = False

    def mark_outside(self, c: Coord3D) -> None:
        self._outside[self.index(c)] = True
        self._isolate(c)

    def fill(self, c: Coord3D) -> None:
        self._solid[self.index(c)] = True
        self._isolate(c)

    def is_outside(self, c: Coord3D) -> bool:
        return self._outside[self.index(c)]

    def is_solid(self, c: Coord3D) -> bool:
        return self._solid[self.index(c)]

    def is_active(self, c: Coord3D) -> bool:
        i = self.index(c)
        return not (self._outside[i] or self._solid[i])

    def active_cells(self) -> List[Coord3D]:
        return [c for c in self.cells() if self.is_active(c)]

    def mark_feature(self, c: Coord3D) -> None:
        if not self.is_active(c):
            raise ValueError(f"feature cell {c} is not active")
        self.features.add(c)

    def is_feature(self, c: Coord3D) -> bool:
        return c in self.features

    def is_boundary(self, c: Coord3D) -> bool:
        """Active cell touching the lattice border, an outside cell or a solid cell."""
        if not self.is_active(c):
            return False
        for d in DIRECTIONS:
            n = add(c, d)
            if not self.contains(n) or not self.is_active(n):
                return True
        return False

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------
    def components(self) -> List[List[Coord3D]]:
        """Connected components of the open-edge graph over active cells.

        Components are listed in discovery order, scanning cells
        lexicographically, so the result is fully deterministic.
        """
        seen = [False] * self.cell_count
        comps: List[List[Coord3D]] = []
        for start in self.cells():
            si = self.index(start)
            if seen[si] or not self.is_active(start):
                continue
            seen[si] = True
            comp = [start]
            q = deque([start])
            while q:
                cur = q.popleft()
                for n in self.open_neighbors(cur):
                    ni = self.index(n)
                    if not seen[ni]:
                        seen[ni] = True
                        comp.append(n)
                        q.append(n)
            comps.append(comp)
        return comps

    def __repr__(self) -> str:
        return f"Maze(half_size={self.half_size}, open_edges={self.open_edge_count()})"
