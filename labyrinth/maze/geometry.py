"""Renderable outputs derived from a finished maze.

All emitters work in a doubled "voxel" grid: cell ``c`` sits at ``2c`` and the
face between two neighbors at ``a + b``. Nothing here mutates the maze.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from .cells import AXES, DIRECTIONS, Color, Coord3D, Voxel, add, axis_of, to_voxel, unit
from .colors import wall_color
from .lattice import Maze

Vec3 = Tuple[float, float, float]

# lattice cells between the spawn point and the -x boundary
PLAYER_DISTANCE = 3


def to_world(voxel: Voxel | Vec3, unit_scale: float) -> Vec3:
    return (voxel[0] * unit_scale, voxel[1] * unit_scale, voxel[2] * unit_scale)


@dataclass
class Wall:
    position: Vec3
    color: Color

    def scale(self, k: float) -> None:
        self.position = to_world(self.position, k)

    def to_dict(self):
        return {"position": list(self.position), "color": list(self.color)}


@dataclass
class Tile:
    position: Vec3
    width: float
    height: float

    def scale(self, k: float) -> None:
        self.position = to_world(self.position, k)
        self.width *= k
        self.height *= k

    def to_dict(self):
        return {"position": list(self.position), "width": self.width, "height": self.height}


@dataclass
class Tube:
    position: Vec3
    axis: int
    length: float

    def scale(self, k: float) -> None:
        self.position = to_world(self.position, k)
        self.length *= k

    def to_dict(self):
        return {"position": list(self.position), "axis": self.axis, "length": self.length}


def _closed_faces(maze: Maze, c: Coord3D) -> List[Coord3D]:
    opened = set(maze.open_neighbors(c))
    return [d for d in DIRECTIONS if add(c, d) not in opened]


def build_colors(maze: Maze) -> List[Tuple[Voxel, Color]]:
    """Solid faces around the active structure with their colors.

    A closed face shared by two active cells is emitted once.
    """
    rim = (2 * maze.half_size + 1) * math.sqrt(3)
    seen: Set[Voxel] = set()
    out: List[Tuple[Voxel, Color]] = []
    for c in maze.active_cells():
        base = to_voxel(c)
        for d in _closed_faces(maze, c):
            wall = add(base, d)
            if wall in seen:
                continue
            seen.add(wall)
            depth = math.sqrt(wall[0] ** 2 + wall[1] ** 2 + wall[2] ** 2) / rim
            out.append((wall, wall_color(axis_of(d), depth)))
    return out


def build_walls(maze: Maze) -> List[Wall]:
    return [Wall(position=(float(v[0]), float(v[1]), float(v[2])), color=col) for v, col in build_colors(maze)]


def build_tiles(maze: Maze) -> List[Tile]:
    """Floor faces merged into rectangles, layer by layer.

    Floors are the closed ``-y`` faces of active cells. Within one layer the
    (x, z) cells are covered greedily: extend along z first, then widen along
    x while every column of the strip is still free.
    """
    down = (0, -1, 0)
    layers: Dict[int, Set[Tuple[int, int]]] = {}
    for c in maze.active_cells():
        if down in _closed_faces(maze, c):
            layers.setdefault(c[1], set()).add((c[0], c[2]))

    tiles: List[Tile] = []
    for y in sorted(layers):
        free = layers[y]
        for x, z in sorted(free):
            if (x, z) not in free:
                continue
            lz = 1
            while (x, z + lz) in free:
                lz += 1
            lx = 1
            while all((x + lx, z + k) in free for k in range(lz)):
                lx += 1
            for i in range(lx):
                for k in range(lz):
                    free.discard((x + i, z + k))
            tiles.append(
                Tile(
                    position=(float(2 * x + lx - 1), float(2 * y - 1), float(2 * z + lz - 1)),
                    width=float(2 * lx),
                    height=float(2 * lz),
                )
            )
    return tiles


def build_tubes(maze: Maze) -> List[Tube]:
    """One tube per maximal straight run of open edges along an axis."""
    tubes: List[Tube] = []
    for c in maze.active_cells():
        for axis in AXES:
            step = unit(axis)
            back = add(c, unit(axis, -1))
            if maze.contains(back) and maze.is_open(back, c):
                continue  # not the start of a run
            run = 0
            cur = c
            nxt = add(cur, step)
            while maze.contains(nxt) and maze.is_open(cur, nxt):
                run += 1
                cur, nxt = nxt, add(nxt, step)
            if not run:
                continue
            center = list(to_voxel(c))
            center[axis] += run
            tubes.append(Tube(position=(float(center[0]), float(center[1]), float(center[2])), axis=axis, length=float(2 * run)))
    return tubes


def player_position(half_size: int) -> Voxel:
    """Spawn point PLAYER_DISTANCE cells beyond the -x face, one cell above and behind the center line."""
    return to_voxel((-(half_size + PLAYER_DISTANCE), 1, 1))
