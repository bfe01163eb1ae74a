"""Public maze package interface.

Generation stages (leaf first): lattice, spanning construction, carving,
region cleanup, dead-end elimination, reduction, geometry emission. The
pipeline module wires them together into a Level.
"""

from .carving import SHAPES, carve, circle, cylinder
from .cells import DIRECTIONS, Coord3D
from .colors import wall_color
from .config import LevelConfig
from .errors import ConfigurationError, LabyrinthError
from .features import place_columns
from .geometry import Tile, Tube, Wall, build_colors, build_tiles, build_tubes, build_walls, player_position, to_world
from .lattice import Maze
from .pipeline import Level, LevelBuilder, build_level
from .pruning import eliminate_dead_ends, fill_dead_corridors
from .reduce import reduce
from .regions import fill_smallests
from .spanning import new_kruskal

__all__ = [
    "Maze",
    "Coord3D",
    "DIRECTIONS",
    "LevelConfig",
    "Level",
    "LevelBuilder",
    "build_level",
    "new_kruskal",
    "reduce",
    "circle",
    "cylinder",
    "carve",
    "SHAPES",
    "fill_smallests",
    "fill_dead_corridors",
    "eliminate_dead_ends",
    "place_columns",
    "build_colors",
    "build_walls",
    "build_tiles",
    "build_tubes",
    "player_position",
    "to_world",
    "wall_color",
    "Wall",
    "Tile",
    "Tube",
    "ConfigurationError",
    "LabyrinthError",
]
