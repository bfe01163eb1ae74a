"""Pipeline orchestration for level generation.

Runs the structural phases in order on a single Maze, then derives the
geometry handed to the renderer and the physics/entity collaborators:

    new_kruskal -> reduce(1) -> carve -> fill_smallests -> place_columns
    -> eliminate_dead_ends (to fixpoint) -> reduce(1) -> emit

The maze is owned by the builder for the whole run; the returned Level is a
finished result that callers may share freely.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..logging_utils import get_logger
from .carving import carve
from .config import LevelConfig
from .errors import ConfigurationError
from .features import place_columns
from .geometry import Tile, Tube, Vec3, Wall, build_tiles, build_tubes, build_walls, player_position, to_world
from .lattice import Maze
from .metrics import init_metrics
from .pruning import count_filled, eliminate_dead_ends
from .reduce import reduce
from .regions import fill_smallests
from .spanning import new_kruskal

log = get_logger("labyrinth.maze")


@dataclass
class Level:
    config: LevelConfig
    maze: Maze
    walls: List[Wall]
    tiles: List[Tile]
    tubes: List[Tube]
    player_position: Vec3
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def seed(self) -> Optional[int]:
        return self.config.seed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.config.seed,
            "half_size": self.config.half_size,
            "unit": self.config.unit,
            "walls": [w.to_dict() for w in self.walls],
            "tiles": [t.to_dict() for t in self.tiles],
            "tubes": [t.to_dict() for t in self.tubes],
            "player_position": list(self.player_position),
            "metrics": self.metrics,
        }


class LevelBuilder:
    def __init__(self, config: Optional[LevelConfig] = None, **kwargs):
        if config is None:
            config = LevelConfig(**kwargs)
        self.config = config.validate()
        # None draws a fresh seed, recorded so the run can be replayed
        if self.config.seed is None:
            self.config.seed = random.randint(0, 2**31 - 1)
        self._rng = random.Random(self.config.seed)

    def build(self) -> Level:
        """Execute ordered generation phases with per-phase timing in metrics['phase_ms']."""
        cfg = self.config
        metrics: Dict[str, Any] = init_metrics()
        phase_times: Dict[str, int] = {}
        start = time.perf_counter()

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            log.debug(event="phase", phase=label, ms=phase_times[label])
            return r

        maze = _phase("spanning", new_kruskal, cfg.half_size, cfg.percent, cfg.bug, self._rng)
        metrics["cells"] = maze.cell_count
        metrics["tree_edges"] = maze.cell_count - 1
        metrics["loop_edges"] = maze.open_edge_count() - (maze.cell_count - 1)

        metrics["edges_reduced"] += _phase("reduce_initial", reduce, maze, 1)
        metrics["cells_carved"] = _phase("carve", carve, maze, cfg.shape)
        regions, cells = _phase("fill_smallests", fill_smallests, maze)
        metrics["regions_filled"] = regions
        metrics["cells_filled_regions"] = cells
        metrics["columns_placed"] = len(_phase("place_columns", place_columns, maze, cfg.columns, self._rng))

        filled_before = count_filled(maze)
        sweeps = _phase("dead_corridors", eliminate_dead_ends, maze)
        metrics["dead_end_sweeps"] = sweeps
        metrics["dead_ends_filled"] = count_filled(maze) - filled_before

        metrics["edges_reduced"] += _phase("reduce_final", reduce, maze, 1)

        if not maze.active_cells():
            log.warn(event="empty_maze", seed=cfg.seed, half_size=cfg.half_size, percent=cfg.percent)
            raise ConfigurationError("generated maze has no usable room")

        walls = _phase("walls", build_walls, maze)
        tiles = _phase("tiles", build_tiles, maze)
        tubes = _phase("tubes", build_tubes, maze)
        for item in (*walls, *tiles, *tubes):
            item.scale(cfg.unit)
        metrics["walls"] = len(walls)
        metrics["tiles"] = len(tiles)
        metrics["tubes"] = len(tubes)

        metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
        metrics["phase_ms"] = phase_times
        log.info(
            event="level_built",
            seed=cfg.seed,
            half_size=cfg.half_size,
            walls=len(walls),
            tubes=len(tubes),
            runtime_ms=metrics["runtime_ms"],
        )
        return Level(
            config=cfg,
            maze=maze,
            walls=walls,
            tiles=tiles,
            tubes=tubes,
            player_position=to_world(player_position(cfg.half_size), cfg.unit),
            metrics=metrics,
        )


def build_level(config: Optional[LevelConfig] = None, **kwargs) -> Level:
    return LevelBuilder(config, **kwargs).build()
