"""
project: Labyrinth
module: level_api.py
License: MIT

Level generation API routes.

Levels are generated on demand from query parameters and served as JSON
(walls, tiles, tubes, player spawn, metrics). Generation is deterministic per
configuration, so finished levels are kept in a small in-process cache.
"""

import hashlib
import random
import threading

from flask import Blueprint, current_app, jsonify, request

from labyrinth.maze import LevelBuilder, LevelConfig
from labyrinth.maze.errors import ConfigurationError

bp_level = Blueprint("level", __name__)

SEED_MODULUS = 2**31 - 1

# In-process LRU cache config-key -> Level, least recently used first.
# Lock-guarded because the dev server may handle requests on several threads.
_level_cache = {}
_level_cache_lock = threading.Lock()
_LEVEL_CACHE_MAX = 8  # small LRU cap


def _coerce_seed(raw):
    """Convert provided seed (int or str) into a bounded non-negative int."""
    if raw is None:
        return random.randint(1, 1_000_000)
    s = str(raw).strip()
    if not s:
        return random.randint(1, 1_000_000)
    if s.lstrip("-").isdigit():
        return int(s) % SEED_MODULUS
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % SEED_MODULUS


def _flag(raw) -> bool:
    return str(raw).strip().lower() in ("1", "true", "yes", "on")


def _shift(args, cfg, name: str) -> bool:
    if name in args:
        return _flag(args[name])
    return bool(cfg[f"LABYRINTH_{name.upper()}"])


def _config_from_request() -> LevelConfig:
    cfg = current_app.config
    args = request.args
    try:
        level_cfg = LevelConfig(
            half_size=int(args.get("half_size", cfg["LABYRINTH_HALF_SIZE"])),
            x_shift=_shift(args, cfg, "x_shift"),
            y_shift=_shift(args, cfg, "y_shift"),
            z_shift=_shift(args, cfg, "z_shift"),
            percent=float(args.get("percent", cfg["LABYRINTH_PERCENT"])),
            columns=int(args.get("columns", cfg["LABYRINTH_COLUMNS"])),
            unit=float(args.get("unit", cfg["LABYRINTH_UNIT"])),
            shape=args.get("shape", cfg["LABYRINTH_SHAPE"]),
            seed=_coerce_seed(args.get("seed", cfg["LABYRINTH_SEED"])),
        )
    except ValueError as exc:
        raise ConfigurationError(f"invalid parameter: {exc}") from exc
    if level_cfg.half_size > cfg["LABYRINTH_MAX_HALF_SIZE"]:
        raise ConfigurationError(
            f"half_size {level_cfg.half_size} exceeds limit {cfg['LABYRINTH_MAX_HALF_SIZE']}"
        )
    return level_cfg.validate()


def _cache_key(c: LevelConfig):
    return (c.seed, c.half_size, c.bug, c.percent, c.columns, c.unit, c.shape)


def get_cached_level(level_cfg: LevelConfig):
    if current_app.config.get("LABYRINTH_DISABLE_CACHE"):
        return LevelBuilder(level_cfg).build()
    key = _cache_key(level_cfg)
    with _level_cache_lock:
        level = _level_cache.pop(key, None)
        if level is not None:
            # reinsert so eviction drops the least recently used entry
            _level_cache[key] = level
            return level
    level = LevelBuilder(level_cfg).build()
    with _level_cache_lock:
        _level_cache[key] = level
        if len(_level_cache) > _LEVEL_CACHE_MAX:
            first_key = next(iter(_level_cache.keys()))
            if first_key != key:
                _level_cache.pop(first_key, None)
    return level


def clear_cache():
    with _level_cache_lock:
        _level_cache.clear()


@bp_level.route("/api/level")
def level():
    """
    Generate (or fetch cached) level for the query parameters.
    Response: Level.to_dict() -> { seed, half_size, unit, walls, tiles, tubes, player_position, metrics }
    """
    return jsonify(get_cached_level(_config_from_request()).to_dict())


@bp_level.route("/api/level/metrics")
def level_metrics():
    """Response: { "seed": <int>, "metrics": {...} }"""
    lvl = get_cached_level(_config_from_request())
    return jsonify({"seed": lvl.seed, "metrics": lvl.metrics})
