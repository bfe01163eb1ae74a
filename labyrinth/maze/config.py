import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .carving import SHAPES
from .cells import Bug
from .errors import ConfigurationError

_FALSY = {"0", "false", "no", ""}


def _flag(val: str) -> bool:
    return val.strip().lower() not in _FALSY


@dataclass
class LevelConfig:
    half_size: int = 9
    x_shift: bool = False
    y_shift: bool = False
    z_shift: bool = False
    percent: float = 0.05
    columns: int = 0
    unit: float = 1.0
    shape: str = "sphere"
    seed: Optional[int] = None

    @property
    def bug(self) -> Bug:
        return (
            1 if self.x_shift else 0,
            1 if self.y_shift else 0,
            1 if self.z_shift else 0,
        )

    def validate(self) -> "LevelConfig":
        if self.half_size < 1:
            raise ConfigurationError(f"half_size must be >= 1 (got {self.half_size})")
        if not 0.0 <= self.percent <= 1.0:
            raise ConfigurationError(f"percent must be within [0, 1] (got {self.percent})")
        if self.columns < 0:
            raise ConfigurationError(f"columns must be >= 0 (got {self.columns})")
        if self.unit <= 0:
            raise ConfigurationError(f"unit must be positive (got {self.unit})")
        if self.shape not in SHAPES:
            raise ConfigurationError(f"unknown shape {self.shape!r}")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "LevelConfig":
        """Build a config from ``LABYRINTH_*`` variables, then explicit overrides.

        Malformed numbers raise ConfigurationError rather than ValueError so the
        CLI and API report them the same way as out-of-range values.
        """
        env = os.environ if environ is None else environ
        cfg = cls()
        env_map = {
            "LABYRINTH_HALF_SIZE": ("half_size", int),
            "LABYRINTH_X_SHIFT": ("x_shift", _flag),
            "LABYRINTH_Y_SHIFT": ("y_shift", _flag),
            "LABYRINTH_Z_SHIFT": ("z_shift", _flag),
            "LABYRINTH_PERCENT": ("percent", float),
            "LABYRINTH_COLUMNS": ("columns", int),
            "LABYRINTH_UNIT": ("unit", float),
            "LABYRINTH_SHAPE": ("shape", str),
            "LABYRINTH_SEED": ("seed", int),
        }
        for env_key, (attr, conv) in env_map.items():
            if env_key in env:
                try:
                    setattr(cfg, attr, conv(env[env_key]))
                except ValueError as exc:
                    raise ConfigurationError(f"{env_key}: {exc}") from exc
        for attr, val in overrides.items():
            if val is not None:
                setattr(cfg, attr, val)
        return cfg


__all__ = ["LevelConfig"]
