# Wall palette. Each face orientation gets its own base color; walls deeper
# inside the sphere are darker so the player can read depth while flying.
from __future__ import annotations

from typing import Dict

from .cells import Color

PALETTE: Dict[int, Color] = {
    0: (0.82, 0.31, 0.27),  # x facing
    1: (0.86, 0.86, 0.82),  # y facing (floors, ceilings)
    2: (0.33, 0.45, 0.74),  # z facing
}
DARKEST = 0.35


def shade(color: Color, light: float) -> Color:
    light = min(max(light, 0.0), 1.0)
    return (
        round(color[0] * light, 4),
        round(color[1] * light, 4),
        round(color[2] * light, 4),
    )


def wall_color(axis: int, depth: float) -> Color:
    """Color of a wall facing ``axis`` at normalized radial ``depth`` (0 center, 1 rim)."""
    depth = min(max(depth, 0.0), 1.0)
    return shade(PALETTE[axis], DARKEST + (1.0 - DARKEST) * depth)
