"""
project: Labyrinth
module: logging_utils.py
License: MIT

Structured event logging for the generator and its entry points.

Each event is one line: ``level=info ts=... event=level_built seed=42`` or,
in JSON mode, a compact object with the same keys. Coordinates and colors
render as comma-joined components (``position=-8,2,2``) so phase logs stay
greppable.

Usage:
    from labyrinth.logging_utils import get_logger
    log = get_logger("labyrinth.maze")
    log.info(event="level_built", seed=42, walls=310)

Environment:
    LABYRINTH_LOG_LEVEL  debug|info|warn|error (default info)
    LABYRINTH_LOG_JSON   1/true/yes/on for JSON lines

``configure()`` overrides both at runtime (the CLI's ``--log-level``).
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "yes", "on")

CURRENT_LEVEL = LEVELS.get(os.getenv("LABYRINTH_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("LABYRINTH_LOG_JSON", "0").lower() in _TRUTHY


def configure(level: str | None = None, json_mode: bool | None = None) -> None:
    global CURRENT_LEVEL, JSON_MODE
    if level is not None:
        try:
            CURRENT_LEVEL = LEVELS[level.lower()]
        except KeyError:
            raise ValueError(f"unknown log level {level!r}") from None
    if json_mode is not None:
        JSON_MODE = json_mode


def _render(v) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        return f"{v:g}"
    if isinstance(v, (tuple, list)):
        return ",".join(_render(x) for x in v)
    return str(v).replace(" ", "_")


def _format(level: str, fields: dict) -> str:
    ts = int(time.time())
    if JSON_MODE:
        rec = {"level": level, "ts": ts}
        rec.update(fields)
        return json.dumps(rec, separators=(",", ":"), default=str)
    head = f"level={level} ts={ts}"
    return " ".join([head, *(f"{k}={_render(v)}" for k, v in fields.items())])


class _Logger:
    def __init__(self, name: str):
        self.name = name

    def _log(self, lvl: str, fields: dict):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields = {k: v for k, v in fields.items() if v is not None}
        fields.setdefault("logger", self.name)
        stream = sys.stderr if lvl == "error" else sys.stdout
        print(_format(lvl, fields), file=stream)

    def debug(self, **fields):
        self._log("debug", fields)

    def info(self, **fields):
        self._log("info", fields)

    def warn(self, **fields):
        self._log("warn", fields)

    def error(self, **fields):
        self._log("error", fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("labyrinth")
