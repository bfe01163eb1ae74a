import time

import pytest

from labyrinth.maze import LevelBuilder, LevelConfig

# Guardrail against large regressions, not a micro-benchmark.
# Thresholds are generous; adjust if CI hardware differs significantly.


@pytest.mark.performance
def test_largest_api_level_builds_quickly():
    start = time.perf_counter()
    lvl = LevelBuilder(LevelConfig(half_size=16, seed=1)).build()
    elapsed = time.perf_counter() - start
    assert lvl.walls
    assert lvl.metrics["phase_ms"]["dead_corridors"] < 3000, lvl.metrics["phase_ms"]
    assert elapsed < 10.0, f"half_size=16 took {elapsed:.2f}s"
