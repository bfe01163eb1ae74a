"""End-to-end level generation tests.

These run the whole pipeline on small lattices and check the structural
contract handed to the rendering and physics collaborators.
"""

import json

import pytest

from labyrinth.maze import ConfigurationError, LevelBuilder, LevelConfig, build_level, fill_dead_corridors
from tests.maze_test_utils import dead_end_cells


def gen(seed: int = 7, **kw):
    params = dict(half_size=4, percent=0.4, seed=seed)
    params.update(kw)
    return LevelBuilder(LevelConfig(**params)).build()


def test_level_structure_invariants():
    lvl = gen(7)
    m = lvl.maze
    assert m.active_cells(), "level should keep a playable region"
    assert len(m.components()) == 1
    assert dead_end_cells(m) == []
    assert fill_dead_corridors(m) is False
    assert all(m.degree(c) == 0 for c in m.cells() if m.is_outside(c))
    assert lvl.walls and lvl.tubes


def test_full_pipeline_is_deterministic():
    a = gen(2024, x_shift=True, z_shift=True)
    b = gen(2024, x_shift=True, z_shift=True)
    assert a.maze.edge_state() == b.maze.edge_state()
    assert [w.position for w in a.walls] == [w.position for w in b.walls]
    assert a.tiles == b.tiles and a.tubes == b.tubes
    c = gen(2025, x_shift=True, z_shift=True)
    assert a.maze.edge_state() != c.maze.edge_state()


def test_metrics_are_populated():
    lvl = gen(11)
    m = lvl.metrics
    assert m["cells"] == 9 ** 3
    assert m["tree_edges"] == m["cells"] - 1
    assert m["loop_edges"] > 0
    assert m["cells_carved"] > 0
    assert m["walls"] == len(lvl.walls)
    assert m["tiles"] == len(lvl.tiles)
    assert m["tubes"] == len(lvl.tubes)
    assert m["dead_ends_filled"] >= 0
    for phase in ("spanning", "reduce_initial", "carve", "fill_smallests", "dead_corridors", "reduce_final"):
        assert phase in m["phase_ms"]


def test_unit_scales_every_output():
    base = gen(5, unit=1.0)
    scaled = gen(5, unit=2.5)
    assert [tuple(v * 2.5 for v in w.position) for w in base.walls] == [w.position for w in scaled.walls]
    assert [t.width * 2.5 for t in base.tiles] == [t.width for t in scaled.tiles]
    assert [t.length * 2.5 for t in base.tubes] == [t.length for t in scaled.tubes]
    assert scaled.player_position == tuple(v * 2.5 for v in base.player_position)


def test_tree_only_maze_has_no_usable_room():
    with pytest.raises(ConfigurationError, match="no usable room"):
        gen(3, half_size=2, percent=0.0)


def test_columns_survive_on_a_tree():
    lvl = gen(3, half_size=3, percent=0.0, columns=3)
    m = lvl.maze
    assert lvl.metrics["columns_placed"] == 3
    assert len(m.features) == 3
    assert all(m.is_active(c) for c in m.features)
    # only feature cells may be dead ends on a pure tree
    assert all(m.is_feature(c) for c in m.active_cells() if m.degree(c) == 1)
    assert len(m.components()) == 1


@pytest.mark.parametrize(
    "kw",
    [
        {"half_size": 0},
        {"percent": 1.2},
        {"percent": -0.5},
        {"columns": -1},
        {"unit": 0.0},
        {"shape": "pyramid"},
    ],
)
def test_invalid_configuration_is_rejected(kw):
    with pytest.raises(ConfigurationError):
        LevelBuilder(LevelConfig(**kw))


def test_missing_seed_is_drawn_and_recorded():
    cfg = LevelConfig(half_size=3, percent=0.5)
    lvl = LevelBuilder(cfg).build()
    assert isinstance(lvl.seed, int)
    again = build_level(LevelConfig(half_size=3, percent=0.5, seed=lvl.seed))
    assert again.maze.edge_state() == lvl.maze.edge_state()


def test_level_serializes_to_json():
    lvl = gen(13, half_size=3, percent=0.5)
    payload = json.loads(json.dumps(lvl.to_dict()))
    assert payload["seed"] == 13
    assert len(payload["walls"]) == len(lvl.walls)
    assert set(payload["walls"][0]) == {"position", "color"}
    assert set(payload["tubes"][0]) == {"position", "axis", "length"}
    assert payload["player_position"] == list(lvl.player_position)


def test_config_from_env(monkeypatch):
    env = {
        "LABYRINTH_HALF_SIZE": "5",
        "LABYRINTH_PERCENT": "0.25",
        "LABYRINTH_X_SHIFT": "yes",
        "LABYRINTH_Z_SHIFT": "0",
        "LABYRINTH_SEED": "77",
    }
    cfg = LevelConfig.from_env(env, percent=0.5)
    assert cfg.half_size == 5
    assert cfg.percent == 0.5
    assert cfg.bug == (1, 0, 0)
    assert cfg.seed == 77
    with pytest.raises(ConfigurationError):
        LevelConfig.from_env({"LABYRINTH_HALF_SIZE": "big"})


def test_every_registered_shape_is_a_valid_config():
    from labyrinth.maze import SHAPES

    for shape in SHAPES:
        assert LevelConfig(shape=shape).validate().shape == shape
