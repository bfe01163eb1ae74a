import random

from labyrinth.maze import Maze, circle, fill_dead_corridors, fill_smallests, new_kruskal, reduce
from tests.maze_test_utils import run_to_fixpoint


def test_zero_passes_is_a_no_op():
    m = new_kruskal(3, 0.6, rng=random.Random(1))
    before = m.edge_state()
    assert reduce(m, 0) == 0
    assert reduce(m, -2) == 0
    assert m.edge_state() == before


def test_saturated_cube_loses_boundary_squares():
    m = new_kruskal(1, 1.0, rng=random.Random(1))
    assert m.open_edge_count() == 54
    closed = reduce(m, 1)
    assert closed > 0
    # the lexicographically first edge is backed by the +y square
    assert not m.is_open((-1, -1, -1), (0, -1, -1))
    assert m.open_edge_count() == 54 - closed
    assert len(m.components()) == 1


def test_reduce_never_disconnects_or_creates_dead_ends():
    m = new_kruskal(3, 0.6, rng=random.Random(12))
    degrees = {c: m.degree(c) for c in m.cells()}
    edges_before = m.open_edge_count()
    closed = reduce(m, 3)
    assert m.open_edge_count() == edges_before - closed
    assert len(m.components()) == 1
    for c, before in degrees.items():
        if before >= 2:
            assert m.degree(c) >= 2, f"{c} dropped from {before} to {m.degree(c)}"


def test_interior_edges_are_left_alone():
    m = new_kruskal(2, 1.0, rng=random.Random(3))
    reduce(m, 2)
    # the center cell is not on the boundary
    assert m.degree((0, 0, 0)) == 6


def test_final_reduce_keeps_pipeline_invariants():
    m = new_kruskal(4, 0.4, rng=random.Random(31))
    reduce(m, 1)
    circle(m)
    fill_smallests(m)
    run_to_fixpoint(m, fill_dead_corridors)
    reduce(m, 1)
    assert len(m.components()) == 1
    assert all(m.degree(c) >= 2 for c in m.active_cells())
    assert fill_dead_corridors(m) is False
