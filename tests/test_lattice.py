import pytest

from labyrinth.maze import Maze


def test_lattice_is_sized_eagerly():
    m = Maze(1)
    assert m.size == 3
    assert m.cell_count == 27
    cells = list(m.cells())
    assert len(cells) == 27
    assert cells[0] == (-1, -1, -1) and cells[-1] == (1, 1, 1)
    assert cells == sorted(cells)


def test_index_and_coord_round_trip():
    m = Maze(2)
    seen = set()
    for c in m.cells():
        i = m.index(c)
        assert m.coord(i) == c
        seen.add(i)
    assert seen == set(range(m.cell_count))


def test_neighbors_respect_bounds():
    m = Maze(1)
    assert len(m.neighbors((0, 0, 0))) == 6
    assert len(m.neighbors((-1, -1, -1))) == 3
    assert len(m.neighbors((1, 0, 0))) == 5
    assert not m.contains((2, 0, 0))


def test_candidate_edge_count():
    # 3 axes * n^2 lines * (n-1) edges per line
    assert sum(1 for _ in Maze(1).edges()) == 54
    assert sum(1 for _ in Maze(2).edges()) == 300


def test_open_close_is_symmetric():
    m = Maze(1)
    a, b = (0, 0, 0), (0, 1, 0)
    assert not m.is_open(a, b)
    m.open_edge(b, a)
    assert m.is_open(a, b) and m.is_open(b, a)
    assert m.degree(a) == 1 and m.open_neighbors(b) == [a]
    assert m.open_edge_count() == 1
    m.close_edge(a, b)
    assert m.open_edge_count() == 0


@pytest.mark.parametrize(
    "a,b",
    [((0, 0, 0), (1, 1, 0)), ((0, 0, 0), (0, 0, 0)), ((0, 0, 0), (2, 0, 0)), ((1, 0, 0), (2, 0, 0))],
)
def test_edges_only_between_lattice_neighbors(a, b):
    with pytest.raises(ValueError):
        Maze(1).open_edge(a, b)


def test_fill_and_outside_close_every_edge():
    m = Maze(1)
    for n in m.neighbors((0, 0, 0)):
        m.open_edge((0, 0, 0), n)
    assert m.degree((0, 0, 0)) == 6
    m.fill((0, 0, 0))
    assert m.degree((0, 0, 0)) == 0
    assert m.is_solid((0, 0, 0)) and not m.is_active((0, 0, 0))

    m.open_edge((1, 1, 1), (1, 1, 0))
    m.mark_outside((1, 1, 1))
    assert m.is_outside((1, 1, 1))
    assert m.degree((1, 1, 0)) == 0


def test_components_in_discovery_order():
    m = Maze(1)
    m.open_edge((1, 1, 0), (1, 1, 1))
    m.open_edge((-1, -1, -1), (-1, -1, 0))
    comps = m.components()
    assert len(comps) == 25
    assert comps[0] == [(-1, -1, -1), (-1, -1, 0)]
    assert sorted(comps[-1]) == [(1, 1, 0), (1, 1, 1)]
    m.fill((0, 0, 0))
    assert sum(len(c) for c in m.components()) == 26


def test_boundary_layer():
    m = Maze(1)
    assert not m.is_boundary((0, 0, 0))
    assert m.is_boundary((1, 0, 0))
    m.fill((1, 0, 0))
    assert m.is_boundary((0, 0, 0))
    assert not m.is_boundary((1, 0, 0))


def test_edge_state_snapshot_tracks_changes():
    m = Maze(1)
    before = m.edge_state()
    m.open_edge((0, 0, 0), (0, 0, 1))
    assert m.edge_state() != before
    m.close_edge((0, 0, 0), (0, 0, 1))
    assert m.edge_state() == before


def test_feature_cells_must_be_active():
    m = Maze(1)
    m.mark_feature((0, 0, 0))
    assert m.is_feature((0, 0, 0))
    m.fill((1, 1, 1))
    with pytest.raises(ValueError):
        m.mark_feature((1, 1, 1))
