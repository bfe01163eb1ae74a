from labyrinth.maze.union_find import DisjointSet


def test_union_merges_once():
    ds = DisjointSet(5)
    assert ds.union(0, 1) is True
    assert ds.union(1, 0) is False
    assert ds.find(0) == ds.find(1)
    assert ds.sets == 4


def test_chain_of_unions_collapses_to_one_set():
    ds = DisjointSet(100)
    for i in range(99):
        assert ds.union(i, i + 1)
    root = ds.find(0)
    assert all(ds.find(i) == root for i in range(100))
    assert ds.sets == 1
    assert not ds.union(0, 99)


def test_disjoint_groups_stay_apart():
    ds = DisjointSet(6)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(4, 5)
    ds.union(1, 3)
    assert ds.find(0) == ds.find(2)
    assert ds.find(0) != ds.find(4)
    assert ds.sets == 2
