from typing import List


class DisjointSet:
    """Union-find over integer ids 0..count-1 (path halving, union by rank)."""

    __slots__ = ("parent", "rank", "sets")

    def __init__(self, count: int):
        self.parent: List[int] = list(range(count))
        self.rank: List[int] = [0] * count
        self.sets = count

    def find(self, a: int) -> int:
        parent = self.parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        self.sets -= 1
        return True
