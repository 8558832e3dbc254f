import logging
from enum import Enum

import numpy as np

from tiles import neighbors, to_index

log = logging.getLogger(__name__)

EMPTY = -1  # parent of a cell this player has not claimed


class EdgePolicy(Enum):
    """How game_over compares the roots recorded for the top and bottom rows"""

    # roots exactly as they were when the edge cell was played
    LITERAL = "literal"
    # every recorded root looked up again with find
    RESOLVE = "resolve"


class UnionFind:
    """Weighted quick union with full path compression over one player's cells.

    Cells start unclaimed and join the forest only when played. Roots of
    cells played on the first and last rows are kept in the top and
    bottom sets so game_over can tell when the player connects them.
    """

    def __init__(self, n: int, policy: EdgePolicy = EdgePolicy.RESOLVE):
        if n < 0:
            raise ValueError(f"number of cells must be >= 0, got {n}")
        self.parent = np.full(n, EMPTY, dtype=np.int64)
        self.weight = np.ones(n, dtype=np.int64)  # subtree size at roots
        self.islands = 0
        self.top: set[int] = set()
        self.bottom: set[int] = set()
        self.policy = policy

    def __len__(self) -> int:
        return len(self.parent)

    def validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise ValueError(f"index {p} is not between 0 and {n - 1}")

    def is_empty(self, p: int) -> bool:
        self.validate(p)
        return bool(self.parent[p] == EMPTY)

    def number_of_islands(self) -> int:
        return self.islands

    def find(self, p: int) -> int:
        self.validate(p)
        parent = self.parent
        if parent[p] == EMPTY:
            raise ValueError(f"index {p} has not been played")
        root = p = int(p)
        while parent[root] != root:
            root = int(parent[root])
        # point everything on the path straight at the root
        while p != root:
            next_p = int(parent[p])
            parent[p] = root
            p = next_p
        return root

    def connected(self, p: int, q: int) -> bool:
        if self.is_empty(p) or self.is_empty(q):
            return False
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        # attach the lighter tree; on a tie q's root goes under p's
        weight = self.weight
        if weight[root_p] < weight[root_q]:
            self.parent[root_p] = root_q
            weight[root_q] += weight[root_p]
        else:
            self.parent[root_q] = root_p
            weight[root_p] += weight[root_q]
        self.islands -= 1
        return True

    def process_tile(self, row: int, col: int, size: int):
        """Claim (row, col) and merge it with the player's neighboring cells"""
        if not (0 <= row < size and 0 <= col < size):
            raise ValueError(f"({row}, {col}) is outside a {size}x{size} board")
        index = to_index(row, col, size)
        self.validate(index)
        n = len(self.parent)
        self.parent[index] = index
        self.weight[index] = 1
        self.islands += 1
        for neighbor in neighbors(row, col, size):
            if 0 <= neighbor < n and not self.is_empty(neighbor):
                if self.union(neighbor, index):
                    log.debug("merged %d into island of %d", index, neighbor)

        root = self.find(index)
        if row == 0:
            self.top.add(root)
        if row == size - 1:
            self.bottom.add(root)

    def game_over(self) -> bool:
        if not self.top or not self.bottom:
            return False
        if self.policy is EdgePolicy.RESOLVE:
            top = {self.find(root) for root in self.top}
            bottom = {self.find(root) for root in self.bottom}
        else:
            top, bottom = self.top, self.bottom
        return not top.isdisjoint(bottom)
