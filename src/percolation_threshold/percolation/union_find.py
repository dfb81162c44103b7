"""
Weighted quick-union with path compression.

Disjoint-set structure over a fixed universe of node ids 0..M-1. The smaller
tree is always linked under the root of the larger one and paths are halved
on every find, so union/connected run in near-constant amortized time.
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Union-find over a fixed number of nodes.

    Example:
        uf = WeightedQuickUnionUF(10)
        uf.union(1, 2)
        uf.connected(1, 2)   # True
    """

    def __init__(self, n_nodes: int):
        """
        Initialize n_nodes singleton components.

        Args:
            n_nodes: Size of the universe (must be >= 1)
        """
        if n_nodes < 1:
            raise ValueError(f"n_nodes must be >= 1, got {n_nodes}")

        self.n_nodes = int(n_nodes)
        self._parent = np.arange(self.n_nodes, dtype=np.int64)
        self._size = np.ones(self.n_nodes, dtype=np.int64)
        self._count = self.n_nodes

    def __len__(self) -> int:
        return self.n_nodes

    @property
    def count(self) -> int:
        """Number of components."""
        return self._count

    def _validate(self, p: int) -> None:
        # numpy would silently wrap negative ids
        if p < 0 or p >= self.n_nodes:
            raise IndexError(f"node {p} is not between 0 and {self.n_nodes - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the component containing p.

        Args:
            p: Node id

        Returns:
            Root node id
        """
        self._validate(p)
        parent = self._parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]  # path halving
            p = parent[p]
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        """True if p and q are in the same component."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """
        Merge the components containing p and q.

        No-op when they are already connected.
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        # Link smaller tree under larger
        if self._size[root_p] < self._size[root_q]:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        self._count -= 1

    def component_size(self, p: int) -> int:
        """Number of nodes in the component containing p."""
        return int(self._size[self.find(p)])
