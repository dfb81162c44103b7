"""
N-by-N site percolation model.

Each site is open or blocked. A full site is an open site connected to the top
row through a chain of open 4-neighbors; the system percolates when some site
in the bottom row is full.

Two virtual nodes reduce the row-to-row question to one connectivity query:
node 0 (TOP) is joined to every open site in the top row and node n*n+1
(BOTTOM) to every open site in the bottom row. Site (row, col), 0-indexed with
(0, 0) in the upper-left corner, is node row*n + col + 1. The grid percolates
iff TOP and BOTTOM are connected.

Fullness is never cached: component membership changes with every later open.
"""

import operator

import numpy as np

from .union_find import WeightedQuickUnionUF


TOP = 0

# render() symbols
BLOCKED_CHAR = '#'
OPEN_CHAR = '.'
FULL_CHAR = 'o'


def check_positive_int(value, name: str) -> int:
    """
    Return value as an int, raising ValueError unless it is a positive integer.

    Accepts Python and numpy integers; floats, strings and bools are rejected.
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    try:
        value = operator.index(value)
    except TypeError:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class PercolationGrid:
    """
    Percolation system on an n-by-n grid, all sites initially blocked.

    Example:
        grid = PercolationGrid(3)
        grid.open(0, 1)
        grid.open(1, 1)
        grid.open(2, 1)
        grid.percolates()   # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with every site blocked.

        Args:
            n: Grid dimension (must be > 0)
        """
        self.n = check_positive_int(n, "Grid size")
        self.bottom = self.n * self.n + 1
        self._states = np.zeros(self.n * self.n + 2, dtype=bool)
        self._n_open = 0
        self._uf = WeightedQuickUnionUF(self.n * self.n + 2)

    def site_index(self, row: int, col: int) -> int:
        """Connectivity node id of site (row, col)."""
        return row * self.n + col + 1

    def _in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.n and 0 <= col < self.n

    def _validate(self, row: int, col: int) -> None:
        if not self._in_range(row, col):
            raise IndexError(
                f"Site ({row}, {col}) is outside the {self.n}x{self.n} grid"
            )

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) and join it to its open neighbors.

        Opening an already open site does nothing.
        """
        self._validate(row, col)
        index = self.site_index(row, col)
        if self._states[index]:
            return

        self._states[index] = True
        self._n_open += 1

        for d_row, d_col in ((-1, 0), (0, 1), (1, 0), (0, -1)):
            nb_row, nb_col = row + d_row, col + d_col
            if self._in_range(nb_row, nb_col) and self._states[self.site_index(nb_row, nb_col)]:
                self._uf.union(index, self.site_index(nb_row, nb_col))

        # 1x1 grid: both apply
        if row == 0:
            self._uf.union(index, TOP)
        if row == self.n - 1:
            self._uf.union(index, self.bottom)

    def is_open(self, row: int, col: int) -> bool:
        """True if site (row, col) is open."""
        self._validate(row, col)
        return bool(self._states[self.site_index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """True if site (row, col) is open and connected to the top row."""
        self._validate(row, col)
        index = self.site_index(row, col)
        if not self._states[index]:
            return False
        return self._uf.connected(TOP, index)

    def number_of_open_sites(self) -> int:
        """Number of open sites."""
        return self._n_open

    def percolates(self) -> bool:
        """True if the top and bottom rows are connected."""
        return self._uf.connected(TOP, self.bottom)

    def render(self) -> str:
        """
        Text picture of the grid, one line per row.

        '#' is a blocked site, '.' an open site that is not full and 'o' a
        full site.
        """
        lines = []
        for row in range(self.n):
            chars = []
            for col in range(self.n):
                if self.is_full(row, col):
                    chars.append(FULL_CHAR)
                elif self.is_open(row, col):
                    chars.append(OPEN_CHAR)
                else:
                    chars.append(BLOCKED_CHAR)
            lines.append(''.join(chars))
        return '\n'.join(lines)
