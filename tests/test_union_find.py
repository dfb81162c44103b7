"""Tests for the weighted quick-union structure."""

import pytest

from percolation_threshold.percolation.union_find import WeightedQuickUnionUF


class TestConstruction:
    """Tests for initialization."""

    def test_singletons(self):
        """Every node starts in its own component."""
        uf = WeightedQuickUnionUF(5)

        assert len(uf) == 5
        assert uf.count == 5
        for p in range(5):
            assert uf.find(p) == p
            assert uf.component_size(p) == 1

    def test_single_node(self):
        uf = WeightedQuickUnionUF(1)

        assert uf.connected(0, 0)

    @pytest.mark.parametrize('n_nodes', [0, -3])
    def test_invalid_size(self, n_nodes):
        with pytest.raises(ValueError):
            WeightedQuickUnionUF(n_nodes)


class TestUnion:
    """Tests for union and connected."""

    def test_union_connects(self):
        uf = WeightedQuickUnionUF(10)
        uf.union(1, 2)
        uf.union(3, 4)

        assert uf.connected(1, 2)
        assert uf.connected(2, 1)
        assert not uf.connected(1, 3)
        assert uf.count == 8

    def test_transitive(self):
        uf = WeightedQuickUnionUF(10)
        uf.union(1, 2)
        uf.union(3, 4)
        uf.union(2, 3)

        assert uf.connected(1, 4)
        assert uf.component_size(4) == 4

    def test_repeated_union_is_noop(self):
        """Unioning an already-connected pair changes nothing."""
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.union(0, 1)
        uf.union(1, 0)

        assert uf.count == 3
        assert uf.component_size(0) == 2

    def test_smaller_tree_goes_under_larger(self):
        uf = WeightedQuickUnionUF(6)
        uf.union(0, 1)
        uf.union(0, 2)
        root = uf.find(0)
        uf.union(5, 0)

        assert uf.find(5) == root

    def test_chain_of_unions(self):
        """Long chains still resolve to a single root."""
        n = 1000
        uf = WeightedQuickUnionUF(n)
        for p in range(n - 1):
            uf.union(p, p + 1)

        assert uf.count == 1
        assert uf.connected(0, n - 1)
        assert len({uf.find(p) for p in range(n)}) == 1


class TestBounds:
    """Out-of-range node ids."""

    @pytest.mark.parametrize('p', [-1, 5, 100])
    def test_find_out_of_range(self, p):
        uf = WeightedQuickUnionUF(5)

        with pytest.raises(IndexError):
            uf.find(p)

    def test_union_out_of_range(self):
        uf = WeightedQuickUnionUF(5)

        with pytest.raises(IndexError):
            uf.union(0, 5)
        with pytest.raises(IndexError):
            uf.connected(-1, 0)
