import unittest

import numpy as np
import pytest

from cliquenet import config
from cliquenet.core import _indexing as ix
from cliquenet.utils.validation import ContractViolation


class TestScalarBijection(unittest.TestCase):

    def test_edge_counts(self):
        self.assertEqual(ix.number_of_edges(0), 0)
        self.assertEqual(ix.number_of_edges(1), 0)
        for n in range(2, 40):
            self.assertEqual(ix.number_of_edges(n), n * (n - 1) // 2)

    def test_three_vertices(self):
        self.assertEqual(ix.find_edge(3, 0, 1), (True, 0))
        self.assertEqual(ix.find_edge(3, 0, 2), (True, 1))
        self.assertEqual(ix.find_edge(3, 1, 2), (True, 2))
        self.assertEqual(ix.vertices_of_edge(3, 0), (0, 1))
        self.assertEqual(ix.vertices_of_edge(3, 2), (1, 2))

    def test_find_edge_is_symmetric(self):
        n = 9
        for v0 in range(n):
            for v1 in range(n):
                if v0 != v1:
                    self.assertEqual(ix.find_edge(n, v0, v1), ix.find_edge(n, v1, v0))

    def test_self_loop_has_no_edge(self):
        for v in range(6):
            self.assertEqual(ix.find_edge(6, v, v), (False, 0))

    def test_round_trip_and_bijectivity(self):
        for n in range(2, 30):
            seen = []
            for v0 in range(n):
                for v1 in range(v0 + 1, n):
                    found, e = ix.find_edge(n, v0, v1)
                    self.assertTrue(found)
                    self.assertEqual(ix.vertices_of_edge(n, e), (v0, v1))
                    seen.append(e)
            self.assertEqual(seen, list(range(ix.number_of_edges(n))))

    def test_forward_formula_matches_cumulative_count(self):
        n = 11
        for v0 in range(n - 1):
            for v1 in range(v0 + 1, n):
                self.assertEqual(
                    ix.edge_of_strictly_increasing_pair(n, v0, v1),
                    ix.pairs_before(n, v0) + (v1 - v0 - 1),
                )

    def test_rank_mapping(self):
        for v in range(5):
            neighbors = [ix.vertex_of_rank(v, j) for j in range(4)]
            self.assertEqual(neighbors, [w for w in range(5) if w != v])
            for j, w in enumerate(neighbors):
                self.assertEqual(ix.rank_of_vertex(v, w), j)

    def test_contracts(self):
        with self.assertRaises(ContractViolation):
            ix.edge_of_strictly_increasing_pair(4, 2, 1)
        with self.assertRaises(ContractViolation):
            ix.edge_of_strictly_increasing_pair(4, 1, 4)
        with self.assertRaises(ContractViolation):
            ix.vertices_of_edge(4, 6)
        with self.assertRaises(ContractViolation):
            ix.vertices_of_edge(4, -1)
        with self.assertRaises(ContractViolation):
            ix.find_edge(4, 0, 4)
        with self.assertRaises(ContractViolation):
            ix.rank_of_vertex(2, 2)
        # contract violations are assertion failures
        self.assertTrue(issubclass(ContractViolation, AssertionError))

    def test_unchecked_mode_skips_verification(self):
        with config.checked_mode(False):
            # garbage in, garbage out, but no ContractViolation
            self.assertIsInstance(ix.edge_of_strictly_increasing_pair(4, 2, 1), int)
            self.assertEqual(ix.find_edge(4, 4, 4), (False, 0))


@pytest.mark.parametrize("n", [10**6, 10**9 + 7, 2**40, 3 * 2**60 + 1])
def test_bin_boundaries_for_large_n(n):
    # the first and last edge of each probed bin, where a float estimate drifts
    for v0 in (0, 1, 2, n // 3, n // 2, n - 3, n - 2):
        first = ix.pairs_before(n, v0)
        assert ix.vertices_of_edge(n, first) == (v0, v0 + 1)
        if v0 > 0:
            assert ix.vertices_of_edge(n, first - 1) == (v0 - 1, n - 1)
    last = ix.number_of_edges(n) - 1
    assert ix.vertices_of_edge(n, last) == (n - 2, n - 1)


class TestArrayBijection(unittest.TestCase):

    def test_matches_scalar(self):
        for n in (2, 3, 7, 50):
            m = ix.number_of_edges(n)
            v0, v1 = ix.endpoints_of_edges(n, np.arange(m))
            expected = [ix.vertices_of_edge(n, e) for e in range(m)]
            self.assertEqual(list(zip(v0.tolist(), v1.tolist())), expected)
            np.testing.assert_array_equal(ix.edge_indices(n, v0, v1), np.arange(m))
            # either endpoint order
            np.testing.assert_array_equal(ix.edge_indices(n, v1, v0), np.arange(m))

    def test_empty_input(self):
        v0, v1 = ix.endpoints_of_edges(5, np.array([], dtype=np.int64))
        self.assertEqual(v0.size, 0)
        self.assertEqual(v1.size, 0)
        self.assertEqual(ix.edge_indices(5, [], []).size, 0)

    def test_contracts(self):
        with self.assertRaises(ContractViolation):
            ix.endpoints_of_edges(4, [0, 6])
        with self.assertRaises(ContractViolation):
            ix.edge_indices(4, [0, 1], [1, 1])
        with self.assertRaises(ContractViolation):
            ix.edge_indices(4, [0], [4])

    def test_overflow_guard(self):
        with self.assertRaises(OverflowError):
            ix.endpoints_of_edges(ix.MAX_ARRAY_VERTICES, [0])
        with self.assertRaises(OverflowError):
            ix.edge_indices(ix.MAX_ARRAY_VERTICES, [0], [1])


def test_array_bin_boundaries_near_limit():
    n = ix.MAX_ARRAY_VERTICES - 1
    probes = [0, 1, 2, 1000, n // 2, n - 100, n - 3, n - 2]
    firsts = np.array([ix.pairs_before(n, v) for v in probes], dtype=np.int64)
    lasts = firsts[1:] - 1
    v0, v1 = ix.endpoints_of_edges(n, firsts)
    assert v0.tolist() == probes
    assert v1.tolist() == [v + 1 for v in probes]
    v0, v1 = ix.endpoints_of_edges(n, lasts)
    assert v0.tolist() == [v - 1 for v in probes[1:]]
    assert v1.tolist() == [n - 1] * len(lasts)
    for e in [int(x) for x in lasts] + [ix.number_of_edges(n) - 1]:
        a, b = ix.endpoints_of_edges(n, [e])
        assert ix.vertices_of_edge(n, e) == (int(a[0]), int(b[0]))


@pytest.mark.slow
def test_exhaustive_round_trip_medium_n():
    n = 400
    m = ix.number_of_edges(n)
    v0, v1 = ix.endpoints_of_edges(n, np.arange(m))
    assert np.all(v0 < v1)
    np.testing.assert_array_equal(ix.edge_indices(n, v0, v1), np.arange(m))


def test_numpy_integer_arguments_are_exact_for_large_n():
    n = 2**33
    lo, hi = np.int64(n // 2), np.int64(n - 1)
    found, edge = ix.find_edge(np.int64(n), lo, hi)
    assert found
    assert (found, edge) == ix.find_edge(n, n // 2, n - 1)
    assert type(edge) is int
    last = ix.number_of_edges(n) - 1
    v0, v1 = ix.vertices_of_edge(n, np.int64(last))
    assert (v0, v1) == (n - 2, n - 1)
    assert type(v0) is int and type(v1) is int
    assert ix.pairs_before(np.int64(n), np.int64(n - 2)) == ix.pairs_before(n, n - 2)
    assert ix.vertex_of_rank(np.int32(5), np.int32(5)) == 6


def test_graph_accepts_numpy_integer_indices():
    from cliquenet.core.graph import CompleteGraph

    G = CompleteGraph(2**33)
    last = G.number_of_edges() - 1
    assert G.endpoints(np.int64(last)) == (2**33 - 2, 2**33 - 1)
    assert G.edge_from_vertex(np.int64(2**33 - 1), np.int64(2**33 - 2)) == last
