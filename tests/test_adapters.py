import unittest
import warnings

import networkx as nx
import numpy as np
import polars as pl
import pytest
import scipy.sparse as sp

from cliquenet import adapters
from cliquenet.adapters import manager
from cliquenet.adapters.dataframe_adapter import adjacency_frame, to_dataframes
from cliquenet.adapters.networkx import NetworkXAdapter, to_nx
from cliquenet.adapters.scipy_adapter import SparseAdapter, adjacency_matrix, incidence_matrix
from cliquenet.core.graph import CompleteGraph


class TestNetworkXAdapter(unittest.TestCase):

    def setUp(self):
        self.G = CompleteGraph(5)

    def test_isomorphic_to_networkx_complete_graph(self):
        nxG = to_nx(self.G)
        self.assertIsInstance(nxG, nx.Graph)
        self.assertTrue(nx.is_isomorphic(nxG, nx.complete_graph(5)))
        self.assertEqual(sorted(nxG.nodes), list(range(5)))

    def test_edge_ids_preserved(self):
        nxG = to_nx(self.G)
        for u, v, d in nxG.edges(data=True):
            self.assertEqual(d["edge_id"], self.G.find_edge(u, v)[1])
        bare = to_nx(self.G, edge_attr=None)
        self.assertTrue(all(not d for _, _, d in bare.edges(data=True)))

    def test_neighbors_agree(self):
        nxG = to_nx(self.G)
        for v in range(5):
            self.assertEqual(sorted(nxG.neighbors(v)), list(self.G.vertices_from_vertex(v)))

    def test_adapter_class(self):
        self.assertEqual(NetworkXAdapter().export(self.G).number_of_edges(), 10)
        self.assertEqual(manager.get_adapter("networkx").export(self.G).number_of_nodes(), 5)


class TestProxy(unittest.TestCase):

    def test_nx_proxy_runs_algorithms(self):
        G = CompleteGraph(6)
        self.assertEqual(G.nx.shortest_path_length(0, 5), 1)
        self.assertEqual(G.nx.number_of_edges(), 15)

    def test_cache_reused_until_resize(self):
        G = CompleteGraph(4)
        first = manager.ensure_materialized("networkx", G)
        again = manager.ensure_materialized("networkx", G)
        self.assertIs(first["graph"], again["graph"])
        G.resize(7)
        rebuilt = manager.ensure_materialized("networkx", G)
        self.assertIsNot(rebuilt["graph"], first["graph"])
        self.assertEqual(rebuilt["graph"].number_of_nodes(), 7)
        self.assertEqual(G.nx.number_of_edges(), 21)

    def test_resize_to_same_count_keeps_cache(self):
        G = CompleteGraph(4)
        first = manager.ensure_materialized("networkx", G)
        G.resize(4)
        self.assertIs(manager.ensure_materialized("networkx", G)["graph"], first["graph"])

    def test_unknown_backend(self):
        G = CompleteGraph(3)
        with self.assertRaises(ValueError):
            manager.get_proxy("graphviz", G)
        with self.assertRaises(ValueError):
            manager.get_adapter("graphviz")


class TestDataFrames(unittest.TestCase):

    def test_tables(self):
        dfs = to_dataframes(CompleteGraph(4))
        self.assertEqual(dfs["nodes"]["vertex_id"].to_list(), [0, 1, 2, 3])
        edges = dfs["edges"]
        self.assertEqual(edges.columns, ["edge_id", "source", "target"])
        self.assertEqual(edges["edge_id"].to_list(), list(range(6)))
        self.assertEqual(edges["source"].to_list(), [0, 0, 0, 1, 1, 2])
        self.assertEqual(edges["target"].to_list(), [1, 2, 3, 2, 3, 3])

    def test_empty_graph(self):
        dfs = to_dataframes(CompleteGraph(0))
        self.assertEqual(dfs["nodes"].height, 0)
        self.assertEqual(dfs["edges"].height, 0)

    def test_adjacency_frame_matches_cursor(self):
        G = CompleteGraph(6)
        for v in range(6):
            df = adjacency_frame(G, v)
            self.assertIsInstance(df, pl.DataFrame)
            expected = list(G.adjacencies_from_vertex(v))
            self.assertEqual(list(zip(df["vertex"].to_list(), df["edge"].to_list())), expected)
            self.assertEqual(df["rank"].to_list(), list(range(5)))


class TestSparse(unittest.TestCase):

    def setUp(self):
        self.G = CompleteGraph(5)

    def test_incidence(self):
        B = incidence_matrix(self.G)
        self.assertTrue(sp.issparse(B))
        self.assertEqual(B.shape, (5, 10))
        dense = B.toarray()
        np.testing.assert_array_equal(dense.sum(axis=0), np.full(10, 2.0))
        np.testing.assert_array_equal(dense.sum(axis=1), np.full(5, 4.0))
        for e in range(10):
            v0, v1 = self.G.endpoints(e)
            self.assertEqual(set(np.flatnonzero(dense[:, e]).tolist()), {v0, v1})

    def test_adjacency(self):
        A = adjacency_matrix(self.G).toarray()
        np.testing.assert_array_equal(A, np.ones((5, 5)) - np.eye(5))
        ids = adjacency_matrix(self.G, edge_ids=True).toarray()
        for u in range(5):
            for v in range(5):
                found, e = self.G.find_edge(u, v)
                self.assertEqual(ids[u, v], e + 1 if found else 0)

    def test_adapter_kinds(self):
        self.assertEqual(SparseAdapter().export(self.G, kind="adjacency").shape, (5, 5))
        with self.assertRaises(ValueError):
            SparseAdapter().export(self.G, kind="laplacian")


def test_large_conversion_warns():
    G = CompleteGraph(50)
    with pytest.warns(RuntimeWarning, match="materializes 1225 edges"):
        to_dataframes(G, max_edges=100)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        to_dataframes(G, max_edges=None)


def test_registry():
    backends = adapters.available_backends()
    assert backends["networkx"] is True
    assert backends["polars"] is True
    assert backends["scipy"] is True
    assert adapters.load_adapter("polars").export(CompleteGraph(3))["edges"].height == 3
    with pytest.raises(ValueError):
        adapters.load_adapter("graphviz")


def test_igraph_backend():
    ig = pytest.importorskip("igraph")
    from cliquenet.adapters.igraph import to_ig

    G = CompleteGraph(6)
    igG = to_ig(G)
    assert isinstance(igG, ig.Graph)
    assert igG.vcount() == 6
    assert igG.ecount() == 15
    for edge in igG.es:
        assert edge["eid"] == edge.index
        assert edge.tuple == G.endpoints(edge.index)
    assert G.ig.ecount() == 15


def test_install_hints_name_declared_extras():
    tomllib = pytest.importorskip("tomllib")
    from pathlib import Path

    with open(Path(__file__).resolve().parents[1] / "pyproject.toml", "rb") as fh:
        extras = tomllib.load(fh)["project"]["optional-dependencies"]
    for name in adapters.available_backends():
        assert name in extras, name
