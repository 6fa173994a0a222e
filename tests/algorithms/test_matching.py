import networkx as nx
import pytest

from augflow.algorithms.base import IterationLimitError, Strategy
from augflow.algorithms.matching import (
    MatchingState,
    augment_matching,
    find_augmenting_path,
    free_vertices,
    initial_matching_state,
    iter_matching,
    matching_pairs,
    max_matching,
)
from augflow.graph.convert import from_networkx
from augflow.graph.digraph import Graph

STRATEGIES = [Strategy.DFS, Strategy.BFS]


def assert_valid_matching(graph: Graph, matched: Graph) -> None:
    """Every matched edge is an input edge and every vertex has M-degree <= 1."""
    undirected = graph.symmetrise()
    assert matched.is_symmetric()
    for u, v in matched.edges():
        assert undirected.is_edge(u, v)
    for vertex in matched.vertices():
        assert len(matched.successors(vertex)) <= 1


class TestMaxMatching:
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_bipartite_k33_sparse(self, bipartite_k33_sparse, strategy):
        matched, summary = max_matching(
            bipartite_k33_sparse, strategy=strategy, return_summary=True
        )
        assert summary.size == 3
        assert summary.unmatched == frozenset()
        assert_valid_matching(bipartite_k33_sparse, matched)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_star(self, bipartite_star, strategy):
        matched, summary = max_matching(
            bipartite_star, strategy=strategy, return_summary=True
        )
        assert summary.size == 1
        assert summary.pairs == [(0, 1)]
        assert summary.unmatched == frozenset({2, 3})
        assert_valid_matching(bipartite_star, matched)

    def test_path_requiring_rematch(self):
        # 0-2, 0-3, 1-2: the first greedy edge 0-2 must be undone.
        g = Graph.from_edges([(0, 2), (0, 3), (1, 2)])
        matched, summary = max_matching(g, return_summary=True)
        assert summary.pairs == [(0, 3), (1, 2)]
        assert summary.iterations == 2

    def test_directed_input_is_read_as_undirected(self):
        g = Graph.from_edges([(0, 1), (2, 3)])
        assert matching_pairs(max_matching(g)) == [(0, 1), (2, 3)]

    def test_empty_and_edgeless_graphs(self):
        assert max_matching(Graph()).edge_count() == 0
        matched, summary = max_matching(Graph({0: [], 1: []}), return_summary=True)
        assert summary.size == 0
        assert summary.unmatched == frozenset({0, 1})
        assert summary.iterations == 0

    def test_matched_graph_keeps_all_vertices(self, bipartite_star):
        matched = max_matching(bipartite_star)
        assert matched.vertices() == [0, 1, 2, 3]

    @pytest.mark.parametrize("seed", range(6))
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_matches_networkx_on_random_bipartite(self, seed, strategy):
        nxg = nx.bipartite.random_graph(6, 7, 0.35, seed=seed)
        expected = len(nx.bipartite.maximum_matching(nxg, top_nodes=range(6))) // 2
        graph = from_networkx(nxg)

        matched, summary = max_matching(graph, strategy=strategy, return_summary=True)
        assert summary.size == expected
        assert_valid_matching(graph, matched)


class TestMatchingIterations:
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_each_iteration_adds_one_edge(self, bipartite_k33_sparse, strategy):
        sizes = []
        for state in iter_matching(bipartite_k33_sparse, strategy):
            assert_valid_matching(bipartite_k33_sparse, state.matched)
            sizes.append(state.size)
        assert sizes == list(range(1, len(sizes) + 1))
        assert len(sizes) <= len(bipartite_k33_sparse) // 2

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_matched_and_unmatched_partition_input(self, bipartite_k33_sparse, strategy):
        for state in iter_matching(bipartite_k33_sparse, strategy):
            assert state.matched.union(state.unmatched) == bipartite_k33_sparse
            assert state.matched.intersection(state.unmatched).edge_count() == 0

    def test_resume_from_state(self, bipartite_k33_sparse):
        first = next(iter(iter_matching(bipartite_k33_sparse, Strategy.BFS)))
        rest = list(iter_matching(first, Strategy.BFS))
        assert [s.iteration for s in rest] == [2, 3]
        assert rest[-1].matched == max_matching(
            bipartite_k33_sparse, strategy=Strategy.BFS
        )

    def test_resumed_state_counts_toward_limit(self, bipartite_k33_sparse):
        first = next(iter(iter_matching(bipartite_k33_sparse, Strategy.BFS)))
        with pytest.raises(IterationLimitError):
            list(iter_matching(first, Strategy.BFS, max_iterations=2))

    def test_input_is_symmetrised_once(self, bipartite_k33_sparse, monkeypatch):
        calls = []
        symmetrise = Graph.symmetrise

        def counting(graph):
            calls.append(graph)
            return symmetrise(graph)

        monkeypatch.setattr(Graph, "symmetrise", counting)
        max_matching(bipartite_k33_sparse)
        assert calls == [bipartite_k33_sparse]

    def test_iteration_limit(self, bipartite_k33_sparse):
        with pytest.raises(IterationLimitError):
            max_matching(bipartite_k33_sparse, max_iterations=2)
        assert max_matching(bipartite_k33_sparse, max_iterations=3).edge_count() == 6


class TestMatchingSteps:
    def test_initial_state(self, bipartite_star):
        state = initial_matching_state(bipartite_star)
        assert state.size == 0
        assert state.matched.vertices() == [0, 1, 2, 3]
        assert state.unmatched == bipartite_star
        assert free_vertices(state) == frozenset({0, 1, 2, 3})

    def test_augment_matching_toggles_path(self):
        g = Graph.from_edges([(0, 1), (1, 2), (2, 3)]).symmetrise()
        state = augment_matching(initial_matching_state(g), (1, 2))
        assert matching_pairs(state.matched) == [(1, 2)]
        assert free_vertices(state) == frozenset({0, 3})

        path = find_augmenting_path(state, Strategy.BFS).path
        assert path == (0, 1, 2, 3)
        state = augment_matching(state, path)
        assert matching_pairs(state.matched) == [(0, 1), (2, 3)]
        assert state.iteration == 2
        assert free_vertices(state) == frozenset()

    def test_no_augmenting_path_when_maximum(self, bipartite_star):
        state = augment_matching(initial_matching_state(bipartite_star), (0, 1))
        assert not find_augmenting_path(state, Strategy.DFS)
        assert not find_augmenting_path(state, Strategy.BFS)


class TestBlossomLimitation:
    """The search does not shrink odd cycles, so on non-bipartite graphs an
    augmenting path can be missed."""

    @pytest.fixture
    def blocked_state(self, odd_cycle_chords):
        # M = {1-2, 3-4}; 0-1-2-3-4-5 is an augmenting path.
        matched = Graph({v: () for v in odd_cycle_chords.vertices()})
        matched = matched.add_bi_edge(1, 2).add_bi_edge(3, 4)
        unmatched = odd_cycle_chords.remove_bi_edge(1, 2).remove_bi_edge(3, 4)
        return MatchingState(matched=matched, unmatched=unmatched)

    def test_augmenting_path_exists(self, blocked_state):
        layers = [blocked_state.unmatched, blocked_state.matched]
        path = [0, 1, 2, 3, 4, 5]
        for hop, edge in enumerate(zip(path, path[1:])):
            assert layers[hop % 2].is_edge(*edge)
        assert free_vertices(blocked_state) == frozenset({0, 5})

    def test_breadth_first_misses_it(self, blocked_state):
        assert not find_augmenting_path(blocked_state, Strategy.BFS)

    def test_depth_first_finds_it(self, blocked_state):
        result = find_augmenting_path(blocked_state, Strategy.DFS)
        assert result.path == (0, 1, 2, 3, 4, 5)
        state = augment_matching(blocked_state, result.path)
        assert matching_pairs(state.matched) == [(0, 1), (2, 3), (4, 5)]
