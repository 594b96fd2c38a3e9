"""Unit tests for the graph, node registry and adjacency stores."""

import pytest

from pathfinder.core.exceptions import DuplicateNodeError, GraphFullError, NodeNotFoundError
from pathfinder.core.graph import Graph, ListAdjacency, MatrixAdjacency, NodeRegistry, build_graph
from pathfinder.core.models import AdjacencyKind, Node

STRATEGIES = [AdjacencyKind.LIST, AdjacencyKind.MATRIX]


def make_graph(strategy: AdjacencyKind, names: list[str], capacity: int = 10) -> Graph:
    """Create a graph holding the given nodes and no edges."""
    graph = Graph(strategy=strategy, capacity=capacity)
    for name in names:
        graph.insert_node(name)
    return graph


def neighbour_keys(graph: Graph, name: str) -> set[str]:
    node = graph.find_node(name)
    assert node is not None
    return {n.key for n in graph.neighbours(node)}


@pytest.fixture(params=STRATEGIES, ids=lambda kind: kind.value)
def strategy(request: pytest.FixtureRequest) -> AdjacencyKind:
    return request.param


@pytest.fixture
def diamond(strategy: AdjacencyKind) -> Graph:
    """Create a diamond: A -> B -> D, A -> C -> D."""
    return build_graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")], strategy)


class TestNodeRegistry:
    """Tests for the NodeRegistry class."""

    def test_insert_assigns_positions(self) -> None:
        registry = NodeRegistry()
        a = registry.insert("A")
        b = registry.insert("B")
        assert (a.index, b.index) == (0, 1)
        assert registry.at(1) is b

    def test_find(self) -> None:
        registry = NodeRegistry()
        node = registry.insert("A")
        assert registry.find("A") is node
        assert registry.find("B") is None

    def test_all_keeps_insertion_order(self) -> None:
        registry = NodeRegistry()
        for name in ["C", "A", "B"]:
            registry.insert(name)
        assert [n.key for n in registry.all()] == ["C", "A", "B"]

    def test_remove_shifts_positions(self) -> None:
        registry = NodeRegistry()
        a, b, c = (registry.insert(name) for name in "ABC")
        registry.remove(b)

        assert len(registry) == 2
        assert "B" not in registry
        assert c.index == 1
        assert registry.find("C") is c
        assert registry.at(0) is a

    def test_visited_flags(self) -> None:
        registry = NodeRegistry()
        a = registry.insert("A")
        b = registry.insert("B")
        registry.set_visited(a, True)
        registry.set_visited(b, True)
        assert registry.is_visited(a)

        registry.reset_all_visited()
        assert not registry.is_visited(a)
        assert not registry.is_visited(b)

    def test_capacity_limit(self) -> None:
        registry = NodeRegistry(capacity=1)
        registry.insert("A")
        with pytest.raises(GraphFullError):
            registry.insert("B")


class TestNode:
    """Tests for node identity."""

    def test_equal_by_key(self) -> None:
        assert Node("A", index=0) == Node("A", index=3, visited=True)
        assert Node("A") != Node("B")

    def test_hash_by_key(self) -> None:
        assert len({Node("A"), Node("A", index=2)}) == 1


class TestAdjacencyStores:
    """Tests for the two adjacency strategies used directly."""

    def test_list_keeps_insertion_order(self) -> None:
        registry = NodeRegistry()
        store = ListAdjacency()
        nodes = [registry.insert(name) for name in "ABCD"]
        for node in nodes:
            store.add_node(node)

        a, b, c, d = nodes
        store.add_edge(a, d)
        store.add_edge(a, b)
        store.add_edge(a, c)
        assert [n.key for n in store.neighbours(a)] == ["D", "B", "C"]

    def test_list_deduplicates(self) -> None:
        registry = NodeRegistry()
        store = ListAdjacency()
        a, b = registry.insert("A"), registry.insert("B")
        store.add_node(a)
        store.add_node(b)

        assert store.add_edge(a, b) is True
        assert store.add_edge(a, b) is False
        assert store.out_degree(a) == 1

    def test_matrix_uses_registry_order(self) -> None:
        registry = NodeRegistry(capacity=4)
        store = MatrixAdjacency(registry, capacity=4)
        nodes = [registry.insert(name) for name in "ABCD"]
        for node in nodes:
            store.add_node(node)

        a, b, c, d = nodes
        store.add_edge(a, d)
        store.add_edge(a, b)
        assert [n.key for n in store.neighbours(a)] == ["B", "D"]
        assert store.has_edge(a, d)
        assert not store.has_edge(d, a)

    def test_matrix_remove_node_shifts_columns(self) -> None:
        registry = NodeRegistry(capacity=3)
        store = MatrixAdjacency(registry, capacity=3)
        a, b, c = (registry.insert(name) for name in "ABC")
        for node in (a, b, c):
            store.add_node(node)
        store.add_edge(a, b)
        store.add_edge(a, c)

        store.remove_node(b)
        registry.remove(b)

        assert [n.key for n in store.neighbours(a)] == ["C"]
        assert store.out_degree(a) == 1

    def test_remove_edge_reports_missing(self) -> None:
        registry = NodeRegistry(capacity=2)
        store = MatrixAdjacency(registry, capacity=2)
        a, b = registry.insert("A"), registry.insert("B")
        store.add_node(a)
        store.add_node(b)
        assert store.remove_edge(a, b) is False


class TestGraph:
    """Tests for the Graph class over both strategies."""

    def test_insert_node(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["A"])
        node = graph.find_node("A")
        assert node is not None
        assert node.key == "A"
        assert "A" in graph
        assert graph.num_nodes == 1

    def test_find_missing_node(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["A"])
        assert graph.find_node("Z") is None

    def test_insert_edge(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["A", "B"])
        graph.insert_edge("A", "B")

        assert graph.has_edge("A", "B")
        assert not graph.has_edge("B", "A")
        assert neighbour_keys(graph, "A") == {"B"}
        assert graph.num_edges == 1

    def test_insert_edge_is_idempotent(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["A", "B"])
        graph.insert_edge("A", "B")
        graph.insert_edge("A", "B")

        assert graph.num_edges == 1
        assert len(graph.neighbours(graph.choose_node())) == 1

    def test_self_loop(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["A"])
        graph.insert_edge("A", "A")
        assert neighbour_keys(graph, "A") == {"A"}

    def test_has_edges(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["A", "B"])
        assert not graph.has_edges()
        graph.insert_edge("B", "A")
        assert graph.has_edges()

    def test_is_empty(self, strategy: AdjacencyKind) -> None:
        graph = Graph(strategy=strategy, capacity=2)
        assert graph.is_empty()
        graph.insert_node("A")
        assert not graph.is_empty()

    def test_choose_node_returns_first(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["X", "Y"])
        assert graph.choose_node().key == "X"

    def test_delete_edge(self, diamond: Graph) -> None:
        diamond.delete_edge("A", "B")
        assert neighbour_keys(diamond, "A") == {"C"}
        assert diamond.num_edges == 3

    def test_delete_node_removes_touching_edges(self, diamond: Graph) -> None:
        node = diamond.find_node("B")
        assert node is not None
        diamond.delete_node(node)

        assert "B" not in diamond
        assert neighbour_keys(diamond, "A") == {"C"}
        assert neighbour_keys(diamond, "C") == {"D"}
        assert diamond.num_edges == 2

    def test_delete_node_then_reinsert(self, diamond: Graph) -> None:
        node = diamond.find_node("A")
        assert node is not None
        diamond.delete_node(node)
        diamond.insert_node("A")

        assert neighbour_keys(diamond, "A") == set()
        diamond.insert_edge("A", "D")
        assert neighbour_keys(diamond, "A") == {"D"}

    def test_edges_lists_pairs(self, diamond: Graph) -> None:
        assert set(diamond.edges()) == {("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")}

    def test_seen_flags(self, strategy: AdjacencyKind) -> None:
        graph = make_graph(strategy, ["A", "B"])
        node = graph.choose_node()
        graph.node_set_seen(node, True)
        assert graph.node_is_seen(node)

        graph.reset_seen()
        assert not any(graph.node_is_seen(n) for n in graph.nodes)

    def test_insertion_order_independence(self, strategy: AdjacencyKind) -> None:
        first = build_graph([("A", "B"), ("C", "D")], strategy)
        second = build_graph([("C", "D"), ("A", "B")], strategy)

        for name in "ABCD":
            assert neighbour_keys(first, name) == neighbour_keys(second, name)

    def test_repr(self) -> None:
        graph = build_graph([("A", "B")])
        assert repr(graph) == "Graph(strategy=list, nodes=2, edges=1)"


class TestGraphConstruction:
    """Tests for graph creation and capacity."""

    def test_empty_with_capacity(self) -> None:
        graph = Graph.empty(3, AdjacencyKind.MATRIX)
        assert graph.capacity == 3
        assert graph.strategy is AdjacencyKind.MATRIX

    def test_list_is_unbounded_by_default(self) -> None:
        graph = Graph()
        for i in range(100):
            graph.insert_node(f"N{i}")
        assert graph.num_nodes == 100
        assert graph.capacity is None

    def test_matrix_requires_capacity(self) -> None:
        with pytest.raises(ValueError):
            Graph(strategy=AdjacencyKind.MATRIX)

    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ValueError):
            Graph(capacity=-1)

    def test_matrix_full(self) -> None:
        graph = Graph.empty(2, AdjacencyKind.MATRIX)
        graph.insert_node("A")
        graph.insert_node("B")
        with pytest.raises(GraphFullError):
            graph.insert_node("C")
        assert graph.num_nodes == 2

    def test_build_graph_sizes_matrix_to_unique_nodes(self) -> None:
        graph = build_graph([("A", "B"), ("B", "C"), ("C", "A")], AdjacencyKind.MATRIX)
        assert graph.capacity == 3
        assert graph.num_nodes == 3
        assert graph.num_edges == 3

    def test_build_graph_reuses_nodes(self, strategy: AdjacencyKind) -> None:
        graph = build_graph([("A", "B"), ("A", "B"), ("B", "A")], strategy)
        assert graph.num_nodes == 2
        assert graph.num_edges == 2


class TestGraphErrors:
    """Mutation errors leave the graph unchanged."""

    def test_duplicate_node(self, diamond: Graph) -> None:
        before = (diamond.num_nodes, set(diamond.edges()))
        with pytest.raises(DuplicateNodeError) as exc_info:
            diamond.insert_node("A")

        assert exc_info.value.key == "A"
        assert (diamond.num_nodes, set(diamond.edges())) == before

    def test_edge_to_absent_node(self, diamond: Graph) -> None:
        before = set(diamond.edges())
        with pytest.raises(NodeNotFoundError) as exc_info:
            diamond.insert_edge("A", "Z")

        assert exc_info.value.key == "Z"
        assert set(diamond.edges()) == before
        assert "Z" not in diamond

    def test_edge_from_absent_node(self, diamond: Graph) -> None:
        with pytest.raises(NodeNotFoundError):
            diamond.insert_edge("Z", "A")
        assert diamond.num_nodes == 4

    def test_delete_foreign_node(self, diamond: Graph) -> None:
        with pytest.raises(NodeNotFoundError):
            diamond.delete_node(Node("A"))
        assert diamond.num_nodes == 4

    def test_choose_node_on_empty_graph(self) -> None:
        with pytest.raises(NodeNotFoundError):
            Graph().choose_node()
