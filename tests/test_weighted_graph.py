import math

import pytest

from adjgraph import InvalidWeightError, UnknownNodeError, WeightedGraph


def test_add_edge_stores_mirrored_entries(make_weighted):
    g = make_weighted("AB", [("A", "B", 4)])

    assert g.neighbours("A") == [("B", 4)]
    assert g.neighbours("B") == [("A", 4)]
    assert g.edges() == [("A", "B", 4)]
    assert g.edge_count() == 1
    assert g.has_edge("A", "B") and g.has_edge("B", "A")


@pytest.mark.parametrize("weight", [-1, -0.5, math.inf, math.nan, "3", None, True])
def test_invalid_weights_rejected_without_mutation(make_weighted, weight):
    g = make_weighted("AB")

    with pytest.raises(InvalidWeightError) as exc:
        g.add_edge("A", "B", weight)

    assert exc.value.weight is weight
    assert g.edge_count() == 0
    assert g.neighbours("A") == [] and g.neighbours("B") == []


@pytest.mark.parametrize("weight", [0, 0.0, 2.5, 10**12])
def test_valid_weights_accepted(make_weighted, weight):
    g = make_weighted("AB", [("A", "B", weight)])
    assert g.neighbours("B") == [("A", weight)]


def test_unknown_endpoint_leaves_graph_unchanged(make_weighted):
    g = make_weighted("A")
    with pytest.raises(UnknownNodeError):
        g.add_edge("A", "Z", 1)
    assert g.neighbours("A") == []


def test_remove_edge_drops_both_directions(make_weighted):
    g = make_weighted("ABC", [("A", "B", 1), ("B", "C", 2)])

    g.remove_edge("B", "A")

    assert g.neighbours("A") == []
    assert g.neighbours("B") == [("C", 2)]
    assert g.edges() == [("B", "C", 2)]


def test_remove_edge_between_parallel_edges_keeps_the_other(make_weighted):
    g = make_weighted("AB", [("A", "B", 1), ("A", "B", 9)])

    g.remove_edge("A", "B")

    assert g.neighbours("A") == [("B", 9)]
    assert g.neighbours("B") == [("A", 9)]


def test_remove_self_loop(make_weighted):
    g = make_weighted("A", [("A", "A", 3)])
    assert g.degree("A") == 2
    assert g.edge_count() == 1

    g.remove_edge("A", "A")
    assert g.degree("A") == 0


def test_remove_missing_edge_is_noop(make_weighted):
    g = make_weighted("ABC", [("A", "B", 1)])
    g.remove_edge("A", "C")
    assert g.edge_count() == 1


def test_remove_node_cascades(make_weighted):
    g = make_weighted("ABCD", [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "B", 1)])

    g.remove_node("B")

    assert g.nodes() == ["A", "C", "D"]
    assert g.edges() == [("C", "D", 1)]
    for label in g.nodes():
        assert all(nbr != "B" for nbr, _ in g.neighbours(label))


def test_repr():
    g = WeightedGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", 2)
    assert repr(g) == "WeightedGraph(nodes=2, edges=1)"
