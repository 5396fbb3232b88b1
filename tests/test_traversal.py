import pytest

from adjgraph import EmptyGraphError, UnknownNodeError


@pytest.fixture
def tree(make_directed):
    #      A
    #    /   \
    #   B     C
    #  / \     \
    # D   E     F
    return make_directed(
        "ABCDEF",
        [("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("C", "F")],
    )


@pytest.mark.parametrize("strategy", ["recursive", "iterative"])
def test_dfs_preorder_follows_insertion_order(tree, strategy):
    assert tree.dfs("A", strategy=strategy) == ["A", "B", "D", "E", "C", "F"]


def test_bfs_visits_layer_by_layer(tree):
    assert tree.bfs("A") == ["A", "B", "C", "D", "E", "F"]


def test_recursive_and_iterative_dfs_agree_on_dense_graph(make_directed):
    edges = [
        ("A", "C"), ("A", "B"), ("B", "D"), ("C", "D"), ("D", "A"),
        ("C", "E"), ("E", "B"), ("E", "F"), ("F", "C"),
    ]
    g = make_directed("ABCDEF", edges)

    for root in "ABCDEF":
        assert g.dfs_recursive(root) == g.dfs_iterative(root)


def test_traversals_visit_each_reachable_node_once(make_directed):
    g = make_directed(
        "ABCDXY",
        [("A", "B"), ("A", "C"), ("B", "C"), ("C", "A"), ("C", "D"), ("D", "B"), ("X", "Y")],
    )

    for order in (g.dfs_recursive("A"), g.dfs_iterative("A"), g.bfs("A")):
        assert sorted(order) == ["A", "B", "C", "D"]


def test_bfs_order_is_by_hop_count(make_directed):
    # A -> B -> C -> D and a shortcut A -> D
    g = make_directed("ABCD", [("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")])
    assert g.bfs("A") == ["A", "B", "D", "C"]
    assert g.dfs("A") == ["A", "B", "C", "D"]


def test_root_only(make_directed):
    g = make_directed("AB", [("B", "A")])
    assert g.dfs("A") == ["A"]
    assert g.bfs("A") == ["A"]


def test_unknown_root_raises(tree):
    with pytest.raises(UnknownNodeError):
        tree.dfs("Z")
    with pytest.raises(UnknownNodeError):
        tree.bfs("Z")


def test_empty_graph_raises(make_directed):
    g = make_directed("")
    with pytest.raises(EmptyGraphError):
        g.dfs("A")
    with pytest.raises(EmptyGraphError):
        g.bfs("A")


def test_iterative_dfs_handles_long_chain(make_directed):
    n = 5000
    labels = list(range(n))
    g = make_directed(labels, zip(labels, labels[1:]))

    assert g.dfs_iterative(0) == labels
    assert g.topological_sort(strategy="iterative") == labels
    assert not g.has_cycle(strategy="iterative")
