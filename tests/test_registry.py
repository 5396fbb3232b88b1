import pytest

from adjgraph.errors import DuplicateNodeError, UnknownNodeError
from adjgraph.graph import Edge, NodeRegistry


def test_add_assigns_dense_indices():
    reg = NodeRegistry()
    a = reg.add("A")
    b = reg.add("B")

    assert (a.index, b.index) == (0, 1)
    assert reg.index_of("B") == 1
    assert reg.label_of(0) == "A"
    assert reg.capacity == 2
    assert len(reg) == 2


def test_add_duplicate_raises_and_leaves_registry_alone():
    reg = NodeRegistry()
    reg.add("A")

    with pytest.raises(DuplicateNodeError) as exc:
        reg.add("A")

    assert exc.value.label == "A"
    assert len(reg) == 1
    assert reg.capacity == 1


def test_unknown_label_raises():
    reg = NodeRegistry()
    with pytest.raises(UnknownNodeError) as exc:
        reg.get("missing")
    assert exc.value.label == "missing"


def test_remove_tombstones_slot_and_reuses_it():
    reg = NodeRegistry()
    reg.add("A")
    reg.add("B")
    reg.add("C")

    reg.remove("B")
    assert "B" not in reg
    assert reg.capacity == 3
    with pytest.raises(IndexError):
        reg.node_at(1)

    d = reg.add("D")
    assert d.index == 1
    assert reg.capacity == 3
    assert reg.labels() == ["A", "C", "D"]


def test_remove_purges_incoming_edges_from_every_list():
    reg = NodeRegistry()
    a, b, c = reg.add("A"), reg.add("B"), reg.add("C")
    a.edges.append(Edge(a.index, b.index, key=reg.new_edge_key()))
    a.edges.append(Edge(a.index, c.index, key=reg.new_edge_key()))
    c.edges.append(Edge(c.index, b.index, key=reg.new_edge_key()))
    b.edges.append(Edge(b.index, a.index, key=reg.new_edge_key()))

    reg.remove("B")

    assert [e.target for e in a.edges] == [c.index]
    assert c.edges == []
    assert reg.edge_count() == 1


def test_iteration_follows_insertion_order():
    reg = NodeRegistry()
    for label in ["z", "a", "m"]:
        reg.add(label)
    assert [n.label for n in reg] == ["z", "a", "m"]


def test_contains_tolerates_unhashable_labels():
    reg = NodeRegistry()
    assert [1] not in reg


def test_clear_empties_everything():
    reg = NodeRegistry()
    reg.add("A")
    reg.remove("A")
    reg.add("B")
    reg.clear()

    assert len(reg) == 0
    assert reg.capacity == 0
    assert reg.add("C").index == 0


def test_edge_keys_are_unique():
    reg = NodeRegistry()
    keys = {reg.new_edge_key() for _ in range(5)}
    assert len(keys) == 5


def test_edge_mirrored_swaps_endpoints_keeps_weight_and_key():
    edge = Edge(0, 3, weight=7, key=11)
    twin = edge.mirrored()
    assert (twin.source, twin.target, twin.weight, twin.key) == (3, 0, 7, 11)
    assert twin.mirrored() == edge
