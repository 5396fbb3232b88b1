import pytest

from adjgraph import DirectedGraph, WeightedGraph
from adjgraph.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_directed():
    def build(nodes, edges=()):
        g = DirectedGraph()
        for label in nodes:
            g.add_node(label)
        for source, target in edges:
            g.add_edge(source, target)
        return g

    return build


@pytest.fixture
def make_weighted():
    def build(nodes, edges=()):
        g = WeightedGraph()
        for label in nodes:
            g.add_node(label)
        for source, target, weight in edges:
            g.add_edge(source, target, weight)
        return g

    return build
