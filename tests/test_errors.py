import pytest

from adjgraph.errors import (
    CycleError,
    DuplicateNodeError,
    EmptyGraphError,
    GraphError,
    InvalidWeightError,
    NoPathError,
    UnknownAlgorithmError,
    UnknownNodeError,
)


@pytest.mark.parametrize(
    "error_cls",
    [
        CycleError,
        DuplicateNodeError,
        EmptyGraphError,
        InvalidWeightError,
        NoPathError,
        UnknownAlgorithmError,
        UnknownNodeError,
    ],
)
def test_all_errors_are_graph_errors(error_cls):
    err = error_cls("boom")
    assert isinstance(err, GraphError)
    assert str(err) == "boom"


def test_cause_is_appended_to_message():
    err = GraphError("outer", cause=ValueError("inner"))
    assert str(err) == "outer: inner"


def test_context_fields():
    err = NoPathError("no route", source="A", target="C")
    assert (err.source, err.target) == ("A", "C")
    assert err.args == ("no route",)


def test_errors_are_hashable():
    err = NoPathError("x", source="A", target="B")
    assert hash(err) == hash(err)
    assert {err, UnknownNodeError("y")} >= {err}
