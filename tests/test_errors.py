"""Tests for the adjgraph exception taxonomy."""

import pytest

from adjgraph import errors
from adjgraph.errors import ErrorKind, GraphError

ERROR_CLASSES = [
    errors.InvalidShapeError,
    errors.InvalidWeightError,
    errors.SelfLoopError,
    errors.IndexOutOfRangeError,
    errors.NotUndirectedError,
    errors.UnreachableError,
    errors.DisconnectedGraphError,
    errors.InvalidPairingError,
    errors.PairingBudgetExceededError,
]


@pytest.mark.parametrize("cls", ERROR_CLASSES + [errors.NotConnectedError])
def test_all_errors_are_graph_errors(cls):
    assert issubclass(cls, GraphError)
    assert isinstance(cls("boom").kind, ErrorKind)


def test_each_kind_has_one_class():
    kinds = [cls.kind for cls in ERROR_CLASSES]
    assert sorted(kinds) == sorted(ErrorKind)


def test_builtin_bases():
    assert issubclass(errors.InvalidShapeError, ValueError)
    assert issubclass(errors.InvalidWeightError, ValueError)
    assert issubclass(errors.SelfLoopError, ValueError)
    assert issubclass(errors.NotUndirectedError, ValueError)
    assert issubclass(errors.IndexOutOfRangeError, IndexError)
    assert issubclass(errors.InvalidPairingError, RuntimeError)


def test_not_connected_is_disconnected():
    err = errors.NotConnectedError("split")
    assert isinstance(err, errors.DisconnectedGraphError)
    assert err.kind is ErrorKind.DISCONNECTED
    assert str(err) == "split"
