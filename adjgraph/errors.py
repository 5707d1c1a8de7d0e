"""Exception taxonomy for adjgraph.

Every failure raised by the library derives from `GraphError` and carries a
class-level `kind` so callers can branch on the category without matching
concrete classes. Built-in bases (`ValueError`, `IndexError`, `RuntimeError`)
are mixed in where the failure is conventionally of that type.
"""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """Failure categories reported by graph operations."""

    INVALID_SHAPE = 1
    INVALID_WEIGHT = 2
    SELF_LOOP = 3
    INDEX_OUT_OF_RANGE = 4
    NOT_UNDIRECTED = 5
    UNREACHABLE = 6
    DISCONNECTED = 7
    INVALID_PAIRING = 8
    PAIRING_BUDGET_EXCEEDED = 9


class GraphError(Exception):
    """Base class for all adjgraph failures."""

    kind: ErrorKind


class InvalidShapeError(GraphError, ValueError):
    """Weight table is not square or does not match the expected dimensions."""

    kind = ErrorKind.INVALID_SHAPE


class InvalidWeightError(GraphError, ValueError):
    """Edge weight is negative, infinite or not a number."""

    kind = ErrorKind.INVALID_WEIGHT


class SelfLoopError(GraphError, ValueError):
    """An edge from a node to itself was supplied."""

    kind = ErrorKind.SELF_LOOP


class IndexOutOfRangeError(GraphError, IndexError):
    """Node index outside ``[0, node_count)``."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE


class NotUndirectedError(GraphError, ValueError):
    """Operation requires symmetric weights but the matrix is asymmetric."""

    kind = ErrorKind.NOT_UNDIRECTED


class UnreachableError(GraphError):
    """No path exists between the requested nodes."""

    kind = ErrorKind.UNREACHABLE


class DisconnectedGraphError(GraphError):
    """Graph lacks the connectivity an algorithm requires."""

    kind = ErrorKind.DISCONNECTED


class NotConnectedError(DisconnectedGraphError):
    """Route inspection was asked to cover a graph that is not connected."""


class InvalidPairingError(GraphError, RuntimeError):
    """Odd-valency nodes cannot be paired (odd count). Internal consistency fault."""

    kind = ErrorKind.INVALID_PAIRING


class PairingBudgetExceededError(GraphError, RuntimeError):
    """Pairing search would score more pairings than the configured budget."""

    kind = ErrorKind.PAIRING_BUDGET_EXCEEDED
