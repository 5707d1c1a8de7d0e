"""Explicit success/failure variants for graph operations.

Operations raise `GraphError` subclasses. `attempt()` runs any operation and
turns such a failure into an `Err` value, so that precondition failures
(directed input, disconnection, unreachable targets) can be handled as data:

    >>> from adjgraph import WeightedGraph, prim_mst
    >>> from adjgraph.outcome import attempt
    >>> g = WeightedGraph.from_matrix([[None, 1], [2, None]])
    >>> result = attempt(prim_mst, g)
    >>> result.ok, result.kind.name
    (False, 'NOT_UNDIRECTED')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from adjgraph.errors import ErrorKind, GraphError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying the operation's return value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed result carrying the raised `GraphError`."""

    error: GraphError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        """Failure category of the wrapped error."""
        return self.error.kind

    def unwrap(self) -> Any:
        """Re-raise the wrapped error."""
        raise self.error


Outcome = Union[Ok[T], Err]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Call `func` and wrap its result or `GraphError` failure.

    Only `GraphError` is captured; programming errors such as `TypeError`
    propagate unchanged.

    Args:
        func: Operation to run.
        *args: Positional arguments forwarded to `func`.
        **kwargs: Keyword arguments forwarded to `func`.

    Returns:
        `Ok(value)` on success, `Err(error)` on a graph failure.
    """
    try:
        return Ok(func(*args, **kwargs))
    except GraphError as exc:
        return Err(exc)
