"""
Shared vocabulary for graph surveys.

Both survey strategies track the same per-vertex state machine:
WHITE (undiscovered) -> GREY (discovered, on the control container)
-> BLACK (finished). A vertex never moves backwards within one run.

Unset times, distances and parents are ``None`` rather than numeric
sentinels, so they can never be mistaken for vertex 0 or time 0.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Protocol, runtime_checkable

from ..graph import AdjacencyGraph


class Color(str, Enum):
    """Per-vertex traversal status."""

    WHITE = "w"
    GREY = "g"
    BLACK = "b"

    def __str__(self) -> str:
        return self.value


# Called with a snapshot of the control queue/stack after each push and pop
TraceCallback = Callable[[list[int]], None]


@runtime_checkable
class Survey(Protocol):
    """Capability set shared by BreadthFirstSurvey and DepthFirstSurvey."""

    graph: AdjacencyGraph

    @property
    def color(self) -> Sequence[Color]: ...

    @property
    def discovery_time(self) -> Sequence[int | None]: ...

    @property
    def parent(self) -> Sequence[int | None]: ...

    @property
    def start(self) -> int: ...

    def reset(self, start: int | None = None) -> None: ...

    def search_all(self) -> None: ...

    def search_from(self, v: int) -> None: ...

    def search(self, v: int | None = None) -> None: ...


def tree_path(parent: Sequence[int | None], v: int) -> list[int]:
    """
    Follow parent pointers from ``v`` to its search-tree root.

    Returns the vertices in order ``[v, parent(v), ..., root]``.
    """
    path = [v]
    while parent[v] is not None:
        v = parent[v]
        path.append(v)
    return path
