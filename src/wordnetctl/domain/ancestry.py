"""AncestorSearch — shortest common ancestor via a dual-colored BFS.

Both seed sets share one FIFO queue. Every vertex is claimed by the first
wave to reach it (color 1 for subset A, color 2 for subset B) and keeps that
color and distance. Whenever a wave steps onto a vertex of the other color,
``distance[to] + distance[from] + 1`` is a candidate meeting length; the
smallest candidate wins.

ASSUMPTION: the graph is a DAG with edges pointing from hyponym to
hypernym. On arbitrary graphs the first-reacher-wins coloring can report a
longer path than the true shortest one. Acyclicity is not validated here;
``wordnetctl graph check`` reports it.

Each call allocates its own scratch arrays and only reads the graph, so
concurrent queries against one built graph need no locking.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import NamedTuple

from wordnetctl.domain.errors import NoCommonAncestorError
from wordnetctl.domain.graph import SparseIdGraph

_UNVISITED = 0
_FROM_A = 1
_FROM_B = 2


class AncestorMatch(NamedTuple):
    """Result of an ancestor query: meeting synset id and total path length."""

    ancestor: int
    length: int


class AncestorSearch:
    """Stateless query object bound to a built :class:`SparseIdGraph`.

    Holds a reference to the graph, not a copy; the graph must not be
    mutated while searches run.
    """

    def __init__(self, graph: SparseIdGraph) -> None:
        self._graph = graph

    # ------------------------------------------------------------------
    # Point-to-point and set-to-set conveniences
    # ------------------------------------------------------------------

    def length(self, v: int, w: int) -> int:
        """Length of the shortest common ancestor path between ids *v* and *w*."""
        return self.find_ancestor({v}, {w}).length

    def ancestor(self, v: int, w: int) -> int:
        """Id of the shortest common ancestor of ids *v* and *w*."""
        return self.find_ancestor({v}, {w}).ancestor

    def length_subset(self, subset_a: Iterable[int], subset_b: Iterable[int]) -> int:
        return self.find_ancestor(subset_a, subset_b).length

    def ancestor_subset(self, subset_a: Iterable[int], subset_b: Iterable[int]) -> int:
        return self.find_ancestor(subset_a, subset_b).ancestor

    # ------------------------------------------------------------------
    # Core search
    # ------------------------------------------------------------------

    def find_ancestor(
        self,
        subset_a: Iterable[int],
        subset_b: Iterable[int],
    ) -> AncestorMatch:
        """Find the closest meeting point of any path from *subset_a* and *subset_b*.

        Args:
            subset_a: Non-empty collection of registered synset ids.
            subset_b: Non-empty collection of registered synset ids.

        Returns:
            ``AncestorMatch(ancestor, length)``. An id present in both
            subsets is its own ancestor at length 0.

        Raises:
            ValueError: If either subset is empty.
            UnknownIdError: If any id was never registered in the graph.
            NoCommonAncestorError: If no path from A ever meets a path from B.
        """
        ids_a = sorted(set(subset_a))
        ids_b = sorted(set(subset_b))
        if not ids_a or not ids_b:
            raise ValueError("Ancestor queries need two non-empty id subsets")

        # Resolve every id up front so unknown ids fail before any search work.
        seeds_a = [self._graph.vertex_of(node_id) for node_id in ids_a]
        seeds_b = [self._graph.vertex_of(node_id) for node_id in ids_b]

        shared = set(ids_a).intersection(ids_b)
        if shared:
            return AncestorMatch(min(shared), 0)

        n = self._graph.size()
        color = bytearray(n)
        distance = [0] * n
        queue: deque[int] = deque()

        for vertex in seeds_a:
            color[vertex] = _FROM_A
            queue.append(vertex)
        for node_id, vertex in zip(ids_b, seeds_b, strict=True):
            if color[vertex] == _FROM_A:
                return AncestorMatch(node_id, 0)
            color[vertex] = _FROM_B
            queue.append(vertex)

        best_vertex: int | None = None
        best_length = 0
        successors = self._graph.successors

        while queue:
            vertex = queue.popleft()
            wave = color[vertex]
            step = distance[vertex] + 1
            for to in successors(vertex):
                if color[to] == _UNVISITED:
                    color[to] = wave
                    distance[to] = step
                    queue.append(to)
                elif color[to] != wave:
                    candidate = distance[to] + step
                    if best_vertex is None or candidate < best_length:
                        best_vertex = to
                        best_length = candidate

        if best_vertex is None:
            raise NoCommonAncestorError(ids_a, ids_b)
        return AncestorMatch(self._graph.id_of(best_vertex), best_length)
