"""SparseIdGraph — directed adjacency keyed by externally-assigned synset ids.

Synset ids come from the input data: arbitrary non-negative integers, not
contiguous and not starting at zero. Each id is mapped to a dense vertex
index the first time it is seen, and adjacency lists are stored by that index.

INVARIANT: ``_id_to_vertex`` and ``_vertex_to_id`` are a bijection over
``0..size()-1``. Once assigned, an index never changes.

Lifecycle: built once (optional :meth:`reserve`, then :meth:`add_edge`
calls), then read-only. Nothing here detects cycles; the ancestor search
assumes the graph is a DAG whose edges point from hyponym to hypernym.
"""

from __future__ import annotations

from collections.abc import Iterator

from wordnetctl.domain.errors import UnknownIdError


class SparseIdGraph:
    """Directed graph over sparse integer ids with dense internal indices."""

    def __init__(self) -> None:
        self._adjacency: list[list[int]] = []  # vertex -> [vertex, ...]
        self._id_to_vertex: dict[int, int] = {}
        self._vertex_to_id: list[int] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def reserve(self, expected_vertex_count: int) -> None:
        """Validate a capacity hint. Has no effect on graph contents."""
        if expected_vertex_count < 0:
            msg = f"Capacity hint must be non-negative, got {expected_vertex_count}"
            raise ValueError(msg)

    def add_edge(self, from_id: int, to_id: int) -> None:
        """Append an edge ``from_id -> to_id``.

        Unseen ids are registered in argument order (``from_id`` first).
        Duplicate edges and self-loops are kept as-is.
        """
        source = self._get_or_add_vertex(from_id)
        target = self._get_or_add_vertex(to_id)
        self._adjacency[source].append(target)

    def _get_or_add_vertex(self, node_id: int) -> int:
        vertex = self._id_to_vertex.get(node_id)
        if vertex is None:
            vertex = len(self._vertex_to_id)
            self._id_to_vertex[node_id] = vertex
            self._vertex_to_id.append(node_id)
            self._adjacency.append([])
        return vertex

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, node_id: int) -> list[int]:
        """Out-neighbours of *node_id* as external ids, in insertion order.

        A never-registered id yields ``[]``, the same as a registered id
        with no outgoing edges. Use :meth:`contains` to tell them apart.
        """
        vertex = self._id_to_vertex.get(node_id)
        if vertex is None:
            return []
        return [self._vertex_to_id[target] for target in self._adjacency[vertex]]

    def size(self) -> int:
        """Number of registered vertices."""
        return len(self._vertex_to_id)

    def edge_count(self) -> int:
        """Number of stored edges, duplicates included."""
        return sum(len(bucket) for bucket in self._adjacency)

    def contains(self, node_id: int) -> bool:
        return node_id in self._id_to_vertex

    def vertex_of(self, node_id: int) -> int:
        """Dense index for *node_id*; raises :class:`UnknownIdError` if unregistered."""
        try:
            return self._id_to_vertex[node_id]
        except KeyError:
            raise UnknownIdError(node_id) from None

    def id_of(self, vertex: int) -> int:
        """External id for a dense *vertex* index."""
        # Negative indices would wrap around on a list.
        if vertex < 0:
            raise IndexError(f"Vertex index cannot be negative: {vertex}")
        return self._vertex_to_id[vertex]

    def ids(self) -> Iterator[int]:
        """Registered ids in dense index order."""
        return iter(self._vertex_to_id)

    def edges(self) -> Iterator[tuple[int, int]]:
        """All edges as ``(from_id, to_id)`` pairs, grouped by source vertex."""
        for vertex, bucket in enumerate(self._adjacency):
            source = self._vertex_to_id[vertex]
            for target in bucket:
                yield source, self._vertex_to_id[target]

    def successors(self, vertex: int) -> list[int]:
        """Raw adjacency bucket for a dense *vertex* index (read-only use)."""
        return self._adjacency[vertex]

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def dump(self) -> str:
        """Render the full adjacency list, one ``id: neighbours`` line per vertex."""
        lines = ["vertex: its neighbours\n"]
        for vertex, bucket in enumerate(self._adjacency):
            targets = "".join(f"{self._vertex_to_id[t]} " for t in bucket)
            lines.append(f"{self._vertex_to_id[vertex]}: {targets}\n")
        return "".join(lines)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._id_to_vertex

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"SparseIdGraph(vertices={self.size()}, edges={self.edge_count()})"
