"""GraphEngine — lazy-built NetworkX view of the hypernym graph.

Used only for structural diagnostics (cycles, roots). Ancestor queries
never touch it; they run on the SparseIdGraph directly.
Commands that don't need diagnostics never build it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from wordnetctl.domain.graph import SparseIdGraph

type _Graph = nx.MultiDiGraph


class GraphEngine:
    """Lazy-loading NetworkX view over a built :class:`SparseIdGraph`."""

    def __init__(self, source: SparseIdGraph) -> None:
        self._source = source
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the NetworkX graph, building it on first access."""
        if self._graph is None:
            self._graph = self._build()
        return self._graph

    def invalidate(self) -> None:
        """Clear the cached view, forcing rebuild on next access."""
        self._graph = None

    def _build(self) -> _Graph:
        """Copy vertices and edges into a MultiDiGraph.

        A multigraph keeps duplicate hypernym edges so edge counts match
        the source graph.
        """
        g: _Graph = nx.MultiDiGraph()
        g.add_nodes_from(self._source.ids())
        g.add_edges_from(self._source.edges())
        return g

    def find_cycle(self) -> list[int]:
        """Return the vertex ids on one directed cycle, or ``[]`` for a DAG."""
        try:
            cycle = nx.find_cycle(self.graph, orientation="original")
        except nx.NetworkXNoCycle:
            return []
        return [edge[0] for edge in cycle]

    def roots(self) -> list[int]:
        """Vertices with no hypernym (out-degree zero), sorted by id."""
        g = self.graph
        return sorted(node for node in g.nodes if g.out_degree(node) == 0)

    def weak_components(self) -> int:
        return nx.number_weakly_connected_components(self.graph) if len(self.graph) else 0
