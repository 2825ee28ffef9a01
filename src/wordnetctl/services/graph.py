"""GraphService — diagnostics over the hypernym graph.

``dump`` and ``stats`` read the SparseIdGraph directly. ``check`` builds
the NetworkX view and reports structural problems the ancestor search
assumes away (cycles, several roots, synsets missing from the graph).
Nothing is repaired; issues are reported only.
"""

from __future__ import annotations

from typing import Any

from wordnetctl.infrastructure.graph.engine import GraphEngine
from wordnetctl.services.base import BaseService
from wordnetctl.services.contracts import CheckResultData, GraphStatsData, dump_validated
from wordnetctl.services.result import ServiceResult
from wordnetctl.services.telemetry import trace_span, traced

# Cap on ids listed per issue; the full count is always reported.
MAX_LISTED_IDS = 20


class GraphService(BaseService):
    """Handles graph dumps, counts, and structural checks."""

    def dump(self) -> ServiceResult:
        """Full adjacency listing, one ``id: neighbours`` line per vertex."""
        graph = self._wordnet.graph
        return ServiceResult(
            ok=True,
            op="dump",
            data={"vertices": graph.size(), "dump": graph.dump()},
        )

    def stats(self) -> ServiceResult:
        graph = self._wordnet.graph
        data = dump_validated(
            GraphStatsData,
            {
                "synsets": self._wordnet.synset_count,
                "nouns": len(self._wordnet.index),
                "vertices": graph.size(),
                "edges": graph.edge_count(),
            },
        )
        return ServiceResult(ok=True, op="stats", data=data)

    @traced
    def check(self) -> ServiceResult:
        """Report cycles, multiple roots, and synsets absent from the graph."""
        engine = GraphEngine(self._wordnet.graph)
        issues: list[dict[str, Any]] = []

        with trace_span("build_view") as span:
            g = engine.graph
            if span:
                span.annotate("nodes", g.number_of_nodes())
                span.annotate("edges", g.number_of_edges())

        with trace_span("find_cycle"):
            cycle = engine.find_cycle()
        if cycle:
            issues.append(
                {
                    "category": "cycle",
                    "severity": "error",
                    "message": (
                        f"Hypernym graph has a cycle through {len(cycle)} synset(s); "
                        "ancestor distances may be wrong"
                    ),
                    "node_ids": cycle[:MAX_LISTED_IDS],
                }
            )

        roots = engine.roots()
        if len(roots) > 1:
            issues.append(
                {
                    "category": "roots",
                    "severity": "warning",
                    "message": f"Graph has {len(roots)} roots; some noun pairs may be unrelated",
                    "node_ids": roots[:MAX_LISTED_IDS],
                }
            )

        graph = self._wordnet.graph
        unlinked = sorted(sid for sid in self._wordnet.glosses.ids() if sid not in graph)
        if unlinked:
            issues.append(
                {
                    "category": "unlinked",
                    "severity": "warning",
                    "message": f"{len(unlinked)} synset(s) never appear in the hypernym graph",
                    "node_ids": unlinked[:MAX_LISTED_IDS],
                }
            )

        error_count = sum(1 for issue in issues if issue["severity"] == "error")
        data = dump_validated(
            CheckResultData,
            {
                "issues": issues,
                "count": len(issues),
                "error_count": error_count,
                "warning_count": len(issues) - error_count,
                "roots": roots[:MAX_LISTED_IDS],
                "components": engine.weak_components(),
                "healthy": error_count == 0,
            },
        )
        return ServiceResult(ok=True, op="check", data=data)
