"""QueryService — distance, SCA, raw ancestor, and noun lookups."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from typing import Any

from wordnetctl.domain.errors import WordNetError
from wordnetctl.services.base import BaseService, error_result
from wordnetctl.services.result import ErrorCode, ServiceResult
from wordnetctl.services.telemetry import trace_span, traced


class QueryService(BaseService):
    """Answers noun and synset-id queries against a built WordNet."""

    @traced
    def distance(self, noun1: str, noun2: str) -> ServiceResult:
        """Length of the shortest ancestral path between two nouns."""
        try:
            with trace_span("find_sca"):
                match = self._wordnet.find_sca(noun1, noun2)
        except WordNetError as exc:
            return error_result("distance", exc)

        return ServiceResult(
            ok=True,
            op="distance",
            data={"noun1": noun1, "noun2": noun2, "distance": match.length},
        )

    @traced
    def sca(self, noun1: str, noun2: str) -> ServiceResult:
        """Shortest common ancestor of two nouns, with its gloss and distance."""
        try:
            with trace_span("find_sca"):
                match = self._wordnet.find_sca(noun1, noun2)
            gloss = self._wordnet.glosses.gloss(match.ancestor)
        except WordNetError as exc:
            return error_result("sca", exc)

        return ServiceResult(
            ok=True,
            op="sca",
            data={
                "noun1": noun1,
                "noun2": noun2,
                "ancestor_id": match.ancestor,
                "gloss": gloss,
                "distance": match.length,
            },
        )

    @traced
    def ancestor(self, ids_a: Iterable[int], ids_b: Iterable[int]) -> ServiceResult:
        """Set-to-set ancestor query over raw synset ids."""
        subset_a = sorted(set(ids_a))
        subset_b = sorted(set(ids_b))
        if not subset_a or not subset_b:
            return ServiceResult.failure(
                "ancestor", ErrorCode.INVALID_INPUT, "Both id subsets must be non-empty"
            )
        try:
            with trace_span("find_ancestor") as span:
                match = self._wordnet.search.find_ancestor(subset_a, subset_b)
                if span:
                    span.annotate("vertices", self._wordnet.graph.size())
        except WordNetError as exc:
            return error_result("ancestor", exc)

        data: dict[str, Any] = {
            "subset_a": subset_a,
            "subset_b": subset_b,
            "ancestor_id": match.ancestor,
            "distance": match.length,
        }
        warnings: list[str] = []
        if match.ancestor in self._wordnet.glosses:
            data["gloss"] = self._wordnet.glosses.gloss(match.ancestor)
        else:
            warnings.append(f"Synset {match.ancestor} has no gloss")
        return ServiceResult(ok=True, op="ancestor", data=data, warnings=warnings)

    def nouns(self, *, prefix: str | None = None, limit: int | None = None) -> ServiceResult:
        """List nouns, optionally filtered by *prefix* and capped at *limit*."""
        matching = (
            noun
            for noun in self._wordnet.nouns()
            if prefix is None or noun.startswith(prefix)
        )
        items = list(islice(matching, limit)) if limit is not None else list(matching)
        return ServiceResult(
            ok=True,
            op="nouns",
            data={"count": len(items), "items": items},
        )

    def is_noun(self, word: str) -> ServiceResult:
        data: dict[str, Any] = {"word": word, "is_noun": self._wordnet.is_noun(word)}
        if data["is_noun"]:
            data["synsets"] = self._wordnet.index.ids(word)
        return ServiceResult(ok=True, op="is_noun", data=data)
