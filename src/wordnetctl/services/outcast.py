"""OutcastService — pick the noun least related to the others.

Each noun's score is the sum of its distances to every other noun. The
noun with the strictly largest score is the outcast. No outcast is
reported (empty string) when fewer than three distinct nouns are given or
when the largest score is shared.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

from wordnetctl.domain.errors import WordNetError
from wordnetctl.services.base import BaseService, error_result
from wordnetctl.services.result import ErrorCode, ServiceResult
from wordnetctl.services.telemetry import trace_span, traced

MIN_NOUNS = 3


def pick_outcast(scores: dict[str, int]) -> str:
    """Return the unique top scorer in *scores*, or ``""`` if the top is shared."""
    if not scores:
        return ""
    best = max(scores.values())
    leaders = [noun for noun, score in scores.items() if score == best]
    return leaders[0] if len(leaders) == 1 else ""


class OutcastService(BaseService):
    """Outcast detection over noun distances."""

    @traced
    def outcast(self, nouns: Iterable[str], *, max_nouns: int | None = None) -> ServiceResult:
        """Find the outcast among *nouns*.

        Args:
            nouns: Candidate nouns; duplicates are ignored.
            max_nouns: Refuse inputs larger than this (pairwise cost is quadratic).
        """
        candidates = sorted(set(nouns))
        if max_nouns is not None and len(candidates) > max_nouns:
            return ServiceResult.failure(
                "outcast",
                ErrorCode.INVALID_INPUT,
                f"Too many nouns: {len(candidates)} (limit {max_nouns})",
                count=len(candidates),
                limit=max_nouns,
            )

        if len(candidates) < MIN_NOUNS:
            return ServiceResult(
                ok=True,
                op="outcast",
                data={"outcast": "", "nouns": candidates, "scores": {}},
                warnings=[f"Outcast needs at least {MIN_NOUNS} distinct nouns"],
            )

        scores = dict.fromkeys(candidates, 0)
        try:
            with trace_span("pairwise_distances") as span:
                for first, second in combinations(candidates, 2):
                    d = self._wordnet.distance(first, second)
                    scores[first] += d
                    scores[second] += d
                if span:
                    span.annotate("pairs", len(candidates) * (len(candidates) - 1) // 2)
        except WordNetError as exc:
            return error_result("outcast", exc)

        winner = pick_outcast(scores)
        warnings = [] if winner else ["Largest distance sum is shared; no unique outcast"]
        return ServiceResult(
            ok=True,
            op="outcast",
            data={"outcast": winner, "nouns": candidates, "scores": scores},
            warnings=warnings,
        )
