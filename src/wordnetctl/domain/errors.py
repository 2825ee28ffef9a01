"""Exception hierarchy for WordNet lookups and ancestor queries.

The domain raises these; the service layer translates them into
:class:`~wordnetctl.services.result.ServiceError` codes.
"""

from __future__ import annotations

from collections.abc import Iterable


class WordNetError(Exception):
    """Base class for all wordnetctl domain errors."""


class UnknownIdError(WordNetError, LookupError):
    """A query referenced a synset id that was never registered as a vertex."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"Unknown synset id: {node_id}")
        self.node_id = node_id


class UnknownWordError(WordNetError, LookupError):
    """A lexical lookup named a noun that is not in the index."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Unknown noun: {word!r}")
        self.word = word


class NoCommonAncestorError(WordNetError):
    """Both frontiers were exhausted without ever meeting."""

    def __init__(self, subset_a: Iterable[int], subset_b: Iterable[int]) -> None:
        self.subset_a = sorted(subset_a)
        self.subset_b = sorted(subset_b)
        super().__init__(
            f"No common ancestor between {self.subset_a} and {self.subset_b}"
        )


class ParseError(WordNetError, ValueError):
    """A synset or hypernym line could not be parsed."""

    def __init__(self, source: str, line_no: int, message: str) -> None:
        super().__init__(f"{source}:{line_no}: {message}")
        self.source = source
        self.line_no = line_no
