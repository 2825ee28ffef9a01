"""WordNet — the single dependency injected into every service.

Owns the lexical index, the gloss store, and the hypernym graph. Built
once from the synset and hypernym inputs, then read-only: every query
allocates its own search state, so one WordNet can serve any number of
queries (including from several threads).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from wordnetctl.domain.ancestry import AncestorMatch, AncestorSearch
from wordnetctl.domain.graph import SparseIdGraph
from wordnetctl.infrastructure.lexicon import GlossStore, LexicalIndex
from wordnetctl.infrastructure.parsing import decode_lines, parse_hypernyms, parse_synsets

logger = logging.getLogger(__name__)


class WordNet:
    """Noun lookups and shortest-common-ancestor queries over a hypernym DAG.

    Usage::

        wordnet = WordNet.from_paths("synsets.txt", "hypernyms.txt")
        wordnet.distance("horse", "zebra")
        wordnet.sca("horse", "zebra")
    """

    def __init__(
        self,
        synsets: Iterable[str],
        hypernyms: Iterable[str],
        *,
        synsets_source: str = "synsets",
        hypernyms_source: str = "hypernyms",
    ) -> None:
        self.index = LexicalIndex()
        self.glosses = GlossStore()
        self.graph = SparseIdGraph()

        for record in parse_synsets(synsets, source=synsets_source):
            for word in record.words:
                self.index.add(word, record.id)
            self.glosses.add(record.id, record.gloss)

        self.graph.reserve(len(self.glosses))
        for from_id, to_id in parse_hypernyms(hypernyms, source=hypernyms_source):
            self.graph.add_edge(from_id, to_id)

        self._search = AncestorSearch(self.graph)
        logger.debug(
            "wordnet built: %d synsets, %d nouns, %d vertices, %d edges",
            len(self.glosses),
            len(self.index),
            self.graph.size(),
            self.graph.edge_count(),
        )

    @classmethod
    def from_paths(cls, synsets_path: Path | str, hypernyms_path: Path | str) -> WordNet:
        """Build a WordNet from two UTF-8 text files.

        Undecodable bytes raise :class:`ParseError` naming the file and line.
        """
        synsets_path = Path(synsets_path)
        hypernyms_path = Path(hypernyms_path)
        with (
            synsets_path.open("rb") as synsets,
            hypernyms_path.open("rb") as hypernyms,
        ):
            return cls(
                decode_lines(synsets, source=str(synsets_path)),
                decode_lines(hypernyms, source=str(hypernyms_path)),
                synsets_source=str(synsets_path),
                hypernyms_source=str(hypernyms_path),
            )

    @property
    def synset_count(self) -> int:
        return len(self.glosses)

    @property
    def search(self) -> AncestorSearch:
        return self._search

    # ------------------------------------------------------------------
    # Nouns
    # ------------------------------------------------------------------

    def nouns(self) -> Iterator[str]:
        """All nouns stored in the WordNet."""
        return iter(self.index)

    def is_noun(self, word: str) -> bool:
        return word in self.index

    # ------------------------------------------------------------------
    # Shortest common ancestor
    # ------------------------------------------------------------------

    def find_sca(self, noun1: str, noun2: str) -> AncestorMatch:
        """Ancestor id and distance for two nouns, over all their synsets."""
        return self._search.find_ancestor(self.index.ids(noun1), self.index.ids(noun2))

    def sca(self, noun1: str, noun2: str) -> str:
        """Gloss of the shortest common ancestor of *noun1* and *noun2*."""
        return self.glosses.gloss(self.find_sca(noun1, noun2).ancestor)

    def distance(self, noun1: str, noun2: str) -> int:
        return self.find_sca(noun1, noun2).length
