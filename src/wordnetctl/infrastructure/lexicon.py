"""LexicalIndex and GlossStore — the word and gloss lookups around the graph.

A noun may belong to several synsets (polysemy), so the index maps each
word to every synset id it appears in. Queries over nouns therefore run as
set-to-set ancestor searches.
"""

from __future__ import annotations

from collections.abc import Iterator

from wordnetctl.domain.errors import UnknownIdError, UnknownWordError


class LexicalIndex:
    """Word -> synset ids, in the order the synsets were read."""

    def __init__(self) -> None:
        self._word_ids: dict[str, list[int]] = {}

    def add(self, word: str, synset_id: int) -> None:
        self._word_ids.setdefault(word, []).append(synset_id)

    def ids(self, word: str) -> list[int]:
        """Synset ids for *word*; raises :class:`UnknownWordError` if absent."""
        try:
            return list(self._word_ids[word])
        except KeyError:
            raise UnknownWordError(word) from None

    def __contains__(self, word: object) -> bool:
        return word in self._word_ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._word_ids)

    def __len__(self) -> int:
        return len(self._word_ids)


class GlossStore:
    """Synset id -> gloss text."""

    def __init__(self) -> None:
        self._glosses: dict[int, str] = {}

    def add(self, synset_id: int, gloss: str) -> None:
        self._glosses[synset_id] = gloss

    def gloss(self, synset_id: int) -> str:
        try:
            return self._glosses[synset_id]
        except KeyError:
            raise UnknownIdError(synset_id) from None

    def ids(self) -> Iterator[int]:
        return iter(self._glosses)

    def __contains__(self, synset_id: object) -> bool:
        return synset_id in self._glosses

    def __len__(self) -> int:
        return len(self._glosses)
