"""Tests for QueryService."""

from __future__ import annotations

from collections.abc import Callable

from wordnetctl.infrastructure.wordnet import WordNet
from wordnetctl.services.query import QueryService


class TestDistance:
    def test_distance(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).distance("zebra", "table")
        assert result.ok
        assert result.op == "distance"
        assert result.data == {"noun1": "zebra", "noun2": "table", "distance": 5}

    def test_unknown_noun(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).distance("zebra", "unicorn")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_WORD"
        assert result.error.detail == {"word": "unicorn"}

    def test_disconnected_nouns(self, make_wordnet: Callable[[str, str], WordNet]) -> None:
        wn = make_wordnet("1,a,x\n2,b,y\n3,c,z\n4,d,w\n", "1,2\n3,4\n")
        result = QueryService(wn).distance("a", "c")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_COMMON_ANCESTOR"


class TestSca:
    def test_sca(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).sca("horse", "table")
        assert result.ok
        assert result.data["ancestor_id"] == 100
        assert result.data["gloss"].startswith("furnishings that make a room")
        assert result.data["distance"] == 2

    def test_same_noun(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).sca("zebra", "zebra")
        assert result.data["ancestor_id"] == 70
        assert result.data["distance"] == 0

    def test_unknown_noun(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).sca("unicorn", "zebra")
        assert not result.ok


class TestAncestor:
    def test_raw_id_subsets(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).ancestor([60, 130], [90])
        assert result.ok
        assert result.data["ancestor_id"] == 100
        assert result.data["distance"] == 2
        assert result.data["subset_a"] == [60, 130]
        assert "gloss" in result.data

    def test_unknown_id(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).ancestor([60], [999])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ID"
        assert result.error.detail == {"id": 999}

    def test_empty_subset(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).ancestor([], [60])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    def test_ancestor_without_gloss_warns(
        self, make_wordnet: Callable[[str, str], WordNet]
    ) -> None:
        wn = make_wordnet("1,a,x\n2,b,y\n", "1,9\n2,9\n")
        result = QueryService(wn).ancestor([1], [2])
        assert result.ok
        assert result.data["ancestor_id"] == 9
        assert "gloss" not in result.data
        assert result.warnings == ["Synset 9 has no gloss"]


class TestNouns:
    def test_all_nouns(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).nouns()
        assert result.data["count"] == len(wordnet.index)

    def test_prefix(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).nouns(prefix="ab")
        assert sorted(result.data["items"]) == ["abstract_entity", "abstraction"]

    def test_limit(self, wordnet: WordNet) -> None:
        result = QueryService(wordnet).nouns(limit=3)
        assert result.data["count"] == 3
        assert result.data["items"] == ["entity", "physical_entity", "abstraction"]

    def test_is_noun(self, wordnet: WordNet) -> None:
        svc = QueryService(wordnet)
        assert svc.is_noun("horse").data == {"word": "horse", "is_noun": True, "synsets": [60, 130]}
        assert svc.is_noun("unicorn").data == {"word": "unicorn", "is_noun": False}
