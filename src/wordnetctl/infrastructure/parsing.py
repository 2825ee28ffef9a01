"""Line parsers for the synset and hypernym text formats.

Synsets, one per line::

    <id>,<word> <word> ...,<gloss>

The gloss is everything after the second comma and may contain commas.

Hypernyms, one per line::

    <from>,<to>,<to>,...

A line holding only ``<from>`` declares no hypernyms and yields no edges.
Blank lines are skipped in both formats.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from wordnetctl.domain.errors import ParseError


@dataclass(frozen=True, slots=True)
class SynsetRecord:
    """One parsed synset line."""

    id: int
    words: tuple[str, ...]
    gloss: str


def _parse_id(raw: str, source: str, line_no: int) -> int:
    # ASCII digits only: no sign, padding, "_" separators, or other scripts.
    if not (raw.isascii() and raw.isdigit()):
        raise ParseError(source, line_no, f"invalid synset id {raw!r}")
    return int(raw)


def decode_lines(raw_lines: Iterable[bytes], *, source: str) -> Iterator[str]:
    """Decode UTF-8 byte lines, raising :class:`ParseError` on the first bad line."""
    for line_no, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ParseError(source, line_no, "invalid UTF-8") from None


def _clean_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_no, text)`` for non-blank lines, line endings stripped."""
    for line_no, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        if text:
            yield line_no, text


def parse_synsets(lines: Iterable[str], *, source: str = "synsets") -> Iterator[SynsetRecord]:
    """Parse synset lines into :class:`SynsetRecord` objects."""
    for line_no, text in _clean_lines(lines):
        first = text.find(",")
        second = text.find(",", first + 1) if first >= 0 else -1
        if first < 0 or second < 0:
            raise ParseError(source, line_no, "expected '<id>,<words>,<gloss>'")
        synset_id = _parse_id(text[:first], source, line_no)
        words = tuple(text[first + 1 : second].split(" "))
        if not all(words):
            raise ParseError(source, line_no, "empty word in synset")
        yield SynsetRecord(id=synset_id, words=words, gloss=text[second + 1 :])


def parse_hypernyms(
    lines: Iterable[str], *, source: str = "hypernyms"
) -> Iterator[tuple[int, int]]:
    """Parse hypernym lines into ``(hyponym_id, hypernym_id)`` edge pairs."""
    for line_no, text in _clean_lines(lines):
        fields = text.split(",")
        from_id = _parse_id(fields[0], source, line_no)
        for raw in fields[1:]:
            yield from_id, _parse_id(raw, source, line_no)
