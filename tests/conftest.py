"""Shared pytest fixtures for wordnetctl tests.

The sample hierarchy (edges point hyponym -> hypernym)::

    10 entity
    ├── 20 physical_entity
    │   └── 40 object
    │       ├── 50 animal
    │       │   ├── 80 equine
    │       │   │   ├── 60 horse
    │       │   │   └── 70 zebra
    │       │   ├── 110 bear
    │       │   └── 120 cat
    │       └── 100 furniture
    │           ├── 90 table
    │           └── 130 horse (sawhorse)
    └── 30 abstraction
        └── 140 idea

"horse" is polysemous: synsets 60 and 130.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from wordnetctl.infrastructure.wordnet import WordNet
from wordnetctl.services.telemetry import disable_telemetry

SYNSETS = """\
10,entity,that which is perceived or known or inferred to have its own distinct existence
20,physical_entity,an entity that has physical existence
30,abstraction abstract_entity,a general concept formed by extracting common features
40,object physical_object,a tangible and visible entity; an entity that can cast a shadow
50,animal beast,a living organism characterized by voluntary movement
60,horse Equus_caballus,solid-hoofed herbivorous quadruped domesticated since prehistoric times
70,zebra,any of several fleet black-and-white striped African equines
80,equine equid,hoofed mammals having slender legs and a flat coat
90,table,a piece of furniture having a smooth flat top
100,furniture piece_of_furniture,furnishings that make a room, or other area, ready for occupancy
110,bear,massive plantigrade carnivorous or omnivorous mammals
120,cat true_cat,feline mammal usually having thick soft fur
130,horse sawhorse,a framework for holding wood that is being sawed
140,idea thought,the content of cognition
"""

HYPERNYMS = """\
10
20,10
30,10
40,20
50,40
80,50
60,80
70,80
110,50
120,50
100,40
90,100
130,100
140,30
"""


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Commands run with -v enable telemetry; never leak it between tests."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def wordnet() -> WordNet:
    """WordNet built in memory from the sample hierarchy."""
    return WordNet(SYNSETS.splitlines(), HYPERNYMS.splitlines())


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Temporary directory holding ``synsets.txt`` and ``hypernyms.txt``."""
    (tmp_path / "synsets.txt").write_text(SYNSETS, encoding="utf-8")
    (tmp_path / "hypernyms.txt").write_text(HYPERNYMS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_data(data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample data directory so the CLI finds the inputs.

    Use via ``@pytest.mark.usefixtures("_isolated_data")`` on command test
    classes.
    """
    monkeypatch.delenv("WORDNETCTL_CONFIG", raising=False)
    monkeypatch.chdir(data_dir)


@pytest.fixture
def make_wordnet() -> Callable[[str, str], WordNet]:
    """Factory building a WordNet from inline synset and hypernym text."""

    def _make(synsets: str, hypernyms: str) -> WordNet:
        return WordNet(synsets.splitlines(), hypernyms.splitlines())

    return _make
