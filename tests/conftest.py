import pytest

from case_data import SUSPECT_BINDINGS
from clue_index import ClueIndex
from game_engine import MansionInvestigation
from suspect_directory import SuspectDirectory


@pytest.fixture()
def directory():
    return SuspectDirectory.from_bindings(SUSPECT_BINDINGS)


@pytest.fixture()
def game():
    g = MansionInvestigation()
    yield g
    g.close()


@pytest.fixture()
def empty_index():
    return ClueIndex()
