from itertools import permutations

import pytest

from clue_index import ClueIndex
from scoring import (
    NoCluesCollectedError,
    count_clues_for,
    evaluate_accusation,
    matching_clues,
    sustain,
)

COLLECTED = ["Pegadas no tapete", "Folha rasgada", "Bilhete com endereço", "Pista solta"]


def _index(clues):
    index = ClueIndex()
    for clue in clues:
        index.add(clue)
    return index


@pytest.mark.parametrize("count, expected", [(0, False), (1, False), (2, True), (3, True), (50, True)])
def test_sustain_threshold(count, expected):
    assert sustain(count) is expected


@pytest.mark.parametrize(
    "suspect, expected",
    [
        ("Sra. Beatriz", 2),
        ("SRA. BEATRIZ", 2),
        ("sra. beatriz", 2),
        ("Sr. Almeida", 1),
        ("Carlos", 0),
        ("Ninguém", 0),
    ],
)
def test_count_clues_for(directory, suspect, expected):
    assert count_clues_for(_index(COLLECTED), directory, suspect) == expected


def test_unbound_clues_never_count(directory):
    assert matching_clues(["Pista solta"], directory, "unknown") == []


def test_count_is_independent_of_insertion_order(directory):
    counts = {
        count_clues_for(_index(order), directory, "Sra. Beatriz")
        for order in permutations(COLLECTED)
    }
    assert counts == {2}


def test_matching_clues_follow_index_order(directory):
    assert matching_clues(_index(COLLECTED), directory, "sra. beatriz") == [
        "Folha rasgada",
        "Pegadas no tapete",
    ]


def test_evaluate_accusation_sustained(directory):
    result = evaluate_accusation(_index(COLLECTED), directory, "Sra. Beatriz")
    assert result.accused == "Sra. Beatriz"
    assert result.count == 2
    assert result.threshold == 2
    assert result.sustained is True


def test_evaluate_accusation_not_sustained(directory):
    result = evaluate_accusation(_index(["Bilhete com endereço"]), directory, "Sr. Almeida")
    assert result.count == 1
    assert result.sustained is False
    assert result.matching_clues == ["Bilhete com endereço"]


def test_evaluate_accusation_requires_clues(directory):
    with pytest.raises(NoCluesCollectedError):
        evaluate_accusation(ClueIndex(), directory, "Carlos")
