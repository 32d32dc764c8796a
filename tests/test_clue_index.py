from itertools import permutations

import pytest

from case_data import SUSPECT_BINDINGS
from clue_index import ClueIndex, height, insert, iter_in_order

CLUES = [clue for clue, _ in SUSPECT_BINDINGS]


def _shape(node):
    if node is None:
        return None
    return (node.text, _shape(node.left), _shape(node.right))


def test_insert_into_empty_tree_creates_root():
    root = insert(None, "Folha rasgada")
    assert root.text == "Folha rasgada"
    assert root.left is None and root.right is None


def test_insert_returns_same_root_for_existing_tree():
    root = insert(None, "M")
    assert insert(root, "A") is root
    assert insert(root, "Z") is root
    assert root.left.text == "A"
    assert root.right.text == "Z"


def test_empty_text_is_a_noop():
    assert insert(None, "") is None
    root = insert(insert(None, "M"), "A")
    before = _shape(root)
    assert insert(root, "") is root
    assert _shape(root) == before


def test_duplicate_is_rejected_silently():
    root = insert(None, "Faca com manchas")
    before = _shape(root)
    insert(root, "Faca com manchas")
    assert _shape(root) == before


@pytest.mark.parametrize("order", list(permutations(CLUES)))
def test_in_order_is_sorted_and_distinct_for_any_insertion_order(order):
    index = ClueIndex()
    for clue in order + order:
        index.add(clue)
    assert list(index) == sorted(CLUES)
    assert len(index) == len(CLUES)


def test_comparison_is_case_and_accent_sensitive():
    index = ClueIndex()
    for clue in ["bilhete", "Bilhete", "Bilhete com endereço", "Bilhete com endereco"]:
        index.add(clue)
    assert list(index) == [
        "Bilhete",
        "Bilhete com endereco",
        "Bilhete com endereço",
        "bilhete",
    ]


def test_add_reports_new_entries(empty_index):
    assert empty_index.add("Livro deslocado") is True
    assert empty_index.add("Livro deslocado") is False
    assert empty_index.add("") is False
    assert len(empty_index) == 1


def test_enumeration_is_restartable(empty_index):
    for clue in CLUES:
        empty_index.add(clue)
    assert list(empty_index) == list(empty_index)
    assert list(iter_in_order(empty_index.root)) == sorted(CLUES)


def test_empty_index_is_falsy(empty_index):
    assert not empty_index
    assert list(empty_index) == []
    assert empty_index.height() == 0
    empty_index.add("x")
    assert empty_index


def test_membership(empty_index):
    empty_index.add("Pegadas no tapete")
    assert "Pegadas no tapete" in empty_index
    assert "pegadas no tapete" not in empty_index
    assert 42 not in empty_index


def test_sorted_insertion_degenerates_to_a_list():
    root = None
    for text in ["a", "b", "c", "d"]:
        root = insert(root, text)
    assert height(root) == 4


def test_clear_drops_everything(empty_index):
    empty_index.add("a")
    empty_index.clear()
    assert len(empty_index) == 0
    assert not empty_index
