import pytest

from clue_index import ClueIndex
from game_engine import (
    ExplorationController,
    ExplorationFinishedError,
    MansionInvestigation,
    SessionClosedError,
)
from room_map import connect, count_pending_clues, create_room
from scoring import count_clues_for


def test_entry_room_clue_is_collected_on_start(game):
    assert game.current_room.name == "Hall de Entrada"
    assert game.arrival.collected == "Bilhete com endereço"
    assert game.arrival.is_new is True
    assert list(game.clues) == ["Bilhete com endereço"]
    assert game.current_room.clue is None
    assert game.available_choices() == ["left", "right", "exit"]


def test_left_left_exit_scenario(game):
    first = game.move("l")
    assert first.accepted and first.room.name == "Sala de Estar"
    assert first.collected == "Pegadas no tapete"
    second = game.move("left")
    assert second.room.name == "Jardim"
    final = game.move("x")
    assert final.finished and not game.exploring

    assert list(game.clues) == [
        "Bilhete com endereço",
        "Folha rasgada",
        "Pegadas no tapete",
    ]
    result = game.accuse("Sra. Beatriz")
    assert result.count == 2
    assert result.sustained is True
    assert game.state.accusation_made and game.state.sustained is True


def test_exit_immediately_scenario(game):
    game.move("exit")
    assert list(game.clues) == ["Bilhete com endereço"]
    result = game.accuse("Sr. Almeida")
    assert result.count == 1
    assert result.sustained is False


def test_accused_name_casing_does_not_matter(game):
    game.move("x")
    exact = game.accuse("Sr. Almeida")
    lower = game.accuse("sr. almeida")
    assert exact.count == lower.count == 1


@pytest.mark.parametrize("token", ["up", "", "  ", "left-ish", None])
def test_unrecognised_input_keeps_position(game, token):
    result = game.move(token)
    assert not result.accepted
    assert result.choice is None
    assert result.reason
    assert game.current_room.name == "Hall de Entrada"
    assert game.exploring
    assert game.state.invalid_choices == 1


def test_missing_path_is_rejected(game):
    game.move("r")
    game.move("r")
    assert game.current_room.name == "Biblioteca"
    assert game.available_choices() == ["exit"]
    for token in ("l", "r"):
        result = game.move(token)
        assert not result.accepted
        assert "no path" in result.reason
    assert game.current_room.name == "Biblioteca"
    assert game.exploring
    assert game.state.moves == 2
    assert game.state.invalid_choices == 2


def test_portuguese_shortcuts_are_accepted(game):
    assert game.move("E").room.name == "Sala de Estar"
    assert game.move("s").finished


def test_revisiting_a_room_collects_its_clue_once():
    hall = create_room("Hall", "Bilhete")
    sala = create_room("Sala", "Pegadas")
    connect(hall, left=sala)
    clues = ClueIndex()

    controller = ExplorationController(hall, clues)
    controller.choose("left")
    # Re-enter the entry room through a fresh controller on the same map.
    again = ExplorationController(hall, clues)
    assert again.arrival.collected is None
    again.choose("left")
    assert list(clues) == ["Bilhete", "Pegadas"]
    assert count_pending_clues(hall) == 0


def test_same_clue_in_two_rooms_is_indexed_once():
    hall = create_room("Hall", "Pegadas")
    sala = create_room("Sala", "Pegadas")
    connect(hall, right=sala)
    clues = ClueIndex()
    controller = ExplorationController(hall, clues)
    result = controller.choose("right")
    assert result.collected == "Pegadas"
    assert result.is_new is False
    assert len(clues) == 1


def test_leaf_does_not_end_exploration(game):
    game.move("l")
    game.move("l")
    assert game.current_room.is_leaf
    assert game.exploring


def test_choice_after_exit_raises(game):
    game.move("x")
    with pytest.raises(ExplorationFinishedError):
        game.move("l")


def test_no_clues_short_circuits_without_evaluating(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "game_engine.evaluate_accusation",
        lambda *args: calls.append(args),
    )
    game = MansionInvestigation(
        layout={"Porão": {"clue": None, "left": None, "right": None}},
        entry="Porão",
        bindings=[],
    )
    game.move("x")
    assert not game.can_accuse()
    assert game.accuse("Carlos") is None
    assert calls == []
    assert game.state.accusation_made is False


def test_clue_report_annotates_unknown_clues():
    game = MansionInvestigation(
        layout={
            "Hall": {"clue": "Bilhete com endereço", "left": "Sótão", "right": None},
            "Sótão": {"clue": "Poeira", "left": None, "right": None},
        },
        entry="Hall",
    )
    game.move("l")
    report = game.clue_report()
    assert [(r.clue, r.suspect) for r in report] == [
        ("Bilhete com endereço", "Sr. Almeida"),
        ("Poeira", None),
    ]


def test_count_is_order_independent_across_routes():
    east = MansionInvestigation()
    east.move("r")
    east.move("r")
    east.move("x")

    counts = count_clues_for(east.clues, east.directory, "Carlos")
    assert counts == 2
    assert east.accuse("carlos").sustained is True


def test_close_is_once_and_blocks_further_use(game):
    game.close()
    game.close()
    assert game.entry_room is None
    assert len(game.clues) == 0
    assert len(game.directory) == 0
    with pytest.raises(SessionClosedError):
        game.move("l")
    with pytest.raises(SessionClosedError):
        game.accuse("Carlos")


def test_reset_starts_over(game):
    game.move("l")
    game.move("x")
    game.accuse("Sra. Beatriz")
    game.reset()
    assert game.exploring
    assert game.current_room.name == "Hall de Entrada"
    assert list(game.clues) == ["Bilhete com endereço"]
    assert game.state.moves == 0
    assert game.state.rooms_visited == {"Hall de Entrada"}
    assert game.last_result is None
