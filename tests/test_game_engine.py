"""
Testing pure game logic.
"""

import dataclasses
import random

import pytest

from wordle_game.models.game import Color, GameEvent, GameStatus
from wordle_game.services.game_engine import GameEngine, normalize_key


def test_new_game_starts_empty(engine):
    assert engine.status() == GameStatus.IN_PROGRESS
    assert engine.current_row() == 0
    assert engine.current_column() == 0
    assert engine.grid() == [[""] * 5 for _ in range(6)]
    assert engine.secret_word == "HELLO"


def test_empty_word_list_rejected():
    with pytest.raises(ValueError):
        GameEngine([])


@pytest.mark.parametrize("letters", ["", "A", "AB", "ABCD", "ABCDE", "ABCDEFG", "ZZZZZZZZZ"])
def test_column_counts_letters_clamped_at_word_length(engine, type_word, letters):
    type_word(engine, letters, submit=False)

    assert engine.current_column() == min(len(letters), 5)
    assert engine.grid()[0] == (list(letters[:5]) + [""] * 5)[:5]


def test_lowercase_letters_are_uppercased(engine, type_word):
    type_word(engine, "hel", submit=False)

    assert engine.grid()[0][:3] == ["H", "E", "L"]


def test_clear_then_same_letter_restores_grid(engine, type_word):
    type_word(engine, "LOW", submit=False)
    before = engine.grid()

    engine.submit_key("CLEAR")
    assert engine.grid()[0][2] == ""
    assert engine.current_column() == 2

    engine.submit_key("W")
    assert engine.grid() == before
    assert engine.current_column() == 3


def test_clear_at_first_column_is_noop(engine):
    state = engine.state

    engine.submit_key("CLEAR")

    assert engine.state is state
    assert engine.current_column() == 0


def test_enter_on_partial_row_is_noop(engine, type_word):
    type_word(engine, "HELL", submit=False)
    state = engine.state
    grid = engine.grid()

    engine.submit_key("ENTER")

    assert engine.state is state
    assert engine.grid() == grid
    assert (engine.current_row(), engine.current_column()) == (0, 4)


@pytest.mark.parametrize("key", ["1", "AB", "SPACE", "enter", "", None, 5, "É"])
def test_unknown_keys_are_noops(engine, key):
    state = engine.state

    engine.submit_key(key)

    assert engine.state is state


def test_normalize_key():
    assert normalize_key("q") == "Q"
    assert normalize_key("ENTER") == "ENTER"
    assert normalize_key("CLEAR") == "CLEAR"
    assert normalize_key("clear") is None
    assert normalize_key(7) is None


def test_transitions_never_alias_the_grid(engine, type_word):
    old_state = engine.state
    snapshot = engine.grid()

    type_word(engine, "LOWER")

    assert old_state.to_dict()["grid"] == [[""] * 5 for _ in range(6)]
    assert engine.state is not old_state

    snapshot[0][0] = "X"
    engine.grid()[1][0] = "Y"
    assert engine.grid()[0][0] == "L"
    assert engine.grid()[1][0] == ""


def test_enter_on_full_row_advances_cursor(engine, type_word):
    type_word(engine, "LOWER")

    assert engine.current_row() == 1
    assert engine.current_column() == 0
    assert engine.status() == GameStatus.IN_PROGRESS


def test_unsubmitted_rows_are_neutral(engine, type_word):
    type_word(engine, "HELLO", submit=False)

    assert engine.row_colors(0) == [Color.NEUTRAL] * 5
    assert engine.row_colors(5) == [Color.NEUTRAL] * 5


def test_lower_against_hello():
    engine = GameEngine(["HELLO"])
    for letter in "LOWER":
        engine.submit_key(letter)
    engine.submit_key("ENTER")

    assert engine.row_colors(0) == [
        Color.PRESENT, Color.PRESENT, Color.ABSENT, Color.PRESENT, Color.ABSENT
    ]
    assert engine.row_colors(1) == [Color.NEUTRAL] * 5


def test_present_is_not_limited_by_letter_count(engine, type_word):
    type_word(engine, "LEVEL")

    assert engine.row_colors(0) == [
        Color.PRESENT, Color.EXACT, Color.ABSENT, Color.PRESENT, Color.PRESENT
    ]


def test_strict_letter_counts_limit_present():
    engine = GameEngine(["HELLO"], strict_letter_counts=True)
    for letter in "LEVEL":
        engine.submit_key(letter)
    engine.submit_key("ENTER")

    assert engine.row_colors(0) == [
        Color.PRESENT, Color.EXACT, Color.ABSENT, Color.ABSENT, Color.PRESENT
    ]


def test_cell_color_outside_grid_raises(engine):
    with pytest.raises(IndexError):
        engine.cell_color(0, 5)
    with pytest.raises(IndexError):
        engine.cell_color(-1, 0)


def test_winning_row(engine, type_word):
    events = []
    engine.subscribe(GameEvent.WON, events.append)
    engine.subscribe(GameEvent.LOST, events.append)

    type_word(engine, "LOWER")
    type_word(engine, "hello")

    assert engine.status() == GameStatus.WON
    assert engine.current_row() == 2
    assert engine.row_colors(1) == [Color.EXACT] * 5
    assert len(events) == 1
    assert events[0].status == GameStatus.WON

    # Repeated renders and further input do not fire again
    engine.row_colors(1)
    engine.keyboard_colors()
    assert len(events) == 1


def test_no_input_accepted_after_game_over(engine, type_word):
    type_word(engine, "HELLO")
    state = engine.state

    for key in ["A", "CLEAR", "ENTER"]:
        engine.submit_key(key)

    assert engine.state is state


def test_loss_after_last_row(engine, type_word):
    lost = []
    engine.subscribe(GameEvent.LOST, lost.append)

    for _ in range(5):
        type_word(engine, "QUICK")
        assert engine.status() == GameStatus.IN_PROGRESS
    assert lost == []

    type_word(engine, "QUICK")

    assert engine.status() == GameStatus.LOST
    assert engine.current_row() == 6
    assert len(lost) == 1

    type_word(engine, "HELLO")
    assert engine.status() == GameStatus.LOST
    assert len(lost) == 1


def test_winning_on_last_row_is_a_win(type_word):
    engine = GameEngine(["HELLO"], max_attempts=2)
    type_word(engine, "QUICK")
    type_word(engine, "HELLO")

    assert engine.status() == GameStatus.WON


@pytest.mark.parametrize("final_word", ["HELLO", "QUICK"])
def test_restart_resets_everything(engine, type_word, final_word):
    type_word(engine, "QUICK")
    type_word(engine, final_word)
    for _ in range(4):
        type_word(engine, "QUICK")
    assert engine.status() != GameStatus.IN_PROGRESS

    engine.restart()

    assert engine.status() == GameStatus.IN_PROGRESS
    assert engine.grid() == [[""] * 5 for _ in range(6)]
    assert (engine.current_row(), engine.current_column()) == (0, 0)
    assert engine.secret_word == "HELLO"


def test_restart_picks_word_from_list():
    words = ["HELLO", "WORLD", "QUICK"]
    engine = GameEngine(words, rng=random.Random(3))

    seen = set()
    for _ in range(30):
        engine.restart()
        seen.add(engine.secret_word)

    assert seen <= set(words)
    assert len(seen) > 1


def test_restart_keeps_subscribers(engine, type_word):
    won = []
    engine.subscribe(GameEvent.WON, won.append)

    type_word(engine, "HELLO")
    engine.restart()
    type_word(engine, "HELLO")

    assert len(won) == 2


def test_key_colors(engine, type_word):
    type_word(engine, "LOWER")

    assert engine.key_color("L") == Color.PRESENT
    assert engine.key_color("w") == Color.ABSENT
    assert engine.key_color("H") == Color.UNUSED
    assert engine.key_color("ENTER") == Color.UNUSED
    assert engine.key_color("CLEAR") == Color.UNUSED


def test_key_color_best_outcome_wins(engine, type_word):
    type_word(engine, "LOWER")
    type_word(engine, "WORLD")
    assert engine.key_color("L") == Color.EXACT

    type_word(engine, "OLIVE")
    assert engine.key_color("L") == Color.EXACT
    assert engine.key_color("O") == Color.PRESENT


def test_key_color_absent_then_exact_reports_exact(type_word):
    engine = GameEngine(["HELLO"], strict_letter_counts=True)

    # First L is absent once both L's are matched exactly
    type_word(engine, "LOLLY")

    assert engine.row_colors(0)[0] == Color.ABSENT
    assert engine.row_colors(0)[2] == Color.EXACT
    assert engine.key_color("L") == Color.EXACT


def test_keys_in_unsubmitted_rows_are_unused(engine, type_word):
    type_word(engine, "QUI", submit=False)

    assert engine.key_color("Q") == Color.UNUSED
    assert set(engine.keyboard_colors().values()) == {Color.UNUSED}


def test_state_record_serializes(engine, type_word):
    type_word(engine, "LOWER")
    type_word(engine, "HE", submit=False)

    record = engine.state.to_dict()

    assert record == {
        "secret_word": "HELLO",
        "grid": [list("LOWER"), ["H", "E", "", "", ""]] + [[""] * 5 for _ in range(4)],
        "current_row": 1,
        "current_column": 2,
        "status": "IN_PROGRESS",
    }
    record["grid"][0][0] = "X"
    assert engine.grid()[0][0] == "L"


def test_state_record_cannot_be_edited(engine, type_word):
    type_word(engine, "LOW", submit=False)
    state = engine.state

    with pytest.raises(dataclasses.FrozenInstanceError):
        state.current_column = 0
    with pytest.raises(TypeError):
        state.grid[0][0] = "X"
    with pytest.raises(AttributeError):
        state.grid[0].append("X")

    assert engine.grid()[0] == ["L", "O", "W", "", ""]
    assert engine.current_column() == 3
