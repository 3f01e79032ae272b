from game.board import Board
from game.feedback import Outcome
from game.keys import dispatch_key, type_guess


def press(board, *keys):
    state = board.snapshot()
    for key in keys:
        state = dispatch_key(board, key)
    return state


def test_hex_keys_insert_digits():
    board = Board(secret="000000")
    state = press(board, "a", "7")
    assert state.rows[0][:2] == ("a", "7")
    assert state.cursor == (0, 2)


def test_backspace_key_deletes():
    board = Board(secret="000000")
    state = press(board, "1", "2", "3", "Backspace")
    assert state.rows[0][:3] == ("1", "2", None)
    assert state.cursor == (0, 2)


def test_arrow_keys_move_cursor():
    board = Board(secret="000000")
    state = press(board, "1", "2", "ArrowLeft")
    assert state.cursor == (0, 1)
    state = press(board, "ArrowRight")
    assert state.cursor == (0, 2)


def test_unknown_keys_are_ignored():
    board = Board(secret="000000")
    press(board, "1")
    before = board.snapshot()
    state = press(board, "Shift", "ArrowUp", "Escape", "G", "Tab")
    assert state == before


def test_enter_submits_complete_row_only():
    board = Board(secret="000000")
    state = press(board, "1", "2", "Enter")
    assert state.cursor == (0, 2)
    assert state.feedback[0] is None
    state = press(board, "3", "4", "5", "6", "Enter")
    assert state.cursor == (1, 0)
    assert state.feedback[0] is not None


def test_type_guess_wins():
    board = Board(secret="c0ffee")
    state = type_guess(board, "c0ffee")
    assert state.outcome is Outcome.WON
