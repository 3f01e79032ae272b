# Map host key names (browser KeyboardEvent.key style) to board operations
from .feedback import Direction

ENTER = "Enter"
BACKSPACE = "Backspace"
ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"

CONTROL_KEYS = (ENTER, BACKSPACE, ARROW_LEFT, ARROW_RIGHT)


def dispatch_key(board, key):
    """
    Apply one key event to the board.

    Args:
        board (Board): The board receiving the input.
        key (str): Key name, e.g. 'a', '7', 'Enter', 'Backspace', 'ArrowLeft'.

    Returns:
        GameState: The snapshot after the key was handled. Unknown keys leave
        the board untouched.
    """
    if key == ENTER:
        return board.submit_row()
    if key == BACKSPACE:
        return board.delete_digit()
    if key == ARROW_LEFT:
        return board.move_cursor(Direction.LEFT)
    if key == ARROW_RIGHT:
        return board.move_cursor(Direction.RIGHT)
    return board.insert_digit(key)


def type_guess(board, guess):
    """Type a whole guess followed by Enter, one key at a time."""
    for key in guess:
        dispatch_key(board, key)
    return dispatch_key(board, ENTER)
