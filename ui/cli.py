# # Command-line interface (text-based play)

from game.board import Board
from game.keys import ARROW_LEFT, ARROW_RIGHT, BACKSPACE, ENTER, dispatch_key
from game.ruleset import DEFAULT_RULES

COMMANDS = {
    "": ENTER,
    "enter": ENTER,
    "<": BACKSPACE,
    "back": BACKSPACE,
    "left": ARROW_LEFT,
    "right": ARROW_RIGHT,
}


def handle_line(board, line):
    """
    Turn one line of user input into key events.

    A command word maps to a single control key, anything else is typed
    character by character. Returns the resulting snapshot.
    """
    text = line.strip().lower()
    if text in COMMANDS:
        return dispatch_key(board, COMMANDS[text])
    state = board.snapshot()
    for key in text.replace(" ", ""):
        state = dispatch_key(board, key)
    return state


def gameloop(board=None, input_fn=input):
    print("=== Hexle CLI ===")
    print(
        "Type hex digits (0-9, a-f) and press Enter on an empty line to submit.\n"
        "Commands: '<' or 'back' deletes, 'left'/'right' move, 'new' restarts, 'exit' quits.\n"
    )
    marks = DEFAULT_RULES["display"]["emoji_map"]
    print(
        f"{marks['TOO_LOW']} too low  {marks['EXACT']} exact  {marks['TOO_HIGH']} too high"
    )

    b = board or Board(rules=DEFAULT_RULES)
    print(b.render())

    while not b.is_over:
        print(f"\nAttempts left: {b.remaining_attempts()}")
        try:
            user_input = input_fn("> ")
        except EOFError:
            print("Exiting game.")
            break

        # handle special commands
        command = user_input.strip().lower()
        if command == "exit":
            print("Exiting game.")
            break
        elif command == "new":
            b.reset()
            print("New game started.")
            print(b.render())
            continue

        state = handle_line(b, user_input)
        print(b.render())

        # Check win/loss
        if state.is_won:
            print("\nCongratulations, you cracked the color!")
            print(f"The hex was: #{state.secret_code}")
        elif state.is_over:
            print("\nNo more attempts left.")
            print(f"The hex was: #{state.secret_code}")

    print("\n=== Game Over ===")
    return b


if __name__ == "__main__":
    gameloop()
