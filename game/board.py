from .feedback import Direction, Outcome
from .guess import Guess
from .ruleset import DEFAULT_RULES
from .secret_code import Code
from state.game_state import GameState


class Board:
    """Main game board class: manages the grid, the cursor and the secret code.

    Every input operation returns the updated GameState snapshot. Input that
    does not apply (bad key, incomplete row, finished game) is ignored and the
    unchanged snapshot is returned.
    """

    def __init__(self, rules=None, secret=None, rng=None):
        """Initialize the board with a given ruleset and start a game.

        Args:
            rules (dict, optional): Ruleset. Defaults to DEFAULT_RULES.
            secret (str, optional): Fixed secret instead of a random one.
            rng (random.Random, optional): Entropy source for secrets.
        """
        self.rules = rules or DEFAULT_RULES
        self.rng = rng
        self.rows = self.rules["max_attempts"]
        self.columns = self.rules["code_length"]
        self.initialize_game(secret)

    def initialize_game(self, secret=None):
        """Set up a new game: generate a secret code and reset state."""
        if secret is None:
            self.secret_code = Code(rules=self.rules)
            self.secret_code.generate_random(self.rng)
        else:
            self.secret_code = Code(secret, rules=self.rules, strict=True)
        # One fresh Guess per row, never a shared row object
        self.guesses = [Guess(rules=self.rules) for _ in range(self.rows)]
        self.current_row = 0
        self.current_column = 0
        self.current_attempt = 0
        self.outcome = Outcome.IN_PROGRESS

    @property
    def is_over(self):
        return self.outcome.is_terminal

    @property
    def is_won(self):
        return self.outcome is Outcome.WON

    @property
    def cursor(self):
        return (self.current_row, self.current_column)

    def _row(self):
        return self.guesses[self.current_row]

    def insert_digit(self, symbol):
        """Write a hex digit at the cursor and advance the cursor."""
        row = self._row()
        if self.is_over or not row.is_valid_symbol(symbol) or row.is_complete():
            return self.snapshot()

        row.cells[self.current_column] = symbol
        self.current_column = min(self.current_column + 1, self.columns - 1)
        return self.snapshot()

    def delete_digit(self):
        """Clear the digit before the cursor and move the cursor back."""
        if self.is_over:
            return self.snapshot()

        row = self._row()
        last = self.columns - 1
        # Only exception to the max(column-1, 0) rule: the cursor is capped on
        # the filled last column, so that cell is the one before it
        if self.current_column == last and row.cells[last] is not None:
            row.cells[last] = None
            return self.snapshot()

        target = max(self.current_column - 1, 0)
        row.cells[target] = None
        self.current_column = target
        return self.snapshot()

    def move_cursor(self, direction):
        """Move the cursor left, or right over an already filled cell."""
        if self.is_over:
            return self.snapshot()
        try:
            direction = Direction(direction)
        except ValueError:
            return self.snapshot()

        if direction is Direction.LEFT:
            self.current_column = max(self.current_column - 1, 0)
        elif self._row().cells[self.current_column] is not None:
            self.current_column = min(self.current_column + 1, self.columns - 1)
        return self.snapshot()

    def submit_row(self):
        """Evaluate the current row if it is complete and update the outcome."""
        row = self._row()
        if self.is_over or not row.is_complete():
            return self.snapshot()

        # Calculate feedback
        row.apply_feedback(self.secret_code.compare_with(row))
        self.current_attempt += 1

        # Validate win/lose, win first so a correct last row still wins
        if self.secret_code == row.as_string():
            self.outcome = Outcome.WON
        elif self.current_row == self.rows - 1:
            self.outcome = Outcome.LOST
        else:
            self.current_row += 1
            self.current_column = 0
        return self.snapshot()

    def reset(self):
        """Reset the board for a new game with the same rules."""
        self.initialize_game()
        return self.snapshot()

    def get_feedback_history(self):
        """Return the submitted guesses with their feedback."""
        return [
            (guess.as_string(), guess.get_feedback())
            for guess in self.guesses
            if guess.is_submitted()
        ]

    def reveal_code(self):
        """Return the secret code once the game is over, None before."""
        if not self.is_over:
            return None
        return self.secret_code.as_string()

    def display_color(self):
        """CSS color of the secret, for hosts that paint the puzzle color."""
        return self.secret_code.as_color()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.rows - self.current_attempt)

    def snapshot(self):
        """Return a GameState snapshot for rendering or export."""
        return GameState(
            rules=self.rules,
            rows=[g.get_guess() for g in self.guesses],
            feedback=[g.get_feedback() for g in self.guesses],
            cursor=self.cursor,
            outcome=self.outcome,
            current_attempts=self.current_attempt,
            code=self.reveal_code(),
        )

    get_current_state = snapshot

    def render(self):
        """Render a text-based representation of the board (for CLI)."""

        marks = self.rules["display"]["emoji_map"]
        width = self.columns
        title = "| " + "Hexle".center(width * 8 - 3) + " |"
        line = "+---" * width + "+" + "----" * width
        lines = [line, title, line]
        for r, guess in enumerate(self.guesses):
            cells = ""
            for c, symbol in enumerate(guess.cells):
                active = not self.is_over and (r, c) == self.cursor
                text = symbol or ("_" if active else " ")
                cells += "|" + (f"[{text}]" if active else f" {text} ")
            feedback = guess.get_feedback() or []
            marks_line = "".join(f" {marks[f.value]} " for f in feedback)
            lines.append(cells + "|" + marks_line)
        lines.append(line)
        return "\n".join(lines)
