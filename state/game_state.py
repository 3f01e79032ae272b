# state/game_state.py
from game.feedback import Feedback, Outcome


class GameState:
    """Read-only snapshot of a Hexle board for rendering or export"""

    def __init__(
        self,
        rules,
        rows,
        feedback,
        cursor,
        outcome,
        current_attempts,
        code=None,
    ):
        self.rules = rules
        # Tuples so the snapshot cannot be used to mutate the board
        self.rows = tuple(tuple(row) for row in rows)
        self.feedback = tuple(
            tuple(fb) if fb is not None else None for fb in feedback
        )
        self.cursor = tuple(cursor)
        self.outcome = Outcome(outcome)
        self.current_attempts = current_attempts
        # Only set once the game is over
        self.secret_code = code

    @property
    def is_over(self):
        return self.outcome.is_terminal

    @property
    def is_won(self):
        return self.outcome is Outcome.WON

    def cell(self, row, column):
        return self.rows[row][column]

    def feedback_at(self, row, column):
        fb = self.feedback[row]
        return fb[column] if fb is not None else None

    def is_active(self, row, column):
        # The focused cell, highlighted while the game runs
        return not self.is_over and (row, column) == self.cursor

    def to_dict(self):
        # Return the gamestate as dictionary for i.e. json
        return {
            "rules": self.rules,
            "rows": [list(row) for row in self.rows],
            "feedback": [
                [f.value for f in fb] if fb is not None else None
                for fb in self.feedback
            ],
            "cursor": list(self.cursor),
            "outcome": self.outcome.value,
            "current_attempts": self.current_attempts,
            "secret_code": self.secret_code,
        }

    @classmethod
    def from_dict(cls, data):
        # Load the gamestate from a dictionary
        try:
            return cls(
                rules=data["rules"],
                rows=data["rows"],
                feedback=[
                    [Feedback(f) for f in fb] if fb is not None else None
                    for fb in data["feedback"]
                ],
                cursor=data["cursor"],
                outcome=data["outcome"],
                current_attempts=data["current_attempts"],
                code=data.get("secret_code"),
            )
        except KeyError as e:
            raise ValueError(f"Missing field in game state: {e}") from e

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()
