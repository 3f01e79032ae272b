from .feedback import Feedback
from .ruleset import DEFAULT_RULES


class Guess:
    """
        One row of the Hexle grid: a guess being typed or already submitted.
    Attributes:
        cells (list[str | None]): The hex digit in each column, None if empty.
        feedback (list[Feedback] | None): Per-column feedback once submitted.
        rules (dict): The ruleset for validation."""

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Guess row.
        Args:
            sequence (str | list[str] | None): Optional initial digits, filled
                from the left.
            rules (dict, optional): The ruleset. Defaults to DEFAULT_RULES.
        """

        self.rules = rules or DEFAULT_RULES
        # Each row owns its own cell list
        self.cells = [None] * self.rules["code_length"]
        self.feedback = None

        if sequence:
            for i, symbol in enumerate(list(sequence)[: len(self.cells)]):
                self.cells[i] = symbol

    def is_valid_symbol(self, symbol) -> bool:
        return isinstance(symbol, str) and symbol in self.rules["symbols"]

    def is_complete(self) -> bool:
        """True when every column holds a digit."""
        return all(cell is not None for cell in self.cells)

    def is_submitted(self) -> bool:
        return self.feedback is not None

    def apply_feedback(self, feedback: list[Feedback]):
        """
        Store feedback values after evaluation by the Code.
        Args:
            feedback (list[Feedback]): One value per column.
        """
        self.feedback = list(feedback)

    def get_feedback(self):
        """
        Return the stored feedback, or None if the row is not submitted.
        Returns:
            list[Feedback] | None: The feedback list.
        """
        return self.feedback

    def get_guess(self):
        return list(self.cells)

    def as_string(self):
        """
        Return the filled digits as a string (e.g. 'a1b2c3').
        Returns:
            str: The guess as a string."""
        return "".join(cell for cell in self.cells if cell is not None)

    def __str__(self):
        return self.as_string() or "EMPTY"
