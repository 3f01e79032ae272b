import random
from .feedback import Feedback
from .ruleset import DEFAULT_RULES


def generate(rules=None, rng=None) -> str:
    """
    Produce a fresh secret: independent uniform picks from the alphabet.

    Args:
        rules (dict or None): Ruleset defining alphabet and code length.
        rng (random.Random or None): Entropy source. Defaults to the
        module-level generator.

    Returns:
        str: The secret, e.g. 'a1b2c3'.
    """

    rules = rules or DEFAULT_RULES
    rng = rng or random
    return "".join(rng.choices(rules["symbols"], k=rules["code_length"]))


class Code:
    """
        Represents the secret hex code for the Hexle game.
    Attributes:
        sequence (list[str]): The sequence of hex digits representing the code.
        rules (dict): The ruleset for validation.
        is_valid (bool): Whether the code is valid according to the rules."""

    def __init__(self, sequence=None, rules=None, strict=False):
        """
        Initialize a Code instance.

        Args:
            sequence (str, list or None): The hex digits of the code.
            rules (dict or None): Reference to the ruleset (defines length
            and alphabet).
            strict (bool): If True, raise ValueError for an invalid sequence.
        """

        self.rules = rules or DEFAULT_RULES
        if isinstance(sequence, str):
            self.sequence = [c.lower() for c in sequence.replace(" ", "")]
        elif sequence is None:
            self.sequence = []
        else:
            self.sequence = [c.lower() for c in sequence]

        self.is_valid = False
        if self.sequence:
            self.is_valid = self.validate(strict=strict)

    def generate_random(self, rng=None):
        """
        Replace the sequence with a random valid code.

        Args:
            rng (random.Random or None): Entropy source.
        """

        self.sequence = list(generate(self.rules, rng))
        self.is_valid = self.validate()

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code (length and alphabet).

        Args:
            strict (bool): If True, raise ValueError with an explanatory
            message when validation fails. If False, return False on failure.

        Returns:
            bool: True if the code sequence is valid; False if invalid and
            strict is False.
        """

        def fail(msg: str) -> bool:
            if strict:
                raise ValueError(msg)
            return False

        if len(self.sequence) != self.rules["code_length"]:
            return fail(
                f"Code length must be {self.rules['code_length']}, "
                f"but got {len(self.sequence)}."
            )

        for symbol in self.sequence:
            if symbol not in self.rules["symbols"]:
                allowed = "".join(self.rules["symbols"])
                return fail(f"Invalid digit '{symbol}'. Allowed: {allowed}.")

        return True

    def value_at(self, index: int) -> int:
        """Numeric value (0-15) of the digit at the given column."""
        return self.rules["symbols"].index(self.sequence[index])

    def compare_with(self, guess=None) -> list[Feedback]:
        """
        Compare this secret code with a complete Guess row.

        Each column is compared on its own, by numeric digit value. There is
        no "right digit, wrong place" category.

        Args:
            guess (Guess): A Guess whose cells are all filled.

        Returns:
            list[Feedback]: One feedback value per column.
        """

        symbols = self.rules["symbols"]
        return [
            Feedback.compare(symbols.index(cell), self.value_at(i))
            for i, cell in enumerate(guess.cells)
        ]

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'a1b2c3').
        Returns:
            str: The code as a string.
        """
        return "".join(self.sequence) if self.sequence else "EMPTY"

    def as_color(self):
        """Return the code as a CSS color, e.g. '#a1b2c3'."""
        return "#" + "".join(self.sequence)

    def __eq__(self, other):
        """
        Check equality between this Code and another object.

        Args:
            other (Code, str or list): What to compare against.

        Returns:
            bool: True if the sequences are equal, False otherwise.
        """

        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, str):
            return "".join(self.sequence) == other.lower()
        if isinstance(other, list):
            return self.sequence == other
        return False

    def __str__(self):
        return self.as_string()
