from __future__ import annotations

from dataclasses import dataclass, field

from game.feedback import Feedback
from game.ruleset import DEFAULT_RULES


@dataclass
class ColumnRange:
    low: int
    high: int

    def midpoint(self) -> int:
        return (self.low + self.high) // 2


@dataclass
class BisectionSolver:
    """
    Per-column bisection:
    - every column keeps the range of digit values still possible
    - the next guess is the midpoint of every range
    - TOO_LOW / TOO_HIGH / EXACT narrow the range of that column only

    With 16 digit values every column is pinned down after at most 5 guesses.

    Attributes:
        rules: ruleset dict
        ranges: one ColumnRange per column
    """

    rules: dict = field(default_factory=lambda: DEFAULT_RULES)
    ranges: list[ColumnRange] = field(default_factory=list)

    def __post_init__(self):
        if not self.ranges:
            self.reset()

    def reset(self) -> None:
        top = len(self.rules["symbols"]) - 1
        self.ranges = [
            ColumnRange(0, top) for _ in range(self.rules["code_length"])
        ]

    def next_guess(self) -> str:
        symbols = self.rules["symbols"]
        return "".join(symbols[r.midpoint()] for r in self.ranges)

    def update(self, guess: str, feedback: list[Feedback]) -> None:
        """Narrow every column range with the feedback for that column."""
        symbols = self.rules["symbols"]
        for r, symbol, fb in zip(self.ranges, guess, feedback):
            value = symbols.index(symbol)
            if fb is Feedback.TOO_LOW:
                r.low = value + 1
            elif fb is Feedback.TOO_HIGH:
                r.high = value - 1
            else:
                r.low = r.high = value

    def candidates(self) -> int:
        """Number of secrets still consistent with all feedback so far."""
        count = 1
        for r in self.ranges:
            count *= r.high - r.low + 1
        return count
