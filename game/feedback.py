from enum import Enum


class Feedback(str, Enum):
    """Per-digit result of comparing a guessed digit with the secret digit."""

    TOO_LOW = "TOO_LOW"
    EXACT = "EXACT"
    TOO_HIGH = "TOO_HIGH"

    @classmethod
    def compare(cls, guessed: int, secret: int) -> "Feedback":
        if guessed < secret:
            return cls.TOO_LOW
        if guessed > secret:
            return cls.TOO_HIGH
        return cls.EXACT


class Outcome(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS


class Direction(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
