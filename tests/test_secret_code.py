import random

import pytest

from game.feedback import Feedback
from game.guess import Guess
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code, generate


def test_generate_uses_alphabet_and_length():
    rng = random.Random(1)
    for _ in range(200):
        secret = generate(rng=rng)
        assert len(secret) == 6
        assert set(secret) <= set("0123456789abcdef")


def test_generate_is_reproducible_with_seed():
    assert generate(rng=random.Random(42)) == generate(rng=random.Random(42))


def test_generate_covers_every_symbol():
    rng = random.Random(3)
    seen = set()
    for _ in range(200):
        seen.update(generate(rng=rng))
    assert seen == set(DEFAULT_RULES["symbols"])


def test_generate_random_produces_valid_code():
    code = Code()
    code.generate_random(random.Random(5))
    assert code.is_valid
    assert code.validate()


def test_code_lowercases_input():
    code = Code("A1B2C3")
    assert code.as_string() == "a1b2c3"
    assert code.as_color() == "#a1b2c3"
    assert code == "a1b2c3"
    assert code == Code("a1b2c3")
    assert code == list("a1b2c3")


def test_validate_non_strict_returns_false():
    code = Code("zzzzzz")
    assert code.is_valid is False
    assert code.validate(strict=False) is False
    with pytest.raises(ValueError, match="Invalid digit"):
        code.validate()


def test_validate_length():
    with pytest.raises(ValueError, match="Code length"):
        Code("abc", strict=True)


def test_compare_with_uses_digit_values():
    code = Code("0f0f0f")
    feedback = code.compare_with(Guess("f0f00f"))
    assert feedback == [
        Feedback.TOO_HIGH,
        Feedback.TOO_LOW,
        Feedback.TOO_HIGH,
        Feedback.TOO_LOW,
        Feedback.EXACT,
        Feedback.EXACT,
    ]


def test_value_at():
    code = Code("09afff")
    assert [code.value_at(i) for i in range(3)] == [0, 9, 10]


def test_empty_code_string():
    assert Code().as_string() == "EMPTY"
