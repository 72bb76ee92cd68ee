import random

import pytest

from jordle.config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from jordle.models.game import GameStatus, LetterStatus, encode_feedback
from jordle.services.evaluator import GuessEvaluator, InvalidGuess, compute_feedback, validate_word

EXACT = LetterStatus.EXACT
PRESENT = LetterStatus.PRESENT
ABSENT = LetterStatus.ABSENT

LOSING_GUESSES = ["crane", "plant", "bread", "sheep", "steel", "spend"]


def test_compute_feedback():
    assert compute_feedback("speed", "speed") == (EXACT,) * WORD_LENGTH
    assert compute_feedback("speed", "erase") == (PRESENT, ABSENT, ABSENT, PRESENT, PRESENT)
    assert compute_feedback("speed", "spide") == (EXACT, EXACT, ABSENT, PRESENT, PRESENT)
    assert compute_feedback("steep", "raise") == (ABSENT, ABSENT, ABSENT, PRESENT, PRESENT)
    assert compute_feedback("steep", "sleek") == (EXACT, ABSENT, EXACT, EXACT, ABSENT)
    assert compute_feedback("steep", "drool") == (ABSENT,) * WORD_LENGTH


def test_compute_feedback_duplicates():
    # exact matches claim their letters before presence is considered
    assert compute_feedback("speed", "eeeee") == (ABSENT, ABSENT, EXACT, EXACT, ABSENT)
    assert compute_feedback("crane", "eerie") == (ABSENT, ABSENT, PRESENT, ABSENT, EXACT)
    # leftmost occurrences claim the remaining letters first
    assert compute_feedback("enter", "geese") == (ABSENT, PRESENT, PRESENT, ABSENT, ABSENT)
    assert compute_feedback("abbey", "babes") == (PRESENT, PRESENT, EXACT, EXACT, ABSENT)


def test_compute_feedback_properties():
    rng = random.Random(1234)
    for _ in range(500):
        target = "".join(rng.choice("abcde") for _ in range(WORD_LENGTH))
        guess = "".join(rng.choice("abcde") for _ in range(WORD_LENGTH))
        feedback = compute_feedback(target, guess)

        assert len(feedback) == WORD_LENGTH
        for i in range(WORD_LENGTH):
            assert (feedback[i] == EXACT) == (guess[i] == target[i])
        for letter in set(guess):
            marked = sum(1 for g, status in zip(guess, feedback) if g == letter and status != ABSENT)
            assert marked <= target.count(letter)


def test_encode_feedback():
    assert encode_feedback(compute_feedback("speed", "speed")) == "EEEEE"
    assert encode_feedback(compute_feedback("speed", "erase")) == "PAAPP"


@pytest.mark.parametrize("word", ["spee", "speeds", "", "sp3ed", "spe d", "sp\u00e9ed", "\u212aayak", "spe\u0130d"])
def test_validate_word_rejects(word):
    with pytest.raises(InvalidGuess):
        validate_word(word)


def test_validate_word_normalizes():
    assert validate_word("  SpEeD ") == "speed"


def test_win():
    evaluator = GuessEvaluator("speed")
    assert evaluator.status == GameStatus.IN_PROGRESS
    assert evaluator.max_attempts == MAX_ATTEMPTS
    assert evaluator.word_length == WORD_LENGTH

    feedback = evaluator.evaluate("SPEED")

    assert feedback == (EXACT,) * WORD_LENGTH
    assert evaluator.attempts == 1
    assert evaluator.status == GameStatus.WON
    assert evaluator.last_feedback == feedback
    with pytest.raises(InvalidGuess):
        evaluator.evaluate("crane")
    assert evaluator.attempts == 1


def test_loss():
    evaluator = GuessEvaluator("speed")
    for idx, guess in enumerate(LOSING_GUESSES):
        assert not evaluator.is_over
        evaluator.evaluate(guess)
        assert evaluator.attempts == idx + 1

    assert evaluator.status == GameStatus.LOST
    assert evaluator.get_target() == "speed"
    with pytest.raises(InvalidGuess):
        evaluator.evaluate("speed")
    assert evaluator.attempts == MAX_ATTEMPTS


def test_win_on_last_attempt():
    evaluator = GuessEvaluator("speed")
    for guess in LOSING_GUESSES[:-1]:
        evaluator.evaluate(guess)
    evaluator.evaluate("speed")
    assert evaluator.status == GameStatus.WON
    assert evaluator.attempts == MAX_ATTEMPTS


def test_invalid_guess_does_not_count():
    evaluator = GuessEvaluator("speed")
    evaluator.evaluate("crane")
    for guess in ["cran", "cranes", "cr4ne", "", "     ", "\u212aayak"]:
        with pytest.raises(InvalidGuess):
            evaluator.evaluate(guess)
    assert evaluator.attempts == 1
    assert evaluator.status == GameStatus.IN_PROGRESS


def test_reset():
    evaluator = GuessEvaluator("speed")
    for guess in LOSING_GUESSES:
        evaluator.evaluate(guess)
    assert evaluator.status == GameStatus.LOST

    evaluator.reset()
    assert evaluator.attempts == 0
    assert evaluator.status == GameStatus.IN_PROGRESS
    assert evaluator.last_feedback is None
    assert evaluator.get_target() == "speed"

    with pytest.raises(InvalidGuess):
        evaluator.evaluate("toolong")
    assert evaluator.attempts == 0


@pytest.mark.parametrize("target", ["spee", "sp33d", "", "speeds"])
def test_malformed_target(target):
    with pytest.raises(ValueError):
        GuessEvaluator(target)


def test_custom_length():
    evaluator = GuessEvaluator("moon", word_length=4, max_attempts=2)
    assert evaluator.evaluate("noon") == (ABSENT, EXACT, EXACT, EXACT)
    with pytest.raises(InvalidGuess):
        evaluator.evaluate("moons")
    evaluator.evaluate("mono")
    assert evaluator.status == GameStatus.LOST


def test_non_ascii_lookalike_letters_rejected():
    # U+212A KELVIN SIGN lowercases to an ASCII "k"
    evaluator = GuessEvaluator("kayak")
    with pytest.raises(InvalidGuess):
        evaluator.evaluate("\u212aayak")
    assert evaluator.attempts == 0

    with pytest.raises(ValueError):
        GuessEvaluator("\u212aayak")


def test_compute_feedback_length_mismatch():
    with pytest.raises(ValueError):
        compute_feedback("speed", "speeds")
