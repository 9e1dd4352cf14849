import io
import random

import pytest

from millionaire.display import LEVELS, PRIZES
from millionaire.game import Game, Lifeline, read_choice
from millionaire.questions import Question


def _questions(answer=0, hint=None):
    return [
        Question(f"Q{i}", ("w", "x", "y", "z"), answer, hint) for i in range(LEVELS)
    ]


def _game(keys, **kwargs):
    out = io.StringIO()
    game = Game(_questions(**kwargs), io.StringIO(keys), out, random.Random(1))
    return game, out


def test_read_choice_uppercases_and_consumes_newline():
    stream = io.StringIO("b\nc\n")
    assert read_choice(stream) == "B"
    assert read_choice(stream) == "C"
    assert read_choice(stream) == ""


def test_read_choice_keeps_digits():
    assert read_choice(io.StringIO("2\n")) == "2"


def test_play_all_correct_wins():
    game, out = _game("a\n" * LEVELS)
    assert game.play() == PRIZES[-1]
    text = out.getvalue()
    assert text.count("\nCorrect!\n") == LEVELS
    assert "Congratulations! You have won £1,000,000!" in text


def test_play_wrong_first_answer():
    game, out = _game("B\n")
    assert game.play() == "£0"
    assert "You leave with £0." in out.getvalue()


def test_play_walk_away_after_two_correct():
    game, out = _game("A\nA\nW\n")
    assert game.play() == PRIZES[1]
    assert f"You walk away with {PRIZES[1]}." in out.getvalue()


def test_play_loss_at_safe_level_keeps_that_prize():
    game, out = _game("A\n" * 4 + "B\n")
    assert game.play() == PRIZES[4]
    assert f"You leave with {PRIZES[4]}." in out.getvalue()


def test_play_ignores_unknown_keys():
    game, out = _game("?\nq\nW\n")
    assert game.play() == "£0"
    assert "You walk away with £0." in out.getvalue()


def test_lifeline_used_twice_is_refused():
    game, out = _game("1\n1\nW\n")
    game.play()
    text = out.getvalue()
    assert "50:50 — two wrong answers removed." in text
    assert "Lifeline not available." in text
    assert not game.lifelines & Lifeline.FIFTY_FIFTY


def test_play_raises_on_end_of_input():
    game, _ = _game("A\n")
    with pytest.raises(EOFError):
        game.play()


def test_fifty_fifty_hides_two_wrong_options():
    game, _ = _game("")
    question = Question("Q", ("a", "b", "c", "d"), 2, None)
    hidden = set()
    game.use_lifeline(question, "1", hidden)
    assert len(hidden) == 2
    assert question.answer not in hidden


def test_phone_with_hint():
    game, _ = _game("")
    question = Question("Q", ("a", "b", "c", "d"), 1, "I think B")
    assert game.use_lifeline(question, "2", set()) == "\nFriend says: I think B\n\n"
    assert game.lifelines == Lifeline.FIFTY_FIFTY | Lifeline.AUDIENCE


def test_phone_without_hint_names_answer():
    game, _ = _game("")
    question = Question("Q", ("a", "b", "c", "d"), 2, None)
    assert "The answer is C." in game.use_lifeline(question, "2", set())


def test_audience_lifeline_spent_once():
    game, _ = _game("")
    question = Question("Q", ("a", "b", "c", "d"), 0, None)
    first = game.use_lifeline(question, "3", set())
    assert first.startswith("\nAsk the Audience:")
    assert game.use_lifeline(question, "3", set()) == "Lifeline not available.\n"


def test_unknown_lifeline_key():
    game, _ = _game("")
    question = Question("Q", ("a", "b", "c", "d"), 0, None)
    assert game.use_lifeline(question, "9", set()) == "Lifeline not available.\n"
    assert game.lifelines == Lifeline.ALL