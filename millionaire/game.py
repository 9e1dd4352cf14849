"""The interactive question-and-answer loop."""

from __future__ import annotations

import enum
import random
import sys
from typing import MutableSet, Sequence, TextIO

from millionaire.display import (
    LEVELS,
    LETTERS,
    PRIZES,
    SAFE,
    audience_poll,
    render_audience,
    render_ladder,
    render_loss,
    render_question,
    render_walkaway,
    render_win,
)
from millionaire.questions import Question

_PROMPT = "Your answer (A-D): "
_MENU = "[1] 50:50  [2] Phone  [3] Audience  [W] Walk away\n"


class Lifeline(enum.Flag):
    """Lifelines a player may still use."""

    NONE = 0
    FIFTY_FIFTY = 1
    PHONE = 2
    AUDIENCE = 4
    ALL = FIFTY_FIFTY | PHONE | AUDIENCE


_LIFELINE_KEYS = {
    "1": Lifeline.FIFTY_FIFTY,
    "2": Lifeline.PHONE,
    "3": Lifeline.AUDIENCE,
}


def read_choice(stream: TextIO) -> str:
    """Read one key and the character after it; return the key in upper case.

    Returns an empty string at end of input.
    """
    char = stream.read(1)
    if not char:
        return ""
    stream.read(1)
    return char.upper() if "a" <= char <= "z" else char


class Game:
    """One round of up to fifteen questions."""

    def __init__(
        self,
        questions: Sequence[Question],
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.questions = list(questions)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.lifelines = Lifeline.ALL

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def use_lifeline(
        self, question: Question, choice: str, hidden: MutableSet[int]
    ) -> str:
        """Spend the lifeline for ``choice`` and return what it reveals.

        The 50:50 lifeline adds the removed options to ``hidden``.
        """
        lifeline = _LIFELINE_KEYS.get(choice, Lifeline.NONE)
        if not lifeline or not lifeline & self.lifelines:
            return "Lifeline not available.\n"
        self.lifelines &= ~lifeline
        if lifeline is Lifeline.FIFTY_FIFTY:
            wrong = [i for i in range(len(LETTERS)) if i != question.answer]
            hidden.update(wrong[:2])
            return "\n50:50 — two wrong answers removed.\n\n"
        if lifeline is Lifeline.PHONE:
            if question.hint:
                return f"\nFriend says: {question.hint}\n\n"
            return f"\nFriend says: The answer is {LETTERS[question.answer]}.\n\n"
        return render_audience(audience_poll(question, self.rng))

    def play(self) -> str:
        """Run the game to its end and return the prize taken home.

        Raises EOFError if input runs out before the game is over.
        """
        level = 0
        safe_level = -1
        while level < LEVELS and level < len(self.questions):
            question = self.questions[level]
            hidden: set[int] = set()
            self._write(render_ladder(level, safe_level))
            if SAFE[level]:
                safe_level = level
            self._write(f"Level {level + 1} — {PRIZES[level]}\n\n")
            self._write(render_question(question, hidden))
            self._write(_MENU)
            self._write(_PROMPT)
            while True:
                choice = read_choice(self.stdin)
                if not choice:
                    raise EOFError("input ended before the game was over")
                if choice in LETTERS:
                    break
                if choice == "W":
                    self._write(render_walkaway(level))
                    return PRIZES[level - 1] if level > 0 else "£0"
                if choice in _LIFELINE_KEYS:
                    self._write(self.use_lifeline(question, choice, hidden))
                    self._write(render_question(question, hidden))
                    self._write(_PROMPT)
            if LETTERS.index(choice) == question.answer:
                self._write("\nCorrect!\n")
                level += 1
                if level == LEVELS:
                    self._write(render_win())
                    return PRIZES[-1]
            else:
                self._write(render_loss(safe_level))
                return PRIZES[safe_level] if safe_level >= 0 else "£0"
        return PRIZES[level - 1] if level > 0 else "£0"