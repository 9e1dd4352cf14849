"""Command-line entry point: load a question file and play one game."""

from __future__ import annotations

import random
import sys
from typing import Sequence, TypeVar

from millionaire.display import LEVELS
from millionaire.game import Game
from millionaire.questions import load_questions

T = TypeVar("T")


def shuffle(questions: Sequence[T], rng: random.Random) -> list[T]:
    """Return a Fisher-Yates shuffled copy of ``questions``."""
    result = list(questions)
    for i in reversed(range(1, len(result))):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the question file named in ``argv``; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: millionaire <questions.txt>")
        return 1
    path = args[0]
    try:
        questions = load_questions(path)
    except OSError:
        print(f"error: cannot open '{path}'")
        return 1
    if not questions:
        return 1
    if len(questions) < LEVELS:
        print(f"error: need at least {LEVELS} questions")
        return 1
    rng = random.Random()
    game = Game(shuffle(questions, rng), sys.stdin, sys.stdout, rng)
    try:
        game.play()
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())