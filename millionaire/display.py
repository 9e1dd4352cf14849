"""Rendering of the prize ladder, questions and end-of-game messages."""

from __future__ import annotations

import random
from typing import Collection, Sequence

from millionaire.questions import Question

LEVELS = 15

PRIZES: tuple[str, ...] = (
    "£100", "£200", "£300", "£500",
    "£1,000", "£2,000", "£4,000", "£8,000",
    "£16,000", "£32,000", "£64,000", "£125,000",
    "£250,000", "£500,000", "£1,000,000",
)

SAFE: tuple[bool, ...] = tuple(index in (4, 9) for index in range(LEVELS))

LETTERS = "ABCD"

_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RESET = "\033[0m"


def render_ladder(level: int, safe_level: int) -> str:
    """Draw the prize ladder, highlighting the current and banked levels."""
    parts = ["\n"]
    for index in reversed(range(LEVELS)):
        current = index == level
        banked = index == safe_level and not current
        if current:
            parts.append(_YELLOW)
        parts.append(f"{_GREEN}  *{_RESET}" if SAFE[index] else "   ")
        if banked:
            parts.append(_GREEN)
        parts.append(f" {index + 1:2d}: {PRIZES[index]}")
        if current or banked:
            parts.append(_RESET)
        parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def render_question(question: Question, hidden: Collection[int]) -> str:
    """Show the question text and every option not in ``hidden``."""
    lines = [f"{question.text}\n\n"]
    lines.extend(
        f"  {letter}. {option}\n"
        for index, (letter, option) in enumerate(zip(LETTERS, question.options))
        if index not in hidden
    )
    lines.append("\n")
    return "".join(lines)


def audience_poll(question: Question, rng: random.Random) -> list[int]:
    """Simulate an audience vote that strongly favours the right answer."""
    raw = [2 + rng.randrange(8) for _ in LETTERS]
    correct = 58 + rng.randrange(16)
    if 0 <= question.answer < len(raw):
        raw[question.answer] = correct
    total = sum(raw)
    return [value * 100 // total for value in raw]


def render_audience(percentages: Sequence[int]) -> str:
    """Draw the audience vote as a bar chart."""
    lines = ["\nAsk the Audience:\n\n"]
    lines.extend(
        f"  {letter}: {'#' * (pct // 3)} {pct}%\n"
        for letter, pct in zip(LETTERS, percentages)
    )
    lines.append("\n")
    return "".join(lines)


def render_win() -> str:
    """Message for answering every question."""
    return f"\n{_GREEN}  Congratulations! You have won £1,000,000!\n{_RESET}\n"


def render_loss(safe_level: int) -> str:
    """Message for a wrong answer, with the banked prize."""
    prize = PRIZES[safe_level] if safe_level >= 0 else "£0"
    return f"\nWrong answer.\nYou leave with {prize}.\n\n"


def render_walkaway(level: int) -> str:
    """Message for walking away before answering the question at ``level``."""
    prize = PRIZES[level - 1] if level > 0 else "£0"
    return f"\nYou walk away with {prize}.\n\n"