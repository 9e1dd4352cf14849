"""Question records and the pipe-separated question file format.

Each line holds ``text|A|B|C|D|answer|hint``. A literal pipe inside a
field is written as ``||``. Empty fields are dropped when splitting, the
answer is the digit 0-3 (defaulting to 0) and the hint is optional.
Lines with fewer than five fields are ignored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

_ESCAPED_PIPE = "\x01"


@dataclass(frozen=True)
class Question:
    """One multiple-choice question with four options."""

    text: str
    options: tuple[str, str, str, str]
    answer: int = 0
    hint: str | None = None


def split_fields(line: str, sep: str) -> list[str]:
    """Split ``line`` on ``sep``, dropping empty fields."""
    return [field for field in line.split(sep) if field]


def parse_line(line: str) -> Question | None:
    """Parse one line of a question file; return None if it is not a question."""
    line = line.split("\n", 1)[0]
    encoded = line.replace("||", _ESCAPED_PIPE)
    fields = [
        field.replace(_ESCAPED_PIPE, "|") for field in split_fields(encoded, "|")
    ]
    if len(fields) < 5:
        return None
    text, opt_a, opt_b, opt_c, opt_d = fields[:5]
    answer = ord(fields[5][0]) - ord("0") if len(fields) > 5 else 0
    hint = fields[6] if len(fields) > 6 else None
    return Question(text, (opt_a, opt_b, opt_c, opt_d), answer, hint)


def parse_questions(lines: Iterable[str]) -> list[Question]:
    """Parse every usable line, keeping file order."""
    parsed = (parse_line(line) for line in lines)
    return [question for question in parsed if question is not None]


def load_questions(path: str | os.PathLike[str]) -> list[Question]:
    """Read and parse a question file. Raises OSError if it cannot be read."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        content = handle.read()
    return parse_questions(content.split("\n"))