# millionaire

A quiz game for the terminal. You answer fifteen multiple-choice questions in
a row and climb a prize ladder that runs from £100 to £1,000,000.

## Installing

```
pip install .
```

## Playing

```
millionaire questions.txt
```

You can also start it with `python -m millionaire.cli questions.txt`.

The file must hold at least fifteen usable questions. The game shuffles them
at the start of each game. The command exits with status 1 in these cases:

- no file is given
- the file cannot be opened
- the file holds no questions, or fewer than fifteen
- input ends before the game is over

At each question, type one character and press Enter. Lower-case letters are
accepted. Any other input is ignored.

- `A` to `D` answers the question.
- `1` is 50:50. It removes two wrong answers.
- `2` phones a friend. The friend gives the question's hint, or gives the answer if the question has no hint.
- `3` asks the audience. It shows a poll that favours the right answer.
- `W` walks away with the prize for the last question you answered.

You can use each lifeline only once per game. If you pick a lifeline you have
already used, the game prints "Lifeline not available."

Levels 5 (£1,000) and 10 (£32,000) are safe havens and are marked with `*` on
the ladder. A safe haven is banked as soon as its question comes up. After
that, a wrong answer still pays out the banked prize.

## Question file format

Each question takes one line. The fields are separated by `|`:

```
question|option A|option B|option C|option D|answer|hint
```

- `answer` is a digit from `0` to `3`, where `0` means A. If the field is missing, the answer is A.
- `hint` is optional.
- To put a literal `|` inside a field, write `||`.
- Empty fields are dropped. A line with fewer than five fields is skipped.

Example:

```
What is the capital of France?|Berlin|Paris|Madrid|Rome|1|It's the city of light.
```

The package does not include a question file. You supply your own.

## Using it as a library

- `millionaire.questions.load_questions(path)` reads a file and returns a list of `Question` objects. Each object has the fields `text`, `options`, `answer` and `hint`. `parse_line` and `parse_questions` parse text that is already in memory.
- `millionaire.game.Game(questions, stdin, stdout, rng).play()` runs one game on any text streams and returns the prize won, for example `"£1,000"`. It raises `EOFError` if the input ends before the game is over.
- `millionaire.display` builds the text for the ladder, the questions, the audience poll and the end-of-game messages. These functions return strings and do not print anything.
- `millionaire.cformat.sprintf(fmt, *args)` formats text with printf-style conversions: `c s p d i u x X %`, the flags `- 0 + space #`, a width and a precision. `printf` does the same and writes the result to standard output.

## Running the tests

```
pip install .[test]
pytest
```