import io
import random

from millionaire.cli import main, shuffle


def _write_questions(path, count):
    path.write_text(
        "".join(f"Question {i}?|a|b|c|d|0\n" for i in range(count)),
        encoding="utf-8",
    )


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main([str(missing)]) == 1
    assert f"error: cannot open '{missing}'" in capsys.readouterr().out


def test_main_too_few_questions(tmp_path, capsys):
    path = tmp_path / "few.txt"
    _write_questions(path, 3)
    assert main([str(path)]) == 1
    assert "error: need at least 15 questions" in capsys.readouterr().out


def test_main_empty_file_exits_quietly(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_walk_away(tmp_path, capsys, monkeypatch):
    path = tmp_path / "q.txt"
    _write_questions(path, 20)
    monkeypatch.setattr("sys.stdin", io.StringIO("W\n"))
    assert main([str(path)]) == 0
    assert "You walk away with £0." in capsys.readouterr().out


def test_main_win(tmp_path, capsys, monkeypatch):
    path = tmp_path / "q.txt"
    _write_questions(path, 15)
    monkeypatch.setattr("sys.stdin", io.StringIO("A\n" * 15))
    assert main([str(path)]) == 0
    assert "You have won £1,000,000!" in capsys.readouterr().out


def test_main_input_runs_out(tmp_path, monkeypatch):
    path = tmp_path / "q.txt"
    _write_questions(path, 15)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([str(path)]) == 1


def test_shuffle_is_a_permutation():
    items = list(range(30))
    result = shuffle(items, random.Random(3))
    assert sorted(result) == items
    assert items == list(range(30))


def test_shuffle_depends_only_on_the_generator():
    items = list("abcdefghij")
    orders = [shuffle(items, random.Random(seed)) for seed in range(20)]
    repeated = [shuffle(items, random.Random(seed)) for seed in range(20)]
    assert orders == repeated
    assert len({tuple(order) for order in orders}) > 1
    for order in orders:
        assert sorted(order) == items


def test_shuffle_short_inputs():
    assert shuffle([], random.Random(0)) == []
    assert shuffle(["only"], random.Random(0)) == ["only"]