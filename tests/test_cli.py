import pytest

from advent2024.cli import main, read_input, run_day
from advent2024.solution import SolutionPair

DAY01_EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3"""


def _recording_solver(calls):
    def solver(ctx, text):
        calls.append(text)
        return ctx.measure("both", lambda: SolutionPair(1, "a"))

    return solver


def test_read_input_reads_zero_padded_file(tmp_path):
    (tmp_path / "day05.txt").write_text("content\n")
    assert read_input(5, tmp_path) == "content\n"


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(3, tmp_path)


def test_run_day_reports_answers_and_timings():
    calls = []
    lines, mean = run_day(7, _recording_solver(calls), "text", repeat=3, warmup=2)
    assert lines[0] == "day7/part1: 1"
    assert lines[1] == "day7/part2: a"
    assert lines[2].startswith("day7/solve_time: ")
    assert "(both: " in lines[2]
    assert len(calls) == 5
    assert mean >= 0


def test_run_day_without_measurements_has_no_details():
    lines, _ = run_day(2, lambda ctx, text: SolutionPair(3, 4), "", repeat=1, warmup=0)
    assert lines[:2] == ["day2/part1: 3", "day2/part2: 4"]
    assert "(" not in lines[2]


def test_run_day_rejects_zero_repeat():
    with pytest.raises(ValueError):
        run_day(1, lambda ctx, text: SolutionPair(0, 0), "", repeat=0, warmup=0)


def test_main_solves_one_day(tmp_path, capsys):
    (tmp_path / "day01.txt").write_text(DAY01_EXAMPLE)
    assert main(["1", "--input-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "day1/part1: 11"
    assert out[1] == "day1/part2: 31"
    assert out[2].startswith("day1/solve_time: ")
    assert not any(line.startswith("Total solve time") for line in out)


def test_main_missing_input_fails(tmp_path, capsys):
    assert main(["2", "--input-dir", str(tmp_path)]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_zero_repeat(tmp_path):
    with pytest.raises(SystemExit):
        main(["1", "--repeat", "0", "--input-dir", str(tmp_path)])


def test_main_rejects_unknown_day(tmp_path):
    with pytest.raises(SystemExit):
        main(["21", "--input-dir", str(tmp_path)])