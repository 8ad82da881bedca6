"""
Tests for input loading, the runner, timing and plotting helpers.

Most tests write small puzzle inputs to a temporary directory. Tests that
need the real inputs under contents/ are marked `integration` and **skip
gracefully** if the files are not present.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from advent2022 import runner  # noqa: E402
from advent2022.config import CONTENTS_DIR, input_filename_for_day  # noqa: E402
from advent2022.days import five  # noqa: E402
from advent2022.utils.io import (  # noqa: E402
    get_input_path,
    get_timestamped_results_path,
    read_lines,
    read_puzzle_lines,
    save_results_df,
)
from advent2022.utils.plotting import plot_stacks, plot_stacks_grid  # noqa: E402
from advent2022.utils.timing import Timer, benchmark, time_block, timeit  # noqa: E402


SAMPLE_INPUTS = {
    1: "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n",
    2: "A Y\nB X\nC Z\n",
    3: (
        "vJrwpWtwJgWrhcsFMMfFFhFp\n"
        "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
        "PmmdzqPrVvPwwTWBwg\n"
        "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
        "ttgJtRGJQctTZtZT\n"
        "CrZsJsPPZsGzwwsLwLmpwMDw\n"
    ),
    4: "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n",
    5: (
        "    [D]    \n"
        "[N] [C]    \n"
        "[Z] [M] [P]\n"
        " 1   2   3 \n"
        "\n"
        "move 1 from 2 to 1\n"
        "move 3 from 1 to 3\n"
        "move 2 from 2 to 1\n"
        "move 1 from 1 to 2\n"
    ),
}

SAMPLE_ANSWERS = {
    (1, 1): "24000",
    (1, 2): "45000",
    (2, 1): "15",
    (2, 2): "12",
    (3, 1): "157",
    (3, 2): "70",
    (4, 1): "2",
    (4, 2): "4",
    (5, 1): "CMZ",
    (5, 2): "MCD",
}


@pytest.fixture
def contents_dir(tmp_path: Path) -> Path:
    for day, text in SAMPLE_INPUTS.items():
        (tmp_path / input_filename_for_day(day)).write_text(text, encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# I/O helpers
# ---------------------------------------------------------------------------

def test_input_filename_for_day():
    assert input_filename_for_day(5) == "day_five.txt"
    with pytest.raises(ValueError):
        input_filename_for_day(26)


def test_get_input_path_defaults_to_contents_dir():
    assert get_input_path(1) == CONTENTS_DIR / "day_one.txt"


def test_read_puzzle_lines_strips_terminators(contents_dir):
    lines = read_puzzle_lines(5, contents_dir)
    assert lines[0] == "    [D]    "
    assert lines[4] == ""
    assert lines[-1] == "move 1 from 1 to 2"


def test_missing_input_raises_with_hint(tmp_path):
    with pytest.raises(FileNotFoundError, match="day_five.txt"):
        read_puzzle_lines(5, tmp_path)
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def test_dispatch_table_covers_every_day():
    assert sorted(runner.DAYS) == [1, 2, 3, 4, 5]
    assert runner.get_solver(5) is five.solve


def test_unknown_day_raises():
    with pytest.raises(ValueError):
        runner.get_solver(9)
    with pytest.raises(ValueError):
        runner.run_day(9, lines=[])


def test_run_day_from_lines(capsys):
    rows = runner.run_day(5, lines=SAMPLE_INPUTS[5].splitlines())
    assert [(r["day"], r["part"], r["answer"]) for r in rows] == [
        (5, 1, "CMZ"),
        (5, 2, "MCD"),
    ]
    assert all(r["elapsed"] >= 0.0 for r in rows)

    out = capsys.readouterr().out
    assert "[advent2022] Day 5 part 1: 'CMZ'" in out
    assert "[Timer] day 5:" in out


def test_run_days_builds_sorted_table(contents_dir):
    table = runner.run_days([5, 1, 3, 2, 4], contents_dir=contents_dir, verbose=False)

    assert isinstance(table, pd.DataFrame)
    assert list(table.columns) == runner.RESULT_COLUMNS
    assert len(table) == 10

    keys = list(zip(table["day"], table["part"]))
    assert keys == sorted(keys)
    answers = {(d, p): a for d, p, a in zip(table["day"], table["part"], table["answer"])}
    assert answers == SAMPLE_ANSWERS


def test_run_days_propagates_parse_errors(tmp_path):
    bad = SAMPLE_INPUTS[5] + "INVALID ORDER\n"
    (tmp_path / "day_five.txt").write_text(bad, encoding="utf-8")
    with pytest.raises(five.ParseError):
        runner.run_days([5], contents_dir=tmp_path, verbose=False)


def test_save_results_df_round_trip(tmp_path):
    table = pd.DataFrame(
        {"day": [5, 5], "part": [1, 2], "answer": ["C Z", "MCD"], "elapsed": [0.1, 0.2]}
    )
    out = save_results_df(table, path=tmp_path / "out" / "results.csv")
    assert out.exists()
    loaded = pd.read_csv(out)
    assert loaded["answer"].tolist() == ["C Z", "MCD"]


def test_save_results_df_defaults_to_timestamped_path(tmp_path, monkeypatch):
    results_dir = tmp_path / "results"
    monkeypatch.setattr("advent2022.utils.io.RESULTS_DIR", results_dir)

    path = get_timestamped_results_path(prefix="answers")
    assert path.parent == results_dir
    assert results_dir.is_dir()
    assert path.name.startswith("answers_") and path.suffix == ".csv"

    table = pd.DataFrame({"day": [4], "part": [1], "answer": ["2"], "elapsed": [0.0]})
    out = save_results_df(table)
    assert out.parent == results_dir
    assert out.name.startswith("results_")
    assert pd.read_csv(out)["day"].tolist() == [4]


def test_benchmark_days_one_row_per_day(contents_dir):
    stats = runner.benchmark_days([5, 4], contents_dir=contents_dir, repeats=3, warmup=0)

    assert list(stats.columns) == runner.BENCHMARK_COLUMNS
    assert stats["day"].tolist() == [4, 5]
    assert (stats["repeats"] == 3.0).all()
    assert (stats["min"] <= stats["mean"]).all()
    assert (stats["mean"] <= stats["max"]).all()


def test_main_prints_benchmark(contents_dir, capsys):
    runner.main(["--day", "5", "--contents", str(contents_dir), "--benchmark", "2"])
    out = capsys.readouterr().out
    assert "[advent2022] Benchmark (seconds):" in out
    assert "mean" in out


def test_main_writes_csv_and_plot(contents_dir, tmp_path, capsys):
    csv_path = tmp_path / "results.csv"
    png_path = tmp_path / "stacks.png"
    table = runner.main(
        [
            "--day", "5",
            "--day", "4",
            "--contents", str(contents_dir),
            "--output", str(csv_path),
            "--plot", str(png_path),
        ]
    )

    assert table["day"].tolist() == [4, 4, 5, 5]
    assert csv_path.exists()
    assert png_path.exists() and png_path.stat().st_size > 0

    out = capsys.readouterr().out
    assert "Results written to" in out
    assert "Stacks plot written to" in out
    assert "[timeit] day five stacks plot:" in out


# ---------------------------------------------------------------------------
# Timing and plotting
# ---------------------------------------------------------------------------

def test_timer_records_elapsed_quietly(capsys):
    with Timer("quiet", verbose=False) as timer:
        sum(range(1000))
    assert timer.elapsed >= 0.0
    assert capsys.readouterr().out == ""

    with time_block("loud"):
        pass
    assert "[Timer] loud:" in capsys.readouterr().out


def test_timeit_prints_label_and_returns_result(capsys):
    @timeit("top of stacks")
    def tops():
        return five.top_of_stacks({1: ["A"], 2: []})

    @timeit()
    def unnamed():
        return 7

    assert tops() == "A "
    assert unnamed() == 7
    out = capsys.readouterr().out
    assert "[timeit] top of stacks:" in out
    assert "[timeit] unnamed:" in out


def test_benchmark_runs_warmup_and_repeats():
    calls = []
    stats = benchmark(calls.append, "x", repeats=4, warmup=2)

    assert len(calls) == 6
    assert stats["repeats"] == 4.0
    assert set(stats) == {"min", "mean", "max", "repeats"}
    assert 0.0 <= stats["min"] <= stats["mean"] <= stats["max"]


@pytest.mark.parametrize("repeats, warmup", [(0, 1), (3, -1)])
def test_benchmark_rejects_bad_counts(repeats, warmup):
    with pytest.raises(ValueError):
        benchmark(lambda: None, repeats=repeats, warmup=warmup)


def test_plot_stacks_draws_one_text_per_label():
    stacks = five.extract_stack_of_crates(SAMPLE_INPUTS[5].splitlines()[:3])
    fig, ax = plt.subplots()
    plot_stacks(stacks, ax=ax, title="Initial")
    assert ax.get_title() == "Initial"
    assert sorted(t.get_text() for t in ax.texts) == sorted("ZNMCDP")
    assert [t.get_text() for t in ax.get_xticklabels()] == ["1", "2", "3"]
    plt.close(fig)


def test_plot_stacks_grid_validates_inputs():
    with pytest.raises(ValueError):
        plot_stacks_grid([])
    with pytest.raises(ValueError):
        plot_stacks_grid([{1: ["A"]}], titles=["a", "b"])


def test_plot_stacks_grid_hides_unused_axes():
    fig, axes = plot_stacks_grid([{1: ["A"]}, {1: []}, {1: ["B"]}], ncols=2)
    assert axes.shape == (2, 2)
    assert not axes[1][1].axison
    plt.close(fig)


# ---------------------------------------------------------------------------
# Integration with real inputs (if available)
# ---------------------------------------------------------------------------

@pytest.mark.integration
@pytest.mark.parametrize("day", sorted(runner.DAYS))
def test_real_input_solves_if_present(day):
    path = get_input_path(day)
    if not path.exists():
        pytest.skip(f"{path.name} not found at {path}, skipping integration test.")

    rows = runner.run_day(day, verbose=False)
    assert [r["part"] for r in rows] == [1, 2]
    assert all(r["answer"] for r in rows)
