import pytest

from fakes import FakeRunner, Outcome, make_day, solved
from runners import pipeline
from runners.errors import AocError, ArtifactReadError
from runners.result_type import Panic, Success, Unimplemented


def test_run_day_end_to_end(tmp_path, capsys):
    day = make_day(tmp_path, "2023", "05", {"actual": ("1 2 3", {"1": "42"})})
    runner = FakeRunner(outcomes={("05", "actual", "1"): solved("42", 1_500_000)})

    results = pipeline.run_day(runner, day)

    assert results == {"1": Success("42", 1_500_000), "2": Unimplemented()}
    assert runner.builds == [("05", True)]
    assert runner.runs == [("05", "actual", "1"), ("05", "actual", "2")]
    assert "2023/05/1: [42]  1.5ms" in capsys.readouterr().out


def test_run_day_single_part(tmp_path, capsys):
    day = make_day(tmp_path, inputs={"example": ("x", {})})
    runner = FakeRunner(outcomes={("05", "example", "2"): solved("7", 3_000)})

    results = pipeline.run_day(runner, day, "example", "2")

    assert results == {"2": Success("7", 3_000)}
    assert runner.runs == [("05", "example", "2")]
    assert "2023/05/2: [7]  3μs" in capsys.readouterr().out


def test_run_day_prints_multiline_answer_in_full(tmp_path, capsys):
    day = make_day(tmp_path, inputs={"actual": ("x", {"1": "AB"})})
    runner = FakeRunner(outcomes={("05", "actual", "1"): Outcome(answer="#.\n.#\n", time="1000")})

    results = pipeline.run_day(runner, day, part="1")

    assert results == {"1": Success("#.\n.#", 1_000)}
    assert capsys.readouterr().out.endswith("2023/05/1: [???] - [AB]  1μs\n#.\n.#\n")


def test_run_day_without_input(tmp_path):
    day = make_day(tmp_path, inputs={"actual": ("", {})})
    runner = FakeRunner()
    with pytest.raises(AocError, match="no puzzle input"):
        pipeline.run_day(runner, day)
    assert runner.builds == []


def test_run_day_build_failure_runs_nothing(tmp_path):
    day = make_day(tmp_path, inputs={"actual": ("x", {})})
    runner = FakeRunner(failing_builds={"05"})
    assert pipeline.run_day(runner, day) == {}
    assert runner.runs == []


def test_run_day_all_unimplemented(tmp_path, capsys):
    day = make_day(tmp_path, inputs={"actual": ("x", {})})
    pipeline.run_day(FakeRunner(), day)
    assert "both parts unimplemented" in capsys.readouterr().err


def test_run_day_last_day_has_one_part(tmp_path, capsys):
    day = make_day(tmp_path, "2023", "25", {"actual": ("x", {})})
    runner = FakeRunner()
    results = pipeline.run_day(runner, day)
    assert list(results) == ["1"]
    assert "part unimplemented" in capsys.readouterr().err


def test_run_day_panic(tmp_path, capsys):
    day = make_day(tmp_path, inputs={"actual": ("x", {})})
    runner = FakeRunner(outcomes={("05", "actual", "1"): Outcome(exit=101, answer="42", time="10")})
    results = pipeline.run_day(runner, day, part="1")
    assert results == {"1": Panic()}
    assert "panic" in capsys.readouterr().out


def test_test_parts_skips_unimplemented_part_for_later_inputs(tmp_path, capsys):
    day = make_day(
        tmp_path,
        inputs={
            "actual": ("x", {"1": "1", "2": "2"}),
            "example": ("y", {"1": "1", "2": "20"}),
        },
    )
    runner = FakeRunner(outcomes={
        ("05", "actual", "2"): solved("2", 1_000),
        ("05", "example", "2"): solved("21", 1_000),
    })

    assert pipeline.test_parts(runner, day, ["1", "2"])

    assert runner.runs == [
        ("05", "actual", "1"),
        ("05", "actual", "2"),
        ("05", "example", "2"),
    ]
    out = capsys.readouterr().out
    assert "[2]  1μs  (actual)" in out
    assert "[21] ✕ [20]  1μs  (example)" in out


def test_test_parts_skips_inputs_without_content_or_answer(tmp_path):
    day = make_day(
        tmp_path,
        inputs={
            "actual": ("", {"1": "1"}),
            "example": ("y", {"1": ""}),
        },
    )
    runner = FakeRunner()
    assert not pipeline.test_parts(runner, day, ["1", "2"])
    assert runner.runs == []


def test_test_parts_reports_panicking_input(tmp_path, capsys):
    day = make_day(tmp_path, inputs={"big": ("x", {"1": "5"})})
    runner = FakeRunner(outcomes={("05", "big", "1"): Outcome(exit=1)})
    assert pipeline.test_parts(runner, day, ["1"])
    assert "panic  (big)" in capsys.readouterr().out


def test_test_day_nothing_to_test(tmp_path, capsys):
    day = make_day(tmp_path, inputs={"actual": ("x", {})})
    assert not pipeline.test_day(FakeRunner(), day)
    assert "nothing to test" in capsys.readouterr().err


def test_test_day_build_failure(tmp_path):
    day = make_day(tmp_path, inputs={"actual": ("x", {"1": "1"})})
    runner = FakeRunner(failing_builds={"05"})
    assert not pipeline.test_day(runner, day)
    assert runner.runs == []


def test_run_days_aggregates_successes(tmp_path, capsys):
    year_dir = tmp_path / "2023"
    make_day(tmp_path, "2023", "01", {"actual": ("x", {"1": "a"})})
    make_day(tmp_path, "2023", "02", {"actual": ("x", {})})
    make_day(tmp_path, "2023", "04", {"actual": ("x", {})})
    make_day(tmp_path, "2023", "05", {"actual": ("", {})})
    runner = FakeRunner(
        outcomes={
            ("01", "actual", "1"): solved("a", 10_000_000),
            ("01", "actual", "2"): solved("b", 20_000_000),
            ("02", "actual", "1"): Outcome(exit=101),
            ("04", "actual", "1"): solved("c", 30_000_000),
        },
        failing_builds={"03"},
    )

    stats = pipeline.run_days(runner, year_dir, "2023", range(1, 6))

    assert stats.total_time == 60_000_000
    assert stats.num_parts == 3
    assert stats.mean_time == 20_000_000
    assert [name for name, _ in runner.builds] == ["01", "02", "04"]
    captured = capsys.readouterr()
    assert "2023/01/1: [a]  10ms" in captured.out
    assert "2023/02/1: panic" in captured.out
    assert "2023/05/*: no input" in captured.out
    assert "parts: 03" in captured.err
    assert "total: 60ms" in captured.err
    assert "average: 20ms" in captured.err


def test_run_days_build_error_continues(tmp_path, capsys):
    make_day(tmp_path, "2023", "01", {"actual": ("x", {})})
    make_day(tmp_path, "2023", "02", {"actual": ("x", {})})
    runner = FakeRunner(
        outcomes={("02", "actual", "1"): solved("9", 1_000)},
        failing_builds={"01"},
    )

    stats = pipeline.run_days(runner, tmp_path / "2023", "2023", [1, 2])

    assert stats.num_parts == 1
    assert "2023/01/*: build error" in capsys.readouterr().out


def test_run_days_continues_after_run_error_and_raises_it(tmp_path, capsys):
    make_day(tmp_path, "2023", "01", {"actual": ("x", {})})
    make_day(tmp_path, "2023", "02", {"actual": ("x", {})})
    runner = FakeRunner(outcomes={
        ("01", "actual", "1"): Outcome(answer="1"),
        ("02", "actual", "1"): solved("9", 1_000),
    })

    with pytest.raises(ArtifactReadError):
        pipeline.run_days(runner, tmp_path / "2023", "2023", [1, 2])

    assert ("02", "actual", "1") in runner.runs
    captured = capsys.readouterr()
    assert "2023/01/1: error" in captured.out
    assert "parts: 01" in captured.err


def test_run_days_threads_existing_stats(tmp_path):
    make_day(tmp_path, "2023", "01", {"actual": ("x", {})})
    runner = FakeRunner(outcomes={("01", "actual", "1"): solved("1", 5)})
    stats = pipeline.run_days(runner, tmp_path / "2023", "2023", [1])
    stats = pipeline.run_days(runner, tmp_path / "2023", "2023", [1], stats)
    assert stats.num_parts == 2
    assert stats.total_time == 10


def test_run_days_without_days(tmp_path):
    with pytest.raises(AocError, match="no days to run"):
        pipeline.run_days(FakeRunner(), tmp_path, "2023", [])


def test_test_days(tmp_path, capsys):
    make_day(tmp_path, "2023", "01", {"actual": ("x", {"1": "1"})})
    make_day(tmp_path, "2023", "02", {"actual": ("x", {"1": "1"})})
    runner = FakeRunner(
        outcomes={("01", "actual", "1"): solved("1", 1_000)},
        failing_builds={"02"},
    )

    assert pipeline.test_days(runner, tmp_path / "2023", "2023", range(1, 26))

    assert runner.runs == [("01", "actual", "1")]
    assert "2023/01/1: [1]  1μs  (actual)" in capsys.readouterr().out
