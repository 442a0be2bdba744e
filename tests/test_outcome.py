import pytest

from runners.errors import ArtifactReadError, OutputContractError
from runners.outcome import classify_outcome, parse_time
from runners.result_type import Panic, Success, Unimplemented


def write_out(out_dir, **files):
    out_dir.mkdir(parents=True, exist_ok=True)
    for name, contents in files.items():
        (out_dir / name).write_text(contents)
    return out_dir


def test_success(tmp_path):
    out_dir = write_out(tmp_path / "out", answer="42\n", time="1500000\n")
    assert classify_outcome(0, out_dir) == Success(answer="42", time=1500000)


def test_multiline_answer_keeps_inner_lines(tmp_path):
    out_dir = write_out(tmp_path / "out", answer="#..#\n.##.\n\n", time="7")
    assert classify_outcome(0, out_dir) == Success(answer="#..#\n.##.", time=7)


@pytest.mark.parametrize("returncode", [1, 101, -9])
def test_nonzero_exit_is_panic_whatever_the_files_say(tmp_path, returncode):
    out_dir = write_out(tmp_path / "out", answer="42", time="10", unimplemented="")
    assert classify_outcome(returncode, out_dir) == Panic()


def test_nonzero_exit_without_out_dir(tmp_path):
    assert classify_outcome(1, tmp_path / "missing") == Panic()


def test_unimplemented_marker_wins_over_answer(tmp_path):
    out_dir = write_out(tmp_path / "out", unimplemented="anything", answer="42", time="10")
    assert classify_outcome(0, out_dir) == Unimplemented()


def test_missing_time(tmp_path):
    out_dir = write_out(tmp_path / "out", answer="42")
    with pytest.raises(ArtifactReadError):
        classify_outcome(0, out_dir)


def test_missing_answer(tmp_path):
    out_dir = write_out(tmp_path / "out", time="10")
    with pytest.raises(ArtifactReadError):
        classify_outcome(0, out_dir)


@pytest.mark.parametrize("contents", ["", "abc", "-5", "1.5", "12ms", "١٢", "１２"])
def test_malformed_time(tmp_path, contents):
    out_dir = write_out(tmp_path / "out", answer="42", time=contents)
    with pytest.raises(OutputContractError):
        classify_outcome(0, out_dir)


def test_parse_time_strips_whitespace():
    assert parse_time(" 12 \n") == 12
    assert parse_time("0") == 0
