import subprocess

import pytest

from fakes import FakeRunner, make_day
from runners import scaffold
from runners.errors import AocError, WorkspaceError


@pytest.fixture
def git_calls(monkeypatch):
    calls = []

    def fake_run(command, cwd=None, capture_output=False, text=False):
        calls.append((command, cwd))
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    monkeypatch.setattr("runners.scaffold.subprocess.run", fake_run)
    return calls


def test_init(tmp_path, git_calls):
    scaffold.init(tmp_path)

    assert (tmp_path / "aoc-root").is_file()
    assert (tmp_path / ".session").read_text() == ""
    assert "/.session" in (tmp_path / ".gitignore").read_text()
    assert (tmp_path / "README.md").is_file()
    assert git_calls == [(["git", "init"], str(tmp_path))]


def test_init_keeps_existing_files(tmp_path, git_calls, capsys):
    (tmp_path / ".session").write_text("session=abc")
    scaffold.init(tmp_path)
    assert (tmp_path / ".session").read_text() == "session=abc"
    assert "file `.session` already exists" in capsys.readouterr().err


def test_init_reports_git_failure(tmp_path, monkeypatch, capsys):
    def no_git(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr("runners.scaffold.subprocess.run", no_git)
    scaffold.init(tmp_path)
    assert (tmp_path / "aoc-root").is_file()
    assert "failed to initialise git repository" in capsys.readouterr().err


def test_new_day(tmp_path):
    runner = FakeRunner()
    path = tmp_path / "2023" / "07"

    scaffold.new_day(runner, path, "2023", "07")

    assert 'name = "day-07"' in (path / "Cargo.toml").read_text()
    assert "fn part_2" in (path / "src" / "main.rs").read_text()
    assert (path / "data" / "actual" / "input").read_text() == ""
    assert (path / "data" / "actual" / "1" / "answer").is_file()
    assert (path / "data" / "actual" / "2" / "answer").is_file()
    assert runner.builds == [("07", False)]


def test_new_last_day_has_one_part(tmp_path):
    path = tmp_path / "2023" / "25"
    scaffold.new_day(FakeRunner(), path, "2023", "25")
    assert "part_2" not in (path / "src" / "main.rs").read_text()
    assert not (path / "data" / "actual" / "2").exists()


def test_new_day_that_does_not_build(tmp_path, capsys):
    scaffold.new_day(FakeRunner(failing_builds={"07"}), tmp_path / "07", "2023", "07")
    assert "crate does not build yet" in capsys.readouterr().err


def test_new_day_already_exists(tmp_path):
    path = tmp_path / "2023" / "07"
    path.mkdir(parents=True)
    with pytest.raises(WorkspaceError, match="path already exists"):
        scaffold.new_day(FakeRunner(), path, "2023", "07")


def test_add_input(tmp_path):
    day = make_day(tmp_path)
    input_path = scaffold.add_input(day.path, "example")
    assert input_path == day.path / "data" / "example"
    assert (input_path / "input").is_file()
    assert (input_path / "2" / "answer").is_file()
    assert "example" in day.get_input_names()


@pytest.mark.parametrize("name", ["1", "2"])
def test_add_input_reserved_name(tmp_path, name):
    day = make_day(tmp_path)
    with pytest.raises(AocError, match="invalid value for argument <INPUT>"):
        scaffold.add_input(day.path, name)


def test_add_existing_input(tmp_path):
    day = make_day(tmp_path, inputs={"example": ("x", {})})
    with pytest.raises(WorkspaceError, match="path already exists"):
        scaffold.add_input(day.path, "example")


def test_clean_day(tmp_path):
    day = make_day(tmp_path, inputs={
        "actual": ("x", {"1": "1", "2": "2"}),
        "example": ("y", {"1": "3"}),
    })
    scaffold.clean_day(day.path)
    assert not day.has_input()
    assert day.get_expected_answer("actual", "1") is None
    assert day.get_expected_answer("actual", "2") is None
    assert day.get_expected_answer("example", "1") == "3"


def test_clean_year(tmp_path, capsys):
    first = make_day(tmp_path, "2023", "01", {"actual": ("x", {"1": "1"})})
    second = make_day(tmp_path, "2023", "12", {"actual": ("y", {})})
    scaffold.clean_year(tmp_path / "2023")
    assert not first.has_input()
    assert not second.has_input()
    assert "cleaned input and answer files for all days" in capsys.readouterr().err


def test_clean_empty_year(tmp_path, capsys):
    (tmp_path / "2023").mkdir()
    scaffold.clean_year(tmp_path / "2023")
    assert "no day directories found" in capsys.readouterr().err
