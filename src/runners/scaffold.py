"""
Workspace scaffolding: project files, day crates, input fixtures and cleanup.
"""
import logging
import subprocess
from pathlib import Path

from . import display
from .base_runner import BaseRunner
from .config import DEFAULT_INPUT, ROOT_MARKER, SESSION_FILE
from .errors import AocError, WorkspaceError
from .workspace import display_path, is_dir, is_file

LOGGER = logging.getLogger(__name__)

GITIGNORE = "target/\n!**/data/target/\nCargo.lock\n/.session\n**/[1-2]/out/"
README = (
    "Solutions to the puzzles at [Advent of Code](https://adventofcode.com), "
    "built and checked with `aoc`."
)

CARGO_TOML = '''[package]
name = "day-{day}"
version = "0.1.0"
edition = "2021"

[dependencies]
aoclib = "0.2.1"'''

MAIN_RS = """use aoc::{Input, Parse};

aoc::parts!(1);

fn part_1(input: Input) -> impl ToString {
    0
}"""

MAIN_RS_PART_2 = """

// fn part_2(input: Input) -> impl ToString {
//     0
// }"""

RESERVED_INPUT_NAMES = ("1", "2")


def _write(path: Path, contents: str) -> None:
    try:
        path.write_text(contents, encoding="utf-8")
    except OSError as exc:
        raise WorkspaceError("failed to write to file system") from exc


def _write_project_file(root: Path, name: str, contents: str) -> None:
    path = root / name
    if is_file(path):
        display.info(f"file `{name}` already exists")
    else:
        _write(path, contents)
        display.success(f"wrote file `{name}`")


def init(root: Path) -> None:
    """Mark ``root`` as a workspace and initialise a git repository in it."""
    root = Path(root)
    _write_project_file(root, ROOT_MARKER, "")
    _write_project_file(root, ".gitignore", GITIGNORE)
    _write_project_file(root, SESSION_FILE, "")
    _write_project_file(root, "README.md", README)
    LOGGER.debug("Initialising git repository in %s", root)
    try:
        result = subprocess.run(["git", "init"], cwd=str(root), capture_output=True, text=True)
    except OSError as exc:
        display.report_error(_chain(AocError("failed to initialise git repository"), exc))
        return
    if result.returncode != 0:
        display.report_error(_chain(AocError("failed to initialise git repository"), AocError(result.stderr.strip())))


def _chain(error: AocError, cause: BaseException) -> AocError:
    error.__cause__ = cause
    return error


def _write_data_files(path: Path, parts) -> None:
    path.mkdir(parents=True)
    _write(path / "input", "")
    for part in parts:
        (path / part).mkdir()
        _write(path / part / "answer", "")


def new_day(runner: BaseRunner, path: Path, year: str, day: str) -> None:
    """Create the crate for a day, then build it once so later runs start warm."""
    path = Path(path)
    if path.exists():
        raise WorkspaceError(f"path already exists: {display_path(path)}")
    last_day = day == "25"
    try:
        (path / "src").mkdir(parents=True)
        _write(path / "Cargo.toml", CARGO_TOML.format(day=day))
        _write(path / "src" / "main.rs", MAIN_RS if last_day else MAIN_RS + MAIN_RS_PART_2)
        _write_data_files(path / "data" / DEFAULT_INPUT, ["1"] if last_day else ["1", "2"])
    except OSError as exc:
        raise WorkspaceError("failed to write to file system") from exc
    display.success(f"created crate for {year}/{day}")
    display.info("building crate...")
    try:
        built = runner.build(path, False, show_output=False)
    except AocError as exc:
        display.report_error(exc)
        return
    if built.success:
        display.success("finished building crate")
    else:
        display.info("crate does not build yet")


def add_input(path: Path, name: str) -> Path:
    """Create an empty input fixture named ``name`` for a day."""
    if name in RESERVED_INPUT_NAMES:
        raise AocError(f"invalid value for argument <INPUT>: `{name}`")
    data_path = Path(path) / "data"
    try:
        data_path.mkdir(exist_ok=True)
    except OSError as exc:
        raise WorkspaceError("failed to write to file system") from exc
    input_path = data_path / name
    try:
        exists = input_path.is_dir()
    except (OSError, ValueError) as exc:
        raise WorkspaceError("invalid input name") from exc
    if exists:
        raise WorkspaceError(f"path already exists: {display_path(input_path)}")
    try:
        _write_data_files(input_path, ["1", "2"])
    except OSError as exc:
        raise WorkspaceError("failed to write to file system") from exc
    display.success(f"created input `{name}` at {display_path(input_path)}")
    return input_path


def clean_day(path: Path, silent: bool = False) -> None:
    """Empty the actual input and the recorded answers of a day."""
    data_path = Path(path) / "data" / DEFAULT_INPUT
    input_path = data_path / "input"
    if is_file(input_path):
        _write(input_path, "")
        if not silent:
            display.success("reset input file to empty")
    elif not silent:
        display.info("no input file found")
    for part in ("1", "2"):
        answer_path = data_path / part / "answer"
        if is_file(answer_path):
            _write(answer_path, "")
            if not silent:
                display.success(f"reset part {part} answer file to empty")
        elif not silent:
            display.info(f"no part {part} answer file found")


def clean_year(path: Path) -> None:
    path = Path(path)
    empty = True
    for day in range(1, 26):
        day_path = path / f"{day:02}"
        if is_dir(day_path):
            clean_day(day_path, silent=True)
            empty = False
    if empty:
        display.info("no day directories found")
    else:
        display.success("cleaned input and answer files for all days")
