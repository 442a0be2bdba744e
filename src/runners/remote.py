"""
Commands that talk to the puzzle website: download inputs and answers, submit
answers, show progress and open puzzle pages.
"""
import logging
import webbrowser
from pathlib import Path
from typing import Optional

from . import display
from .config import DEFAULT_INPUT, SESSION_FILE, RunnerConfig
from .day import Day
from .errors import AocError, WorkspaceError
from .network import AocClient, SubmissionResult, session_cookie
from .workspace import FIRST_YEAR, display_path, read_file

LOGGER = logging.getLogger(__name__)


def get_session(root: Path, config: RunnerConfig) -> str:
    """Session cookie from the environment, else from the workspace ``.session`` file."""
    if config.session:
        return session_cookie(config.session)
    try:
        token = read_file(Path(root) / SESSION_FILE).try_contents()
    except WorkspaceError as exc:
        raise AocError("failed to get session cookie") from exc
    return session_cookie(token)


def make_client(root: Path, config: RunnerConfig) -> AocClient:
    return AocClient(get_session(root, config), config.base_url)


def _write(path: Path, contents: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
    except OSError as exc:
        raise WorkspaceError("failed to write to file system") from exc


def get(client_factory, day: Day) -> None:
    """Download the actual input and accepted answers a day is still missing.

    ``client_factory`` is only called when something needs downloading.
    """
    input_path = day.input_file(DEFAULT_INPUT)
    parts = day.get_parts()
    update_input = not day.has_input(DEFAULT_INPUT)
    update_answers = {
        part: day.get_expected_answer(DEFAULT_INPUT, part) is None for part in parts
    }
    if not update_input and not any(update_answers.values()):
        display.info("nothing to update")
        return

    client: AocClient = client_factory()
    if update_input:
        display.info("downloading puzzle input...")
        _write(input_path, client.get_input(day.year, day.day))
        display.success(f"input file written to {display_path(input_path)}")
    if any(update_answers.values()):
        display.info("downloading puzzle answers...")
        progress = client.get_progress(day.year, day.day)
        answers = {"1": progress.part_1, "2": progress.part_2}
        for part in parts:
            if not update_answers[part]:
                continue
            answer = answers[part]
            if answer is None:
                display.info(f"no answer to part {part} found")
                continue
            answer_path = day.answer_file(DEFAULT_INPUT, part)
            _write(answer_path, answer)
            display.success(f"answer to part {part} written to {display_path(answer_path)}")


def submit(client: AocClient, day: Day, answer: Optional[str] = None) -> Optional[SubmissionResult]:
    """Submit an answer for the next unsolved part of a day.

    Without an explicit answer, the last answer the solution produced for that
    part is submitted. A correct answer is recorded as the expected answer.
    """
    display.info("getting progress")
    progress = client.get_progress(day.year, day.day)
    if progress.next is None:
        display.info("no part left to submit")
        return None
    part = progress.next
    if answer is None:
        answer = day.get_last_answer(DEFAULT_INPUT, part)
        if answer is None:
            raise AocError("no answer to submit")
    display.day_part(day.year, day.day, part)
    try:
        result = client.submit(day.year, day.day, part, answer)
    except AocError:
        display.submit_error()
        raise
    if result is SubmissionResult.CORRECT:
        display.just_answer(answer, True)
        _write(day.answer_file(DEFAULT_INPUT, part), answer)
    elif result is SubmissionResult.WAIT:
        display.wait()
    else:
        display.just_answer(answer, False)
    return result


def all_progress(client: AocClient) -> None:
    """Print the star calendar of every year that has one."""
    display.console.print()
    display.completion_header()
    completion = client.get_year_completion(str(FIRST_YEAR))
    display.year_completion(str(FIRST_YEAR), completion.stars, completion.total)
    year = FIRST_YEAR + 1
    while True:
        try:
            completion = client.get_year_completion(str(year))
        except AocError as exc:
            LOGGER.debug("Stopping at year %s: %s", year, exc)
            break
        display.year_completion(str(year), completion.stars, completion.total)
        year += 1
    display.console.print()


def year_progress(client: AocClient, year: str) -> None:
    completion = client.get_year_completion(year)
    display.console.print()
    display.completion_header()
    display.year_completion(year, completion.stars, completion.total)
    display.console.print()


def day_progress(client: AocClient, year: str, day: str) -> None:
    progress = client.get_progress(year, day)
    display.day_part(year, day, "1")
    if progress.part_1 is not None:
        display.just_answer(progress.part_1, True)
    else:
        display.incomplete()
    if progress.part_2 is not None:
        display.day_part(year, day, "2")
        display.just_answer(progress.part_2, True)


def _open(url: str) -> None:
    LOGGER.debug("Opening %s", url)
    if not webbrowser.open(url):
        raise AocError("failed to open browser")


def open_year(config: RunnerConfig, year: str) -> None:
    _open(f"{config.base_url}/{year}")


def open_day(config: RunnerConfig, year: str, day: str) -> None:
    _open(f"{config.base_url}/{year}/day/{int(day)}")
