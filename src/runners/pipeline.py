"""
Build, run and verify day solutions.

Single-day commands stream build and artifact output to the terminal and print
one detailed line per part. Sweeps over several days build quietly, print one
compact line per part and aggregate the timing of every successful part into a
BatchStats value that is threaded through the sweep.

Everything runs sequentially: one build or one artifact at a time.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from . import display
from .base_runner import BaseRunner
from .config import DEFAULT_INPUT
from .day import Day
from .errors import AocError, WorkspaceError
from .result_type import Panic, RunResult, Success, Unimplemented
from .verification import BatchStats
from .workspace import is_dir

LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Single day
# ---------------------------------------------------------------------------

def run_day(
    runner: BaseRunner,
    day: Day,
    input_name: str = DEFAULT_INPUT,
    part: Optional[str] = None,
    debug: bool = False,
) -> Dict[str, RunResult]:
    """Build a day and run one part, or every part, against one input.

    Returns:
        The result of every part that was run, keyed by part. Empty when the
        build failed.
    """
    try:
        day.get_input(input_name)
    except WorkspaceError as exc:
        raise AocError("no puzzle input") from exc
    if not runner.build(day.path, debug, show_output=True).success:
        return {}

    results: Dict[str, RunResult] = {}
    if part is None:
        any_implemented = False
        for part_name in day.get_parts():
            result = runner.run(day.path, day.day, input_name, part_name, debug, show_output=True)
            results[part_name] = result
            if isinstance(result, Success):
                any_implemented = True
                expected = day.get_expected_answer(input_name, part_name)
                display.answer_full(day.year, day.day, part_name, result.answer, expected, result.time)
            elif isinstance(result, Panic):
                any_implemented = True
                display.day_part(day.year, day.day, part_name)
                display.panic()
        if not any_implemented:
            display.info("both parts unimplemented" if len(results) > 1 else "part unimplemented")
        return results

    result = runner.run(day.path, day.day, input_name, part, debug, show_output=True)
    results[part] = result
    if isinstance(result, Success):
        expected = day.get_expected_answer(input_name, part)
        display.answer_full(day.year, day.day, part, result.answer, expected, result.time)
    elif isinstance(result, Unimplemented):
        display.day_part(day.year, day.day, part)
        display.unimplemented()
    else:
        display.day_part(day.year, day.day, part)
        display.panic()
    return results


def test_day(runner: BaseRunner, day: Day, part: Optional[str] = None) -> bool:
    """Build a day and grade it against every input with a recorded answer.

    Returns:
        True when at least one part was graded.
    """
    if not runner.build(day.path, False, show_output=True).success:
        return False
    parts = [part] if part is not None else day.get_parts()
    tested = test_parts(runner, day, parts)
    if not tested:
        display.info("nothing to test")
    return tested


def test_parts(runner: BaseRunner, day: Day, parts: List[str]) -> bool:
    """Run the given parts of an already built day against all of its inputs.

    Inputs without content and parts without a recorded answer are skipped.
    Once a part reports Unimplemented it is skipped for the remaining inputs.

    Returns:
        True when at least one part was graded.
    """
    implemented = {part: True for part in parts}
    tested = False
    first_error: Optional[AocError] = None
    for input_name in day.get_input_names():
        if not day.has_input(input_name):
            continue
        for part in parts:
            if not implemented[part]:
                continue
            expected = day.get_expected_answer(input_name, part)
            if expected is None:
                continue
            tested = True
            display.day_part(day.year, day.day, part)
            try:
                result = runner.run(day.path, day.day, input_name, part)
            except AocError as exc:
                LOGGER.debug("Run of %s part %s on %s failed: %s", day.id, part, input_name, exc)
                display.run_error()
                first_error = first_error or exc
                continue
            if isinstance(result, Panic):
                display.panic_input(input_name)
            elif isinstance(result, Unimplemented):
                display.unimplemented()
                implemented[part] = False
            else:
                display.answer(result.answer, expected, result.time)
                display.console.print(f"  ({input_name})", markup=False)
    if first_error is not None:
        raise first_error
    return tested


# ---------------------------------------------------------------------------
# Sweeps
# ---------------------------------------------------------------------------

def run_part(runner: BaseRunner, day: Day, part: str, stats: BatchStats) -> RunResult:
    """Run one part of a built day on its actual input and record it in ``stats``."""
    result = runner.run(day.path, day.day, DEFAULT_INPUT, part)
    if isinstance(result, Panic):
        display.panic()
    elif isinstance(result, Unimplemented):
        display.unimplemented()
    else:
        expected = day.get_expected_answer(DEFAULT_INPUT, part)
        display.answer(result.answer, expected, result.time)
        display.console.print()
    stats.record(result)
    return result


def run_days(
    runner: BaseRunner,
    year_dir: Path,
    year: str,
    days: Iterable[int],
    stats: Optional[BatchStats] = None,
) -> BatchStats:
    """Run every part of the selected days on their actual inputs.

    Missing day directories are skipped silently. A day whose build fails is
    reported and skipped. An error while running one part is reported on that
    part's line and the sweep carries on; the first such error is raised once
    the summary has been printed.

    Returns:
        The accumulated timing statistics.
    """
    stats = stats if stats is not None else BatchStats()
    year_dir = Path(year_dir)
    total_days = 0
    first_error: Optional[AocError] = None
    for day_number in days:
        total_days += 1
        day_name = f"{day_number:02}"
        path = year_dir / day_name
        if not is_dir(path):
            continue
        day = Day(path, year, day_name)
        display.day(year, day_name)
        if not day.has_input(DEFAULT_INPUT):
            display.no_input()
            continue
        try:
            built = runner.build(day.path, False, show_output=False).success
        except AocError as exc:
            display.build_error()
            first_error = first_error or exc
            continue
        if not built:
            display.build_error()
            continue
        for part in day.get_parts():
            if part == "1":
                display.part(part)
            else:
                display.day_part(year, day_name, part)
            try:
                run_part(runner, day, part, stats)
            except AocError as exc:
                LOGGER.debug("Run of %s part %s failed: %s", day.id, part, exc)
                display.run_error()
                first_error = first_error or exc
    if total_days == 0:
        raise AocError("no days to run")
    display.stats(stats)
    if first_error is not None:
        raise first_error
    return stats


def test_days(runner: BaseRunner, year_dir: Path, year: str, days: Iterable[int]) -> bool:
    """Grade every selected day that builds against all of its inputs.

    Returns:
        True when at least one part was graded.
    """
    year_dir = Path(year_dir)
    tested = False
    first_error: Optional[AocError] = None
    for day_number in days:
        day_name = f"{day_number:02}"
        path = year_dir / day_name
        if not is_dir(path):
            continue
        day = Day(path, year, day_name)
        if not runner.build(day.path, False, show_output=False).success:
            continue
        try:
            if test_parts(runner, day, day.get_parts()):
                tested = True
        except AocError as exc:
            tested = True
            first_error = first_error or exc
    if not tested:
        display.info("nothing to test")
    if first_error is not None:
        raise first_error
    return tested
