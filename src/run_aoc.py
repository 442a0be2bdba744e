import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from runners import display, pipeline, remote, scaffold
from runners.cargo_runner import CargoRunner
from runners.config import DEFAULT_INPUT, ROOT_MARKER, RunnerConfig
from runners.day import Day
from runners.days import FIRST_DAY, LAST_DAY, parse_days
from runners.errors import (
    AocError,
    ExtraArgumentError,
    InvalidArgumentError,
    MissingArgumentError,
)
from runners.workspace import (
    CurrentDirectory,
    Location,
    assert_day_dir,
    assert_year_dir,
    day_from_arg,
    year_from_arg,
)

LOGGER = logging.getLogger(__name__)

PARTS = ("1", "2")
DAYS_KEYWORDS = ("days", "d")
ALL_DAYS = range(FIRST_DAY, LAST_DAY + 1)


# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------

def assert_args(values: Sequence[str], params: Sequence[str]) -> None:
    if len(values) < len(params):
        raise MissingArgumentError(params[len(values)])
    if len(values) > len(params):
        raise ExtraArgumentError(values[len(params)])


def assert_first_args(values: Sequence[str], params: Sequence[str]) -> None:
    if len(values) < len(params):
        raise MissingArgumentError(params[len(values)])


def with_usage(func: Callable, *usages: str):
    """Call ``func`` and attach usage lines to any AocError it raises."""
    try:
        return func()
    except AocError as exc:
        raise exc.with_usage(*usages)


def part_from_arg(arg: str) -> str:
    if arg not in PARTS:
        raise InvalidArgumentError("PART", arg) from AocError("must be `1` or `2`")
    return arg


def input_parts(values: Sequence[str]) -> Tuple[str, Optional[str]]:
    """Resolve ``[INPUT] [PART]``; a lone `1` or `2` is a part, not an input."""
    if not values:
        return DEFAULT_INPUT, None
    if len(values) == 1:
        if values[0] in PARTS:
            return DEFAULT_INPUT, values[0]
        return values[0], None
    if len(values) == 2:
        if values[0] in PARTS:
            raise InvalidArgumentError("INPUT", values[0])
        return values[0], part_from_arg(values[1])
    raise ExtraArgumentError(values[2])


def parts_from_args(values: Sequence[str]) -> Optional[str]:
    if not values:
        return None
    if len(values) == 1:
        return part_from_arg(values[0])
    raise ExtraArgumentError(values[1])


def answer_from_args(values: Sequence[str]) -> Optional[str]:
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    raise ExtraArgumentError(values[1])


def input_name_from_arg(arg: str) -> str:
    if arg in PARTS:
        raise InvalidArgumentError("INPUT", arg)
    return arg


def require_workspace(current: CurrentDirectory) -> None:
    if current.location is Location.UNKNOWN:
        raise AocError(f"unknown directory - failed to find file `{ROOT_MARKER}`")


def resolve_day(
    current: CurrentDirectory,
    values: Sequence[str],
    usages: Sequence[str],
) -> Tuple[Day, List[str]]:
    """Resolve ``<YEAR> <DAY>`` (or less, depending on the directory) to a Day.

    Returns:
        The day and the positional arguments left after it.
    """
    if current.location is Location.DAY:
        return Day(current.root / current.year / current.day, current.year, current.day), list(values)
    if current.location is Location.YEAR:
        with_usage(lambda: assert_first_args(values, ["DAY"]), *usages)
        year = current.year
        day = with_usage(lambda: day_from_arg(values[0]), *usages)
        remaining = list(values[1:])
    else:
        with_usage(lambda: assert_first_args(values, ["YEAR", "DAY"]), *usages)
        year = with_usage(lambda: year_from_arg(values[0]), *usages)
        day = with_usage(lambda: day_from_arg(values[1]), *usages)
        remaining = list(values[2:])
    path = current.root / year / day
    assert_day_dir(path)
    return Day(path, year, day), remaining


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_init(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    with_usage(lambda: assert_args(args.values, []), "init")
    scaffold.init(current.root)


def cmd_new(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    require_workspace(current)
    values = args.values
    if current.location is Location.DAY:
        raise AocError("invalid directory for command `new`")
    if current.location is Location.YEAR:
        usage = "new <DAY>"
        with_usage(lambda: assert_args(values, ["DAY"]), usage)
        year = current.year
        day = with_usage(lambda: day_from_arg(values[0]), usage)
    else:
        usage = "new <YEAR> <DAY>"
        with_usage(lambda: assert_args(values, ["YEAR", "DAY"]), usage)
        year = with_usage(lambda: year_from_arg(values[0]), usage)
        day = with_usage(lambda: day_from_arg(values[1]), usage)
    scaffold.new_day(CargoRunner(config), current.root / year / day, year, day)


def cmd_add(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    require_workspace(current)
    usage = {
        Location.ROOT: "add <YEAR> <DAY> <INPUT>",
        Location.YEAR: "add <DAY> <INPUT>",
        Location.DAY: "add <INPUT>",
    }[current.location]
    day, rest = resolve_day(current, args.values, [usage])
    with_usage(lambda: assert_args(rest, ["INPUT"]), usage)
    name = with_usage(lambda: input_name_from_arg(rest[0]), usage)
    scaffold.add_input(day.path, name)


def cmd_get(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    require_workspace(current)
    usage = {
        Location.ROOT: "get <YEAR> <DAY>",
        Location.YEAR: "get <DAY>",
        Location.DAY: "get",
    }[current.location]
    day, rest = resolve_day(current, args.values, [usage])
    with_usage(lambda: assert_args(rest, []), usage)
    remote.get(lambda: remote.make_client(current.root, config), day)


def cmd_clean(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    require_workspace(current)
    values = args.values
    if current.location is Location.DAY:
        with_usage(lambda: assert_args(values, []), "clean")
        scaffold.clean_day(current.root / current.year / current.day)
        return
    if current.location is Location.YEAR:
        usages = ("clean", "clean <DAY>")
        year = current.year
        if not values:
            scaffold.clean_year(current.root / year)
            return
        with_usage(lambda: assert_args(values, ["DAY"]), *usages)
        day = with_usage(lambda: day_from_arg(values[0]), *usages)
    else:
        usages = ("clean <YEAR>", "clean <YEAR> <DAY>")
        with_usage(lambda: assert_first_args(values, ["YEAR"]), *usages)
        year = with_usage(lambda: year_from_arg(values[0]), *usages)
        if len(values) == 1:
            path = current.root / year
            assert_year_dir(path)
            scaffold.clean_year(path)
            return
        with_usage(lambda: assert_args(values[1:], ["DAY"]), *usages)
        day = with_usage(lambda: day_from_arg(values[1]), *usages)
    path = current.root / year / day
    assert_day_dir(path)
    scaffold.clean_day(path)


def _sweep(args, current: CurrentDirectory, config: RunnerConfig, command: str, single_day) -> None:
    """Shared resolution of ``run`` and ``test``: a whole year, a term list or one day."""
    require_workspace(current)
    runner = CargoRunner(config)
    values = args.values
    sweep = pipeline.run_days if command == "run" else pipeline.test_days
    day_args = "[INPUT] [PART]" if command == "run" else "[PART]"

    if current.location is Location.DAY:
        single_day(runner, Day(current.root / current.year / current.day, current.year, current.day),
                   values, (f"{command} {day_args}",))
        return
    if current.location is Location.YEAR:
        usages = (command, f"{command} <DAY> {day_args}", f"{command} days <DAYS>")
        year = current.year
        year_dir = current.root / year
        if not values:
            sweep(runner, year_dir, year, ALL_DAYS)
            return
        if values[0] in DAYS_KEYWORDS:
            days = with_usage(lambda: parse_days(values[1:]), *usages)
            sweep(runner, year_dir, year, days)
            return
        day = with_usage(lambda: day_from_arg(values[0]), *usages)
        rest = values[1:]
    else:
        usages = (f"{command} <YEAR>", f"{command} <YEAR> <DAY> {day_args}", f"{command} <YEAR> days <DAYS>")
        if not values:
            raise MissingArgumentError("YEAR").with_usage(*usages)
        year = with_usage(lambda: year_from_arg(values[0]), *usages)
        year_dir = current.root / year
        if len(values) == 1:
            assert_year_dir(year_dir)
            sweep(runner, year_dir, year, ALL_DAYS)
            return
        if values[1] in DAYS_KEYWORDS:
            assert_year_dir(year_dir)
            days = with_usage(lambda: parse_days(values[2:]), *usages)
            sweep(runner, year_dir, year, days)
            return
        day = with_usage(lambda: day_from_arg(values[1]), *usages)
        rest = values[2:]
    path = year_dir / day
    assert_day_dir(path)
    single_day(runner, Day(path, year, day), rest, usages)


def cmd_run(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    def single_day(runner, day, values, usages):
        input_name, part = with_usage(lambda: input_parts(values), *usages)
        pipeline.run_day(runner, day, input_name, part, debug=False)

    _sweep(args, current, config, "run", single_day)


def cmd_test(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    def single_day(runner, day, values, usages):
        part = with_usage(lambda: parts_from_args(values), *usages)
        pipeline.test_day(runner, day, part)

    _sweep(args, current, config, "test", single_day)


def cmd_debug(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    require_workspace(current)
    usage = {
        Location.ROOT: "debug <YEAR> <DAY> [INPUT] [PART]",
        Location.YEAR: "debug <DAY> [INPUT] [PART]",
        Location.DAY: "debug [INPUT] [PART]",
    }[current.location]
    day, rest = resolve_day(current, args.values, [usage])
    input_name, part = with_usage(lambda: input_parts(rest), usage)
    pipeline.run_day(CargoRunner(config), day, input_name, part, debug=True)


def cmd_submit(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    require_workspace(current)
    usage = {
        Location.ROOT: "submit <YEAR> <DAY> [ANSWER]",
        Location.YEAR: "submit <DAY> [ANSWER]",
        Location.DAY: "submit [ANSWER]",
    }[current.location]
    day, rest = resolve_day(current, args.values, [usage])
    answer = with_usage(lambda: answer_from_args(rest), usage)
    remote.submit(remote.make_client(current.root, config), day, answer)


def cmd_open(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    values = args.values
    if current.location is Location.DAY:
        with_usage(lambda: assert_args(values, []), "open")
        remote.open_day(config, current.year, current.day)
        return
    if current.location is Location.YEAR:
        if not values:
            remote.open_year(config, current.year)
            return
        usages = ("open", "open <DAY>")
        with_usage(lambda: assert_args(values, ["DAY"]), *usages)
        remote.open_day(config, current.year, with_usage(lambda: day_from_arg(values[0]), *usages))
        return
    usages = ("open <YEAR>", "open <YEAR> <DAY>")
    with_usage(lambda: assert_first_args(values, ["YEAR"]), *usages)
    year = with_usage(lambda: year_from_arg(values[0]), *usages)
    if len(values) == 1:
        remote.open_year(config, year)
        return
    with_usage(lambda: assert_args(values[1:], ["DAY"]), *usages)
    remote.open_day(config, year, with_usage(lambda: day_from_arg(values[1]), *usages))


def cmd_progress(args, current: CurrentDirectory, config: RunnerConfig) -> None:
    require_workspace(current)
    values = args.values
    client = remote.make_client(current.root, config)
    if current.location is Location.DAY:
        with_usage(lambda: assert_args(values, []), "progress")
        remote.day_progress(client, current.year, current.day)
        return
    if current.location is Location.YEAR:
        usages = ("progress", "progress <DAY>")
        if not values:
            remote.year_progress(client, current.year)
            return
        with_usage(lambda: assert_args(values, ["DAY"]), *usages)
        remote.day_progress(client, current.year, with_usage(lambda: day_from_arg(values[0]), *usages))
        return
    usages = ("progress", "progress <YEAR>", "progress <YEAR> <DAY>")
    if not values:
        remote.all_progress(client)
        return
    year = with_usage(lambda: year_from_arg(values[0]), *usages)
    if len(values) == 1:
        remote.year_progress(client, year)
        return
    with_usage(lambda: assert_args(values, ["YEAR", "DAY"]), *usages)
    remote.day_progress(client, year, with_usage(lambda: day_from_arg(values[1]), *usages))


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

COMMANDS = [
    ("init", [], "Mark the current directory as a workspace.", cmd_init),
    ("new", ["n"], "Create the crate for a day.", cmd_new),
    ("add", ["a"], "Add a named input fixture to a day.", cmd_add),
    ("get", ["g"], "Download the input and accepted answers of a day.", cmd_get),
    ("clean", [], "Empty the input and answer files of a day or year.", cmd_clean),
    ("run", ["r"], "Run a day, a whole year, or a selection of days.", cmd_run),
    ("debug", ["d"], "Run a day with a debug build.", cmd_debug),
    ("test", ["t"], "Check a day against every input with a recorded answer.", cmd_test),
    ("submit", ["s"], "Submit an answer for the next unsolved part.", cmd_submit),
    ("open", ["o"], "Open a puzzle page in the browser.", cmd_open),
    ("progress", ["p"], "Show solved parts and stars.", cmd_progress),
]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc",
        description="Build, run and check daily puzzle solutions. Positional "
                    "arguments depend on where in the workspace the command runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log build and run commands")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, aliases, help_text, handler in COMMANDS:
        sub = subparsers.add_parser(name, aliases=aliases, help=help_text)
        sub.add_argument("values", nargs=argparse.REMAINDER, help="Positional arguments")
        sub.set_defaults(handler=handler)
    help_parser = subparsers.add_parser("help", help="Show this help message.")
    help_parser.set_defaults(handler=None)
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.handler is None:
        parser.print_help()
    else:
        args.values = [value.strip() for value in args.values]
    return args


def main(argv: Optional[List[str]] = None, cwd: Optional[Path] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s:%(message)s")
    if args.handler is None:
        return 0
    config = RunnerConfig()
    try:
        current = CurrentDirectory.get(cwd)
        LOGGER.debug("Workspace root %s, location %s", current.root, current.location.value)
        args.handler(args, current, config)
    except AocError as exc:
        display.report_error(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
