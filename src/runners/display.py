"""Terminal output for run results, batch statistics and diagnostics."""

from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from .errors import AocError
from .result_type import Verdict
from .verification import Answer, BatchStats, format_time, time_style, verify

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

HEADER_WIDTH = 9


def _log(header: Text, message: str) -> None:
    padding = max(HEADER_WIDTH - len(header), 0)
    line = Text(" " * padding)
    line.append_text(header)
    line.append(": ", style="dim")
    line.append(str(message))
    err_console.print(line)


def success(message: str) -> None:
    _log(Text("success", style="bold green"), message)


def info(message: str) -> None:
    _log(Text("info", style="bold yellow"), message)


def error(message: str) -> None:
    _log(Text("error", style="bold red"), message)


def cause(message: str) -> None:
    _log(Text("cause"), message)


def usage(message: str) -> None:
    _log(Text("usage"), f"aoc {message}")


def or_usage(message: str) -> None:
    _log(Text("or"), f"aoc {message}")


def report_error(exc: AocError) -> None:
    error(exc.message)
    for message in exc.causes():
        cause(message)
    usages: Iterable[str] = iter(exc.usages)
    first = next(usages, None)
    if first is not None:
        usage(first)
        for message in usages:
            or_usage(message)


def _bracketed(text: str, style: str) -> Text:
    line = Text("[", style="dim")
    line.append(text, style=style)
    line.append("]", style="dim")
    return line


def _time(nanoseconds: int) -> Text:
    return Text(format_time(nanoseconds), style=time_style(nanoseconds))


def answer(got: str, expected: Optional[str], time: int) -> bool:
    """Print the compact verdict line for one run, without a newline.

    Returns:
        True when the produced answer spans several lines and was elided.
    """
    got_answer = Answer(got)
    verdict = verify(got, expected)
    if verdict is Verdict.CORRECT:
        line = _bracketed(got_answer.display(), "bold green")
    elif expected is not None and verdict in (Verdict.INCORRECT, Verdict.UNVERIFIABLE):
        incorrect = verdict is Verdict.INCORRECT
        line = _bracketed(got_answer.display(), "bold red" if incorrect else "bold yellow")
        line.append(" ✕ " if incorrect else " - ", style="dim")
        line.append_text(_bracketed(Answer(expected).display(), "bold green"))
    else:
        line = _bracketed(got_answer.display(), "bold yellow")
    line.append("  ")
    line.append_text(_time(time))
    console.print(line, end="")
    return got_answer.is_multiline


def answer_full(year: str, day: str, part: str, got: str, expected: Optional[str], time: int) -> None:
    day_part(year, day, part)
    if answer(got, expected, time):
        console.print()
        console.print(Text(got))
    else:
        console.print()


def just_answer(answer_text: str, correct: bool) -> None:
    console.print(_bracketed(Answer(answer_text).display(), "bold green" if correct else "bold red"))


def _status(message: str, style: str) -> None:
    console.print(Text(message, style=style))


def unimplemented() -> None:
    _status("unimplemented", "yellow")


def panic() -> None:
    _status("panic", "red")


def panic_input(input_name: str) -> None:
    line = Text("panic", style="red")
    line.append(f"  ({input_name})")
    console.print(line)


def no_input() -> None:
    part("*")
    _status("no input", "yellow")


def build_error() -> None:
    part("*")
    _status("build error", "red")


def run_error() -> None:
    _status("error", "red")


def submit_error() -> None:
    _status("error", "red")


def incomplete() -> None:
    _status("incomplete", "yellow")


def wait() -> None:
    _status("wait", "yellow")


def day(year: str, day_name: str) -> None:
    line = Text(year)
    line.append("/", style="dim")
    line.append(day_name)
    console.print(line, end="")


def part(part_name: str) -> None:
    line = Text("/", style="dim")
    line.append(part_name)
    line.append(": ", style="dim")
    console.print(line, end="")


def day_part(year: str, day_name: str, part_name: str) -> None:
    day(year, day_name)
    part(part_name)


def stats(batch: BatchStats) -> None:
    _log(Text("parts"), f"{batch.num_parts:02}")
    if batch.num_parts > 0:
        _log(Text("total"), format_time(batch.total_time))
        _log(Text("average"), format_time(batch.mean_time))


def completion_header() -> None:
    console.print(" " * 14 + "1" * 10 + "2" * 6)
    console.print(" " * 5 + "1234567890" * 2 + "12345")


def year_completion(year: str, stars: Iterable[int], total: int) -> None:
    line = Text(f"{year} ")
    for count in stars:
        if count == 0:
            line.append(" ")
        elif count == 1:
            line.append("★", style="dim")
        else:
            line.append("★", style="yellow")
    line.append(" ")
    line.append(f"{total:02}", style="yellow")
    console.print(line)
