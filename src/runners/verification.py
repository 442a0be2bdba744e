"""
Answer verification and batch aggregation.
"""
from dataclasses import dataclass
from typing import Optional

from .result_type import RunResult, Success, Verdict

MULTILINE_PLACEHOLDER = "???"


@dataclass(frozen=True)
class Answer:
    text: str

    @property
    def is_multiline(self) -> bool:
        return len(self.text.splitlines()) > 1

    def display(self) -> str:
        """Inline form; multi-line answers are elided to a placeholder."""
        return MULTILINE_PLACEHOLDER if self.is_multiline else self.text


def verify(answer: str, expected: Optional[str]) -> Verdict:
    """Grade a produced answer against the recorded one.

    Multi-line answers are usually letters drawn as ASCII art, which cannot be
    compared with a single-line expected answer. Those mismatches are reported
    as UNVERIFIABLE rather than INCORRECT.
    """
    got = Answer(answer.rstrip())
    if expected is None:
        return Verdict.UNVERIFIABLE if got.is_multiline else Verdict.UNVERIFIED
    wanted = Answer(expected.rstrip())
    if got.text == wanted.text:
        return Verdict.CORRECT
    if got.is_multiline and not wanted.is_multiline:
        return Verdict.UNVERIFIABLE
    return Verdict.INCORRECT


@dataclass
class BatchStats:
    """Running totals over the Success results of one sweep."""
    total_time: int = 0
    num_parts: int = 0

    def record(self, result: RunResult) -> None:
        if isinstance(result, Success):
            self.total_time += result.time
            self.num_parts += 1

    @property
    def mean_time(self) -> Optional[int]:
        if self.num_parts == 0:
            return None
        return self.total_time // self.num_parts


def format_time(nanoseconds: int) -> str:
    """Render nanoseconds in the largest unit below the value, e.g. ``1.5ms``."""
    if nanoseconds < 1_000_000:
        div, unit = 1_000, "μs"
    elif nanoseconds < 1_000_000_000:
        div, unit = 1_000_000, "ms"
    else:
        div, unit = 1_000_000_000, "s"
    value = repr(nanoseconds / div)
    if value.endswith(".0"):
        value = value[:-2]
    return f"{value}{unit}"


def time_style(nanoseconds: int) -> str:
    if nanoseconds < 20_000_000:
        return "green"
    if nanoseconds < 200_000_000:
        return "yellow"
    return "red"
