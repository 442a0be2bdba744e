"""
Day selection term language.

A selection is a list of terms applied in order to the days 1..25::

    5        include day 5
    -5       exclude day 5
    3..7     include days 3 to 7
    -..10    exclude days 1 to 10
    ..       include every day

The selection starts out as the opposite of the first term's polarity, so a
selection that opens with an exclusion starts from every day. Later terms
overwrite earlier ones for the days they cover.
"""
import re
from dataclasses import dataclass
from typing import List, Sequence

from .errors import MissingArgumentError, TermError

FIRST_DAY = 1
LAST_DAY = 25

_NUMBER_RE = re.compile(r"[0-9]+")

_FORMAT_MESSAGE = "term must be in the form X, -X, X..Y or -X..Y"
_RANGE_MESSAGE = f"day must be between {FIRST_DAY} and {LAST_DAY}"


@dataclass(frozen=True)
class Term:
    positive: bool
    start: int
    end: int

    @classmethod
    def parse(cls, token: str) -> "Term":
        if not token:
            raise TermError(token, _FORMAT_MESSAGE)
        if token.startswith("-"):
            start, end = _parse_selector(token, token[1:])
            return cls(False, start, end)
        start, end = _parse_selector(token, token)
        return cls(True, start, end)

    def days(self) -> range:
        return range(self.start, self.end + 1)


def _parse_day(token: str, text: str, default: int) -> int:
    if not text:
        return default
    if not _NUMBER_RE.fullmatch(text):
        raise TermError(token, _FORMAT_MESSAGE)
    day = int(text)
    if not FIRST_DAY <= day <= LAST_DAY:
        raise TermError(token, _RANGE_MESSAGE)
    return day


def _parse_selector(token: str, selector: str):
    parts = selector.split("..")
    if len(parts) == 1:
        if not selector:
            raise TermError(token, _FORMAT_MESSAGE)
        day = _parse_day(token, selector, FIRST_DAY)
        return day, day
    if len(parts) == 2:
        start = _parse_day(token, parts[0], FIRST_DAY)
        end = _parse_day(token, parts[1], LAST_DAY)
        if start > end:
            raise TermError(token, "start of range is after end of range")
        return start, end
    raise TermError(token, _FORMAT_MESSAGE)


def parse_days(args: Sequence[str]) -> List[int]:
    """Parse term tokens into the ascending list of selected days.

    Raises:
        MissingArgumentError: no tokens were given.
        TermError: a token is malformed; ``token`` holds the offending literal
            and the chained cause names what was wrong with it.
    """
    terms = []
    for arg in args:
        try:
            terms.append(Term.parse(arg))
        except TermError as exc:
            raise TermError(arg, f"invalid term in argument <DAYS>: `{arg}`") from exc
    if not terms:
        raise MissingArgumentError("DAYS")

    selected = [not terms[0].positive] * (LAST_DAY + 1)
    for term in terms:
        for day in term.days():
            selected[day] = term.positive
    return [day for day in range(FIRST_DAY, LAST_DAY + 1) if selected[day]]
