"""
Client for the puzzle website.

Fetches puzzle inputs, accepted answers and calendar progress, and submits
answers. Requests carry the stored session cookie; there is no login flow and
no retrying.
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import requests

from .config import DEFAULT_BASE_URL
from .errors import NetworkError, PageUnavailableError, ResponseError, SessionError

LOGGER = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30

_INPUTS_DIFFER_RE = re.compile(r"Puzzle inputs differ by user")
_LOGIN_RE = re.compile(r"To play, please identify yourself via one of these services")
_ANSWER_RE = re.compile(r"Your puzzle answer was <code>([^<]+)</code>")
_CALENDAR_RE = re.compile(r"calendar-day(\d+) calendar-(very)?complete")
_RIGHT_RE = re.compile(r"That's the right answer")
_WRONG_RE = re.compile(r"That's not the right answer")
_WAIT_RE = re.compile(r"You gave an answer too recently")


@dataclass(frozen=True)
class Progress:
    part_1: Optional[str]
    part_2: Optional[str]
    next: Optional[str]


class SubmissionResult(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    WAIT = "wait"


@dataclass(frozen=True)
class YearCompletion:
    stars: List[int]  # 0, 1 or 2 per day

    @property
    def total(self) -> int:
        return sum(self.stars)


def session_cookie(token: str) -> str:
    token = token.strip()
    return token if token.startswith("session=") else f"session={token}"


class AocClient:
    def __init__(self, session: str, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip("/")
        self.http = requests.Session()
        self.http.headers["cookie"] = session_cookie(session)

    def _url(self, year: str, day: Optional[str] = None, suffix: str = "") -> str:
        url = f"{self.base_url}/{year}"
        if day is not None:
            url += f"/day/{int(day)}"
        return url + suffix

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        LOGGER.debug("%s %s", method, url)
        try:
            return self.http.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
        except requests.RequestException as exc:
            raise NetworkError("network error") from exc

    def get_input(self, year: str, day: str) -> str:
        response = self._request("GET", self._url(year, day, "/input"))
        if not response.ok:
            if _INPUTS_DIFFER_RE.search(response.text):
                raise SessionError()
            raise PageUnavailableError()
        return response.text.rstrip()

    def get_progress(self, year: str, day: str) -> Progress:
        """Answers already accepted for a day, and the next part to submit."""
        response = self._request("GET", self._url(year, day))
        if not response.ok:
            raise PageUnavailableError()
        text = response.text
        if _LOGIN_RE.search(text):
            raise SessionError()
        answers = _ANSWER_RE.findall(text)[:2]
        part_1 = answers[0] if len(answers) > 0 else None
        part_2 = answers[1] if len(answers) > 1 else None
        parts = 1 if int(day) == 25 else 2
        # day 25 part 2 is awarded, not submitted
        next_part = str(len(answers) + 1) if len(answers) < parts else None
        return Progress(part_1, part_2, next_part)

    def submit(self, year: str, day: str, part: str, answer: str) -> SubmissionResult:
        response = self._request(
            "POST",
            self._url(year, day, "/answer"),
            data={"level": part, "answer": answer},
        )
        if not response.ok:
            raise PageUnavailableError()
        text = response.text
        if _RIGHT_RE.search(text):
            return SubmissionResult.CORRECT
        if _WRONG_RE.search(text):
            return SubmissionResult.INCORRECT
        if _WAIT_RE.search(text):
            return SubmissionResult.WAIT
        raise ResponseError()

    def get_year_completion(self, year: str) -> YearCompletion:
        response = self._request("GET", self._url(year))
        if not response.ok:
            raise PageUnavailableError()
        text = response.text
        if _LOGIN_RE.search(text):
            raise SessionError()
        stars = [0] * 25
        for day, very in _CALENDAR_RE.findall(text):
            index = int(day) - 1
            if 0 <= index < 25:
                stars[index] = 2 if very else 1
        return YearCompletion(stars)
