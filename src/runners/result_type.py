# this gets its own file to prevent circular imports
from dataclasses import dataclass
from enum import Enum
from typing import Union


class BuildResult(int, Enum):
    SUCCESS = 1
    FAILURE = 2

    @property
    def success(self) -> bool:
        return self is BuildResult.SUCCESS


class Verdict(int, Enum):
    CORRECT      = 1
    INCORRECT    = 2
    UNVERIFIED   = 3
    UNVERIFIABLE = 4


@dataclass(frozen=True)
class Unimplemented:
    pass


@dataclass(frozen=True)
class Panic:
    pass


@dataclass(frozen=True)
class Success:
    answer: str
    time: int  # nanoseconds


RunResult = Union[Unimplemented, Panic, Success]
