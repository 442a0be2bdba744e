"""
Runner package for building, running and checking daily puzzle solutions.

This module provides a modular architecture for the solution pipeline:
- BaseRunner / CargoRunner: build a day and execute its artifact
- classify_outcome: turn an exit status and out files into a RunResult
- verify / BatchStats: grade answers and aggregate timings across a sweep
- parse_days: the day selection term language

The pipeline module drives these per day and per sweep.
"""

from .base_runner import BaseRunner
from .cargo_runner import CargoRunner
from .config import RunnerConfig
from .day import Day
from .days import parse_days
from .errors import AocError, TermError
from .outcome import classify_outcome
from .result_type import BuildResult, Panic, RunResult, Success, Unimplemented, Verdict
from .verification import BatchStats, format_time, verify

__all__ = [
    'BaseRunner',
    'CargoRunner',
    'RunnerConfig',
    'Day',
    'parse_days',
    'AocError',
    'TermError',
    'classify_outcome',
    'BuildResult',
    'Panic',
    'RunResult',
    'Success',
    'Unimplemented',
    'Verdict',
    'BatchStats',
    'format_time',
    'verify',
]
