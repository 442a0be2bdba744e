"""
Runner configuration.

Defaults come from environment variables so that a workspace can be pointed at
a different build tool or puzzle server without touching the command line.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

ROOT_MARKER = "aoc-root"
SESSION_FILE = ".session"
DEFAULT_INPUT = "actual"

DEFAULT_BUILD_TOOL = "cargo"
DEFAULT_BASE_URL = "https://adventofcode.com"


@dataclass
class RunnerConfig:
    """Settings shared by the build/run pipeline and the network client."""
    build_tool: str = field(default_factory=lambda: os.environ.get("AOC_BUILD_TOOL", DEFAULT_BUILD_TOOL))
    base_url: str = field(default_factory=lambda: os.environ.get("AOC_BASE_URL", DEFAULT_BASE_URL).rstrip("/"))
    session: Optional[str] = field(default_factory=lambda: os.environ.get("AOC_SESSION"))
