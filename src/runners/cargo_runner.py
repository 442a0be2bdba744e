"""
Cargo runner implementation for Rust day crates.
"""
import os
from pathlib import Path
from typing import List

from .base_runner import BaseRunner


class CargoRunner(BaseRunner):
    """
    Runner for day solutions laid out as Cargo crates.

    Each day directory holds a crate named ``day-<DD>``; ``cargo build``
    places the binary under ``target/release`` or ``target/debug``.
    """

    def build_command(self, debug: bool) -> List[str]:
        command = [self.config.build_tool, "build"]
        if not debug:
            command.append("-r")
        return command

    def executable_path(self, path: Path, day: str, debug: bool) -> Path:
        name = f"day-{day}"
        if os.name == "nt":
            name += ".exe"
        return Path(path) / "target" / ("debug" if debug else "release") / name
