# day.py
import logging
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_INPUT
from .workspace import is_dir, read_file
from .errors import WorkspaceError

LOGGER = logging.getLogger(__name__)

LAST_DAY = "25"


class Day:
    def __init__(self, day_dir, year: str, day: str):
        self.path = Path(day_dir)
        self.year = year
        self.day = day
        self.id = year + "/" + day
        self.data_dir = self.path / "data"

    def get_parts(self) -> List[str]:
        # the last day of a year has a single part
        return ["1"] if self.day == LAST_DAY else ["1", "2"]

    def input_dir(self, input_name: str = DEFAULT_INPUT) -> Path:
        return self.data_dir / input_name

    def input_file(self, input_name: str = DEFAULT_INPUT) -> Path:
        return self.input_dir(input_name) / "input"

    def answer_file(self, input_name: str, part: str) -> Path:
        return self.input_dir(input_name) / part / "answer"

    def out_dir(self, input_name: str, part: str) -> Path:
        return self.input_dir(input_name) / part / "out"

    def has_input(self, input_name: str = DEFAULT_INPUT) -> bool:
        return read_file(self.input_file(input_name)).has_contents

    def get_input(self, input_name: str = DEFAULT_INPUT) -> str:
        return read_file(self.input_file(input_name)).try_contents()

    def get_expected_answer(self, input_name: str, part: str) -> Optional[str]:
        """Recorded answer for a part; None when absent or empty."""
        return read_file(self.answer_file(input_name, part)).get_contents()

    def get_last_answer(self, input_name: str, part: str) -> Optional[str]:
        return read_file(self.out_dir(input_name, part) / "answer").get_contents()

    def get_input_names(self) -> List[str]:
        """Names of every input fixture directory, sorted."""
        if not is_dir(self.data_dir):
            return []
        try:
            names = sorted(entry.name for entry in self.data_dir.iterdir() if entry.is_dir())
        except OSError as exc:
            raise WorkspaceError("failed to read file system") from exc
        LOGGER.debug("Found inputs %s for %s", names, self.id)
        return names
