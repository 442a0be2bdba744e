"""
Classification of a finished artifact run.

An artifact reports its result out of band, through files in
``data/<input>/<part>/out/``:

- ``unimplemented``: the part has no solution yet (any content).
- ``answer``: the produced answer.
- ``time``: elapsed nanoseconds as an ASCII decimal integer.

A non-zero exit status is a Panic whatever those files contain.
"""
import re
from pathlib import Path

from .errors import ArtifactReadError, OutputContractError
from .result_type import Panic, RunResult, Success, Unimplemented

_TIME_RE = re.compile(r"[0-9]+")


def _read_out_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ArtifactReadError(f"failed to read {path.name} file of run output at {path}") from exc


def parse_time(text: str) -> int:
    """Parse the contents of a ``time`` file into nanoseconds."""
    text = text.strip()
    if not _TIME_RE.fullmatch(text):
        raise OutputContractError(f"invalid time in run output: `{text}`")
    return int(text)


def classify_outcome(returncode: int, out_dir: Path) -> RunResult:
    """Map an exit status and the out files of a run to a RunResult.

    Raises:
        ArtifactReadError: ``answer`` or ``time`` is missing or unreadable.
        OutputContractError: ``time`` does not hold a non-negative integer.
    """
    if returncode != 0:
        return Panic()
    out_dir = Path(out_dir)
    if (out_dir / "unimplemented").is_file():
        return Unimplemented()
    answer = _read_out_file(out_dir / "answer").rstrip()
    time = parse_time(_read_out_file(out_dir / "time"))
    return Success(answer=answer, time=time)
