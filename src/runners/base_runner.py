"""
Abstract base class for all runner implementations.
Defines the build/run interface the pipeline drives.
"""
from abc import ABC, abstractmethod
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from .config import RunnerConfig
from .errors import AocError
from .outcome import classify_outcome
from .result_type import BuildResult, RunResult

LOGGER = logging.getLogger(__name__)


class BaseRunner(ABC):
    """
    Abstract base class for runners that build and execute day solutions.

    Subclasses describe how a day is built and where its artifact lands.
    Every subprocess goes through :meth:`_execute`, which blocks until the
    child exits; tests substitute it to return canned exit statuses.
    """

    def __init__(self, config: Optional[RunnerConfig] = None):
        """
        Initialize the runner.

        Args:
            config: Runner settings; defaults are read from the environment
        """
        self.config = config or RunnerConfig()

    @abstractmethod
    def build_command(self, debug: bool) -> List[str]:
        """
        Command that builds the solution in its own directory.

        Args:
            debug: Build without optimizations

        Returns:
            Argument vector for the build tool
        """
        pass

    @abstractmethod
    def executable_path(self, path: Path, day: str, debug: bool) -> Path:
        """
        Location of the artifact produced by :meth:`build`.

        Args:
            path: Day directory
            day: Two-digit day identifier
            debug: Whether the debug artifact is wanted

        Returns:
            Path to the executable
        """
        pass

    def build(self, path: Path, debug: bool = False, show_output: bool = False) -> BuildResult:
        """
        Build the solution in a day directory.

        A non-zero exit status of the build tool is a BuildResult.FAILURE,
        never an exception.

        Args:
            path: Day directory
            debug: Build without optimizations
            show_output: Stream the build tool's output to the terminal

        Returns:
            BuildResult.SUCCESS or BuildResult.FAILURE
        """
        command = self.build_command(debug)
        returncode = self._execute(command, Path(path), show_output)
        if returncode != 0:
            LOGGER.debug("Build in %s failed with exit code %s", path, returncode)
            return BuildResult.FAILURE
        return BuildResult.SUCCESS

    def run(
        self,
        path: Path,
        day: str,
        input_name: str,
        part: str,
        debug: bool = False,
        show_output: bool = False
    ) -> RunResult:
        """
        Run a previously built artifact against one input and part.

        The artifact is invoked as ``<artifact> <input> <part>`` from the day
        directory, then its out files are classified.

        Args:
            path: Day directory
            day: Two-digit day identifier
            input_name: Name of the input fixture under ``data/``
            part: "1" or "2"
            debug: Run the debug artifact
            show_output: Let the artifact write to the terminal

        Returns:
            Unimplemented, Panic or Success

        Raises:
            ArtifactReadError, OutputContractError: the run finished but its
                out files could not be turned into a result
        """
        path = Path(path)
        executable = self.executable_path(path, day, debug)
        returncode = self._execute([str(executable), input_name, part], path, show_output)
        out_dir = path / "data" / input_name / part / "out"
        return classify_outcome(returncode, out_dir)

    def _execute(self, command: Sequence[str], cwd: Path, show_output: bool) -> int:
        """
        Run a command to completion and return its exit status.

        Args:
            command: Argument vector
            cwd: Working directory
            show_output: Inherit the terminal instead of discarding output

        Returns:
            The exit status; negative when killed by a signal
        """
        LOGGER.debug("Running %s in %s", " ".join(command), cwd)
        stream = None if show_output else subprocess.DEVNULL
        try:
            result = subprocess.run(command, cwd=str(cwd), stdout=stream, stderr=stream)
        except OSError as exc:
            raise AocError(f"failed to run `{command[0]}`") from exc
        return result.returncode
