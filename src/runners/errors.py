"""
Exception hierarchy for the solution runner.

Every error the CLI reports derives from AocError. Causes are attached with
ordinary exception chaining (``raise ... from exc``) and printed as ``cause:``
lines; usage strings are attached with :meth:`AocError.with_usage` and printed
as ``usage:`` / ``or:`` lines.

Non-zero exit statuses of the build tool or of a solution artifact are not
errors: they are folded into BuildResult.FAILURE and Panic respectively.
"""
from typing import Iterable, List


class AocError(RuntimeError):
    """Base class for all errors reported to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.usages: List[str] = []

    def with_usage(self, *usages: str) -> "AocError":
        self.usages.extend(usages)
        return self

    def causes(self) -> Iterable[str]:
        """Yield the messages of chained exceptions, outermost first."""
        exc = self.__cause__
        while exc is not None:
            yield getattr(exc, "message", None) or str(exc) or type(exc).__name__
            exc = exc.__cause__

    def __str__(self) -> str:
        return self.message


class TermError(AocError):
    """Raised when a day-range term cannot be parsed."""

    def __init__(self, token: str, message: str = "term must be in the form X, -X, X..Y or -X..Y"):
        super().__init__(message)
        self.token = token


class MissingArgumentError(AocError):
    def __init__(self, arg: str):
        super().__init__(f"missing argument <{arg}>")
        self.arg = arg


class InvalidArgumentError(AocError):
    def __init__(self, arg: str, value: str):
        super().__init__(f"invalid value for argument <{arg}>: `{value}`")
        self.arg = arg
        self.value = value


class ExtraArgumentError(AocError):
    def __init__(self, value: str):
        super().__init__(f"unexpected argument `{value}`")
        self.value = value


class WorkspaceError(AocError):
    """Raised for missing or malformed directories and files."""


class ArtifactReadError(AocError):
    """Raised when a required out file of a run cannot be read."""


class OutputContractError(AocError):
    """Raised when an artifact wrote out files that violate the output contract."""


class NetworkError(AocError):
    pass


class SessionError(AocError):
    def __init__(self, message: str = "invalid session cookie"):
        super().__init__(message)


class ResponseError(AocError):
    def __init__(self, message: str = "server response error"):
        super().__init__(message)


class PageUnavailableError(AocError):
    def __init__(self, message: str = "webpage not available"):
        super().__init__(message)
