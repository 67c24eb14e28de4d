from __future__ import annotations

from typing import List, Optional


class StackforgeError(Exception):
    """Base class for errors reported to the user by the CLI."""


class ValidationError(StackforgeError):
    """A user supplied option is not allowed."""


class UpstreamError(StackforgeError):
    """A step the build depends on (extraction, project resolution) failed."""


class ExtractError(UpstreamError):
    pass


class ExecutionError(StackforgeError):
    """
    The container build tool could not be launched or exited with an error.
    """

    def __init__(
        self,
        message: str,
        cmd: Optional[List[str]] = None,
        returncode: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.cmd = cmd or []
        self.returncode = returncode
