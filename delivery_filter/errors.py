"""
Error kinds raised by the delivery order pipeline.

Every error carries a human-readable comment for the delivery log and a
kind tag so callers can branch without inspecting messages.
"""
from __future__ import annotations

from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union


class ErrorKind(Enum):
    NOT_FOUND = auto()         # input file missing
    FORMAT = auto()            # content does not match the schema
    WRITE = auto()             # output could not be written
    INVALID_ARGUMENT = auto()  # malformed _key=value token


class DeliveryFilterError(Exception):
    """Base error for a run. Always terminal for the current run."""

    kind: ErrorKind = ErrorKind.FORMAT

    def __init__(self, message: str, comment: str) -> None:
        super().__init__(message)
        self.comment = comment


class NotFoundError(DeliveryFilterError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: Union[str, Path], comment: str = "Order file lookup failed") -> None:
        super().__init__(f"File not found: {path}", comment)
        self.path = str(path)


class FormatError(DeliveryFilterError):
    kind = ErrorKind.FORMAT

    def __init__(self, comment: str, path: Optional[Union[str, Path]] = None) -> None:
        message = comment if path is None else f"{comment}: {path}"
        super().__init__(message, comment)
        self.path = None if path is None else str(path)


class WriteError(DeliveryFilterError):
    kind = ErrorKind.WRITE

    def __init__(self, path: Union[str, Path], cause: BaseException,
                 comment: str = "Saving orders failed") -> None:
        super().__init__(f"Could not write {path}: {cause}", comment)
        self.path = str(path)
        self.cause = cause


class InvalidArgumentError(DeliveryFilterError):
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, token: str) -> None:
        super().__init__(
            f"Expected <key>=<value>, got {token!r}",
            f"Failed to read argument {token}",
        )
        self.token = token
