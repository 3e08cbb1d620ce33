"""
Error classification and result types for Spanner operations.

Spanner reports failures as ``google.api_core.exceptions.GoogleAPICallError``
subclasses. This module maps them onto a small local taxonomy so that the
provisioning steps can tolerate "already exists" conditions and the data steps
can report failures without raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from google.api_core import exceptions as gexc

T = TypeVar("T")

# Message fragments Spanner uses when a DDL statement names an existing object
SCHEMA_DUPLICATE_MARKERS = (
    "duplicate name in schema",
    "already exists",
)

_TRANSIENT_ERRORS = (
    gexc.ServiceUnavailable,
    gexc.DeadlineExceeded,
    gexc.Aborted,
    gexc.ResourceExhausted,
    gexc.InternalServerError,
)


class ErrorKind(str, Enum):
    """Local classification of errors raised by the Spanner client."""

    ALREADY_EXISTS = "already_exists"
    SCHEMA_ALREADY_EXISTS = "schema_already_exists"
    TRANSIENT = "transient"
    FATAL = "fatal"


def _error_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None) or str(exc)
    return message.lower()


def classify_error(exc: BaseException) -> ErrorKind:
    """
    Map an exception raised by the Spanner client onto an ``ErrorKind``.

    ``FailedPrecondition`` covers many unrelated conditions, so it only counts
    as a schema duplicate when the message names one.

    Args:
        exc: Exception raised by an admin or data API call

    Returns:
        ErrorKind: Classification of the error
    """
    if isinstance(exc, gexc.AlreadyExists):
        return ErrorKind.ALREADY_EXISTS

    if isinstance(exc, gexc.FailedPrecondition):
        message = _error_message(exc)
        if any(marker in message for marker in SCHEMA_DUPLICATE_MARKERS):
            return ErrorKind.SCHEMA_ALREADY_EXISTS
        return ErrorKind.FATAL

    if isinstance(exc, _TRANSIENT_ERRORS):
        return ErrorKind.TRANSIENT

    return ErrorKind.FATAL


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a non-fatal operation.

    ``value`` holds the result (or a neutral default on failure); ``error``
    and ``kind`` are set only when the operation failed.
    """

    value: Optional[T] = None
    error: Optional[BaseException] = None
    kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls, error: BaseException, default: Optional[T] = None
    ) -> "OperationResult[T]":
        return cls(value=default, error=error, kind=classify_error(error))
