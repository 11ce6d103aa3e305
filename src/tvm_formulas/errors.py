# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
"""
Error taxonomy for the TVM formulas.

Every failure is raised at the point of the failing precondition or failed
convergence. All errors derive from ValueError so callers that already catch
ValueError around numeric code keep working.

    TVMError (ValueError)
    ├── InvalidArgumentError        structurally invalid input
    │   ├── LogDomainError          NPER logarithm arguments non-positive
    │   └── EmptyCashFlowError      empty cash-flow series
    └── NumericError                solver stalled or ran out of iterations

TVMResult / evaluate() give callers a single value-or-error result instead of
exceptions, e.g. for a calculator UI that renders "#NUM!" in a cell.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

__version__ = "0.1.0"


class ErrorKind(Enum):
    """Tag carried by every TVMError."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    LOG_DOMAIN = "LOG_DOMAIN"
    EMPTY_SERIES = "EMPTY_SERIES"
    NUMERIC = "NUMERIC"


class TVMWarning(UserWarning):
    """Category for diagnostics emitted by this package."""


class TVMError(ValueError):
    """Base class for all formula errors."""
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(TVMError):
    kind = ErrorKind.INVALID_ARGUMENT


class LogDomainError(InvalidArgumentError):
    kind = ErrorKind.LOG_DOMAIN


class EmptyCashFlowError(InvalidArgumentError):
    kind = ErrorKind.EMPTY_SERIES


class NumericError(TVMError):
    kind = ErrorKind.NUMERIC


@dataclass(frozen=True)
class TVMResult:
    """Either a float value or the TVMError that prevented computing it."""
    value: float | None = None
    error: TVMError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> float:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


def evaluate(func: Callable[..., float], *args: Any, **kwargs: Any) -> TVMResult:
    """Call func and wrap its outcome in a TVMResult.

    Only TVMError is captured; anything else is a bug and propagates.
    """
    try:
        return TVMResult(value=func(*args, **kwargs))
    except TVMError as e:
        return TVMResult(error=e)
