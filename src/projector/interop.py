"""
Conversions between ``projector`` results and ``returns`` containers.

Useful at the edge of code that already speaks ``returns.result``
(``Success`` / ``Failure``), e.g. functions decorated with ``@safe``.
"""

from typing import Any, TypeVar

from returns.result import Failure, Success
from returns.result import Result as ReturnsResult

from .result import Err, Ok, Result

A = TypeVar("A")
E = TypeVar("E")


def to_returns(result: Result[A, E]) -> ReturnsResult[A, E]:
    """Convert ``Ok`` to ``Success`` and ``Err`` to ``Failure``."""
    match result:
        case Ok(value):
            return Success(value)
        case Err(error):
            return Failure(error)
        case _:
            raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def from_returns(container: Any) -> Result[Any, Any]:
    """Convert ``Success`` to ``Ok`` and ``Failure`` to ``Err``."""
    if isinstance(container, Success):
        return Ok(container.unwrap())
    if isinstance(container, Failure):
        return Err(container.failure())
    raise TypeError(f"Expected Success or Failure, got {type(container).__name__}")


__all__ = ["from_returns", "to_returns"]
