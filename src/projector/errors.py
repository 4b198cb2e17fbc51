"""Exceptions raised by the projector package itself."""

from typing import Any


class ResultError(Exception):
    """Base class for errors raised by ``projector``."""


class InvalidResultState(ResultError, ValueError):
    """A lifted state is not a well-formed ``{ok, value}`` / ``{ok, error}`` mapping."""


class ResultSerializationError(ResultError, ValueError):
    """A result payload cannot be rendered as JSON."""


class ExpectError(ResultError):
    """Raised by ``Result.expect`` when the error payload is not an exception.

    The original payload is kept on ``error`` so callers can still inspect it.
    """

    def __init__(self, error: Any):
        super().__init__(str(error))
        self.error = error


__all__ = ["ExpectError", "InvalidResultState", "ResultError", "ResultSerializationError"]
