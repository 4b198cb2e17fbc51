"""
A tagged ``Result`` type for deferred, composable error handling.

A ``Result`` is either an ``Ok`` carrying a value or an ``Err`` carrying an
error. Returning one instead of raising keeps the failure in the function's
type signature and lets the caller decide *when* to handle it:

- keep sequencing fallible steps with ``chain`` / ``map``,
- settle on a fallback value with ``or_else``,
- or turn the carried error back into an exception with ``expect``.

Both variants are frozen dataclasses, so results compare structurally and
support pattern matching::

    match parse_port(raw):
        case Ok(port):
            ...
        case Err(reason):
            ...

The serialized form is the plain mapping ``{"ok": True, "value": v}`` or
``{"ok": False, "error": e}``; ``to_json`` and ``from_json`` convert between
the two losslessly.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, cast

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .config import ERROR_KEY, OK_KEY, VALUE_KEY
from .errors import ExpectError, InvalidResultState, ResultSerializationError
from .state import ErrState, OkState, ResultStateAdapter

# A is the type of the success value, E the type of the error value.
A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")

logger = logging.getLogger(__name__)


class Result(ABC, Generic[A, E]):
    """Either an ``Ok`` value or an ``Err`` error.

    ``Result`` itself cannot be instantiated; build one with ``Result.ok`` /
    ``Result.err`` (or the ``Ok`` / ``Err`` variants directly), or lift a
    serialized state with ``Result.from_json``.
    """

    # --- Construction ---

    @staticmethod
    def ok(value: A) -> Result[A, Any]:
        """Tag a value as an ``Ok`` result."""
        return Ok(value)

    @staticmethod
    def err(error: E) -> Result[Any, E]:
        """Tag an error as an ``Err`` result."""
        return Err(error)

    @staticmethod
    def from_json(state: Mapping[str, Any]) -> Result[Any, Any]:
        """Lift a serialized ``{ok, value}`` / ``{ok, error}`` mapping into a Result.

        The tag and payload are kept as given. Anything that is not exactly one
        of the two tagged shapes raises ``InvalidResultState``.
        """
        raw = dict(state) if isinstance(state, Mapping) else state
        try:
            parsed = ResultStateAdapter.validate_python(raw)
        except ValidationError as exc:
            logger.debug("Rejected malformed result state %r: %s", state, exc)
            raise InvalidResultState(f"Not a tagged result state: {state!r}") from exc
        return _lift(parsed)

    @staticmethod
    def parse_json(text: str | bytes) -> Result[Any, Any]:
        """Lift a Result from JSON text of its serialized form."""
        try:
            parsed = ResultStateAdapter.validate_json(text)
        except ValidationError as exc:
            logger.debug("Rejected malformed result JSON: %s", exc)
            raise InvalidResultState("Not a tagged result state in JSON input") from exc
        return _lift(parsed)

    # --- Collections ---

    @staticmethod
    def first_ok(results: Iterable[Result[A, E]]) -> A | None:
        """Return the value of the first ``Ok`` in ``results``, or ``None``.

        Iteration stops at the first ``Ok``; the rest of a lazy source is never
        pulled.
        """
        for result in results:
            if isinstance(result, Ok):
                return result.value
        return None

    @staticmethod
    def okays(results: Iterable[Result[A, E]]) -> Iterable[A]:
        """Lazily yield the value of every ``Ok`` in ``results``, dropping errors."""
        return _OkValues(results)

    # --- Inspection ---

    @abstractmethod
    def is_ok(self) -> bool: ...

    @abstractmethod
    def is_err(self) -> bool: ...

    # --- Transformation ---

    @abstractmethod
    def map(self, f: Callable[[A], B]) -> Result[B, E]:
        """Apply ``f`` to an ``Ok`` value and wrap the return in ``Ok``.

        An ``Err`` is returned unchanged and ``f`` is not called.
        """

    @abstractmethod
    def chain(self, f: Callable[[A], Result[B, E]]) -> Result[B, E]:
        """Apply ``f`` to an ``Ok`` value and return its Result as is.

        An ``Err`` is returned unchanged and ``f`` is not called.
        """

    @abstractmethod
    def or_else(self, on_err: Callable[[E], A]) -> A:
        """Return the ``Ok`` value, or whatever ``on_err`` returns for the error."""

    @abstractmethod
    def expect(self, or_else: Callable[[E], object] | None = None) -> A:
        """Return the ``Ok`` value, or raise.

        For an ``Err`` the carried error is raised, or ``or_else(error)`` when
        ``or_else`` is given. Payloads that are not exceptions are wrapped in
        ``ExpectError``.
        """

    # --- Serialization ---

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Return the plain tagged mapping equivalent to this Result."""

    def dump_json(self) -> str:
        """Return this Result's serialized form as JSON text.

        Payloads pydantic cannot render as JSON raise ``ResultSerializationError``.
        """
        state = ResultStateAdapter.validate_python(self.to_json())
        try:
            return ResultStateAdapter.dump_json(state).decode("utf-8")
        except PydanticSerializationError as exc:
            raise ResultSerializationError(f"Cannot serialize {self!r}: {exc}") from exc


@dataclass(frozen=True)
class Ok(Result[A, E]):
    """Represents a successful outcome containing a value."""

    value: A

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, f: Callable[[A], B]) -> Result[B, E]:
        return Ok(f(self.value))

    def chain(self, f: Callable[[A], Result[B, E]]) -> Result[B, E]:
        return f(self.value)

    def or_else(self, on_err: Callable[[E], A]) -> A:
        return self.value

    def expect(self, or_else: Callable[[E], object] | None = None) -> A:
        return self.value

    def to_json(self) -> dict[str, Any]:
        return {OK_KEY: True, VALUE_KEY: self.value}


@dataclass(frozen=True)
class Err(Result[A, E]):
    """Represents a failure outcome containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, f: Callable[[A], B]) -> Result[B, E]:
        return cast(Result[B, E], self)

    def chain(self, f: Callable[[A], Result[B, E]]) -> Result[B, E]:
        return cast(Result[B, E], self)

    def or_else(self, on_err: Callable[[E], A]) -> A:
        return on_err(self.error)

    def expect(self, or_else: Callable[[E], object] | None = None) -> NoReturn:
        payload = or_else(self.error) if or_else is not None else self.error
        raise _raisable(payload)

    def to_json(self) -> dict[str, Any]:
        return {OK_KEY: False, ERROR_KEY: self.error}


class _OkValues(Iterable[A]):
    """Iterable view of the ``Ok`` values of a source of results.

    Each ``iter()`` starts a fresh pass over the source, so the view can be
    walked again whenever the source can.
    """

    __slots__ = ("_results",)

    def __init__(self, results: Iterable[Result[A, Any]]):
        self._results = results

    def __iter__(self) -> Iterator[A]:
        for result in self._results:
            if isinstance(result, Ok):
                yield result.value


def _lift(state: OkState | ErrState) -> Result[Any, Any]:
    match state:
        case OkState(value=value):
            return Ok(value)
        case ErrState(error=error):
            return Err(error)


def _raisable(payload: object) -> BaseException | type[BaseException]:
    if isinstance(payload, BaseException):
        return payload
    if isinstance(payload, type) and issubclass(payload, BaseException):
        return payload
    return ExpectError(payload)


__all__ = ["Err", "Ok", "Result"]
