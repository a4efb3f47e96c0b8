"""Ok / Err result variants for code that prefers returning failures.

Err usually carries an Error, so the failure keeps its full context and
can still be raised or rendered later:

    match attempt(load, path, template=et_load):
        case Ok(value=cfg): ...
        case Err(error=err): log.warning("%s", err)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant."""

    value: T

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure variant."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def unwrap(self) -> NoReturn:
        """Raise the carried error if it is an exception, else RuntimeError."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f"Called unwrap on Err: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        return default

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise (see Err.unwrap)."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        result.unwrap()
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def map_result[T, U, E](result: Ok[T] | Err[E], f: Callable[[T], U]) -> Ok[U] | Err[E]:
    """Apply f to an Ok value, pass Err through unchanged."""
    if isinstance(result, Ok):
        return Ok(f(result.value))
    return result
