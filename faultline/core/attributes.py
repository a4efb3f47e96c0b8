"""Typed error attributes: Mod, Func, Op, Obj, Kind, Code.

Each attribute is a thin frozen wrapper around a string. The wrapper type,
not the text, decides which field of a record the value lands in. Values of
any other type passed to a constructor become free-form details.

The *f helpers build an attribute from a printf-style pattern:
    kindf("can't open %s", path)  ==  Kind("can't open " + path)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import final


@dataclass(frozen=True, slots=True)
class _Tag:
    """Base for the six single-valued attribute types. NOT @final."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"{type(self).__name__} requires str, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return self.value != ""


@final
@dataclass(frozen=True, slots=True)
class Mod(_Tag):
    """The program module (package) in which the error happened."""


@final
@dataclass(frozen=True, slots=True)
class Func(_Tag):
    """The function that detected the failure and composed the error."""


@final
@dataclass(frozen=True, slots=True)
class Op(_Tag):
    """The operation (call) inside Func that failed."""


@final
@dataclass(frozen=True, slots=True)
class Obj(_Tag):
    """The object the failed operation was performed on."""


@final
@dataclass(frozen=True, slots=True)
class Kind(_Tag):
    """The kind of error, e.g. "not found" or "can't write"."""


@final
@dataclass(frozen=True, slots=True)
class Code(_Tag):
    """An error code callers can use to identify the error."""


type Tag = Mod | Func | Op | Obj | Kind | Code


# --- Formatted constructors ---


def _format(pattern: str, args: tuple[object, ...]) -> str:
    # Same argument rules as logging.LogRecord.getMessage().
    if not args:
        return pattern
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return pattern % args[0]
    return pattern % args


def modf(pattern: str, *args: object) -> Mod:
    """Mod(pattern % args)."""
    return Mod(_format(pattern, args))


def funcf(pattern: str, *args: object) -> Func:
    """Func(pattern % args)."""
    return Func(_format(pattern, args))


def opf(pattern: str, *args: object) -> Op:
    """Op(pattern % args)."""
    return Op(_format(pattern, args))


def objf(pattern: str, *args: object) -> Obj:
    """Obj(pattern % args)."""
    return Obj(_format(pattern, args))


def kindf(pattern: str, *args: object) -> Kind:
    """Kind(pattern % args)."""
    return Kind(_format(pattern, args))


def codef(pattern: str, *args: object) -> Code:
    """Code(pattern % args)."""
    return Code(_format(pattern, args))
