"""Error and Template: the two faces of a Record.

Template is a reusable seed. Error is a raisable failure. Both are built by
running classify() over a starting record plus new attributes:

    etpl = T(Mod("config"))
    et_read = etpl.T(Func("read"))
    ...
    raise et_read.E(NOT_FOUND, Obj(path), exc)

Deriving never mutates the parent: each call returns a new value.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import final

from faultline.core.attributes import Code, Func, Kind, Mod, Obj, Op
from faultline.core.config import DEFAULT_CONFIG, FormatConfig
from faultline.core.record import EMPTY_RECORD, Record, classify
from faultline.core.render import render


class _RecordFields:
    """Read-only field accessors for classes exposing a `record`."""

    __slots__ = ()

    record: Record

    @property
    def module(self) -> Mod:
        return self.record.module

    @property
    def function(self) -> Func:
        return self.record.function

    @property
    def kind(self) -> Kind:
        return self.record.kind

    @property
    def operation(self) -> Op:
        return self.record.operation

    @property
    def obj(self) -> Obj:
        return self.record.obj

    @property
    def code(self) -> Code:
        return self.record.code

    @property
    def details(self) -> str:
        return self.record.details

    @property
    def cause(self) -> BaseException | None:
        return self.record.cause


@final
class Error(Exception, _RecordFields):
    """A reportable failure. str(err) renders the whole cause chain.

    The cause is also installed as __cause__, so tracebacks of a raised
    Error show the wrapped exception as well.
    """

    def __init__(self, record: Record = EMPTY_RECORD, *, config: FormatConfig = DEFAULT_CONFIG) -> None:
        if not isinstance(record, Record):
            raise TypeError(
                f"Error requires a Record, got {type(record).__name__}; use E() to build one"
            )
        super().__init__(record)
        self._record = record
        self._config = config
        self.__cause__ = record.cause

    @property
    def record(self) -> Record:  # type: ignore[override]
        return self._record

    @property
    def config(self) -> FormatConfig:
        return self._config

    def unwrap(self) -> BaseException | None:
        """Return the wrapped cause, or None."""
        return self._record.cause

    def __str__(self) -> str:
        return render(self, self._config)

    def __repr__(self) -> str:
        return f"Error({self._record!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self._record == other._record

    def __hash__(self) -> int:
        return hash(self._record)


@final
@dataclass(frozen=True, slots=True)
class Template(_RecordFields):
    """Common attributes shared by every error created from it."""

    record: Record = EMPTY_RECORD

    def T(self, *attrs: object, config: FormatConfig = DEFAULT_CONFIG) -> Template:  # noqa: N802
        """Derive a template, amending or overriding this one's attributes."""
        return Template(classify(self.record, attrs, config=config))

    def E(self, *attrs: object, config: FormatConfig = DEFAULT_CONFIG) -> Error:  # noqa: N802
        """Create an Error, amending or overriding this template's attributes."""
        return Error(classify(self.record, attrs, config=config), config=config)

    @staticmethod
    def of(err: Error) -> Template:
        """Turn an existing Error back into a template (all fields kept)."""
        return Template(err.record)


_ROOT = Template()


def E(*attrs: object, config: FormatConfig = DEFAULT_CONFIG) -> Error:  # noqa: N802
    """Create an Error from a list of attributes.

    Mod, Func, Op, Obj, Kind and Code values fill their fields (the last
    one of a type wins). An exception becomes the wrapped cause. Any other
    value is appended to the details, separated by semicolons. None is
    ignored.
    """
    return _ROOT.E(*attrs, config=config)


def T(*attrs: object, config: FormatConfig = DEFAULT_CONFIG) -> Template:  # noqa: N802
    """Create a Template from a list of attributes (same rules as E)."""
    return _ROOT.T(*attrs, config=config)


def chain(err: BaseException) -> Iterator[BaseException]:
    """Yield err and every cause below it.

    Only native Errors are descended into; a foreign exception is yielded
    and ends the chain.
    """
    node: BaseException | None = err
    while node is not None:
        yield node
        node = node.unwrap() if isinstance(node, Error) else None
