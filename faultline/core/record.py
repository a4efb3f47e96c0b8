"""The shared record shape and the classifier that fills it.

Record is the single internal shape behind both Template and Error.
classify() routes a heterogeneous attribute list into a new Record:

  - None is skipped entirely.
  - Mod/Func/Op/Obj/Kind/Code overwrite their field (last one wins),
    an empty tag included.
  - An exception becomes the cause (last one wins).
  - Anything else is a detail: str verbatim, other values through
    config.detail_formatter. Details accumulate in order after the
    inherited details and are joined with config.detail_separator.
    Whole separators and whitespace are trimmed from both ends.

classify() never raises and never mutates its input record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Protocol, final, runtime_checkable

from faultline.core.attributes import Code, Func, Kind, Mod, Obj, Op
from faultline.core.config import DEFAULT_CONFIG, FormatConfig

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class Record:
    """All attribute fields of an error. Empty values mean unset."""

    module: Mod = Mod("")
    function: Func = Func("")
    kind: Kind = Kind("")
    operation: Op = Op("")
    obj: Obj = Obj("")
    code: Code = Code("")
    details: str = ""
    cause: BaseException | None = None


EMPTY_RECORD: Record = Record()


def _trim_separators(text: str, sep: str) -> str:
    while True:
        if text.startswith(sep):
            text = text[len(sep):]
        elif text.endswith(sep):
            text = text[: -len(sep)]
        elif text != text.strip():
            text = text.strip()
        else:
            return text


@runtime_checkable
class Recorded(Protocol):
    """Anything backed by a Record (Error, Template)."""

    @property
    def record(self) -> Record: ...


def classify(
    base: Record,
    attrs: Iterable[object],
    *,
    config: FormatConfig = DEFAULT_CONFIG,
) -> Record:
    """Return a copy of base with attrs applied (see module docstring)."""
    fields: dict[str, object] = {}
    fragments: list[str] = [base.details] if base.details else []
    cause_seen = False

    for attr in attrs:
        match attr:
            case None:
                continue
            case Mod():
                fields["module"] = attr
            case Func():
                fields["function"] = attr
            case Op():
                fields["operation"] = attr
            case Obj():
                fields["obj"] = attr
            case Kind():
                fields["kind"] = attr
            case Code():
                fields["code"] = attr
            case BaseException():
                if cause_seen:
                    logger.debug(
                        "multiple causes passed, discarding %r in favour of %r",
                        fields["cause"], attr,
                    )
                fields["cause"] = attr
                cause_seen = True
            case str():
                fragments.append(attr)
            case _:
                fragments.append(config.detail_formatter(attr))

    sep = config.detail_separator
    details = _trim_separators(sep.join(fragments), sep)
    return replace(base, details=details, **fields)  # type: ignore[arg-type]
