"""Render an error and its cause chain as a multi-line report.

Outermost context comes first, every wrapped cause follows on its own
block prefixed with " - ":

    example/startup
       configure: configure failed
     - can't read config
     - file does not exist

Native records are descended into. A foreign exception contributes its
str() as the final block and ends the traversal.
"""

from __future__ import annotations

from faultline.core.config import DEFAULT_CONFIG, FormatConfig
from faultline.core.record import Record, Recorded

_BLOCK_TRIM = " /\n:;"
_REPORT_TRIM = "\n- ;/"


def _block(rec: Record, show_kind: bool, config: FormatConfig) -> str:
    head = rec.module.value
    if rec.function:
        head += "/" + rec.function.value
    if rec.obj:
        head += " [" + rec.obj.value + "]"
    body = ""
    if rec.operation:
        body += rec.operation.value + ": "
    # show_kind comes from the outermost record, not from rec.
    if show_kind:
        body += rec.kind.value
        if not rec.code:
            body += ":"
        body += " "
    if rec.code:
        body += "(" + rec.code.value + "): "
    if rec.details:
        body += rec.details
    # Trimmed as if head, newline, indent and body were one string, without
    # letting the indent itself take part in the trimming.
    if not head.strip(_BLOCK_TRIM):
        return body.strip(_BLOCK_TRIM)
    if not body.strip(_BLOCK_TRIM):
        return head.strip(_BLOCK_TRIM)
    return head.lstrip(_BLOCK_TRIM) + "\n" + config.indent + body.rstrip(_BLOCK_TRIM)


def _native_record(node: object) -> Record | None:
    rec = getattr(node, "record", None)
    return rec if isinstance(rec, Record) else None


def render(err: Recorded, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Return the full report for err, including every wrapped cause.

    err is an Error or a Template. Causes are descended into only when they
    carry a Record; any other exception is rendered with str().
    """
    show_kind = bool(err.record.kind)
    blocks: list[str] = []
    rec: Record | None = err.record
    while rec is not None:
        blocks.append(_block(rec, show_kind, config))
        cause = rec.cause
        if cause is None:
            break
        rec = _native_record(cause)
        if rec is None:
            blocks.append(str(cause))
    # Empty blocks at either end collapse.
    while blocks and not blocks[0]:
        blocks.pop(0)
    while blocks and not blocks[-1]:
        blocks.pop()
    report = "\n".join(config.block_prefix + b for b in blocks)
    return report.removeprefix(config.block_prefix).strip(_REPORT_TRIM)
