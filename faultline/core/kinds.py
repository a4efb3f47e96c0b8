"""Predefined error kinds for common failure categories.

Advisory vocabulary only: nothing in the engine treats these specially,
except attempt(), which tags converted exceptions with RECOVERED_PANIC.
"""

from __future__ import annotations

from faultline.core.attributes import Kind

NOT_FOUND: Kind = Kind("not found")
NOT_ALLOWED: Kind = Kind("not allowed")
ILLEGAL_ARGUMENT: Kind = Kind("illegal argument")
ILLEGAL_VALUE: Kind = Kind("illegal value")
CREATE_FAILED: Kind = Kind("can't create")
READ_FAILED: Kind = Kind("cant read")
WRITE_FAILED: Kind = Kind("can't write")
DELETE_FAILED: Kind = Kind("can't delete")
ALREADY_EXISTS: Kind = Kind("already exists")
PARSE_FAILED: Kind = Kind("parsing failed")
FAILED: Kind = Kind("operation failed")
RECOVERED_PANIC: Kind = Kind("panic recovered")

ALL_KINDS: tuple[Kind, ...] = (
    NOT_FOUND,
    NOT_ALLOWED,
    ILLEGAL_ARGUMENT,
    ILLEGAL_VALUE,
    CREATE_FAILED,
    READ_FAILED,
    WRITE_FAILED,
    DELETE_FAILED,
    ALREADY_EXISTS,
    PARSE_FAILED,
    FAILED,
    RECOVERED_PANIC,
)
