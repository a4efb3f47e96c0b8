"""attempt(): run a callable and turn a raised exception into an Err.

    res = attempt(json.loads, raw, template=et_parse, attrs=(Obj(name),))

An Error raised by the callable is returned unchanged. Any other Exception
becomes the cause of template.E(RECOVERED_PANIC, *attrs, exc); a Kind in
attrs overrides RECOVERED_PANIC. BaseExceptions that are not Exceptions
(KeyboardInterrupt, SystemExit, ...) propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from faultline.core.errors import Error, Template
from faultline.core.kinds import RECOVERED_PANIC
from faultline.core.result import Err, Ok

logger = logging.getLogger(__name__)

_ROOT = Template()


def attempt[T](
    fn: Callable[..., T],
    /,
    *args: object,
    template: Template = _ROOT,
    attrs: Iterable[object] = (),
) -> Ok[T] | Err[Error]:
    """Call fn(*args); return Ok(result) or Err(Error)."""
    try:
        return Ok(fn(*args))
    except Error as err:
        return Err(err)
    except Exception as exc:
        logger.debug(
            "attempt: %s raised %s", getattr(fn, "__qualname__", fn), type(exc).__name__,
        )
        return Err(template.E(RECOVERED_PANIC, *attrs, exc))
