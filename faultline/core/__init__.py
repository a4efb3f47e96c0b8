"""faultline.core — public API: attributes, E/T, Error, Template, render."""

from faultline.core.attributes import (
    Code as Code,
)
from faultline.core.attributes import (
    Func as Func,
)
from faultline.core.attributes import (
    Kind as Kind,
)
from faultline.core.attributes import (
    Mod as Mod,
)
from faultline.core.attributes import (
    Obj as Obj,
)
from faultline.core.attributes import (
    Op as Op,
)
from faultline.core.attributes import (
    Tag as Tag,
)
from faultline.core.attributes import (
    codef as codef,
)
from faultline.core.attributes import (
    funcf as funcf,
)
from faultline.core.attributes import (
    kindf as kindf,
)
from faultline.core.attributes import (
    modf as modf,
)
from faultline.core.attributes import (
    objf as objf,
)
from faultline.core.attributes import (
    opf as opf,
)
from faultline.core.config import (
    DEFAULT_CONFIG as DEFAULT_CONFIG,
)
from faultline.core.config import (
    FormatConfig as FormatConfig,
)
from faultline.core.errors import (
    E as E,
)
from faultline.core.errors import (
    Error as Error,
)
from faultline.core.errors import (
    T as T,
)
from faultline.core.errors import (
    Template as Template,
)
from faultline.core.errors import (
    chain as chain,
)
from faultline.core.guard import (
    attempt as attempt,
)
from faultline.core.kinds import (
    ALL_KINDS as ALL_KINDS,
)
from faultline.core.kinds import (
    ALREADY_EXISTS as ALREADY_EXISTS,
)
from faultline.core.kinds import (
    CREATE_FAILED as CREATE_FAILED,
)
from faultline.core.kinds import (
    DELETE_FAILED as DELETE_FAILED,
)
from faultline.core.kinds import (
    FAILED as FAILED,
)
from faultline.core.kinds import (
    ILLEGAL_ARGUMENT as ILLEGAL_ARGUMENT,
)
from faultline.core.kinds import (
    ILLEGAL_VALUE as ILLEGAL_VALUE,
)
from faultline.core.kinds import (
    NOT_ALLOWED as NOT_ALLOWED,
)
from faultline.core.kinds import (
    NOT_FOUND as NOT_FOUND,
)
from faultline.core.kinds import (
    PARSE_FAILED as PARSE_FAILED,
)
from faultline.core.kinds import (
    READ_FAILED as READ_FAILED,
)
from faultline.core.kinds import (
    RECOVERED_PANIC as RECOVERED_PANIC,
)
from faultline.core.kinds import (
    WRITE_FAILED as WRITE_FAILED,
)
from faultline.core.record import (
    Record as Record,
)
from faultline.core.record import (
    classify as classify,
)
from faultline.core.render import (
    render as render,
)
from faultline.core.result import (
    Err as Err,
)
from faultline.core.result import (
    Ok as Ok,
)
from faultline.core.result import (
    Result as Result,
)
from faultline.core.result import (
    map_result as map_result,
)
from faultline.core.result import (
    unwrap as unwrap,
)
